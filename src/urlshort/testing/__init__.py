"""Test utilities for urlshort handler chains::

    from urlshort.testing import TestClient
"""

from urlshort.testing.client import TestClient, run_lifespan

__all__ = ["TestClient", "run_lifespan"]
