"""Invoke helpers — call sync or async handlers uniformly.

Handlers and fallbacks can be ``def`` or ``async def``. Any code that
calls a caller-provided handler goes through this helper so the
sync/async check lives in exactly one place.

Usage::

    from urlshort._internal.invoke import invoke

    result = await invoke(fallback, request)
"""

import inspect
from typing import Any


async def invoke(handler: Any, *args: Any, **kwargs: Any) -> Any:
    """Call a handler and await the result if it's awaitable."""
    result = handler(*args, **kwargs)
    if inspect.isawaitable(result):
        result = await result
    return result
