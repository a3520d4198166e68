"""Handlers — Protocol-based, no inheritance required.

A handler is any callable matching:
    async def handler(request: Request) -> AnyResponse

Built-in handlers:
    RedirectHandler -- path table lookup with fallback delegation
"""

from urlshort.handlers.protocol import AnyResponse, Handler
from urlshort.handlers.redirect import RedirectHandler, compose, map_handler, yaml_handler

__all__ = [
    "AnyResponse",
    "Handler",
    "RedirectHandler",
    "compose",
    "map_handler",
    "yaml_handler",
]
