"""Handler protocol.

A handler is any callable matching::

    async def handler(request: Request) -> AnyResponse: ...

Plain ``def`` handlers are accepted too. No base class required; the
chain checks the shape, not the lineage, so a ``RedirectHandler`` and
an application's terminal handler are interchangeable as fallbacks.
"""

from collections.abc import Awaitable
from typing import Protocol, TypeAlias

from urlshort.http.request import Request
from urlshort.http.response import Redirect, Response

# Anything a handler may produce. Bare str/bytes are accepted by the ASGI
# layer for convenience in terminal handlers.
AnyResponse: TypeAlias = Response | Redirect | str | bytes


class Handler(Protocol):
    """Protocol for request handlers.

    Accepts both functions and callable objects::

        # Function handler
        async def hello(request: Request) -> AnyResponse:
            return Response("Hello, world!\\n", content_type="text/plain")

        # Class handler
        class Teapot:
            def __call__(self, request: Request) -> AnyResponse:
                return Response("short and stout", status=418)
    """

    def __call__(self, request: Request) -> AnyResponse | Awaitable[AnyResponse]: ...
