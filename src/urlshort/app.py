"""ASGI entry point — installs a handler chain on any ASGI server.

The only component that touches raw ASGI directly. Converts the scope to
a typed Request, awaits the handler, and sends the negotiated Response::

    handler = compose(yaml_bytes, hello, defaults={"/docs": "https://..."})
    app = RedirectApp(handler)
    # hand ``app`` to the server of your choice
"""

import logging

from urlshort._internal.asgi import Receive, Scope, Send
from urlshort._internal.invoke import invoke
from urlshort.handlers.protocol import Handler
from urlshort.http.request import Request
from urlshort.http.response import Response
from urlshort.server.negotiation import negotiate
from urlshort.server.sender import response_messages, send_messages

logger = logging.getLogger("urlshort.server")


class RedirectApp:
    """ASGI 3 application wrapping a single handler."""

    __slots__ = ("handler",)

    def __init__(self, handler: Handler) -> None:
        self.handler = handler

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] == "lifespan":
            await self._handle_lifespan(receive, send)
            return
        if scope["type"] != "http":
            return

        request = Request.from_asgi(scope, receive)
        try:
            response = negotiate(await invoke(self.handler, request))
            messages = response_messages(response)
        except Exception:
            logger.exception("500 %s %s", request.method, request.path)
            messages = response_messages(Response(body="Internal Server Error", status=500))

        await send_messages(messages, send)

    async def _handle_lifespan(self, receive: Receive, send: Send) -> None:
        """Acknowledge lifespan events. There is nothing to start or stop."""
        while True:
            message = await receive()
            msg_type = message["type"]
            if msg_type == "lifespan.startup":
                await send({"type": "lifespan.startup.complete"})
            elif msg_type == "lifespan.shutdown":
                await send({"type": "lifespan.shutdown.complete"})
                return
