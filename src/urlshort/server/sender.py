"""ASGI response sending — translates a Response into ASGI messages."""

from typing import Any

from urlshort._internal.asgi import Send
from urlshort.http.response import Response


def _body_allowed(status: int) -> bool:
    """Whether an HTTP status code permits a response body."""
    # RFC: 1xx, 204, and 304 responses do not include a message body.
    return not (100 <= status < 200 or status in {204, 304})


def response_messages(response: Response) -> tuple[dict[str, Any], dict[str, Any]]:
    """Encode ``response`` as its ASGI start and body messages.

    Encoding happens up front so a header that cannot be encoded fails
    before anything reaches the server.

    Raises:
        UnicodeEncodeError: If a header value is not Latin-1.
    """
    body = response.body_bytes if _body_allowed(response.status) else b""

    raw_headers: list[tuple[bytes, bytes]] = [
        (b"content-type", response.content_type.encode("latin-1")),
    ]
    raw_headers.extend(
        (name.lower().encode("latin-1"), value.encode("latin-1"))
        for name, value in response.headers
    )
    raw_headers.append((b"content-length", str(len(body)).encode("latin-1")))

    start = {
        "type": "http.response.start",
        "status": response.status,
        "headers": raw_headers,
    }
    return start, {"type": "http.response.body", "body": body}


async def send_response(response: Response, send: Send) -> None:
    """Send ``response`` as one start message and one body message."""
    await send_messages(response_messages(response), send)


async def send_messages(messages: tuple[dict[str, Any], ...], send: Send) -> None:
    """Send already-encoded messages in order."""
    for message in messages:
        await send(message)
