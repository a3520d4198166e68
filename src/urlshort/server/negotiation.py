"""Content negotiation — turns a handler's return value into a Response.

Dispatch order:

    1. ``Response``  -> pass through
    2. ``Redirect``  -> empty body with Location header
    3. ``str``       -> 200, text/html
    4. ``bytes``     -> 200, application/octet-stream
"""

from urlshort.http.response import Redirect, Response


def negotiate(value: object) -> Response:
    """Convert a handler return value to a Response."""
    match value:
        case Response():
            return value
        case Redirect():
            return value.to_response()
        case str():
            return Response(body=value)
        case bytes():
            return Response(body=value, content_type="application/octet-stream")
        case _:
            msg = (
                f"Cannot convert {type(value).__name__} to a response. "
                f"Return str, bytes, Response, or Redirect."
            )
            raise TypeError(msg)
