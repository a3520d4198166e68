"""urlshort — YAML-configured URL redirects as a chain of request handlers.

Known paths redirect; unknown paths fall through to the next handler.

Basic usage::

    from urlshort import RedirectApp, Response, compose

    async def hello(request):
        return Response("Hello, world!\\n", content_type="text/plain")

    handler = compose(
        yaml_bytes,
        hello,
        defaults={"/docs": "https://example.com/docs"},
    )
    app = RedirectApp(handler)  # any ASGI server
"""

__version__ = "0.1.0"
__all__ = [
    "AnyResponse",
    "ConfigurationError",
    "Handler",
    "ParseError",
    "PathEntry",
    "Redirect",
    "RedirectApp",
    "RedirectConfig",
    "RedirectHandler",
    "RedirectMode",
    "Request",
    "Response",
    "UrlshortError",
    "build_table",
    "compose",
    "load_table",
    "map_handler",
    "parse_yaml",
    "yaml_handler",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import urlshort`` free of the YAML import until it is needed.
    """
    if name == "RedirectApp":
        from urlshort.app import RedirectApp

        return RedirectApp

    if name in ("RedirectConfig", "RedirectMode"):
        from urlshort import config as _config

        return getattr(_config, name)

    if name in ("Request", "Response", "Redirect"):
        from urlshort import http as _http

        return getattr(_http, name)

    if name in (
        "AnyResponse",
        "Handler",
        "RedirectHandler",
        "compose",
        "map_handler",
        "yaml_handler",
    ):
        from urlshort import handlers as _handlers

        return getattr(_handlers, name)

    if name in ("PathEntry", "build_table", "load_table", "parse_yaml"):
        from urlshort import table as _table

        return getattr(_table, name)

    if name in ("ConfigurationError", "ParseError", "UrlshortError"):
        from urlshort import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
