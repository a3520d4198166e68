"""Redirect handlers — a path table bound to a fallback.

A ``RedirectHandler`` answers requests whose path is in its table and
hands everything else to its fallback, unchanged. Because it is itself a
handler, it can be the fallback of another one; chains resolve
outermost-first::

    defaults = map_handler({"/docs": "https://example.com/docs"}, hello)
    handler = yaml_handler(yaml_bytes, defaults)

``compose()`` builds exactly that two-level chain.
"""

from collections.abc import Mapping
from dataclasses import dataclass

from urlshort._internal.invoke import invoke
from urlshort.config import RedirectConfig, RedirectMode
from urlshort.handlers.protocol import AnyResponse, Handler
from urlshort.http.request import Request
from urlshort.http.response import Redirect, Response
from urlshort.table import PathTable, build_table, entries_from_mapping, load_table


@dataclass(frozen=True, slots=True)
class RedirectHandler:
    """Dispatch on exact request path; delegate misses to ``fallback``.

    Holds no per-request state. The table is read-only, so one instance
    serves concurrent requests without locking.
    """

    table: PathTable
    fallback: Handler
    config: RedirectConfig = RedirectConfig()

    async def __call__(self, request: Request) -> AnyResponse:
        url = self.table.get(request.path)
        if url is None:
            return await invoke(self.fallback, request)

        if self.config.mode is RedirectMode.BODY:
            return Response(body=url, content_type=self.config.body_content_type)
        return Redirect(url=url, status=self.config.redirect_status)


def map_handler(
    paths_to_urls: Mapping[str, str],
    fallback: Handler,
    config: RedirectConfig | None = None,
) -> RedirectHandler:
    """Build a handler over an in-memory ``{path: url}`` table.

    The mapping is copied; later changes to it are not seen by the handler.
    """
    table = build_table(entries_from_mapping(paths_to_urls))
    return RedirectHandler(table, fallback, config or RedirectConfig())


def yaml_handler(
    data: bytes | str,
    fallback: Handler,
    config: RedirectConfig | None = None,
    *,
    source: str | None = None,
) -> RedirectHandler:
    """Build a handler from a YAML document of ``- path: ... url: ...`` items.

    Raises:
        ParseError: If the document is malformed. No handler is built.
    """
    return RedirectHandler(load_table(data, source=source), fallback, config or RedirectConfig())


def compose(
    yaml_data: bytes | str,
    fallback: Handler,
    *,
    defaults: Mapping[str, str] | None = None,
    config: RedirectConfig | None = None,
    source: str | None = None,
) -> RedirectHandler:
    """Build the standard chain: YAML paths, then ``defaults``, then ``fallback``.

    Raises:
        ParseError: If ``yaml_data`` is malformed.
    """
    inner = map_handler(defaults or {}, fallback, config)
    return yaml_handler(yaml_data, inner, config, source=source)
