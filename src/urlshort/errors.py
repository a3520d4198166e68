"""urlshort exception hierarchy.

Shared across the table builder, config, and handlers so every module
raises and catches the same types.
"""


class UrlshortError(Exception):
    """Base for all urlshort-specific errors."""


class ConfigurationError(UrlshortError):
    """Raised when a ``RedirectConfig`` is invalid.

    Raised from ``RedirectConfig.__post_init__`` at construction time.
    """


class ParseError(UrlshortError):
    """Raised when a YAML path document cannot be turned into entries.

    Covers both YAML syntax errors and documents of the wrong shape
    (a top-level mapping instead of a sequence, non-mapping elements).
    The underlying exception, when there is one, is chained as
    ``__cause__``.
    """

    def __init__(self, detail: str, *, source: str | None = None) -> None:
        self.detail = detail
        self.source = source
        super().__init__(detail)

    def __str__(self) -> str:
        if self.source:
            return f"{self.source}: {self.detail}"
        return self.detail
