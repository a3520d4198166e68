"""Redirect configuration.

RedirectConfig is a frozen dataclass — immutable after creation, validated
once at construction, shared freely between handlers.
"""

from dataclasses import dataclass
from enum import StrEnum

from urlshort.errors import ConfigurationError


class RedirectMode(StrEnum):
    """How a matched path is answered."""

    # 302 with a Location header
    REDIRECT = "redirect"
    # 200 with the destination URL as a plain-text body
    BODY = "body"


@dataclass(frozen=True, slots=True)
class RedirectConfig:
    """Redirect behaviour for a handler. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = RedirectConfig(redirect_status=301)
        config = RedirectConfig(mode="body")
    """

    mode: RedirectMode = RedirectMode.REDIRECT
    redirect_status: int = 302
    body_content_type: str = "text/plain; charset=utf-8"

    def __post_init__(self) -> None:
        try:
            mode = RedirectMode(self.mode)
        except ValueError:
            allowed = ", ".join(m.value for m in RedirectMode)
            msg = f"Unknown redirect mode {self.mode!r}. Expected one of: {allowed}"
            raise ConfigurationError(msg) from None
        # frozen: coerce plain strings through object.__setattr__
        object.__setattr__(self, "mode", mode)

        if isinstance(self.redirect_status, bool) or not isinstance(self.redirect_status, int):
            msg = f"redirect_status must be an int, got {type(self.redirect_status).__name__}"
            raise ConfigurationError(msg)
        if not 300 <= self.redirect_status <= 399:
            msg = f"redirect_status must be a 3xx code, got {self.redirect_status}"
            raise ConfigurationError(msg)
