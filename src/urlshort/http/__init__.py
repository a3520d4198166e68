"""HTTP value types — Request, Response, Redirect, Headers."""

from urlshort.http.headers import Headers
from urlshort.http.request import Request
from urlshort.http.response import Redirect, Response

__all__ = ["Headers", "Redirect", "Request", "Response"]
