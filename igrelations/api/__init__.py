"""__init__.py for api."""

from .api import API
from .client import API_BASE_URL, HttpMethod, Request, Response

__all__ = [
    "API",
    "API_BASE_URL",
    "HttpMethod",
    "Request",
    "Response",
]
