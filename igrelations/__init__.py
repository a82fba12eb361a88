"""igrelations - an async client for the Instagram relationships API.

Submodules:
-----------
- api: HTTP transport and the Instagram client.
- helpers: Logging setup and command line parsing.
- main: Runs a single relationships command from the command line.
"""
from .api.instagram.api_instagram import Instagram
from .api.instagram.api_instagram_errors import (
    InstagramAPIError,
    InstagramError,
    InstagramIllegalArgumentError,
    InstagramMalformedResponseError,
    InstagramNetworkError,
)
from .api.instagram.api_instagram_types import (
    IncomingStatus,
    OutgoingStatus,
    Relationship,
    ResponsePagination,
    User,
)

__all__ = [
    "Instagram",
    "IncomingStatus",
    "InstagramAPIError",
    "InstagramError",
    "InstagramIllegalArgumentError",
    "InstagramMalformedResponseError",
    "InstagramNetworkError",
    "OutgoingStatus",
    "Relationship",
    "ResponsePagination",
    "User",
]
