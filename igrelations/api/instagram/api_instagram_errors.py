# api_instagram_errors.py - error classes

##
# Exceptions
##
class InstagramError(Exception):
    """Base class for igrelations exceptions."""


class InstagramIllegalArgumentError(ValueError, InstagramError):
    """Raised when a request can not be built from the given arguments."""


class InstagramIOError(IOError, InstagramError):
    """Base class for igrelations I/O errors."""


class InstagramNetworkError(InstagramIOError):
    """Raised when network communication with the server fails."""


class InstagramMalformedResponseError(InstagramError):
    """Raised when the response body can not be decoded into the expected type."""


class InstagramAPIError(InstagramError):
    """Raised when the Instagram API answers with an error envelope."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        error_type: str | None = None,
        error_message: str | None = None,
    ) -> None:
        """Initialize the error."""
        super().__init__(message)
        self.status_code = status_code
        self.error_type = error_type
        self.error_message = error_message


class InstagramBadRequestError(InstagramAPIError):
    """Raised when the API returns a 400 error."""


class InstagramNotAllowedError(InstagramBadRequestError):
    """Raised when the API refuses the call with APINotAllowedError.

    This is what the relationship endpoints answer when, for example,
    approving a user that never requested to follow.
    """


class InstagramUnauthorizedError(InstagramAPIError):
    """Raised when the API returns a 401 error or an OAuth exception.

    This happens when an access token is invalid or has been revoked,
    or when the token lacks the `relationships` scope.
    """


class InstagramNotFoundError(InstagramAPIError):
    """Raised when the API returns a 404 Not Found error."""


class InstagramRatelimitError(InstagramAPIError):
    """Raised when the API returns a 429 error."""


class InstagramServerError(InstagramAPIError):
    """Raised if the server returns a 5xx error code."""
