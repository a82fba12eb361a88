"""Generic client for Instagram API requests."""
import asyncio
import logging
from collections.abc import Callable
from typing import Any, ClassVar, NoReturn

import aiohttp

from igrelations.api.instagram.api_instagram_errors import (
    InstagramAPIError,
    InstagramBadRequestError,
    InstagramIllegalArgumentError,
    InstagramMalformedResponseError,
    InstagramNetworkError,
    InstagramNotAllowedError,
    InstagramNotFoundError,
    InstagramRatelimitError,
    InstagramServerError,
    InstagramUnauthorizedError,
)
from igrelations.api.instagram.api_instagram_types import (
    ResponseMeta,
    ResponsePagination,
)
from igrelations.helpers import helpers

API_BASE_URL = "https://api.instagram.com/v1/"


class Request:
    """A request built by ``HttpMethod.new_request``, ready to be sent."""

    def __init__(
        self,
        method: str,
        url: str,
        params: dict[str, str],
        data: dict[str, str] | None = None,
    ) -> None:
        """Initialize the request."""
        self.method = method
        self.url = url
        self.params = params
        self.data = data

    def __repr__(self) -> str:
        """Represent the request without its credentials."""
        return f"<Request {self.method} {self.url} data={self.data}>"


class Response:
    """A decoded response envelope."""

    def __init__(
        self,
        status: int,
        meta: ResponseMeta,
        data: Any,  # noqa: ANN401
        pagination: ResponsePagination,
    ) -> None:
        """Initialize the response."""
        self.status = status
        self.meta = meta
        self.data = data
        self.pagination = pagination


class HttpMethod:
    """A class representing a request client."""

    methods: ClassVar[frozenset[str]] = frozenset({"GET", "POST"})

    def __init__(
        self,
        session: aiohttp.ClientSession,
        token: str | None = None,
        client_id: str | None = None,
        api_base_url: str = API_BASE_URL,
    ) -> None:
        """Initialize the client."""
        if not api_base_url.endswith("/"):
            api_base_url = f"{api_base_url}/"
        self.api_base_url = api_base_url
        self.token = token
        self.client_id = client_id
        self.session = session
        self.response: Response | None = None

    def new_request(
        self,
        method: str,
        endpoint: str,
        data: dict[str, str] | None = None,
    ) -> Request:
        """Build a request for an endpoint relative to the API base URL."""
        method = method.upper()
        if method not in self.methods:
            msg = f"Unsupported HTTP method: {method}"
            raise InstagramIllegalArgumentError(msg)
        if "://" in endpoint or endpoint.startswith("/"):
            msg = f"Endpoint must be relative to {self.api_base_url}: {endpoint}"
            raise InstagramIllegalArgumentError(msg)
        if self.token:
            params = {"access_token": self.token}
        elif self.client_id:
            params = {"client_id": self.client_id}
        else:
            msg = "An access token or a client id is required"
            raise InstagramIllegalArgumentError(msg)
        return Request(method, f"{self.api_base_url}{endpoint}", params, data)

    async def do(
        self,
        request: Request,
        decoder: Callable[[Any], Any],
    ) -> Response:
        """Send a request and decode the ``data`` member of the reply.

        The decoded value is stored on ``Response.data``. The response is
        also kept on ``self.response`` until the next call.
        """
        if self.session.closed:
            msg = f"Session with API on server {self.api_base_url} is closed."
            logging.warning(msg)
            raise InstagramNetworkError(msg)
        logging.debug(f"{request.method} {request.url} with {request.data}")
        try:
            async with self.session.request(
                request.method,
                request.url,
                params=request.params,
                data=request.data,
            ) as response:
                logging.debug(
                    f"{request.method} {request.url} status {response.status}",
                )
                status = response.status
                try:
                    body = await response.json(content_type=None)
                except ValueError as err:
                    if status != helpers.Response.OK:
                        self.handle_response_errors(
                            status,
                            ResponseMeta(
                                code=status,
                                error_type=None,
                                error_message=None,
                            ),
                        )
                    msg = (
                        f"Error with API on server {self.api_base_url}. "
                        f"The server returned a body that is not JSON."
                    )
                    raise InstagramMalformedResponseError(msg) from err
        except asyncio.TimeoutError as err:
            msg = f"Timeout error with API on server {self.api_base_url}."
            logging.warning(msg)
            raise InstagramNetworkError(msg) from err
        except aiohttp.ClientError as err:
            msg = f"Connection error with API on server {self.api_base_url}."
            logging.warning(msg)
            raise InstagramNetworkError(msg) from err
        self.response = self.handle_response(status, body, decoder)
        return self.response

    def handle_response_meta(
        self,
        status: int,
        body: dict[str, Any],
    ) -> ResponseMeta:
        """Extract the meta block, which OAuth errors put at the top level."""
        meta = body.get("meta")
        if meta is None and "code" in body:
            meta = body
        if meta is None:
            return ResponseMeta(code=status, error_type=None, error_message=None)
        return ResponseMeta.from_json(meta)

    def handle_response_errors(
        self,
        status: int,
        meta: ResponseMeta,
    ) -> NoReturn:
        """Raise the error matching a failed response."""
        code = meta.code if meta.code != helpers.Response.OK else status
        detail = f"{meta.error_type}: {meta.error_message}"
        error_type = meta.error_type or ""
        error: type[InstagramAPIError]
        if (
            code == helpers.Response.TOO_MANY_REQUESTS
            or error_type == "OAuthRateLimitException"
        ):
            error = InstagramRatelimitError
            message = f"{code} Too many requests: {detail}"
        elif error_type.startswith("OAuth") or code == helpers.Response.UNAUTHORIZED:
            error = InstagramUnauthorizedError
            message = f"{code} Authentication error: {detail}"
        elif error_type == "APINotAllowedError":
            error = InstagramNotAllowedError
            message = f"{code} Not allowed: {detail}"
        elif code == helpers.Response.BAD_REQUEST:
            error = InstagramBadRequestError
            message = f"400 Client error: {detail}"
        elif code == helpers.Response.NOT_FOUND:
            error = InstagramNotFoundError
            message = f"404 Not found: {detail}"
        elif code >= helpers.Response.INTERNAL_SERVER_ERROR:
            error = InstagramServerError
            message = f"{code} Server error: {detail}"
        else:
            error = InstagramAPIError
            message = f"The server encountered an error: {code} {detail}"
        message = f"Error with API on server {self.api_base_url}. {message}"
        if error is InstagramServerError:
            logging.warning(message)
        else:
            logging.error(message)
        raise error(
            message,
            status_code=code,
            error_type=meta.error_type,
            error_message=meta.error_message,
        )

    def handle_response(
        self,
        status: int,
        body: Any,  # noqa: ANN401
        decoder: Callable[[Any], Any],
    ) -> Response:
        """Decode a response envelope, raising on errors."""
        if not isinstance(body, dict):
            msg = (
                f"Error with API on server {self.api_base_url}. "
                f"The server returned an unexpected response: {body}"
            )
            raise InstagramMalformedResponseError(msg)
        try:
            meta = self.handle_response_meta(status, body)
        except TypeError as err:
            msg = (
                f"Error with API on server {self.api_base_url}. "
                f"The server returned an unexpected meta block: {body}"
            )
            raise InstagramMalformedResponseError(msg) from err
        if status != helpers.Response.OK or meta.code != helpers.Response.OK:
            self.handle_response_errors(status, meta)
        try:
            data = decoder(body.get("data"))
            pagination = ResponsePagination.from_json(body.get("pagination"))
        except (TypeError, ValueError) as err:
            msg = (
                f"Error with API on server {self.api_base_url}. "
                f"Could not decode the response: {err}"
            )
            raise InstagramMalformedResponseError(msg) from err
        return Response(status, meta, data, pagination)
