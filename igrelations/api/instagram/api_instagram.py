"""Instagram API functions."""
import logging
from typing import ClassVar

import aiohttp

from igrelations.api.api import API
from igrelations.api.client import API_BASE_URL, HttpMethod
from igrelations.api.instagram.relationships import Relationships


class Instagram(API, Relationships):
    """A class representing an authenticated Instagram API client."""

    clients: ClassVar[dict[tuple[str, str | None, str | None], HttpMethod]] = {}

    def __init__(
        self,
        token: str | None = None,
        client_id: str | None = None,
        api_base_url: str = API_BASE_URL,
        timeout: int = 60,
    ) -> None:
        """Initialize the Instagram instance.

        Clients built with the same base URL and credentials share one
        HTTP session.
        """
        key = (api_base_url, token, client_id)
        if key not in Instagram.clients or Instagram.clients[key].session.closed:
            msg = f"Creating Instagram client for {api_base_url}"
            logging.info(f"\033[1;33m{msg}\033[0m")
            if token:
                msg = "Using provided token"
                logging.info(f"\033[1;33m{msg}\033[0m")
            client_session = aiohttp.ClientSession(
                timeout=aiohttp.ClientTimeout(total=timeout),
                headers={
                    "User-Agent": "igrelations/1.0.0",
                },
            )
            Instagram.clients[key] = HttpMethod(
                session=client_session,
                token=token,
                client_id=client_id,
                api_base_url=api_base_url,
            )
        self.client = Instagram.clients[key]
