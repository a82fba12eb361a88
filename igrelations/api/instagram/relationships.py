"""Instagram API relationships endpoints."""
import logging
from collections.abc import AsyncIterator, Coroutine
from typing import Any

from igrelations.api.client import API_BASE_URL, HttpMethod
from igrelations.api.instagram.api_instagram_errors import (
    InstagramIllegalArgumentError,
)
from igrelations.api.instagram.api_instagram_types import (
    Relationship,
    ResponsePagination,
    User,
)


class Relationships:
    """Class containing Instagram API relationships endpoints.

    Reference: http://instagram.com/developer/endpoints/relationships/
    """

    client: HttpMethod

    def _continuation(
        self,
        endpoint: str,
        pagination: ResponsePagination | None,
    ) -> str:
        """Return the endpoint to fetch, continuing from ``pagination`` if given."""
        if pagination is None:
            return endpoint
        if not pagination.has_next:
            msg = f"No further page of {endpoint} to fetch"
            raise InstagramIllegalArgumentError(msg)
        # The transport puts the host and version back. Cursors keep the
        # Instagram host even when requests go through another base URL.
        endpoint = pagination.next_url
        for prefix in (self.client.api_base_url, API_BASE_URL):
            endpoint = endpoint.replace(prefix, "")
        return endpoint

    async def _list_users(
        self,
        endpoint: str,
    ) -> tuple[list[User], ResponsePagination]:
        request = self.client.new_request("GET", endpoint)
        response = await self.client.do(request, User.list_from_json)
        return response.data, response.pagination

    async def follows(
        self,
        pagination: ResponsePagination | None = None,
    ) -> tuple[list[User], ResponsePagination]:
        """Users the authenticated user follows.

        Pass the pagination returned by a previous call to fetch the next page.

        Reference: http://instagram.com/developer/endpoints/relationships/#get_users_follows
        """
        return await self._list_users(
            self._continuation("users/self/follows", pagination),
        )

    async def followed_by(
        self,
        pagination: ResponsePagination | None = None,
    ) -> tuple[list[User], ResponsePagination]:
        """Users following the authenticated user.

        Reference: http://instagram.com/developer/endpoints/relationships/#get_users_followed_by
        """
        return await self._list_users(
            self._continuation("users/self/followed-by", pagination),
        )

    async def requested_by(self) -> tuple[list[User], ResponsePagination]:
        """Users who have requested permission to follow the authenticated user.

        The endpoint is not cursored, so there is no pagination argument.

        Reference: http://instagram.com/developer/endpoints/relationships/#get_incoming_requests
        """
        return await self._list_users("users/self/requested-by")

    async def _all_pages(
        self,
        endpoint: str,
    ) -> AsyncIterator[User]:
        pagination = None
        while True:
            users, pagination = await self._list_users(
                self._continuation(endpoint, pagination),
            )
            for user in users:
                yield user
            if not pagination.has_next:
                return

    def all_follows(self) -> AsyncIterator[User]:
        """Iterate over every page of ``follows``.

        Reference: http://instagram.com/developer/endpoints/#pagination
        """
        return self._all_pages("users/self/follows")

    def all_followed_by(self) -> AsyncIterator[User]:
        """Iterate over every page of ``followed_by``."""
        return self._all_pages("users/self/followed-by")

    async def _relationship_action(
        self,
        user_id: str,
        action: str | None,
        method: str,
    ) -> Relationship:
        if not user_id:
            msg = "A user id is required"
            raise InstagramIllegalArgumentError(msg)
        data = {"action": action} if action else None
        request = self.client.new_request(
            method,
            f"users/{user_id}/relationship",
            data,
        )
        response = await self.client.do(request, Relationship.from_json)
        if action:
            logging.info(
                f"{action} {user_id}: outgoing {response.data.outgoing_status}, "
                f"incoming {response.data.incoming_status}",
            )
        return response.data

    def relationship(self, user_id: str) -> Coroutine[Any, Any, Relationship]:
        """Information about a relationship to another user.

        Reference: http://instagram.com/developer/endpoints/relationships/#get_relationship
        """
        return self._relationship_action(user_id, None, "GET")

    def follow(self, user_id: str) -> Coroutine[Any, Any, Relationship]:
        """Follow a user.

        Reference: http://instagram.com/developer/endpoints/relationships/#post_relationship
        """
        return self._relationship_action(user_id, "follow", "POST")

    def unfollow(self, user_id: str) -> Coroutine[Any, Any, Relationship]:
        """Unfollow a user."""
        return self._relationship_action(user_id, "unfollow", "POST")

    def block(self, user_id: str) -> Coroutine[Any, Any, Relationship]:
        """Block a user."""
        return self._relationship_action(user_id, "block", "POST")

    def unblock(self, user_id: str) -> Coroutine[Any, Any, Relationship]:
        """Unblock a user."""
        return self._relationship_action(user_id, "unblock", "POST")

    def approve(self, user_id: str) -> Coroutine[Any, Any, Relationship]:
        """Approve a pending follow request from a user."""
        return self._relationship_action(user_id, "approve", "POST")

    def deny(self, user_id: str) -> Coroutine[Any, Any, Relationship]:
        """Deny a pending follow request from a user."""
        return self._relationship_action(user_id, "deny", "POST")
