"""Instagram types."""
from __future__ import annotations

from typing import Any

from .api_instagram_types_base import AttribAccessDict, require_dict


class OutgoingStatus:
    """Values of ``Relationship.outgoing_status``."""

    FOLLOWS = "follows"
    REQUESTED = "requested"
    NONE = "none"


class IncomingStatus:
    """Values of ``Relationship.incoming_status``."""

    FOLLOWED_BY = "followed_by"
    REQUESTED_BY = "requested_by"
    BLOCKED_BY_YOU = "blocked_by_you"
    NONE = "none"


class Relationship(AttribAccessDict):
    """Relationship between the authenticated user and another user.

    See also (Instagram API documentation): http://instagram.com/developer/endpoints/relationships/
    """

    outgoing_status: str | None
    """
    The authenticated user's relationship to the other user.
    Should contain (as text): OutgoingStatus
    """

    incoming_status: str | None
    """
    The other user's relationship to the authenticated user.
    Should contain (as text): IncomingStatus
    """

    target_user_is_private: bool
    """
    Whether the other user's account is private. Undocumented, but stable.
    """

    @classmethod
    def from_json(cls, data: Any) -> Relationship:  # noqa: ANN401
        """Decode the ``data`` member of a relationship response."""
        fields = require_dict(data, "Relationship")
        for key in ("outgoing_status", "incoming_status"):
            value = fields.get(key)
            if value is not None and not isinstance(value, str):
                msg = f"Relationship.{key} must be a string, got {value!r}"
                raise TypeError(msg)
        private = fields.get("target_user_is_private", False)
        if not isinstance(private, bool):
            msg = f"Relationship.target_user_is_private must be a bool, got {private!r}"
            raise TypeError(msg)
        return cls(
            fields,
            outgoing_status=fields.get("outgoing_status"),
            incoming_status=fields.get("incoming_status"),
            target_user_is_private=private,
        )


class UserCounts(AttribAccessDict):
    """Media and follow counters of a user."""

    media: int
    follows: int
    followed_by: int


class User(AttribAccessDict):
    """An Instagram account.

    See also (Instagram API documentation): http://instagram.com/developer/endpoints/users/
    """

    id: str
    """
    ID of the user.
    """

    username: str
    """
    The user's username, without the leading @.
    """

    full_name: str | None
    """
    The user's display name.
    """

    profile_picture: str | None
    """
    URL of the user's avatar.
    """

    bio: str | None
    website: str | None

    counts: UserCounts | None
    """
    Counters, only present on full user objects.
    """

    @classmethod
    def from_json(cls, data: Any) -> User:  # noqa: ANN401
        """Decode a single user object."""
        fields = require_dict(data, "User")
        if "id" not in fields:
            msg = f"User object without an id: {fields!r}"
            raise ValueError(msg)
        user = cls(fields, id=str(fields["id"]))
        if fields.get("counts") is not None:
            user["counts"] = UserCounts(require_dict(fields["counts"], "UserCounts"))
        return user

    @classmethod
    def list_from_json(cls, data: Any) -> list[User]:  # noqa: ANN401
        """Decode the ``data`` member of a user list response."""
        if not isinstance(data, list):
            msg = f"Expected a JSON array of users, got {type(data).__name__}"
            raise TypeError(msg)
        return [cls.from_json(item) for item in data]


class ResponsePagination(AttribAccessDict):
    """Pagination block of a list response.

    An empty pagination (no ``next_url``) means there are no further pages.
    """

    next_url: str | None
    """
    Full URL of the next page, including the API host and version.
    """

    next_cursor: str | None
    next_max_id: str | None
    next_min_id: str | None

    def __init__(self, *args: Any, **kwargs: Any) -> None:  # noqa: ANN401
        """Initialize the pagination, defaulting every locator to None."""
        super().__init__(
            next_url=None,
            next_cursor=None,
            next_max_id=None,
            next_min_id=None,
        )
        self.update(*args, **kwargs)

    @property
    def has_next(self) -> bool:
        """Whether a further page can be fetched with this cursor."""
        return bool(self["next_url"])

    @classmethod
    def from_json(cls, data: Any) -> ResponsePagination:  # noqa: ANN401
        """Decode the ``pagination`` member of a response, which may be absent."""
        if data is None:
            return cls()
        fields = require_dict(data, "ResponsePagination")
        for key in ("next_url", "next_cursor", "next_max_id", "next_min_id"):
            value = fields.get(key)
            if value is not None and not isinstance(value, str):
                msg = f"ResponsePagination.{key} must be a string, got {value!r}"
                raise TypeError(msg)
        return cls(fields)


class ResponseMeta(AttribAccessDict):
    """The ``meta`` member of every response envelope."""

    code: int
    error_type: str | None
    error_message: str | None

    @classmethod
    def from_json(cls, data: Any) -> ResponseMeta:  # noqa: ANN401
        """Decode the ``meta`` member of a response."""
        fields = require_dict(data, "ResponseMeta")
        code = fields.get("code")
        if not isinstance(code, int) or isinstance(code, bool):
            msg = f"ResponseMeta.code must be an integer, got {code!r}"
            raise TypeError(msg)
        return cls(
            fields,
            error_type=fields.get("error_type"),
            error_message=fields.get("error_message"),
        )
