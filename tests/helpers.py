"""Fakes shared by the tests."""
from typing import Any
from unittest.mock import AsyncMock, MagicMock


def response_context(body: Any, status: int = 200) -> MagicMock:  # noqa: ANN401
    """Build what ``session.request(...)`` returns for an ``async with``."""
    context = MagicMock()
    context.__aenter__.return_value = MagicMock(
        status=status,
        json=AsyncMock(return_value=body),
    )
    context.__aexit__.return_value = False
    return context


def envelope(data: Any, pagination: dict | None = None) -> dict[str, Any]:  # noqa: ANN401
    """Wrap ``data`` the way a successful API reply does."""
    body: dict[str, Any] = {"meta": {"code": 200}, "data": data}
    if pagination is not None:
        body["pagination"] = pagination
    return body
