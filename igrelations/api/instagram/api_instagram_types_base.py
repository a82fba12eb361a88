"""Base classes for Instagram API entities."""
from typing import Any


class AttribAccessDict(dict):
    """Dict that also allows attribute-style access to its keys.

    Entities decoded from the API subclass this, so a value can be used as
    ``relationship.outgoing_status`` as well as
    ``relationship["outgoing_status"]`` and still serializes as plain JSON.
    """

    def __getattr__(self, attr: str) -> Any:  # noqa: ANN401
        """Return the value stored under ``attr``."""
        if attr in self:
            return self[attr]
        msg = f"Attribute not found: {attr}"
        raise AttributeError(msg)

    def __setattr__(self, attr: str, val: Any) -> None:  # noqa: ANN401
        """Refuse writes, entities mirror what the server returned."""
        msg = f"Attribute-style access is read only: {attr}"
        raise AttributeError(msg)

    def __delattr__(self, attr: str) -> None:
        """Refuse deletes."""
        msg = f"Attribute-style access is read only: {attr}"
        raise AttributeError(msg)


def require_dict(value: Any, entity: str) -> dict[str, Any]:  # noqa: ANN401
    """Check that a JSON value is an object before it is decoded as ``entity``."""
    if not isinstance(value, dict):
        msg = f"Expected a JSON object for {entity}, got {type(value).__name__}"
        raise TypeError(msg)
    return value
