"""Interface shared by the API facades."""

from abc import ABCMeta, abstractmethod

from igrelations.api.client import HttpMethod


class API(metaclass=ABCMeta):
    """Interface for dependency injection of different APIs."""

    client: HttpMethod

    @abstractmethod
    def __init__(
        self,
        token: str | None = None,
        client_id: str | None = None,
        ) -> None:
        """Initialize the API."""
        raise NotImplementedError

    async def cleanup(self) -> None:
        """Close the underlying HTTP session."""
        await self.client.session.close()

    async def __aenter__(self):  # noqa: ANN204
        return self

    async def __aexit__(self, *args) -> None:  # noqa: ANN002
        await self.cleanup()
