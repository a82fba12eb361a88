"""Test the command line runner."""
import argparse
import json
from pathlib import Path
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest

from igrelations import main as main_module
from igrelations.api.instagram.api_instagram_errors import InstagramNotFoundError
from igrelations.api.instagram.api_instagram_types import (
    Relationship,
    ResponsePagination,
    User,
)
from igrelations.helpers.argparser import parse_arguments

pytest_plugins = ('pytest_asyncio',)  # noqa: Q000


class FakeInstagram:
    """Stands in for Instagram, recording how it was built."""

    built: dict[str, Any] = {}  # noqa: RUF012

    def __init__(self, **kwargs: Any) -> None:  # noqa: ANN401
        FakeInstagram.built = kwargs
        self.follows = AsyncMock(return_value=(
            [User.from_json({"id": "1", "username": "a"})],
            ResponsePagination(next_url="https://api.instagram.com/v1/next"),
        ))
        self.followed_by = AsyncMock(return_value=([], ResponsePagination()))
        self.requested_by = AsyncMock(return_value=([], ResponsePagination()))
        self.block = AsyncMock(return_value=Relationship.from_json(
            {"outgoing_status": "none", "incoming_status": "blocked_by_you"},
        ))
        self.deny = AsyncMock(side_effect=InstagramNotFoundError("gone"))

    async def all_follows(self):  # noqa: ANN201
        for user_id in ("1", "2"):
            yield User.from_json({"id": user_id, "username": f"user{user_id}"})

    async def __aenter__(self):  # noqa: ANN204
        return self

    async def __aexit__(self, *args) -> None:  # noqa: ANN002
        pass


@pytest.fixture()
def fake_instagram(monkeypatch: pytest.MonkeyPatch) -> type[FakeInstagram]:
    """Replace the client and the logging setup of the runner."""
    monkeypatch.setattr(main_module, "Instagram", FakeInstagram)
    monkeypatch.setattr(main_module.helpers, "setup_logging", MagicMock())
    return FakeInstagram


class TestParseArguments:
    """Test parse_arguments."""

    def test_flags(self) -> None:
        """Test the flags and their defaults."""
        arguments = parse_arguments(["follow", "1574083", "--access-token", "t"])
        assert arguments.command == "follow"
        assert arguments.user_id == "1574083"
        assert arguments.access_token == "t"  # noqa: S105
        assert arguments.api_base_url == "https://api.instagram.com/v1/"
        assert arguments.http_timeout == 60
        assert arguments.log_level == 20
        assert arguments.all is False

    def test_config_file(self, tmp_path: Path) -> None:
        """Test the JSON config overrides the flags."""
        config = tmp_path / "config.json"
        config.write_text(json.dumps({"access-token": "from-file", "log-level": 10}))
        arguments = parse_arguments(
            ["follows", "-c", str(config), "--access-token", "flag"],
        )
        assert arguments.access_token == "from-file"  # noqa: S105
        assert arguments.log_level == 10

    def test_missing_config_file(self, tmp_path: Path) -> None:
        """Test a config path that does not exist stops the run."""
        with pytest.raises(SystemExit):
            parse_arguments(["follows", "-c", str(tmp_path / "missing.json")])

    def test_unknown_command(self) -> None:
        """Test commands are limited to the endpoints."""
        with pytest.raises(SystemExit):
            parse_arguments(["mute", "1"])


class TestMain:
    """Test main and run_command."""

    async def test_listing(
        self,
        fake_instagram: type[FakeInstagram],
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        """Test a listing prints the users and the cursor."""
        arguments = parse_arguments(
            ["follows", "--access-token", "t", "--http-timeout", "5"],
        )
        assert await main_module.main(arguments) == 0
        assert fake_instagram.built == {
            "token": "t",
            "client_id": None,
            "api_base_url": "https://api.instagram.com/v1/",
            "timeout": 5,
        }
        output = json.loads(capsys.readouterr().out)
        assert output["users"][0]["username"] == "a"
        assert output["pagination"]["next_url"] == "https://api.instagram.com/v1/next"

    async def test_all_pages(
        self,
        fake_instagram: type[FakeInstagram],  # noqa: ARG002
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        """Test --all walks the pages."""
        arguments = parse_arguments(["follows", "--all", "--client-id", "abc"])
        assert await main_module.main(arguments) == 0
        output = json.loads(capsys.readouterr().out)
        assert [user["id"] for user in output["users"]] == ["1", "2"]
        assert output["pagination"] is None

    async def test_action(
        self,
        fake_instagram: type[FakeInstagram],  # noqa: ARG002
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        """Test an action prints the new relationship."""
        arguments = parse_arguments(["block", "42", "--access-token", "t"])
        assert await main_module.main(arguments) == 0
        output = json.loads(capsys.readouterr().out)
        assert output["relationship"]["incoming_status"] == "blocked_by_you"

    async def test_api_error(
        self,
        fake_instagram: type[FakeInstagram],  # noqa: ARG002
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        """Test an API error gives exit status 1 and no output."""
        arguments = parse_arguments(["deny", "42", "--access-token", "t"])
        assert await main_module.main(arguments) == 1
        assert capsys.readouterr().out == ""

    async def test_missing_credentials(
        self,
        fake_instagram: type[FakeInstagram],  # noqa: ARG002
    ) -> None:
        """Test the run stops without a token or client id."""
        with pytest.raises(SystemExit):
            await main_module.main(parse_arguments(["follows"]))

    async def test_missing_user_id(
        self,
        fake_instagram: type[FakeInstagram],  # noqa: ARG002
    ) -> None:
        """Test an action without a user id stops the run."""
        with pytest.raises(SystemExit):
            await main_module.main(parse_arguments(["follow", "--access-token", "t"]))

    async def test_run_command_requested_by(self) -> None:
        """Test requested_by ignores --all."""
        instagram = MagicMock()
        instagram.requested_by = AsyncMock(return_value=([], ResponsePagination()))
        arguments = argparse.Namespace(command="requested-by", all=True, user_id=None)
        result = await main_module.run_command(instagram, arguments)
        instagram.requested_by.assert_awaited_once_with()
        assert result == {"users": [], "pagination": ResponsePagination()}
