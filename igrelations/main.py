"""igrelations - run one relationships command and print the result as JSON."""

import argparse
import json
import logging
import sys
from typing import Any

from igrelations.api.instagram.api_instagram import Instagram
from igrelations.api.instagram.api_instagram_errors import InstagramError
from igrelations.helpers import helpers

LISTINGS = ("follows", "followed-by", "requested-by")


async def run_command(
    instagram: Instagram,
    arguments: argparse.Namespace,
) -> dict[str, Any]:
    """Call the endpoint named by ``arguments.command``."""
    command = arguments.command
    if command in LISTINGS:
        if arguments.all and command != "requested-by":
            pages = (
                instagram.all_follows()
                if command == "follows"
                else instagram.all_followed_by()
            )
            return {"users": [user async for user in pages], "pagination": None}
        if command == "follows":
            users, pagination = await instagram.follows()
        elif command == "followed-by":
            users, pagination = await instagram.followed_by()
        else:
            users, pagination = await instagram.requested_by()
        return {"users": users, "pagination": pagination}
    action = getattr(instagram, command)
    return {"relationship": await action(arguments.user_id)}


async def main(arguments: argparse.Namespace) -> int:
    """Run igrelations."""
    helpers.setup_logging(arguments.log_level)

    if arguments.access_token is None and arguments.client_id is None:
        logging.critical("You must supply an access token or a client id")
        sys.exit(1)
    if arguments.command not in LISTINGS and not arguments.user_id:
        logging.critical(f"{arguments.command} needs a user id")
        sys.exit(1)

    async with Instagram(
        token=arguments.access_token,
        client_id=arguments.client_id,
        api_base_url=arguments.api_base_url,
        timeout=arguments.http_timeout,
    ) as instagram:
        try:
            result = await run_command(instagram, arguments)
        except InstagramError:
            logging.exception(f"{arguments.command} failed")
            return 1
    print(json.dumps(result, indent=2))  # noqa: T201
    return 0
