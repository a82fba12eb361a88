"""argparser.py - Parses command line arguments."""
import argparse
import json
import logging
import sys
from pathlib import Path

from igrelations.api.client import API_BASE_URL

COMMANDS = (
    "follows",
    "followed-by",
    "requested-by",
    "relationship",
    "follow",
    "unfollow",
    "block",
    "unblock",
    "approve",
    "deny",
)

argparser=argparse.ArgumentParser(prog="igrelations",
    description="Query and change Instagram relationships.")

argparser.add_argument("command", choices=COMMANDS, help="The relationships \
    endpoint to call.")
argparser.add_argument("user_id", nargs="?", default=None, help="The target user \
    id. Required by every command except the three listings.")
argparser.add_argument("-c","--config", required=False, type=str, help="Optionally \
    provide a path to a JSON file containing configuration options. If not provided, \
    options must be supplied using command line flags.")
argparser.add_argument("--access-token", required=False, help="Required unless \
    --client-id is given: an OAuth access token with the `relationships` scope.")
argparser.add_argument("--client-id", required=False, help="Client id used for \
    unauthenticated reads when no access token is supplied.")
argparser.add_argument("--api-base-url", required=False,
    default=API_BASE_URL, help="Base URL of the API.")
argparser.add_argument("--http-timeout", required = False, type=int, default=60,
    help="The total timeout in seconds for each HTTP request.")
argparser.add_argument("--all", required = False, action="store_true",
    help="For follows and followed-by, fetch every page instead of the first.")
argparser.add_argument("--log-level", required = False, type=int, default=20,
    help="Set the log level. 10=DEBUG, 20=INFO, 30=WARNING, 40=ERROR, 50=CRITICAL")


def parse_arguments(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse the command line, then apply the JSON config file if one was given."""
    arguments = argparser.parse_args(argv)
    if arguments.config:
        if not Path(arguments.config).exists():
            logging.critical(f"Config file {arguments.config} doesn't exist")
            sys.exit(1)
        with Path(arguments.config).open(encoding="utf-8") as file:
            config = json.load(file)
        for key in config:
            setattr(arguments, key.lower().replace("-","_"), config[key])
    return arguments
