"""Helper functions for igrelations."""
import logging
import sys

import colorlog


def setup_logging(log_level: int = logging.INFO) -> None:
    """Set logging."""
    logger = logging.getLogger()
    stderr = colorlog.StreamHandler(stream=sys.stderr)
    fmt = colorlog.ColoredFormatter(
    "%(white)s%(asctime)s%(reset)s | %(log_color)s%(levelname)s%(reset)s | \
%(name)s | %(blue)s%(filename)s:%(lineno)s%(reset)s | %(funcName)s >>> \
%(log_color)s%(message)s%(reset)s")
    stderr.setFormatter(fmt)
    logger.addHandler(stderr)
    logger.setLevel(log_level)

class Response:
    """HTTP response codes."""

    OK = 200
    BAD_REQUEST = 400
    UNAUTHORIZED = 401
    NOT_FOUND = 404
    TOO_MANY_REQUESTS = 429
    INTERNAL_SERVER_ERROR = 500
