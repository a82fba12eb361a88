"""Entry point for ``python -m igrelations`` and the console script."""
import asyncio
import sys

from igrelations.helpers.argparser import parse_arguments
from igrelations.main import main


def run() -> None:
    """Parse the command line and run the command."""
    sys.exit(asyncio.run(main(parse_arguments())))


if __name__ == "__main__":
    run()
