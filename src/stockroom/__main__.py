"""Stockroom interactive inventory tracker.

Usage:
    python -m stockroom
    stockroom
"""

import sys

import structlog

from inventory.domain import inventory
from stockroom.console import Console
from stockroom.errors import ConsoleError
from stockroom.menu import CommandLoop

logger = structlog.get_logger(__name__)

EXIT_FAILURE = 1


def serve(console):
    """Run the command loop against ``console`` and return the exit status."""
    with inventory.domain_context():
        try:
            return CommandLoop(console).run()
        except ConsoleError as exc:
            logger.error("Console I/O failed, stopping", error=str(exc))
            return EXIT_FAILURE


def main():
    inventory.init()
    return serve(Console())


if __name__ == "__main__":
    sys.exit(main())
