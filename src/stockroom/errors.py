"""Console failures.

These are fatal: the command loop never catches them, and the entry point
stops the process with a diagnostic.
"""


class ConsoleError(Exception):
    """Reading from or writing to the console failed."""


class ConsoleClosedError(ConsoleError):
    """The input stream ended before a full line was read."""
