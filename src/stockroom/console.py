"""Line-oriented console backed by a pair of text streams."""

import sys
from typing import TextIO

from stockroom.errors import ConsoleClosedError, ConsoleError


class Console:
    """Writes whole lines, and prompts by writing, flushing, then blocking on a read.

    Stream failures surface as ``ConsoleError``; end of input surfaces as
    ``ConsoleClosedError``.
    """

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None):
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout

    def write(self, line: str = "") -> None:
        try:
            self.stdout.write(f"{line}\n")
        except (OSError, ValueError) as exc:
            raise ConsoleError(f"Failed to write to the console: {exc}") from exc

    def prompt(self, text: str) -> str:
        """Show ``text`` and return the next input line without its line ending."""
        try:
            self.stdout.write(text)
            self.stdout.flush()
        except (OSError, ValueError) as exc:
            raise ConsoleError(f"Failed to flush the console: {exc}") from exc

        try:
            line = self.stdin.readline()
        except (OSError, ValueError) as exc:
            raise ConsoleError(f"Failed to read from the console: {exc}") from exc

        if not line:
            raise ConsoleClosedError("Console input closed")
        return line.rstrip("\r\n")
