"""Output that prints messages to standard output."""

from __future__ import annotations

import sys

from .outputs import Message, Output


class StdoutOutput(Output):
    """Print each message as a line on standard output."""

    def output(self, msg: Message) -> None:
        sys.stdout.write(msg.msg + "\n")
        if not self.buffered:
            sys.stdout.flush()

    def cleanup(self) -> None:
        sys.stdout.flush()