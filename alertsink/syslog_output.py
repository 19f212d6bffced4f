"""Output that sends messages to the system log."""

from __future__ import annotations

import syslog

from .outputs import Message, Output


class SyslogOutput(Output):
    """Send each message to syslog at the message's priority."""

    def output(self, msg: Message) -> None:
        # syslog entries carry no trailing newline
        syslog.syslog(int(msg.priority), msg.msg)