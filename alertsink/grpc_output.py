"""Output that queues messages as responses for a streaming API."""

from __future__ import annotations

import enum
import queue
from dataclasses import dataclass, field

from .outputs import Message, Output, OutputError, Priority

_NANOS_PER_SECOND = 1_000_000_000


class Source(enum.IntEnum):
    """Event sources known to the response schema."""

    SYSCALL = 0
    K8S_AUDIT = 1
    INTERNAL = 2
    PLUGIN = 3

    @classmethod
    def parse(cls, name: str) -> Source:
        """Return the source called ``name`` in upper, lower or capitalised form."""
        for member in cls:
            if name in (member.name, member.name.lower(), member.name.capitalize()):
                return member
        raise ValueError(f"unknown source {name!r}")


@dataclass
class Response:
    """One alert as handed to streaming clients."""

    time_seconds: int
    time_nanos: int
    priority: Priority
    rule: str
    output: str
    source: str
    source_deprecated: Source
    hostname: str
    output_fields: dict[str, str] = field(default_factory=dict)
    tags: list[str] = field(default_factory=list)


class ResponseQueue:
    """A thread-safe FIFO of responses."""

    def __init__(self) -> None:
        self._queue: queue.SimpleQueue[Response] = queue.SimpleQueue()

    def push(self, response: Response) -> None:
        self._queue.put(response)

    def try_pop(self) -> Response | None:
        """Return the oldest response, or None when the queue is empty."""
        try:
            return self._queue.get_nowait()
        except queue.Empty:
            return None


_QUEUE = ResponseQueue()


def get_queue() -> ResponseQueue:
    """Return the process-wide response queue."""
    return _QUEUE


class GrpcOutput(Output):
    """Turn each message into a Response and push it on the shared queue."""

    def output(self, msg: Message) -> None:
        try:
            deprecated_source = Source.parse(msg.source)
        except ValueError:
            # unknown source names are expected to come from plugins
            deprecated_source = Source.PLUGIN

        try:
            priority = Priority(msg.priority)
        except ValueError:
            raise OutputError("unknown priority passed to gRPC output") from None

        seconds, nanos = divmod(msg.ts, _NANOS_PER_SECOND)
        response = Response(
            time_seconds=seconds,
            time_nanos=nanos,
            priority=priority,
            rule=msg.rule,
            output=msg.msg,
            source=msg.source,
            source_deprecated=deprecated_source,
            hostname=self.hostname,
            output_fields=dict(msg.fields),
            tags=sorted(msg.tags),
        )
        get_queue().push(response)