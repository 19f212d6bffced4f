"""Common types shared by every alert output."""

from __future__ import annotations

import abc
import enum
from dataclasses import dataclass, field


class OutputError(Exception):
    """Raised when an output cannot be opened or cannot deliver a message."""


class Priority(enum.IntEnum):
    """Alert priorities, numerically equal to the syslog levels."""

    EMERGENCY = 0
    ALERT = 1
    CRITICAL = 2
    ERROR = 3
    WARNING = 4
    NOTICE = 5
    INFORMATIONAL = 6
    DEBUG = 7

    @classmethod
    def parse(cls, name: str) -> Priority:
        """Return the priority called ``name``, ignoring case."""
        try:
            return cls[name.strip().upper()]
        except KeyError:
            raise OutputError(f"unknown priority {name!r}") from None

    @property
    def label(self) -> str:
        """The human readable name, e.g. ``Warning``."""
        return self.name.capitalize()


@dataclass
class OutputConfig:
    """The name of an output and its string options."""

    name: str
    options: dict[str, str] = field(default_factory=dict)


@dataclass
class Message:
    """A message to deliver: a matched rule or a generic notice."""

    ts: int
    priority: Priority
    msg: str
    rule: str = ""
    source: str = ""
    fields: dict[str, str] = field(default_factory=dict)
    tags: set[str] = field(default_factory=set)


class Output(abc.ABC):
    """Base class of every output destination."""

    def __init__(
        self,
        config: OutputConfig,
        buffered: bool,
        hostname: str,
        json_output: bool,
    ) -> None:
        self.config = config
        self.buffered = buffered
        self.hostname = hostname
        self.json_output = json_output

    @property
    def name(self) -> str:
        """The output's name as given in its configuration."""
        return self.config.name

    @abc.abstractmethod
    def output(self, msg: Message) -> None:
        """Deliver one message."""

    def reopen(self) -> None:
        """Close the output, if needed, and open it again."""

    def cleanup(self) -> None:
        """Flush or close the output, if needed."""

    def _option(self, key: str) -> str:
        return self.config.options.get(key, "")

    @property
    def _keep_alive(self) -> bool:
        return self._option("keep_alive") == "true"