"""Periodic capture statistics written to a file as JSON lines."""

from __future__ import annotations

import os
import threading
from dataclasses import dataclass
from typing import Mapping, Optional, Protocol, TextIO

_EXTRA_PREFIX = "FALCO_STATS_EXTRA_"


@dataclass(frozen=True)
class CaptureStats:
    """Counters reported by the event capture."""

    events: int = 0
    drops: int = 0
    preemptions: int = 0


class _Inspector(Protocol):
    def get_capture_stats(self) -> CaptureStats: ...


class StatsFileWriter:
    """Append a JSON sample of capture statistics each interval.

    :meth:`handle` is meant to be called often, e.g. once per event; it only
    writes when a sample is due. Environment variables named
    ``FALCO_STATS_EXTRA_<KEY>`` are added to every sample as ``"<KEY>": value``.
    """

    def __init__(
        self,
        inspector: _Inspector,
        filename: str | os.PathLike[str],
        interval_msec: int,
        environ: Optional[Mapping[str, str]] = None,
    ) -> None:
        self._inspector = inspector
        self._interval = interval_msec / 1000.0
        self._num_stats = 0
        self._last: Optional[CaptureStats] = None
        self._sample_due = threading.Event()
        self._stop_event = threading.Event()
        self._timer: Optional[threading.Thread] = None
        env = os.environ if environ is None else environ
        self._extra = ", ".join(
            f'"{key[len(_EXTRA_PREFIX):]}": "{value}"'
            for key, value in env.items()
            if key.startswith(_EXTRA_PREFIX)
        )
        self._output: Optional[TextIO] = open(filename, "a", encoding="utf-8")

    def start(self) -> None:
        """Start the periodic timer; an interval of zero disables it."""
        if self._timer is not None or self._interval <= 0:
            return
        self._stop_event.clear()
        self._timer = threading.Thread(target=self._tick, daemon=True)
        self._timer.start()

    def _tick(self) -> None:
        while not self._stop_event.wait(self._interval):
            self._sample_due.set()

    def request_sample(self) -> None:
        """Mark a sample as due, as the timer does."""
        self._sample_due.set()

    def handle(self) -> None:
        """Write a sample if one is due."""
        if not self._sample_due.is_set() or self._output is None:
            return
        self._sample_due.clear()
        self._num_stats += 1
        current = self._inspector.get_capture_stats()
        if self._last is None:
            delta = current
        else:
            delta = CaptureStats(
                events=current.events - self._last.events,
                drops=current.drops - self._last.drops,
                preemptions=current.preemptions - self._last.preemptions,
            )
        drop_pct = 0.0 if delta.events == 0 else 100.0 * delta.drops / delta.events

        parts = [f'{{"sample": {self._num_stats}']
        if self._extra:
            parts.append(f", {self._extra}")
        parts.append(
            f', "cur": {{"events": {current.events}, "drops": {current.drops},'
            f' "preemptions": {current.preemptions}}},'
            f' "delta": {{"events": {delta.events}, "drops": {delta.drops},'
            f' "preemptions": {delta.preemptions}}},'
            f' "drop_pct": {drop_pct:g}}},\n'
        )
        self._output.write("".join(parts))
        self._output.flush()
        self._last = current

    def close(self) -> None:
        """Stop the timer and close the file."""
        if self._timer is not None:
            self._stop_event.set()
            self._timer.join()
            self._timer = None
        if self._output is not None:
            output, self._output = self._output, None
            output.close()

    def __enter__(self) -> StatsFileWriter:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()