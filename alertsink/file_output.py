"""Output that appends messages to a file."""

from __future__ import annotations

from typing import TextIO

from .outputs import Message, Output, OutputConfig, OutputError


class FileOutput(Output):
    """Append each message as a line to the file named by the ``filename`` option.

    Unless ``keep_alive`` is ``"true"``, the file is closed after each message.
    """

    def __init__(
        self,
        config: OutputConfig,
        buffered: bool,
        hostname: str,
        json_output: bool,
    ) -> None:
        super().__init__(config, buffered, hostname, json_output)
        self._file: TextIO | None = None

    def _open_file(self) -> TextIO:
        if self._file is None:
            filename = self._option("filename")
            try:
                self._file = open(filename, "a", encoding="utf-8")
            except OSError as exc:
                raise OutputError(f"failed to open output file {filename}") from exc
        return self._file

    def output(self, msg: Message) -> None:
        handle = self._open_file()
        handle.write(msg.msg + "\n")
        if not self.buffered:
            handle.flush()
        if not self._keep_alive:
            self.cleanup()

    def cleanup(self) -> None:
        if self._file is not None:
            handle, self._file = self._file, None
            handle.close()

    def reopen(self) -> None:
        self.cleanup()
        self._open_file()