"""Output that pipes messages into a shell command."""

from __future__ import annotations

import subprocess

from .outputs import Message, Output, OutputConfig, OutputError


class ProgramOutput(Output):
    """Write each message as a line to the standard input of the ``program`` option.

    The command runs through the shell. Unless ``keep_alive`` is ``"true"``,
    the pipe is closed and the command waited for after each message.
    """

    def __init__(
        self,
        config: OutputConfig,
        buffered: bool,
        hostname: str,
        json_output: bool,
    ) -> None:
        super().__init__(config, buffered, hostname, json_output)
        self._process: subprocess.Popen[bytes] | None = None

    def _open_pipe(self) -> subprocess.Popen[bytes]:
        if self._process is None:
            program = self._option("program")
            try:
                self._process = subprocess.Popen(
                    program,
                    shell=True,
                    stdin=subprocess.PIPE,
                    bufsize=-1 if self.buffered else 0,
                )
            except OSError as exc:
                raise OutputError(f"failed to start output program {program}") from exc
        return self._process

    def output(self, msg: Message) -> None:
        process = self._open_pipe()
        assert process.stdin is not None
        try:
            process.stdin.write((msg.msg + "\n").encode("utf-8"))
        except BrokenPipeError as exc:
            self.cleanup()
            raise OutputError("output program closed its input") from exc
        if not self._keep_alive:
            self.cleanup()

    def cleanup(self) -> None:
        if self._process is None:
            return
        process, self._process = self._process, None
        if process.stdin is not None:
            try:
                process.stdin.close()
            except BrokenPipeError:
                pass
        process.wait()

    def reopen(self) -> None:
        self.cleanup()
        self._open_pipe()