"""Audio sinks that take raw sample bytes: a pipe/file sink and a subprocess sink."""

from __future__ import annotations

import contextlib
import os
import shlex
import subprocess
import sys
from typing import BinaryIO, Callable

from spotkit.config import AudioFormat


class SinkError(Exception):
    """Base class for audio sink failures."""

    prefix = "Audio Sink Error"

    def __init__(self, detail: str) -> None:
        super().__init__(f"{self.prefix}: {detail}")
        self.detail = detail


class NotConnectedError(SinkError):
    prefix = "Audio Sink Error Not Connected"


class ConnectionRefusedSinkError(SinkError):
    prefix = "Audio Sink Error Connection Refused"


class OnWriteError(SinkError):
    prefix = "Audio Sink Error On Write"


class InvalidParamsError(SinkError):
    prefix = "Audio Sink Error Invalid Parameters"


class StateChangeError(SinkError):
    prefix = "Audio Sink Error Changing State"


class Sink:
    """An output for audio sample bytes already in the sink's format."""

    NAME = ""

    def __init__(self, audio_format: AudioFormat) -> None:
        self.audio_format = audio_format

    def start(self) -> None:
        """Prepare the sink for writing."""

    def stop(self) -> None:
        """Release the output, flushing pending data."""

    def write(self, data: bytes) -> None:
        raise NotImplementedError


class StdoutSink(Sink):
    """Writes samples to standard output or to a file."""

    NAME = "pipe"

    def __init__(self, file: str | None, audio_format: AudioFormat) -> None:
        if file == "?":
            print(
                "\nUsage:\n\nOutput to stdout:\n\n\t--backend pipe\n\n"
                "Output to file:\n\n\t--backend pipe --device {filename}\n"
            )
            raise SystemExit(0)
        super().__init__(audio_format)
        self.file = file
        self._output: BinaryIO | None = None
        self._owns_output = False

    def start(self) -> None:
        if self._output is not None:
            return
        if self.file is None:
            self._output = sys.stdout.buffer
            self._owns_output = False
            return
        try:
            # Opened for writing without truncation, created when missing.
            fd = os.open(self.file, os.O_WRONLY | os.O_CREAT, 0o666)
        except OSError as e:
            raise ConnectionRefusedSinkError(
                f"<StdoutSink> File Path {self.file} Can Not be Opened and/or Created, {e}"
            ) from e
        self._output = os.fdopen(fd, "wb")
        self._owns_output = True

    def stop(self) -> None:
        output = self._output
        if output is None:
            raise NotConnectedError("<StdoutSink> The Output Stream is None")
        self._output = None
        try:
            output.flush()
        except OSError as e:
            raise OnWriteError(f"<StdoutSink> Failed to Flush the Output Stream, {e}") from e
        finally:
            if self._owns_output:
                with contextlib.suppress(OSError):
                    output.close()

    def write(self, data: bytes) -> None:
        if self._output is None:
            raise NotConnectedError("<StdoutSink> The Output Stream is None")
        try:
            self._output.write(data)
        except OSError as e:
            raise OnWriteError(f"<StdoutSink> {e}") from e


class SubprocessSink(Sink):
    """Pipes samples into the standard input of a shell command."""

    NAME = "subprocess"

    def __init__(self, shell_command: str | None, audio_format: AudioFormat) -> None:
        if shell_command == "?":
            print(
                "\nUsage:\n\nOutput to a Subprocess:\n\n"
                "\t--backend subprocess --device {shell_command}\n"
            )
            raise SystemExit(0)
        super().__init__(audio_format)
        self.shell_command = shell_command
        self._child: subprocess.Popen | None = None

    def start(self) -> None:
        if self._child is not None:
            return
        command = self.shell_command
        if command is None:
            raise InvalidParamsError("<SubprocessSink> Missing Required Shell Command")
        try:
            args = shlex.split(command)
        except ValueError as e:
            raise InvalidParamsError(
                f"<SubprocessSink> Failed to Parse Command args for {command}, {e}"
            ) from e
        if not args:
            raise InvalidParamsError("<SubprocessSink> Missing Required Shell Command")
        try:
            self._child = subprocess.Popen(args, stdin=subprocess.PIPE, bufsize=0)
        except OSError as e:
            raise ConnectionRefusedSinkError(
                f"<SubprocessSink> Command {command} Can Not be Executed, {e}"
            ) from e

    def stop(self) -> None:
        child = self._child
        if child is None:
            raise NotConnectedError("<SubprocessSink> The Subprocess is None")
        self._child = None
        try:
            exited = child.poll() is not None
        except OSError as e:
            raise OnWriteError(
                f"<SubprocessSink> Failed to Wait for the Subprocess to Exit, {e}"
            ) from e
        if exited:
            if child.stdin is not None:
                with contextlib.suppress(OSError):
                    child.stdin.close()
            return

        stdin = child.stdin
        if stdin is None:
            raise NotConnectedError("<SubprocessSink> The Subprocess's stdin is None")
        try:
            stdin.flush()
        except OSError as e:
            raise OnWriteError(f"<SubprocessSink> Failed to Flush the Subprocess, {e}") from e
        finally:
            with contextlib.suppress(OSError):
                stdin.close()
        try:
            child.kill()
        except OSError as e:
            raise OnWriteError(f"<SubprocessSink> Failed to Kill the Subprocess, {e}") from e
        try:
            child.wait()
        except OSError as e:
            raise OnWriteError(
                f"<SubprocessSink> Failed to Wait for the Subprocess to Exit, {e}"
            ) from e

    def write(self, data: bytes) -> None:
        remaining = memoryview(data)
        restarted = False  # one restart attempt per write
        while remaining:
            stdin = self._stdin()
            try:
                written = stdin.write(remaining)
            except InterruptedError:
                continue
            except OSError as e:
                restarted = self._try_restart(OnWriteError(f"<SubprocessSink> {e}"), restarted)
                continue
            if not written:
                restarted = self._try_restart(
                    OnWriteError(
                        "<SubprocessSink> The Subprocess is no longer able to accept Bytes"
                    ),
                    restarted,
                )
                continue
            remaining = remaining[written:]

    def _stdin(self):
        if self._child is None:
            raise NotConnectedError("<SubprocessSink> The Subprocess is None")
        if self._child.stdin is None:
            raise NotConnectedError("<SubprocessSink> The Subprocess's stdin is None")
        return self._child.stdin

    def _try_restart(self, error: SinkError, restarted: bool) -> bool:
        """Restart the subprocess once; raise the original error otherwise."""
        if not restarted:
            try:
                self.stop()
                self.start()
            except SinkError:
                pass
            else:
                return True
        raise error


SinkBuilder = Callable[[str | None, AudioFormat], Sink]

BACKENDS: tuple[tuple[str, SinkBuilder], ...] = (
    (StdoutSink.NAME, StdoutSink),
    (SubprocessSink.NAME, SubprocessSink),
)


def find(name: str | None = None) -> SinkBuilder | None:
    """Return the builder for a backend by name, or the default one when no name is given."""
    if name is None:
        return BACKENDS[0][1] if BACKENDS else None
    return next((builder for backend, builder in BACKENDS if backend == name), None)