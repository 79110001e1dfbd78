"""Record command output with timing data and play it back."""

from __future__ import annotations

import math
import os
import re
import subprocess
import sys
import time
from collections.abc import Sequence
from typing import Union

ESC = "\x1b"
_CHUNK_SIZE = 1024
_MIN_DELAY = 0.0001
_CSI_BODY = re.compile(r"[^A-Za-z~]*")
_SIZE_PATTERN = re.compile(r"\+?[0-9]+")

CommandLike = Union[str, bytes, "os.PathLike[str]", Sequence[str]]


class ReplayError(Exception):
    """Raised when recording or playback fails."""


def _write_bytes(data: bytes) -> None:
    """Write raw bytes to standard output, ignoring failures."""
    out = sys.stdout
    try:
        buffer = getattr(out, "buffer", None)
        if buffer is None:
            out.write(data.decode("utf-8", errors="replace"))
            out.flush()
        else:
            out.flush()
            buffer.write(data)
            buffer.flush()
    except (OSError, ValueError):
        pass


def _write_text(text: str) -> None:
    sys.stdout.write(text)
    try:
        sys.stdout.flush()
    except OSError:
        pass


def _format_number(value: float) -> str:
    """Format a float the way a shortest round-trip display does, without a trailing '.0'."""
    if math.isfinite(value) and value == int(value):
        return str(int(value))
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    return repr(value)


def _parse_delay(token: str) -> float:
    if "_" in token:
        raise ReplayError(f"Invalid delay value '{token}': invalid float literal")
    try:
        return float(token)
    except ValueError:
        raise ReplayError(f"Invalid delay value '{token}': invalid float literal") from None


def _parse_size(token: str) -> int:
    if not _SIZE_PATTERN.fullmatch(token):
        raise ReplayError(f"Invalid size value '{token}': invalid digit found in string")
    return int(token)


def _scale_delay(delay: float, speed: float) -> float:
    try:
        return delay / speed
    except ZeroDivisionError:
        if delay == 0 or math.isnan(delay):
            return math.nan
        return math.copysign(math.inf, delay) * math.copysign(1.0, speed)


def _is_control(ch: str) -> bool:
    code = ord(ch)
    return code < 0x20 or 0x7F <= code <= 0x9F


def clean_for_display(text: str) -> str:
    """Drop bracketed-paste sequences and stray control characters, keeping colours."""
    out: list[str] = []
    length = len(text)
    pos = 0
    while pos < length:
        ch = text[pos]
        if ch == ESC:
            if pos + 1 < length and text[pos + 1] == "[":
                end = _CSI_BODY.match(text, pos + 2).end()
                sequence = text[pos + 2 : end + 1]
                if "2004" in sequence:
                    pos = end + 1
                    continue
            out.append(ch)
            pos += 1
        elif (
            ch == "?"
            and pos + 5 < length
            and text[pos + 1 : pos + 5] == "2004"
            and text[pos + 5] in "hl"
        ):
            pos += 6
        elif _is_control(ch) and ch not in "\t\n\r":
            pos += 1
        else:
            out.append(ch)
            pos += 1
    return "".join(out)


class Recorder:
    """Runs a command and records its standard output with timing data."""

    def __init__(self, output_file: str | os.PathLike[str], timing_file: str | os.PathLike[str]) -> None:
        self.output_file = os.fspath(output_file)
        self.timing_file = os.fspath(timing_file)

    def __repr__(self) -> str:
        return f"Recorder(output_file={self.output_file!r}, timing_file={self.timing_file!r})"

    def record_command(self, command: CommandLike, plain_text: bool = False) -> None:
        """Run ``command`` and record its output; raise ReplayError on failure.

        ``command`` is a program name or a sequence of program and arguments.
        With ``plain_text`` the output is cleaned with :func:`clean_for_display`.
        """
        if isinstance(command, (str, bytes, os.PathLike)):
            argv = [command]
        else:
            argv = list(command)
        if not argv:
            raise ReplayError("Failed to start command: empty command")

        try:
            child = subprocess.Popen(
                argv,
                stdout=subprocess.PIPE,
                stderr=subprocess.DEVNULL,
            )
        except (OSError, ValueError) as exc:
            raise ReplayError(f"Failed to start command: {exc}") from exc

        try:
            self._capture(child, plain_text)
        except BaseException:
            if child.poll() is None:
                child.kill()
            child.wait()
            raise
        finally:
            if child.stdout is not None:
                child.stdout.close()

        returncode = child.wait()
        if returncode != 0:
            code = returncode if returncode > 0 else None
            raise ReplayError(f"Command failed with exit code: {code}")

    def _capture(self, child: subprocess.Popen, plain_text: bool) -> None:
        try:
            output = open(self.output_file, "wb")
        except OSError as exc:
            raise ReplayError(f"Failed to create output file: {exc}") from exc
        try:
            try:
                timing = open(self.timing_file, "w", encoding="ascii", newline="\n")
            except OSError as exc:
                raise ReplayError(f"Failed to create timing file: {exc}") from exc
            with timing:
                self._pump(child, output, timing, plain_text)
        finally:
            output.close()

    @staticmethod
    def _pump(child: subprocess.Popen, output, timing, plain_text: bool) -> None:
        if child.stdout is None:
            return
        fd = child.stdout.fileno()
        last_output = time.monotonic()
        while True:
            try:
                chunk = os.read(fd, _CHUNK_SIZE)
            except OSError as exc:
                print(f"Error reading output: {exc}", file=sys.stderr)
                break
            if not chunk:
                break
            now = time.monotonic()
            delay = now - last_output
            last_output = now

            if plain_text:
                data = clean_for_display(chunk.decode("utf-8", errors="replace")).encode("utf-8")
            else:
                data = chunk

            try:
                timing.write(f"{delay:.6f} {len(data)}\n")
            except OSError as exc:
                raise ReplayError(f"Failed to write timing data: {exc}") from exc
            try:
                output.write(data)
            except OSError as exc:
                raise ReplayError(f"Failed to write output: {exc}") from exc

            _write_bytes(data)


class Player:
    """Plays back a recorded session from its output and timing files."""

    def __init__(self, timing_file: str | os.PathLike[str], typescript_file: str | os.PathLike[str]) -> None:
        timing_path = os.fspath(timing_file)
        typescript_path = os.fspath(typescript_file)
        if not os.path.exists(timing_path):
            raise ReplayError(f"Timing file not found: {timing_path}")
        if not os.path.exists(typescript_path):
            raise ReplayError(f"Typescript file not found: {typescript_path}")
        self.timing_file = timing_path
        self.typescript_file = typescript_path

    def __repr__(self) -> str:
        return f"Player(timing_file={self.timing_file!r}, typescript_file={self.typescript_file!r})"

    def _read_timing(self) -> str:
        try:
            with open(self.timing_file, "rb") as handle:
                return handle.read().decode("utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise ReplayError(f"Failed to read timing file {self.timing_file}: {exc}") from exc

    def replay(self, speed_multiplier: float = 1.0) -> None:
        """Write the session to standard output, honouring the recorded delays."""
        timing_content = self._read_timing()
        try:
            typescript = open(self.typescript_file, "rb")
        except OSError as exc:
            raise ReplayError(
                f"Failed to open typescript file {self.typescript_file}: {exc}"
            ) from exc

        with typescript:
            _write_text("🎬 Playing back session\n")
            _write_text(f"   Speed: {_format_number(speed_multiplier)}x | Press Ctrl+C to stop\n")
            _write_text("\n")

            total_size = os.fstat(typescript.fileno()).st_size
            for raw_line in timing_content.split("\n"):
                line = raw_line.strip()
                if not line:
                    continue
                parts = line.split()
                if len(parts) < 2:
                    continue

                delay = _parse_delay(parts[0])
                size = _parse_size(parts[1])

                adjusted = _scale_delay(delay, speed_multiplier)
                if adjusted >= _MIN_DELAY:
                    if math.isinf(adjusted):
                        raise ReplayError(f"Invalid delay duration: {_format_number(adjusted)}")
                    time.sleep(adjusted)

                try:
                    remaining = total_size - typescript.tell()
                    if size > remaining:
                        break
                    block = typescript.read(size)
                except OSError as exc:
                    raise ReplayError(f"Error reading typescript: {exc}") from exc
                if len(block) < size:
                    break
                _write_text(block.decode("utf-8", errors="replace"))

            _write_text("\n")

    def dump(self) -> None:
        """Write the whole session at once, cleaned for display."""
        try:
            with open(self.typescript_file, "rb") as handle:
                content = handle.read().decode("utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise ReplayError(f"Failed to read typescript file: {exc}") from exc
        _write_text(clean_for_display(content))