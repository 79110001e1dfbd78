"""Command-line tool that records a command's output with timing data."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterable, Sequence

from .session import Recorder, ReplayError

VERSION = "0.1.0"


def _timing_for(timing: str | None, base: str) -> str:
    """Return the timing path given on the command line, or the default next to ``base``."""
    return timing if timing is not None else f"{base}.timing"


def _print_lines(lines: Iterable[str]) -> None:
    for line in lines:
        print(line)


def _add_common_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("-t", "--timing", help="Timing file for replay data")
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose output")


def _build_parser_for(
    prog: str,
    description: str,
    add_arguments: Callable[[argparse.ArgumentParser], None],
) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog=prog, description=description)
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {VERSION}")
    add_arguments(parser)
    return parser


def _run(action: Callable[..., None], *args: object) -> int:
    """Run ``action``; report a ReplayError on stderr and turn it into exit status 1."""
    try:
        action(*args)
    except ReplayError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


def _add_record_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("command", metavar="COMMAND", help="Command to execute and record")
    parser.add_argument("args", metavar="ARGS", nargs="*", help="Arguments for the command")
    parser.add_argument(
        "-o", "--output", default="session.log", help="Output file for session data"
    )
    parser.add_argument(
        "-p",
        "--plain-text",
        action="store_true",
        help="Record in plain text format (removes problematic ANSI sequences)",
    )
    _add_common_options(parser)


def _record(options: argparse.Namespace, replay_command: str) -> None:
    """Record the command described by ``options``; raise ReplayError on failure."""
    output = options.output
    timing_file = _timing_for(options.timing, output)

    if options.verbose:
        _print_lines(
            [
                f"📹 Recording command: {options.command} {' '.join(options.args)}",
                f"📄 Output file: {output}",
                f"⏱️  Timing file: {timing_file}",
                f"📝 Format: {'Plain text' if options.plain_text else 'Binary'}",
                "",
            ]
        )

    recorder = Recorder(output, timing_file)

    print("🎬 Starting recording...", flush=True)
    recorder.record_command([options.command, *options.args], options.plain_text)

    if options.verbose:
        _print_lines(
            [
                "",
                "✅ Recording completed successfully!",
                "📂 Files created:",
                f"   📄 Session: {output}",
                f"   ⏱️  Timing: {timing_file}",
                "",
                "🎭 To replay, use:",
                f"   {replay_command} {output} --timing {timing_file}",
            ]
        )
    else:
        print(f"✅ Recording saved to {output} (timing: {timing_file})")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the recorder command line; return the exit status."""
    parser = _build_parser_for(
        "recorder", "Record terminal sessions with timing data", _add_record_arguments
    )
    return _run(_record, parser.parse_intermixed_args(argv), "player")


if __name__ == "__main__":
    sys.exit(main())