"""Command-line tool that plays back a recorded terminal session."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from .recorder_cli import (
    VERSION,
    _add_common_options,
    _build_parser_for,
    _print_lines,
    _run,
    _timing_for,
)
from .session import Player, _format_number

__all__ = ["VERSION", "main"]


def _add_play_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("session_file", metavar="SESSION_FILE", help="Session file to replay")
    parser.add_argument(
        "-s",
        "--speed",
        type=float,
        default=1.0,
        help="Playback speed multiplier (1.0 = normal, 2.0 = 2x speed, 0.5 = half speed)",
    )
    parser.add_argument(
        "-d",
        "--dump",
        action="store_true",
        help="Fast dump mode (no timing delays, just show content)",
    )
    _add_common_options(parser)


def _play(options: argparse.Namespace) -> None:
    """Play the session described by ``options``; raise ReplayError on failure."""
    session_file = options.session_file
    timing_file = _timing_for(options.timing, session_file)

    if options.verbose:
        header = [f"🎬 Session file: {session_file}", f"⏱️  Timing file: {timing_file}"]
        if not options.dump:
            header.append(f"🚀 Speed: {_format_number(options.speed)}x")
        header += [f"📺 Mode: {'Fast dump' if options.dump else 'Timed replay'}", ""]
        _print_lines(header)

    player = Player(timing_file, session_file)

    if options.dump:
        notice, playback = "⚡ Fast dumping session content...", player.dump
    else:
        notice, playback = "🎭 Starting timed replay...", lambda: player.replay(options.speed)

    if options.verbose:
        _print_lines([notice, ""])
    playback()
    if options.verbose:
        _print_lines(["", "🎊 Playback completed!"])


def main(argv: Sequence[str] | None = None) -> int:
    """Run the player command line; return the exit status."""
    parser = _build_parser_for(
        "player", "Replay recorded terminal sessions with timing data", _add_play_arguments
    )
    return _run(_play, parser.parse_args(argv))


if __name__ == "__main__":
    sys.exit(main())