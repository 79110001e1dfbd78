"""Combined command line for recording and playing back terminal sessions."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from .player_cli import _add_play_arguments, _play
from .recorder_cli import _add_record_arguments, _record
from .session import ReplayError

VERSION = "0.1.0"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="replay", description="Record and replay terminal sessions with timing data"
    )
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {VERSION}")
    subcommands = parser.add_subparsers(dest="subcommand", required=True)
    record = subcommands.add_parser(
        "record",
        help="Record a command execution with timing data",
        description="Record a command execution with timing data",
    )
    _add_record_arguments(record)
    play = subcommands.add_parser(
        "play",
        help="Replay a recorded session with timing data",
        description="Replay a recorded session with timing data",
    )
    _add_play_arguments(play)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the combined command line; return the exit status."""
    options = _build_parser().parse_args(argv)
    try:
        if options.subcommand == "record":
            _record(options, "replay play")
        else:
            _play(options)
    except ReplayError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())