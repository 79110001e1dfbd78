"""Small demonstration: record a command, then play it back."""

from __future__ import annotations

import argparse
import contextlib
import os
import sys
import time
from collections.abc import Sequence

from .session import Player, Recorder, ReplayError

OUTPUT_FILE = "example_session.log"
TIMING_FILE = "example_session.timing"


def main(argv: Sequence[str] | None = None) -> int:
    """Record an echo command in the current directory, replay it, then clean up."""
    parser = argparse.ArgumentParser(
        prog="sessreplay-example", description="Record a simple command and replay it"
    )
    parser.parse_args(argv)

    try:
        print("🎥 Recording a simple command...", flush=True)

        recorder = Recorder(OUTPUT_FILE, TIMING_FILE)
        recorder.record_command(
            ["echo", "Hello from sessreplay!", "This is a recorded session."]
        )

        print("\n✅ Recording complete!", flush=True)
        time.sleep(1.0)

        print("\n🎬 Now replaying the session...", flush=True)
        time.sleep(0.5)

        player = Player(TIMING_FILE, OUTPUT_FILE)
        player.replay(1.0)

        print("🎉 Replay complete!")
    except ReplayError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    finally:
        for path in (OUTPUT_FILE, TIMING_FILE):
            with contextlib.suppress(OSError):
                os.remove(path)
    return 0


if __name__ == "__main__":
    sys.exit(main())