# sessreplay

Run a command, record what it writes to standard output together with timing
data, and play the recording back later: at its original pace, faster or
slower, or all at once. The timing file holds one `delay size` line per chunk
of output, where `delay` is the number of seconds since the previous chunk
(six decimal places) and `size` is the chunk's length in bytes.

## Installation

```
pip install .
```

No third-party libraries are needed.

## Command line

### Recording

```
sessreplay-recorder echo "Hello, World!"
sessreplay-recorder --output demo.log --timing demo.timing --verbose printf "a\nb\n"
```

Options:

- `-o`, `--output FILE` – where the session output goes (default `session.log`).
- `-t`, `--timing FILE` – where the timing data goes (default: the output file
  name with `.timing` appended).
- `-p`, `--plain-text` – clean each chunk with `clean_for_display` before
  saving it.
- `-v`, `--verbose` – print the settings before recording and a summary after.
- `-V`, `--version` – print the version and exit.

Options may also follow the command and its arguments. While recording, the
command's output is shown on the terminal as it arrives. Only standard output
is recorded; standard error is discarded.

### Playback

```
sessreplay-player demo.log --timing demo.timing
sessreplay-player demo.log --timing demo.timing --speed 2.0
sessreplay-player demo.log --dump
```

Options:

- `-t`, `--timing FILE` – timing file (default: the session file name with
  `.timing` appended).
- `-s`, `--speed N` – speed multiplier: `2.0` is twice as fast, `0.5` half as
  fast (default `1.0`).
- `-d`, `--dump` – print the whole session at once, without delays, cleaned
  with `clean_for_display`.
- `-v`, `--verbose` – print the settings and a closing message.
- `-V`, `--version` – print the version and exit.

### Combined tool

`sessreplay` offers both jobs as subcommands with the same options:

```
sessreplay record --output demo.log echo "Hello"
sessreplay play demo.log --speed 5
```

All tools print `Error: ...` on standard error and exit with status 1 when
recording or playback fails.

### Demonstration

```
sessreplay-example
```

Records an `echo` into `example_session.log` and `example_session.timing` in
the current directory, replays it at normal speed, then removes both files.

## Library

```python
from sessreplay.session import Player, Recorder, ReplayError, clean_for_display

recorder = Recorder("session.log", "session.log.timing")
recorder.record_command(["echo", "Hello, World!"], plain_text=False)

player = Player("session.log.timing", "session.log")
player.replay(1.0)   # timed playback
player.dump()        # whole session at once

print(clean_for_display("?2004hHello?2004l"))  # -> "Hello"
```

- `Recorder.record_command(command, plain_text=False)` takes a program name or a
  sequence of program and arguments. It raises `ReplayError` when the command
  cannot be started or exits with a non-zero status.
- `Player(timing_file, typescript_file)` raises `ReplayError` when either file
  is missing.
- `Player.replay(speed_multiplier=1.0)` raises `ReplayError` on a malformed
  delay or size; timing lines with fewer than two fields are skipped, delays
  under 0.1 ms are not waited for, and playback stops quietly when the output
  file holds less data than a timing line asks for.
- `Player.dump()` raises `ReplayError` when the session file is not valid UTF-8.
- `clean_for_display(text)` removes bracketed-paste sequences (`ESC[?2004h`,
  `?2004l` and the like) and control characters other than tab, newline and
  carriage return, while keeping colour and cursor escape sequences.

## Limitations

Commands run with pipes, not in a pseudo-terminal, so programs that change
their output when not attached to a terminal behave that way while recorded,
and standard error is not captured.