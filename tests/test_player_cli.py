import pytest

from sessreplay.player_cli import main
from sessreplay.session import Recorder

MESSAGE = "Integration test between recorder and player"


@pytest.fixture
def session(tmp_path):
    output = tmp_path / "session.log"
    timing = tmp_path / "session.log.timing"
    Recorder(str(output), str(timing)).record_command(["echo", MESSAGE], False)
    return str(output), str(timing)


def _run(capsys, argv):
    capsys.readouterr()
    status = main(argv)
    captured = capsys.readouterr()
    return status, captured.out, captured.err


@pytest.mark.parametrize(
    "flag, fragments",
    [
        ("--help", ["Replay recorded terminal sessions", "--timing", "--speed", "--dump", "--verbose"]),
        ("--version", ["0.1.0"]),
    ],
)
def test_informational_flags(capsys, flag, fragments):
    with pytest.raises(SystemExit) as info:
        main([flag])
    assert info.value.code == 0
    out = capsys.readouterr().out
    for fragment in fragments:
        assert fragment in out


def test_missing_files(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    status, _, err = _run(capsys, ["nonexistent_file.log"])
    assert status == 1
    assert "not found" in err


def test_missing_session_file_is_usage_error():
    with pytest.raises(SystemExit) as info:
        main([])
    assert info.value.code == 2


@pytest.mark.parametrize("explicit_timing", [True, False])
def test_dump_shows_content(session, capsys, explicit_timing):
    output, timing = session
    argv = [output, "--dump"] + (["--timing", timing] if explicit_timing else [])
    status, out, _ = _run(capsys, argv)
    assert status == 0
    assert MESSAGE in out


def test_speed_parameter_verbose(session, capsys):
    output, timing = session
    status, out, _ = _run(capsys, [output, "--timing", timing, "--speed", "10.0", "--verbose"])
    assert status == 0
    for fragment in ("Speed: 10x", "Timed replay", "Playback completed"):
        assert fragment in out


def test_verbose_dump_omits_speed(session, capsys):
    output, timing = session
    status, out, _ = _run(capsys, [output, "-t", timing, "-d", "-v"])
    assert status == 0
    assert "Session file" in out
    assert "Fast dump" in out
    assert "🚀 Speed" not in out


def test_timed_replay_of_mock_data(tmp_path, capsys):
    output = tmp_path / "mock.log"
    timing = tmp_path / "mock.timing"
    output.write_text("Hello Test!")
    timing.write_text("0.001 5\n0.001 6\n")
    status, out, _ = _run(capsys, [str(output), "-t", str(timing), "-s", "100"])
    assert status == 0
    assert "Hello Test!" in out
    assert "Speed: 100x" in out


def test_invalid_timing_data(tmp_path, capsys):
    output = tmp_path / "bad.log"
    timing = tmp_path / "bad.timing"
    output.write_text("")
    timing.write_text("invalid_delay 5\n")
    status, _, err = _run(capsys, [str(output), "--timing", str(timing)])
    assert status == 1
    assert "Invalid delay value 'invalid_delay'" in err