import time

import pytest

from sessreplay.example import OUTPUT_FILE, TIMING_FILE, main


def test_example_runs_and_reports(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    started = time.monotonic()
    status = main([])
    elapsed = time.monotonic() - started
    assert status == 0
    out = capsys.readouterr().out
    assert "Recording a simple command" in out
    assert "Recording complete" in out
    assert "Now replaying the session" in out
    assert "Replay complete" in out
    assert "Hello from sessreplay!" in out
    assert "This is a recorded session" in out
    for mark in ("🎥", "✅", "🎬", "🎉"):
        assert mark in out
    assert 0.1 < elapsed < 30


def test_example_leaves_no_files(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    assert main([]) == 0
    capsys.readouterr()
    assert not (tmp_path / OUTPUT_FILE).exists()
    assert not (tmp_path / TIMING_FILE).exists()


def test_example_runs_repeatedly(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    for _ in range(2):
        assert main([]) == 0
        out = capsys.readouterr().out
        assert out.count("Hello from sessreplay!") >= 2
        assert "Replay complete" in out


def test_example_rejects_arguments(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    with pytest.raises(SystemExit) as info:
        main(["--unexpected"])
    assert info.value.code == 2