# tests/test_event_sinks.py

from __future__ import annotations

from pathlib import Path

from taskpool.connectors.event_sinks import ResultFileWriter, fan_out


def test_result_file_is_truncated_then_appended(tmp_path: Path) -> None:
    path = tmp_path / "out" / "result.txt"
    path.parent.mkdir()
    path.write_text("old run\n", encoding="utf-8")

    writer = ResultFileWriter(path)
    writer("[12:00:00] Worker #1 created - Status: ACTIVE")
    writer("[12:00:01] Created NORMAL Task #1001 - Status: PENDING")

    assert path.read_text(encoding="utf-8").splitlines() == [
        "[12:00:00] Worker #1 created - Status: ACTIVE",
        "[12:00:01] Created NORMAL Task #1001 - Status: PENDING",
    ]


def test_result_file_write_failure_is_swallowed(tmp_path: Path, caplog) -> None:
    # A directory where the file should be makes every open() fail.
    path = tmp_path / "result.txt"
    path.mkdir()

    writer = ResultFileWriter(path)
    writer("line")

    assert "result file" in caplog.text


def test_fan_out_isolates_failing_sink(caplog) -> None:
    got: list[str] = []

    def broken(line: str) -> None:
        raise OSError("disk full")

    notify = fan_out(broken, got.append)
    notify("hello")

    assert got == ["hello"]
    assert "Event sink" in caplog.text
