"""Unit tests for calloutline.api.log."""

from datetime import datetime, timedelta, timezone

from calloutline.api.log.append_log import append_log
from calloutline.api.log.cmd_status import cmd_status
from calloutline.api.log.read_log_entries import read_log_entries
from tests.conftest import run_cmd


def test_append_log_format(tmp_path):
    logfile = tmp_path / "logfile"
    append_log(logfile, "outline", "INFO", "hello")

    line = logfile.read_text(encoding="utf-8").strip()
    assert line.endswith("[outline] INFO: hello")
    assert line.startswith("[")


def test_append_log_never_raises(tmp_path):
    append_log(tmp_path / "missing" / "logfile", "outline", "INFO", "lost")


def test_read_log_entries_prunes_expired(tmp_path):
    logfile = tmp_path / "logfile"
    old = (datetime.now(timezone.utc) - timedelta(days=3)).isoformat()
    logfile.write_text(
        f"[{old}] [outline] INFO: expired\n[{old}] [outline] ERROR: still kept\nlegacy line\n",
        encoding="utf-8",
    )

    entries = read_log_entries(logfile)

    assert [level for _, level, _ in entries] == ["ERROR", "INFO"]
    assert "expired" not in logfile.read_text(encoding="utf-8")


def test_read_log_entries_missing_file(tmp_path):
    assert read_log_entries(tmp_path / "logfile") == []


def test_cmd_status_counts(calloutline_home):
    logfile = calloutline_home / "logfile"
    append_log(logfile, "outline", "WARN", "one")
    append_log(logfile, "vault", "INFO", "two")
    append_log(logfile, "vault", "INFO", "three")

    result = run_cmd(cmd_status)

    assert result.success is True
    assert result.output["entry_counts"] == {"debug": 0, "info": 2, "warn": 1, "error": 0}
    assert result.output["oldest_entry"] <= result.output["newest_entry"]
    assert result.output["size_bytes"] > 0


def test_cmd_status_without_config():
    result = run_cmd(cmd_status)

    assert result.success is False
    assert result.output["errors"]
