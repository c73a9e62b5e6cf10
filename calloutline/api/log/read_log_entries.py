from datetime import datetime, timedelta, timezone
from pathlib import Path

from .LOG_PATTERN import LOG_PATTERN


def read_log_entries(
    log_path: Path,
    debug_retention_days: float = 0.5,
    info_retention_days: float = 1.0,
    warning_retention_days: float = 2.0,
    error_retention_days: float = 7.0,
) -> list[tuple[datetime, str, str]]:
    """Read log entries, dropping expired ones from the logfile.

    This is the prune-on-access contract: expired entries are removed when reading.
    Lines not in the unified format are kept and reported with level "INFO".

    Returns:
        List of (timestamp, level, line) tuples for the retained entries
    """
    entries: list[tuple[datetime, str, str]] = []

    if not log_path.exists():
        return entries

    now = datetime.now(timezone.utc)
    cutoffs = {
        "DEBUG": now - timedelta(days=debug_retention_days),
        "INFO": now - timedelta(days=info_retention_days),
        "WARN": now - timedelta(days=warning_retention_days),
        "ERROR": now - timedelta(days=error_retention_days),
    }

    kept_lines: list[str] = []

    for line in log_path.read_text(errors="ignore").splitlines():
        stripped = line.strip()
        if not stripped:
            continue

        match = LOG_PATTERN.match(stripped)
        if match:
            level = match.group(3).upper()
            try:
                entry_time = datetime.fromisoformat(match.group(1))
            except ValueError:
                entry_time = now
            if entry_time.tzinfo is None:
                entry_time = entry_time.replace(tzinfo=timezone.utc)

            if entry_time < cutoffs.get(level, now):
                continue  # Expired
        else:
            # Legacy format
            level = "INFO"
            entry_time = now

        kept_lines.append(stripped)
        entries.append((entry_time, level, stripped))

    # Write back non-expired entries (prune-on-access)
    log_path.write_text("\n".join(kept_lines) + "\n" if kept_lines else "", encoding="utf-8")
    return entries
