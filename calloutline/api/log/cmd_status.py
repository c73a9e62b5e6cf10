"""Log status command - show log file status after auto-pruning by retention."""

from collections.abc import Iterator

from ..config.CalloutlineConfig import CalloutlineConfig
from ..StageResult import StageResult
from . import LogStatusOutput
from .read_log_entries import read_log_entries


def cmd_status() -> StageResult:
    """Show log file status after auto-pruning expired entries by retention."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.1, "Loading configuration...")
        log_path = CalloutlineConfig.get_logfile_path()
        counts = {"debug": 0, "info": 0, "warn": 0, "error": 0}

        try:
            log_cfg = CalloutlineConfig.load().log
            yield (0.4, "Auto-pruning expired entries...")
            entries = read_log_entries(
                log_path,
                debug_retention_days=log_cfg.debug_retention_days,
                info_retention_days=log_cfg.info_retention_days,
                warning_retention_days=log_cfg.warning_retention_days,
                error_retention_days=log_cfg.error_retention_days,
            )
        except Exception as e:
            result_obj.result = f"Failed to read log: {e}"
            result_obj.output = LogStatusOutput(
                errors=[str(e)],
                warnings=[],
                log_path=str(log_path),
                size_bytes=0,
                entry_counts=counts,
                oldest_entry=None,
                newest_entry=None,
            ).model_dump(mode="python")
            result_obj.success = False
            yield (1.0, "Complete")
            return

        yield (0.8, f"Counting {len(entries)} entries...")
        for _, level, _ in entries:
            counts[level.lower()] += 1
        timestamps = sorted(entry_time.isoformat() for entry_time, _, _ in entries)

        result_obj.result = "Log file status"
        result_obj.output = LogStatusOutput(
            errors=[],
            warnings=[],
            log_path=str(log_path),
            size_bytes=log_path.stat().st_size if log_path.exists() else 0,
            entry_counts=counts,
            oldest_entry=timestamps[0] if timestamps else None,
            newest_entry=timestamps[-1] if timestamps else None,
        ).model_dump(mode="python")
        result_obj.success = True
        yield (1.0, "Complete")

    return StageResult(
        announce="Checking log status...",
        progress_callback=do_work,
    )
