"""Vault watch API command.

CLI: calloutline vault watch
"""

from collections.abc import Iterator
from pathlib import Path
from typing import Any

from ..config.CalloutlineConfig import CalloutlineConfig
from ..outline.MetadataEvents import MetadataEvents
from ..outline.NotificationToken import NotificationToken
from ..outline.OutlineEngine import OutlineEngine
from ..StageResult import StageResult
from . import VaultWatchOutput
from .MarkdownHeadingProvider import MarkdownHeadingProvider
from .VaultDocumentSource import VaultDocumentSource
from .VaultWatcher import VaultWatcher


def _failure(result_obj: StageResult, base_dir: str, message: str) -> None:
    result_obj.result = f"Vault watch failed: {message}"
    result_obj.output = VaultWatchOutput(
        errors=[message],
        warnings=[],
        base_dir=base_dir,
        cycles=0,
        documents_updated=[],
        documents_forgotten=[],
        success=False,
    ).model_dump(mode="python")
    result_obj.success = False


def cmd_watch(cycles: int | None = None, active: str | None = None) -> StageResult:
    """Watch the vault and re-extract callout headings of changed documents.

    Args:
        cycles: Number of sync cycles to run, None to run until interrupted
        active: Vault-relative document to parse once at startup
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.0, "Loading configuration...")
        try:
            config = CalloutlineConfig.load()
            base_dir = Path(config.vault.base_dir)
            if not base_dir.is_dir():
                raise ValueError(f"Vault directory not found: {base_dir}")
        except ValueError as e:
            _failure(result_obj, "", str(e))
            return

        source = VaultDocumentSource(base_dir, config.outline.extensions)
        events = MetadataEvents()
        engine = OutlineEngine(source, MarkdownHeadingProvider(source), events, config.outline)
        updated: list[str] = []
        forgotten: list[str] = []

        def on_changed(doc_id: str, origin: Any = None) -> None:
            if isinstance(origin, NotificationToken) and origin.owner is engine:
                updated.append(doc_id)

        consumer_ref = events.on_document_changed(on_changed)
        engine.start(active_document=active)
        watcher = VaultWatcher(source, events, engine, config.watch.sync_interval_secs)
        completed = 0
        try:
            watcher.start()
            yield (0.05, f"Watching {base_dir}...")
            for cycle in watcher.run(max_cycles=cycles):
                completed += 1
                forgotten.extend(cycle.forgotten)
                if cycle.is_empty():
                    continue
                fraction = completed / cycles if cycles else 0.5
                for doc_id in cycle.changed:
                    count = len(engine.cache.synthetic(doc_id))
                    yield (fraction, f"Updated {doc_id}: {count} callout heading(s)")
                for doc_id in cycle.forgotten:
                    yield (fraction, f"Forgot {doc_id}")
        except KeyboardInterrupt:
            pass
        except OSError as e:
            _failure(result_obj, str(base_dir), f"Cannot watch {base_dir}: {e}")
            return
        finally:
            watcher.stop()
            engine.stop()
            events.offref(consumer_ref)

        result_obj.result = f"Watched {completed} cycle(s), {len(updated)} update(s)"
        result_obj.output = VaultWatchOutput(
            errors=[],
            warnings=[],
            base_dir=str(base_dir),
            cycles=completed,
            documents_updated=updated,
            documents_forgotten=forgotten,
            success=True,
        ).model_dump(mode="python")
        result_obj.success = True
        yield (1.0, "Complete")

    return StageResult(
        announce="Watching vault for callout changes...",
        progress_callback=do_work,
    )
