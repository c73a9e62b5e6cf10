"""Watchdog-based vault watcher feeding document events to the outline engine."""

import time
from collections.abc import Iterator
from pathlib import Path

from watchdog.observers import Observer
from watchdog.observers.api import BaseObserver

from ..config.CalloutlineConfig import CalloutlineConfig
from ..log.append_log import append_log
from ..outline.MetadataEvents import MetadataEvents
from ..outline.OutlineEngine import OutlineEngine
from ._constants import LOG_DOMAIN
from ._EventHandler import _EventHandler
from .VaultDocumentSource import VaultDocumentSource
from .WatchCycle import WatchCycle


class VaultWatcher:
    """Watches a vault directory and turns file events into document events.

    The observer thread only records events. ``sync_once`` drains them on the
    calling thread, so the engine is never entered concurrently.
    """

    def __init__(
        self,
        source: VaultDocumentSource,
        events: MetadataEvents,
        engine: OutlineEngine,
        sync_interval_secs: float,
    ):
        self.source = source
        self.events = events
        self.engine = engine
        self.sync_interval_secs = sync_interval_secs
        self.handler = _EventHandler()
        self._observer: BaseObserver | None = None

    def start(self) -> None:
        if self._observer is not None:
            return
        observer = Observer()
        observer.schedule(self.handler, str(self.source.base_dir), recursive=True)
        observer.start()
        self._observer = observer
        append_log(CalloutlineConfig.get_logfile_path(), LOG_DOMAIN, "INFO", f"Watching {self.source.base_dir}")

    def stop(self) -> None:
        if self._observer is None:
            return
        self._observer.stop()
        self._observer.join()
        self._observer = None
        append_log(CalloutlineConfig.get_logfile_path(), LOG_DOMAIN, "INFO", f"Stopped watching {self.source.base_dir}")

    def _text_doc_id(self, path: str) -> str | None:
        doc_id = self.source.doc_id_for(Path(path))
        if doc_id is None or not self.source.is_text_document(doc_id):
            return None
        return doc_id

    def sync_once(self) -> WatchCycle:
        """Process the events accumulated since the previous call."""
        pending = self.handler.get_and_clear_events()
        cycle = WatchCycle()

        for path in pending.deleted:
            doc_id = self._text_doc_id(path)
            if doc_id is not None:
                self.engine.forget_document(doc_id)
                cycle.forgotten.append(doc_id)

        changed_paths = [*pending.modified, *pending.created]
        for src_path, dest_path in pending.moved:
            doc_id = self._text_doc_id(src_path)
            if doc_id is not None:
                self.engine.forget_document(doc_id)
                cycle.forgotten.append(doc_id)
            changed_paths.append(dest_path)

        for path in changed_paths:
            doc_id = self._text_doc_id(path)
            if doc_id is not None and doc_id not in cycle.changed and Path(path).exists():
                self.events.trigger_document_changed(doc_id)
                cycle.changed.append(doc_id)

        return cycle

    def run(self, max_cycles: int | None = None) -> Iterator[WatchCycle]:
        """Yield one WatchCycle per sync interval, forever unless ``max_cycles`` is set."""
        count = 0
        while max_cycles is None or count < max_cycles:
            time.sleep(self.sync_interval_secs)
            yield self.sync_once()
            count += 1
