"""Filesystem event handler for the vault watcher."""

import threading

from watchdog.events import FileSystemEvent, FileSystemEventHandler

from .DocumentEvents import DocumentEvents


class _EventHandler(FileSystemEventHandler):
    """Handles filesystem events and accumulates them."""

    def __init__(self) -> None:
        super().__init__()
        self._modified: set[str] = set()
        self._created: set[str] = set()
        self._deleted: set[str] = set()
        self._moved: dict[str, str] = {}
        self._lock = threading.Lock()

    def on_modified(self, event: FileSystemEvent) -> None:
        if not event.is_directory:
            with self._lock:
                self._modified.add(str(event.src_path))

    def on_created(self, event: FileSystemEvent) -> None:
        if not event.is_directory:
            with self._lock:
                self._created.add(str(event.src_path))

    def on_deleted(self, event: FileSystemEvent) -> None:
        if not event.is_directory:
            with self._lock:
                path = str(event.src_path)
                self._deleted.add(path)
                self._modified.discard(path)
                self._created.discard(path)

    def on_moved(self, event: FileSystemEvent) -> None:
        if not event.is_directory:
            with self._lock:
                self._moved[str(event.src_path)] = str(event.dest_path)

    def get_and_clear_events(self) -> DocumentEvents:
        with self._lock:
            modified = sorted(self._modified)
            created = sorted(self._created)
            deleted = sorted(self._deleted)
            moved = list(self._moved.items())
            self._modified.clear()
            self._created.clear()
            self._deleted.clear()
            self._moved.clear()
        return DocumentEvents(modified=modified, created=created, deleted=deleted, moved=moved)
