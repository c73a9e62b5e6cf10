"""Unit tests for calloutline.api.vault.VaultWatcher."""

import time

import pytest
from watchdog.events import (
    DirModifiedEvent,
    FileCreatedEvent,
    FileDeletedEvent,
    FileModifiedEvent,
    FileMovedEvent,
)

from calloutline.api.outline.MetadataEvents import MetadataEvents
from calloutline.api.outline.OutlineEngine import OutlineEngine
from calloutline.api.vault.MarkdownHeadingProvider import MarkdownHeadingProvider
from calloutline.api.vault.VaultDocumentSource import VaultDocumentSource
from calloutline.api.vault.VaultWatcher import VaultWatcher
from tests.conftest import CHAT_NOTE

pytestmark = pytest.mark.vault


@pytest.fixture
def note(vault_dir):
    path = vault_dir / "chat.md"
    path.write_text(CHAT_NOTE, encoding="utf-8")
    return path


@pytest.fixture
def engine(vault_dir):
    source = VaultDocumentSource(vault_dir)
    engine = OutlineEngine(source, MarkdownHeadingProvider(source), MetadataEvents())
    engine.start()
    yield engine
    engine.stop()


@pytest.fixture
def watcher(engine):
    return VaultWatcher(engine.source, engine.events, engine, sync_interval_secs=0.01)


def test_modified_document_is_reextracted(watcher, engine, note):
    watcher.handler.on_modified(FileModifiedEvent(str(note)))

    cycle = watcher.sync_once()

    assert cycle.changed == ["chat.md"]
    assert [h.text for h in engine.provider.get_headings("chat.md")] == [
        "Session",
        "How do I reverse a list?",
        "Answer",
        "Use reversed() or slicing with a negative step.",
    ]


def test_events_are_drained_once(watcher, note):
    watcher.handler.on_created(FileCreatedEvent(str(note)))
    watcher.handler.on_modified(FileModifiedEvent(str(note)))

    assert watcher.sync_once().changed == ["chat.md"]
    assert watcher.sync_once().is_empty()


def test_deleted_document_is_forgotten(watcher, engine, note):
    engine.update_document("chat.md")
    note.unlink()
    watcher.handler.on_deleted(FileDeletedEvent(str(note)))

    cycle = watcher.sync_once()

    assert cycle.forgotten == ["chat.md"]
    assert "chat.md" not in engine.cache


def test_moved_document_is_rekeyed(watcher, engine, note, vault_dir):
    engine.update_document("chat.md")
    target = vault_dir / "archive.md"
    note.rename(target)
    watcher.handler.on_moved(FileMovedEvent(str(note), str(target)))

    cycle = watcher.sync_once()

    assert cycle.forgotten == ["chat.md"]
    assert cycle.changed == ["archive.md"]
    assert "chat.md" not in engine.cache
    assert len(engine.cache.synthetic("archive.md")) == 2


def test_irrelevant_events_are_ignored(watcher, vault_dir, tmp_path):
    image = vault_dir / "image.png"
    image.write_bytes(b"\x89PNG")
    outside = tmp_path / "outside.md"
    outside.write_text(CHAT_NOTE, encoding="utf-8")

    watcher.handler.on_modified(FileModifiedEvent(str(image)))
    watcher.handler.on_modified(FileModifiedEvent(str(outside)))
    watcher.handler.on_modified(DirModifiedEvent(str(vault_dir)))

    assert watcher.sync_once().is_empty()


def test_run_yields_one_cycle_per_interval(watcher, note, monkeypatch):
    sleeps = []
    monkeypatch.setattr(time, "sleep", sleeps.append)
    watcher.handler.on_modified(FileModifiedEvent(str(note)))

    cycles = list(watcher.run(max_cycles=3))

    assert [cycle.changed for cycle in cycles] == [["chat.md"], [], []]
    assert sleeps == [0.01, 0.01, 0.01]


@pytest.mark.timeout(10)
def test_observer_start_and_stop(watcher):
    watcher.start()
    watcher.start()
    watcher.stop()
    watcher.stop()
