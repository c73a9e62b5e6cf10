"""Outline engine: keeps callout headings in sync with document changes."""

from typing import Any

from ..config.CalloutlineConfig import CalloutlineConfig
from ..log.append_log import append_log
from ._AbstractDocumentSource import _AbstractDocumentSource
from ._constants import LOG_DOMAIN
from .extract_callouts import extract_callouts
from .HeadingCache import HeadingCache
from .HeadingProvider import HeadingProvider
from .MergingHeadingProvider import MergingHeadingProvider
from .MetadataEvents import EventRef, MetadataEvents
from .NotificationToken import NotificationToken
from .OutlineConfig import OutlineConfig


def _outline_log(level: str, message: str) -> None:
    append_log(CalloutlineConfig.get_logfile_path(), LOG_DOMAIN, level, message)


class OutlineEngine:
    """Re-extracts callout headings on document events and serves merged headings.

    ``start()`` subscribes to the host's events and returns the
    MergingHeadingProvider the host should use in place of ``inner``.
    ``stop()`` unsubscribes and clears the cache.
    """

    def __init__(
        self,
        source: _AbstractDocumentSource,
        inner: HeadingProvider,
        events: MetadataEvents,
        config: OutlineConfig | None = None,
        cache: HeadingCache | None = None,
    ):
        self.source = source
        self.events = events
        self.config = config if config is not None else OutlineConfig()
        self.cache = cache if cache is not None else HeadingCache()
        self.provider = MergingHeadingProvider(inner, self.cache)
        self._refs: list[EventRef] = []
        self._emitting: NotificationToken | None = None

    @property
    def started(self) -> bool:
        return bool(self._refs)

    def start(self, active_document: str | None = None) -> MergingHeadingProvider:
        """Subscribe to document events and parse the active document once."""
        if not self._refs:
            self._refs = [
                self.events.on_document_changed(self._on_document_changed),
                self.events.on_active_document_changed(self._on_active_document_changed),
            ]
            _outline_log("DEBUG", "Outline engine started")
        if active_document:
            self.update_document(active_document)
        return self.provider

    def stop(self) -> None:
        for ref in self._refs:
            self.events.offref(ref)
        self._refs = []
        self.cache.clear()
        _outline_log("DEBUG", "Outline engine stopped")

    def update_document(self, doc_id: str) -> bool:
        """Re-extract callout headings for ``doc_id`` and notify consumers.

        The cache entry is replaced only after the text was read and fully
        scanned. Read and notification failures are logged, never raised.

        Returns:
            True if the cache entry was replaced
        """
        if not self.source.is_text_document(doc_id):
            return False

        try:
            text = self.source.read_text(doc_id)
            headings = extract_callouts(text, self.config)
        except Exception as exc:
            _outline_log("WARN", f"Callout extraction skipped for {doc_id}: {exc}")
            return False

        self.cache.put(doc_id, headings)
        _outline_log("DEBUG", f"Extracted {len(headings)} callout heading(s) from {doc_id}")

        self._emitting = NotificationToken(owner=self, doc_id=doc_id)
        try:
            self.events.notify_headings_changed(doc_id, self._emitting)
        except Exception as exc:
            _outline_log("ERROR", f"Headings-changed notification failed for {doc_id}: {exc}")
        finally:
            self._emitting = None
        return True

    def forget_document(self, doc_id: str) -> None:
        self.cache.drop(doc_id)

    def _on_document_changed(self, doc_id: str, origin: Any = None) -> None:
        # Triggers raised while our own notification is out are dropped
        if self._emitting is not None:
            return
        if isinstance(origin, NotificationToken) and origin.owner is self:
            return
        self.update_document(doc_id)

    def _on_active_document_changed(self, doc_id: str | None) -> None:
        if doc_id and self._emitting is None:
            self.update_document(doc_id)
