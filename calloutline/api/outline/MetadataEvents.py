"""In-process metadata event bus."""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

DOCUMENT_CHANGED = "changed"
ACTIVE_DOCUMENT_CHANGED = "active-document-change"


@dataclass(frozen=True, eq=False)
class EventRef:
    """Handle returned by ``MetadataEvents.on``; pass to ``offref`` to unsubscribe."""

    name: str
    handler: Callable[..., Any]


class MetadataEvents:
    """Synchronous publish/subscribe for document metadata events.

    ``changed`` handlers receive ``(doc_id, origin)``; ``origin`` is None for
    host-detected changes and a NotificationToken for headings-changed
    notifications. ``active-document-change`` handlers receive ``(doc_id,)``.
    """

    def __init__(self) -> None:
        self._handlers: dict[str, list[EventRef]] = {}

    def on(self, name: str, handler: Callable[..., Any]) -> EventRef:
        ref = EventRef(name=name, handler=handler)
        self._handlers.setdefault(name, []).append(ref)
        return ref

    def offref(self, ref: EventRef) -> None:
        refs = self._handlers.get(ref.name, [])
        if ref in refs:
            refs.remove(ref)

    def trigger(self, name: str, *args: Any) -> None:
        """Call every handler registered for ``name``, in registration order."""
        for ref in list(self._handlers.get(name, [])):
            ref.handler(*args)

    def handler_count(self, name: str) -> int:
        return len(self._handlers.get(name, []))

    def on_document_changed(self, handler: Callable[[str, Any], Any]) -> EventRef:
        return self.on(DOCUMENT_CHANGED, handler)

    def on_active_document_changed(self, handler: Callable[[str], Any]) -> EventRef:
        return self.on(ACTIVE_DOCUMENT_CHANGED, handler)

    def trigger_document_changed(self, doc_id: str) -> None:
        self.trigger(DOCUMENT_CHANGED, doc_id, None)

    def trigger_active_document_changed(self, doc_id: str) -> None:
        self.trigger(ACTIVE_DOCUMENT_CHANGED, doc_id)

    def notify_headings_changed(self, doc_id: str, origin: Any) -> None:
        self.trigger(DOCUMENT_CHANGED, doc_id, origin)
