"""Notification origin token (UNO: single model)."""

from dataclasses import dataclass


@dataclass(frozen=True, eq=False)
class NotificationToken:
    """Marks a headings-changed notification as emitted by ``owner``.

    Created fresh for each notification; compared by identity.
    """

    owner: object
    doc_id: str
