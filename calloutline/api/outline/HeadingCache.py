"""Per-document cache of callout headings."""

from collections.abc import Iterable, Iterator
from typing import Any

from .HeadingRecord import HeadingRecord
from .merge_headings import merge_headings


class HeadingCache:
    """Maps document identity to the last extracted callout headings.

    Entries are replaced wholesale on every ``put``; a reader never sees a
    partially written entry.
    """

    def __init__(self) -> None:
        self._entries: dict[str, tuple[HeadingRecord, ...]] = {}

    def put(self, doc_id: str, headings: Iterable[HeadingRecord]) -> None:
        """Replace the stored headings for ``doc_id`` (last write wins)."""
        self._entries[doc_id] = tuple(headings)

    def get(self, doc_id: str, real_headings: Iterable[Any]) -> list[Any]:
        """Return ``real_headings`` merged with the cached headings for ``doc_id``.

        Always returns a new list; unknown documents yield a copy of
        ``real_headings``.
        """
        synthetic = self._entries.get(doc_id)
        if not synthetic:
            return list(real_headings)
        return merge_headings(real_headings, synthetic)

    def synthetic(self, doc_id: str) -> tuple[HeadingRecord, ...]:
        return self._entries.get(doc_id, ())

    def drop(self, doc_id: str) -> None:
        self._entries.pop(doc_id, None)

    def clear(self) -> None:
        self._entries.clear()

    def documents(self) -> Iterator[str]:
        return iter(list(self._entries))

    def __contains__(self, doc_id: object) -> bool:
        return doc_id in self._entries

    def __len__(self) -> int:
        return len(self._entries)
