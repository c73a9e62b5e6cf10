"""Abstract heading lookup."""

from abc import ABC, abstractmethod
from typing import Any

from .DocumentMetadata import DocumentMetadata


class HeadingProvider(ABC):
    """Serves per-document metadata, including the document's headings."""

    @abstractmethod
    def get_metadata(self, doc_id: str) -> DocumentMetadata | None:
        """Return metadata for ``doc_id``, None if the document is unknown."""
        pass

    def get_headings(self, doc_id: str) -> list[Any]:
        """Return the headings of ``doc_id`` in document order."""
        metadata = self.get_metadata(doc_id)
        if metadata is None:
            return []
        return list(metadata.headings)
