"""Abstract base class for document text access."""

from abc import ABC, abstractmethod


class _AbstractDocumentSource(ABC):
    """Reads document text by document identity."""

    @abstractmethod
    def read_text(self, doc_id: str) -> str:
        """Return the current text of ``doc_id``.

        Raises:
            OSError, ValueError: If the document cannot be read
        """
        pass

    @abstractmethod
    def is_text_document(self, doc_id: str) -> bool:
        """Whether ``doc_id`` is a document callouts can be extracted from."""
        pass
