"""In-memory collaborators for outline engine tests."""

from calloutline.api.outline._AbstractDocumentSource import _AbstractDocumentSource
from calloutline.api.outline.DocumentMetadata import DocumentMetadata
from calloutline.api.outline.HeadingProvider import HeadingProvider


class DictDocumentSource(_AbstractDocumentSource):
    """Documents held in a dict; an Exception value is raised on read."""

    def __init__(self, documents: dict[str, object]):
        self.documents = documents
        self.reads: list[str] = []

    def read_text(self, doc_id: str) -> str:
        self.reads.append(doc_id)
        value = self.documents[doc_id]
        if isinstance(value, Exception):
            raise value
        return str(value)

    def is_text_document(self, doc_id: str) -> bool:
        return doc_id.endswith(".md")


class StaticHeadingProvider(HeadingProvider):
    def __init__(self, metadata: dict[str, DocumentMetadata] | None = None):
        self.metadata = metadata or {}

    def get_metadata(self, doc_id: str) -> DocumentMetadata | None:
        return self.metadata.get(doc_id)
