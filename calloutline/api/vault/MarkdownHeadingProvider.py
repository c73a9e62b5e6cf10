"""Native markdown metadata provider."""

from ..outline.DocumentMetadata import DocumentMetadata
from ..outline.HeadingProvider import HeadingProvider
from .extract_native_headings import extract_native_headings
from .parse_frontmatter import parse_frontmatter
from .VaultDocumentSource import VaultDocumentSource


class MarkdownHeadingProvider(HeadingProvider):
    """Parses frontmatter and ``#`` headings of vault documents on each lookup."""

    def __init__(self, source: VaultDocumentSource):
        self.source = source

    def get_metadata(self, doc_id: str) -> DocumentMetadata | None:
        if not self.source.is_text_document(doc_id):
            return None
        try:
            text = self.source.read_text(doc_id)
        except (OSError, UnicodeDecodeError, ValueError):
            return None

        lines = text.split("\n")
        frontmatter, body_start = parse_frontmatter(lines)
        return DocumentMetadata(
            doc_id=doc_id,
            headings=tuple(extract_native_headings(lines, first_line=body_start)),
            frontmatter=frontmatter,
        )
