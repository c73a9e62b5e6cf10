"""Document metadata model (UNO: single model)."""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class DocumentMetadata:
    """Per-document metadata served by a HeadingProvider.

    ``headings`` holds heading-like records exposing ``span.start.offset``.
    """

    doc_id: str
    headings: tuple[Any, ...] = ()
    frontmatter: dict[str, Any] = field(default_factory=dict)
