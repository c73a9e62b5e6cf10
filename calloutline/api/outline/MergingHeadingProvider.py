"""Heading provider layering cached callout headings over another provider."""

from dataclasses import replace

from .DocumentMetadata import DocumentMetadata
from .HeadingCache import HeadingCache
from .HeadingProvider import HeadingProvider


class MergingHeadingProvider(HeadingProvider):
    """Wraps ``inner`` and merges in the callout headings held by ``cache``.

    Callers see the inner provider's results unchanged except for the
    additional headings.
    """

    def __init__(self, inner: HeadingProvider, cache: HeadingCache):
        self.inner = inner
        self.cache = cache

    def get_metadata(self, doc_id: str) -> DocumentMetadata | None:
        metadata = self.inner.get_metadata(doc_id)
        if metadata is None or not self.cache.synthetic(doc_id):
            return metadata
        return replace(metadata, headings=tuple(self.cache.get(doc_id, metadata.headings)))
