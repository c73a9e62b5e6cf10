"""Unit tests for calloutline.api.outline.MergingHeadingProvider."""

import pytest

from calloutline.api.outline.DocumentMetadata import DocumentMetadata
from calloutline.api.outline.extract_callouts import extract_callouts
from calloutline.api.outline.HeadingCache import HeadingCache
from calloutline.api.outline.HeadingRecord import HeadingRecord
from calloutline.api.outline.MergingHeadingProvider import MergingHeadingProvider
from calloutline.api.outline.Position import Position
from calloutline.api.outline.Span import Span
from tests.unit._fakes import StaticHeadingProvider

pytestmark = pytest.mark.outline


def _native(text: str, line: int, offset: int) -> HeadingRecord:
    start = Position(line=line, column=0, offset=offset)
    return HeadingRecord(text=text, level=2, span=Span(start=start, end=start))


@pytest.fixture
def native_metadata() -> DocumentMetadata:
    return DocumentMetadata(
        doc_id="chat.md",
        headings=(_native("Intro", 0, 0), _native("Later", 9, 120)),
        frontmatter={"tags": ["chat"]},
    )


def test_without_callouts_returns_inner_metadata(native_metadata):
    provider = MergingHeadingProvider(StaticHeadingProvider({"chat.md": native_metadata}), HeadingCache())

    assert provider.get_metadata("chat.md") is native_metadata


def test_merges_callouts_into_copy(native_metadata):
    cache = HeadingCache()
    callouts = extract_callouts("# Intro\n> [!chat-r]\n> Question\n")
    cache.put("chat.md", callouts)
    provider = MergingHeadingProvider(StaticHeadingProvider({"chat.md": native_metadata}), cache)

    merged = provider.get_metadata("chat.md")

    assert merged is not native_metadata
    assert [h.text for h in merged.headings] == ["Intro", "Question", "Later"]
    assert merged.frontmatter is native_metadata.frontmatter
    assert [h.text for h in native_metadata.headings] == ["Intro", "Later"]


def test_unknown_document_passes_through():
    cache = HeadingCache()
    cache.put("ghost.md", extract_callouts("> [!chat-r]\n> Boo\n"))
    provider = MergingHeadingProvider(StaticHeadingProvider(), cache)

    assert provider.get_metadata("ghost.md") is None
    assert provider.get_headings("ghost.md") == []


def test_get_headings_returns_merged_list(native_metadata):
    cache = HeadingCache()
    cache.put("chat.md", extract_callouts("\n" * 3 + "> [!chat-l]\n> Answer\n"))
    provider = MergingHeadingProvider(StaticHeadingProvider({"chat.md": native_metadata}), cache)

    assert [h.text for h in provider.get_headings("chat.md")] == ["Intro", "Answer", "Later"]
