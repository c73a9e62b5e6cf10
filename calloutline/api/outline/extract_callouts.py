"""Callout heading extractor (UNO: single function)."""

from .compile_opener_pattern import CONTINUATION_PATTERN, compile_opener_pattern
from .HeadingRecord import HeadingRecord
from .OutlineConfig import OutlineConfig
from .Position import Position
from .Span import Span
from .truncate_heading import truncate_heading
from ._constants import QUOTE_PREFIX, WHITESPACE_CHARS


def extract_callouts(text: str, config: OutlineConfig | None = None) -> list[HeadingRecord]:
    """Extract a heading for each chat callout block in ``text``.

    A block is an opener line (``> [!chat-r]`` or ``> [!chat-l]``) followed by
    one or more ``> `` quoted lines. The quoted lines, joined with single
    spaces, become the heading text; the span runs from the start of the
    opener to the end of the last quoted line.

    Args:
        text: Document content
        config: Extraction settings, defaults when omitted

    Returns:
        Heading records in document order
    """
    if config is None:
        config = OutlineConfig()

    opener = compile_opener_pattern(config.role_tags)
    lines = text.split("\n")
    headings: list[HeadingRecord] = []
    offset = 0
    i = 0

    while i < len(lines):
        line = lines[i]
        if not opener.fullmatch(line):
            offset += len(line) + 1
            i += 1
            continue

        parts: list[str] = []
        end_line = i
        end_col = len(line)
        j = i + 1
        while j < len(lines) and CONTINUATION_PATTERN.match(lines[j]):
            parts.append(lines[j][len(QUOTE_PREFIX) :])
            end_line = j
            end_col = len(lines[j])
            j += 1

        block_length = sum(len(lines[k]) + 1 for k in range(i, end_line + 1))

        if parts:
            joined = " ".join(parts).strip(WHITESPACE_CHARS)
            heading_text = truncate_heading(joined, config.max_heading_length, config.ellipsis)
            headings.append(
                HeadingRecord(
                    text=heading_text,
                    level=config.heading_level,
                    span=Span(
                        start=Position(line=i, column=0, offset=offset),
                        # Last block line's separator is excluded
                        end=Position(line=end_line, column=end_col, offset=offset + block_length - 1),
                    ),
                )
            )

        offset += block_length
        i = end_line + 1

    return headings
