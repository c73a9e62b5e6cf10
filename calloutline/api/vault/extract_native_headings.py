"""Native markdown heading extractor (UNO: single function)."""

import re

from ..outline.HeadingRecord import HeadingRecord
from ..outline.Position import Position
from ..outline.Span import Span
from ._constants import FENCE_MARKERS

# ATX headings: 1-6 '#', whitespace, text, optional closing '#'s
ATX_HEADING_PATTERN = re.compile(r"^ {0,3}(#{1,6})[ \t]+(.*?)(?:[ \t]+#+)?[ \t]*$")


def extract_native_headings(lines: list[str], first_line: int = 0) -> list[HeadingRecord]:
    """Extract ATX headings with their spans.

    Args:
        lines: Document lines (split on newline)
        first_line: Index of the first line to scan, e.g. after frontmatter

    Returns:
        Heading records in document order; headings inside fenced code blocks are skipped
    """
    headings: list[HeadingRecord] = []
    offset = sum(len(line) + 1 for line in lines[:first_line])
    fence: str | None = None

    for line_num in range(first_line, len(lines)):
        line = lines[line_num]
        stripped = line.strip()

        if fence is not None:
            if stripped.startswith(fence):
                fence = None
        elif stripped.startswith(FENCE_MARKERS):
            fence = stripped[:3]
        else:
            match = ATX_HEADING_PATTERN.match(line.rstrip("\r"))
            if match and match.group(2).strip():
                headings.append(
                    HeadingRecord(
                        text=match.group(2).strip(),
                        level=len(match.group(1)),
                        span=Span(
                            start=Position(line=line_num, column=0, offset=offset),
                            end=Position(line=line_num, column=len(line), offset=offset + len(line)),
                        ),
                    )
                )

        offset += len(line) + 1

    return headings
