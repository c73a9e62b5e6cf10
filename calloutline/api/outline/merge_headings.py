"""Heading merge (UNO: single function)."""

from collections.abc import Iterable
from typing import Any


def merge_headings(real: Iterable[Any], synthetic: Iterable[Any]) -> list[Any]:
    """Combine real and synthetic headings in document order.

    Headings are ordered by ``span.start.offset``. The sort is stable over
    ``real`` followed by ``synthetic``, so on an exact tie a real heading
    comes before a synthetic one and each list keeps its own order.
    """
    return sorted([*real, *synthetic], key=lambda heading: heading.span.start.offset)
