"""Heading truncation (UNO: single function)."""

from ._constants import DEFAULT_ELLIPSIS, DEFAULT_MAX_HEADING_LENGTH


def truncate_heading(text: str, max_length: int = DEFAULT_MAX_HEADING_LENGTH, ellipsis: str = DEFAULT_ELLIPSIS) -> str:
    """Shorten heading text to at most ``max_length`` characters.

    Text longer than ``max_length`` keeps its first ``max_length - len(ellipsis)``
    characters followed by ``ellipsis``; shorter text is returned unchanged.
    """
    if len(text) <= max_length:
        return text
    return text[: max_length - len(ellipsis)] + ellipsis
