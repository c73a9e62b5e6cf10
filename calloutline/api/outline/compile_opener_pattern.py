"""Callout opener pattern (UNO: single function)."""

import re
from collections.abc import Iterable
from functools import lru_cache

from ._constants import WHITESPACE_CHARS

# Continuation lines: "> " followed by at least one non-line-terminator character
CONTINUATION_PATTERN = re.compile(r"> [^\r\n\u2028\u2029]")

_WHITESPACE_CLASS = "[" + re.escape(WHITESPACE_CHARS) + "]"


def compile_opener_pattern(role_tags: Iterable[str]) -> re.Pattern[str]:
    """Compile the pattern for a callout opener line.

    An opener is the whole line ``> [!<tag>]`` with only whitespace after the
    closing bracket, where ``<tag>`` is one of ``role_tags``. Use with
    ``fullmatch``.
    """
    return _compile(tuple(role_tags))


@lru_cache(maxsize=16)
def _compile(role_tags: tuple[str, ...]) -> re.Pattern[str]:
    alternatives = "|".join(re.escape(tag) for tag in role_tags)
    return re.compile(rf"> \[!(?:{alternatives})\]{_WHITESPACE_CLASS}*")
