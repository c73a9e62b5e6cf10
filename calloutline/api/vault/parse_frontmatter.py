"""Frontmatter parser (UNO: single function)."""

from typing import Any

import yaml

from ._constants import FRONTMATTER_DELIMITER


def parse_frontmatter(lines: list[str]) -> tuple[dict[str, Any], int]:
    """Parse a leading ``---`` YAML block.

    Args:
        lines: Document lines

    Returns:
        Tuple of (frontmatter mapping, number of lines the block occupies).
        Documents without a closed block, or whose block is not a YAML
        mapping, yield ``({}, 0)``.
    """
    if not lines or lines[0].rstrip() != FRONTMATTER_DELIMITER:
        return {}, 0

    for index in range(1, len(lines)):
        if lines[index].rstrip() == FRONTMATTER_DELIMITER:
            try:
                data = yaml.safe_load("\n".join(lines[1:index]))
            except yaml.YAMLError:
                return {}, 0
            if data is None:
                data = {}
            if not isinstance(data, dict):
                return {}, 0
            return data, index + 1

    return {}, 0
