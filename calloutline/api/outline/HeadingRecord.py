"""Heading record model (UNO: single model)."""

from dataclasses import dataclass
from typing import Any

from .Span import Span


@dataclass(frozen=True)
class HeadingRecord:
    """A heading as seen by outline consumers."""

    text: str
    level: int
    span: Span

    def to_dict(self) -> dict[str, Any]:
        return {"text": self.text, "level": self.level, "span": self.span.to_dict()}
