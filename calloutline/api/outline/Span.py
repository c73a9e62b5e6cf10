"""Span model (UNO: single model)."""

from dataclasses import dataclass

from .Position import Position


@dataclass(frozen=True)
class Span:
    """Text range covered by a heading."""

    start: Position
    end: Position

    def to_dict(self) -> dict[str, dict[str, int]]:
        return {"start": self.start.to_dict(), "end": self.end.to_dict()}
