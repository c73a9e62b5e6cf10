"""Position model (UNO: single model)."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Position:
    """A point in a document, all fields 0-based.

    ``offset`` counts characters from the document start, including one
    separator character per preceding line.
    """

    line: int
    column: int
    offset: int

    def to_dict(self) -> dict[str, int]:
        return {"line": self.line, "column": self.column, "offset": self.offset}
