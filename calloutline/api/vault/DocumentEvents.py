"""Document events dataclass for vault watching."""

from dataclasses import dataclass, field


@dataclass
class DocumentEvents:
    """Accumulated filesystem events from the vault watcher.

    All paths are absolute paths as strings.
    """

    modified: list[str] = field(default_factory=list)
    created: list[str] = field(default_factory=list)
    deleted: list[str] = field(default_factory=list)
    moved: list[tuple[str, str]] = field(default_factory=list)

    def is_empty(self) -> bool:
        """Check if there are any events."""
        return not (self.modified or self.created or self.deleted or self.moved)

    def total_count(self) -> int:
        return len(self.modified) + len(self.created) + len(self.deleted) + len(self.moved)
