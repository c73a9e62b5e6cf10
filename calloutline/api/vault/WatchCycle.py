"""Watch cycle result model (UNO: single model)."""

from dataclasses import dataclass, field


@dataclass
class WatchCycle:
    """Documents handled by one ``VaultWatcher.sync_once`` call."""

    changed: list[str] = field(default_factory=list)
    forgotten: list[str] = field(default_factory=list)

    def is_empty(self) -> bool:
        return not (self.changed or self.forgotten)
