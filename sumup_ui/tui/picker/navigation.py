"""Navigation path through the organization/merchant hierarchy."""

from __future__ import annotations

import itertools
from dataclasses import dataclass, field
from typing import Optional, Sequence

from sumup_app.api import MembershipRecord, ResourceType

_level_ids = itertools.count(1)


@dataclass(eq=False)
class NavigationLevel:
    """One node on the path from the root to the displayed list."""

    items: list[MembershipRecord] = field(default_factory=list)
    parent_id: Optional[str] = None
    parent_type: Optional[ResourceType] = None
    parent_name: Optional[str] = None
    level_id: int = field(default_factory=lambda: next(_level_ids))
    # Sequence of the unfiltered listing for this level, while it is in flight.
    base_request: Optional[int] = None
    # Sequence of the newest search fetch for this level, while it is in flight.
    search_request: Optional[int] = None

    @property
    def is_root(self) -> bool:
        return self.parent_id is None

    @property
    def loading(self) -> bool:
        return self.base_request is not None or self.search_request is not None


class NavigationStack:
    """Back history of visited levels plus exactly one current level."""

    def __init__(self, root: NavigationLevel) -> None:
        self._history: list[NavigationLevel] = []
        self.current = root

    def __len__(self) -> int:
        return len(self._history)

    @property
    def can_pop(self) -> bool:
        return bool(self._history)

    @property
    def history(self) -> tuple[NavigationLevel, ...]:
        return tuple(self._history)

    def breadcrumb(self) -> list[str]:
        levels = [*self._history, self.current]
        return [level.parent_name for level in levels if level.parent_name]

    def find(self, level_id: int) -> Optional[NavigationLevel]:
        """Return the level with ``level_id`` if it is still on the stack."""
        for level in (self.current, *self._history):
            if level.level_id == level_id:
                return level
        return None

    def push(self, level: NavigationLevel) -> None:
        if level is self.current or any(level is seen for seen in self._history):
            raise ValueError("level is already on the navigation stack")
        self._history.append(self.current)
        self.current = level

    def pop(self) -> Optional[NavigationLevel]:
        """Restore the previous level; ``None`` when already at the root."""
        if not self._history:
            return None
        self.current = self._history.pop()
        return self.current

    def replace_current_items(self, items: Sequence[MembershipRecord]) -> None:
        self.current.items = list(items)
