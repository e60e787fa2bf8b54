"""Search query state and debounce bookkeeping."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from sumup_ui.tui.picker.events import ArmDebounce

DEBOUNCE_DELAY = 0.5


@dataclass
class SearchState:
    query: str = ""
    last_sent_query: str = ""
    pending: bool = False
    # Incremented for every armed timer; only the newest one may fire a fetch.
    generation: int = 0


class SearchController:
    """Owns the typed query and decides when a settled query should be sent."""

    def __init__(self, delay: float = DEBOUNCE_DELAY) -> None:
        self.delay = delay
        self.state = SearchState()

    @property
    def query(self) -> str:
        return self.state.query

    @property
    def last_sent_query(self) -> str:
        return self.state.last_sent_query

    @property
    def pending(self) -> bool:
        return self.state.pending

    def on_query_changed(self, new_query: str) -> Optional[ArmDebounce]:
        """Record ``new_query`` and arm a debounce timer when it changed."""
        if new_query == self.state.query:
            return None
        self.state.query = new_query
        self.state.pending = True
        self.state.generation += 1
        return ArmDebounce(generation=self.state.generation, delay=self.delay)

    def on_debounce_fired(self, generation: int) -> Optional[str]:
        """Return the query to send, or ``None`` when the firing is stale or redundant."""
        if not self.state.pending or generation != self.state.generation:
            return None
        self.state.pending = False
        query = self.state.query.strip()
        if query == self.state.last_sent_query:
            return None
        self.state.last_sent_query = query
        return query

    def clear(self) -> None:
        """Drop the query; timers still in flight become stale."""
        self.state.query = ""
        self.state.last_sent_query = ""
        self.state.pending = False
