"""State machine behind the interactive merchant picker.

The engine is pure: it consumes one event at a time and returns the effects
the caller must perform (arm a debounce timer, start a fetch, stop). It never
performs I/O itself, so every transition can be exercised synchronously.

Fetches are tagged with a monotonically increasing sequence number and the id
of the level they target. Each level tracks its unfiltered listing and its
newest search separately: a listing lands on its level for as long as that
level is on the stack, while search results are applied only when they are
the newest search for the current level. A slow, superseded response can
never overwrite a newer list, and cancelling a search never loses a listing.
"""

from __future__ import annotations

import itertools
import logging
from dataclasses import dataclass
from typing import Optional, Sequence, Union

from sumup_app.api import MembershipRecord, ResourceType
from sumup_ui.tui.picker.events import (
    KEY_BACKSPACE,
    KEY_CLEAR_LINE,
    KEY_DOWN,
    KEY_ENTER,
    KEY_ESCAPE,
    KEY_INTERRUPT,
    KEY_UP,
    DebounceFired,
    Effect,
    FetchCompleted,
    FetchRequest,
    IssueFetch,
    KeyPressed,
    PickerEvent,
    PickerOutcome,
    Terminate,
)
from sumup_ui.tui.picker.navigation import NavigationLevel, NavigationStack
from sumup_ui.tui.picker.search import DEBOUNCE_DELAY, SearchController

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BrowseMode:
    """Keys move the cursor and navigate the hierarchy."""


@dataclass(frozen=True)
class SearchMode:
    """Keys edit the search query."""


@dataclass(frozen=True)
class FailedMode:
    """A fetch failed; only quitting is possible."""

    error: Exception


@dataclass(frozen=True)
class TerminatedMode:
    outcome: PickerOutcome


PickerMode = Union[BrowseMode, SearchMode, FailedMode, TerminatedMode]


class PickerEngine:
    def __init__(
        self,
        root_items: Sequence[MembershipRecord],
        *,
        debounce_delay: float = DEBOUNCE_DELAY,
    ) -> None:
        self.navigation = NavigationStack(NavigationLevel(items=list(root_items)))
        self.search = SearchController(debounce_delay)
        self.displayed: list[MembershipRecord] = list(root_items)
        self.cursor = 0
        self.mode: PickerMode = BrowseMode()
        self._sequence = itertools.count(1)

    # ------------------------------------------------------------------
    # Read-only views
    # ------------------------------------------------------------------

    @property
    def current_level(self) -> NavigationLevel:
        return self.navigation.current

    @property
    def searching(self) -> bool:
        return isinstance(self.mode, SearchMode)

    @property
    def loading(self) -> bool:
        return self.navigation.current.loading

    @property
    def finished(self) -> bool:
        return isinstance(self.mode, TerminatedMode)

    @property
    def outcome(self) -> Optional[PickerOutcome]:
        if isinstance(self.mode, TerminatedMode):
            return self.mode.outcome
        return None

    @property
    def selected(self) -> Optional[MembershipRecord]:
        outcome = self.outcome
        return outcome.selected if outcome else None

    @property
    def fatal_error(self) -> Optional[Exception]:
        if isinstance(self.mode, FailedMode):
            return self.mode.error
        outcome = self.outcome
        return outcome.error if outcome else None

    @property
    def current_item(self) -> Optional[MembershipRecord]:
        if not self.displayed:
            return None
        return self.displayed[self.cursor]

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def handle(self, event: PickerEvent) -> list[Effect]:
        """Apply one event and return the effects to perform, in order."""
        if isinstance(self.mode, TerminatedMode):
            return []
        if isinstance(event, KeyPressed):
            return self._handle_key(event.key)
        if isinstance(event, DebounceFired):
            return self._handle_debounce(event.generation)
        if isinstance(event, FetchCompleted):
            return self._handle_fetch(event)
        raise TypeError(f"unsupported picker event: {event!r}")

    def _handle_key(self, key: str) -> list[Effect]:
        if key in (KEY_INTERRUPT, "q"):
            error = self.mode.error if isinstance(self.mode, FailedMode) else None
            return self._terminate(PickerOutcome(error=error))
        if isinstance(self.mode, FailedMode):
            return []
        if self.searching:
            return self._handle_search_key(key)
        return self._handle_browse_key(key)

    def _handle_browse_key(self, key: str) -> list[Effect]:
        if key == KEY_ESCAPE:
            if self.navigation.can_pop:
                self._pop_level()
            return []
        if key == "/":
            self.mode = SearchMode()
            return []
        if key == KEY_ENTER:
            return self._select_current()
        if key in (KEY_UP, "k"):
            self.cursor = max(0, self.cursor - 1)
            return []
        if key in (KEY_DOWN, "j"):
            self.cursor = max(0, min(len(self.displayed) - 1, self.cursor + 1))
            return []
        return []

    def _handle_search_key(self, key: str) -> list[Effect]:
        if key == KEY_ESCAPE:
            self._clear_search()
            self.mode = BrowseMode()
            return []
        if key == KEY_ENTER:
            # Keep the filtered results, release focus.
            self.mode = BrowseMode()
            return []
        new_query = _edit_query(self.search.query, key)
        if new_query is None:
            return []
        armed = self.search.on_query_changed(new_query)
        if armed is None:
            return []
        self.cursor = 0
        return [armed]

    def _handle_debounce(self, generation: int) -> list[Effect]:
        query = self.search.on_debounce_fired(generation)
        if query is None:
            return []
        level = self.navigation.current
        return [IssueFetch(self._new_request(level, query, search=True))]

    def _handle_fetch(self, event: FetchCompleted) -> list[Effect]:
        request = event.request
        level = self.navigation.find(request.level_id)
        if level is not None and request.sequence == level.base_request:
            level.base_request = None
            return self._apply_listing(level, event)
        if level is self.navigation.current and request.sequence == level.search_request:
            level.search_request = None
            return self._apply_search_results(level, event)
        logger.debug(
            "Discarding stale fetch result seq=%s level=%s (current level=%s)",
            request.sequence,
            request.level_id,
            self.navigation.current.level_id,
        )
        return []

    def _apply_listing(self, level: NavigationLevel, event: FetchCompleted) -> list[Effect]:
        if event.error is not None:
            return self._fail(event.error)
        if level is not self.navigation.current:
            # The user drilled on from search results before this listing landed.
            level.items = list(event.items)
            return []
        self.navigation.replace_current_items(event.items)
        if not self.search.last_sent_query:
            self._show(level.items)
        return []

    def _apply_search_results(self, level: NavigationLevel, event: FetchCompleted) -> list[Effect]:
        if event.error is not None:
            return self._fail(event.error)
        if not event.request.query:
            self.navigation.replace_current_items(event.items)
        self._show(event.items)
        return []

    def _show(self, items: Sequence[MembershipRecord]) -> None:
        self.displayed = list(items)
        if self.cursor >= len(self.displayed):
            self.cursor = max(0, len(self.displayed) - 1)

    def _fail(self, error: Exception) -> list[Effect]:
        logger.debug("Membership fetch failed: %s", error)
        self.mode = FailedMode(error)
        return []

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def _select_current(self) -> list[Effect]:
        item = self.current_item
        if item is None:
            return []
        if item.is_organization:
            return self._drill_into(item)
        return self._terminate(PickerOutcome(selected=item))

    def _drill_into(self, organization: MembershipRecord) -> list[Effect]:
        level = NavigationLevel(
            parent_id=organization.resource_id,
            parent_type=ResourceType.ORGANIZATION,
            parent_name=organization.resource_name,
        )
        self._forget_search()
        self.navigation.push(level)
        self.displayed = []
        self.cursor = 0
        return [IssueFetch(self._new_request(level, "", search=False))]

    def _pop_level(self) -> None:
        self._forget_search()
        level = self.navigation.pop()
        if level is None:
            return
        self.displayed = list(level.items)
        self.cursor = 0

    def _clear_search(self) -> None:
        self._forget_search()
        self.displayed = list(self.navigation.current.items)
        self.cursor = 0

    def _forget_search(self) -> None:
        # Only the search is dropped; an unfiltered listing still in flight lands normally.
        self.search.clear()
        self.navigation.current.search_request = None

    def _new_request(self, level: NavigationLevel, query: str, *, search: bool) -> FetchRequest:
        sequence = next(self._sequence)
        if search:
            level.search_request = sequence
        else:
            level.base_request = sequence
        return FetchRequest(
            sequence=sequence,
            level_id=level.level_id,
            query=query,
            parent_id=level.parent_id,
            parent_type=level.parent_type,
        )

    def _terminate(self, outcome: PickerOutcome) -> list[Effect]:
        self.mode = TerminatedMode(outcome)
        return [Terminate(outcome)]


def _edit_query(query: str, key: str) -> Optional[str]:
    """Apply a key to the query text; ``None`` when the key is not an edit."""
    if key == KEY_BACKSPACE:
        return query[:-1]
    if key == KEY_CLEAR_LINE:
        return ""
    if len(key) == 1 and key.isprintable():
        return query + key
    return None
