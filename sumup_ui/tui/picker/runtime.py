"""Asyncio driver that executes the effects requested by a PickerEngine."""

from __future__ import annotations

import asyncio
import logging
from typing import Callable, Optional

from sumup_app.api import ItemSource
from sumup_ui.tui.picker.engine import PickerEngine
from sumup_ui.tui.picker.events import (
    ArmDebounce,
    DebounceFired,
    Effect,
    FetchCompleted,
    FetchRequest,
    IssueFetch,
    PickerEvent,
    PickerOutcome,
    Terminate,
)

logger = logging.getLogger(__name__)


class PickerRuntime:
    """Feed events to the engine and run its timers and fetches as tasks.

    All engine mutation happens on the running event loop through
    :meth:`dispatch`; completions of background tasks re-enter the engine the
    same way, in the order they finish.
    """

    def __init__(
        self,
        engine: PickerEngine,
        source: ItemSource,
        *,
        on_change: Optional[Callable[[], None]] = None,
    ) -> None:
        self.engine = engine
        self.source = source
        self._on_change = on_change
        self._tasks: set[asyncio.Task[None]] = set()
        self._outcome: Optional[asyncio.Future[PickerOutcome]] = None

    def dispatch(self, event: PickerEvent) -> None:
        for effect in self.engine.handle(event):
            self._apply(effect)
        if self._on_change is not None:
            self._on_change()

    async def wait(self) -> PickerOutcome:
        """Block until the engine terminates."""
        return await self._outcome_future()

    async def settle(self) -> None:
        """Wait until no timer or fetch task is outstanding."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)

    async def aclose(self) -> None:
        tasks = list(self._tasks)
        for task in tasks:
            task.cancel()
        if tasks:
            await asyncio.gather(*tasks, return_exceptions=True)
        self._tasks.clear()

    def _apply(self, effect: Effect) -> None:
        if isinstance(effect, ArmDebounce):
            self._spawn(self._debounce(effect))
        elif isinstance(effect, IssueFetch):
            self._spawn(self._fetch(effect.request))
        elif isinstance(effect, Terminate):
            future = self._outcome_future()
            if not future.done():
                future.set_result(effect.outcome)

    def _spawn(self, coro) -> None:
        task = asyncio.get_running_loop().create_task(coro)
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

    def _outcome_future(self) -> asyncio.Future[PickerOutcome]:
        if self._outcome is None:
            self._outcome = asyncio.get_running_loop().create_future()
        return self._outcome

    async def _debounce(self, effect: ArmDebounce) -> None:
        await asyncio.sleep(effect.delay)
        self.dispatch(DebounceFired(effect.generation))

    async def _fetch(self, request: FetchRequest) -> None:
        logger.debug(
            "Fetching memberships seq=%s query=%r parent=%s",
            request.sequence,
            request.query,
            request.parent_id,
        )
        try:
            items = await self.source.fetch(
                request.query or None,
                request.parent_id,
                request.parent_type,
            )
        except Exception as exc:
            self.dispatch(FetchCompleted(request, error=exc))
            return
        self.dispatch(FetchCompleted(request, items=tuple(items)))
