from contextlib import nullcontext
from dataclasses import dataclass, field
from typing import Any, ContextManager, Optional, Sequence

from sumup_app.api import ItemSource, MembershipRecord
from sumup_ui.tui.picker.engine import PickerEngine
from sumup_ui.tui.picker.events import NAMED_KEYS, KeyPressed, PickerOutcome
from sumup_ui.tui.picker.renderer import build_view, to_text
from sumup_ui.tui.picker.runtime import PickerRuntime
from sumup_ui.tui.system.components.presenter_base import PresenterBase, PresenterSink
from sumup_ui.tui.system.models import TableModel
from sumup_ui.tui.system.protocols import (
    UI,
    JsonPresenter,
    MerchantPicker,
    Progress,
    TablePresenter,
)


@dataclass
class RecordedTable:
    model: TableModel


@dataclass
class HeadlessUI(UI):
    recorded_tables: list[RecordedTable] = field(default_factory=list)
    recorded_messages: list[str] = field(default_factory=list)
    recorded_json: list[Any] = field(default_factory=list)
    recorded_frames: list[str] = field(default_factory=list)

    # Configuration for automated responses
    next_picker_outcome: Optional[PickerOutcome] = None
    next_picker_keys: list[str] = field(default_factory=list)
    picker_debounce_delay: float = 0.0

    def __post_init__(self):
        self.picker = _HeadlessPicker(self)
        self.tables = _HeadlessTablePresenter(self)
        self.json = _HeadlessJsonPresenter(self)
        self.present = _HeadlessPresenter(self)
        self.progress = _HeadlessProgress(self)


class _HeadlessPicker(MerchantPicker):
    """Drive the real picker engine from a scripted key list.

    Each entry of ``next_picker_keys`` is a named key (``"down"``, ``"enter"``,
    ``"escape"``...) or literal text typed one character at a time. After every
    entry pending timers and fetches are allowed to finish, so scripted
    sessions are deterministic. With no script, the session quits at once.
    """

    def __init__(self, ui: HeadlessUI):
        self._ui = ui

    async def pick(
        self,
        root_items: Sequence[MembershipRecord],
        source: ItemSource,
    ) -> PickerOutcome:
        if self._ui.next_picker_outcome is not None:
            return self._ui.next_picker_outcome

        engine = PickerEngine(root_items, debounce_delay=self._ui.picker_debounce_delay)
        runtime = PickerRuntime(engine, source, on_change=lambda: self._record(engine))
        self._record(engine)
        try:
            for token in self._ui.next_picker_keys or ["q"]:
                for key in self._expand(token):
                    if engine.finished:
                        break
                    runtime.dispatch(KeyPressed(key))
                await runtime.settle()
                if engine.finished:
                    break
        finally:
            await runtime.aclose()
        return engine.outcome or PickerOutcome()

    @staticmethod
    def _expand(token: str) -> list[str]:
        if token in NAMED_KEYS or len(token) <= 1:
            return [token]
        return list(token)

    def _record(self, engine: PickerEngine) -> None:
        self._ui.recorded_frames.append(to_text(build_view(engine)))


class _HeadlessTablePresenter(TablePresenter):
    def __init__(self, ui: HeadlessUI):
        self._ui = ui

    def show(self, table: TableModel) -> None:
        self._ui.recorded_tables.append(RecordedTable(table))


class _HeadlessJsonPresenter(JsonPresenter):
    def __init__(self, ui: HeadlessUI):
        self._ui = ui

    def show(self, data: Any) -> None:
        self._ui.recorded_json.append(data)


class _HeadlessPresenterSink(PresenterSink):
    def __init__(self, ui: HeadlessUI) -> None:
        self._ui = ui

    def emit(self, level: str, message: str) -> None:
        self._ui.recorded_messages.append(f"{level.upper()}: {message}")


class _HeadlessPresenter(PresenterBase):
    def __init__(self, ui: HeadlessUI) -> None:
        super().__init__(_HeadlessPresenterSink(ui))


class _HeadlessProgress(Progress):
    def __init__(self, ui: HeadlessUI):
        self._ui = ui

    def status(self, message: str) -> ContextManager[None]:
        self._ui.recorded_messages.append(f"STATUS: {message}")
        return nullcontext()
