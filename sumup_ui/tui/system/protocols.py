from typing import Any, ContextManager, Protocol, Sequence

from sumup_app.api import ItemSource, MembershipRecord
from sumup_ui.tui.picker.events import PickerOutcome
from sumup_ui.tui.system.models import TableModel


class TablePresenter(Protocol):
    def show(self, table: TableModel) -> None: ...


class JsonPresenter(Protocol):
    def show(self, data: Any) -> None: ...


class MerchantPicker(Protocol):
    async def pick(
        self,
        root_items: Sequence[MembershipRecord],
        source: ItemSource,
    ) -> PickerOutcome: ...


class PresenterSink(Protocol):
    def emit(self, level: str, message: str) -> None: ...


class Presenter:
    def __init__(self, sink: PresenterSink) -> None:
        self._sink = sink

    def info(self, message: str) -> None:
        self._sink.emit("info", message)

    def warning(self, message: str) -> None:
        self._sink.emit("warning", message)

    def error(self, message: str) -> None:
        self._sink.emit("error", message)

    def success(self, message: str) -> None:
        self._sink.emit("success", message)


class Progress(Protocol):
    def status(self, message: str) -> ContextManager[None]: ...


class UI(Protocol):
    picker: MerchantPicker
    tables: TablePresenter
    json: JsonPresenter
    present: Presenter
    progress: Progress
