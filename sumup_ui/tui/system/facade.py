from typing import Optional, Sequence

from rich.console import Console

from sumup_ui.tui.picker.search import DEBOUNCE_DELAY
from sumup_ui.tui.system.components.json_output import RichJsonPresenter
from sumup_ui.tui.system.components.membership_picker import PromptToolkitMerchantPicker
from sumup_ui.tui.system.components.presenter import RichPresenter
from sumup_ui.tui.system.components.progress import RichProgress
from sumup_ui.tui.system.components.table import RichTablePresenter
from sumup_ui.tui.system.models import TableModel
from sumup_ui.tui.system.protocols import (
    UI,
    JsonPresenter,
    MerchantPicker,
    Presenter,
    Progress,
    TablePresenter,
)


class TUI(UI):
    def __init__(
        self,
        console: Optional[Console] = None,
        *,
        debounce_delay: float = DEBOUNCE_DELAY,
    ):
        self._console = console or Console()
        self.picker: MerchantPicker = PromptToolkitMerchantPicker(debounce_delay)
        self.tables: TablePresenter = RichTablePresenter(self._console)
        self.json: JsonPresenter = RichJsonPresenter(self._console)
        self.present: Presenter = RichPresenter(self._console)
        self.progress: Progress = RichProgress(self._console)

    def show_table(self, title: str, columns: Sequence[str], rows: list[Sequence[str]]) -> None:
        model = TableModel(title=title, columns=list(columns), rows=[list(r) for r in rows])
        self.tables.show(model)
