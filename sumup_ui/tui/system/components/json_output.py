from typing import Any

from rich.console import Console

from sumup_ui.tui.system.protocols import JsonPresenter


class RichJsonPresenter(JsonPresenter):
    """Pretty-print API payloads as indented JSON."""

    def __init__(self, console: Console):
        self._console = console

    def show(self, data: Any) -> None:
        self._console.print_json(data=data, indent=2)
