from __future__ import annotations

from typing import Protocol

from sumup_ui.tui.system.protocols import Presenter


class PresenterSink(Protocol):
    def emit(self, level: str, message: str) -> None: ...


class PresenterBase(Presenter):
    """Presenter that forwards every message to a sink with its level."""

    def __init__(self, sink: PresenterSink) -> None:
        super().__init__(sink)
