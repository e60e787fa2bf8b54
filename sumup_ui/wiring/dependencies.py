from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

import httpx

from sumup_app.api import (
    DEFAULT_BASE_URL,
    ContextStore,
    FileContextStore,
    SumupClient,
)
from sumup_common.api import configure_logging
from sumup_common.config import parse_float_env
from sumup_ui.tui.picker.search import DEBOUNCE_DELAY
from sumup_ui.tui.system.facade import TUI
from sumup_ui.tui.system.protocols import UI

DEBOUNCE_ENV = "SUMUP_PICKER_DEBOUNCE"


def debounce_delay_from_env() -> float:
    """Debounce delay for the picker, overridable through ``SUMUP_PICKER_DEBOUNCE``."""
    value = parse_float_env(os.environ.get(DEBOUNCE_ENV))
    if value is None or value < 0:
        return DEBOUNCE_DELAY
    return value


@dataclass
class UIContext:
    """Container for UI services and state, initialized lazily."""
    headless: bool = False
    json_output: bool = False
    api_key: Optional[str] = None
    base_url: str = DEFAULT_BASE_URL
    # Injected by tests to answer HTTP requests in-process.
    transport: Optional[httpx.AsyncBaseTransport] = None

    # Lazily initialized services
    _ui: Optional[UI] = None
    _context_store: Optional[ContextStore] = None

    @property
    def ui(self) -> UI:
        if self._ui is None:
            if self.headless:
                from sumup_ui.tui.system.headless import HeadlessUI
                self._ui = HeadlessUI()
            else:
                self._ui = TUI(debounce_delay=debounce_delay_from_env())
        return self._ui

    @ui.setter
    def ui(self, value: UI):
        self._ui = value

    @property
    def context_store(self) -> ContextStore:
        if self._context_store is None:
            self._context_store = FileContextStore()
        return self._context_store

    @context_store.setter
    def context_store(self, value: ContextStore):
        self._context_store = value

    def create_client(self) -> SumupClient:
        """Return a new API client; callers own it and must close it."""
        return SumupClient(
            api_key=self.api_key,
            base_url=self.base_url,
            transport=self.transport,
        )


__all__ = [
    "DEBOUNCE_ENV",
    "UIContext",
    "configure_logging",
    "debounce_delay_from_env",
]
