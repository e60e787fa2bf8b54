from __future__ import annotations

import logging
from typing import Any, Sequence

from prompt_toolkit.application import Application
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.layout import HSplit, Layout, Window
from prompt_toolkit.layout.controls import FormattedTextControl
from prompt_toolkit.styles import Style

from sumup_app.api import ItemSource, MembershipRecord
from sumup_common.api import suspend_console_logging
from sumup_ui.flows.errors import UIFlowError
from sumup_ui.tui.core import theme
from sumup_ui.tui.core.capabilities import supports_fullscreen_ui
from sumup_ui.tui.picker.engine import PickerEngine
from sumup_ui.tui.picker.events import (
    KEY_BACKSPACE,
    KEY_CLEAR_LINE,
    KEY_DOWN,
    KEY_ENTER,
    KEY_ESCAPE,
    KEY_INTERRUPT,
    KEY_UP,
    KeyPressed,
    PickerOutcome,
)
from sumup_ui.tui.picker.renderer import build_view, to_fragments
from sumup_ui.tui.picker.runtime import PickerRuntime
from sumup_ui.tui.picker.search import DEBOUNCE_DELAY
from sumup_ui.tui.system.protocols import MerchantPicker

logger = logging.getLogger(__name__)

_BOUND_KEYS = (
    KEY_UP,
    KEY_DOWN,
    KEY_ENTER,
    KEY_ESCAPE,
    KEY_BACKSPACE,
    KEY_CLEAR_LINE,
    KEY_INTERRUPT,
)


class MembershipPickerApp:
    """Full-screen prompt_toolkit front end for the picker engine."""

    def __init__(
        self,
        root_items: Sequence[MembershipRecord],
        source: ItemSource,
        *,
        debounce_delay: float = DEBOUNCE_DELAY,
    ) -> None:
        self.engine = PickerEngine(root_items, debounce_delay=debounce_delay)
        self.runtime = PickerRuntime(self.engine, source, on_change=self._on_change)
        self.control = FormattedTextControl(self._fragments, focusable=True)
        self.app: Application[PickerOutcome] = Application(
            layout=Layout(HSplit([Window(self.control, wrap_lines=False)])),
            key_bindings=self._bindings(),
            style=Style.from_dict(dict(theme.prompt_toolkit_picker_style())),
            full_screen=True,
        )

    def _fragments(self) -> list[tuple[str, str]]:
        return to_fragments(build_view(self.engine))

    def _on_change(self) -> None:
        outcome = self.engine.outcome
        if outcome is not None:
            self._exit(outcome)
            return
        self.app.invalidate()

    def _exit(self, result: Any) -> None:
        """Exit the application, ignoring duplicate-exit errors."""
        try:
            self.app.exit(result=result)
        except Exception as exc:
            if "Return value already set" in str(exc):
                return
            raise

    def _bindings(self) -> KeyBindings:
        kb = KeyBindings()

        def _bind(key: str) -> None:
            @kb.add(key)
            def _(event: Any) -> None:
                self.runtime.dispatch(KeyPressed(key))

        for key in _BOUND_KEYS:
            _bind(key)

        @kb.add("<any>")
        def _(event: Any) -> None:
            data = event.data
            if len(data) == 1 and data.isprintable():
                self.runtime.dispatch(KeyPressed(data))

        return kb

    async def run_async(self) -> PickerOutcome:
        try:
            with suspend_console_logging():
                result = await self.app.run_async()
        finally:
            await self.runtime.aclose()
        if result is None:
            return PickerOutcome()
        return result


class PromptToolkitMerchantPicker(MerchantPicker):
    def __init__(self, debounce_delay: float = DEBOUNCE_DELAY) -> None:
        self.debounce_delay = debounce_delay

    async def pick(
        self,
        root_items: Sequence[MembershipRecord],
        source: ItemSource,
    ) -> PickerOutcome:
        if not supports_fullscreen_ui():
            raise UIFlowError("Interactive selection requires a TTY.")
        logger.debug("Starting merchant picker with %d root items", len(root_items))
        picker = MembershipPickerApp(
            root_items, source, debounce_delay=self.debounce_delay
        )
        return await picker.run_async()
