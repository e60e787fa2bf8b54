"""
UI adapter package providing Rich/prompt_toolkit and headless renderers.
"""

from sumup_ui.tui.system.protocols import UI, MerchantPicker, TablePresenter, Presenter, JsonPresenter
from sumup_ui.tui.system.facade import TUI
from sumup_ui.tui.system.headless import HeadlessUI

__all__ = [
    "UI",
    "TUI",
    "HeadlessUI",
    "MerchantPicker",
    "TablePresenter",
    "Presenter",
    "JsonPresenter",
]
