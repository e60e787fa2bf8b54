"""Stable UI API surface."""

from __future__ import annotations

from sumup_ui.cli import app, ctx_store, main
from sumup_ui.flows.context import select_merchant_context
from sumup_ui.flows.errors import UIFlowError
from sumup_ui.presenters.memberships import build_memberships_table
from sumup_ui.presenters.merchant import build_merchant_table
from sumup_ui.tui.picker.engine import PickerEngine
from sumup_ui.tui.picker.events import PickerOutcome
from sumup_ui.tui.picker.runtime import PickerRuntime
from sumup_ui.tui.system.components.membership_picker import PromptToolkitMerchantPicker
from sumup_ui.tui.system.headless import HeadlessUI
from sumup_ui.tui.system.models import TableModel

__all__ = [
    "app",
    "main",
    "ctx_store",
    "select_merchant_context",
    "UIFlowError",
    "build_memberships_table",
    "build_merchant_table",
    "PickerEngine",
    "PickerOutcome",
    "PickerRuntime",
    "PromptToolkitMerchantPicker",
    "HeadlessUI",
    "TableModel",
]
