"""Tests for Rich-backed presenters and UI wiring."""

import io

import pytest
from rich.console import Console

from sumup_ui.tui.system.facade import TUI
from sumup_ui.tui.system.headless import HeadlessUI
from sumup_ui.tui.system.models import TableModel
from sumup_ui.wiring.dependencies import UIContext, debounce_delay_from_env


pytestmark = pytest.mark.unit_ui


def _console() -> tuple[Console, io.StringIO]:
    buffer = io.StringIO()
    return Console(file=buffer, width=100, color_system=None), buffer


def test_presenter_uses_level_symbols() -> None:
    console, buffer = _console()
    ui = TUI(console)

    ui.present.success("Merchant context set to: Acme Shop (MC1)")
    ui.present.error("boom")

    output = buffer.getvalue()
    assert "✔ Merchant context set to: Acme Shop (MC1)" in output
    assert "✖ boom" in output


def test_table_presenter_renders_columns_and_rows() -> None:
    console, buffer = _console()
    ui = TUI(console)

    ui.show_table("Memberships", ["ID", "Resource"], [["mem_1", "Acme Shop"]])

    output = buffer.getvalue()
    assert "Memberships" in output
    assert "Resource" in output
    assert "Acme Shop" in output


def test_json_presenter_prints_indented_json() -> None:
    console, buffer = _console()
    ui = TUI(console)

    ui.json.show({"merchant_code": "MC1"})

    assert '"merchant_code": "MC1"' in buffer.getvalue()


def test_headless_records_tables() -> None:
    ui = HeadlessUI()
    table = TableModel(title="T", columns=["A"], rows=[["1"]])

    ui.tables.show(table)
    with ui.progress.status("working"):
        pass

    assert ui.recorded_tables[0].model is table
    assert ui.recorded_messages == ["STATUS: working"]


def test_ui_context_picks_headless_ui() -> None:
    assert isinstance(UIContext(headless=True).ui, HeadlessUI)
    assert isinstance(UIContext().ui, TUI)


def test_debounce_delay_env_override(monkeypatch: pytest.MonkeyPatch) -> None:
    assert debounce_delay_from_env() == 0.5

    monkeypatch.setenv("SUMUP_PICKER_DEBOUNCE", "0.1")
    assert debounce_delay_from_env() == 0.1

    monkeypatch.setenv("SUMUP_PICKER_DEBOUNCE", "-1")
    assert debounce_delay_from_env() == 0.5
