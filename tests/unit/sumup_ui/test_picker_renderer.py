"""Tests for the textual picker frame."""

import pytest

from sumup_app.api import MembershipRecord, ResourceType
from sumup_ui.tui.picker.engine import PickerEngine
from sumup_ui.tui.picker.events import DebounceFired, FetchCompleted, KeyPressed
from sumup_ui.tui.picker.renderer import build_view, to_fragments, to_text, visible_window


pytestmark = pytest.mark.unit_ui


def _merchants(count: int) -> list[MembershipRecord]:
    return [
        MembershipRecord(f"m{i}", ResourceType.MERCHANT, f"Shop {i}", {"merchant_code": f"MC{i}"})
        for i in range(count)
    ]


def test_visible_window_keeps_cursor_centered_and_clamped() -> None:
    assert visible_window(5, 4) == (0, 5)
    assert visible_window(30, 0) == (0, 10)
    assert visible_window(30, 4) == (0, 10)
    assert visible_window(30, 12) == (7, 17)
    assert visible_window(30, 29) == (20, 30)


def test_root_view_lists_items_with_cursor_marker() -> None:
    acme = MembershipRecord("org1", ResourceType.ORGANIZATION, "Acme")
    shop = MembershipRecord("m1", ResourceType.MERCHANT, "Acme Shop", {"merchant_code": "MC1"})
    bare = MembershipRecord("m2", ResourceType.MERCHANT, "No Code")
    engine = PickerEngine([acme, shop, bare])

    view = build_view(engine)

    assert view.title == "Select a merchant or organization:"
    assert view.search_line is None
    assert [row.text for row in view.rows] == [
        "> Organization: Acme (org1)",
        "  Acme Shop (MC1)",
        "  No Code (-)",
    ]
    assert view.status is None
    assert view.footer == "↑/↓ or j/k: navigate | /: search | enter: select | ctrl+c/q: quit"


def test_long_list_shows_range_indicator() -> None:
    engine = PickerEngine(_merchants(25))
    for _ in range(12):
        engine.handle(KeyPressed("down"))

    view = build_view(engine)

    assert len(view.rows) == 10
    assert view.rows[5].is_cursor
    assert view.status == "(Showing 8-17 of 25)"


def test_child_level_shows_loading_then_empty_state() -> None:
    engine = PickerEngine([MembershipRecord("org1", ResourceType.ORGANIZATION, "Acme")])
    [fetch] = engine.handle(KeyPressed("enter"))

    loading = build_view(engine)
    assert loading.title == "Select a merchant from: Acme"
    assert loading.status == "Loading..."
    assert loading.footer.endswith(" | esc: back | ctrl+c/q: quit")

    engine.handle(FetchCompleted(fetch.request, items=()))
    assert build_view(engine).status == "No items found."


def test_search_line_shows_placeholder_query_and_loading() -> None:
    engine = PickerEngine(_merchants(2), debounce_delay=0)
    engine.handle(KeyPressed("/"))

    view = build_view(engine)
    assert view.search_line == "Search: Type to filter..."
    assert view.footer == "esc: exit search | enter: confirm | ctrl+c/q: quit"

    [armed] = engine.handle(KeyPressed("s"))
    engine.handle(DebounceFired(armed.generation))
    assert build_view(engine).search_line == "Search: s (loading...)"


def test_error_view_replaces_frame() -> None:
    engine = PickerEngine([MembershipRecord("org1", ResourceType.ORGANIZATION, "Acme")])
    [fetch] = engine.handle(KeyPressed("enter"))
    engine.handle(FetchCompleted(fetch.request, error=RuntimeError("service unavailable")))

    view = build_view(engine)

    assert view.error == "Error: service unavailable"
    assert to_text(view) == "Error: service unavailable\n"


def test_fragments_style_cursor_and_organizations() -> None:
    engine = PickerEngine(
        [
            MembershipRecord("m1", ResourceType.MERCHANT, "Shop"),
            MembershipRecord("org1", ResourceType.ORGANIZATION, "Acme"),
        ]
    )

    fragments = to_fragments(build_view(engine))

    assert ("class:selected", "> Shop (-)\n") in fragments
    assert ("class:organization", "  Organization: Acme (org1)\n") in fragments
    assert fragments[0] == ("class:title", "Select a merchant or organization:")
