"""Turns picker engine state into a frame of styled lines."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from sumup_app.api import MembershipRecord

if TYPE_CHECKING:
    from sumup_ui.tui.picker.engine import PickerEngine

MAX_VISIBLE = 10
SEARCH_PLACEHOLDER = "Type to filter..."

SEARCH_HELP = "esc: exit search | enter: confirm | ctrl+c/q: quit"
BROWSE_HELP = "↑/↓ or j/k: navigate | /: search | enter: select"


@dataclass(frozen=True)
class PickerRow:
    text: str
    is_cursor: bool = False
    is_organization: bool = False


@dataclass(frozen=True)
class PickerView:
    """Everything needed to draw one frame."""

    title: str = ""
    search_line: str | None = None
    rows: tuple[PickerRow, ...] = ()
    status: str | None = None
    footer: str = ""
    error: str | None = None


def visible_window(total: int, cursor: int, size: int = MAX_VISIBLE) -> tuple[int, int]:
    """Return ``(start, end)`` of the slice to show, keeping the cursor near the middle."""
    if total <= size:
        return 0, total
    start = cursor - size // 2 if cursor >= size // 2 else 0
    end = start + size
    if end > total:
        end = total
        start = max(0, end - size)
    return start, end


def format_row(item: MembershipRecord, is_cursor: bool) -> str:
    marker = ">" if is_cursor else " "
    if item.is_organization:
        return f"{marker} Organization: {item.resource_name} ({item.resource_id})"
    return f"{marker} {item.resource_name} ({item.display_code})"


def build_view(engine: "PickerEngine") -> PickerView:
    error = engine.fatal_error
    if error is not None:
        return PickerView(error=f"Error: {error}")

    level = engine.current_level
    if level.parent_name:
        title = f"Select a merchant from: {level.parent_name}"
    else:
        title = "Select a merchant or organization:"

    search_line = None
    if engine.searching:
        text = engine.search.query or SEARCH_PLACEHOLDER
        search_line = f"Search: {text}"
        if engine.loading:
            search_line += " (loading...)"

    items = engine.displayed
    start, end = visible_window(len(items), engine.cursor)
    rows = tuple(
        PickerRow(
            text=format_row(items[index], index == engine.cursor),
            is_cursor=index == engine.cursor,
            is_organization=items[index].is_organization,
        )
        for index in range(start, end)
    )

    status = None
    if not items:
        status = "Loading..." if engine.loading else "No items found."
    elif len(items) > MAX_VISIBLE:
        status = f"(Showing {start + 1}-{end} of {len(items)})"

    if engine.searching:
        footer = SEARCH_HELP
    else:
        footer = BROWSE_HELP
        if engine.navigation.can_pop:
            footer += " | esc: back"
        footer += " | ctrl+c/q: quit"

    return PickerView(
        title=title,
        search_line=search_line,
        rows=rows,
        status=status,
        footer=footer,
    )


def to_fragments(view: PickerView) -> list[tuple[str, str]]:
    """prompt_toolkit formatted text for ``view``."""
    if view.error is not None:
        return [("class:error", view.error + "\n")]

    fragments: list[tuple[str, str]] = [("class:title", view.title), ("", "\n\n")]
    if view.search_line is not None:
        fragments.extend([("class:search", view.search_line), ("", "\n\n")])
    for row in view.rows:
        if row.is_cursor:
            style = "class:selected"
        elif row.is_organization:
            style = "class:organization"
        else:
            style = ""
        fragments.append((style, row.text + "\n"))
    if view.status is not None:
        if view.rows:
            fragments.append(("", "\n"))
        fragments.append(("class:status", view.status + "\n"))
    fragments.extend([("", "\n"), ("class:help", view.footer)])
    return fragments


def to_text(view: PickerView) -> str:
    return "".join(text for _, text in to_fragments(view))
