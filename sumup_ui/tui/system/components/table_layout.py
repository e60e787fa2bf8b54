from __future__ import annotations

import shutil

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from sumup_ui.tui.system.models import TableModel

MIN_COLUMN_WIDTH = 4


def _console_width(console: Console) -> int:
    width = console.size.width
    if width > 0:
        return width
    return shutil.get_terminal_size(fallback=(100, 24)).columns


def fit_column_widths(model: TableModel, max_width: int) -> list[int]:
    """Widths for each column, shrinking the widest ones until the row fits."""
    widths: list[int] = []
    for index, column in enumerate(model.columns):
        longest = len(column)
        for row in model.rows:
            if index < len(row):
                longest = max(longest, len(str(row[index])))
        widths.append(max(MIN_COLUMN_WIDTH, min(longest, max_width)))

    # Borders plus one space of padding on each side of every cell.
    overhead = 1 + 3 * max(1, len(widths))
    while widths and sum(widths) + overhead > max_width:
        widest = max(range(len(widths)), key=lambda i: widths[i])
        if widths[widest] <= MIN_COLUMN_WIDTH:
            break
        widths[widest] -= 1
    return widths


def build_rich_table(
    model: TableModel,
    *,
    console: Console,
    border_style: str = "cyan",
    header_style: str = "bold cyan",
    title_style: str = "bold cyan",
    box_style: box.Box = box.SIMPLE_HEAD,
) -> Table:
    """
    Build a Rich Table from a TableModel that fits the current terminal width.

    Cells stay on one line and are truncated with an ellipsis when needed.
    """
    max_width = max(40, _console_width(console) - 2)

    title = Text(model.title) if model.title else None
    rich_table = Table(
        title=title,
        box=box_style,
        border_style=border_style,
        header_style=header_style,
        title_style=title_style,
    )
    widths = fit_column_widths(model, max_width)
    for column, width in zip(model.columns, widths):
        rich_table.add_column(
            column,
            overflow="ellipsis",
            no_wrap=True,
            min_width=MIN_COLUMN_WIDTH,
            max_width=width,
        )
    for row in model.rows:
        rich_table.add_row(*(str(cell) for cell in row))
    return rich_table
