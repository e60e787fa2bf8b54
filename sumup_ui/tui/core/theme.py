from __future__ import annotations

from typing import Mapping

RICH_ACCENT = "cyan"
RICH_ACCENT_BOLD = f"bold {RICH_ACCENT}"
RICH_BORDER_STYLE = RICH_ACCENT

PRESENTER_TEMPLATES: dict[str, str] = {
    "info": "[blue]ℹ[/blue] {message}",
    "warning": "[yellow]⚠ {message}[/yellow]",
    "error": "[red]✖ {message}[/red]",
    "success": "[green]✔ {message}[/green]",
}


def presenter_message(level: str, message: str) -> str:
    template = PRESENTER_TEMPLATES.get(level, "{message}")
    return template.format(message=message)


def prompt_toolkit_picker_style() -> Mapping[str, str]:
    return {
        "title": "fg:ansicyan bold",
        "search": "",
        "selected": "fg:ansigreen bold",
        "organization": "fg:#888888",
        "status": "",
        "help": "fg:#626262",
        "error": "fg:ansired bold",
    }
