"""Presenter for merchant profiles."""

from __future__ import annotations

from typing import Any, Iterator, Mapping

from sumup_ui.tui.system.models import TableModel


def _flatten(data: Mapping[str, Any], prefix: str = "") -> Iterator[tuple[str, str]]:
    for key, value in data.items():
        name = f"{prefix}.{key}" if prefix else str(key)
        if isinstance(value, Mapping):
            yield from _flatten(value, name)
        elif isinstance(value, list):
            yield name, ", ".join(str(item) for item in value) or "-"
        elif value is None or value == "":
            yield name, "-"
        else:
            yield name, str(value)


def build_merchant_table(merchant: Mapping[str, Any]) -> TableModel:
    """Nested profile fields become dotted names, one row per leaf value."""
    return TableModel(
        title="Merchant",
        columns=["Field", "Value"],
        rows=[[name, value] for name, value in _flatten(merchant)],
    )
