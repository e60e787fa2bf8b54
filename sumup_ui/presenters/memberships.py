"""Presenter for membership listings."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import List, Optional

from sumup_app.api import Membership, MembershipList
from sumup_ui.tui.system.models import TableModel


def format_roles(roles: List[str]) -> str:
    if not roles:
        return "-"
    return ", ".join(roles)


def format_timestamp(value: Optional[datetime]) -> str:
    """RFC 3339 in UTC, e.g. ``2024-05-01T10:00:00Z``."""
    if value is None:
        return "-"
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


def _membership_row(membership: Membership) -> list[str]:
    return [
        membership.id,
        membership.resource.name,
        membership.resource.type,
        format_roles(membership.roles),
        membership.status.label,
        format_timestamp(membership.created_at),
    ]


def build_memberships_table(result: MembershipList) -> TableModel:
    """Transform a membership listing into a TableModel."""
    return TableModel(
        title="Memberships",
        columns=["ID", "Resource", "Type", "Roles", "Status", "Created At"],
        rows=[_membership_row(membership) for membership in result.items],
    )
