"""Interfaces exposed to UI layers."""

from __future__ import annotations

from typing import Optional, Protocol, Sequence

from sumup_app.models.memberships import MembershipRecord, ResourceType


class ItemSource(Protocol):
    """Asynchronous provider of membership records for one hierarchy level.

    An empty or missing ``query`` means no name filter; missing parent fields
    mean the root level (top-level organizations and directly owned merchants).
    """

    async def fetch(
        self,
        query: Optional[str] = None,
        parent_id: Optional[str] = None,
        parent_type: Optional[ResourceType] = None,
    ) -> Sequence[MembershipRecord]: ...


class ContextStore(Protocol):
    """Durable key-value store for the active merchant context."""

    def get_current_merchant_code(self) -> str: ...
    def set_current_merchant_code(self, merchant_code: str) -> None: ...
