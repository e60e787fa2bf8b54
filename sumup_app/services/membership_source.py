"""ItemSource backed by the list-memberships endpoint."""

from __future__ import annotations

import logging
from typing import Optional

from sumup_app.client import SumupClient
from sumup_app.interfaces import ItemSource
from sumup_app.models.memberships import (
    ListMembershipsParams,
    MembershipRecord,
    MembershipStatus,
    ResourceType,
)

logger = logging.getLogger(__name__)


class MembershipSource(ItemSource):
    """Fetch accepted memberships, optionally filtered by name and parent."""

    def __init__(self, client: SumupClient) -> None:
        self._client = client

    async def fetch(
        self,
        query: Optional[str] = None,
        parent_id: Optional[str] = None,
        parent_type: Optional[ResourceType] = None,
    ) -> list[MembershipRecord]:
        params = ListMembershipsParams(
            status=MembershipStatus.ACCEPTED,
            resource_name=query or None,
            resource_parent_id=parent_id or None,
            resource_parent_type=parent_type.value if parent_type else None,
        )
        result = await self._client.list_memberships(params)
        records = [membership.to_record() for membership in result.items]
        logger.debug(
            "Fetched %d memberships (query=%r parent=%s)",
            len(records),
            query,
            parent_id,
        )
        return records
