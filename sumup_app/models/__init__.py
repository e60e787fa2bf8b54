"""Domain models shared by the application and UI layers."""

from sumup_app.models.memberships import (
    ListMembershipsParams,
    Membership,
    MembershipList,
    MembershipRecord,
    MembershipResource,
    MembershipStatus,
    ResourceType,
)

__all__ = [
    "ListMembershipsParams",
    "Membership",
    "MembershipList",
    "MembershipRecord",
    "MembershipResource",
    "MembershipStatus",
    "ResourceType",
]
