"""Stable application-layer API surface."""

from sumup_app.client import DEFAULT_BASE_URL, SumupClient
from sumup_app.interfaces import ContextStore, ItemSource
from sumup_app.models.memberships import (
    ListMembershipsParams,
    Membership,
    MembershipList,
    MembershipRecord,
    MembershipStatus,
    ResourceType,
)
from sumup_app.services.context_service import (
    MERCHANT_CODE_ENV,
    CliConfig,
    FileContextStore,
    InMemoryContextStore,
    default_config_home,
    resolve_merchant_code,
)
from sumup_app.services.membership_source import MembershipSource

__all__ = [
    "DEFAULT_BASE_URL",
    "SumupClient",
    "ItemSource",
    "ContextStore",
    "ListMembershipsParams",
    "Membership",
    "MembershipList",
    "MembershipRecord",
    "MembershipStatus",
    "ResourceType",
    "MERCHANT_CODE_ENV",
    "CliConfig",
    "FileContextStore",
    "InMemoryContextStore",
    "default_config_home",
    "resolve_merchant_code",
    "MembershipSource",
]
