"""Membership data model: API payloads and the records the picker works on."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ResourceType(str, Enum):
    """Kind of resource a membership points at."""

    ORGANIZATION = "organization"
    MERCHANT = "merchant"
    OTHER = "other"

    @classmethod
    def _missing_(cls, value: object) -> "ResourceType":
        return cls.OTHER


class MembershipStatus(str, Enum):
    ACCEPTED = "accepted"
    PENDING = "pending"
    EXPIRED = "expired"
    DISABLED = "disabled"
    UNKNOWN = "unknown"

    @classmethod
    def _missing_(cls, value: object) -> "MembershipStatus":
        return cls.UNKNOWN

    @classmethod
    def parse(cls, value: str) -> "MembershipStatus":
        """Parse a user-supplied status, rejecting anything not listed."""
        normalized = value.strip().lower()
        for member in cls:
            if member.value == normalized:
                return member
        raise ValueError(f"unsupported status {value!r}")

    @property
    def label(self) -> str:
        return self.value.capitalize()


@dataclass(frozen=True)
class MembershipRecord:
    """One row of a membership listing, as shown in the picker."""

    resource_id: str
    resource_type: ResourceType
    resource_name: str
    attributes: Mapping[str, Any] = field(default_factory=dict)

    @property
    def is_organization(self) -> bool:
        return self.resource_type is ResourceType.ORGANIZATION

    @property
    def merchant_code(self) -> str:
        """Merchant code from the attributes, falling back to the resource id."""
        code = self.attributes.get("merchant_code")
        if isinstance(code, str) and code:
            return code
        return self.resource_id

    @property
    def display_code(self) -> str:
        code = self.attributes.get("merchant_code")
        if isinstance(code, str) and code:
            return code
        return "-"


class MembershipResource(BaseModel):
    """Resource block of a membership as returned by the API."""

    model_config = ConfigDict(extra="ignore")

    id: str
    type: str
    name: str = ""
    logo: Optional[str] = None
    attributes: dict[str, Any] = Field(default_factory=dict)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @field_validator("attributes", mode="before")
    @classmethod
    def _none_attributes(cls, value: Any) -> Any:
        return {} if value is None else value


class Membership(BaseModel):
    """A membership of the authenticated user."""

    model_config = ConfigDict(extra="ignore")

    id: str
    resource_id: str = ""
    type: str = ""
    roles: list[str] = Field(default_factory=list)
    permissions: list[str] = Field(default_factory=list)
    status: MembershipStatus = MembershipStatus.UNKNOWN
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    resource: MembershipResource

    @field_validator("roles", "permissions", mode="before")
    @classmethod
    def _none_list(cls, value: Any) -> Any:
        return [] if value is None else value

    def to_record(self) -> MembershipRecord:
        return MembershipRecord(
            resource_id=self.resource.id,
            resource_type=ResourceType(self.resource.type),
            resource_name=self.resource.name,
            attributes=dict(self.resource.attributes),
        )


class MembershipList(BaseModel):
    """Response of the list-memberships endpoint."""

    model_config = ConfigDict(extra="ignore")

    items: list[Membership] = Field(default_factory=list)
    total_count: Optional[int] = None

    @field_validator("items", mode="before")
    @classmethod
    def _none_items(cls, value: Any) -> Any:
        return [] if value is None else value


@dataclass
class ListMembershipsParams:
    """Query parameters accepted by the list-memberships endpoint."""

    offset: int | None = None
    limit: int | None = None
    kind: str | None = None
    status: MembershipStatus | None = None
    resource_type: str | None = None
    resource_name: str | None = None
    resource_parent_id: str | None = None
    resource_parent_type: str | None = None
    sandbox: bool | None = None

    def to_query(self) -> dict[str, str]:
        raw: dict[str, Any] = {
            "offset": self.offset,
            "limit": self.limit,
            "kind": self.kind,
            "status": self.status.value if self.status else None,
            "resource.type": self.resource_type,
            "resource.name": self.resource_name,
            "resource.parent.id": self.resource_parent_id,
            "resource.parent.type": self.resource_parent_type,
            "resource.attributes.sandbox": (
                None if self.sandbox is None else str(self.sandbox).lower()
            ),
        }
        return {key: str(value) for key, value in raw.items() if value not in (None, "")}
