"""Tests for membership and merchant table builders."""

from datetime import datetime, timedelta, timezone

import pytest

from sumup_app.api import MembershipList
from sumup_ui.presenters.memberships import build_memberships_table, format_timestamp
from sumup_ui.presenters.merchant import build_merchant_table


pytestmark = pytest.mark.unit_ui


def test_memberships_table_rows() -> None:
    result = MembershipList.model_validate(
        {
            "items": [
                {
                    "id": "mem_1",
                    "roles": ["role_admin", "role_owner"],
                    "status": "accepted",
                    "created_at": "2024-05-01T12:00:00+02:00",
                    "resource": {"id": "MC1", "type": "merchant", "name": "Acme Shop"},
                },
                {
                    "id": "mem_2",
                    "roles": None,
                    "status": "something-new",
                    "resource": {"id": "org1", "type": "organization", "name": "Acme"},
                },
            ]
        }
    )

    table = build_memberships_table(result)

    assert table.title == "Memberships"
    assert table.columns == ["ID", "Resource", "Type", "Roles", "Status", "Created At"]
    assert table.rows == [
        ["mem_1", "Acme Shop", "merchant", "role_admin, role_owner", "Accepted", "2024-05-01T10:00:00Z"],
        ["mem_2", "Acme", "organization", "-", "Unknown", "-"],
    ]


def test_format_timestamp_converts_to_utc() -> None:
    value = datetime(2024, 1, 1, 1, 30, tzinfo=timezone(timedelta(hours=3)))

    assert format_timestamp(value) == "2023-12-31T22:30:00Z"


def test_merchant_table_flattens_nested_fields() -> None:
    table = build_merchant_table(
        {
            "merchant_code": "MC1",
            "company": {"name": "Acme", "address": {"city": "Berlin"}},
            "tags": ["a", "b"],
            "website": None,
        }
    )

    assert table.columns == ["Field", "Value"]
    assert table.rows == [
        ["merchant_code", "MC1"],
        ["company.name", "Acme"],
        ["company.address.city", "Berlin"],
        ["tags", "a, b"],
        ["website", "-"],
    ]
