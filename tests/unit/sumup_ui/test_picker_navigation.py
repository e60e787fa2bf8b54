"""Tests for the picker navigation stack."""

import pytest

from sumup_app.api import MembershipRecord, ResourceType
from sumup_ui.tui.picker.navigation import NavigationLevel, NavigationStack


pytestmark = pytest.mark.unit_ui


def _record(resource_id: str) -> MembershipRecord:
    return MembershipRecord(resource_id, ResourceType.MERCHANT, resource_id.upper())


def test_push_and_pop_move_between_levels() -> None:
    root = NavigationLevel(items=[_record("a"), _record("b")])
    stack = NavigationStack(root)
    child = NavigationLevel(parent_id="org1", parent_type=ResourceType.ORGANIZATION, parent_name="Acme")

    stack.push(child)

    assert stack.current is child
    assert len(stack) == 1
    assert stack.breadcrumb() == ["Acme"]
    assert stack.pop() is root
    assert root.items == [_record("a"), _record("b")]
    assert stack.pop() is None
    assert stack.current is root


def test_push_rejects_level_already_on_stack() -> None:
    root = NavigationLevel()
    stack = NavigationStack(root)

    with pytest.raises(ValueError):
        stack.push(root)


def test_replace_current_items_only_touches_current_level() -> None:
    root = NavigationLevel(items=[_record("a")])
    stack = NavigationStack(root)
    child = NavigationLevel(parent_id="org1")
    stack.push(child)

    stack.replace_current_items([_record("c")])

    assert [item.resource_id for item in child.items] == ["c"]
    assert [item.resource_id for item in root.items] == ["a"]
    assert child.level_id != root.level_id
    assert root.is_root and not child.is_root


def test_find_only_returns_levels_still_on_stack() -> None:
    root = NavigationLevel()
    stack = NavigationStack(root)
    child = NavigationLevel(parent_id="org1")
    stack.push(child)

    assert stack.find(root.level_id) is root
    assert stack.find(child.level_id) is child

    stack.pop()
    assert stack.find(child.level_id) is None


def test_level_is_loading_while_any_request_is_in_flight() -> None:
    level = NavigationLevel(parent_id="org1")
    assert not level.loading

    level.base_request = 3
    assert level.loading

    level.base_request = None
    level.search_request = 4
    assert level.loading
