"""Tests for the scripted headless merchant picker."""

import asyncio

import pytest

from sumup_app.api import MembershipRecord, ResourceType
from sumup_ui.tui.picker.events import PickerOutcome
from sumup_ui.tui.system.headless import HeadlessUI


pytestmark = pytest.mark.unit_ui

ACME = MembershipRecord("org1", ResourceType.ORGANIZATION, "Acme")
SHOP = MembershipRecord("m1", ResourceType.MERCHANT, "Acme Shop", {"merchant_code": "MC1"})
OTHER = MembershipRecord("m3", ResourceType.MERCHANT, "Other", {"merchant_code": "MC3"})
EU_SHOP = MembershipRecord("m2", ResourceType.MERCHANT, "Acme Shop EU", {"merchant_code": "MEU"})


class StaticSource:
    def __init__(self, responses) -> None:
        self.responses = responses
        self.calls: list[tuple] = []

    async def fetch(self, query=None, parent_id=None, parent_type=None):
        self.calls.append((query, parent_id))
        return self.responses.get((query, parent_id), [])


def test_scripted_keys_drive_real_engine() -> None:
    ui = HeadlessUI(next_picker_keys=["enter", "enter"])
    source = StaticSource({(None, "org1"): [EU_SHOP]})

    outcome = asyncio.run(ui.picker.pick([ACME, SHOP], source))

    assert outcome.selected == EU_SHOP
    assert source.calls == [(None, "org1")]
    assert any("Select a merchant from: Acme" in frame for frame in ui.recorded_frames)


def test_text_tokens_are_typed_character_by_character() -> None:
    ui = HeadlessUI(next_picker_keys=["/", "other", "enter", "enter"])
    source = StaticSource({("other", None): [OTHER]})

    outcome = asyncio.run(ui.picker.pick([ACME, SHOP, OTHER], source))

    assert source.calls == [("other", None)]
    assert outcome.selected == OTHER
    assert any("Search: other" in frame for frame in ui.recorded_frames)


def test_no_script_quits_without_selection() -> None:
    ui = HeadlessUI()

    outcome = asyncio.run(ui.picker.pick([SHOP], StaticSource({})))

    assert outcome.cancelled
    assert ui.recorded_frames[0].startswith("Select a merchant or organization:")


def test_preset_outcome_short_circuits() -> None:
    preset = PickerOutcome(selected=SHOP)
    ui = HeadlessUI(next_picker_outcome=preset)

    assert asyncio.run(ui.picker.pick([ACME], StaticSource({}))) is preset
    assert ui.recorded_frames == []
