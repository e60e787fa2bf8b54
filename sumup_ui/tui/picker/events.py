"""Events consumed and effects produced by the picker engine."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from sumup_app.api import MembershipRecord, ResourceType

KEY_UP = "up"
KEY_DOWN = "down"
KEY_ENTER = "enter"
KEY_ESCAPE = "escape"
KEY_BACKSPACE = "backspace"
KEY_CLEAR_LINE = "c-u"
KEY_INTERRUPT = "c-c"

NAMED_KEYS = frozenset(
    {KEY_UP, KEY_DOWN, KEY_ENTER, KEY_ESCAPE, KEY_BACKSPACE, KEY_CLEAR_LINE, KEY_INTERRUPT}
)


@dataclass(frozen=True)
class FetchRequest:
    """One listing request, tagged with its sequence number and target level."""

    sequence: int
    level_id: int
    query: str = ""
    parent_id: Optional[str] = None
    parent_type: Optional[ResourceType] = None


@dataclass(frozen=True)
class PickerOutcome:
    """Terminal result of a picker session.

    Exactly one of: a selected record, an error, or neither (no selection).
    """

    selected: Optional[MembershipRecord] = None
    error: Optional[Exception] = None

    @property
    def cancelled(self) -> bool:
        return self.selected is None and self.error is None


@dataclass(frozen=True)
class KeyPressed:
    key: str


@dataclass(frozen=True)
class DebounceFired:
    generation: int


@dataclass(frozen=True)
class FetchCompleted:
    request: FetchRequest
    items: tuple[MembershipRecord, ...] = ()
    error: Optional[Exception] = None


PickerEvent = Union[KeyPressed, DebounceFired, FetchCompleted]


@dataclass(frozen=True)
class ArmDebounce:
    generation: int
    delay: float


@dataclass(frozen=True)
class IssueFetch:
    request: FetchRequest


@dataclass(frozen=True)
class Terminate:
    outcome: PickerOutcome


Effect = Union[ArmDebounce, IssueFetch, Terminate]
