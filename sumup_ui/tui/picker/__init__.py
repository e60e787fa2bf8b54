"""Interactive merchant picker: navigation, search debounce, engine and rendering."""

from sumup_ui.tui.picker.engine import (
    BrowseMode,
    FailedMode,
    PickerEngine,
    SearchMode,
    TerminatedMode,
)
from sumup_ui.tui.picker.events import (
    ArmDebounce,
    DebounceFired,
    FetchCompleted,
    FetchRequest,
    IssueFetch,
    KeyPressed,
    PickerOutcome,
    Terminate,
)
from sumup_ui.tui.picker.navigation import NavigationLevel, NavigationStack
from sumup_ui.tui.picker.renderer import PickerView, build_view, to_fragments, to_text
from sumup_ui.tui.picker.runtime import PickerRuntime
from sumup_ui.tui.picker.search import DEBOUNCE_DELAY, SearchController, SearchState

__all__ = [
    "BrowseMode",
    "FailedMode",
    "PickerEngine",
    "SearchMode",
    "TerminatedMode",
    "ArmDebounce",
    "DebounceFired",
    "FetchCompleted",
    "FetchRequest",
    "IssueFetch",
    "KeyPressed",
    "PickerOutcome",
    "Terminate",
    "NavigationLevel",
    "NavigationStack",
    "PickerView",
    "build_view",
    "to_fragments",
    "to_text",
    "PickerRuntime",
    "DEBOUNCE_DELAY",
    "SearchController",
    "SearchState",
]
