"""UI wiring helpers for CLI/TUI setup."""

from sumup_ui.wiring.dependencies import UIContext, configure_logging, debounce_delay_from_env

__all__ = ["UIContext", "configure_logging", "debounce_delay_from_env"]
