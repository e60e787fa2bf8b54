"""Public API surface for sumup_common."""

from sumup_common.errors import (
    ApiError,
    ConfigurationError,
    ContextError,
    MembershipFetchError,
    SumupError,
    wrap_error,
)
from sumup_common.logging import LogSettings, configure_logging, suspend_console_logging

__all__ = [
    "configure_logging",
    "suspend_console_logging",
    "LogSettings",
    "SumupError",
    "ApiError",
    "ConfigurationError",
    "ContextError",
    "MembershipFetchError",
    "wrap_error",
]
