"""Configuration helpers for sumup_common."""

from .env import parse_bool_env, parse_float_env

__all__ = [
    "parse_bool_env",
    "parse_float_env",
]
