"""Shared utilities for seqdemo."""

from seqdemo.utils.exit_codes import ExitCode
from seqdemo.utils.json_norm import (
    display_json_dumps,
    stable_json_dump,
    stable_json_dumps,
    to_builtin,
)

__all__ = [
    "ExitCode",
    "display_json_dumps",
    "stable_json_dump",
    "stable_json_dumps",
    "to_builtin",
]
