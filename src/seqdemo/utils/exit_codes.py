"""Centralized exit-code contract for the CLI.

Code  Meaning
----  -------
  0   Success — demo finished, or report validated
  1   Violation — report does not match the bundled schema
  2   Error — usage error, missing file, unreadable JSON
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    SUCCESS = 0
    VIOLATION = 1
    ERROR = 2
