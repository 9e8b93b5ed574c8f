"""JSON serialization — the two dump paths used by seqdemo.

``display_json_dumps``
  Compact, insertion-ordered JSON used by the formatter and by the harness
  when it compares snapshots. Keys are never sorted: the order a reader sees
  must be the order the value iterates in.

``stable_json_dumps``
  Canonical artifact JSON for ``--json`` reports:
    - Stable key ordering (``sort_keys=True``)
    - Trailing newline at EOF
    - Dataclasses → dicts (via ``dataclasses.asdict``)
    - NaN/inf floats → strings (``"nan"``, ``"inf"``)
"""

from __future__ import annotations

import json
from collections.abc import Mapping, Sequence, Set
from dataclasses import asdict, is_dataclass
from types import SimpleNamespace
from typing import IO, Any

_TEXT_TYPES = (str, bytes, bytearray)


def to_builtin(obj: Any) -> Any:
    """Convert common non-JSON types into JSON-safe builtins."""
    if obj is None:
        return None
    if isinstance(obj, (str, int, bool, float)):
        return obj
    if is_dataclass(obj) and not isinstance(obj, type):
        return to_builtin(asdict(obj))
    if isinstance(obj, SimpleNamespace):
        return to_builtin(vars(obj))
    if isinstance(obj, Mapping):
        return {str(k): to_builtin(v) for k, v in obj.items()}
    if isinstance(obj, Set) or (
        isinstance(obj, Sequence) and not isinstance(obj, _TEXT_TYPES)
    ):
        return [to_builtin(v) for v in obj]
    # Fall back to string (keeps the formatter total)
    return str(obj)


def _nonfinite_to_str(obj: Any) -> Any:
    """Recursively replace NaN/inf floats, which JSON has no representation for."""
    if isinstance(obj, float):
        # Keep NaN/inf stable as strings (JSON has no native representation)
        if obj != obj or obj in (float("inf"), float("-inf")):
            return str(obj)
        return obj
    if isinstance(obj, Mapping):
        return {k: _nonfinite_to_str(v) for k, v in obj.items()}
    if isinstance(obj, list):
        return [_nonfinite_to_str(v) for v in obj]
    return obj


def display_json_dumps(obj: Any) -> str:
    """Compact JSON in iteration order, e.g. ``["a","b"]``."""
    return json.dumps(
        to_builtin(obj),
        ensure_ascii=False,
        separators=(",", ":"),
    )


def stable_json_dumps(obj: Any, *, indent: int | None = 2) -> str:
    """
    Canonical JSON serialization used for report artifacts.

    Guarantees:
      - stable key ordering (sort_keys=True)
      - stable newline at EOF
      - strict RFC 8259 output: NaN/inf become strings
    """
    s = json.dumps(
        _nonfinite_to_str(to_builtin(obj)),
        allow_nan=False,
        indent=indent,
        sort_keys=True,
        ensure_ascii=False,
    )
    return s + "\n"


def stable_json_dump(obj: Any, fp: IO[str], *, indent: int | None = 2) -> None:
    fp.write(stable_json_dumps(obj, indent=indent))
