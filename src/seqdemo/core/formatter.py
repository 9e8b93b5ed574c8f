"""Formatter — turns any demo value into a display string.

Dispatch is explicit: :func:`classify` resolves a closed :class:`DisplayKind`
from the runtime type, and :data:`_RENDERERS` maps every kind to exactly one
strategy. Fallback order is sequence, set/map, structured object, scalar.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence, Set
from dataclasses import is_dataclass
from types import SimpleNamespace
from typing import Any, Callable

from seqdemo.model import DisplayKind
from seqdemo.utils.json_norm import display_json_dumps

_TEXT_TYPES = (str, bytes, bytearray)


def is_sequence(value: Any) -> bool:
    """True for ordered, index-addressable collections (not text)."""
    return isinstance(value, Sequence) and not isinstance(value, _TEXT_TYPES)


def _is_structured(value: Any) -> bool:
    if type(value) is dict or isinstance(value, SimpleNamespace):
        return True
    return is_dataclass(value) and not isinstance(value, type)


def classify(value: Any) -> DisplayKind:
    if is_sequence(value):
        return DisplayKind.SEQUENCE
    if isinstance(value, Set):
        return DisplayKind.SET
    # A plain dict is an object literal, any other mapping is shown as a Map.
    if isinstance(value, Mapping) and type(value) is not dict:
        return DisplayKind.MAP
    if _is_structured(value):
        return DisplayKind.OBJECT
    return DisplayKind.SCALAR


def _render_set(value: Set) -> str:
    return f"Set({display_json_dumps(list(value))})"


def _render_map(value: Mapping) -> str:
    return f"Map({display_json_dumps([[k, v] for k, v in value.items()])})"


_RENDERERS: dict[DisplayKind, Callable[[Any], str]] = {
    DisplayKind.SEQUENCE: display_json_dumps,
    DisplayKind.SET: _render_set,
    DisplayKind.MAP: _render_map,
    DisplayKind.OBJECT: display_json_dumps,
    DisplayKind.SCALAR: str,
}


def format_value(value: Any) -> str:
    """Render *value* for the before/after/result lines."""
    return _RENDERERS[classify(value)](value)
