"""Demonstration catalog.

Each section module (``mutating``, ``non_mutating``, ``copying``) exposes an
ordered tuple of :class:`Demo` entries. The runner walks them top to bottom;
nothing here runs at import time.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

from seqdemo.model import OperationKind


@dataclass(frozen=True)
class Demo:
    """A labelled operation plus the factory for its fresh input."""

    label: str
    make_input: Callable[[], Any]
    operate: Callable[[Any], Any]
    kind: OperationKind = OperationKind.NON_MUTATING
    # Capability name that must be present (copy-producing demos only).
    requires: str | None = None


__all__ = ["Demo"]
