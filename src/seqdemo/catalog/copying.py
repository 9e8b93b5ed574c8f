"""Copy-producing counterparts of the mutating operations.

Each entry names the capability it needs; the runner skips it when
:func:`seqdemo.core.capabilities.detect_capabilities` did not find it.
"""

from __future__ import annotations

from seqdemo import ops
from seqdemo.catalog import Demo
from seqdemo.model import OperationKind

_C = OperationKind.COPY

COPY_DEMOS: tuple[Demo, ...] = (
    Demo("to_sorted(seq)", lambda: ["b", "a", "c"], ops.to_sorted, _C, requires="sorted"),
    Demo("to_reversed(seq)", lambda: ["a", "b", "c"], ops.to_reversed, _C, requires="reversed"),
    Demo(
        "to_spliced(seq, start, delete_count, *items)",
        lambda: ["a", "b", "c", "d"],
        lambda a: ops.to_spliced(a, 1, 2, "X"),
        _C,
        requires="spliced",
    ),
    Demo(
        "with_item(seq, index, value)",
        lambda: ["a", "b", "c"],
        lambda a: ops.with_item(a, 1, "B"),
        _C,
        requires="replaced",
    ),
)
