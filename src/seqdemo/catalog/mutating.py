"""Operations that change the list they are given."""

from __future__ import annotations

from seqdemo import ops
from seqdemo.catalog import Demo
from seqdemo.model import OperationKind

_M = OperationKind.MUTATING


def _sort_default(seq: list) -> None:
    return seq.sort()


def _sort_reversed(seq: list) -> None:
    # Strings have no numeric order; a descending sort is the custom ordering.
    return seq.sort(reverse=True)


MUTATING_DEMOS: tuple[Demo, ...] = (
    # push / pop
    Demo("push(seq, *items)", lambda: ["a", "b"], lambda a: ops.push(a, "c", "d"), _M),
    Demo("seq.append(item)", lambda: ["a", "b"], lambda a: a.append("c"), _M),
    Demo("seq.pop()", lambda: ["a", "b", "c"], lambda a: a.pop(), _M),
    # unshift / shift
    Demo("unshift(seq, *items)", lambda: ["c", "d"], lambda a: ops.unshift(a, "a", "b"), _M),
    Demo("shift(seq)", lambda: ["a", "b", "c"], ops.shift, _M),
    # arbitrary position
    Demo("seq.insert(index, item)", lambda: ["a", "c"], lambda a: a.insert(1, "b"), _M),
    Demo("seq.remove(value)", lambda: ["a", "b", "c", "b"], lambda a: a.remove("b"), _M),
    Demo(
        "splice(seq, start, delete_count, *items)",
        lambda: ["a", "b", "c", "d"],
        lambda a: ops.splice(a, 1, 2, "X"),
        _M,
    ),
    # reverse / sort
    Demo("seq.reverse()", lambda: ["a", "b", "c"], lambda a: a.reverse(), _M),
    Demo("seq.sort() (default is string order)", lambda: ["b", "a", "c"], _sort_default, _M),
    Demo(
        "seq.sort(reverse=True) (custom order, still mutates)",
        lambda: ["a", "b", "c"],
        _sort_reversed,
        _M,
    ),
    # fill / copy_within
    Demo(
        "fill(seq, value, start, end)",
        lambda: ["a", "b", "c", "d"],
        lambda a: ops.fill(a, "_", 1, 3),
        _M,
    ),
    Demo(
        "copy_within(seq, target, start, end)",
        lambda: ["a", "b", "c", "d", "e"],
        lambda a: ops.copy_within(a, 0, 3),
        _M,
    ),
)
