"""Operations that leave the list alone and hand back something new."""

from __future__ import annotations

import functools

from seqdemo import ops
from seqdemo.catalog import Demo

# One shared NaN object: ``in`` checks identity before ``==``.
NAN = float("nan")


def _for_loop(seq: list) -> dict:
    seen = []
    for i, v in enumerate(seq):
        seen.append([i, v])
    # A for statement has no value; show the side effect instead.
    return {"loop_value": None, "side_effect": seen}


def _concat(seq: list) -> list:
    return seq + ["c", "d"] + ["e"]


NON_MUTATING_DEMOS: tuple[Demo, ...] = (
    Demo("for i, v in enumerate(seq)", lambda: ["a", "b", "c"], _for_loop),
    # map / flatten
    Demo("[s.upper() for s in seq]", lambda: ["a", "b", "c"], lambda a: [s.upper() for s in a]),
    Demo("flatten(seq, depth)", lambda: ["a", ["b", ["c"]]], lambda a: ops.flatten(a, 2)),
    Demo("flat_map(seq, fn)", lambda: ["a", "b", "c"], lambda a: ops.flat_map(a, lambda x: [x, x])),
    # filter / slice
    Demo(
        "list(filter(predicate, seq))",
        lambda: ["a", "bb", "c", "dd"],
        lambda a: list(filter(lambda s: len(s) == 2, a)),
    ),
    Demo("seq[start:stop]", lambda: ["a", "b", "c", "d"], lambda a: a[1:3]),
    # reduce, left and right
    Demo(
        "functools.reduce(fn, seq, initial)",
        lambda: ["a", "b", "c"],
        lambda a: functools.reduce(lambda acc, x: acc + x, a, ""),
    ),
    Demo(
        "functools.reduce(fn, reversed(seq), initial)",
        lambda: ["a", "b", "c"],
        lambda a: functools.reduce(lambda acc, x: acc + x, reversed(a), ""),
    ),
    # find / find_index
    Demo(
        "next((x for x in seq if predicate(x)), None)",
        lambda: ["a", "bb", "c", "dd"],
        lambda a: next((x for x in a if len(x) == 2), None),
    ),
    Demo(
        "find_index(seq, predicate)",
        lambda: ["a", "bb", "c"],
        lambda a: ops.find_index(a, lambda x: len(x) == 2),
    ),
    # membership / position
    Demo("value in seq", lambda: ["a", "b", "c"], lambda a: "b" in a),
    Demo("seq.index(value)", lambda: ["a", "b", "c"], lambda a: a.index("b")),
    Demo(
        "value in seq (identity, then ==; finds the same NaN)",
        lambda: [NAN],
        lambda a: NAN in a,
    ),
    Demo(
        "any(x == value for x in seq) (== only, never finds NaN)",
        lambda: [NAN],
        lambda a: any(x == NAN for x in a),
    ),
    # any / all
    Demo("any(predicate(x) for x in seq)", lambda: ["a", "bb", "c"], lambda a: any(len(x) == 2 for x in a)),
    Demo("all(predicate(x) for x in seq)", lambda: ["aa", "bb", "cc"], lambda a: all(len(x) == 2 for x in a)),
    # concatenation / join
    Demo("seq + other + ...", lambda: ["a", "b"], _concat),
    Demo("separator.join(seq)", lambda: ["a", "b", "c"], lambda a: "-".join(a)),
)
