"""Array-method style operations over Python sequences.

Python lists cover most of the classic array vocabulary with built-ins
(``append``, ``pop``, ``reverse``, ``sort``, slicing).  The helpers below fill
in the rest with the return values readers of that vocabulary expect:
``push``/``unshift`` return the new length, ``splice`` returns the removed
items, ``fill``/``copy_within`` return the sequence they modified.

The ``to_*``/``with_item`` helpers never touch their input; they build a new
list from ``sorted``, ``reversed`` and ``itertools``.
"""

from __future__ import annotations

from collections.abc import MutableSequence, Sequence
from itertools import chain, islice
from typing import Any, Callable, Iterable, TypeVar

T = TypeVar("T")
S = TypeVar("S", bound=MutableSequence)


def _clamp_index(index: int, length: int) -> int:
    """Resolve a possibly-negative index against *length*, clamped to [0, length]."""
    if index < 0:
        return max(length + index, 0)
    return min(index, length)


def _splice_bounds(
    length: int, start: int, delete_count: int | None
) -> tuple[int, int]:
    begin = _clamp_index(start, length)
    if delete_count is None:
        return begin, length
    return begin, begin + min(max(delete_count, 0), length - begin)


# ── mutating ────────────────────────────────────────────────────────


def push(seq: MutableSequence[T], *items: T) -> int:
    """Append *items* and return the new length."""
    seq.extend(items)
    return len(seq)


def unshift(seq: MutableSequence[T], *items: T) -> int:
    """Insert *items* at the front, keeping their order; return the new length."""
    seq[0:0] = items
    return len(seq)


def shift(seq: MutableSequence[T]) -> T:
    """Remove and return the first item."""
    return seq.pop(0)


def splice(
    seq: MutableSequence[T],
    start: int,
    delete_count: int | None = None,
    *items: T,
) -> list[T]:
    """Remove *delete_count* items at *start*, insert *items*, return the removed."""
    begin, end = _splice_bounds(len(seq), start, delete_count)
    removed = list(seq[begin:end])
    seq[begin:end] = items
    return removed


def fill(seq: S, value: Any, start: int = 0, end: int | None = None) -> S:
    """Overwrite ``seq[start:end]`` with *value*."""
    length = len(seq)
    begin = _clamp_index(start, length)
    stop = length if end is None else _clamp_index(end, length)
    for i in range(begin, stop):
        seq[i] = value
    return seq


def copy_within(seq: S, target: int, start: int = 0, end: int | None = None) -> S:
    """Copy ``seq[start:end]`` over the items starting at *target*.

    The copy is truncated at the end of the sequence; the length never changes.
    """
    length = len(seq)
    to = _clamp_index(target, length)
    begin = _clamp_index(start, length)
    stop = length if end is None else _clamp_index(end, length)
    count = min(stop - begin, length - to)
    if count <= 0:
        return seq
    chunk = list(seq[begin:begin + count])
    seq[to:to + count] = chunk
    return seq


# ── non-mutating ────────────────────────────────────────────────────


def flatten(seq: Iterable[Any], depth: int = 1) -> list[Any]:
    """Flatten nested lists/tuples up to *depth* levels."""
    out: list[Any] = []
    for item in seq:
        if depth > 0 and isinstance(item, (list, tuple)):
            out.extend(flatten(item, depth - 1))
        else:
            out.append(item)
    return out


def flat_map(seq: Iterable[T], fn: Callable[[T], Iterable[Any]]) -> list[Any]:
    return [y for x in seq for y in fn(x)]


def find_index(seq: Iterable[T], predicate: Callable[[T], bool]) -> int:
    """Index of the first item matching *predicate*, or -1."""
    return next((i for i, x in enumerate(seq) if predicate(x)), -1)


def to_sorted(
    seq: Iterable[T],
    key: Callable[[T], Any] | None = None,
    reverse: bool = False,
) -> list[T]:
    return sorted(seq, key=key, reverse=reverse)


def to_reversed(seq: Sequence[T]) -> list[T]:
    return list(reversed(seq))


def to_spliced(
    seq: Sequence[T],
    start: int,
    delete_count: int | None = None,
    *items: T,
) -> list[T]:
    """Copy of *seq* with the :func:`splice` edit applied."""
    begin, end = _splice_bounds(len(seq), start, delete_count)
    return list(chain(islice(seq, begin), items, islice(seq, end, None)))


def with_item(seq: Sequence[T], index: int, value: T) -> list[T]:
    """Copy of *seq* with ``seq[index]`` replaced by *value*."""
    length = len(seq)
    i = index + length if index < 0 else index
    if not 0 <= i < length:
        raise IndexError(f"index {index} out of range for length {length}")
    return list(chain(islice(seq, i), (value,), islice(seq, i + 1, None)))
