"""Enums shared across the harness, catalog and report layers."""

from __future__ import annotations

from enum import Enum


class OperationKind(str, Enum):
    """How an operation treats the sequence it is applied to."""

    MUTATING = "mutating"
    NON_MUTATING = "non_mutating"
    COPY = "copy"


class DisplayKind(str, Enum):
    """Display strategy chosen by the formatter, in fallback order."""

    SEQUENCE = "sequence"
    SET = "set"
    MAP = "map"
    OBJECT = "object"
    SCALAR = "scalar"
