"""DemoRecord / DemoReport — what a finished demonstration run produced."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from seqdemo import __version__
from seqdemo.model import OperationKind
from seqdemo.utils.json_norm import to_builtin

SCHEMA_VERSION = "demo_report_v1"


@dataclass(frozen=True, slots=True)
class DemoRecord:
    """One harness run: the input before and after, and what came back.

    ``mutated`` is ``None`` when the input was not a sequence and the
    comparison does not apply.
    """

    label: str
    before: Any
    after: Any
    result: Any
    mutated: bool | None
    kind: OperationKind = OperationKind.NON_MUTATING

    # ── serialisation ───────────────────────────────────────────────

    def to_dict(self) -> dict[str, Any]:
        d: dict[str, Any] = {
            "label": self.label,
            "kind": self.kind.value,
            "before": to_builtin(self.before),
            "after": to_builtin(self.after),
            "result": to_builtin(self.result),
        }
        if self.mutated is not None:
            d["mutated"] = self.mutated
        return d


@dataclass(slots=True)
class SectionResult:
    """Records produced under one section header."""

    title: str
    records: list[DemoRecord] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "records": [r.to_dict() for r in self.records],
            "skipped": list(self.skipped),
        }


@dataclass(slots=True)
class DemoReport:
    """Assembled run matching ``demo_report.schema.json``."""

    capabilities: dict[str, bool] = field(default_factory=dict)
    sections: list[SectionResult] = field(default_factory=list)
    tool_version: str = __version__

    @property
    def records(self) -> list[DemoRecord]:
        return [r for s in self.sections for r in s.records]

    def to_dict(self) -> dict[str, Any]:
        records = self.records
        return {
            "schema_version": SCHEMA_VERSION,
            "tool_version": self.tool_version,
            "capabilities": dict(self.capabilities),
            "sections": [s.to_dict() for s in self.sections],
            "summary": {
                "demos_total": len(records),
                "mutated_total": sum(1 for r in records if r.mutated),
                "skipped_total": sum(len(s.skipped) for s in self.sections),
            },
        }
