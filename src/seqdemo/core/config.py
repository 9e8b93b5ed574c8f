"""Demo configuration dataclass."""

from __future__ import annotations

from dataclasses import dataclass

SECTION_MUTATING = "mutating"
SECTION_NON_MUTATING = "non-mutating"
SECTION_COPY = "copy"

# Canonical run order.
ALL_SECTIONS: tuple[str, ...] = (
    SECTION_MUTATING,
    SECTION_NON_MUTATING,
    SECTION_COPY,
)


@dataclass(frozen=True)
class DemoConfig:
    """Immutable run configuration, built by the CLI from its arguments."""

    width: int = 80               # rule line width
    indent: str = "  "            # prefix for before/after/result lines
    sections: tuple[str, ...] = ALL_SECTIONS
    json_out: bool = False        # emit the JSON report instead of text

    def wants(self, section: str) -> bool:
        return section in self.sections
