"""Runner — walks the catalog top to bottom and prints every section."""

from __future__ import annotations

import logging
from typing import Iterable

from seqdemo.catalog import Demo
from seqdemo.catalog.copying import COPY_DEMOS
from seqdemo.catalog.mutating import MUTATING_DEMOS
from seqdemo.catalog.non_mutating import NON_MUTATING_DEMOS
from seqdemo.core.capabilities import Capabilities, detect_capabilities
from seqdemo.core.config import (
    ALL_SECTIONS,
    SECTION_COPY,
    SECTION_MUTATING,
    SECTION_NON_MUTATING,
    DemoConfig,
)
from seqdemo.core.harness import DemoHarness
from seqdemo.model.demo_record import DemoReport, SectionResult

logger = logging.getLogger(__name__)

SECTION_TITLES: dict[str, str] = {
    SECTION_MUTATING: "Mutating methods",
    SECTION_NON_MUTATING: "Non-mutating methods",
    SECTION_COPY: "Copy-producing methods (feature detected)",
}

SECTION_DEMOS: dict[str, tuple[Demo, ...]] = {
    SECTION_MUTATING: MUTATING_DEMOS,
    SECTION_NON_MUTATING: NON_MUTATING_DEMOS,
    SECTION_COPY: COPY_DEMOS,
}

FOOTER_TITLE = "Done"
TIP = (
    "Tip: compare the 'before'/'after' lines to see which methods "
    "mutate the original list."
)


def demo_name(demo: Demo) -> str:
    """Short operation name used in "not supported" notices."""
    return demo.label.split("(", 1)[0].strip()


def run_section(
    harness: DemoHarness,
    title: str,
    demos: Iterable[Demo],
    capabilities: Capabilities | None = None,
) -> SectionResult:
    """Print *title* and run every demo under it.

    Demos that require a capability missing from *capabilities* are replaced
    by a one-line notice and a blank line.
    """
    section = SectionResult(title=title)
    harness.section(title)
    if capabilities is not None:
        harness.notice(capabilities.summary())

    for demo in demos:
        if demo.requires and capabilities is not None and not capabilities.supports(demo.requires):
            name = demo_name(demo)
            logger.debug("skipping %s: capability %s missing", name, demo.requires)
            harness.notice(f"{name} not supported in this runtime.")
            section.skipped.append(name)
            continue
        section.records.append(
            harness.run(demo.label, demo.make_input, demo.operate, kind=demo.kind)
        )

    logger.debug("section %r: %d demos, %d skipped",
                 title, len(section.records), len(section.skipped))
    return section


def run_demos(
    config: DemoConfig | None = None,
    *,
    harness: DemoHarness | None = None,
    capabilities: Capabilities | None = None,
) -> DemoReport:
    """Run the configured sections in canonical order, then the footer."""
    config = config or DemoConfig()
    if harness is None:
        harness = DemoHarness(config, echo=not config.json_out)
    if capabilities is None:
        capabilities = detect_capabilities()

    report = DemoReport(capabilities=capabilities.as_dict())
    for key in ALL_SECTIONS:
        if not config.wants(key):
            logger.debug("section %s not selected", key)
            continue
        report.sections.append(
            run_section(
                harness,
                SECTION_TITLES[key],
                SECTION_DEMOS[key],
                capabilities if key == SECTION_COPY else None,
            )
        )

    harness.section(FOOTER_TITLE)
    harness.line(TIP)
    logger.debug("ran %d demos", len(report.records))
    return report
