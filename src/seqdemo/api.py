"""
seqdemo.api
===========

Programmatic entrypoints for running the demonstrations without the CLI.

Usage::

    from seqdemo.api import build_report, validate_report

    report, report_dict = build_report()
    validate_report(report_dict)
"""

from __future__ import annotations

import logging
from typing import Any

from seqdemo.core.capabilities import Capabilities, detect_capabilities
from seqdemo.core.config import DemoConfig
from seqdemo.core.harness import DemoHarness
from seqdemo.core.runner import run_demos
from seqdemo.model.demo_record import DemoReport

logger = logging.getLogger(__name__)


def build_report(
    config: DemoConfig | None = None,
    *,
    capabilities: Capabilities | None = None,
) -> tuple[DemoReport, dict[str, Any]]:
    """Run the demonstrations silently and return the report and its dict form.

    Nothing is printed; faults raised by an operation propagate.
    """
    config = config or DemoConfig()
    harness = DemoHarness(config, echo=False)
    report = run_demos(
        config,
        harness=harness,
        capabilities=capabilities or detect_capabilities(),
    )
    return report, report.to_dict()


def validate_report(instance: dict[str, Any]) -> None:
    """Validate a report dict against ``demo_report.schema.json``.

    Raises
    ------
    jsonschema.ValidationError
        If validation fails.
    """
    from seqdemo.contracts.load import REPORT_SCHEMA, validate_instance

    validate_instance(instance, REPORT_SCHEMA)
