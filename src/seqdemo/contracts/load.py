"""Load and validate JSON instances against the bundled schemas.

Usage::

    from seqdemo.contracts.load import validate_instance, validate_file

    validate_instance(report_dict, "demo_report.schema.json")
    validate_file(Path("out/report.json"), "demo_report.schema.json")
"""

from __future__ import annotations

import json
import logging
from importlib import resources
from pathlib import Path
from typing import Any

import jsonschema

logger = logging.getLogger(__name__)

SCHEMA_DIR = "data/schemas"
REPORT_SCHEMA = "demo_report.schema.json"


def load_schema(name: str) -> dict[str, Any]:
    """Load a bundled JSON schema by filename."""
    ref = resources.files("seqdemo").joinpath(SCHEMA_DIR, name)
    return json.loads(ref.read_text(encoding="utf-8"))


def validate_instance(instance: Any, schema_name: str = REPORT_SCHEMA) -> None:
    """Validate *instance* against the named schema.

    Raises ``jsonschema.ValidationError`` on failure.
    """
    schema = load_schema(schema_name)
    jsonschema.validate(instance=instance, schema=schema)
    logger.debug("instance valid against %s", schema_name)


def validate_file(instance_path: Path, schema_name: str = REPORT_SCHEMA) -> None:
    """Load a JSON file and validate it against the named schema."""
    instance = json.loads(instance_path.read_text(encoding="utf-8"))
    validate_instance(instance, schema_name)
