"""seqdemo — mutating vs non-mutating sequence operations, side by side."""

__all__ = [
    "__version__",
    "build_report",
    "validate_report",
    "run_demos",
    "DemoConfig",
    "DemoHarness",
    "format_value",
]
__version__ = "0.1.0"

from seqdemo.api import build_report, validate_report  # noqa: E402, F401
from seqdemo.core.config import DemoConfig  # noqa: E402, F401
from seqdemo.core.formatter import format_value  # noqa: E402, F401
from seqdemo.core.harness import DemoHarness  # noqa: E402, F401
from seqdemo.core.runner import run_demos  # noqa: E402, F401
