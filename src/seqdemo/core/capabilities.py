"""Runtime capability probe for the copy-producing operations.

Each operation names the standard-library callables it is built on as
``"module:attribute"`` probes. :func:`detect_capabilities` resolves them once
at startup and returns a :class:`Capabilities` record; the runner consults
that record instead of probing again.

Every probe listed here ships with all supported interpreters (3.10+), so on a
stock runtime the record is all ``True``; the skip path is reached only when a
caller passes its own resolver, as the tests do.
"""

from __future__ import annotations

import importlib
import logging
from dataclasses import asdict, dataclass
from typing import Any, Callable

logger = logging.getLogger(__name__)

Resolver = Callable[[str], Any]

# capability name -> probes that must all resolve to callables
COPY_OPERATION_PROBES: dict[str, tuple[str, ...]] = {
    "sorted": ("builtins:sorted",),
    "reversed": ("builtins:reversed",),
    "spliced": ("itertools:chain", "itertools:islice"),
    "replaced": ("itertools:chain", "itertools:islice"),
}


@dataclass(frozen=True)
class Capabilities:
    sorted: bool = False
    reversed: bool = False
    spliced: bool = False
    replaced: bool = False

    def supports(self, name: str) -> bool:
        return bool(getattr(self, name, False))

    def as_dict(self) -> dict[str, bool]:
        return asdict(self)

    def summary(self) -> str:
        """``Runtime supports: sorted=True, reversed=True, ...``"""
        parts = [f"{k}={v}" for k, v in self.as_dict().items()]
        return "Runtime supports: " + ", ".join(parts)


def resolve_probe(probe: str) -> Any:
    """Import ``module`` and return ``attribute`` from a ``"module:attribute"`` probe.

    Returns ``None`` when either part is missing from the running interpreter.
    """
    module_name, _, attr = probe.partition(":")
    try:
        module = importlib.import_module(module_name)
    except ImportError:
        logger.debug("probe %s: module %s not importable", probe, module_name)
        return None
    return getattr(module, attr, None)


def detect_capabilities(resolve: Resolver = resolve_probe) -> Capabilities:
    found: dict[str, bool] = {}
    for name, probes in COPY_OPERATION_PROBES.items():
        found[name] = all(callable(resolve(p)) for p in probes)
        logger.debug("capability %s=%s (%s)", name, found[name], ", ".join(probes))
    return Capabilities(**found)
