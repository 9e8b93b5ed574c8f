"""Demo harness — run one operation against a fresh input and report on it."""

from __future__ import annotations

import copy
import sys
from typing import IO, Any, Callable

from seqdemo.core.config import DemoConfig
from seqdemo.core.formatter import format_value, is_sequence
from seqdemo.model import OperationKind
from seqdemo.model.demo_record import DemoRecord
from seqdemo.utils.json_norm import display_json_dumps


class DemoHarness:
    """Prints labelled before/after/result blocks.

    The harness does no validation of its own: whatever ``operate`` raises
    propagates to the caller unchanged.
    """

    def __init__(
        self,
        config: DemoConfig | None = None,
        *,
        stream: IO[str] | None = None,
        echo: bool = True,
    ):
        self.config = config or DemoConfig()
        self._stream = stream
        self.echo = echo

    @property
    def stream(self) -> IO[str]:
        return self._stream if self._stream is not None else sys.stdout

    # ── raw output ──────────────────────────────────────────────────

    def line(self, text: str = "") -> None:
        if self.echo:
            print(text, file=self.stream)

    def divider(self) -> None:
        self.line("-" * self.config.width)

    def section(self, title: str) -> None:
        self.divider()
        self.line(title)
        self.divider()

    def notice(self, text: str) -> None:
        """One line of text followed by a blank line."""
        self.line(text)
        self.line()

    # ── demonstrations ──────────────────────────────────────────────

    def run(
        self,
        label: str,
        make_input: Callable[[], Any],
        operate: Callable[[Any], Any],
        *,
        kind: OperationKind = OperationKind.NON_MUTATING,
    ) -> DemoRecord:
        value = make_input()
        sequence = is_sequence(value)
        before = copy.copy(value) if sequence else value

        result = operate(value)

        mutated: bool | None = None
        if sequence:
            mutated = display_json_dumps(before) != display_json_dumps(value)

        pad = self.config.indent
        self.line(label)
        self.line(f"{pad}before: {format_value(before)}")
        self.line(f"{pad}after : {format_value(value)}")
        self.line(f"{pad}result: {format_value(result)}")
        if mutated is not None:
            self.line(f"{pad}mutated original? {mutated}")
        self.line()

        # Snapshot ``after`` so later mutation of the input cannot leak in.
        after = copy.copy(value) if sequence else value
        return DemoRecord(
            label=label,
            before=before,
            after=after,
            result=result,
            mutated=mutated,
            kind=kind,
        )
