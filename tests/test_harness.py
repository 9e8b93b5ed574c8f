"""Tests for DemoHarness: snapshots, mutation detection and the printed block."""

from __future__ import annotations

import io
from collections import UserList, deque

import pytest

from seqdemo import ops
from seqdemo.core.config import DemoConfig
from seqdemo.core.harness import DemoHarness
from seqdemo.model import OperationKind

NAN = float("nan")


@pytest.fixture
def out() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def harness(out: io.StringIO) -> DemoHarness:
    return DemoHarness(DemoConfig(), stream=out)


class TestMutationFlag:
    """``mutated`` follows the serialized before/after comparison."""

    def test_push_appends_and_returns_new_length(self, harness):
        rec = harness.run("push", lambda: ["a", "b"], lambda a: ops.push(a, "c", "d"))
        assert rec.after == ["a", "b", "c", "d"]
        assert rec.result == 4
        assert rec.mutated is True

    def test_shift_removes_first(self, harness):
        rec = harness.run("shift", lambda: ["a", "b", "c"], ops.shift)
        assert rec.after == ["b", "c"]
        assert rec.result == "a"
        assert rec.mutated is True

    def test_upper_map_leaves_input_alone(self, harness):
        rec = harness.run("map", lambda: ["a", "b", "c"], lambda a: [s.upper() for s in a])
        assert rec.result == ["A", "B", "C"]
        assert rec.after == ["a", "b", "c"]
        assert rec.before == rec.after
        assert rec.mutated is False

    def test_in_place_op_with_no_visible_change_is_not_mutated(self, harness):
        rec = harness.run("sort", lambda: ["a", "b"], lambda a: a.sort())
        assert rec.result is None
        assert rec.mutated is False

    def test_before_is_a_snapshot_not_the_input(self, harness):
        rec = harness.run("pop", lambda: ["a", "b"], lambda a: a.pop())
        assert rec.before == ["a", "b"]
        assert rec.after == ["a"]

    def test_nan_found_by_identity_aware_membership(self, harness):
        rec = harness.run("in", lambda: [NAN], lambda a: NAN in a)
        assert rec.result is True
        assert rec.mutated is False

    def test_nan_missed_by_equality_search(self, harness):
        rec = harness.run("==", lambda: [NAN], lambda a: any(x == NAN for x in a))
        assert rec.result is False

    def test_non_sequence_input_has_no_flag(self, harness, out):
        rec = harness.run("dict", lambda: {"a": 1}, lambda d: d.get("a"))
        assert rec.mutated is None
        assert "mutated original?" not in out.getvalue()

    def test_kind_is_recorded(self, harness):
        rec = harness.run("x", list, len, kind=OperationKind.COPY)
        assert rec.kind is OperationKind.COPY


class TestOtherSequenceTypes:
    """Non-list sequences are snapshotted, compared and printed element-wise."""

    def test_push_on_userlist(self, harness, out):
        rec = harness.run("push", lambda: UserList(["a"]), lambda a: ops.push(a, "b"))
        assert rec.mutated is True
        assert rec.result == 2
        text = out.getvalue()
        assert '  before: ["a"]\n' in text
        assert '  after : ["a","b"]\n' in text

    def test_deque_append_is_mutation(self, harness, out):
        rec = harness.run("append", lambda: deque(["a"]), lambda d: d.append("b"))
        assert rec.mutated is True
        assert list(rec.before) == ["a"]
        assert list(rec.after) == ["a", "b"]
        assert '  after : ["a","b"]\n' in out.getvalue()

    def test_deque_rotate_by_full_length_is_not_mutation(self, harness):
        rec = harness.run("rotate", lambda: deque(["a", "b"]), lambda d: d.rotate(2))
        assert rec.mutated is False

    def test_range_is_read_only(self, harness, out):
        rec = harness.run("sum", lambda: range(3), sum)
        assert rec.mutated is False
        assert rec.result == 3
        assert "  before: [0,1,2]\n" in out.getvalue()


class TestOutput:
    def test_block_layout(self, harness, out):
        harness.run("push(seq, *items)", lambda: ["a", "b"], lambda a: ops.push(a, "c", "d"))
        assert out.getvalue() == (
            "push(seq, *items)\n"
            '  before: ["a","b"]\n'
            '  after : ["a","b","c","d"]\n'
            "  result: 4\n"
            "  mutated original? True\n"
            "\n"
        )

    def test_non_sequence_block_has_four_lines_and_blank(self, harness, out):
        harness.run("get", lambda: {"a": 1}, lambda d: d["a"])
        lines = out.getvalue().split("\n")
        assert lines == ["get", '  before: {"a":1}', '  after : {"a":1}', "  result: 1", "", ""]

    def test_section_uses_configured_width(self, out):
        h = DemoHarness(DemoConfig(width=10), stream=out)
        h.section("Title")
        assert out.getvalue() == "----------\nTitle\n----------\n"

    def test_notice_adds_blank_line(self, harness, out):
        harness.notice("hello")
        assert out.getvalue() == "hello\n\n"

    def test_echo_off_prints_nothing(self, out):
        h = DemoHarness(stream=out, echo=False)
        rec = h.run("pop", lambda: ["a"], lambda a: a.pop())
        h.section("S")
        assert out.getvalue() == ""
        assert rec.result == "a"

    def test_defaults_to_stdout(self, capsys):
        DemoHarness().line("hi")
        assert capsys.readouterr().out == "hi\n"


class TestFaults:
    def test_operation_errors_propagate(self, harness):
        with pytest.raises(IndexError):
            harness.run("pop", list, lambda a: a.pop())

    def test_factory_errors_propagate(self, harness):
        def boom():
            raise RuntimeError("no input")

        with pytest.raises(RuntimeError):
            harness.run("x", boom, len)
