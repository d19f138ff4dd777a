"""Tests for the dollar fence scanner."""

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from patitex.parsing.fence import FenceRun, count_run, find_fence


class TestCountRun:
    def test_counts_consecutive_dollars(self) -> None:
        assert count_run("$$$x", 0) == 3

    def test_zero_when_not_on_char(self) -> None:
        assert count_run("x$$", 0) == 0

    def test_other_char(self) -> None:
        assert count_run("``code", 0, "`") == 2

    def test_run_at_end(self) -> None:
        assert count_run("ab$$", 2) == 2


class TestFindFence:
    """Scanning a single line for a blank-terminated run of two or more $."""

    @pytest.mark.parametrize(
        "line,expected",
        [
            ("$$", FenceRun(0, 2)),
            ("$$\n", FenceRun(0, 2)),
            ("$$  \t\n", FenceRun(0, 2)),
            ("x+y$$", FenceRun(3, 2)),
            ("\\end{pmatrix}$$\n", FenceRun(13, 2)),
            ("$$$", FenceRun(0, 3)),
            ("a $$$$ ", FenceRun(2, 4)),
        ],
    )
    def test_valid_fences(self, line: str, expected: FenceRun) -> None:
        assert find_fence(line) == expected

    @pytest.mark.parametrize(
        "line",
        [
            "",
            "\n",
            "x+y",
            "$",
            "x$\n",
            "$$x",
            "$$x$",
            "a $ b",
        ],
    )
    def test_not_a_fence(self, line: str) -> None:
        assert find_fence(line) is None

    def test_rejected_run_is_skipped_and_scan_continues(self) -> None:
        # $$x is followed by content, the later run is blank-terminated
        assert find_fence("$$x+y$$\n") == FenceRun(5, 2)

    def test_lone_dollar_before_fence(self) -> None:
        assert find_fence("a$b$$") == FenceRun(3, 2)

    def test_start_offset(self) -> None:
        assert find_fence("$$$$", 2) == FenceRun(2, 2)
        assert find_fence("$$x$$", 2) == FenceRun(3, 2)

    def test_start_inside_run_sees_rest_of_run(self) -> None:
        assert find_fence("$$$", 1) == FenceRun(1, 2)

    def test_end_property(self) -> None:
        assert FenceRun(3, 2).end == 5


class TestFindFenceProperties:
    """The scanner is total and its answers satisfy the fence definition."""

    @given(line=st.text(alphabet="$ x\\\t\n{}", max_size=40))
    @settings(max_examples=200)
    def test_result_is_a_blank_terminated_run(self, line: str) -> None:
        run = find_fence(line)
        if run is None:
            return
        assert run.length >= 2
        assert line[run.pos : run.end] == "$" * run.length
        assert line[run.end :].strip() == ""
        # Maximal run: the character after it is not a dollar
        assert run.end == len(line) or line[run.end] != "$"

    @given(line=st.text(alphabet="$ ab", max_size=40))
    @settings(max_examples=200)
    def test_no_fence_means_no_blank_terminated_double_dollar(self, line: str) -> None:
        if find_fence(line) is not None:
            return
        stripped = line.rstrip()
        # The trailing run (if any) must be shorter than two
        trailing = len(stripped) - len(stripped.rstrip("$"))
        assert trailing < 2
