"""Tests for zero-copy source segments."""

import pytest

from patitex.segments import Segment, SegmentList

SOURCE = "$$\n  a+b\n\tc\n$$\n"


class TestSegment:
    def test_value_slices_source(self) -> None:
        assert Segment(5, 9).value(SOURCE) == "a+b\n"

    def test_padding_is_prepended(self) -> None:
        assert Segment(10, 12, padding=2).value(SOURCE) == "  c\n"

    def test_len_includes_padding(self) -> None:
        assert len(Segment(5, 9, padding=1)) == 5

    def test_empty(self) -> None:
        assert Segment(3, 3).is_empty
        assert not Segment(3, 3, padding=1).is_empty

    def test_frozen(self) -> None:
        seg = Segment(0, 1)
        with pytest.raises(AttributeError):
            seg.start = 2  # type: ignore[misc]

    def test_rejects_inverted_range(self) -> None:
        with pytest.raises(ValueError, match="after stop"):
            Segment(5, 4)

    def test_rejects_negative_padding(self) -> None:
        with pytest.raises(ValueError, match="non-negative"):
            Segment(0, 1, padding=-1)


class TestSegmentList:
    def test_append_keeps_order(self) -> None:
        lines = SegmentList()
        lines.append(Segment(5, 9))
        lines.append(Segment(10, 12, padding=2))
        assert [seg.start for seg in lines] == [5, 10]
        assert len(lines) == 2

    def test_value_concatenates(self) -> None:
        lines = SegmentList()
        lines.append(Segment(5, 9))
        lines.append(Segment(10, 12, padding=2))
        assert lines.value(SOURCE) == "a+b\n  c\n"

    def test_freeze_returns_tuple(self) -> None:
        lines = SegmentList()
        lines.append(Segment(0, 2))
        frozen = lines.freeze()
        lines.append(Segment(3, 4))
        assert frozen == (Segment(0, 2),)

    def test_empty_list_is_falsy(self) -> None:
        assert not SegmentList()
        assert SegmentList().value(SOURCE) == ""
