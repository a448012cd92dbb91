"""Tests for per-chart-type geometry."""

import pytest

from chartkit.exceptions import DegenerateInputError
from chartkit.geometry import (
    ArcGeometry,
    BarGeometry,
    bar_geometry,
    label_offset,
    label_placements,
    pie_arcs,
)
from chartkit.models import DataItem


def _items(*norms: float) -> list[DataItem]:
    return [DataItem(value=norm, label=f"item{i}", norm_value=norm) for i, norm in enumerate(norms)]


class TestBarGeometry:
    """Test bar extents."""

    def test_extent_is_norm_value(self) -> None:
        """Test that each bar takes its item's proportion."""
        assert bar_geometry(_items(50, 100)) == [
            BarGeometry("item0", 50),
            BarGeometry("item1", 100),
        ]

    def test_empty(self) -> None:
        """Test that no items produce no bars."""
        assert bar_geometry([]) == []


class TestLabelOffset:
    """Test vertical bar label offsets."""

    def test_even_count(self) -> None:
        """Test the even-count formula at a known point."""
        assert label_offset(2, 6) == 20

    def test_odd_count(self) -> None:
        """Test the odd-count formula at a known point."""
        assert label_offset(2, 5) == -10

    def test_even_sequence(self) -> None:
        """Test all offsets for six bars."""
        assert [label_offset(i, 6) for i in range(6)] == [140, 80, 20, -40, -100, -160]

    def test_odd_sequence(self) -> None:
        """Test all offsets for five bars."""
        assert [label_offset(i, 5) for i in range(5)] == [110, 50, -10, -70, -130]

    def test_single_bar(self) -> None:
        """Test the single-bar case."""
        assert label_offset(0, 1) == -10

    def test_placements(self) -> None:
        """Test that placements carry label, offset and rotation."""
        placements = label_placements(_items(10, 20))
        assert [(p.label, p.offset, p.rotation) for p in placements] == [
            ("item0", 20, -45),
            ("item1", -40, -45),
        ]


class TestPieArcs:
    """Test cumulative arc layout."""

    def test_offsets_accumulate_backwards(self) -> None:
        """Test that each slice starts where the previous one ended."""
        arcs = pie_arcs(_items(25, 25, 50), ["red", "green", "blue"])
        assert [arc.offset for arc in arcs] == [0, -25, -50]
        assert [arc.length for arc in arcs] == [25, 25, 50]

    def test_arcs_cover_full_circle(self) -> None:
        """Test that the last slice ends at -100."""
        arcs = pie_arcs(_items(10, 30, 60), ["red"])
        last = arcs[-1]
        assert last.offset - last.length == pytest.approx(-100)

    def test_colours_wrap(self) -> None:
        """Test that colours cycle when there are more slices than colours."""
        arcs = pie_arcs(_items(20, 20, 20, 20, 20), ["red", "green"])
        assert [arc.colour for arc in arcs] == ["red", "green", "red", "green", "red"]

    def test_record_shape(self) -> None:
        """Test the fields of a single arc."""
        assert pie_arcs(_items(100), ["red"]) == [ArcGeometry("item0", 0, 100, "red")]

    def test_no_colours_raises(self) -> None:
        """Test that slices without colours are rejected."""
        with pytest.raises(DegenerateInputError):
            pie_arcs(_items(100), [])

    def test_no_items(self) -> None:
        """Test that an empty pie has no arcs, even without colours."""
        assert pie_arcs([], []) == []
