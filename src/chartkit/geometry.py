"""Layout computation for each chart type.

All functions take normalized items and return plain geometry records; they
know nothing about styles or markup.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from itertools import cycle

from .exceptions import DegenerateInputError
from .models import DataItem

# Vertical bar layout: each bar occupies 60 units including its margins
BAR_SLOT_WIDTH = 60
EVEN_LABEL_SHIFT = 20
ODD_LABEL_SHIFT = -10
LABEL_ROTATION = -45


@dataclass(frozen=True, slots=True)
class BarGeometry:
    """One bar; ``extent`` is its length in percent of the chart area."""

    label: str
    extent: float


@dataclass(frozen=True, slots=True)
class LabelPlacement:
    """A rotated axis label shifted horizontally under its bar."""

    label: str
    offset: int
    rotation: int = LABEL_ROTATION


@dataclass(frozen=True, slots=True)
class ArcGeometry:
    """One pie slice in a circle of 100 units.

    ``offset`` is the dash offset where the slice starts and ``length`` the
    dash length it covers.
    """

    label: str
    offset: float
    length: float
    colour: str


def bar_geometry(items: Sequence[DataItem]) -> list[BarGeometry]:
    """One bar per item, sized by its normalized value."""
    return [BarGeometry(label=item.label, extent=item.norm_value) for item in items]


def label_offset(index: int, count: int) -> int:
    """Horizontal shift of the label at ``index`` out of ``count`` bars.

    Tuned for bars in fixed 60-unit slots with labels rotated -45 degrees.
    """
    half = count // 2
    if count % 2 == 0:
        return (half - index - 1) * BAR_SLOT_WIDTH + EVEN_LABEL_SHIFT
    return (half - index) * BAR_SLOT_WIDTH + ODD_LABEL_SHIFT


def label_placements(items: Sequence[DataItem]) -> list[LabelPlacement]:
    """Rotated label placement for every vertical bar."""
    count = len(items)
    return [
        LabelPlacement(label=item.label, offset=label_offset(index, count))
        for index, item in enumerate(items)
    ]


def pie_arcs(items: Sequence[DataItem], colours: Sequence[str]) -> list[ArcGeometry]:
    """Lay slices end to end starting at offset 0, cycling through ``colours``.

    The running offset decreases by each slice's length, so with the chart
    rotated -90 degrees the first slice starts at twelve o'clock and the rest
    follow clockwise.

    Raises:
        DegenerateInputError: If there are items but no colours.
    """
    if items and not colours:
        raise DegenerateInputError("Cannot colour pie slices with an empty colour list")

    arcs: list[ArcGeometry] = []
    offset = 0.0
    for item, colour in zip(items, cycle(colours)):
        arcs.append(
            ArcGeometry(label=item.label, offset=offset, length=item.norm_value, colour=colour)
        )
        offset -= item.norm_value
    return arcs
