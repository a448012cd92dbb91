"""Default line chart renderer.

The core renderer hands line charts to any callable matching
:class:`LineRenderer`; this module provides the one used when the caller does
not supply their own.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol

from .elements import Element
from .models import Model, format_number
from .styles import PropertyList

StyleLookup = Callable[[str], PropertyList]

VIEWBOX_SIZE = 100.0


class LineRenderer(Protocol):
    """Protocol for line chart renderers."""

    def __call__(self, model: Model, style: StyleLookup) -> Element | tuple[Element, ...]:
        """Render the chart area of a line chart.

        Args:
            model: The line chart model (not normalized)
            style: Returns the resolved property list of a region

        Returns:
            One element, or several siblings, placed directly inside the
            ``chart-container`` element
        """
        ...


def polyline_points(values: list[float]) -> str:
    """SVG points for values spread evenly across a 100x100 box.

    Values are scaled against the largest one; y grows downwards so larger
    values sit higher. All-zero data lies on the baseline.
    """
    if not values:
        return ""

    largest = max(values)
    step = VIEWBOX_SIZE / (len(values) - 1) if len(values) > 1 else 0.0
    points: list[str] = []
    for index, value in enumerate(values):
        x = index * step
        scaled = value / largest * VIEWBOX_SIZE if largest else 0.0
        y = VIEWBOX_SIZE - scaled
        points.append(f"{format_number(x)},{format_number(y)}")
    return " ".join(points)


def render_line_chart(model: Model, style: StyleLookup) -> tuple[Element, Element]:
    """Polyline plot followed by a row of x-axis labels."""
    plot = Element(
        tag="svg",
        region="chart",
        style=style("chart"),
        attrs=(
            ("viewBox", f"0 0 {format_number(VIEWBOX_SIZE)} {format_number(VIEWBOX_SIZE)}"),
            ("preserveAspectRatio", "none"),
        ),
        children=(
            Element(
                tag="polyline",
                region="chart-elements",
                style=style("chart-elements"),
                attrs=(
                    ("points", polyline_points(model.values)),
                    ("vector-effect", "non-scaling-stroke"),
                ),
            ),
        ),
    )
    legend = Element(
        tag="div",
        region="legend",
        style=style("legend"),
        children=tuple(
            Element(tag="span", region="legend-labels", style=style("legend-labels"), text=label)
            for label in model.labels
        ),
    )
    return plot, legend
