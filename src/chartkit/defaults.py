"""Default style tables and palettes seeded by the chart constructors."""

from __future__ import annotations

from .models import ChartType
from .styles import PropertyList

StyleTable = dict[str, PropertyList]

# Qualitative palette, cycled by pie slices
DEFAULT_PIE_COLOURS: tuple[str, ...] = (
    "#3B82F6",
    "#EF4444",
    "#10B981",
    "#F59E0B",
    "#8B5CF6",
    "#EC4899",
    "#06B6D4",
    "#84CC16",
    "#F97316",
    "#6366F1",
)

BASE_STYLES: StyleTable = {
    "container": (
        ("display", "flex"),
        ("flex-direction", "column"),
        ("font-family", "sans-serif"),
    ),
    "title": (
        ("font-size", "1.5em"),
        ("text-align", "center"),
        ("margin-bottom", "10px"),
    ),
    "chart-container": (("display", "flex"),),
}

HORIZONTAL_BAR_STYLES: StyleTable = {
    "chart-container": (("flex-direction", "column"),),
    "chart-elements": (
        ("display", "flex"),
        ("flex-direction", "column"),
    ),
    "chart": (
        ("background-color", "steelblue"),
        ("padding", "3px"),
        ("margin", "1px"),
        ("color", "white"),
    ),
    "legend-labels": (
        ("display", "block"),
        ("text-align", "right"),
        ("white-space", "nowrap"),
    ),
}

VERTICAL_BAR_STYLES: StyleTable = {
    "chart-container": (("flex-direction", "column"),),
    "chart-elements": (
        ("display", "flex"),
        ("flex-direction", "row"),
        ("align-items", "flex-end"),
        ("justify-content", "center"),
        ("height", "300px"),
    ),
    "chart": (
        ("background-color", "steelblue"),
        ("width", "40px"),
        ("margin", "0 10px"),
    ),
    "legend": (
        ("display", "flex"),
        ("flex-direction", "row"),
        ("justify-content", "center"),
        ("margin-top", "10px"),
    ),
    "legend-labels": (
        ("width", "60px"),
        ("text-align", "right"),
        ("white-space", "nowrap"),
    ),
}

PIE_STYLES: StyleTable = {
    "chart-container": (
        ("flex-direction", "row"),
        ("align-items", "center"),
    ),
    "chart": (
        ("background-color", "grey"),
        ("border-radius", "50%"),
        ("width", "200px"),
        ("height", "200px"),
        ("transform", "rotate(-90deg)"),
    ),
    "chart-elements": (
        ("fill-opacity", "0"),
        ("stroke-width", "32"),
    ),
    "legend": (
        ("display", "flex"),
        ("flex-direction", "column"),
        ("margin-left", "20px"),
    ),
    "legend-labels": (
        ("border-left-style", "solid"),
        ("border-left-width", "12px"),
        ("padding-left", "6px"),
        ("margin", "2px"),
    ),
}

LINE_STYLES: StyleTable = {
    "chart-container": (("flex-direction", "column"),),
    "chart": (
        ("width", "100%"),
        ("height", "300px"),
    ),
    "chart-elements": (
        ("fill", "none"),
        ("stroke", "steelblue"),
        ("stroke-width", "2"),
    ),
    "legend": (
        ("display", "flex"),
        ("flex-direction", "row"),
        ("justify-content", "space-between"),
    ),
    "legend-labels": (("font-size", "0.8em"),),
}

STYLE_TABLES: dict[ChartType, StyleTable] = {
    ChartType.BAR_HORIZONTAL: HORIZONTAL_BAR_STYLES,
    ChartType.BAR_VERTICAL: VERTICAL_BAR_STYLES,
    ChartType.PIE: PIE_STYLES,
    ChartType.LINE: LINE_STYLES,
}


def style_tables(chart_type: ChartType) -> list[StyleTable]:
    """Tables to seed, in order, for a chart type."""
    return [BASE_STYLES, STYLE_TABLES[chart_type]]
