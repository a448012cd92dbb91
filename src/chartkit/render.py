"""Rendering of chart models into element trees."""

from __future__ import annotations

from typing import Any, Protocol

from .elements import Element
from .geometry import bar_geometry, label_placements, pie_arcs
from .line import LineRenderer, render_line_chart
from .logger import debug_enabled, get_logger
from .models import ChartType, Model, format_number
from .normalize import normalize

logger = get_logger()

# Pie slices are dashes on a circle of circumference ~100 in a 32x32 box
PIE_VIEWBOX = "0 0 32 32"
PIE_RADIUS = "16"
PIE_CIRCUMFERENCE = "100"


class ChartRenderer(Protocol):
    """Protocol for per-chart-type renderers."""

    def render_chart(self, model: Model) -> tuple[Element, ...]:
        """Render the elements placed directly inside ``chart-container``.

        Args:
            model: A model already normalized for its chart type

        Returns:
            The chart-type specific siblings, in document order
        """
        ...


class _RegionRenderer:
    """Shared helper: elements take their style from the model's cascade."""

    def element(self, model: Model, tag: str, region: str, **kwargs: Any) -> Element:
        return Element(tag=tag, region=region, style=model.styles.get(region), **kwargs)


class HorizontalBarRenderer(_RegionRenderer):
    """Bars stacked top to bottom, each carrying its own label."""

    def render_chart(self, model: Model) -> tuple[Element, ...]:
        bars = tuple(
            self.element(
                model,
                "div",
                "chart",
                layout=(("width", f"{format_number(bar.extent)}%"),),
                children=(self.element(model, "span", "legend-labels", text=bar.label),),
            )
            for bar in bar_geometry(model.items)
        )
        return (self.element(model, "div", "chart-elements", children=bars),)


class VerticalBarRenderer(_RegionRenderer):
    """Bars side by side with a row of rotated labels underneath."""

    def render_chart(self, model: Model) -> tuple[Element, ...]:
        bars = tuple(
            self.element(
                model,
                "div",
                "chart",
                layout=(("height", f"{format_number(bar.extent)}%"),),
            )
            for bar in bar_geometry(model.items)
        )
        labels = tuple(
            self.element(
                model,
                "div",
                "legend-labels",
                layout=(
                    (
                        "transform",
                        f"translate({placement.offset}px, 0) rotate({placement.rotation}deg)",
                    ),
                ),
                text=placement.label,
            )
            for placement in label_placements(model.items)
        )
        return (
            self.element(model, "div", "chart-elements", children=bars),
            self.element(model, "div", "legend", children=labels),
        )


class PieRenderer(_RegionRenderer):
    """Slices drawn as dashed strokes on stacked circles, plus a legend."""

    def render_chart(self, model: Model) -> tuple[Element, ...]:
        arcs = pie_arcs(model.items, model.colours)
        if debug_enabled():
            for arc in arcs:
                logger.debug(
                    f"Slice '{arc.label}': offset={format_number(arc.offset)} "
                    f"length={format_number(arc.length)} colour={arc.colour}"
                )

        slices = tuple(
            self.element(
                model,
                "circle",
                "chart-elements",
                attrs=(
                    ("r", PIE_RADIUS),
                    ("cx", PIE_RADIUS),
                    ("cy", PIE_RADIUS),
                    ("stroke", arc.colour),
                    ("stroke-dasharray", f"{format_number(arc.length)} {PIE_CIRCUMFERENCE}"),
                    ("stroke-dashoffset", format_number(arc.offset)),
                ),
            )
            for arc in arcs
        )
        legend_labels = tuple(
            self.element(
                model,
                "div",
                "legend-labels",
                layout=(("border-left-color", arc.colour),),
                text=arc.label,
            )
            for arc in arcs
        )
        plot = self.element(
            model, "svg", "chart", attrs=(("viewBox", PIE_VIEWBOX),), children=slices
        )
        return plot, self.element(model, "div", "legend", children=legend_labels)


class DelegatedLineRenderer:
    """Adapter handing line charts to a :class:`LineRenderer`."""

    def __init__(self, line_renderer: LineRenderer | None = None):
        self.line_renderer: LineRenderer = line_renderer or render_line_chart

    def render_chart(self, model: Model) -> tuple[Element, ...]:
        result = self.line_renderer(model, model.styles.get)
        if isinstance(result, Element):
            return (result,)
        return tuple(result)


def create_renderer(
    chart_type: ChartType, line_renderer: LineRenderer | None = None
) -> ChartRenderer:
    """Create the renderer for a chart type.

    Args:
        chart_type: Type of chart to render
        line_renderer: Optional replacement for the default line renderer

    Returns:
        Renderer instance for ``chart_type``
    """
    if chart_type == ChartType.BAR_HORIZONTAL:
        return HorizontalBarRenderer()
    if chart_type == ChartType.BAR_VERTICAL:
        return VerticalBarRenderer()
    if chart_type == ChartType.PIE:
        return PieRenderer()
    if chart_type == ChartType.LINE:
        return DelegatedLineRenderer(line_renderer)

    msg = f"Unknown chart type: {chart_type}"
    raise ValueError(msg)


def render(model: Model, *, line_renderer: LineRenderer | None = None) -> Element:
    """Normalize ``model`` and render it into an element tree.

    The tree is a ``container`` holding a ``title`` and a ``chart-container``
    whose children are the chart-type specific elements. Each element's style is its
    region's property list from the model's cascade.

    Raises:
        DegenerateInputError: For pies whose values sum to zero.
    """
    normalized = normalize(model)
    renderer = create_renderer(model.chart_type, line_renderer)
    logger.debug(f"Rendering {model.chart_type.value} chart with {len(model.items)} items")

    styles = normalized.styles
    return Element(
        tag="div",
        region="container",
        style=styles.get("container"),
        children=(
            Element(tag="div", region="title", style=styles.get("title"), text=normalized.title),
            Element(
                tag="div",
                region="chart-container",
                style=styles.get("chart-container"),
                children=renderer.render_chart(normalized),
            ),
        ),
    )
