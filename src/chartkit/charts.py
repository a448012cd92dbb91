"""Chart constructors and pure customizers.

Every function here takes values or a Model and returns a new Model. They are
meant to be chained::

    model = set_title("Fruit", pie([1, 1, 2], ["apple", "pear", "plum"]))
    tree = render(model)
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from .defaults import DEFAULT_PIE_COLOURS, style_tables
from .logger import get_logger
from .models import ChartType, DataItem, Model, format_number
from .normalize import normalize_max
from .styles import Property, StyleCascade

logger = get_logger()


def construct(values: Sequence[float], labels: Sequence[str], chart_type: ChartType) -> Model:
    """Build a bare model of ``chart_type`` from positionally paired data.

    Extra values or labels beyond the shorter sequence are dropped. The model
    has an empty title, the default single colour and an empty style cascade.
    """
    if len(values) != len(labels):
        logger.checks(
            f"Truncating chart data to {min(len(values), len(labels))} items "
            f"({len(values)} values, {len(labels)} labels)"
        )
    items = tuple(
        DataItem(value=float(value), label=label) for value, label in zip(values, labels)
    )
    return Model(chart_type=chart_type, items=items)


def _seed_defaults(model: Model) -> Model:
    cascade = model.styles
    for table in style_tables(model.chart_type):
        for region, properties in table.items():
            cascade = cascade.seed(region, properties)
    return model.update(styles=cascade)


def hbar(values: Sequence[float], labels: Sequence[str]) -> Model:
    """Horizontal bar chart, normalized and with values appended to labels."""
    model = _seed_defaults(construct(values, labels, ChartType.BAR_HORIZONTAL))
    model = add_value_to_label(normalize_max(model))
    logger.updates(f"Built horizontal bar chart with {len(model.items)} bars")
    return model


def vbar(values: Sequence[float], labels: Sequence[str]) -> Model:
    """Vertical bar chart."""
    model = _seed_defaults(construct(values, labels, ChartType.BAR_VERTICAL))
    logger.updates(f"Built vertical bar chart with {len(model.items)} bars")
    return model


def pie(values: Sequence[float], labels: Sequence[str]) -> Model:
    """Pie chart using the default multi-colour palette."""
    model = _seed_defaults(construct(values, labels, ChartType.PIE))
    model = model.update(colours=DEFAULT_PIE_COLOURS)
    logger.updates(f"Built pie chart with {len(model.items)} slices")
    return model


def line_chart(values: Sequence[float], labels: Sequence[str]) -> Model:
    """Line chart; rendering is delegated to a line renderer."""
    model = _seed_defaults(construct(values, labels, ChartType.LINE))
    logger.updates(f"Built line chart with {len(model.items)} points")
    return model


def set_title(text: str, model: Model) -> Model:
    """Replace the chart title."""
    logger.updates(f"Title set to '{text}'")
    return model.update(title=text)


def set_colours(colours: Sequence[str], model: Model) -> Model:
    """Apply a colour list to the chart.

    Pies take the whole list and cycle through it. Every other chart type only
    uses the first colour, as the ``chart`` region's background colour. An
    empty list returns ``model`` unchanged.
    """
    if not colours:
        logger.checks("Ignoring empty colour list")
        return model

    if model.chart_type == ChartType.PIE:
        logger.updates(f"Pie colours set to {', '.join(colours)}")
        return model.update(colours=tuple(colours))

    if len(colours) > 1:
        logger.checks(f"Only the first colour is used for {model.chart_type.value} charts")
    return merge_styles("chart", [("background-color", colours[0])], model)


def add_value_to_label(model: Model) -> Model:
    """Append each item's value to its label (``"a"`` -> ``"a 10"``).

    Applying this twice appends the value twice.
    """
    items = tuple(
        item.with_label(f"{item.label} {format_number(item.value)}") for item in model.items
    )
    return model.update(items=items)


def merge_styles(region: str, properties: Iterable[Property], model: Model) -> Model:
    """Override properties of an existing region of the model's cascade.

    Each ``(name, value)`` pair replaces any previous entry for ``name`` and
    moves to the front of the region's list. Regions the chart constructor did
    not seed are left alone.
    """
    cascade: StyleCascade = model.styles.merge(region, properties)
    if cascade is model.styles:
        return model
    return model.update(styles=cascade)
