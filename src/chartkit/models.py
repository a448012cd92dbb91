"""Data models for chartkit."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum

from .styles import StyleCascade

DEFAULT_COLOUR = "steelblue"


class ChartType(str, Enum):
    """Available chart types."""

    BAR_HORIZONTAL = "bar-horizontal"
    BAR_VERTICAL = "bar-vertical"
    PIE = "pie"
    LINE = "line"


def format_number(value: float) -> str:
    """Format a number the way it appears in labels and CSS values.

    This is the shortest repr that round-trips with a trailing ``.0`` removed,
    so ``10.0`` gives ``"10"`` while very large or small magnitudes keep their
    exponent (``1e22`` gives ``"1e+22"``). Negative zero prints as ``"0"``.
    """
    text = repr(float(value) + 0.0)
    return text[:-2] if text.endswith(".0") else text


@dataclass(frozen=True, slots=True)
class DataItem:
    """One value/label pair with its normalized proportion."""

    value: float
    label: str
    norm_value: float = 0.0

    def with_label(self, label: str) -> DataItem:
        """Copy of this item with a different label."""
        return replace(self, label=label)

    def with_norm(self, norm_value: float) -> DataItem:
        """Copy of this item with a different normalized value."""
        return replace(self, norm_value=norm_value)


@dataclass(frozen=True, slots=True)
class Model:
    """Immutable chart description.

    Every customizer returns a new Model; nothing here is mutated in place.
    ``colours`` is never empty through the public API and its first entry is
    the single-series colour.
    """

    chart_type: ChartType
    items: tuple[DataItem, ...] = ()
    title: str = ""
    colours: tuple[str, ...] = (DEFAULT_COLOUR,)
    styles: StyleCascade = field(default_factory=StyleCascade)

    @property
    def values(self) -> list[float]:
        """Raw values in item order."""
        return [item.value for item in self.items]

    @property
    def labels(self) -> list[str]:
        """Labels in item order."""
        return [item.label for item in self.items]

    @property
    def norm_values(self) -> list[float]:
        """Normalized values in item order."""
        return [item.norm_value for item in self.items]

    def update(self, **changes: object) -> Model:
        """Copy of this model with the given fields replaced."""
        return replace(self, **changes)  # type: ignore[arg-type]
