"""chartkit - declarative charts rendered to styled element trees.

Build a model with a constructor, chain customizers, then render:

- Constructors: hbar, vbar, pie, line_chart (construct for a bare model)
- Customizers: set_title, set_colours, add_value_to_label, merge_styles
- Rendering: render produces an Element tree; to_html serializes it
"""

from .charts import (
    add_value_to_label,
    construct,
    hbar,
    line_chart,
    merge_styles,
    pie,
    set_colours,
    set_title,
    vbar,
)
from .elements import Element, to_html
from .exceptions import ChartError, DegenerateInputError, ParseError, ValidationError
from .line import LineRenderer, render_line_chart
from .models import ChartType, DataItem, Model, format_number
from .normalize import normalize, normalize_max, normalize_total
from .render import create_renderer, render
from .styles import REGIONS, StyleCascade

__all__ = [
    # Models
    "ChartType",
    "DataItem",
    "Model",
    "StyleCascade",
    "REGIONS",
    "format_number",
    # Constructors
    "construct",
    "hbar",
    "vbar",
    "pie",
    "line_chart",
    # Customizers
    "set_title",
    "set_colours",
    "add_value_to_label",
    "merge_styles",
    # Normalization
    "normalize",
    "normalize_max",
    "normalize_total",
    # Rendering
    "Element",
    "LineRenderer",
    "create_renderer",
    "render",
    "render_line_chart",
    "to_html",
    # Errors
    "ChartError",
    "DegenerateInputError",
    "ParseError",
    "ValidationError",
]
