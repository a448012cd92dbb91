"""Chart documents: YAML chart descriptions validated with pydantic."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, field_validator, model_validator
from pydantic import ValidationError as PydanticValidationError

from .charts import (
    add_value_to_label,
    hbar,
    line_chart,
    merge_styles,
    pie,
    set_colours,
    set_title,
    vbar,
)
from .exceptions import ParseError, ValidationError
from .logger import get_logger
from .models import ChartType, Model
from .styles import REGIONS

logger = get_logger()

CONSTRUCTORS = {
    ChartType.BAR_HORIZONTAL: hbar,
    ChartType.BAR_VERTICAL: vbar,
    ChartType.PIE: pie,
    ChartType.LINE: line_chart,
}


class ChartDocument(BaseModel):
    """Schema for a chart document."""

    type: ChartType
    values: list[float] = Field(default_factory=list)
    labels: list[str] = Field(default_factory=list)
    title: str = ""
    colours: list[str] = Field(default_factory=list)
    value_labels: bool = False  # Append values to labels (always on for bar-horizontal)
    styles: dict[str, dict[str, str]] = Field(default_factory=dict)

    @field_validator("labels", "colours", mode="before")
    @classmethod
    def ensure_str_list(cls, v: Any) -> list[str]:
        """Accept scalars and non-string items."""
        if v is None:
            return []
        if isinstance(v, list):
            return [str(item) for item in v]  # type: ignore[misc]
        return [str(v)]

    @field_validator("styles", mode="before")
    @classmethod
    def stringify_style_values(cls, v: Any) -> dict[str, dict[str, str]]:
        """Allow bare numbers such as ``stroke-width: 32`` in YAML."""
        if v is None:
            return {}
        if not isinstance(v, dict):
            raise ValueError("styles must map region names to property mappings")
        result: dict[str, dict[str, str]] = {}
        for region, properties in v.items():  # type: ignore[union-attr]
            if not isinstance(properties, dict):
                raise ValueError(f"styles.{region} must be a mapping of properties")
            result[str(region)] = {
                str(name): str(value)
                for name, value in properties.items()  # type: ignore[union-attr]
            }
        return result

    @model_validator(mode="after")
    def check_regions(self) -> ChartDocument:
        """Reject region names outside the region vocabulary."""
        unknown = sorted(set(self.styles) - set(REGIONS))
        if unknown:
            raise ValueError(
                f"Unknown style regions: {', '.join(unknown)}. "
                f"Valid regions are: {', '.join(REGIONS)}"
            )
        return self


def parse_chart_document(data: Any) -> ChartDocument:
    """Validate already-loaded YAML data."""
    if not isinstance(data, dict):
        raise ParseError("Chart document must contain a mapping at the root level")
    try:
        return ChartDocument.model_validate(data)
    except PydanticValidationError as e:
        raise ValidationError(f"Invalid chart document: {e}") from e


def load_chart_document(path: Path | str) -> ChartDocument:
    """Read and validate a chart document from a YAML file."""
    path = Path(path)
    if not path.exists():
        raise ParseError(f"File not found: {path}")

    try:
        with path.open(encoding="utf-8") as f:
            data: Any = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ParseError(f"Failed to parse YAML: {e}") from e

    return parse_chart_document(data)


def build_model(document: ChartDocument) -> Model:
    """Run the document's constructor and customizers.

    Customizers apply in a fixed order: title, colours, value labels, then
    style overrides region by region.
    """
    model = CONSTRUCTORS[document.type](document.values, document.labels)
    if document.title:
        model = set_title(document.title, model)
    model = set_colours(document.colours, model)
    if document.value_labels and document.type != ChartType.BAR_HORIZONTAL:
        model = add_value_to_label(model)
    for region, properties in document.styles.items():
        model = merge_styles(region, list(properties.items()), model)
    return model
