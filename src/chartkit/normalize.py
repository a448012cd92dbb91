"""Normalization strategies: raw values to 0-100 proportions."""

from __future__ import annotations

from .exceptions import DegenerateInputError
from .logger import get_logger
from .models import ChartType, Model

logger = get_logger()

FULL_SCALE = 100.0


def normalize_max(model: Model) -> Model:
    """Scale every value relative to the largest one (largest -> 100).

    Empty models are returned unchanged. When the largest value is zero every
    item gets a proportion of zero.
    """
    if not model.items:
        return model

    largest = max(model.values)
    if largest == 0:
        logger.checks("All values are zero; bar proportions set to 0")
        items = tuple(item.with_norm(0.0) for item in model.items)
    else:
        items = tuple(item.with_norm(item.value / largest * FULL_SCALE) for item in model.items)
    return model.update(items=items)


def normalize_total(model: Model) -> Model:
    """Scale every value relative to the sum of all values (sum -> 100).

    Empty models are returned unchanged.

    Raises:
        DegenerateInputError: If the values sum to zero.
    """
    if not model.items:
        return model

    total = sum(model.values)
    if total == 0:
        raise DegenerateInputError(
            f"Cannot compute proportions of a zero total ({len(model.items)} items)"
        )
    items = tuple(item.with_norm(item.value / total * FULL_SCALE) for item in model.items)
    return model.update(items=items)


def normalize(model: Model) -> Model:
    """Apply the strategy that matches the model's chart type.

    Bar charts use max-relative scaling and pies total-relative scaling. Line
    charts are left untouched; their renderer scales data itself.
    """
    if model.chart_type in (ChartType.BAR_HORIZONTAL, ChartType.BAR_VERTICAL):
        return normalize_max(model)
    if model.chart_type == ChartType.PIE:
        return normalize_total(model)
    return model
