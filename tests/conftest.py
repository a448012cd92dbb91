"""Pytest configuration and fixtures for chartkit tests."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from pathlib import Path

import pytest

from chartkit.logger import reset_logger


@pytest.fixture(autouse=True)
def clean_logger() -> Iterator[None]:
    """Leave the chartkit logger unconfigured between tests."""
    reset_logger()
    yield
    reset_logger()


@pytest.fixture
def write_chart(tmp_path: Path) -> Callable[[str], Path]:
    """Factory writing a chart document into a temporary file."""

    def _write(content: str, name: str = "chart.yaml") -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write
