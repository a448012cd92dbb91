"""Custom exceptions for chartkit."""


class ChartError(Exception):
    """Base exception for all chartkit errors."""

    pass


class DegenerateInputError(ChartError):
    """Raised when chart data cannot produce meaningful geometry."""

    pass


class ParseError(ChartError):
    """Raised when a chart document cannot be read or parsed."""

    pass


class ValidationError(ChartError):
    """Raised when a chart document fails validation."""

    pass
