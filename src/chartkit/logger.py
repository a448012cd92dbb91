"""Verbosity-driven logging for chartkit.

Chart construction is quiet by default. Raising the verbosity shows, in turn,
which models were built or customized (updates), which requests were ignored
or fell back to a default (checks), and render details (debug).
"""

from __future__ import annotations

import logging
import sys
from typing import Any, TextIO

LOGGER_NAME = "chartkit"

UPDATES_LEVEL = 25  # INFO < updates < WARNING
CHECKS_LEVEL = 15  # DEBUG < checks < INFO

logging.addLevelName(UPDATES_LEVEL, "UPDATES")
logging.addLevelName(CHECKS_LEVEL, "CHECKS")

# Index is the CLI's -v count; anything out of range stays silent
_VERBOSITY_LEVELS = (logging.ERROR, UPDATES_LEVEL, CHECKS_LEVEL, logging.DEBUG)


class ChartLogger(logging.Logger):
    """Logger with one method per chartkit verbosity step.

    - updates(): -v, a chart was built or a customizer changed it
    - checks(): -vv, an override or colour list was ignored
    - debug(): -vvv, what is rendered and the arc of every pie slice
    """

    def updates(self, msg: str, *args: Any, **kwargs: Any) -> None:
        if self.isEnabledFor(UPDATES_LEVEL):
            self._log(UPDATES_LEVEL, msg, args, **kwargs)

    def checks(self, msg: str, *args: Any, **kwargs: Any) -> None:
        if self.isEnabledFor(CHECKS_LEVEL):
            self._log(CHECKS_LEVEL, msg, args, **kwargs)


def get_logger() -> ChartLogger:
    """Return the shared ``chartkit`` logger."""
    logging.setLoggerClass(ChartLogger)
    logger = logging.getLogger(LOGGER_NAME)
    assert isinstance(logger, ChartLogger)
    return logger


def verbosity_level(verbosity: int) -> int:
    """Map a ``-v`` count to the logging level it enables."""
    if 0 <= verbosity < len(_VERBOSITY_LEVELS):
        return _VERBOSITY_LEVELS[verbosity]
    return logging.ERROR


def setup_logger(verbosity: int, stream: TextIO | None = None) -> None:
    """Send chartkit messages up to ``verbosity`` to ``stream``.

    Replaces any handler installed by an earlier call, so the CLI callback
    and tests can reconfigure freely.

    Args:
        verbosity: 0=silent (errors only), 1=updates, 2=checks, 3=debug
        stream: Output stream, sys.stderr when omitted
    """
    logger = get_logger()
    logger.handlers.clear()
    logger.setLevel(verbosity_level(verbosity))

    # Bare messages: the level is implied by the -v count that enabled them
    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.propagate = False


def reset_logger() -> None:
    """Drop handlers and go back to silent."""
    logger = get_logger()
    logger.handlers.clear()
    logger.setLevel(logging.ERROR)


def debug_enabled() -> bool:
    """Whether per-slice debug messages would be written."""
    return get_logger().isEnabledFor(logging.DEBUG)
