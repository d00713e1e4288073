"""Custom logging levels for KeyCalc.

Levels (ascending):
    TRACE =  5  — every key press, every ignored event
    DEBUG = 10  — state transitions, theme and config changes
    INFO  = 20  — startup/shutdown (default)

Usage:
    import keycalc.log  # must be imported once before any logger is used
    logger = logging.getLogger(__name__)
    logger.trace("very noisy message")
"""

import logging

TRACE: int = 5
logging.addLevelName(TRACE, "TRACE")


def _trace(self: logging.Logger, message: object, *args: object, **kwargs: object) -> None:
    if self.isEnabledFor(TRACE):
        self._log(TRACE, message, args, **kwargs)  # type: ignore[attr-defined]


# Patch Logger class once at import time
logging.Logger.trace = _trace  # type: ignore[attr-defined]


def level_for(debug: bool = False, trace: bool = False) -> int:
    """Logger level for the ``--debug`` / ``--trace`` command-line flags."""
    if trace:
        return TRACE
    if debug:
        return logging.DEBUG
    return logging.INFO
