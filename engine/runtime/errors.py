"""Runtime error types and the tolerated-failure policy."""

from __future__ import annotations

import logging


class RenderingUnavailableError(RuntimeError):
    """No drawing surface: graphics libraries, canvas backend or adapter missing."""


# Failures a backend capability call may raise. Anything else propagates.
RECOVERABLE_RUNTIME_ERRORS: tuple[type[Exception], ...] = (
    RuntimeError,
    OSError,
    ValueError,
    TypeError,
    AttributeError,
)


def log_recoverable(
    logger: logging.Logger,
    message: str,
    *,
    level: int = logging.DEBUG,
    **fields: object,
) -> None:
    """Record a tolerated failure from inside an ``except`` block, traceback attached."""
    logger.log(level, message, exc_info=True, extra=fields or None)
