from __future__ import annotations

import logging

from engine.runtime.errors import (
    RECOVERABLE_RUNTIME_ERRORS,
    RenderingUnavailableError,
    log_recoverable,
)


def test_rendering_unavailable_is_runtime_error() -> None:
    assert issubclass(RenderingUnavailableError, RuntimeError)


def test_recoverable_errors_are_bounded() -> None:
    assert ValueError in RECOVERABLE_RUNTIME_ERRORS
    assert KeyboardInterrupt not in RECOVERABLE_RUNTIME_ERRORS
    assert Exception not in RECOVERABLE_RUNTIME_ERRORS


def test_log_recoverable_records_active_exception(caplog) -> None:
    logger = logging.getLogger("test.recoverable")
    caplog.set_level(logging.DEBUG, logger="test.recoverable")
    try:
        raise AttributeError("set_cursor")
    except RECOVERABLE_RUNTIME_ERRORS:
        log_recoverable(logger, "cursor_shape_unsupported", cursor="move")
    record = caplog.records[-1]
    assert record.levelno == logging.DEBUG
    assert record.getMessage() == "cursor_shape_unsupported"
    assert record.cursor == "move"
    assert record.exc_info is not None
