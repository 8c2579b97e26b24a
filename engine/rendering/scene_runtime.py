"""rendercanvas backend helpers: canvas size probing and loop control."""

from __future__ import annotations

from typing import Any

from engine.runtime.errors import RenderingUnavailableError


def _is_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def get_canvas_logical_size(canvas: Any) -> tuple[float, float] | None:
    """Logical size in pixels, or ``None`` when the backend cannot report one."""
    getter = getattr(canvas, "get_logical_size", None)
    if not callable(getter):
        return None
    size = getter()
    try:
        width, height = size[0], size[1]
    except (TypeError, IndexError):
        return None
    if not (_is_number(width) and _is_number(height)):
        return None
    return float(width), float(height)


def run_backend_loop(rc_auto: Any) -> None:
    """Block in the backend event loop until the canvas closes."""
    loop = getattr(rc_auto, "loop", None)
    if loop is not None and callable(getattr(loop, "run", None)):
        loop.run()
        return
    legacy_run = getattr(rc_auto, "run", None)
    if not callable(legacy_run):
        raise RenderingUnavailableError("rendercanvas backend exposes no event loop")
    legacy_run()


def stop_backend_loop(rc_auto: Any) -> None:
    loop = getattr(rc_auto, "loop", None)
    stop = getattr(loop, "stop", None)
    if callable(stop):
        stop()
