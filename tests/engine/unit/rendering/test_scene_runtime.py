from __future__ import annotations

from types import SimpleNamespace

import pytest

from engine.rendering.scene_runtime import (
    get_canvas_logical_size,
    run_backend_loop,
    stop_backend_loop,
)
from engine.runtime.errors import RenderingUnavailableError


def test_get_canvas_logical_size_is_tolerant() -> None:
    assert get_canvas_logical_size(SimpleNamespace(get_logical_size=lambda: (640, 480))) == (
        640.0,
        480.0,
    )
    assert get_canvas_logical_size(SimpleNamespace()) is None
    assert get_canvas_logical_size(SimpleNamespace(get_logical_size=lambda: None)) is None
    assert get_canvas_logical_size(SimpleNamespace(get_logical_size=lambda: ("a", 1))) is None


def test_run_backend_loop_prefers_loop_object() -> None:
    calls: list[str] = []
    backend = SimpleNamespace(
        loop=SimpleNamespace(run=lambda: calls.append("loop.run")),
        run=lambda: calls.append("run"),
    )
    run_backend_loop(backend)
    assert calls == ["loop.run"]


def test_run_backend_loop_falls_back_to_run_function() -> None:
    calls: list[str] = []
    run_backend_loop(SimpleNamespace(run=lambda: calls.append("run")))
    assert calls == ["run"]


def test_run_backend_loop_without_entrypoint_raises() -> None:
    with pytest.raises(RenderingUnavailableError):
        run_backend_loop(SimpleNamespace())


def test_stop_backend_loop_is_optional() -> None:
    calls: list[str] = []
    stop_backend_loop(SimpleNamespace(loop=SimpleNamespace(stop=lambda: calls.append("stop"))))
    stop_backend_loop(SimpleNamespace())
    assert calls == ["stop"]
