from __future__ import annotations

import logging
from types import SimpleNamespace

import pytest

import engine.rendering.scene as scene_mod
from engine.runtime.errors import RenderingUnavailableError


class _Material:
    def __init__(self, color=None, **kwargs) -> None:
        self.color = color
        self.options = kwargs


class _Node:
    def __init__(self, geometry=None, material=None) -> None:
        self.geometry = geometry
        self.material = material
        self.local = SimpleNamespace(position=(0.0, 0.0, 0.0), scale=(1.0, 1.0, 1.0))
        self.visible = True


class _Text(_Node):
    def __init__(self, text, font_size, screen_space, anchor, material) -> None:
        super().__init__(None, material)
        self.text = text
        self.font_size = font_size

    def set_text(self, value: str) -> None:
        self.text = value


class _Scene:
    def __init__(self) -> None:
        self.nodes: list[object] = []

    def add(self, node) -> None:
        self.nodes.append(node)


class _Camera:
    def __init__(self, width, height) -> None:
        self.width = width
        self.height = height
        self.local = SimpleNamespace(position=(0.0, 0.0, 0.0), scale_y=1.0)


class _WgpuRenderer:
    def __init__(self, canvas) -> None:
        self.canvas = canvas
        self.renders = 0

    def render(self, scene, camera) -> None:
        self.renders += 1


def _fake_gfx() -> SimpleNamespace:
    return SimpleNamespace(
        Mesh=_Node,
        Line=_Node,
        Text=_Text,
        MeshBasicMaterial=_Material,
        LineSegmentMaterial=_Material,
        TextMaterial=_Material,
        Geometry=lambda positions: SimpleNamespace(positions=positions),
        plane_geometry=lambda w, h: ("plane", w, h),
        Scene=_Scene,
        OrthographicCamera=_Camera,
        WgpuRenderer=_WgpuRenderer,
    )


class _FakeCanvas:
    def __init__(self, size=(1280, 800), title="") -> None:
        self.size = size
        self.title = title
        self.draw_callback = None
        self.request_draw_count = 0
        self.cursors: list[str] = []
        self.closed = False

    def add_event_handler(self, handler, *event_types: str) -> None:
        _ = (handler, event_types)

    def get_logical_size(self):
        return self.size

    def request_draw(self, cb=None) -> None:
        if cb is not None:
            self.draw_callback = cb
            return
        self.request_draw_count += 1

    def set_cursor(self, cursor: str) -> None:
        self.cursors.append(cursor)

    def set_title(self, title: str) -> None:
        self.title = title

    def close(self) -> None:
        self.closed = True


class _Loop:
    def __init__(self) -> None:
        self.runs = 0
        self.stops = 0

    def run(self) -> None:
        self.runs += 1

    def stop(self) -> None:
        self.stops += 1


@pytest.fixture
def backend(monkeypatch: pytest.MonkeyPatch) -> SimpleNamespace:
    rc_auto = SimpleNamespace(RenderCanvas=_FakeCanvas, loop=_Loop())
    monkeypatch.setattr(scene_mod, "gfx", _fake_gfx())
    monkeypatch.setattr(scene_mod, "rc_auto", rc_auto)
    return rc_auto


def test_scene_renderer_raises_when_pygfx_missing(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(scene_mod, "gfx", None)
    monkeypatch.setattr(scene_mod, "_gfx_import_error", ModuleNotFoundError("pygfx missing"))
    with pytest.raises(RenderingUnavailableError, match="pygfx dependency unavailable"):
        scene_mod.SceneRenderer()


def test_scene_renderer_raises_when_canvas_backend_missing(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(scene_mod, "gfx", _fake_gfx())
    monkeypatch.setattr(scene_mod, "rc_auto", None)
    monkeypatch.setattr(scene_mod, "_canvas_import_error", RuntimeError("backend missing"))
    with pytest.raises(RenderingUnavailableError, match="Render canvas backend unavailable"):
        scene_mod.SceneRenderer()


def test_scene_renderer_wraps_canvas_creation_failure(monkeypatch: pytest.MonkeyPatch) -> None:
    def _broken_canvas(**kwargs):
        raise OSError("no display")

    monkeypatch.setattr(scene_mod, "gfx", _fake_gfx())
    monkeypatch.setattr(scene_mod, "rc_auto", SimpleNamespace(RenderCanvas=_broken_canvas))
    with pytest.raises(RenderingUnavailableError, match="no display"):
        scene_mod.SceneRenderer()


def test_camera_maps_top_left_origin(backend) -> None:
    renderer = scene_mod.SceneRenderer(width=400, height=300)
    assert renderer.camera.local.position == (200.0, 150.0, 0.0)
    assert renderer.camera.local.scale_y == -1.0
    assert renderer.viewport_size() == (400.0, 300.0)


def test_frame_applies_transform_and_paint_order(backend) -> None:
    renderer = scene_mod.SceneRenderer(width=1280, height=800)

    def draw() -> None:
        renderer.clear("#ffffff")
        renderer.save()
        renderer.translate(100.0, 50.0)
        renderer.scale(2.0)
        renderer.fill_rect(0.0, 0.0, 10.0, 5.0, "#ff0000")
        renderer.draw_line(0.0, 0.0, 10.0, 0.0, "#000000", 1.0)
        renderer.draw_line(0.0, 5.0, 10.0, 5.0, "#000000", 1.0)
        renderer.restore()
        renderer.draw_text("hud", 4.0, 4.0)

    renderer.run(draw)
    assert backend.loop.runs == 1
    renderer.canvas.draw_callback()

    rect = renderer._rect_pool[0]
    assert rect.local.position[:2] == (110.0, 55.0)
    assert rect.local.scale == (20.0, 10.0, 1.0)
    line = renderer._line_nodes[("#000000", 1.0)]
    assert line.geometry.positions[:, :2].tolist() == [
        [100.0, 50.0],
        [120.0, 50.0],
        [100.0, 60.0],
        [120.0, 60.0],
    ]
    text = renderer._text_pool[0]
    assert text.local.position[:2] == (4.0, 4.0)
    assert rect.local.position[2] < line.geometry.positions[0, 2] < text.local.position[2]
    assert renderer.renderer.renders == 1
    assert renderer.canvas.request_draw_count == 1


def test_unused_pooled_nodes_are_hidden_next_frame(backend) -> None:
    renderer = scene_mod.SceneRenderer()
    frames = iter([True, False])

    def draw() -> None:
        renderer.clear("#ffffff")
        if next(frames):
            renderer.fill_rect(0.0, 0.0, 1.0, 1.0, "#000000")
            renderer.draw_line(0.0, 0.0, 1.0, 1.0, "#000000")

    renderer.run(draw)
    renderer.canvas.draw_callback()
    renderer.canvas.draw_callback()
    assert renderer._rect_pool[0].visible is False
    assert renderer._line_nodes[("#000000", 1.0)].visible is False
    assert renderer.renderer.renders == 2


def test_clear_warns_about_unbalanced_save_and_resets(backend, caplog) -> None:
    renderer = scene_mod.SceneRenderer()
    renderer.clear("#ffffff")
    renderer.save()
    renderer.translate(30.0, 40.0)
    with caplog.at_level(logging.WARNING, logger="engine.rendering.scene"):
        renderer.clear("#ffffff")
    assert "unbalanced_transform_stack depth=1" in caplog.text

    renderer.fill_rect(0.0, 0.0, 2.0, 2.0, "#000000")
    assert renderer._rect_pool[0].local.position[:2] == (1.0, 1.0)


def test_draw_loop_exception_closes_renderer(backend, caplog) -> None:
    renderer = scene_mod.SceneRenderer()
    caplog.set_level(logging.ERROR, logger="engine.rendering.scene")

    def draw() -> None:
        raise RuntimeError("boom")

    renderer.run(draw)
    renderer.canvas.draw_callback()
    renderer.canvas.draw_callback()

    assert "unhandled_exception_in_draw_loop" in caplog.text
    assert renderer.canvas.closed
    assert backend.loop.stops == 1
    assert renderer.renderer.renders == 0
    assert renderer.canvas.request_draw_count == 0


def test_set_cursor_caches_accepted_shapes(backend) -> None:
    renderer = scene_mod.SceneRenderer()
    renderer.set_cursor("pointer")
    renderer.set_cursor("pointer")
    renderer.set_cursor("default")
    assert renderer.canvas.cursors == ["pointer", "default"]


def test_rejected_cursor_is_retried_on_next_request(backend, caplog) -> None:
    renderer = scene_mod.SceneRenderer()
    attempts: list[str] = []

    def _flaky(cursor: str) -> None:
        attempts.append(cursor)
        if len(attempts) == 1:
            raise ValueError(f"Canvas cursor {cursor!r} not known")

    renderer.canvas.set_cursor = _flaky
    with caplog.at_level(logging.WARNING, logger="engine.rendering.scene"):
        renderer.set_cursor("pointer")
    assert "cursor_shape_unsupported" in caplog.text

    renderer.set_cursor("pointer")
    renderer.set_cursor("pointer")
    assert attempts == ["pointer", "pointer"]


def test_set_title_updates_canvas(backend) -> None:
    renderer = scene_mod.SceneRenderer()
    renderer.set_title("Yard")
    assert renderer.canvas.title == "Yard"
