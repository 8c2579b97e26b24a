"""Scene graph setup for pygfx rendering."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from engine.rendering.scene_primitives import approximate_text_extent, segment_positions
from engine.rendering.scene_retained import (
    hide_unused_nodes,
    upsert_line_batch,
    upsert_rect,
    upsert_text,
)
from engine.rendering.scene_runtime import (
    get_canvas_logical_size,
    run_backend_loop,
    stop_backend_loop,
)
from engine.rendering.transform import TransformStack
from engine.runtime.errors import (
    RECOVERABLE_RUNTIME_ERRORS,
    RenderingUnavailableError,
    log_recoverable,
)

_gfx_import_error: Exception | None
try:
    import pygfx as gfx
except Exception as exc:  # pragma: no cover - import guard for environments without graphics deps
    gfx = None
    _gfx_import_error = exc
else:
    _gfx_import_error = None

_canvas_import_error: Exception | None
try:
    import rendercanvas.auto as rc_auto
except Exception as exc:  # pragma: no cover - missing GUI backend
    rc_auto = None
    _canvas_import_error = exc
else:
    _canvas_import_error = None

logger = logging.getLogger(__name__)

# Each primitive is drawn slightly above the previous one so insertion order is paint order.
_Z_STEP = 1e-3
_BACKGROUND_Z = -100.0


@dataclass(slots=True)
class SceneRenderer:
    """Immediate-mode 2D renderer over pooled pygfx nodes."""

    width: int = 1280
    height: int = 800
    title: str = "Tileyard"
    _transform: TransformStack = field(default_factory=TransformStack)
    _rect_pool: list[Any] = field(default_factory=list)
    _text_pool: list[Any] = field(default_factory=list)
    _line_nodes: dict[tuple[str, float], Any] = field(default_factory=dict)
    _line_batches: dict[tuple[str, float], list[tuple[float, float, float, float]]] = field(
        default_factory=dict
    )
    _line_batch_z: dict[tuple[str, float], float] = field(default_factory=dict)
    _rects_used: int = 0
    _texts_used: int = 0
    _z: float = 0.0
    _cursor: str | None = None
    canvas: Any = field(init=False)
    renderer: Any = field(init=False)
    scene: Any = field(init=False)
    camera: Any = field(init=False)
    _background: Any = field(init=False, default=None)
    _draw_failed: bool = field(init=False, default=False)
    _is_closed: bool = field(init=False, default=False)
    _draw_callback: Callable[[], None] | None = field(init=False, default=None)

    def __post_init__(self) -> None:
        if gfx is None:
            raise RenderingUnavailableError(
                f"pygfx dependency unavailable: {_gfx_import_error!r}. Install 'pygfx' and 'wgpu'."
            )
        if rc_auto is None:
            raise RenderingUnavailableError(
                "Render canvas backend unavailable. "
                "Install a desktop backend such as 'glfw'. "
                f"Original error: {_canvas_import_error!r}"
            )
        canvas_cls = getattr(rc_auto, "RenderCanvas", None)
        if canvas_cls is None:
            raise RenderingUnavailableError("rendercanvas.auto did not expose RenderCanvas.")
        try:
            self.canvas = canvas_cls(size=(self.width, self.height), title=self.title)
            self.renderer = gfx.WgpuRenderer(self.canvas)
        except Exception as exc:
            raise RenderingUnavailableError(f"could not create drawing surface: {exc!r}") from exc
        self.scene = gfx.Scene()
        self.camera = gfx.OrthographicCamera(self.width, self.height)
        self._update_camera_projection()
        self._sync_size_from_canvas()

    def _update_camera_projection(self) -> None:
        if hasattr(self.camera, "width"):
            self.camera.width = self.width
        if hasattr(self.camera, "height"):
            self.camera.height = self.height
        self.camera.local.position = (self.width / 2.0, self.height / 2.0, 0.0)
        self.camera.local.scale_y = -1.0

    def _sync_size_from_canvas(self) -> bool:
        size = get_canvas_logical_size(self.canvas)
        if size is None:
            return False
        width, height = int(size[0]), int(size[1])
        if width <= 1 or height <= 1:
            return False
        if width == self.width and height == self.height:
            return False
        self.width = width
        self.height = height
        self._update_camera_projection()
        logger.debug("canvas_resized width=%d height=%d", width, height)
        return True

    def viewport_size(self) -> tuple[float, float]:
        return float(self.width), float(self.height)

    def clear(self, color: str) -> None:
        """Start a new frame: reset transform and node cursors, paint the background."""
        if self._transform.depth:
            logger.warning("unbalanced_transform_stack depth=%d", self._transform.depth)
        self._transform.reset()
        self._rects_used = 0
        self._texts_used = 0
        self._z = 0.0
        self._line_batches.clear()
        self._line_batch_z.clear()
        if self._background is None:
            self._background = gfx.Mesh(
                gfx.plane_geometry(1.0, 1.0), gfx.MeshBasicMaterial(color=color)
            )
            self.scene.add(self._background)
        else:
            self._background.material.color = color
        self._background.local.position = (self.width / 2.0, self.height / 2.0, _BACKGROUND_Z)
        self._background.local.scale = (float(self.width), float(self.height), 1.0)

    def save(self) -> None:
        self._transform.save()

    def restore(self) -> None:
        self._transform.restore()

    def translate(self, dx: float, dy: float) -> None:
        self._transform.translate(dx, dy)

    def scale(self, factor: float) -> None:
        self._transform.scale(factor)

    def _next_z(self) -> float:
        self._z += _Z_STEP
        return self._z

    def draw_line(
        self,
        x0: float,
        y0: float,
        x1: float,
        y1: float,
        color: str,
        width: float = 1.0,
    ) -> None:
        tx0, ty0 = self._transform.apply(x0, y0)
        tx1, ty1 = self._transform.apply(x1, y1)
        key = (color, float(width))
        if key not in self._line_batches:
            self._line_batches[key] = []
            self._line_batch_z[key] = self._next_z()
        self._line_batches[key].append((tx0, ty0, tx1, ty1))

    def fill_rect(self, x: float, y: float, w: float, h: float, color: str) -> None:
        ax, ay = self._transform.apply(x, y)
        bx, by = self._transform.apply(x + w, y + h)
        upsert_rect(
            gfx=gfx,
            scene=self.scene,
            pool=self._rect_pool,
            index=self._rects_used,
            tx=min(ax, bx),
            ty=min(ay, by),
            tw=abs(bx - ax),
            th=abs(by - ay),
            color=color,
            z=self._next_z(),
        )
        self._rects_used += 1

    def draw_text(
        self,
        text: str,
        x: float,
        y: float,
        color: str = "#ffffff",
        font_size: float = 14.0,
    ) -> None:
        tx, ty = self._transform.apply(x, y)
        upsert_text(
            gfx=gfx,
            scene=self.scene,
            pool=self._text_pool,
            index=self._texts_used,
            text=text,
            tx=tx,
            ty=ty,
            font_size=font_size,
            color=color,
            z=self._next_z(),
        )
        self._texts_used += 1

    def measure_text(self, text: str, font_size: float = 14.0) -> tuple[float, float]:
        return approximate_text_extent(text, font_size)

    def set_cursor(self, cursor: str) -> None:
        if cursor == self._cursor:
            return
        setter = getattr(self.canvas, "set_cursor", None)
        if callable(setter):
            try:
                setter(cursor)
            except RECOVERABLE_RUNTIME_ERRORS:
                # Left uncached so the next request reaches the backend again.
                log_recoverable(
                    logger, "cursor_shape_unsupported", level=logging.WARNING, cursor=cursor
                )
                return
        self._cursor = cursor

    def set_title(self, title: str) -> None:
        self.title = title
        setter = getattr(self.canvas, "set_title", None)
        if not callable(setter):
            return
        try:
            setter(title)
        except RECOVERABLE_RUNTIME_ERRORS:
            log_recoverable(logger, "window_title_unsupported", title=title)

    def _flush(self) -> None:
        for key, segments in self._line_batches.items():
            upsert_line_batch(
                gfx=gfx,
                scene=self.scene,
                nodes=self._line_nodes,
                key=key,
                positions=segment_positions(segments, z=self._line_batch_z[key]),
            )
        for key, node in self._line_nodes.items():
            if key not in self._line_batches:
                node.visible = False
        hide_unused_nodes(self._rect_pool, self._rects_used)
        hide_unused_nodes(self._text_pool, self._texts_used)

    def run(self, draw_callback: Callable[[], None]) -> None:
        """Start the draw loop; every frame schedules the next one."""
        self._draw_callback = draw_callback

        def _draw_frame() -> None:
            if self._draw_failed or self._is_closed:
                return
            try:
                self._sync_size_from_canvas()
                if self._draw_callback is None:
                    return
                self._draw_callback()
                if self._is_closed:
                    return
                self._flush()
                self.renderer.render(self.scene, self.camera)
            except Exception:  # pylint: disable=broad-exception-caught
                self._draw_failed = True
                logger.exception("unhandled_exception_in_draw_loop")
                self.close()
                return
            self.canvas.request_draw()

        self.canvas.request_draw(_draw_frame)
        run_backend_loop(rc_auto)

    def close(self) -> None:
        """Close canvas and stop backend loop when possible."""
        if self._is_closed:
            return
        self._is_closed = True
        if hasattr(self.canvas, "close"):
            self.canvas.close()
        stop_backend_loop(rc_auto)
