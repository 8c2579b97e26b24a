"""Per-frame draw sequence for the placement surface."""

from __future__ import annotations

from engine.api.render import RenderAPI
from tileyard.app.session import Session
from tileyard.app.theme import DEFAULT_THEME, Theme
from tileyard.core.models import Idle, PlacedEntity, tool_label

HUD_MARGIN = 8.0
HUD_PADDING = 6.0


class FrameDriver:
    """Runs one frame against a renderer.

    Order: viewport, camera smoothing, clear, world transform, grid, entities,
    ghost, transform release, then the screen-space HUD. The ghost is computed
    after ``advance()`` so preview and click share the same transform.
    """

    def __init__(
        self,
        session: Session,
        *,
        theme: Theme = DEFAULT_THEME,
        hud_enabled: bool = True,
    ) -> None:
        self._session = session
        self._theme = theme
        self._hud_enabled = hud_enabled

    def draw(self, renderer: RenderAPI, fps: float | None = None) -> None:
        session = self._session
        camera = session.camera

        width, height = renderer.viewport_size()
        session.set_viewport(width, height)
        camera.advance()
        renderer.clear(self._theme.background)

        center = camera.viewport_center
        renderer.save()
        try:
            renderer.translate(center.x, center.y)
            renderer.scale(camera.zoom_scale)
            renderer.translate(camera.pan.x, camera.pan.y)
            self._draw_grid(renderer)
            self._draw_entities(renderer)
            self._draw_preview(renderer)
        finally:
            renderer.restore()

        if self._hud_enabled:
            self._draw_hud(renderer, fps)

    def _draw_grid(self, renderer: RenderAPI) -> None:
        theme = self._theme
        lines = list(self._session.grid.lines())
        for line in lines:
            if not line.major:
                renderer.draw_line(
                    line.start.x,
                    line.start.y,
                    line.end.x,
                    line.end.y,
                    theme.grid_minor,
                    theme.grid_minor_width,
                )
        for line in lines:
            if line.major:
                renderer.draw_line(
                    line.start.x,
                    line.start.y,
                    line.end.x,
                    line.end.y,
                    theme.grid_major,
                    theme.grid_major_width,
                )

    def _draw_entities(self, renderer: RenderAPI) -> None:
        for entity in self._session.entities:
            _fill_entity(renderer, entity, self._theme.entity_fill(entity.kind))

    def _draw_preview(self, renderer: RenderAPI) -> None:
        session = self._session
        ghost = session.ghost()
        if ghost is not None:
            _fill_entity(renderer, ghost, self._theme.ghost_fill(ghost.kind))
            return
        cell = session.hover_cell()
        if cell is not None:
            size = session.grid.cell_size
            renderer.fill_rect(cell.x, cell.y, size, size, self._theme.hover_fill)

    def _draw_hud(self, renderer: RenderAPI, fps: float | None) -> None:
        theme = self._theme
        text = hud_status_text(self._session, fps)
        text_w, text_h = renderer.measure_text(text, theme.hud_font_size)
        renderer.fill_rect(
            HUD_MARGIN,
            HUD_MARGIN,
            text_w + 2.0 * HUD_PADDING,
            text_h + 2.0 * HUD_PADDING,
            theme.hud_bg,
        )
        renderer.draw_text(
            text,
            HUD_MARGIN + HUD_PADDING,
            HUD_MARGIN + HUD_PADDING,
            theme.hud_text,
            theme.hud_font_size,
        )


def hud_status_text(session: Session, fps: float | None = None) -> str:
    tool = session.tool
    if isinstance(tool, Idle):
        anchor = "-"
    elif session.has_anchor:
        anchor = "set"
    else:
        anchor = "none"
    parts = [
        f"Tool: {tool_label(tool)}",
        f"Anchor: {anchor}",
        f"Zoom: {session.camera.zoom_percent}%",
        f"Entities: {len(session.entities)}",
    ]
    if fps:
        parts.append(f"FPS: {fps:.0f}")
    return "  |  ".join(parts)


def _fill_entity(renderer: RenderAPI, entity: PlacedEntity, color: str) -> None:
    renderer.fill_rect(
        entity.origin.x,
        entity.origin.y,
        entity.extent.dx,
        entity.extent.dy,
        color,
    )
