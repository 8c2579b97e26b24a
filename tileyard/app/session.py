"""Placement session: the single owned state object and its input handlers."""

from __future__ import annotations

import logging
from collections.abc import Callable

from engine.api.input_events import (
    BUTTON_LEFT,
    BUTTON_MIDDLE,
    InputEvent,
    KeyEvent,
    PointerEvent,
    ResizeEvent,
    WheelEvent,
)
from tileyard.app.keymap import KeyAction, KeyBindings, kind_for_action
from tileyard.core.camera import Camera
from tileyard.core.entities import EntityStore
from tileyard.core.geometry import Displacement, Position
from tileyard.core.grid import Grid
from tileyard.core.models import (
    EntityKind,
    Idle,
    PlacedEntity,
    PlacingStore,
    PlacingTrack,
    Tool,
    placing_tool_for,
    tool_label,
)
from tileyard.core.placement import closing_rect

logger = logging.getLogger(__name__)

CURSOR_PAN = "pointer"
CURSOR_PLACE = "default"


def cursor_for_tool(tool: Tool) -> str:
    """Cursor affordance: drag-to-pan when idle, neutral while placing."""
    return CURSOR_PAN if isinstance(tool, Idle) else CURSOR_PLACE


class Session:
    """Owns grid, camera, active tool and placed entities.

    Every input handler and the frame driver mutate this object only; nothing
    else holds a reference to the camera, tool or entity store.
    """

    def __init__(
        self,
        grid: Grid,
        *,
        bindings: KeyBindings | None = None,
        camera: Camera | None = None,
    ) -> None:
        self.grid = grid
        self.camera = camera or Camera()
        self.entities = EntityStore(grid.cell_size)
        self.bindings = bindings or KeyBindings()
        self._tool: Tool = Idle()
        self._pointer: Position | None = None
        self._drag_button: int | None = None
        self._cursor_sink: Callable[[str], None] | None = None
        self._cursor = cursor_for_tool(self._tool)

    @property
    def tool(self) -> Tool:
        return self._tool

    @property
    def cursor(self) -> str:
        return self._cursor

    @property
    def pointer(self) -> Position | None:
        """Last pointer position in screen space, if the pointer has been seen."""
        return self._pointer

    @property
    def has_anchor(self) -> bool:
        return not isinstance(self._tool, Idle) and self._tool.anchor is not None

    def bind_cursor(self, sink: Callable[[str], None]) -> None:
        """Route cursor changes to ``sink`` and push the current affordance."""
        self._cursor_sink = sink
        sink(self._cursor)

    def set_viewport(self, width: float, height: float) -> None:
        self.camera.viewport = Displacement(float(width), float(height))

    def pointer_world(self) -> Position | None:
        if self._pointer is None:
            return None
        return self.camera.screen_to_world(self._pointer)

    # Input dispatch

    def handle_event(self, event: InputEvent) -> bool:
        """Apply one input event. Returns whether session state changed."""
        if isinstance(event, PointerEvent):
            if event.event_type == "pointer_down":
                return self.on_pointer_down(event.x, event.y, event.button)
            if event.event_type == "pointer_move":
                return self.on_pointer_move(event.x, event.y, event.dx, event.dy)
            if event.event_type == "pointer_up":
                return self.on_pointer_up(event.x, event.y, event.button)
            return False
        if isinstance(event, KeyEvent):
            return self.on_key(event.value)
        if isinstance(event, WheelEvent):
            return self.on_wheel(event.dy)
        if isinstance(event, ResizeEvent):
            self.set_viewport(event.width, event.height)
            return True
        return False

    def on_pointer_down(self, x: float, y: float, button: int) -> bool:
        self._pointer = Position(x, y)
        if button == BUTTON_MIDDLE or (button == BUTTON_LEFT and isinstance(self._tool, Idle)):
            self._drag_button = button
            return False
        if button == BUTTON_LEFT:
            self.click(self._pointer)
            return True
        return False

    def on_pointer_move(self, x: float, y: float, dx: float, dy: float) -> bool:
        self._pointer = Position(x, y)
        if self._drag_button is None:
            return False
        if self._drag_button == BUTTON_LEFT and not isinstance(self._tool, Idle):
            return False
        self.camera.pan_by_screen(Displacement(dx, dy))
        return True

    def on_pointer_up(self, x: float, y: float, button: int) -> bool:
        self._pointer = Position(x, y)
        if self._drag_button == button:
            self._drag_button = None
        return False

    def on_wheel(self, dy: float) -> bool:
        before = self.camera.target_zoom_level
        self.camera.apply_wheel(dy)
        return self.camera.target_zoom_level != before

    def on_key(self, key: str) -> bool:
        action = self.bindings.action_for(key)
        if action is None:
            return False
        if action is KeyAction.CANCEL:
            return self.cancel_anchor()
        kind = kind_for_action(action)
        if kind is None:
            return False
        self.select_tool(kind)
        return True

    # Tool state machine

    def select_tool(self, kind: EntityKind) -> Tool:
        """Enter the placing tool for ``kind``, or return to idle if it is already active.

        Any pending anchor is discarded by the transition.
        """
        current = self._tool
        if not isinstance(current, Idle) and current.kind is kind:
            next_tool: Tool = Idle()
        else:
            next_tool = placing_tool_for(kind)
        self._set_tool(next_tool)
        return next_tool

    def cancel_anchor(self) -> bool:
        """Drop a pending anchor without committing; no-op without one."""
        tool = self._tool
        if isinstance(tool, Idle) or tool.anchor is None:
            return False
        self._set_tool(placing_tool_for(tool.kind))
        logger.debug("anchor_cleared tool=%s", tool_label(self._tool))
        return True

    def click(self, screen_pos: Position) -> PlacedEntity | None:
        """Left click at ``screen_pos``: set the anchor, or close and commit the rectangle."""
        tool = self._tool
        if isinstance(tool, Idle):
            return None
        world = self.camera.screen_to_world(screen_pos)
        if tool.anchor is None:
            anchor = self.grid.snap(world)
            self._set_tool(placing_tool_for(tool.kind, anchor))
            logger.debug("anchor_set tool=%s x=%g y=%g", tool_label(tool), anchor.x, anchor.y)
            return None
        entity = closing_rect(tool.kind, tool.anchor, world, self.grid.cell_size)
        self.entities.append(entity)
        self._set_tool(placing_tool_for(tool.kind))
        logger.info(
            "entity_committed kind=%s",
            entity.kind.value,
            extra={
                "kind": entity.kind.value,
                "origin": [entity.origin.x, entity.origin.y],
                "extent": [entity.extent.dx, entity.extent.dy],
                "count": len(self.entities),
            },
        )
        return entity

    def ghost(self) -> PlacedEntity | None:
        """Entity a click at the current pointer would commit, if an anchor is pending."""
        tool = self._tool
        if not isinstance(tool, (PlacingStore, PlacingTrack)) or tool.anchor is None:
            return None
        world = self.pointer_world()
        if world is None:
            return None
        return closing_rect(tool.kind, tool.anchor, world, self.grid.cell_size)

    def hover_cell(self) -> Position | None:
        """Snapped cell under the pointer while a placing tool awaits its first click."""
        tool = self._tool
        if isinstance(tool, Idle) or tool.anchor is not None:
            return None
        world = self.pointer_world()
        return None if world is None else self.grid.snap(world)

    def _set_tool(self, tool: Tool) -> None:
        previous = self._tool
        self._tool = tool
        if type(previous) is not type(tool):
            logger.debug("tool_changed from=%s to=%s", tool_label(previous), tool_label(tool))
        self._update_cursor()

    def _update_cursor(self) -> None:
        cursor = cursor_for_tool(self._tool)
        self._cursor = cursor
        if self._cursor_sink is not None:
            self._cursor_sink(cursor)
