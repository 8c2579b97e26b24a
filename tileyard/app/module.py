"""Tileyard GameModule adapter for the engine host."""

from __future__ import annotations

import logging

from engine.api.game_module import GameModule, HostControl, HostFrameContext
from engine.api.input_snapshot import InputSnapshot
from engine.api.render import RenderAPI
from tileyard.app.frame import FrameDriver
from tileyard.app.keymap import KeyBindings
from tileyard.app.session import Session
from tileyard.core.grid import Grid
from tileyard.core.models import EntityKind
from tileyard.infra.config import AppConfig

logger = logging.getLogger(__name__)


class TileyardModule(GameModule):
    """Feeds host input to the session and draws it once per frame."""

    def __init__(self, session: Session, driver: FrameDriver) -> None:
        self._session = session
        self._driver = driver
        self._host: HostControl | None = None

    @property
    def session(self) -> Session:
        return self._session

    def on_start(self, host: HostControl, renderer: RenderAPI) -> None:
        self._host = host
        self._session.bind_cursor(renderer.set_cursor)

    def on_input_snapshot(self, snapshot: InputSnapshot) -> bool:
        changed = False
        for event in snapshot.events:
            changed = self._session.handle_event(event) or changed
        return changed

    def render_frame(self, renderer: RenderAPI, context: HostFrameContext) -> None:
        self._driver.draw(renderer, fps=context.fps)

    def should_close(self) -> bool:
        return False

    def on_shutdown(self) -> None:
        entities = self._session.entities
        frames = self._host.current_frame_index() if self._host is not None else 0
        logger.info(
            "session_closed stores=%d tracks=%d frames=%d",
            entities.count(EntityKind.STORE),
            entities.count(EntityKind.TRACK),
            frames,
        )
        self._host = None


def create_module(config: AppConfig) -> TileyardModule:
    grid = Grid(rows=config.grid_rows, cols=config.grid_cols, cell_size=config.cell_size)
    session = Session(grid, bindings=KeyBindings.from_config(config))
    driver = FrameDriver(session, hud_enabled=config.hud_enabled)
    return TileyardModule(session, driver)
