"""Engine runtime bootstrap for the pygfx frontend."""

from __future__ import annotations

import logging

from engine.api.game_module import GameModule
from engine.input.input_controller import InputController
from engine.rendering.scene import SceneRenderer
from engine.runtime.config import RuntimeConfig
from engine.runtime.host import EngineHost

logger = logging.getLogger(__name__)


class PygfxFrontendWindow:
    """Frontend adapter wiring the pygfx canvas, input capture, and host."""

    def __init__(
        self,
        renderer: SceneRenderer,
        input_controller: InputController,
        host: EngineHost,
    ) -> None:
        self._renderer = renderer
        self._input = input_controller
        self._host = host

    def run(self) -> None:
        self._host.start()
        try:
            self._renderer.run(self._draw_frame)
        finally:
            self._host.shutdown()

    def _draw_frame(self) -> None:
        self._host.frame()
        if self._host.is_closed():
            self._renderer.close()


def create_pygfx_window(*, module: GameModule, config: RuntimeConfig) -> PygfxFrontendWindow:
    """Create the canvas and compose host services around ``module``.

    Raises ``RenderingUnavailableError`` when no drawing surface can be created.
    """
    renderer = SceneRenderer(
        width=config.window_width,
        height=config.window_height,
        title=config.window_title,
    )
    input_controller = InputController(debug=config.debug_input)
    input_controller.bind(renderer.canvas)
    host = EngineHost(module, renderer, input_controller, config)
    logger.info(
        "pygfx_window_created width=%d height=%d title=%s",
        config.window_width,
        config.window_height,
        config.window_title,
    )
    return PygfxFrontendWindow(renderer=renderer, input_controller=input_controller, host=host)
