"""Engine-hosted runtime shell for game module execution."""

from __future__ import annotations

import logging

from engine.api.game_module import GameModule, HostControl
from engine.api.render import RenderAPI
from engine.input.input_controller import InputController
from engine.runtime.config import RuntimeConfig
from engine.runtime.time import FrameClock

_LOG = logging.getLogger("engine.runtime")
_FPS_LOG_EVERY_FRAMES = 600


class EngineHost(HostControl):
    """Drives one module: input dispatch then render, once per frame callback."""

    def __init__(
        self,
        module: GameModule,
        renderer: RenderAPI,
        input_controller: InputController,
        config: RuntimeConfig | None = None,
        clock: FrameClock | None = None,
    ) -> None:
        self._module = module
        self._renderer = renderer
        self._input = input_controller
        self._config = config or RuntimeConfig()
        self._clock = clock or FrameClock(max_delta_seconds=self._config.max_frame_delta_seconds)
        self._frame_index = 0
        self._started = False
        self._closed = False

    @property
    def config(self) -> RuntimeConfig:
        return self._config

    def current_frame_index(self) -> int:
        return self._frame_index

    def is_closed(self) -> bool:
        return self._closed

    def start(self) -> None:
        if self._started:
            return
        self._started = True
        self._module.on_start(self, self._renderer)
        _LOG.info("host_started module=%s", type(self._module).__name__)

    def frame(self) -> None:
        """Run one frame: dispatch queued input, then let the module draw."""
        if self._closed:
            return
        if not self._started:
            self.start()
        snapshot = self._input.build_input_snapshot(frame_index=self._frame_index)
        if snapshot.events:
            self._module.on_input_snapshot(snapshot)
        context = self._clock.next(self._frame_index)
        self._module.render_frame(self._renderer, context)
        if self._frame_index and self._frame_index % _FPS_LOG_EVERY_FRAMES == 0:
            _LOG.debug("frame_rate frame=%d fps=%.1f", self._frame_index, context.fps)
        self._frame_index += 1
        if self._module.should_close():
            self.close()

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        _LOG.info("host_close_requested frame=%d", self._frame_index)

    def shutdown(self) -> None:
        if not self._started:
            return
        self._module.on_shutdown()
        _LOG.info("host_shutdown frames=%d", self._frame_index)
