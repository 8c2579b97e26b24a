"""Contract between the engine host and the module it drives."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from engine.api.input_snapshot import InputSnapshot
from engine.api.render import RenderAPI


@dataclass(frozen=True, slots=True)
class HostFrameContext:
    frame_index: int
    delta_seconds: float
    elapsed_seconds: float
    fps: float


@runtime_checkable
class HostControl(Protocol):
    """What a module may ask of the host that runs it."""

    def close(self) -> None:
        """Stop after the current frame."""

    def current_frame_index(self) -> int: ...


@runtime_checkable
class GameModule(Protocol):
    """Hooks called by the host, in order: start, then per frame input and render, then shutdown."""

    def on_start(self, host: HostControl, renderer: RenderAPI) -> None: ...

    def on_input_snapshot(self, snapshot: InputSnapshot) -> bool:
        """Apply ``snapshot.events`` in order; True when anything visible changed."""

    def render_frame(self, renderer: RenderAPI, context: HostFrameContext) -> None:
        """Advance animation state and draw one frame."""

    def should_close(self) -> bool: ...

    def on_shutdown(self) -> None: ...
