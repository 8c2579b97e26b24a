"""Engine runtime and API boundary modules."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from engine.api.game_module import GameModule
    from engine.runtime.config import RuntimeConfig


def run(*, module: "GameModule", config: "RuntimeConfig | None" = None) -> None:
    """Run one game module in a pygfx window until the window closes."""
    from engine.runtime.config import RuntimeConfig
    from engine.runtime.pygfx_frontend import create_pygfx_window

    window = create_pygfx_window(module=module, config=config or RuntimeConfig.from_env())
    window.run()


__all__ = ["run"]
