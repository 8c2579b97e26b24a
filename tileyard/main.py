"""Application entry point."""

from __future__ import annotations

import sys
from dataclasses import asdict

from engine import run
from engine.api.logging import get_logger
from engine.runtime.config import RuntimeConfig
from engine.runtime.errors import RenderingUnavailableError
from engine.runtime.logging import stop_engine_logging
from tileyard.app.module import create_module
from tileyard.infra.app_data import ensure_app_data_dirs
from tileyard.infra.config import AppConfig, load_default_env_files
from tileyard.infra.logging import setup_logging

logger = get_logger(__name__)


def main() -> int:
    """Run Tileyard until the window closes. Returns the process exit status."""
    loaded = load_default_env_files()
    paths = ensure_app_data_dirs()
    setup_logging()
    try:
        app_config = AppConfig.from_env()
        runtime_config = RuntimeConfig.from_env()
        logger.info(
            "startup env_files=%s app_data=%s",
            ",".join(loaded) or "-",
            paths["root"],
            extra={"app_config": asdict(app_config), "runtime_config": asdict(runtime_config)},
        )
        try:
            run(module=create_module(app_config), config=runtime_config)
        except RenderingUnavailableError:
            logger.exception("rendering_unavailable")
            return 1
        return 0
    finally:
        stop_engine_logging()


if __name__ == "__main__":
    sys.exit(main())
