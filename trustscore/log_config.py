"""structlog wiring for applications and notebooks that use trustscore."""
import logging
import sys
from typing import Optional

import structlog

from trustscore.config import get_settings


def configure_logging(level: Optional[str] = None, json: Optional[bool] = None) -> None:
    """Route structlog events through stdlib logging.

    Args:
        level: Root log level name (e.g. ``"INFO"``, ``"DEBUG"``); defaults
            to ``Settings.log_level``.
        json: Render events as JSON lines instead of the console renderer;
            defaults to ``Settings.log_json``.
    """
    settings = get_settings()
    level = level if level is not None else settings.log_level
    json = json if json is not None else settings.log_json
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    logging.basicConfig(
        level=numeric_level,
        format="%(levelname)s %(name)s %(message)s",
        stream=sys.stdout,
    )
    # basicConfig is a no-op once the root logger has handlers
    logging.getLogger().setLevel(numeric_level)

    renderer = structlog.processors.JSONRenderer() if json else structlog.dev.ConsoleRenderer()
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )
