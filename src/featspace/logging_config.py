"""Logging setup for applications that embed featspace.

The library itself only creates module loggers; nothing here runs on import.
"""

import json
import logging

from featspace.config import Settings, get_settings

CONSOLE_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


class JsonFormatter(logging.Formatter):
    """Render each record as a single JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "time": self.formatTime(record),
            "logger": record.name,
            "level": record.levelname,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False, default=str)


def configure_logging(config: Settings | None = None) -> None:
    """
    Configure the root logger from settings.

    Args:
        config: Settings to use; defaults to the cached process settings
    """
    config = config or get_settings()

    handler = logging.StreamHandler()
    if config.log_format == "json":
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))

    logging.basicConfig(
        level=getattr(logging, config.log_level),
        handlers=[handler],
        force=True,
    )
