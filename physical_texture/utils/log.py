"""Logging configuration for applications embedding the package.

The library itself only creates module loggers (``logging.getLogger(__name__)``)
and never installs handlers on import. Applications and tests that want
output call :func:`setup_logging` once.

Format examples:
    Human: 2026-10-19T13:45:12.345Z | INFO     | physical_texture.storage.csv_format | Wrote 2x2 texture to t.csv
    JSON: {"t": "2026-10-19T13:45:12.345000+00:00", "lvl": "INFO", "name": "...", "msg": "..."}

Repeated ``setup_logging`` calls replace the handler installed by the previous
call instead of stacking a second one.
"""

import json as _json
import logging
import sys
from datetime import datetime, timezone
from typing import Optional, TextIO

_HANDLER_NAME = "physical_texture"


class TextureLogFormatter(logging.Formatter):
    """Formats records as a human-readable line or a JSON object per line."""

    def __init__(self, fmt_mode: str = "human"):
        super().__init__()
        if fmt_mode not in ("human", "json"):
            raise ValueError(f"Unknown log format: {fmt_mode!r}")
        self.fmt_mode = fmt_mode

    def format(self, record: logging.LogRecord) -> str:
        ts = datetime.fromtimestamp(record.created, tz=timezone.utc)
        if self.fmt_mode == "json":
            payload = {
                "t": ts.isoformat(),
                "lvl": record.levelname,
                "name": record.name,
                "msg": record.getMessage(),
            }
            if record.exc_info:
                payload["exc"] = self.formatException(record.exc_info)
            return _json.dumps(payload)

        ts_str = ts.strftime("%Y-%m-%dT%H:%M:%S.%f")[:-3] + "Z"
        line = f"{ts_str} | {record.levelname:8s} | {record.name} | {record.getMessage()}"
        if record.exc_info:
            line += "\n" + self.formatException(record.exc_info)
        return line


def setup_logging(
    log_level: str = "INFO",
    *,
    json: bool = False,
    stream: Optional[TextIO] = None,
) -> logging.Handler:
    """Install a stream handler for the ``physical_texture`` logger.

    Args:
        log_level (str): "DEBUG", "INFO", "WARNING", "ERROR" or "CRITICAL".
        json (bool): Emit one JSON object per line instead of human text.
        stream (TextIO | None): Output stream, ``sys.stderr`` by default.

    Returns:
        logging.Handler: The installed handler.
    """
    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {log_level!r}")

    logger = logging.getLogger("physical_texture")
    for existing in list(logger.handlers):
        if existing.get_name() == _HANDLER_NAME:
            logger.removeHandler(existing)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(TextureLogFormatter("json" if json else "human"))
    logger.addHandler(handler)
    logger.setLevel(level)
    return handler
