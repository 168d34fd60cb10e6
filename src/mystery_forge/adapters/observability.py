"""Process-wide logging: console plus a size-bounded rotating file."""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler

from mystery_forge.settings import LoggingSettings

_CONFIGURED = False
_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
_DATE_FORMAT = "%Y-%m-%dT%H:%M:%S%z"


def configure_runtime_logging(settings: LoggingSettings | None = None) -> None:
    """Install root handlers once per process; later calls are no-ops."""
    global _CONFIGURED
    if _CONFIGURED:
        return
    effective = settings or LoggingSettings.from_env()

    effective.path.parent.mkdir(parents=True, exist_ok=True)
    formatter = logging.Formatter(fmt=_FORMAT, datefmt=_DATE_FORMAT)
    handlers: list[logging.Handler] = [
        logging.StreamHandler(),
        RotatingFileHandler(
            filename=effective.path,
            maxBytes=effective.max_bytes,
            backupCount=effective.backup_count,
            encoding="utf-8",
        ),
    ]
    root = logging.getLogger()
    root.setLevel(effective.level)
    root.handlers.clear()
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)

    # Request lines from uvicorn stay quiet unless explicitly raised.
    logging.getLogger("uvicorn.access").setLevel(effective.access_level)
    _CONFIGURED = True


def reset_runtime_logging() -> None:
    """Allow a later `configure_runtime_logging()` call to reinstall handlers."""
    global _CONFIGURED
    _CONFIGURED = False
