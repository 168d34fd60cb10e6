"""Environment-driven runtime settings."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

DEFAULT_TITLE_ATTEMPT_FACTOR = 25
DEFAULT_MAX_BATCH = 5000
DEFAULT_LOG_PATH = "work/logs/mystery_forge.log"


def int_env(name: str, default: int, *, minimum: int, maximum: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        return default
    return max(minimum, min(maximum, value))


def _optional_int_env(name: str) -> int | None:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        return None


def _cors_origins() -> tuple[str, ...]:
    raw = os.environ.get("MYSTERY_FORGE_CORS_ORIGINS", "").strip()
    if raw:
        return tuple(origin.strip() for origin in raw.split(",") if origin.strip())
    return ("http://127.0.0.1:5173", "http://localhost:5173")


@dataclass(frozen=True)
class RuntimeSettings:
    """Snapshot of generator and service knobs."""

    seed: int | None
    title_attempt_factor: int
    max_batch: int
    cors_origins: tuple[str, ...]

    @classmethod
    def from_env(cls) -> RuntimeSettings:
        return cls(
            seed=_optional_int_env("MYSTERY_FORGE_SEED"),
            title_attempt_factor=int_env(
                "MYSTERY_FORGE_TITLE_ATTEMPT_FACTOR",
                DEFAULT_TITLE_ATTEMPT_FACTOR,
                minimum=1,
                maximum=1000,
            ),
            max_batch=int_env(
                "MYSTERY_FORGE_MAX_BATCH", DEFAULT_MAX_BATCH, minimum=1, maximum=100_000
            ),
            cors_origins=_cors_origins(),
        )


def _level_env(name: str, default: str) -> int:
    raw = os.environ.get(name, "").strip().upper() or default
    level = logging.getLevelName(raw)
    return level if isinstance(level, int) else logging.getLevelName(default)


@dataclass(frozen=True)
class LoggingSettings:
    """Console and rotating-file logging knobs."""

    level: int
    path: Path
    max_bytes: int
    backup_count: int
    access_level: int

    @classmethod
    def from_env(cls) -> LoggingSettings:
        raw_path = os.environ.get("MYSTERY_FORGE_LOG_PATH", "").strip()
        return cls(
            level=_level_env("MYSTERY_FORGE_LOG_LEVEL", "INFO"),
            path=Path(raw_path or DEFAULT_LOG_PATH),
            max_bytes=int_env(
                "MYSTERY_FORGE_LOG_MAX_BYTES",
                5 * 1024 * 1024,
                minimum=64 * 1024,
                maximum=100 * 1024 * 1024,
            ),
            backup_count=int_env("MYSTERY_FORGE_LOG_BACKUP_COUNT", 10, minimum=1, maximum=120),
            access_level=_level_env("MYSTERY_FORGE_ACCESS_LOG_LEVEL", "WARNING"),
        )
