# core/config.py
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping

DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_TOAST_MS = 3000
MIN_TOAST_MS = 500


@dataclass(frozen=True)
class AppConfig:
    log_level: str = DEFAULT_LOG_LEVEL
    dump_on_change: bool = False
    toast_ms: int = DEFAULT_TOAST_MS
    # one message per environment value that was replaced by a default
    warnings: tuple[str, ...] = ()

    @property
    def log_level_value(self) -> int:
        return logging.getLevelName(self.log_level)

    @classmethod
    def from_env(cls, env: Mapping[str, str] | None = None) -> "AppConfig":
        env = os.environ if env is None else env
        warnings: list[str] = []

        raw_level = env.get("PLAYLIST_LOG_LEVEL")
        level = (raw_level or DEFAULT_LOG_LEVEL).strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            warnings.append(f"Unknown PLAYLIST_LOG_LEVEL {raw_level!r}, using {DEFAULT_LOG_LEVEL}.")
            level = DEFAULT_LOG_LEVEL

        raw_toast = env.get("PLAYLIST_TOAST_MS")
        try:
            toast_ms = int(raw_toast or DEFAULT_TOAST_MS)
        except ValueError:
            warnings.append(f"Invalid PLAYLIST_TOAST_MS {raw_toast!r}, using {DEFAULT_TOAST_MS}.")
            toast_ms = DEFAULT_TOAST_MS
        if toast_ms < MIN_TOAST_MS:
            warnings.append(f"PLAYLIST_TOAST_MS {raw_toast!r} is below {MIN_TOAST_MS}, using {MIN_TOAST_MS}.")
            toast_ms = MIN_TOAST_MS

        raw_dump = env.get("PLAYLIST_DUMP_ON_CHANGE")
        if raw_dump not in (None, "", "0", "1"):
            warnings.append(f"PLAYLIST_DUMP_ON_CHANGE should be 0 or 1, got {raw_dump!r}; dump disabled.")

        return cls(
            log_level=level,
            dump_on_change=raw_dump == "1",
            toast_ms=toast_ms,
            warnings=tuple(warnings),
        )
