"""Environment-derived settings for the lifecycle dispatcher."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .config import ConfigurationError, env_bool, env_str

DEFAULT_LOG_DIR = "logs"
DEFAULT_LOG_LEVEL = "WARNING"

APP_NAME_ENV = "SSSD_APP_NAME"
LOG_DIR_ENV = "SSSD_LOG_DIR"
LOG_LEVEL_ENV = "SSSD_LOG_LEVEL"
QUIET_ENV = "SSSD_QUIET"


@dataclass(frozen=True)
class LifecycleConfig:
    """Settings shared by every action handler."""

    app_name: Optional[str] = None
    log_dir: Path = Path(DEFAULT_LOG_DIR)
    log_level: int = logging.WARNING
    quiet: bool = False

    @classmethod
    def from_env(cls) -> "LifecycleConfig":
        """Build configuration from ``SSSD_*`` environment variables."""
        log_dir = env_str(LOG_DIR_ENV, or_value=DEFAULT_LOG_DIR)
        level_name = env_str(LOG_LEVEL_ENV, or_value=DEFAULT_LOG_LEVEL)
        return cls(
            app_name=env_str(APP_NAME_ENV),
            log_dir=Path(str(log_dir)),
            log_level=_parse_log_level(str(level_name)),
            quiet=bool(env_bool(QUIET_ENV, or_value=False)),
        )

    def log_path(self, app_name: str) -> Path:
        """Return the daemon log file for *app_name*."""
        return self.log_dir / f"{app_name}.log"


def _parse_log_level(level_name: str) -> int:
    level = logging.getLevelName(level_name.upper())
    if not isinstance(level, int):
        raise ConfigurationError.invalid_format(LOG_LEVEL_ENV, level_name, "a logging level name such as INFO")
    return level


__all__ = ["LifecycleConfig"]
