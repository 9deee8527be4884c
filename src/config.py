"""
YATL - Settings
===============
Environment-driven configuration, read once by the CLI and passed down.
CLI flags override these values.

    YATL_FILENAME    task list file name (default: .yatl)
    YATL_LOG_LEVEL   logging level (default: WARNING)
    YATL_COLOR       colorized output (default: on; NO_COLOR also turns it off)
"""

import os
from dataclasses import dataclass

ENV_PREFIX = "YATL"

DEFAULT_FILENAME = ".yatl"
DEFAULT_LOG_LEVEL = "WARNING"


def _k(suffix: str) -> str:
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    value = os.getenv(name)
    return default if value is None or value.strip() == "" else value.strip()


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


@dataclass(frozen=True)
class Settings:
    filename: str = DEFAULT_FILENAME
    log_level: str = DEFAULT_LOG_LEVEL
    color: bool = True

    @staticmethod
    def from_env() -> "Settings":
        # https://no-color.org: any non-empty value disables color
        no_color = bool(os.getenv("NO_COLOR"))

        return Settings(
            filename=_env(_k("FILENAME"), DEFAULT_FILENAME),
            log_level=_env(_k("LOG_LEVEL"), DEFAULT_LOG_LEVEL).upper(),
            color=_env_bool(_k("COLOR"), not no_color),
        )

