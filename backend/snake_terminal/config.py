"""
Settings for the terminal front-end.

Values come from the environment (a local .env file is loaded first) and
can be overridden from the command line.
"""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()


@dataclass
class Settings:
    tick_ms: int = 500
    min_tick_ms: int = 100
    tick_step_ms: int = 10
    min_columns: int = 84
    min_rows: int = 24
    log_file: str = "snake3.log"
    log_level: str = "INFO"


def _int_from_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


def load_settings() -> Settings:
    """Build Settings from SNAKE_* environment variables."""
    defaults = Settings()
    return Settings(
        tick_ms=_int_from_env('SNAKE_TICK_MS', defaults.tick_ms),
        min_tick_ms=_int_from_env('SNAKE_MIN_TICK_MS', defaults.min_tick_ms),
        tick_step_ms=_int_from_env('SNAKE_TICK_STEP_MS', defaults.tick_step_ms),
        min_columns=_int_from_env('SNAKE_MIN_COLUMNS', defaults.min_columns),
        min_rows=_int_from_env('SNAKE_MIN_ROWS', defaults.min_rows),
        log_file=os.getenv('SNAKE_LOG_FILE') or defaults.log_file,
        log_level=(os.getenv('SNAKE_LOG_LEVEL') or defaults.log_level).upper(),
    )
