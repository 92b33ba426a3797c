"""
Single place to:
- Read settings from env (a local .env is loaded first)
- Configure logging for the whole package
- Provide get_settings() so routes and the store share one Settings object
"""

import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv

from .game import DEFAULT_CODE_LENGTH

# 1) Load env vars from .env if present
# dev convenience; in prod the platform injects env vars
load_dotenv()

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def _int_env(name: str, default: Optional[int]) -> Optional[int]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise RuntimeError(f"{name} must be an integer, got '{raw}'.") from None


@dataclass(frozen=True)
class Settings:
    app_env: str
    variant: str
    code_length: int
    seed: Optional[int]  # None = draw a fresh seed per session
    log_level: str


# 2) Pull the values, falling back to the game defaults
def load_settings() -> Settings:
    return Settings(
        app_env=os.getenv("APP_ENV", "local"),
        variant=os.getenv("CODEBREAKER_VARIANT", "multi_colour"),
        code_length=_int_env("CODEBREAKER_CODE_LENGTH", DEFAULT_CODE_LENGTH),
        seed=_int_env("CODEBREAKER_SEED", None),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Cached singleton settings instance."""
    return load_settings()


# 3) Logging: one stream handler on the package logger.
#    Calling it twice does not stack handlers.
def configure_logging(level: str = "INFO") -> logging.Logger:
    logger = logging.getLogger("codebreaker")
    logger.setLevel(level)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        logger.addHandler(handler)
    return logger
