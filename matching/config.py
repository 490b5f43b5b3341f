"""Runtime settings (environment variables) and logging setup."""
from __future__ import annotations

import logging
import sys
from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOGGER_NAME = "carmatch"

DEFAULT_FUEL_PRICE_PER_L = 1.5
DEFAULT_ELECTRICITY_PRICE_PER_KWH = 0.15


class Settings(BaseSettings):
    """Read from ``CARMATCH_*`` environment variables."""

    model_config = SettingsConfigDict(env_prefix="CARMATCH_", extra="ignore")

    catalog: str | None = None
    fuel_price_per_l: float = DEFAULT_FUEL_PRICE_PER_L
    electricity_price_per_kwh: float = DEFAULT_ELECTRICITY_PRICE_PER_KWH
    log_level: str = "INFO"

    @field_validator("catalog", mode="before")
    @classmethod
    def _blank_catalog(cls, v):
        return v or None

    @field_validator("fuel_price_per_l", "electricity_price_per_kwh", mode="before")
    @classmethod
    def _price_or_default(cls, v, info):
        default = cls.model_fields[info.field_name].default
        if v is None or v == "":
            return default
        try:
            return float(v)
        except (TypeError, ValueError):
            logging.getLogger("carmatch.config").warning(
                "Ignoring invalid %s=%r", info.field_name, v
            )
            return default


@lru_cache
def get_settings() -> Settings:
    return Settings()


def setup_logging(level: str | None = None) -> logging.Logger:
    """Attach a stdout handler to the ``carmatch`` logger (once)."""
    level = level or get_settings().log_level
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(getattr(logging, str(level).upper(), logging.INFO))

    # Avoid duplicate handlers on Streamlit reruns
    if logger.handlers:
        return logger

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(
        "%(asctime)s - %(levelname)s - %(name)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    ))
    logger.addHandler(handler)
    return logger
