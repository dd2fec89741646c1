"""
config.py — netpay application settings.

Usage:
    from netpay.config import settings
    print(settings.law_change_date)

Import the module-level singleton directly; do not construct Settings per call.
"""
import logging
from datetime import date
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="NETPAY_",
        case_sensitive=False,
        extra="ignore",  # Silently ignore any extra env vars
    )

    # --- Application ---
    debug: bool = False
    log_level: str = "INFO"

    # --- Law change ---
    # New PIT deductions and the 2026 regional minimum wages apply from this date
    law_change_date: date = date(2026, 1, 1)

    # Period used when a SalaryInput does not name one
    default_period: Literal["before", "after"] = "after"


# Module-level singleton, import this throughout the codebase
settings = Settings()


def configure_logging(config: Settings | None = None) -> None:
    """
    Configure root logging for a host process embedding the engine.

    The library itself only creates module loggers; call this once from the
    application entry point (DEBUG when debug=True, else log_level).
    """
    config = config or settings
    level = logging.DEBUG if config.debug else getattr(logging, config.log_level.upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s — %(message)s",
    )
