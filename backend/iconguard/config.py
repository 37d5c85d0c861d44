"""Application configuration from environment variables."""

from __future__ import annotations

import logging

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    env: str = "development"
    log_level: str = "info"

    # Layout frames an icon can be assigned to, matched case-sensitively
    package_names: list[str] = ["Core", "RI", "InfraGO", "Movas"]

    # Diagnostics
    subpixel_tolerance: float = 0.01
    proximity_threshold: float = 1.0

    model_config = SettingsConfigDict(
        env_prefix="ICONGUARD_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


settings = Settings()


def configure_logging(level: str | None = None) -> None:
    logging.basicConfig(
        level=getattr(logging, (level or settings.log_level).upper(), logging.INFO),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
