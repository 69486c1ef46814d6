"""Service settings, read from the environment (``CONFIGURATOR_*``) or ``.env``."""

from __future__ import annotations
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="CONFIGURATOR_", env_file=".env")

    app_name: str = "Steel Door Configurator"
    log_level: str = "INFO"
    api_prefix: str = "/api"
    cors_origins: list[str] = ["*"]

    host: str = "0.0.0.0"
    port: int = 8000
    reload: bool = True


settings = Settings()
