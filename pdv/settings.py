from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    app_name: str = "pdv-whatsapp"
    env: str = "dev"
    log_level: str = "INFO"
    timezone: str = Field("America/Sao_Paulo", alias="TIMEZONE")

    # Nome impresso no cabeçalho das mensagens do catálogo virtual
    store_name: str = Field("Paola Gonçalves Rotisseria", alias="STORE_NAME")


settings = Settings()
