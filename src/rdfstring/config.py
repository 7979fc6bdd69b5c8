from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="RDFSTRING_", env_file=".env", extra="ignore")

    # Observability
    log_level: str = Field(default="WARNING")
    log_json: bool = Field(default=False)

    # CLI output
    json_indent: bool = Field(default=False)


settings = Settings()
