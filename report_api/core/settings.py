from typing import Literal
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import field_validator

IdPolicy = Literal["count", "sequence"]

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # App
    APP_NAME: str = "Purchase Report API"
    APP_VERSION: str = "1.0.0"
    APP_ENV: Literal["local", "dev", "staging", "prod"] = "local"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Server
    HOST: str = "localhost"
    PORT: int = 8080

    # Store
    ID_POLICY: IdPolicy = "count"          # count|sequence
    LEGACY_CREATE_STATUS: bool = True      # POST answers 200 instead of 201

    @field_validator("PORT")
    @classmethod
    def _port_range(cls, v: int, info):
        if not 0 < v < 65536:
            raise ValueError(f"{info.field_name} must be between 1 and 65535")
        return v

    @field_validator("LOG_LEVEL")
    @classmethod
    def _normalize_level(cls, v: str) -> str:
        return (v or "INFO").strip().upper()

    @property
    def ADDRESS(self) -> str:
        return f"{self.HOST}:{self.PORT}"

settings = Settings()
