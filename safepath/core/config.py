from typing import Literal, Optional

from pydantic import Field, ValidationInfo, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="SAFEPATH_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    app_name: str = Field(default="safepath", description="Application name")
    environment: Literal["development", "staging", "production"] = Field(
        default="development", description="Environment mode"
    )

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO", description="Logging level"
    )
    log_format: Literal["json", "console"] = Field(
        default="console", description="Log output format"
    )

    directory_mode: int = Field(
        default=0o755, description="Permission bits for newly created directories"
    )
    text_encoding: str = Field(
        default="utf-8", description="Encoding used for text file reads and writes"
    )

    @field_validator("directory_mode", mode="before")
    @classmethod
    def parse_directory_mode(cls, v):
        # Accept octal strings such as "0o700" or "700" from the environment
        if isinstance(v, str):
            return int(v, 8) if not v.lower().startswith("0o") else int(v, 0)
        return v

    @field_validator("log_format")
    @classmethod
    def force_json_in_production(cls, v, info: ValidationInfo):
        if info.data.get("environment") == "production":
            return "json"
        return v

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @property
    def is_development(self) -> bool:
        return self.environment == "development"


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
