"""envfunc configuration settings."""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from envfunc.infrastructure.logging_setup import configure_logging


class Settings(BaseSettings):
    """Package settings read from ``ENVFUNC_*`` variables."""

    model_config = SettingsConfigDict(
        env_prefix="ENVFUNC_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Observability
    log_level: str = Field(default="INFO")
    log_json: bool = Field(default=False)

    # What to do when a registered variable holds an unparseable value
    bool_parse_error: Literal["default", "raise"] = "default"
    int_parse_error: Literal["default", "raise"] = "raise"

    def setup_logging(self) -> None:
        configure_logging(level=self.log_level, json_logs=self.log_json)


# Global settings instance
settings = Settings()
