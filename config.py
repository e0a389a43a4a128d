"""
config.py - Application configuration via environment variables.
All variables use the RPNCALC_ prefix.
"""
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Logging
    log_level: str = "INFO"

    # Remote value source for variables (empty = disabled)
    value_source_url: str = ""
    value_source_timeout_ms: int = 5_000

    # HTTP API limits
    max_expression_length: int = 10_000

    # App
    app_title: str = "rpncalc"
    app_version: str = "0.1.0"

    model_config = SettingsConfigDict(env_prefix="RPNCALC_", env_file=".env", extra="ignore")
