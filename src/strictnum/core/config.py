"""Application configuration using pydantic-settings with grouped env prefixes."""

from __future__ import annotations

from typing import Literal

from pydantic_settings import BaseSettings


class LocaleConfig(BaseSettings):
    """Locale used for text catalog lookups."""

    model_config = {"env_prefix": "STRICTNUM_LOCALE_"}

    language: str = "en"  # "xx" or "xx_YY"


class TxtConfig(BaseSettings):
    """Text catalog storage configuration."""

    model_config = {"env_prefix": "STRICTNUM_TXT_"}

    backend: Literal["filesystem", "s3"] = "filesystem"
    app_path: str = "."
    s3_bucket: str = ""
    s3_prefix: str = ""
    region: str = "us-east-1"
    endpoint_url: str | None = None  # LocalStack override


class LogConfig(BaseSettings):
    """JSON-lines log file configuration."""

    model_config = {"env_prefix": "STRICTNUM_LOG_"}

    level: str = "INFO"
    path: str | None = None  # None disables the file handler
    default_file: str = "strictnum_app.log"
    max_bytes: int = 1_000_000
    max_files: int = 10
    auto_create: bool = True


class FormatConfig(BaseSettings):
    """Default DECIMAL column shape and UI separators."""

    model_config = {"env_prefix": "STRICTNUM_FORMAT_"}

    precision: int = 14
    scale: int = 2
    thousands_sep: str = "."
    decimal_sep: str = ","


class AppSettings(BaseSettings):
    """Root application settings aggregating all sub-configs."""

    model_config = {"env_prefix": "STRICTNUM_"}

    environment: Literal["dev", "uat", "prod"] = "dev"

    locale: LocaleConfig = LocaleConfig()
    txt: TxtConfig = TxtConfig()
    log: LogConfig = LogConfig()
    format: FormatConfig = FormatConfig()
