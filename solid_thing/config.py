from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Literal


RdfFormat = Literal["turtle", "nt", "nquads", "trig", "json-ld"]


class ReaderSettings(BaseSettings):
    """Dataset reading configuration"""
    default_locale: str = Field(
        default="en",
        description="Locale used by locale-string lookups when none is given"
    )
    default_format: RdfFormat = Field(
        default="turtle",
        description="RDF serialization assumed when it can't be guessed from the file name"
    )

    model_config = SettingsConfigDict(
        env_prefix='THING_',
        env_file='.env',
        env_file_encoding='utf-8',
        extra='ignore'
    )


class AppSettings(BaseSettings):
    """Application settings"""
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Logging level"
    )

    # Component settings
    reader: ReaderSettings = Field(default_factory=ReaderSettings)

    model_config = SettingsConfigDict(
        env_file='.env',
        env_file_encoding='utf-8',
        case_sensitive=False,
        extra='ignore'
    )


# Singleton instance
_settings: AppSettings | None = None


def get_settings() -> AppSettings:
    """Get application settings (singleton)"""
    global _settings
    if _settings is None:
        _settings = AppSettings()
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next get_settings() re-reads the environment"""
    global _settings
    _settings = None
