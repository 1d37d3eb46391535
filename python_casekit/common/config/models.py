from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from errors import UnknownCaseStyleError
from utils.string_case import normalize_style

LOG_FORMATS = ("json", "text")


class LoggingConfig(BaseSettings):
    level: str = "INFO"
    format: str = "text"

    @field_validator("level")
    @classmethod
    def _upper_level(cls, value: str) -> str:
        return value.upper()

    @field_validator("format")
    @classmethod
    def _known_format(cls, value: str) -> str:
        value = value.lower()
        if value not in LOG_FORMATS:
            raise ValueError(f"log format must be one of {', '.join(LOG_FORMATS)}")
        return value

    model_config = SettingsConfigDict(env_prefix="LOG_")

class ConverterConfig(BaseSettings):
    default_style: str = "camel"

    @field_validator("default_style")
    @classmethod
    def _registered_style(cls, value: str) -> str:
        try:
            return normalize_style(value)
        except UnknownCaseStyleError as e:
            raise ValueError(str(e)) from e

    model_config = SettingsConfigDict(env_prefix="CONVERTER_")

class AppConfig(BaseSettings):
    name: str = "casekit"

    logging: LoggingConfig = LoggingConfig()
    converter: ConverterConfig = ConverterConfig()

    model_config = SettingsConfigDict(env_file=".env", env_nested_delimiter="__")
