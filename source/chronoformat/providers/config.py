"""This module defines the configuration management for the library.

It uses Pydantic's BaseSettings to create a strongly-typed configuration
class that reads from environment variables and .env files, so the default
log level and the language used for month and weekday names can be set
without touching code.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict

from chronoformat.models.calendar import Language


class Config(BaseSettings):
    """A Pydantic model for managing library settings.

    It automatically loads configuration from environment variables and .env files.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    LOG_LEVEL: str = "INFO"

    DATE_LANGUAGE: Language = Language.ENGLISH


class ConfigProvider:
    """A provider class that acts as a factory for the library's configuration.

    It does not hold state but provides a method to create fresh config instances.
    """

    @staticmethod
    def get_config() -> Config:
        """Factory method that instantiates and returns a new Config object.

        Calling this function will always create a new instance of the Config model,
        which forces Pydantic to reload and re-validate all settings from the
        current environment variables.

        Returns:
            A new, validated Config object.
        """
        return Config()
