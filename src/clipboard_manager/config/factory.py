# region Docstring
"""
clipboard_manager.config.factory
Factory module for creating settings objects with multi-source configuration support.
Overview:
- Provides a custom Pydantic BaseSettings subclass that loads configuration from YAML
    files, environment variables, and .env files.
- Implements a cached factory function so settings are only resolved once per class.
Contents:
- Classes:
    - FactoryBaseSettings:
        BaseSettings subclass with the following priority (highest to lowest):
            1. Environment variables
            2. .env file values
            3. YAML files (config.yaml, then config.{env}.yaml overriding it)
            4. Init kwargs
            5. Field defaults
        Extra keys are ignored and fields can be populated by name or alias.
- Functions:
    - get_settings(settings_cls: Type[T]) -> T:
        LRU-cached factory returning a settings instance for the given class. Call
        `get_settings.cache_clear()` after changing the environment.
"""
# endregion
# region Imports
from functools import lru_cache
from pathlib import Path
from typing import Type, TypeVar

from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    YamlConfigSettingsSource,
)

from .base import APP_ENV, APP_ROOT

# endregion
# region FactoryBaseSettings Class
T = TypeVar("T", bound=BaseSettings)


class FactoryBaseSettings(BaseSettings):
    """
    Custom BaseSettings that supports YAML and Env Vars.
    Priority: Env Vars > .env > YAML (Env specific) > YAML (Default) > Init kwargs > Defaults
    """

    model_config = SettingsConfigDict(
        env_file=APP_ROOT / ".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: Type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:

        yaml_settings = YamlConfigSettingsSource(settings_cls, yaml_file=cls.config_files())
        return (
            env_settings,
            dotenv_settings,
            yaml_settings,
            init_settings,
        )

    @classmethod
    def config_files(cls) -> list[Path]:
        """YAML files read for this class; later files override earlier ones."""
        return [APP_ROOT / "config.yaml", APP_ROOT / f"config.{APP_ENV}.yaml"]


# endregion
# region get_settings Factory Function


@lru_cache
def get_settings(settings_cls: Type[T]) -> T:
    """
    Factory function to load any settings class.
    Results are cached so we don't re-read files every time.
    """
    return settings_cls()


# endregion
