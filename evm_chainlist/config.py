"""Settings of the default chains registry, read from EVM_CHAINLIST_* environment variables."""

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import MODULE_PREFIX


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix=MODULE_PREFIX + "_",
        env_ignore_empty=True,
        extra="ignore",
    )

    disable_autoload: bool = False
    data_dir: Path = Field(default_factory=lambda: Path.cwd() / "chains")

    @property
    def data_dir_configured(self) -> bool:
        return "data_dir" in self.model_fields_set


@lru_cache
def get_settings() -> Settings:
    return Settings()
