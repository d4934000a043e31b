from functools import lru_cache
from typing import final

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


@final
class PingenSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="PINGEN_")

    debug: bool = False
    log_level: str = "INFO"
    token: str = Field(strict=True, min_length=1)
    environment: str = "production"
    timeout: int = Field(30, gt=0)


@lru_cache  # get it from memory
def get_settings() -> PingenSettings:
    return PingenSettings()
