from functools import cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Config(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="GAMEUTILS_")

    debug: bool = False
    root_tag: str = "ROOT"
    log_rotation: str = "5 MB"


@cache
def get_config() -> Config:
    return Config()
