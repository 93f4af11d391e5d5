from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


_PACKAGE_DIR = Path(__file__).parent


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    host: str = Field(default="0.0.0.0", alias="HOST")
    port: int = Field(default=3000, alias="PORT")
    app_name: str = Field(default="greenroad", alias="APP_NAME")
    app_version: str = Field(default="1.0.0", alias="APP_VERSION")
    environment: str = Field(default="development", alias="APP_ENV")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    static_dir: str = Field(default=str(_PACKAGE_DIR / "static"), alias="STATIC_DIR")
    random_seed: int | None = Field(default=None, alias="RANDOM_SEED")
    enable_default_metrics: bool = Field(default=True, alias="ENABLE_DEFAULT_METRICS")

    @property
    def static_path(self) -> Path:
        return Path(self.static_dir)

    @property
    def templates_path(self) -> Path:
        return _PACKAGE_DIR / "templates"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
