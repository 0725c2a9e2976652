from pydantic import Field, HttpUrl
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env")

    log_file: str | None = Field(default=None)
    log_level: str = Field(default="info")
    artists_url: HttpUrl = HttpUrl("https://groupietrackers.herokuapp.com/api/artists")
    relation_url: HttpUrl = HttpUrl("https://groupietrackers.herokuapp.com/api/relation")
    upstream_timeout: float = Field(default=5.0, gt=0)


config = Settings()
