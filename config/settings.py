from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
    )

    # Auto-finalize default closing time (local wall clock)
    AUTO_FINALIZE_HOUR: int = Field(default=23, ge=0, le=23)
    AUTO_FINALIZE_MINUTE: int = Field(default=59, ge=0, le=59)

    # IANA zone used as the local time reference; None = use "now" as given
    LOCAL_TIMEZONE: str | None = None


settings = Settings()
