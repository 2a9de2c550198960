from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    APP_NAME: str = "Skylight Backend"

    LOGGER: int = 20
    LOG_DIRECTORY: str = "logs"

    # Sunsethue Configuration
    SUNSETHUE_API_KEY: Optional[str] = None
    SUNSETHUE_BASE_URL: str = "https://api.sunsethue.com"
    SUNSETHUE_TIMEOUT: float = 10.0

    model_config = SettingsConfigDict(
        # Look for .env in the current folder OR the parent folder
        env_file=(".env", "../.env"),
        env_file_encoding="utf-8",
        extra="ignore"
    )

    @property
    def upstream_configured(self) -> bool:
        return bool(self.SUNSETHUE_API_KEY)

settings = Settings()

# Dependency for FastAPI
def get_settings() -> Settings:
    return settings
