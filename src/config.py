from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    # Upstream feed
    YOUTUBE_BASE_URL: str = "https://www.youtube.com"
    USER_AGENT: str = "AgenticYouTubeAutomation/1.0"
    REQUEST_TIMEOUT: float = 10.0

    # Feed Settings
    MAX_FEED_ITEMS: int = 15
    DEFAULT_REGION: str = "US"

    # System Settings
    LOG_LEVEL: str = "INFO"

    # HTTP API
    API_HOST: str = "127.0.0.1"
    API_PORT: int = 8000

    model_config = SettingsConfigDict(
        env_file=".env", 
        env_file_encoding="utf-8",
        extra="ignore"
    )

settings = Settings()
