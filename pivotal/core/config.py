"""Configuration settings for the Pivotal client.

Values are read from environment variables (or a local ``.env`` file).
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Pivotal client settings.

    Attributes:
        PIVOTAL_BASE_URL: Root of the v3 services API.
        PIVOTAL_HTTP_TIMEOUT: Timeout in seconds for a single HTTP request.
        PIVOTAL_MAX_ATTEMPTS: Attempts per request; 1 disables transport retries.
        LOG_LEVEL: Level for the ``pivotal`` logger.
    """

    PIVOTAL_BASE_URL: str = "https://www.pivotaltracker.com/services/v3"
    PIVOTAL_HTTP_TIMEOUT: float = 30.0
    PIVOTAL_MAX_ATTEMPTS: int = 1
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


settings = Settings()
