from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Metrics backend
    METRICS_BASE_URL: str = Field(default="http://localhost:8080", description="Base URL of the metrics service")
    METRICS_PATH: str = Field(default="/metrics", description="Path of the metrics endpoint")
    METRICS_TIMEOUT: float | None = Field(
        default=None, description="Fetch timeout in seconds (unset: wait until the endpoint answers)"
    )

    # Dashboard
    DASHBOARD_TITLE: str = Field(default="Deployment Dashboard", description="Heading shown above the payload")

    # App Config
    DEBUG: bool = Field(default=False)
    LOG_LEVEL: str = Field(default="INFO", description="Logging Level (DEBUG, INFO, WARNING, ERROR)")

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore", case_sensitive=True)


settings = Settings()
