from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

VALID_LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    log_level: str = Field(default="INFO")
    log_file: str | None = Field(default=None)
    log_rotation: str = Field(default="10 MB")
    log_retention: str = Field(default="7 days")
    host: str = Field(default="127.0.0.1")
    port: int = Field(default=8000)
    # Where the Streamlit UI finds the API
    backend_url: str = Field(default="http://localhost:8000")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="RUNPLAN_",
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in VALID_LOG_LEVELS:
            raise ValueError(f"RUNPLAN_LOG_LEVEL must be one of {VALID_LOG_LEVELS}, got {value!r}")
        return level


settings = Settings()
