"""Configuration management for ccopy."""

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings."""

    # Evaluator Configuration
    interpreter: str = Field(
        default="Rscript -",
        description="Command line of the evaluator; the script is written to its stdin",
    )

    # Logging Configuration
    log_level: str = Field(default="WARNING", description="Log level")

    class Config:
        """Pydantic configuration."""

        env_prefix = "CCOPY_"
        case_sensitive = False
        env_file = ".env"
        env_file_encoding = "utf-8"


def get_settings() -> Settings:
    """Get application settings.

    pydantic-settings loads overrides from the environment and the ``.env`` file.
    """
    return Settings()
