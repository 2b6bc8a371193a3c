from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Claude API
    anthropic_api_key: str = ""
    claude_model: str = "claude-sonnet-4-20250514"
    max_tokens: int = 2000
    substitution_max_tokens: int = 200

    # Pantry storage (JSON file on local disk)
    pantry_file: str = "pantry.json"

    # Logging
    log_level: str = "INFO"

    # CORS - comma separated list, "*" allows everything
    cors_origins: str = "*"

    @property
    def cors_origin_list(self) -> list[str]:
        """Split the configured CORS origins into a list."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance."""
    return Settings()
