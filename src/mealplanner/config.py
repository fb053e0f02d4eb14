"""Application configuration using pydantic-settings."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Recipe sheet (published CSV export of the recipe table)
    recipe_sheet_url: str = (
        "https://docs.google.com/spreadsheets/d/"
        "1oWS7CQUtyxvZheGa0HckhGGPt9_gxELDGdCL8-DtKbM/export?format=csv"
    )
    request_timeout: float = 30.0  # request timeout in seconds
    request_max_retries: int = 3

    # Meal planning
    max_meals: int = 14

    # Application
    environment: str = "development"
    log_level: str = "INFO"
    allowed_origins: str = "http://localhost:3000,http://localhost:8000"

    @property
    def origins(self) -> list[str]:
        """Get the CORS origins as a list."""
        return [o.strip() for o in self.allowed_origins.split(",") if o.strip()]

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.environment.lower() == "development"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
