from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(env_file=".env")

    app_name: str = "FlashStudy"
    debug: bool = False

    database_url: str = "postgresql+asyncpg://localhost:5432/flashstudy"

    host: str = "0.0.0.0"
    port: int = 8000

    # Comma-separated list of allowed browser origins
    cors_origin: str = "http://localhost:5173"

    @property
    def cors_origins(self) -> list[str]:
        """Allowed CORS origins, split from the comma-separated setting."""
        return [origin.strip() for origin in self.cors_origin.split(",") if origin.strip()]


settings = Settings()


# =============================================================================
# CARD CONTENT LIMITS
# =============================================================================

# Maximum length of a card side, in characters, after trimming
MAX_CONTENT_LENGTH = 1000


# =============================================================================
# PAGINATION LIMITS
# =============================================================================

DEFAULT_PER_PAGE = 10
MAX_PER_PAGE = 100
