"""Application configuration using pydantic-settings."""

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

DATA_DIR = Path(__file__).resolve().parent / "data"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    app_name: str = "Skill-Gap Analyzer API"
    app_version: str = "1.0.0"
    debug: bool = False
    log_level: str = "INFO"

    # CORS
    frontend_cors_origin: str = "http://localhost:3000"

    # Static role tables
    role_skills_path: Path = DATA_DIR / "role_skills.json"
    learning_order_path: Path = DATA_DIR / "learning_order.json"

    # HackerNews
    news_api_base_url: str = "https://hacker-news.firebaseio.com/v0"
    news_timeout: float = 10.0
    news_default_limit: int = 10

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    @property
    def effective_log_level(self) -> str:
        """Log level to configure, forced to DEBUG when debug mode is on."""
        if self.debug:
            return "DEBUG"
        return self.log_level.upper()


# Global settings instance
settings = Settings()
