"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - All secrets come from environment variables (never hardcoded)
    - get_settings() is cached (lru_cache) — single instance per process

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults provided for all non-secret settings: works out-of-the-box with docker-compose
    - receipt_analyzer=auto picks Anthropic only when a real key is configured
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache

from ecosmart.core.domain_types import ReceiptAnalyzerKind

PLACEHOLDER_API_KEY = "sk-ant-placeholder"


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Database
    database_url: str = (
        "postgresql+asyncpg://ecosmart:ecosmart@db:5432/ecosmart"
    )

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str) -> str:
        """Hosting platforms provide postgresql:// but asyncpg needs postgresql+asyncpg://."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v

    database_pool_size: int = 20
    database_max_overflow: int = 10

    # Anthropic
    anthropic_api_key: str = PLACEHOLDER_API_KEY
    anthropic_max_retries: int = 3
    anthropic_timeout_seconds: int = 60
    anthropic_base_delay_ms: int = 1000
    anthropic_max_delay_ms: int = 60_000

    # Receipt analysis
    receipt_analyzer: ReceiptAnalyzerKind = ReceiptAnalyzerKind.AUTO
    receipt_model: str = "claude-sonnet-4-5"
    receipt_max_tokens: int = 1500
    receipt_max_bytes: int = 10 * 1024 * 1024

    # API
    cors_origins: list[str] = ["http://localhost:3000"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @property
    def has_anthropic_key(self) -> bool:
        key = self.anthropic_api_key.strip()
        return bool(key) and key != PLACEHOLDER_API_KEY


@lru_cache
def get_settings() -> Settings:
    return Settings()
