"""
Application configuration using Pydantic Settings.
Supports multiple environments and LLM providers.
"""

from pydantic_settings import BaseSettings
from pydantic import Field
from typing import Optional, Dict, Any, List
from functools import lru_cache
from enum import Enum


class Environment(str, Enum):
    """Application environment."""
    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Provider API keys are optional: without any of them the AI gateway
    serves mock content.
    """

    # Application
    app_name: str = Field(default="AI Co-Founder", env="APP_NAME")
    app_version: str = Field(default="1.0.0", env="APP_VERSION")
    environment: Environment = Field(
        default=Environment.DEVELOPMENT, env="ENVIRONMENT")
    debug: bool = Field(default=True, env="DEBUG")

    # Server
    host: str = Field(default="0.0.0.0", env="HOST")
    port: int = Field(default=8000, env="PORT")
    allowed_origins: str = Field(
        default="*",
        env="ALLOWED_ORIGINS",
        description="Comma-separated origins for CORS (use * for all)"
    )

    # LLM Providers
    # Gemini
    gemini_api_key: str = Field(default="", env="GEMINI_API_KEY")
    gemini_model: str = Field(default="gemini-1.5-flash", env="GEMINI_MODEL")

    # OpenAI (optional)
    openai_api_key: Optional[str] = Field(default=None, env="OPENAI_API_KEY")
    openai_model: str = Field(default="gpt-4o-mini", env="OPENAI_MODEL")

    # Default LLM Provider and the order used when it fails
    default_llm_provider: str = Field(
        default="gemini", env="DEFAULT_LLM_PROVIDER")
    llm_fallback_order: str = Field(
        default="gemini,openai",
        env="LLM_FALLBACK_ORDER",
        description="Comma-separated providers tried after the requested one"
    )
    ai_timeout_seconds: float = Field(default=20.0, env="AI_TIMEOUT_SECONDS")

    # Links handed out to other people (pitch deck shares)
    frontend_url: str = Field(
        default="http://localhost:3000", env="FRONTEND_URL")

    # Auth
    jwt_secret_key: str = Field(
        default="dev-secret-key-change-in-production", env="JWT_SECRET_KEY")
    access_token_expire_minutes: int = Field(
        default=60 * 24 * 7, env="ACCESS_TOKEN_EXPIRE_MINUTES")

    # Logging
    log_level: str = Field(default="INFO", env="LOG_LEVEL")
    log_format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        env="LOG_FORMAT"
    )

    # Database
    database_url: str = Field(
        default="sqlite+aiosqlite:///./data/ai_cofounder.db",
        env="DATABASE_URL"
    )
    database_echo: bool = Field(default=False, env="DATABASE_ECHO")
    database_pool_size: int = Field(default=5, env="DATABASE_POOL_SIZE")
    database_max_overflow: int = Field(default=10, env="DATABASE_MAX_OVERFLOW")

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False

    def get_llm_config(self, provider: str) -> Dict[str, Any]:
        """Get configuration for a specific LLM provider."""
        configs = {
            "gemini": {
                "api_key": self.gemini_api_key,
                "model": self.gemini_model,
            },
            "openai": {
                "api_key": self.openai_api_key,
                "model": self.openai_model,
            },
        }
        return configs.get(provider, {})

    def is_provider_configured(self, provider: str) -> bool:
        """Check if a provider has its API key configured."""
        config = self.get_llm_config(provider)
        return bool(config.get("api_key"))

    def parsed_fallback_order(self) -> List[str]:
        """Return the LLM fallback order as a list of provider names."""
        return [p.strip().lower() for p in self.llm_fallback_order.split(",") if p.strip()]

    def parsed_allowed_origins(self) -> list[str]:
        """Return allowed origins for CORS as list."""
        raw = self.allowed_origins.strip()
        if not raw:
            return ["*"]
        origins = [o.strip() for o in raw.split(",") if o.strip()]
        return origins or ["*"]


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
