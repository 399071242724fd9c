from typing import Optional

from pydantic import AliasChoices, Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class OpenAIConfig(BaseSettings):
    """Chat-completion API configuration"""

    api_key: Optional[SecretStr] = Field(
        default=None,
        validation_alias=AliasChoices("CHATGPT_API_KEY", "OPENAI_API_KEY"),
    )
    model: str = Field(default="gpt-5-mini", validation_alias="OPENAI_MODEL")
    base_url: Optional[str] = Field(default=None, validation_alias="OPENAI_BASE_URL")
    timeout: float = Field(
        default=120.0,
        validation_alias="OPENAI_TIMEOUT",
        gt=0,
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        secrets_dir=".secrets",
        case_sensitive=False,
        extra="ignore",
    )


class MochiConfig(BaseSettings):
    """Mochi flashcard API configuration"""

    api_key: Optional[SecretStr] = None
    deck_id: str = "QKtBzxLx"
    base_url: str = "https://app.mochi.cards/api"
    timeout: float = Field(default=30.0, gt=0)

    model_config = SettingsConfigDict(
        env_prefix="MOCHI_",
        env_file=".env",
        secrets_dir=".secrets",
        case_sensitive=False,
        extra="ignore",
    )

    def is_configured(self) -> bool:
        """Return True when a non-blank API key is available."""

        if self.api_key is None:
            return False
        return bool(self.api_key.get_secret_value().strip())


class Settings(BaseSettings):
    """Application settings"""

    app_name: str = "Solution Cards Backend"
    app_version: str = "1.0.0"
    environment: str = "development"
    debug: bool = False
    host: str = "0.0.0.0"
    port: int = 3000
    log_file: str = "logs/app.log"
    pipeline_log_file: str = "logs/submission_pipeline.log"

    # Prebuilt single-page application
    frontend_dist: str = "frontend/dist"

    # Seconds to wait for in-flight submissions on shutdown
    background_drain_timeout: float = Field(default=10.0, ge=0)

    # OpenAI
    openai: OpenAIConfig = Field(default_factory=OpenAIConfig)

    # Mochi
    mochi: MochiConfig = Field(default_factory=MochiConfig)

    # CORS
    cors_origins: list[str] = ["*"]
    cors_allow_credentials: bool = False
    cors_allow_methods: list[str] = ["*"]
    cors_allow_headers: list[str] = ["*"]

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )


# Global settings instance
settings = Settings()
