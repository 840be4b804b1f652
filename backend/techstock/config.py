"""Application configuration."""

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings."""

    # Database
    database_url: str = "mysql+pymysql://techstock@localhost:3306/techstock"

    # Authentication (secret has no default: startup fails without it)
    jwt_secret_key: str  # Generate with: openssl rand -hex 32
    jwt_algorithm: str = "HS256"
    access_token_expire_minutes: int = 60
    reset_token_expire_minutes: int = 60

    # Email (SendGrid)
    sendgrid_api_key: str = ""
    email_from_address: str = "noreply@techstock.local"
    email_from_name: str = "TechStock"
    contact_inbox_address: str = ""
    frontend_url: str = "http://localhost:3000"

    # Application
    environment: str = "development"
    expose_reset_tokens: bool = False  # Return reset tokens in responses when email is off
    rate_limit_enabled: bool = False
    log_level: str = "INFO"

    # CORS
    allowed_origins: list[str] = ["http://localhost:3000", "http://localhost:5173"]

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )

    @field_validator("jwt_secret_key")
    @classmethod
    def _require_secret(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("JWT_SECRET_KEY must not be blank")
        return v

    @model_validator(mode="after")
    def _forbid_token_exposure_in_production(self) -> "Settings":
        if self.expose_reset_tokens and self.environment.lower() == "production":
            raise ValueError("EXPOSE_RESET_TOKENS cannot be enabled in production")
        return self

    @property
    def is_production(self) -> bool:
        return self.environment.lower() == "production"


settings = Settings()
