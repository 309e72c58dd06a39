"""Application configuration using pydantic-settings."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables and .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # App Info
    app_name: str = "CyberLab Network Scenario Platform API"
    app_version: str = "1.0.0"
    debug: bool = False

    # Server
    host: str = "0.0.0.0"
    port: int = 5000
    workers: int = 1

    # JWT Authentication
    jwt_secret_key: str = Field(
        default="your-jwt-secret",
        alias="JWT_SECRET_KEY",
    )
    jwt_algorithm: str = "HS256"
    jwt_access_token_expire_minutes: int = 60 * 24  # 24 hours
    jwt_issuer: str = "cyberlab-api"
    jwt_audience: str = "cyberlab-web"

    # Password hashing
    bcrypt_rounds: int = 12

    # Deployment lifecycle (seconds)
    deployment_start_delay: float = 1.0
    deployment_ready_delay: float = 5.0
    # Drop scheduled transitions when a deployment is deleted.
    # Off by default: late transitions on deleted deployments are no-ops.
    cancel_transitions_on_delete: bool = False

    # Seed data
    seed_data: bool = True
    admin_email: str = "admin@cyberlab.com"
    admin_password: str = "password123"

    # Directory holding reusable YAML scenario descriptors
    yaml_data_dir: str = "data/yaml"

    # CORS
    cors_origins: list[str] = ["*"]
    cors_allow_methods: list[str] = ["*"]
    cors_allow_headers: list[str] = ["*"]


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
