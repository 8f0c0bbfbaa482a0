"""
Scribble Backend — Application Configuration
=============================================

What:  Centralized configuration management using Pydantic Settings.
How:   Pydantic Settings reads from environment variables (or .env file),
       validates types/ranges, and provides a singleton `settings` object.
Who:   Imported by the application factory and the console entry point.
       Tests build their own `Settings(...)` and hand it to `create_app()`.
When:  Loaded once at module import time; validated before app starts.
"""

from typing import List

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings

# Fallback signing secret for local development. Startup reports it as a
# configuration error so it never goes unnoticed in a deployment.
DEV_JWT_SECRET = "scribble-dev-secret-change-me-before-deploying"


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings have sensible defaults for development.
    Production deployments MUST override JWT_SECRET.
    """

    # ── Auth ──────────────────────────────────────────────────────────────
    # JWT_PASSWORD is the variable name the original worker deployment used.
    jwt_secret: str = Field(
        default=DEV_JWT_SECRET,
        validation_alias=AliasChoices("jwt_secret", "jwt_password"),
        description="HMAC secret used to sign and verify session tokens",
    )
    jwt_algorithm: str = Field(default="HS256")

    # Accept the one hard-coded token older frontends shipped with.
    # Off unless explicitly enabled; see AuthService.verify_token.
    legacy_token_enabled: bool = Field(default=False)

    # ── Store ─────────────────────────────────────────────────────────────
    # Demo user (test@example.com / password123) and two sample posts.
    seed_demo_data: bool = Field(default=True)

    # ── Diagnostics ───────────────────────────────────────────────────────
    # GET /debug lists every user's email; keep it off outside development.
    debug_endpoint_enabled: bool = Field(default=False)

    # ── CORS ──────────────────────────────────────────────────────────────
    # Format: Comma-separated URLs, or "*" for any origin
    cors_origins: str = Field(default="*")

    @property
    def cors_origins_list(self) -> List[str]:
        """Splits comma-separated CORS origins into a list."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    # ── Server ────────────────────────────────────────────────────────────
    backend_host: str = Field(default="0.0.0.0")
    backend_port: int = Field(default=8787, ge=1024, le=65535)

    # Valid: DEBUG, INFO, WARNING, ERROR, CRITICAL
    log_level: str = Field(default="INFO")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensures log level is a valid Python logging level name."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid_levels:
            raise ValueError(f"Invalid log_level '{v}'. Must be one of: {valid_levels}")
        return upper

    @field_validator("jwt_algorithm")
    @classmethod
    def validate_jwt_algorithm(cls, v: str) -> str:
        """Only HMAC algorithms make sense with a shared secret."""
        upper = v.upper()
        if upper not in {"HS256", "HS384", "HS512"}:
            raise ValueError(f"Unsupported jwt_algorithm '{v}'. Use HS256, HS384 or HS512.")
        return upper

    # ── Pydantic Settings Config ──────────────────────────────────────────
    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",
    }

    def validate_required_for_production(self) -> None:
        """
        What:  Validates that critical settings are configured.
        When:  Called during app startup (lifespan).
        How:   Collects every problem and raises one ValueError listing them.
        """
        errors = []
        if not self.jwt_secret or self.jwt_secret == DEV_JWT_SECRET:
            errors.append(
                "JWT_SECRET is not set. Tokens are being signed with the "
                "built-in development secret."
            )
        if self.legacy_token_enabled:
            errors.append(
                "LEGACY_TOKEN_ENABLED is on. A fixed token grants access as the demo user."
            )
        if errors:
            raise ValueError(
                "Configuration validation failed:\n" + "\n".join(f"  - {e}" for e in errors)
            )


settings = Settings()
