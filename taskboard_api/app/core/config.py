"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service starts out of the box in development; in production override
at least ``SECRET_KEY`` and ``FIREBASE_API_KEY``.
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Taskboard API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    environment: str = os.getenv("ENVIRONMENT", "development")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")
    secret_key: str = os.getenv("SECRET_KEY", "change_me")
    access_token_expire_minutes: int = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", str(60 * 24)))

    # Web API key of the Firebase project that issues phone sign‑in
    # tokens.  When empty, phone sign‑in is disabled and the endpoint
    # answers 503.
    firebase_api_key: str = os.getenv("FIREBASE_API_KEY", "")
    identity_timeout_seconds: int = int(os.getenv("IDENTITY_TIMEOUT_SECONDS", "10"))

    # Prepended to phone numbers submitted without a leading ``+``.
    default_country_code: str = os.getenv("DEFAULT_COUNTRY_CODE", "+91")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "5000"))

    @property
    def is_production(self) -> bool:
        return self.environment.lower() == "production"


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# must therefore be set before importing this module.
settings = Settings()
