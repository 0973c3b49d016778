"""Application configuration."""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, computed_field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class StorageSettings(BaseModel):
    """Document store configuration."""

    # "firestore" talks to Google Cloud Firestore (or its emulator)
    # "memory" keeps everything in process, for local development
    backend: Literal["firestore", "memory"] = "firestore"

    # GCP project; None lets the client library resolve it from the environment
    project_id: str | None = None

    # Collection names, shared with documents written by the legacy server
    posts_collection: str = "posts"
    admins_collection: str = "admins"

    # e.g. "localhost:8080" to use the Firestore emulator
    emulator_host: str | None = None


class AuthSettings(BaseModel):
    """Authentication configuration for admin sessions."""

    # JWT settings
    jwt_secret: str = "CHANGE_ME_IN_PRODUCTION_forum_admin_sessions"  # Must be overridden in production
    jwt_algorithm: str = "HS256"
    jwt_expiry_days: int = 7


class SeedAdminAccount(BaseModel):
    """Admin account created by scripts/seed_admins.py when missing."""

    id: str
    name: str
    password: str


class AdminSettings(BaseModel):
    """Admin registry configuration."""

    # Accounts that bootstrap the registry on a fresh database
    # Set via ADMINS__SEED_ACCOUNTS='[{"id": "admin", "name": "...", "password": "..."}]'
    seed_accounts: list[SeedAdminAccount] = []

    # Minimum admin password length
    min_password_length: int = 6


class ListingSettings(BaseModel):
    """Board listing configuration."""

    posts_per_page: int = 15

    # Number of posts on the home page
    recent_limit: int = 5


class APISettings(BaseModel):
    """HTTP API settings derived from the host configuration."""

    protocol: Literal["http", "https"]
    frontend_host: str

    # Extra origins allowed by CORS, e.g. a preview deployment
    extra_origins: list[str] = []

    @computed_field
    @property
    def frontend_url(self) -> str:
        """Origin of the web client.

        In development: http://localhost:3000
        In production: https://<frontend_host>
        """
        if self.frontend_host == "localhost":
            return "http://localhost:3000"
        return f"{self.protocol}://{self.frontend_host}"

    @property
    def cors_origins(self) -> list[str]:
        """Every origin the admin session cookie may be sent from."""
        return list(dict.fromkeys([self.frontend_url, *self.extra_origins]))


class ObservabilitySettings(BaseModel):
    """Observability configuration for Logfire."""

    # Logfire API token (optional - if not set, logs only go to console)
    # Can be set via OBSERVABILITY__LOGFIRE_TOKEN env var
    logfire_token: str | None = None

    # Whether to send telemetry to Logfire cloud
    # If None, will auto-determine: sends if token is present, otherwise console-only
    send_to_logfire: bool | None = None


class Settings(BaseSettings):
    """Application settings.

    Configuration is driven by environment and host values, with all URLs
    computed from them. Set environment variables to override:

    Development (default):
        HOST=localhost
        PORT=8000
        ENVIRONMENT=development
        STORAGE__BACKEND=memory
        -> API: http://localhost:8000
        -> Frontend: http://localhost:3000

    Production:
        HOST=api.forum.example.org
        ENVIRONMENT=production
        FRONTEND_HOST=forum.example.org
        STORAGE__PROJECT_ID=science-club-forum
        -> API: https://api.forum.example.org
        -> Frontend: https://forum.example.org
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",  # Allows STORAGE__BACKEND syntax
    )

    # Environment determines protocol and defaults
    environment: Literal["test", "development", "staging", "production"] = "development"
    debug: bool = False

    # Git commit SHA (loaded from version.txt file or defaults to "unknown")
    git_sha: str = "unknown"

    # Host configuration (the frontend origin is computed from these)
    host: str = "localhost"
    port: int = 8000
    frontend_host: str = "localhost"

    # Set via CORS_EXTRA_ORIGINS='["https://preview.forum.example.org"]'
    cors_extra_origins: list[str] = []

    # Nested settings
    storage: StorageSettings = StorageSettings()
    auth: AuthSettings = AuthSettings()
    admins: AdminSettings = AdminSettings()
    listing: ListingSettings = ListingSettings()
    api: APISettings = APISettings(
        protocol="http", frontend_host="localhost"
    )  # Overwritten in validator
    observability: ObservabilitySettings = ObservabilitySettings()

    @model_validator(mode="after")
    def initialize_api_settings(self) -> "Settings":
        """Derive API settings from the frontend host and environment."""
        protocol: Literal["http", "https"] = (
            "http" if self.environment in ("test", "development") else "https"
        )

        self.api = APISettings(
            protocol=protocol,
            frontend_host=self.frontend_host,
            extra_origins=self.cors_extra_origins,
        )

        self.git_sha = self._load_git_sha()

        return self

    @staticmethod
    def _load_git_sha() -> str:
        """Load git SHA from version file.

        Returns:
            Git SHA if version file exists, otherwise "unknown"
        """
        version_file = Path("/app/version.txt")
        if version_file.exists():
            try:
                return version_file.read_text().strip()
            except OSError:
                return "unknown"
        # In development, version file may not exist
        return "unknown"
