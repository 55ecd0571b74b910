"""Application configuration."""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, computed_field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class FirebaseSettings(BaseModel):
    """Firebase project configuration (Firestore + Identity Toolkit)."""

    project_id: str = "sodfa-539c6"

    # Web API key used for Identity Toolkit REST calls
    api_key: str = "CHANGE_ME_IN_PRODUCTION"

    # Optional Firestore database name (None uses "(default)")
    database: str | None = None

    # Base URL of the Identity Toolkit REST API
    # Point at the auth emulator in development, e.g.
    # http://localhost:9099/identitytoolkit.googleapis.com/v1
    identity_toolkit_url: str = "https://identitytoolkit.googleapis.com/v1"


class AuthSettings(BaseModel):
    """Session token configuration."""

    # JWT settings
    jwt_secret: str = "CHANGE_ME_IN_PRODUCTION"  # Must be overridden in production
    jwt_algorithm: str = "HS256"
    jwt_expiry_days: int = 30

    # Cookie carrying the session token
    cookie_name: str = "auth_token"

    # Header carrying the client-local pseudo identity token
    client_id_header: str = "X-Client-Id"


class StorySettings(BaseModel):
    """Story and identity presentation rules."""

    # Excerpt is the first N characters of the content plus "..."
    excerpt_length: int = 150

    # Title and body length accepted on submission
    max_title_length: int = 100
    min_content_length: int = 50

    # Tag applied when a story is submitted without tags
    default_tag: str = "general"

    # Tag cloud shown when no visible story carries tags
    default_tags: list[str] = [
        "inspiration",
        "travel",
        "friendship",
        "family",
        "career",
        "love",
        "general",
    ]

    # Display names for actors without an account name
    anonymous_display_name: str = "زائر مجهول"  # "anonymous visitor"
    fallback_display_name: str = "زائر"  # "visitor"

    # Listing limits
    fetch_limit: int = 50
    per_page: int = 6
    comments_limit: int = 100


class ClientSettings(BaseModel):
    """Client SDK configuration."""

    api_base_url: str = "http://localhost:8000"

    # JSON file used as client-local storage for the pseudo identity
    storage_path: Path = Path.home() / ".sodfa" / "storage.json"


class APISettings(BaseModel):
    """API configuration."""

    host: str
    port: int
    protocol: Literal["http", "https"]
    frontend_host: str

    @computed_field
    @property
    def base_url(self) -> str:
        """Construct base URL from host.

        In development: http://localhost:8000
        In production: https://api.sodfa.app
        """
        if self.host == "localhost":
            return f"{self.protocol}://{self.host}:{self.port}"
        else:
            # Production uses standard ports (80/443)
            return f"{self.protocol}://{self.host}"

    @computed_field
    @property
    def frontend_url(self) -> str:
        """Frontend URL allowed by CORS."""
        # Next.js frontend runs on port 3000 in development
        if self.frontend_host == "localhost":
            return "http://localhost:3000"
        else:
            return f"{self.protocol}://{self.frontend_host}"


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

    Configuration is driven by environment and host values. Set environment
    variables to override, nested sections use the ``__`` delimiter:

    Development (default):
        HOST=localhost
        PORT=8000
        ENVIRONMENT=development
        -> API: http://localhost:8000
        -> Frontend: http://localhost:3000

    Production:
        HOST=api.sodfa.app
        ENVIRONMENT=production
        FRONTEND_HOST=sodfa.app
        FIREBASE__API_KEY=...
        AUTH__JWT_SECRET=...
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",  # Allows FIREBASE__PROJECT_ID syntax
    )

    environment: Literal["test", "development", "staging", "production"] = "development"
    debug: bool = False

    # Git commit SHA (loaded from version.txt file or defaults to "unknown")
    git_sha: str = "unknown"

    # Host configuration (all URLs computed from these)
    host: str = "localhost"
    port: int = 8000
    frontend_host: str = "localhost"

    # Nested settings
    firebase: FirebaseSettings = FirebaseSettings()
    auth: AuthSettings = AuthSettings()
    stories: StorySettings = StorySettings()
    client: ClientSettings = ClientSettings()
    api: APISettings = APISettings(
        host="localhost", port=8000, protocol="http", frontend_host="localhost"
    )  # Overwritten in validator
    observability: ObservabilitySettings = ObservabilitySettings()

    @model_validator(mode="after")
    def initialize_api_settings(self) -> "Settings":
        """Initialize API settings from host and environment."""
        protocol: Literal["http", "https"] = (
            "http" if self.environment in ("test", "development") else "https"
        )

        self.api = APISettings(
            host=self.host,
            port=self.port,
            protocol=protocol,
            frontend_host=self.frontend_host,
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
        return "unknown"
