"""
Configuration Settings.

This module defines the application configuration using Pydantic's BaseSettings.
It automatically loads all configuration from environment variables and the
.env file without explicit dotenv loading.
"""

from typing import Optional

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# =====================================================================
# Grouped Configuration Models
# =====================================================================


class TokenConfig(BaseModel):
    """JWT issuance and verification configuration."""

    key: str = Field(
        default="markertrack-development-signing-key-change-me",
        alias="TOKEN_KEY",
        description="Symmetric key used to sign and verify JWTs",
    )
    issuer: str = Field(default="markertrack", alias="TOKEN_ISSUER", description="Value of the 'iss' claim")
    audience: str = Field(default="markertrack", alias="TOKEN_AUDIENCE", description="Value of the 'aud' claim")
    expire_days: int = Field(default=2, ge=1, alias="TOKEN_EXPIRE_DAYS", description="Token lifetime in days")
    algorithm: str = Field(default="HS256", alias="TOKEN_ALGORITHM", description="JWT signing algorithm")

    model_config = {"populate_by_name": True}


class DatabaseConfig(BaseModel):
    """Database connection configuration."""

    url: str = Field(
        default="sqlite+aiosqlite:///./markertrack.db",
        alias="DATABASE_URL",
        description="Async SQLAlchemy connection URL",
    )
    auto_create: bool = Field(
        default=True,
        alias="DATABASE_AUTO_CREATE",
        description="Create missing tables at startup (disable when Alembic manages the schema)",
    )
    echo: bool = Field(default=False, alias="DATABASE_ECHO", description="Log every SQL statement")

    model_config = {"populate_by_name": True}


class CORSConfig(BaseModel):
    """CORS configuration."""

    origins: list[str] = Field(default=["*"], alias="CORS_ORIGINS", description="Allowed CORS origins (use * for all)")
    allow_credentials: bool = Field(
        default=True, alias="CORS_ALLOW_CREDENTIALS", description="Allow credentials in CORS requests"
    )
    allow_methods: list[str] = Field(
        default=["*"], alias="CORS_ALLOW_METHODS", description="Allowed HTTP methods (use * for all)"
    )
    allow_headers: list[str] = Field(
        default=["*"], alias="CORS_ALLOW_HEADERS", description="Allowed HTTP headers (use * for all)"
    )

    model_config = {"populate_by_name": True}


# =====================================================================
# Main Settings Class
# =====================================================================


class Settings(BaseSettings):
    """
    Application settings model.

    All properties are automatically bound from environment variables and .env file.
    Grouped configurations (token, database, CORS) are exposed as properties built
    from the same flat set of variables.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=True,
        populate_by_name=True,
    )

    # =====================================================================
    # Server Configuration
    # =====================================================================
    server_host: str = Field(
        default="0.0.0.0",
        description="markertrack server host address to bind to",
        alias="MARKERTRACK_SERVER_HOST",
    )
    server_port: int = Field(
        default=8000,
        description="markertrack server port number",
        alias="MARKERTRACK_SERVER_PORT",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
        alias="MARKERTRACK_LOG_LEVEL",
    )
    slow_request_ms: float = Field(
        default=1000.0,
        description="Requests slower than this are logged as warnings",
        alias="MARKERTRACK_SLOW_REQUEST_MS",
    )

    # =====================================================================
    # Database Configuration
    # =====================================================================
    database_url: str = Field(default="sqlite+aiosqlite:///./markertrack.db", alias="DATABASE_URL")
    database_auto_create: bool = Field(default=True, alias="DATABASE_AUTO_CREATE")
    database_echo: bool = Field(default=False, alias="DATABASE_ECHO")

    # =====================================================================
    # Token Configuration
    # =====================================================================
    token_key: str = Field(default="markertrack-development-signing-key-change-me", alias="TOKEN_KEY")
    token_issuer: str = Field(default="markertrack", alias="TOKEN_ISSUER")
    token_audience: str = Field(default="markertrack", alias="TOKEN_AUDIENCE")
    token_expire_days: int = Field(default=2, alias="TOKEN_EXPIRE_DAYS")
    token_algorithm: str = Field(default="HS256", alias="TOKEN_ALGORITHM")

    # =====================================================================
    # CORS Configuration
    # =====================================================================
    cors_origins: list[str] = Field(default=["*"], alias="CORS_ORIGINS")
    cors_allow_credentials: bool = Field(default=True, alias="CORS_ALLOW_CREDENTIALS")
    cors_allow_methods: list[str] = Field(default=["*"], alias="CORS_ALLOW_METHODS")
    cors_allow_headers: list[str] = Field(default=["*"], alias="CORS_ALLOW_HEADERS")

    # =====================================================================
    # Computed Properties (Grouped Configurations)
    # =====================================================================

    @property
    def token(self) -> TokenConfig:
        """Get token configuration from environment variables."""
        return TokenConfig.model_validate(self.model_dump(by_alias=True))

    @property
    def database(self) -> DatabaseConfig:
        """Get database configuration from environment variables."""
        return DatabaseConfig.model_validate(self.model_dump(by_alias=True))

    @property
    def cors(self) -> CORSConfig:
        """Get CORS configuration from environment variables."""
        return CORSConfig.model_validate(self.model_dump(by_alias=True))


_settings_instance: Optional[Settings] = None


def get_settings() -> Settings:
    """Return the process-wide settings instance, creating it on first use."""
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = Settings()
    return _settings_instance


settings = get_settings()
