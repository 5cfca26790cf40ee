"""Application configuration loaded from environment variables."""

from functools import lru_cache
from typing import Literal

from pydantic import SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL

# Allowed URL schemes for DATABASE_URL (module-level so validators can use it).
VALID_DATABASE_URL_PREFIXES = (
    "postgresql://",
    "postgresql+psycopg2://",
    "postgres://",
    "sqlite://",
)


class Settings(BaseSettings):
    """Validated application settings from env and optional .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    APP_ENV: Literal["dev", "prod"] = "dev"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"
    API_PREFIX: str = "/api"
    # Public base URL, used to build links sent by email.
    APP_URL: str = "http://localhost:5000"
    CORS_ORIGINS: list[str] = ["http://localhost:5173", "http://localhost:3000"]

    # Database: either a full DATABASE_URL or the individual DB_* parts
    DATABASE_URL: str | None = None
    DB_DRIVER: str = "postgresql+psycopg2"
    DB_HOST: str = "localhost"
    DB_USER: str = "postgres"
    DB_PASS: SecretStr = SecretStr("")
    DB_PORT: int = 5432
    DB_NAME: str = "videobelajar_db"
    DB_POOL_SIZE: int = 10
    DB_POOL_TIMEOUT: int = 60

    # JWT authentication
    JWT_SECRET: SecretStr = SecretStr("change-me-in-production")
    JWT_ALGORITHM: str = "HS256"
    JWT_EXPIRE_MINUTES: int = 7 * 24 * 60
    EMAIL_VERIFY_EXPIRE_MINUTES: int = 24 * 60
    BCRYPT_SALT_ROUNDS: int = 12

    # SMTP (optional; verification emails are skipped when EMAIL_HOST is unset)
    EMAIL_HOST: str | None = None
    EMAIL_PORT: int = 587
    EMAIL_USER: str | None = None
    EMAIL_PASS: SecretStr | None = None

    UPLOAD_DIR: str = "upload"

    # Client package
    API_BASE_URL: str = "http://localhost:5000/api"
    MOCK_API_BASE_URL: str = "https://6868a237d5933161d70c0a7f.mockapi.io"
    CLIENT_STORAGE_PATH: str = ".videobelajar-session.json"
    CLIENT_REQUEST_TIMEOUT_SEC: float = 30.0

    @field_validator("DATABASE_URL")
    @classmethod
    def validate_database_url(cls, v: str | None) -> str | None:
        if v is None or not v.strip():
            return None
        if not any(v.startswith(prefix) for prefix in VALID_DATABASE_URL_PREFIXES):
            raise ValueError(
                "DATABASE_URL must be a PostgreSQL or SQLite URL (e.g. postgresql+psycopg2://)"
            )
        return v.strip()

    @field_validator("DB_PORT")
    @classmethod
    def validate_db_port(cls, v: int) -> int:
        if v < 1 or v > 65535:
            raise ValueError("DB_PORT must be between 1 and 65535")
        return v

    @field_validator("DB_POOL_SIZE")
    @classmethod
    def validate_pool_size(cls, v: int) -> int:
        if v < 1 or v > 100:
            raise ValueError("DB_POOL_SIZE must be between 1 and 100")
        return v

    @field_validator("JWT_SECRET")
    @classmethod
    def validate_jwt_secret(cls, v: SecretStr) -> SecretStr:
        if not v.get_secret_value() or not v.get_secret_value().strip():
            raise ValueError("JWT_SECRET must be set and non-empty")
        return v

    @field_validator("JWT_ALGORITHM")
    @classmethod
    def validate_jwt_algorithm(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("JWT_ALGORITHM must be set and non-empty")
        return v.strip()

    @field_validator("JWT_EXPIRE_MINUTES", "EMAIL_VERIFY_EXPIRE_MINUTES")
    @classmethod
    def validate_expire_minutes(cls, v: int) -> int:
        if v < 1 or v > 43200:
            raise ValueError("Token lifetimes must be between 1 and 43200 minutes (30 days)")
        return v

    @field_validator("BCRYPT_SALT_ROUNDS")
    @classmethod
    def validate_bcrypt_rounds(cls, v: int) -> int:
        # bcrypt accepts log2 cost factors 4..31
        if v < 4 or v > 31:
            raise ValueError("BCRYPT_SALT_ROUNDS must be between 4 and 31")
        return v

    @field_validator("APP_URL", "API_BASE_URL", "MOCK_API_BASE_URL")
    @classmethod
    def validate_http_url(cls, v: str) -> str:
        s = v.strip().lower()
        if not (s.startswith("http://") or s.startswith("https://")):
            raise ValueError("URLs must use http or https (e.g. http://localhost:5000)")
        return v.strip().rstrip("/")

    @field_validator("CLIENT_REQUEST_TIMEOUT_SEC")
    @classmethod
    def validate_client_timeout(cls, v: float) -> float:
        if v <= 0 or v > 120:
            raise ValueError("CLIENT_REQUEST_TIMEOUT_SEC must be greater than 0 and at most 120")
        return v

    @property
    def database_url(self) -> str:
        """Return DATABASE_URL, or assemble one from the DB_* parts."""
        if self.DATABASE_URL:
            return self.DATABASE_URL
        url = URL.create(
            self.DB_DRIVER,
            username=self.DB_USER,
            password=self.DB_PASS.get_secret_value() or None,
            host=self.DB_HOST,
            port=self.DB_PORT,
            database=self.DB_NAME,
        )
        return url.render_as_string(hide_password=False)

    @property
    def mail_enabled(self) -> bool:
        return bool(self.EMAIL_HOST and self.EMAIL_HOST.strip())


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance (safe to call from dependencies)."""
    return Settings()


settings = get_settings()
