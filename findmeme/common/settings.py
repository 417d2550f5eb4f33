# findmeme/common/settings.py
from __future__ import annotations

from functools import lru_cache
from typing import List, Optional
from pydantic import BaseModel, Field, AliasChoices, field_validator, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict
from findmeme.common.strings.splitters import csv_to_list


def _to_bool(v: str | bool | int | None, default: bool = False) -> bool:
    if isinstance(v, bool):
        return v
    if v is None:
        return default
    s = str(v).strip().lower()
    return s in {"1", "true", "yes", "y", "on"}


class APIConfig(BaseModel):
    host: str = "0.0.0.0"
    port: int = 5050
    prefix: str = "/api"

    cors_allow_origins: List[str] = Field(default_factory=lambda: ["http://localhost:5173"])
    cors_allow_methods: List[str] = Field(default_factory=lambda: ["GET", "POST", "DELETE", "OPTIONS"])
    cors_allow_headers: List[str] = Field(default_factory=lambda: ["*"])
    cors_allow_credentials: bool = False

    @field_validator("cors_allow_origins", "cors_allow_methods", "cors_allow_headers", mode="before")
    @classmethod
    def _split_csv(cls, v):
        return csv_to_list(v)


class DBConfig(BaseModel):
    driver: str = "postgresql+psycopg"
    host: str = "localhost"
    port: int = 5432
    name: str = "findmeme"
    user: str = "postgres"
    password: str = "postgres"
    echo: bool = False
    pool_size: int = 10
    max_overflow: int = 20
    pool_pre_ping: bool = True
    pool_recycle: int = 1800

    # Optional single URL (if set, it takes precedence)
    url: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("DATABASE_URL", "database_url"),
    )

    @computed_field  # type: ignore[misc]
    @property
    def effective_url(self) -> str:
        if self.url:
            return self.url
        return f"{self.driver}://{self.user}:{self.password}@{self.host}:{self.port}/{self.name}"


class AuthConfig(BaseModel):
    jwt_secret: str = "dev-only-secret"
    jwt_algo: str = "HS256"
    token_ttl_minutes: int = Field(60 * 24 * 7, ge=1)
    min_password_length: int = Field(6, ge=1)

    # Shared secret for the one-off bootstrap endpoints; empty disables them
    bootstrap_secret: str = ""


class MediaStorageConfig(BaseModel):
    cloud_name: str = ""
    api_key: str = ""
    api_secret: str = ""
    folder: str = "findmeme"
    placeholder_url: str = "https://via.placeholder.com/400"
    max_upload_bytes: int = 50 * 1024 * 1024

    @computed_field  # type: ignore[misc]
    @property
    def configured(self) -> bool:
        return bool(self.cloud_name and self.api_key and self.api_secret)


class Settings(BaseSettings):
    # -------- App / Env --------
    app_name: str = "findmeme"
    app_env: str = "development"  # development|test|staging|production
    log_level: str = "INFO"

    # -------- Sub-configs --------
    api: APIConfig = Field(default_factory=APIConfig)
    db: DBConfig = Field(default_factory=DBConfig)
    auth: AuthConfig = Field(default_factory=AuthConfig)
    storage: MediaStorageConfig = Field(default_factory=MediaStorageConfig)

    # -------- Flat env aliases (match the deployed .env names) --------
    database_url_override: Optional[str] = Field(default=None, alias="DATABASE_URL")
    jwt_secret_override: Optional[str] = Field(default=None, alias="JWT_SECRET")
    bootstrap_secret_override: Optional[str] = Field(default=None, alias="BOOTSTRAP_SECRET")
    cloudinary_cloud_name: Optional[str] = Field(default=None, alias="CLOUDINARY_CLOUD_NAME")
    cloudinary_api_key: Optional[str] = Field(default=None, alias="CLOUDINARY_API_KEY")
    cloudinary_api_secret: Optional[str] = Field(default=None, alias="CLOUDINARY_API_SECRET")

    # -------- Testcontainers / CI toggles --------
    use_testcontainers: bool = False
    test_db_image: str = "postgres:15-alpine"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        populate_by_name=True,
        extra="ignore",
    )

    @field_validator("use_testcontainers", mode="before")
    @classmethod
    def _boolify(cls, v):
        return _to_bool(v)

    def model_post_init(self, __context) -> None:
        # Flat variables win over nested defaults
        if self.database_url_override:
            self.db.url = self.database_url_override
        if self.jwt_secret_override:
            self.auth.jwt_secret = self.jwt_secret_override
        if self.bootstrap_secret_override:
            self.auth.bootstrap_secret = self.bootstrap_secret_override
        if self.cloudinary_cloud_name:
            self.storage.cloud_name = self.cloudinary_cloud_name
        if self.cloudinary_api_key:
            self.storage.api_key = self.cloudinary_api_key
        if self.cloudinary_api_secret:
            self.storage.api_secret = self.cloudinary_api_secret

    # ===== Convenience =====
    @computed_field  # type: ignore[misc]
    @property
    def database_url(self) -> str:
        return self.db.effective_url

    @property
    def is_development(self) -> bool:
        return self.app_env.lower() == "development"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Global settings accessor (cached). Use this everywhere you need config:
        from findmeme.common.settings import get_settings
        cfg = get_settings()
    """
    return Settings()  # pydantic_settings will read from .env automatically
