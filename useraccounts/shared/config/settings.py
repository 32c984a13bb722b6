# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

import sys
from functools import lru_cache
from pathlib import Path

from pydantic import Field, SecretStr, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_INSECURE_SECRETS = ("dev", "development", "test", "secret", "change-me", "")
_HMAC_ALGORITHMS = ("HS256", "HS384", "HS512")
_MIN_PRODUCTION_SECRET_LENGTH = 32


def _section_config() -> SettingsConfigDict:
    return SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        validate_by_name=True,
    )


def _parse_bool(value: str | bool) -> bool:
    if isinstance(value, str):
        return value.lower() in ("1", "true", "yes")
    return bool(value)


class DatabaseConfig(BaseSettings):
    url: str = Field("sqlite:///app.db", alias="DATABASE_URL")
    pool_size: int = Field(10, ge=1, alias="DATABASE_POOL_SIZE")
    max_overflow: int = Field(5, ge=0, alias="DATABASE_MAX_OVERFLOW")
    pool_timeout: float = Field(30.0, ge=0.1, alias="DATABASE_POOL_TIMEOUT")

    model_config = _section_config()

    def is_sqlite(self) -> bool:
        return self.url.startswith("sqlite")

    def is_in_memory(self) -> bool:
        return self.url in ("sqlite://", "sqlite:///:memory:")


class TokenConfig(BaseSettings):
    secret_key: SecretStr = Field(SecretStr("dev"), alias="JWT_SECRET_KEY")
    algorithm: str = Field("HS256", alias="JWT_ALGORITHM")
    ttl_seconds: int = Field(3600, ge=1, alias="JWT_TTL_SECONDS")
    leeway_seconds: int = Field(0, ge=0, alias="JWT_LEEWAY_SECONDS")

    model_config = _section_config()

    @field_validator("algorithm", mode="before")
    @classmethod
    def _normalise_algorithm(cls, value: str) -> str:
        algorithm = str(value).upper()
        if algorithm not in _HMAC_ALGORITHMS:
            raise ValueError(f"JWT_ALGORITHM must be one of {', '.join(_HMAC_ALGORITHMS)}")
        return algorithm

    def has_insecure_secret(self) -> bool:
        return self.secret_key.get_secret_value() in _INSECURE_SECRETS


class SecurityConfig(BaseSettings):
    enable_hsts: bool = Field(False, alias="ENABLE_HSTS")

    model_config = _section_config()

    @field_validator("enable_hsts", mode="before")
    @classmethod
    def _parse_hsts(cls, value: str | bool) -> bool:
        return _parse_bool(value)


def _database_config_factory() -> DatabaseConfig:
    return DatabaseConfig()  # type: ignore[call-arg]


def _token_config_factory() -> TokenConfig:
    return TokenConfig()  # type: ignore[call-arg]


def _security_config_factory() -> SecurityConfig:
    return SecurityConfig()  # type: ignore[call-arg]


class AppConfig(BaseSettings):
    app_env: str = Field("development", alias="APP_ENV")
    debug_logging: bool = Field(False, alias="DEBUG_LOGGING")
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    log_file: Path | None = Field(None, alias="LOG_FILE")

    database: DatabaseConfig = Field(default_factory=_database_config_factory)
    token: TokenConfig = Field(default_factory=_token_config_factory)
    security: SecurityConfig = Field(default_factory=_security_config_factory)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        validate_assignment=True,
        validate_by_name=True,
    )

    @field_validator("debug_logging", mode="before")
    @classmethod
    def _parse_debug_logging(cls, value: str | bool) -> bool:
        return _parse_bool(value)

    @model_validator(mode="after")
    def _validate_production_settings(self) -> "AppConfig":
        if not self.is_production():
            return self

        if self.token.has_insecure_secret():
            raise ValueError(
                "JWT_SECRET_KEY must be a strong random value in production. "
                "Generate one with: python -c \"import secrets; print(secrets.token_urlsafe(32))\""
            )

        notes = []
        if len(self.token.secret_key.get_secret_value()) < _MIN_PRODUCTION_SECRET_LENGTH:
            notes.append(f"JWT_SECRET_KEY is shorter than {_MIN_PRODUCTION_SECRET_LENGTH} characters")
        if self.token.ttl_seconds > 86400:
            notes.append(f"JWT_TTL_SECONDS={self.token.ttl_seconds} keeps tokens alive for over a day")
        if not self.security.enable_hsts:
            notes.append("ENABLE_HSTS is off")
        if self.database.is_sqlite():
            notes.append("DATABASE_URL points at SQLite")

        # logging is not configured yet when settings load
        for note in notes:
            print(f"[config] production warning: {note}", file=sys.stderr)

        return self

    def is_production(self) -> bool:
        return self.app_env.lower() in ("production", "prod")


@lru_cache(maxsize=1)
def load_config() -> AppConfig:
    return AppConfig()  # type: ignore[call-arg]


__all__ = ["AppConfig", "DatabaseConfig", "SecurityConfig", "TokenConfig", "load_config"]
