from __future__ import annotations

import pytest
from pydantic import ValidationError

from useraccounts.shared.config import AppConfig, DatabaseConfig, TokenConfig


def test_token_defaults() -> None:
    config = TokenConfig()

    assert config.algorithm == "HS256"
    assert config.ttl_seconds == 3600
    assert config.leeway_seconds == 0


def test_token_settings_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("JWT_SECRET_KEY", "from-env-secret-0123456789abcdef")
    monkeypatch.setenv("JWT_ALGORITHM", "hs512")
    monkeypatch.setenv("JWT_TTL_SECONDS", "60")

    config = TokenConfig()

    assert config.secret_key.get_secret_value() == "from-env-secret-0123456789abcdef"
    assert config.algorithm == "HS512"
    assert config.ttl_seconds == 60
    assert "from-env-secret" not in repr(config)


@pytest.mark.parametrize("algorithm", ["RS256", "none"])
def test_asymmetric_or_unsigned_algorithms_rejected(algorithm: str) -> None:
    with pytest.raises(ValidationError):
        TokenConfig(algorithm=algorithm)


def test_ttl_must_be_positive() -> None:
    with pytest.raises(ValidationError):
        TokenConfig(ttl_seconds=0)


def test_production_refuses_placeholder_secret() -> None:
    with pytest.raises(ValidationError):
        AppConfig(app_env="production", token=TokenConfig(secret_key="dev"))


def test_production_accepts_strong_secret() -> None:
    config = AppConfig(
        app_env="prod",
        database=DatabaseConfig(url="postgresql+psycopg://db/users"),
        token=TokenConfig(secret_key="a-strong-random-value-0123456789abcdef"),
    )

    assert config.is_production()


def test_in_memory_database_detection() -> None:
    assert DatabaseConfig(url="sqlite://").is_in_memory()
    assert not DatabaseConfig(url="sqlite:///app.db").is_in_memory()
    assert DatabaseConfig(url="sqlite:///app.db").is_sqlite()
