"""
Centralised settings loader.

Values come from the environment (or a local `.env`), case-insensitive,
e.g. DATABASE_URL, STORAGE_BACKEND, AUTH_DELAY_SECONDS.
"""

from __future__ import annotations
from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


# ------------------------------------------------------------------ #
#  Master settings model
# ------------------------------------------------------------------ #
class _Settings(BaseSettings):
    # ─── runtime ─────────────────────────────────────────────────────
    env_name: str = "local"

    # ─── persistence ────────────────────────────────────────────────
    storage_backend: Literal["sql", "memory"] = "sql"
    database_url: str = "sqlite+aiosqlite:///./metafit.db"
    storage_key_prefix: str = "metafit"

    # ─── auth (mock login, real tokens) ─────────────────────────────
    jwt_secret: str = "changeme-local-dev-secret-0123456789"
    token_ttl_minutes: int = Field(60, gt=0)
    auth_delay_seconds: float = Field(1.0, ge=0)

    # allow other teammates’ env-vars without crashing
    model_config = SettingsConfigDict(
        extra="ignore", env_file=".env", env_file_encoding="utf-8"
    )


# ------------------------------------------------------------------ #
#  Cached singleton accessor
# ------------------------------------------------------------------ #
@lru_cache
def _cached() -> _Settings:  # pragma: no cover
    return _Settings()  # type: ignore[call-arg]


settings: _Settings = _cached()
