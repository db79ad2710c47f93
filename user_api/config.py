"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - get_settings() is cached (lru_cache) — single instance per process
    - Validation rules are plain data here, never metadata on schema types

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults provided for every setting: works out-of-the-box with `user-api`
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from user_api.core.validate_user import UserFieldRules


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Server
    host: str = "0.0.0.0"
    port: int = 3000

    # API
    cors_origins: list[str] = ["http://localhost:3000"]
    static_dir: str = "public"

    # Validation rules
    user_name_min_length: int = 2
    user_name_max_length: int = 50

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @field_validator("log_format")
    @classmethod
    def check_log_format(cls, v: str) -> str:
        v = v.lower()
        if v not in ("json", "text"):
            raise ValueError("log_format must be 'json' or 'text'")
        return v

    def field_rules(self) -> UserFieldRules:
        return UserFieldRules(
            name_min_length=self.user_name_min_length,
            name_max_length=self.user_name_max_length,
        )


@lru_cache
def get_settings() -> Settings:
    return Settings()
