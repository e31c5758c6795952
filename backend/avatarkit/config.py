"""Application configuration from environment variables."""

from __future__ import annotations

from pathlib import Path

from pydantic_settings import BaseSettings

_BACKEND_DIR = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    avatarkit_env: str = "development"
    avatarkit_log_level: str = "debug"

    # CORS
    cors_origins: list[str] = ["http://localhost:5173"]

    # Template storage: one <key>.svg per character
    template_dir: Path = _BACKEND_DIR / "templates" / "avatars"

    # Palette defaults
    default_primary: str = "#D4A574"
    default_secondary: str = "#FFFDD0"
    darken_factor: float = 0.2

    # Cache-Control max-age for rendered avatars (seconds)
    cache_max_age: int = 3600

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
