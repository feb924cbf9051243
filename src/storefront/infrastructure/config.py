"""Storefront configuration, loaded from the environment.

Every setting can be overridden with a ``STOREFRONT_``-prefixed
environment variable, e.g. ``STOREFRONT_DATA_DIR=/tmp/shop``.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

# When installed in editable mode the project root is the repo root.
_PROJECT_ROOT = Path(__file__).resolve().parents[3]


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(env_prefix="STOREFRONT_", case_sensitive=False)

    data_dir: Path = _PROJECT_ROOT / "data"
    catalog_file: str = "products.json"
    state_dir: Path | None = None  # defaults to <data_dir>/state
    log_level: str = "WARNING"

    @property
    def catalog_path(self) -> Path:
        return self.data_dir / self.catalog_file

    @property
    def resolved_state_dir(self) -> Path:
        return self.state_dir or self.data_dir / "state"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
