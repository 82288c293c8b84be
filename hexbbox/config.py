"""
hexbbox — Configuration via pydantic-settings.

Environment variables override defaults.  Only the hexagon-count
estimators read these values; the bbox algebra itself is configuration-free.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import ClassVar

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    env_path: ClassVar[str] = str(Path(__file__).resolve().parents[1] / ".env")
    model_config = SettingsConfigDict(
        env_file=env_path,
        env_file_encoding="utf-8",
        env_prefix="HEXBBOX_",
        extra="ignore",
    )

    # ── Estimator back-end ─────────────────────────────────────────
    # Name of the indexing back-end that answers cell-geometry lookups.
    estimate_backend: str = "h3"

    # ── Estimator tuning ───────────────────────────────────────────
    # The pentagon is the most distorted cell at a resolution; its area is
    # shrunk in case the bbox bounds a pentagon exactly.
    pentagon_area_factor: float = Field(default=0.8, gt=0.0)
    # Higher aspect ratios drag the bbox estimate towards zero.
    max_aspect_ratio: float = Field(default=3.0, gt=0.0)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
