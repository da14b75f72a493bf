"""Settings for the batch and demo entry points, loaded from env and .env."""

from __future__ import annotations

import random
from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="TASK_CLASSIFIER_", env_file=".env", env_file_encoding="utf-8")

    log_level: str = "WARNING"
    title_fallback_length: int = 100
    max_description_length: int = 5000
    title_seed: Optional[int] = None
    output_dir: Path = Path("outputs")

    def make_picker(self) -> random.Random:
        """Return a title picker, seeded when ``title_seed`` is set."""
        return random.Random(self.title_seed)


def get_settings() -> Settings:
    return Settings()
