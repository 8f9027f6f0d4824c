from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from nepal_traversal.constants import (
    DEFAULT_LOG_LEVEL,
    FEEDBACK_BFS_MAX_DEPTH,
    MAX_PUZZLE_GENERATION_ATTEMPTS,
)

BASE_DIR = Path(__file__).resolve().parent.parent


class EngineSettings(BaseSettings):  # NEPAL_TRAVERSAL_* environment overrides
    """Deployment-tunable engine settings."""

    MAX_GENERATION_ATTEMPTS: int = Field(MAX_PUZZLE_GENERATION_ATTEMPTS, ge=1)
    FEEDBACK_MAX_DEPTH: int = Field(FEEDBACK_BFS_MAX_DEPTH, ge=1)
    LOG_LEVEL: str = DEFAULT_LOG_LEVEL
    LOG_FILE: Optional[str] = None

    model_config = SettingsConfigDict(
        env_prefix="NEPAL_TRAVERSAL_",
        env_file=BASE_DIR / ".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


def get_settings() -> EngineSettings:
    return EngineSettings()
