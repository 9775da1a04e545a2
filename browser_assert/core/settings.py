"""
集中式配置（环境变量/ .env），保障可测性与可控性。
"""
# @file purpose: Centralized settings using Pydantic Settings.

from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="BASSERT_", env_file=".env", extra="ignore")

    base_url: str = "http://localhost:8080"
    headless: bool = True
    browser: Literal["chromium", "firefox", "webkit"] = "chromium"
    default_timeout_ms: int = 30_000
    slow_mo_ms: int = 0
    # viewport applied at scenario start and before failure screenshots
    viewport_width: int = 1440
    viewport_height: int = 900
    artifacts_dir: Path | None = None
    log_level: str = "INFO"
    log_file: Path | None = None


settings = Settings()
