"""
Pydantic Settings — centralized configuration loaded from environment variables.
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # ── Dataset ───────────────────────────────
    DATASET_FILE: str = "_data/pixels.json"
    UNCLAIMED_USERNAME: str = "<UNCLAIMED>"

    # ── Help links shown to contributors ─────
    SYNC_FORK_HELP_URL: str = "https://help.github.com/en/articles/syncing-a-fork"
    GIT_RESOLUTION_HELP_URL: str = "https://dangitgit.com/"

    # ── Application ───────────────────────────
    APP_ENV: str = "development"
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False

    model_config = {"env_file": ["../.env", ".env"], "extra": "ignore"}


settings = Settings()
