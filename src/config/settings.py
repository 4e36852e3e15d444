"""Application settings loaded from environment variables via pydantic-settings.

# ─── HOW SETTINGS WORK ────────────────────────────────────────────────
#
# Values are read from two sources (in priority order):
#
#   1. **Environment variables** - e.g., LOG_LEVEL=DEBUG
#   2. **.env file** - key=value lines in the project root .env file
#
# Field ``hash_algorithm`` maps to env var ``HASH_ALGORITHM`` and so on.
# Defaults apply when neither source sets a field.
# ──────────────────────────────────────────────────────────────────────
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """feedbackDesk application settings.

    Environment variables override defaults. Loaded from .env file when present.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    # === Credentials ===
    # Any hashlib algorithm with a fixed digest size.  An unknown name is a
    # fatal startup error (ConfigurationError), never a silent fallback.
    hash_algorithm: str = "sha256"

    # === Seed data ===
    seed_demo_data: bool = True
    seed_config_path: str = "config/config.yaml"

    # === Export ===
    export_path: str = "feedback_export.txt"

    # === App Config ===
    app_env: str = "development"
    log_level: str = "INFO"
