"""Configuration module - exports Settings, the seed loader and the demo seed data."""

from src.config.loader import load_seed_config
from src.config.seed_data import DEFAULT_SEED
from src.config.settings import Settings

__all__ = ["DEFAULT_SEED", "Settings", "load_seed_config"]
