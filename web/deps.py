"""Shared dependencies for web routes."""

from functools import lru_cache

from web.config import Settings, TargetConfig, get_settings


@lru_cache
def cached_settings() -> Settings:
    return get_settings()


def get_target_config() -> TargetConfig:
    """FastAPI dependency for the run configuration."""
    return cached_settings().to_target_config()
