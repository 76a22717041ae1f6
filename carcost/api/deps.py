"""FastAPI dependency injection."""

from carcost.config import Settings, settings


def get_settings() -> Settings:
    return settings
