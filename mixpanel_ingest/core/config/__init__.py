"""Configuration module for the Mixpanel ingestion client.

Usage:
    from mixpanel_ingest.core.config import Settings

    settings = Settings()
    client = Mixpanel.from_settings(settings)
"""

from mixpanel_ingest.core.config.settings import DEFAULT_API_URL, Settings

__all__ = [
    "DEFAULT_API_URL",
    "Settings",
]
