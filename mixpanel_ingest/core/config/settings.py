"""Client settings loaded from the environment.

Uses Pydantic Settings for automatic env var loading. Nothing here is
validated beyond its type: the token and URL are passed through verbatim.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_API_URL = "https://api.mixpanel.com"


class Settings(BaseSettings):
    """Mixpanel client configuration.

    Env vars:
        MIXPANEL_TOKEN=e3bc4100330c35722740fb8c6f5abddc
        MIXPANEL_API_URL=https://api-eu.mixpanel.com
        MIXPANEL_TIMEOUT=5
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
    )

    MIXPANEL_TOKEN: str = Field(..., description="Project token sent with every payload")
    MIXPANEL_API_URL: str = Field(DEFAULT_API_URL, description="Base URL of the ingestion API")
    MIXPANEL_TIMEOUT: float = Field(
        10.0, description="Default request timeout in seconds for the httpx transport"
    )
