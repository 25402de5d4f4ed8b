from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(env_file=".env", env_prefix="GATHERDECK_")

    gatherer_base_url: str = "https://gatherer.wizards.com"
    user_agent: str = "gatherdeck/1.0"

    # Seconds allowed for a single HTTP request
    request_timeout: float = 30.0

    # Seconds allowed for resolving one card name, redirects and search hops included
    task_timeout: float = 60.0

    # Upper bound on card lookups in flight during deck assembly
    max_concurrency: int = 8

    # Search-result pages followed before giving up on a name
    max_search_hops: int = 3


settings = Settings()


# =============================================================================
# FORMAT RULES
# =============================================================================

CONSTRUCTED_MIN_DECK_SIZE = 60
CONSTRUCTED_MAX_COPIES = 4

LIMITED_MIN_DECK_SIZE = 40
