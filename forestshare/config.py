from pydantic_settings import BaseSettings, SettingsConfigDict

from forestshare import __version__


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(env_file=".env")

    app_name: str = "ForestShare"
    debug: bool = False

    # Stamped onto every exported payload
    app_version: str = __version__

    # Compatibility gates for imported payloads.
    # Default: False (payloads are reconciled card by card regardless of
    # the producer's version or enabled expansions)
    enforce_app_version_match: bool = False
    enforce_game_boxes_match: bool = False


settings = Settings()


# =============================================================================
# UNAVAILABLE CARD REPORTING
# =============================================================================

# Maximum number of distinct cards listed when an import fails;
# the remainder is reported as an overflow count
MAX_UNAVAILABLE_CARD_LINES = 5
