from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

DATA_DIR = Path(__file__).parent / "data"


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(env_file=".env")

    app_name: str = "kcgdeck"
    debug: bool = False

    database_url: str = "sqlite+aiosqlite:///./kcgdeck.db"

    # CSV catalog with columns: id,name,kind,type,effect,tags
    card_data_path: Path = DATA_DIR / "cards.csv"


settings = Settings()


# =============================================================================
# DECK RULES
# =============================================================================

# Copies allowed per unique card
MAX_CARD_COPIES = 4

# Total cards allowed in one deck
MAX_DECK_SIZE = 60

# Longest pasted deck code accepted for import
MAX_DECK_CODE_LENGTH = 2000
