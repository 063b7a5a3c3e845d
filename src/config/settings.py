# src/config/settings.py

"""Central configuration for the skin_inventory manager."""

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()


class Settings:
    """Central configuration for the skin_inventory manager."""

    # --- Marketplace pricing ---
    CSFLOAT_MULTIPLIER: float = 1.13    # CSFloat listing markup
    BYNOGAME_MULTIPLIER: float = 1.23   # ByNoGame listing markup (before FX)
    DEFAULT_DOLLAR_RATE: float = 1.0    # USD -> TL when no rate file exists

    # --- Record identity ---
    IDENTITY_KEY_DECIMALS: int = 7      # Precision of Product.identity_key
    DUPLICATE_CHECK_DECIMALS: int = 4   # Precision of the add-time dup check

    # --- Paths ---
    BASE_DIR: Path = Path(__file__).resolve().parent.parent.parent
    LOGS_DIR: Path = BASE_DIR / "logs"
    DATA_DIR: Path = Path(os.getenv("SKIN_INVENTORY_DATA_DIR", "."))
    CATALOG_PATH: Path = DATA_DIR / "product_catalog.txt"
    RATE_PATH: Path = DATA_DIR / "dollar_rate.txt"
