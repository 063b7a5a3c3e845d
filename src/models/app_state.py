# src/models/app_state.py

"""Mutable state owned by one running inventory session."""

from dataclasses import dataclass, field

from src.config.settings import Settings
from src.models.product import Product


@dataclass
class AppState:
    """The in-memory catalog and the current USD -> TL dollar rate."""

    catalog: list[Product] = field(
        default_factory=lambda: list[Product]()
    )
    dollar_rate: float = Settings.DEFAULT_DOLLAR_RATE
