# src/services/catalog_service.py

"""Catalog operations: add, remove, sell, list, total and rate change."""

import logging
import math
from collections.abc import Callable
from dataclasses import dataclass, replace

from src.config.settings import Settings
from src.models.app_state import AppState
from src.models.product import Product
from src.services.exceptions import (
    DuplicateProductError,
    InvalidRateError,
    InvalidSelectionError,
    InvalidSpecialValueError,
    ProductNotFoundError,
)
from src.storage.catalog_store import CatalogStore

logger = logging.getLogger("skin_inventory.catalog")

# Receives the matches (catalog order) and returns the user's 1-based pick.
Selector = Callable[[list[Product]], int]


@dataclass
class CatalogTotals:
    """Sum of base prices and the number of products."""

    total: float
    count: int


class CatalogService:
    """Operates on the session's :class:`AppState`, persisting each change."""

    def __init__(
        self,
        store: CatalogStore | None = None,
        state: AppState | None = None,
    ) -> None:
        self.store = store or CatalogStore()
        self.state = state or AppState()

    # ── Lifecycle ────────────────────────────────────────

    def load(self) -> None:
        """Replace the in-memory state with the persisted catalog and rate."""
        self.state.catalog = self.store.load_catalog()
        self.state.dollar_rate = self.store.load_rate()
        logger.info(
            "Session loaded: %d products, dollar rate %s",
            len(self.state.catalog),
            self.state.dollar_rate,
        )

    def save(self) -> None:
        """Persist both the catalog and the dollar rate."""
        self.store.save_catalog(self.state.catalog)
        self.store.save_rate(self.state.dollar_rate)

    # ── Private helpers ──────────────────────────────────

    def _choose(self, name: str, selector: Selector) -> Product:
        """Resolve *name* to one product, asking *selector* on ambiguity."""
        matches = self.find_by_name(name)
        if not matches:
            raise ProductNotFoundError("Product not found.")
        if len(matches) == 1:
            return matches[0]

        choice = selector(matches)
        if choice < 1 or choice > len(matches):
            logger.info(
                "Selection %d out of range for '%s' (%d matches)",
                choice,
                name,
                len(matches),
            )
            raise InvalidSelectionError("Invalid choice.")
        return matches[choice - 1]

    # ── Operations ───────────────────────────────────────

    def find_by_name(self, name: str) -> list[Product]:
        """Return all products whose name equals *name* exactly."""
        return [p for p in self.state.catalog if p.name == name]

    def add_product(
        self, name: str, base_price: float, special_value: float
    ) -> Product:
        """Validate and append a new product, then save the catalog."""
        # Written positively so NaN fails the range check.
        if not 0.0 <= special_value <= 1.0:
            raise InvalidSpecialValueError(
                "Invalid special value. It should be between 0.0 and 1.0."
            )
        if any(p.matches(name, special_value) for p in self.state.catalog):
            raise DuplicateProductError(
                "Product with the same name and special float value "
                "already exists."
            )

        product = Product(name, base_price, special_value)
        self.state.catalog.append(product)
        self.store.save_catalog(self.state.catalog)
        logger.info(
            "Added '%s' (base=%s, special=%s)", name, base_price, special_value
        )
        return product

    def remove_product(self, name: str, selector: Selector) -> Product:
        """Delete the chosen product (by identity key) and save.

        Returns the removed product.
        """
        chosen = self._choose(name, selector)
        key = chosen.identity_key()
        before = len(self.state.catalog)
        self.state.catalog = [
            p for p in self.state.catalog if p.identity_key() != key
        ]
        self.store.save_catalog(self.state.catalog)
        logger.info(
            "Removed %d record(s) with key '%s'",
            before - len(self.state.catalog),
            key,
        )
        return chosen

    def quote_product(self, name: str, selector: Selector) -> Product:
        """Return a priced copy of the chosen product (the sell flow).

        The catalog is not modified.
        """
        quoted = replace(self._choose(name, selector))
        quoted.calculate_selling_prices(
            Settings.CSFLOAT_MULTIPLIER,
            Settings.BYNOGAME_MULTIPLIER,
            self.state.dollar_rate,
        )
        logger.debug(
            "Quoted '%s': csfloat=%s bynogame=%s",
            quoted.name,
            quoted.csfloat_price,
            quoted.bynogame_price,
        )
        return quoted

    def list_products(self) -> list[Product]:
        """Return the catalog in insertion order."""
        return list(self.state.catalog)

    def total_base_price(self) -> CatalogTotals:
        """Sum all base prices."""
        return CatalogTotals(
            total=sum((p.base_price for p in self.state.catalog), 0.0),
            count=len(self.state.catalog),
        )

    def change_rate(self, rate: float) -> float:
        """Set and persist a new dollar rate; it must be finite and positive."""
        if not (math.isfinite(rate) and rate > 0):
            raise InvalidRateError(
                "Invalid dollar rate. It should be greater than 0."
            )
        self.state.dollar_rate = rate
        self.store.save_rate(rate)
        logger.info("Dollar rate changed to %s", rate)
        return rate
