# src/storage/catalog_store.py

"""Flat-file persistence for the product catalog and the dollar rate.

The catalog file holds three lines per product, in catalog order::

    <name>
    <base price>
    <special value>

with no header, record count or separator. The rate file holds a single
line with the dollar rate.
"""

import logging
from pathlib import Path

from src.config.settings import Settings
from src.models.product import Product

logger = logging.getLogger("skin_inventory.storage")

_LINES_PER_RECORD = 3


class CatalogStore:
    """Reads and rewrites the catalog and rate files."""

    def __init__(
        self,
        catalog_path: Path | None = None,
        rate_path: Path | None = None,
    ) -> None:
        self.catalog_path: Path = catalog_path or Settings.CATALOG_PATH
        self.rate_path: Path = rate_path or Settings.RATE_PATH
        logger.debug(
            "CatalogStore initialised, catalog=%s rate=%s",
            self.catalog_path,
            self.rate_path,
        )

    # ── Catalog ──────────────────────────────────────────

    def save_catalog(self, products: list[Product]) -> bool:
        """Overwrite the catalog file with *products*.

        Returns ``False`` when the file could not be written; the error
        is logged and the save is skipped.
        """
        try:
            with open(
                self.catalog_path, "w", encoding="utf-8", newline=""
            ) as f:
                for p in products:
                    f.write(f"{p.name}\n{p.base_price}\n{p.special_value}\n")
        except OSError as exc:
            logger.error("Error opening file for writing: %s", exc)
            return False

        logger.info(
            "Saved %d products to %s", len(products), self.catalog_path
        )
        return True

    def load_catalog(self) -> list[Product]:
        """Load every product from the catalog file.

        A missing or unreadable file yields an empty catalog. Records
        whose price fields are not numbers are skipped, as is a trailing
        record with fewer than three lines.
        """
        try:
            # Only "\n" ends a line; names may hold any other character.
            with open(self.catalog_path, encoding="utf-8", newline="") as f:
                lines = [
                    line.removesuffix("\r") for line in f.read().split("\n")
                ]
        except OSError as exc:
            logger.error(
                "Error opening file for reading or file does not exist: %s",
                exc,
            )
            return []

        while lines and not lines[-1].strip():
            lines.pop()

        products: list[Product] = []
        for start in range(0, len(lines), _LINES_PER_RECORD):
            group = lines[start:start + _LINES_PER_RECORD]
            line_no = start + 1
            if len(group) < _LINES_PER_RECORD:
                logger.warning(
                    "Dropped incomplete record at line %d of %s",
                    line_no,
                    self.catalog_path,
                )
                break
            name, raw_price, raw_special = group
            try:
                base_price = float(raw_price)
                special_value = float(raw_special)
            except ValueError:
                logger.warning(
                    "Skipped malformed record '%s' at line %d of %s",
                    name,
                    line_no,
                    self.catalog_path,
                )
                continue
            products.append(Product(name, base_price, special_value))

        logger.info(
            "Loaded %d products from %s", len(products), self.catalog_path
        )
        return products

    # ── Dollar rate ──────────────────────────────────────

    def save_rate(self, rate: float) -> bool:
        """Overwrite the rate file; returns ``False`` if it failed."""
        try:
            with open(self.rate_path, "w", encoding="utf-8") as f:
                f.write(f"{rate}\n")
        except OSError as exc:
            logger.error(
                "Error opening file for writing the dollar rate: %s", exc
            )
            return False

        logger.info("Saved dollar rate %s to %s", rate, self.rate_path)
        return True

    def load_rate(self) -> float:
        """Load the dollar rate, falling back to the default rate."""
        default = Settings.DEFAULT_DOLLAR_RATE
        try:
            with open(self.rate_path, encoding="utf-8") as f:
                raw = f.read().strip()
        except OSError as exc:
            logger.error(
                "Error opening file for reading the dollar rate. "
                "Using default rate of %s. (%s)",
                default,
                exc,
            )
            return default

        try:
            rate = float(raw.split()[0]) if raw else default
        except ValueError:
            logger.warning(
                "Unreadable dollar rate '%s' in %s, using default rate of %s",
                raw,
                self.rate_path,
                default,
            )
            return default

        logger.info("Loaded dollar rate %s", rate)
        return rate
