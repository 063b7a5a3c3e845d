# src/models/product.py

"""Product record kept in the reseller's catalog."""

from dataclasses import dataclass, field

from src.config.settings import Settings


def format_special_value(value: float, decimals: int) -> str:
    """Render a special (float/wear) value at a fixed precision."""
    return f"{value:.{decimals}f}"


@dataclass
class Product:
    """A single inventory item with its marketplace selling prices.

    ``csfloat_price`` and ``bynogame_price`` are derived by
    :meth:`calculate_selling_prices` and are never persisted.
    """

    name: str
    base_price: float
    special_value: float = 0.0
    csfloat_price: float = field(default=0.0, compare=False)
    bynogame_price: float = field(default=0.0, compare=False)

    def calculate_selling_prices(
        self,
        csfloat_multiplier: float,
        bynogame_multiplier: float,
        dollar_rate: float,
    ) -> tuple[float, float]:
        """Compute the CSFloat (USD) and ByNoGame (TL) selling prices."""
        self.csfloat_price = self.base_price * csfloat_multiplier
        self.bynogame_price = (
            self.base_price * bynogame_multiplier * dollar_rate
        )
        return self.csfloat_price, self.bynogame_price

    def identity_key(self) -> str:
        """Return the name + special value key used to delete records."""
        special = format_special_value(
            self.special_value, Settings.IDENTITY_KEY_DECIMALS
        )
        return f"{self.name}_{special}"

    def matches(self, name: str, special_value: float) -> bool:
        """Duplicate check: same name and same special value at 4 dp.

        This is coarser than :meth:`identity_key` (7 dp).
        """
        decimals = Settings.DUPLICATE_CHECK_DECIMALS
        return self.name == name and format_special_value(
            self.special_value, decimals
        ) == format_special_value(special_value, decimals)
