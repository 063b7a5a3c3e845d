# src/cli/shell.py

"""Interactive single-letter menu over the catalog service."""

import logging
from collections.abc import Callable

from rich.console import Console
from rich.prompt import FloatPrompt, IntPrompt, Prompt

from src.models.product import Product
from src.services.catalog_service import CatalogService, Selector
from src.services.exceptions import InventoryError

logger = logging.getLogger("skin_inventory.cli")

_MENU = (
    "Menu:\n"
    "A - Add a product\n"
    "S - Sell a product\n"
    "L - List all products\n"
    "R - Remove a product\n"
    "T - Calculate total base price\n"
    "D - Change dollar rate\n"
    "Q - Quit"
)


def _plain_console(stderr: bool = False) -> Console:
    """Console that prints user text verbatim (no markup, emoji or wrap)."""
    return Console(
        stderr=stderr,
        markup=False,
        emoji=False,
        highlight=False,
        soft_wrap=True,
    )


class InventoryShell:
    """Reads menu choices until Q (or end of input) and dispatches them."""

    def __init__(
        self,
        service: CatalogService,
        console: Console | None = None,
        err_console: Console | None = None,
    ) -> None:
        self.service = service
        self.console = console or _plain_console()
        self._err = err_console or _plain_console(stderr=True)
        self._commands: dict[str, Callable[[], None]] = {
            "a": self.add,
            "s": self.sell,
            "l": self.list_catalog,
            "r": self.remove,
            "t": self.total,
            "d": self.change_rate,
        }

    # ── Prompt helpers ───────────────────────────────────

    def _ask_text(self, prompt: str) -> str:
        return Prompt.ask(prompt, console=self.console).strip()

    def _ask_float(self, prompt: str) -> float:
        return FloatPrompt.ask(prompt, console=self.console)

    def _selector(self, heading: str, prompt: str) -> Selector:
        """Build a selector that lists matches and asks for a number."""

        def select(matches: list[Product]) -> int:
            self.console.print(heading)
            for idx, p in enumerate(matches, 1):
                self.console.print(
                    f"{idx}: {p.name} | Special Value: {p.special_value:.4f}"
                )
            return IntPrompt.ask(prompt, console=self.console)

        return select

    # ── Commands ─────────────────────────────────────────

    def add(self) -> None:
        name = self._ask_text("Enter the product name")
        base_price = self._ask_float("Enter the base price")
        special_value = self._ask_float(
            "Enter the special float value (0.0 to 1.0)"
        )
        self.service.add_product(name, base_price, special_value)
        self.console.print("Product added successfully.")

    def remove(self) -> None:
        name = self._ask_text("Enter the product name to remove")
        self.service.remove_product(
            name,
            self._selector(
                "Multiple products found. Please select one to remove:",
                "Enter the number of the product to remove",
            ),
        )
        self.console.print("Product removed successfully.")

    def sell(self) -> None:
        name = self._ask_text("Enter the product name")
        p = self.service.quote_product(
            name,
            self._selector(
                "Multiple products found. Please select one:",
                "Enter the number of the product to sell",
            ),
        )
        self.console.print(f"Product: {p.name}")
        self.console.print(f"Base Price: ${p.base_price:.3f}")
        self.console.print(f"Special Value: {p.special_value:.5f}")
        self.console.print(f"Selling price for CSFloat: ${p.csfloat_price:.5f}")
        self.console.print(f"Selling price for ByNoGame: {p.bynogame_price:.5f}TL")

    def list_catalog(self) -> None:
        products = self.service.list_products()
        if not products:
            self.console.print("No products in the catalog.")
            return

        self.console.print("Product Catalog:")
        for p in products:
            self.console.print(
                f"Product: {p.name}, Base Price: ${p.base_price:.2f}, "
                f"Special Value: {p.special_value:.4f}"
            )

    def total(self) -> None:
        totals = self.service.total_base_price()
        self.console.print(
            f"Total base price of all products: ${totals.total:.4f}"
        )
        self.console.print(f"Total number of products: {totals.count}")

    def change_rate(self) -> None:
        rate = self._ask_float("Enter the new dollar rate")
        self.service.change_rate(rate)
        self.console.print("Dollar rate updated successfully.")

    # ── Main loop ────────────────────────────────────────

    def _read_choice(self) -> str:
        """Return the lowercased first character of the line, or ``q`` on EOF."""
        self.console.print(_MENU)
        try:
            line = self.console.input("Enter your choice: ")
        except (EOFError, KeyboardInterrupt):
            self.console.print()
            return "q"
        return line.strip()[:1].lower()

    def run(self) -> int:
        """Loop until quit, then save the catalog and rate.

        Always returns 0.
        """
        while True:
            choice = self._read_choice()
            if choice == "q":
                break

            command = self._commands.get(choice)
            if command is None:
                self._err.print(
                    "Invalid choice. Please enter A, S, L, R, T, D, or Q."
                )
                continue

            try:
                command()
            except InventoryError as exc:
                logger.info("Command '%s' rejected: %s", choice, exc)
                self._err.print(str(exc))
            except (EOFError, KeyboardInterrupt):
                self.console.print()
                break

        self.console.print("Quitting the program.")
        self.service.save()
        logger.info("Session ended, state saved")
        return 0
