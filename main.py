# main.py

"""Entry point for the skin_inventory interactive manager."""

import logging
import sys

from src.cli.shell import InventoryShell
from src.config.logging_config import setup_logging
from src.services.catalog_service import CatalogService
from src.storage.catalog_store import CatalogStore

logger = logging.getLogger("skin_inventory.main")


def main() -> None:
    """Load the saved catalog and rate, then run the menu loop."""
    log_file = setup_logging()
    logger.info("skin_inventory starting, log file: %s", log_file)

    service = CatalogService(CatalogStore())
    service.load()

    try:
        exit_code = InventoryShell(service).run()
    except Exception:
        logger.critical("Fatal error during shell run", exc_info=True)
        raise
    finally:
        logger.info("skin_inventory shutting down")

    sys.exit(exit_code)


if __name__ == "__main__":
    main()
