# src/config/logging_config.py

"""Per-run timestamped logging configuration for skin_inventory.

Each session of the menu writes ``logs/run_<YYYYmmdd_HHMMSS>.log``. The
loggers in use are:

* ``skin_inventory.main``: session start/shutdown, fatal tracebacks.
* ``skin_inventory.storage``: catalog/rate saves and loads, unreadable
  or unwritable state files, skipped malformed catalog records.
* ``skin_inventory.catalog``: adds, removals, quotes and rate changes.
* ``skin_inventory.cli``: commands rejected by the catalog service.

The stderr handler passes WARNING and above only. The storage layer has
no other way to tell the user that ``product_catalog.txt`` or
``dollar_rate.txt`` could not be opened, so those ERROR records are the
user-facing error stream for file problems. Menu validation messages go
through the shell's own stderr console instead and are logged at INFO.
"""

import logging
import sys
from datetime import datetime
from pathlib import Path

from src.config.settings import Settings

# Reusable format strings --------------------------------------------------

_DETAILED_FORMAT = (
    "%(asctime)s | %(levelname)-8s | %(name)s | %(module)s:%(funcName)s:%(lineno)d | "
    "%(message)s"
)

# Short: these lines interleave with the menu on the terminal
_CONSOLE_FORMAT = "%(levelname)s: %(message)s"

_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging() -> Path:
    """Initialise the root ``skin_inventory`` logger for the current run.

    Returns:
        The :class:`~pathlib.Path` to the log file created for this run.
    """
    logs_dir: Path = Settings.LOGS_DIR
    logs_dir.mkdir(parents=True, exist_ok=True)

    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    log_file = logs_dir / f"run_{timestamp}.log"

    root_logger = logging.getLogger("skin_inventory")
    root_logger.setLevel(logging.DEBUG)

    # Prevent duplicate handlers on repeated calls (e.g. tests)
    if root_logger.handlers:
        return log_file

    # --- File handler (DEBUG+): full session trail, including quotes -------
    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(
        logging.Formatter(_DETAILED_FORMAT, datefmt=_DATE_FORMAT)
    )

    # --- Console handler (WARNING+): state-file errors reach the user ------
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(logging.WARNING)
    console_handler.setFormatter(
        logging.Formatter(_CONSOLE_FORMAT, datefmt=_DATE_FORMAT)
    )

    root_logger.addHandler(file_handler)
    root_logger.addHandler(console_handler)

    root_logger.info("Logging initialised, log file: %s", log_file)

    return log_file
