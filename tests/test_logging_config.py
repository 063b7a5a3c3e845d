# tests/test_logging_config.py

"""Tests for the per-run logging configuration."""

import io
import logging
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from src.config.logging_config import setup_logging
from src.storage.catalog_store import CatalogStore


class TestLoggingConfig(unittest.TestCase):
    """Verify logging setup behaviour."""

    def setUp(self) -> None:
        """Clean up the skin_inventory logger before each test."""
        self._clear_handlers()
        self.addCleanup(self._clear_handlers)

    @staticmethod
    def _clear_handlers() -> None:
        root_logger = logging.getLogger("skin_inventory")
        for handler in list(root_logger.handlers):
            handler.close()
            root_logger.removeHandler(handler)

    def test_setup_creates_log_file(self) -> None:
        """setup_logging returns a path that exists on disk."""
        log_path = setup_logging()
        self.assertTrue(log_path.exists())

    def test_log_file_naming_convention(self) -> None:
        """Log file name matches run_YYYYMMDD_HHMMSS.log format."""
        log_path = setup_logging()
        self.assertRegex(log_path.name, r"^run_\d{8}_\d{6}\.log$")

    def test_log_file_inside_logs_dir(self) -> None:
        """Log file is created inside the logs/ directory."""
        log_path = setup_logging()
        self.assertEqual(log_path.parent.name, "logs")

    def test_file_handler_level_debug(self) -> None:
        """File handler should be set to DEBUG level."""
        setup_logging()
        root_logger = logging.getLogger("skin_inventory")
        file_handlers = [
            h
            for h in root_logger.handlers
            if isinstance(h, logging.FileHandler)
        ]
        self.assertEqual(len(file_handlers), 1)
        self.assertEqual(file_handlers[0].level, logging.DEBUG)

    def test_console_handler_level_warning(self) -> None:
        """Console handler should be set to WARNING level."""
        setup_logging()
        root_logger = logging.getLogger("skin_inventory")
        stream_handlers = [
            h
            for h in root_logger.handlers
            if isinstance(h, logging.StreamHandler)
            and not isinstance(h, logging.FileHandler)
        ]
        self.assertEqual(len(stream_handlers), 1)
        self.assertEqual(stream_handlers[0].level, logging.WARNING)

    def test_repeated_calls_no_duplicate_handlers(self) -> None:
        """Calling setup_logging twice does not duplicate handlers."""
        setup_logging()
        root_logger = logging.getLogger("skin_inventory")
        count_before = len(root_logger.handlers)
        setup_logging()
        self.assertEqual(len(root_logger.handlers), count_before)

    def test_storage_errors_reach_stderr(self) -> None:
        """A missing catalog file is reported on stderr, INFO is not."""
        stderr = io.StringIO()
        with patch("sys.stderr", stderr):
            setup_logging()
        store = CatalogStore(Path(self._missing_dir()) / "catalog.txt")
        store.load_catalog()
        logging.getLogger("skin_inventory.catalog").info("quiet detail")
        output = stderr.getvalue()
        self.assertIn("ERROR: Error opening file for reading", output)
        self.assertNotIn("quiet detail", output)

    def _missing_dir(self) -> str:
        tmp = tempfile.TemporaryDirectory()
        self.addCleanup(tmp.cleanup)
        return str(Path(tmp.name) / "missing")

    def test_child_logger_reaches_file(self) -> None:
        """Records from skin_inventory.* loggers land in the run log."""
        log_path = setup_logging()
        logging.getLogger("skin_inventory.storage").info("hello catalog")
        for handler in logging.getLogger("skin_inventory").handlers:
            handler.flush()
        self.assertIn("hello catalog", log_path.read_text(encoding="utf-8"))


if __name__ == "__main__":
    unittest.main()
