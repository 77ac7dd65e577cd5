"""
Unit tests for the logging manager
"""

import logging
from logging.handlers import RotatingFileHandler
import pytest

from utils.logging_manager import LogConfig, LogContext, LoggingManager, log_execution, logging_manager
from utils.path_utils import LOG_DIR


@pytest.mark.unit
class TestLoggingManager:
    """Test cases for LoggingManager and its helpers"""

    def test_singleton(self):
        assert LoggingManager() is logging_manager

    def test_get_logger_cached(self):
        assert logging_manager.get_logger("Catalog") is logging_manager.get_logger("Catalog")
        assert logging_manager.get_logger().name == "healing"

    def test_log_context_success(self, caplog):
        logging_manager.reset_metrics()
        with caplog.at_level(logging.INFO):
            with LogContext("Catalog", "load", source="test"):
                pass
        assert "[Catalog.load.source:test] Operation completed" in caplog.text
        assert logging_manager.get_metrics()["Catalog.load.source:test_completed"] == 1

    def test_log_context_failure(self, caplog):
        with pytest.raises(RuntimeError):
            with LogContext("Catalog", "load"):
                raise RuntimeError("boom")
        assert "Operation failed" in caplog.text
        assert "boom" in caplog.text

    def test_log_execution_sync(self, caplog):
        @log_execution("Client", "double")
        def double(value):
            return value * 2

        with caplog.at_level(logging.INFO):
            assert double(4) == 8
        assert "[Client.double] Operation completed" in caplog.text

    @pytest.mark.asyncio
    async def test_log_execution_async(self, caplog):
        @log_execution("Client")
        async def fetch():
            return "ok"

        with caplog.at_level(logging.INFO):
            assert await fetch() == "ok"
        assert "[Client.fetch] Operation completed" in caplog.text

    def test_configure_size_rotating_file(self, tmp_path):
        try:
            logging_manager.configure(LogConfig(
                enable_console=False,
                log_directory=str(tmp_path),
                log_filename="test.log",
                file_max_bytes=1024,
                file_backup_count=2
            ))
            handlers = [h for h in logging.getLogger().handlers if isinstance(h, RotatingFileHandler)]
            assert len(handlers) == 1
            assert handlers[0].maxBytes == 1024
            assert handlers[0].backupCount == 2
            assert (tmp_path / "test.log").exists()
        finally:
            logging_manager.configure_from_config_file()

    def test_default_log_directory(self):
        try:
            logging_manager.configure(LogConfig(enable_console=False, enable_file=False))
            assert logging_manager._config.log_directory == str(LOG_DIR)
        finally:
            logging_manager.configure_from_config_file()
