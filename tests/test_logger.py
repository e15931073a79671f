"""Tests for explicit logger setup and teardown."""
import logging
from logging.handlers import RotatingFileHandler

from utils.logger import setup_logger, teardown_logger


class TestLogger:

    def test_setup_writes_to_rotating_file(self, tmp_path):
        log_file = tmp_path / "logs" / "app.log"
        logger = setup_logger("test.file", log_file=str(log_file), console=False)
        try:
            logger.info("Key pressed")
            for handler in logger.handlers:
                handler.flush()
            assert any(isinstance(h, RotatingFileHandler) for h in logger.handlers)
            assert "Key pressed" in log_file.read_text()
            assert " - test.file - INFO - " in log_file.read_text()
        finally:
            teardown_logger(logger)

    def test_setup_twice_does_not_duplicate_handlers(self, tmp_path):
        log_file = str(tmp_path / "app.log")
        setup_logger("test.twice", log_file=log_file)
        logger = setup_logger("test.twice", log_file=log_file)
        try:
            assert len(logger.handlers) == 2
        finally:
            teardown_logger(logger)

    def test_level_by_name(self):
        logger = setup_logger("test.level", log_file=None, level="debug", console=False)
        assert logger.level == logging.DEBUG
        teardown_logger(logger)

    def test_unknown_level_falls_back_to_info(self):
        logger = setup_logger("test.badlevel", log_file=None, level="loud", console=False)
        assert logger.level == logging.INFO
        teardown_logger(logger)

    def test_teardown_removes_handlers(self, tmp_path):
        logger = setup_logger("test.teardown", log_file=str(tmp_path / "app.log"))
        teardown_logger(logger)
        assert logger.handlers == []
