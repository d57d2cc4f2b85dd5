"""Tests for logging setup."""

import logging

from splicenorm.utils.logging import LOGGER_NAME, Timer, setup_logging


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_levels(self):
        setup_logging(verbosity=0, use_rich=False)
        logger = logging.getLogger(LOGGER_NAME)
        assert logger.level == logging.WARNING
        assert len(logger.handlers) == 1

        setup_logging(verbosity=2, use_rich=False)
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1

    def test_rich_handler(self):
        from rich.logging import RichHandler

        setup_logging(verbosity=1, use_rich=True)
        handlers = logging.getLogger(LOGGER_NAME).handlers
        assert isinstance(handlers[0], RichHandler)

    def test_log_file(self, tmp_path):
        log_file = tmp_path / "run.log"
        setup_logging(verbosity=0, log_file=log_file, use_rich=False)
        logging.getLogger("splicenorm.test").debug("written to file")
        for handler in logging.getLogger(LOGGER_NAME).handlers:
            handler.flush()
        assert "written to file" in log_file.read_text()
        setup_logging(verbosity=1, use_rich=False)


class TestTimer:
    """Tests for the Timer context manager."""

    def test_elapsed(self, caplog):
        with caplog.at_level(logging.INFO, logger=LOGGER_NAME):
            with Timer("Parsing") as timer:
                pass
        assert timer.elapsed >= 0
        assert any("Parsing completed in" in r.getMessage() for r in caplog.records)
