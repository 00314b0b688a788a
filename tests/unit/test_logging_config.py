"""Tests for the contextual logging configuration."""

import logging

import pytest

from youtrack_client.logging_config import (
    ContextualLogger,
    get_logger,
    log_operation,
    setup_logger,
)


@pytest.fixture
def contextual_logger():
    """A fresh contextual logger with no handlers."""
    logger = get_logger("youtrack-client.test")
    logger.clear_context()
    logger.propagate = False
    yield logger
    for handler in list(logger.handlers):
        logger.removeHandler(handler)


class ListHandler(logging.Handler):
    """Collects formatted records."""

    def __init__(self):
        super().__init__()
        self.records = []

    def emit(self, record):
        self.records.append(record)


class TestContextualLogger:
    """Tests for ContextualLogger and log_operation."""

    def test_get_logger_returns_contextual_logger(self, contextual_logger):
        """Loggers created by get_logger carry context."""
        assert isinstance(contextual_logger, ContextualLogger)

    def test_records_carry_context(self, contextual_logger):
        """Context values are attached to every record."""
        handler = ListHandler()
        contextual_logger.addHandler(handler)
        contextual_logger.setLevel(logging.DEBUG)

        contextual_logger.info("no context yet")
        contextual_logger.set_context(issue="DCVR-1")
        contextual_logger.info("with context")

        assert handler.records[0].context == "no-context"
        assert handler.records[1].context == "issue=DCVR-1"

    def test_log_operation_restores_context(self, contextual_logger):
        """The previous context is restored after the operation."""
        handler = ListHandler()
        contextual_logger.addHandler(handler)
        contextual_logger.setLevel(logging.DEBUG)

        with log_operation(contextual_logger, "fetch", trace_id="abc"):
            contextual_logger.info("inside")

        contextual_logger.info("outside")

        inside = [r for r in handler.records if r.getMessage() == "inside"][0]
        outside = [r for r in handler.records if r.getMessage() == "outside"][0]
        assert "operation=fetch" in inside.context
        assert "trace_id=abc" in inside.context
        assert outside.context == "no-context"

    def test_log_operation_logs_failure(self, contextual_logger):
        """Failures are logged and re-raised."""
        handler = ListHandler()
        contextual_logger.addHandler(handler)

        with pytest.raises(RuntimeError):
            with log_operation(contextual_logger, "fetch"):
                raise RuntimeError("boom")

        errors = [r for r in handler.records if r.levelno == logging.ERROR]
        assert "Operation failed: fetch" in errors[0].getMessage()


class TestSetupLogger:
    """Tests for setup_logger."""

    def test_repeated_setup_does_not_duplicate_handlers(self):
        """Each setup replaces the handlers of the previous one."""
        logger = setup_logger(name="youtrack-client.setup-test", level="INFO")
        logger = setup_logger(name="youtrack-client.setup-test", level="DEBUG")

        assert len(logger.handlers) == 1
        assert logger.level == logging.DEBUG
        assert logger.propagate is False

    def test_file_logging(self, tmp_path):
        """log_to_file writes a rotating log file into log_dir."""
        logger = setup_logger(
            name="youtrack-client.file-test",
            level="INFO",
            log_to_file=True,
            log_dir=str(tmp_path),
        )
        logger.info("written to file")
        for handler in logger.handlers:
            handler.flush()

        log_file = tmp_path / "youtrack-client.file-test.log"
        assert "written to file" in log_file.read_text()
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()
