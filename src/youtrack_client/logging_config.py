"""Contextual logging configuration for the YouTrack client."""

import logging
import os
import sys
import threading
import time
import types
import uuid
from collections.abc import Mapping
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, cast

DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] [%(name)s] [%(context)s] %(message)s"
DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_LOG_DIRECTORY = "logs"
MAX_LOG_SIZE = 10 * 1024 * 1024  # 10 MB
LOG_BACKUP_COUNT = 5


class ContextualLogger(logging.Logger):
    """Logger that maintains context between related operations."""

    def __init__(self, name: str, level: int = 0) -> None:
        """Initialize the contextual logger."""
        super().__init__(name, level)
        self._context_data = threading.local()

    def _get_context_str(self) -> str:
        """Get the current context string."""
        context_data = getattr(self._context_data, "data", {})
        if not context_data:
            return "no-context"

        # Format context as: operation=X,trace_id=Y,...
        return ",".join(f"{k}={v}" for k, v in context_data.items())

    def _log(
        self,
        level: int,
        msg: object,
        args: tuple[object, ...] | Mapping[str, object],
        exc_info: Any = None,
        extra: Mapping[str, object] | None = None,
        stack_info: bool = False,
        stacklevel: int = 1,
    ) -> None:
        """Overrides _log method to include context."""
        if extra is None:
            extra = {}

        if "context" not in extra:
            extra = dict(extra)
            extra["context"] = self._get_context_str()

        super()._log(level, msg, args, exc_info, extra, stack_info, stacklevel + 1)

    def set_context(self, **kwargs: Any) -> None:
        """
        Sets context values for the logger.

        Args:
            **kwargs: Key-value pairs to add to the context
        """
        if not hasattr(self._context_data, "data"):
            self._context_data.data = {}

        self._context_data.data.update(kwargs)

    def clear_context(self) -> None:
        """Removes all context data from the logger."""
        if hasattr(self._context_data, "data"):
            self._context_data.data = {}


class LoggingContextManager:
    """Context manager for logging with tracking."""

    def __init__(
        self, logger: ContextualLogger, operation: str, **context: Any
    ) -> None:
        """
        Initializes the logging context manager.

        Args:
            logger: Contextual logger
            operation: Name of the operation being executed
            **context: Additional context data
        """
        self.logger = logger
        self.operation = operation
        self.context = context.copy()
        self.start_time = time.time()
        self.trace_id = context.get("trace_id", str(uuid.uuid4())[:8])

    def __enter__(self) -> "LoggingContextManager":
        """Starts the logging context."""
        self.old_context = getattr(self.logger._context_data, "data", {}).copy()

        self.context["operation"] = self.operation
        self.context["trace_id"] = self.trace_id
        self.logger.set_context(**self.context)

        self.logger.info(f"Operation started: {self.operation}")

        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: types.TracebackType | None,
    ) -> None:
        """Finalizes the logging context."""
        duration = time.time() - self.start_time

        if exc_type:
            self.logger.error(
                f"Operation failed: {self.operation} after {duration:.3f}s - {exc_val}"
            )
        else:
            self.logger.debug(
                f"Operation completed: {self.operation} in {duration:.3f}s"
            )

        self.logger._context_data.data = self.old_context


def get_logger(name: str = "youtrack-client") -> ContextualLogger:
    """
    Returns a contextual logger without attaching any handler.

    Library modules use this; handlers are only installed by setup_logger.
    """
    logging.setLoggerClass(ContextualLogger)
    return cast(ContextualLogger, logging.getLogger(name))


def setup_logger(
    name: str = "youtrack-client",
    level: str | None = None,
    log_to_file: bool = False,
    log_dir: str | None = None,
    log_format: str | None = None,
) -> ContextualLogger:
    """
    Configures and returns a contextual logger.

    Args:
        name: Logger name
        level: Log level (DEBUG, INFO, etc.)
        log_to_file: If True, logs to file
        log_dir: Directory to store log files
        log_format: Log format

    Returns:
        Configured contextual logger
    """
    logger = get_logger(name)

    log_level = level or os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL)
    logger.setLevel(getattr(logging, log_level.upper()))

    formatter = logging.Formatter(log_format or os.getenv("LOG_FORMAT", DEFAULT_FORMAT))

    # Drop handlers from a previous setup so repeated calls don't duplicate output
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    # stdout is reserved for command output
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_to_file:
        log_directory = log_dir or os.getenv("LOG_DIR", DEFAULT_LOG_DIRECTORY)
        Path(log_directory).mkdir(parents=True, exist_ok=True)

        log_file = Path(log_directory) / f"{name}.log"
        file_handler = RotatingFileHandler(
            log_file, maxBytes=MAX_LOG_SIZE, backupCount=LOG_BACKUP_COUNT
        )
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.propagate = False

    return logger


def log_operation(
    logger: ContextualLogger, operation: str, **context: Any
) -> LoggingContextManager:
    """
    Creates a context manager for operation logging.

    Args:
        logger: Contextual logger
        operation: Name of the operation
        **context: Additional context data

    Returns:
        Context manager configured for operation logging
    """
    return LoggingContextManager(logger, operation, **context)
