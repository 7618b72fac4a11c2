"""This module sets up a centralized, context-aware logging system.

It provides a `LoggingProvider` singleton that configures and dispenses the
`chronoformat` logger. The `ContextualFilter` uses thread-local storage to
inject a `correlation_id` into every log message, so that a batch of
formatting calls made on behalf of one caller can be traced together.
"""

from __future__ import annotations

import sys
import threading
from collections.abc import Generator
from contextlib import contextmanager
from logging import Filter, Formatter, Logger, LogRecord, StreamHandler, _nameToLevel, getLogger

from chronoformat.providers.config import ConfigProvider

LOGGER_NAME = "chronoformat"

_log_context = threading.local()


class ContextualFilter(Filter):
    """A logging filter that makes a correlation ID available to the log formatter."""

    def filter(self, record: LogRecord) -> bool:
        """Adds the correlation ID to the log record from thread-local context.

        Args:
            record: The log record to be filtered.

        Returns:
            Always True to ensure the log record is processed.
        """
        record.correlation_id = getattr(_log_context, "correlation_id", None) or "-"
        return True


class LoggingProvider:
    """Provides a configured logger instance for the library.

    This class uses a Singleton pattern so the `chronoformat` logger is
    configured only once, based on settings from the config provider.
    """

    _instance: LoggingProvider | None = None
    _logger: Logger | None = None
    _is_configured: bool = False

    def __new__(cls) -> LoggingProvider:
        """Implements the Singleton pattern.

        Returns:
            The singleton instance of the LoggingProvider.
        """
        if not cls._instance:
            cls._instance = super().__new__(cls)
        return cls._instance

    @staticmethod
    def _resolve_level(level_name: str) -> int:
        """Maps a level name to its numeric value, falling back to INFO.

        Args:
            level_name: A level name such as 'DEBUG' or 'warning'.

        Returns:
            The numeric logging level.
        """
        return _nameToLevel.get(level_name.upper(), _nameToLevel["INFO"])

    def _configure_logger(self) -> Logger:
        """Private method to configure the logger. This is called only once.

        Returns:
            The configured logger instance.
        """
        logger = getLogger(LOGGER_NAME)

        if self._is_configured:
            return logger

        config = ConfigProvider.get_config()
        logger.setLevel(self._resolve_level(config.LOG_LEVEL))

        if not logger.handlers:
            handler = StreamHandler(sys.stderr)
            formatter = Formatter(
                "%(asctime)s - %(name)s - [%(levelname)s] [%(correlation_id)s] - %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
            handler.setFormatter(formatter)
            handler.addFilter(ContextualFilter())
            logger.addHandler(handler)

        self._is_configured = True
        logger.debug(f"Logger configured with level: {config.LOG_LEVEL}")
        return logger

    def get_logger(self, level_override: str | None = None) -> Logger:
        """Returns the configured logger instance.

        The logger is configured lazily on first use. Library modules only ask
        for it when they have something to report, so importing them never
        reads the configuration or installs a handler.

        Args:
            level_override: An optional level name that replaces the configured level.

        Returns:
            The configured logger instance.
        """
        if not self._logger:
            self._logger = self._configure_logger()
        if level_override:
            self._logger.setLevel(self._resolve_level(level_override))
        return self._logger

    @contextmanager
    def set_correlation_id(self, correlation_id: str) -> Generator[None, None, None]:
        """A context manager to set and automatically clear the correlation ID.

        Args:
            correlation_id: The correlation ID to set for the context.

        Yields:
            None.
        """
        try:
            _log_context.correlation_id = correlation_id
            yield
        finally:
            _log_context.correlation_id = None
