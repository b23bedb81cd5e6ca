import logging
import sys
from typing import Optional, TextIO

from pagebench.const import LIBRARY_LOG_LEVELS, LOG_DATE_FORMAT, LOG_FORMAT


class LoggingManager:
    """Configures the benchmark's console logging."""

    _handler: Optional[logging.Handler] = None

    @classmethod
    def setup_logging(cls, level: str = "INFO", stream: Optional[TextIO] = None) -> None:
        """Route log records to one console stream.

        Calling it again replaces the handler installed by the previous call,
        so the stream can be switched once the output format is known.

        Args:
            level: Logging level name; unknown names fall back to INFO
            stream: Destination stream, stdout when omitted
        """
        numeric_level = getattr(logging, level.upper(), logging.INFO)

        handler = logging.StreamHandler(stream or sys.stdout)
        handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
        handler.setLevel(numeric_level)

        root_logger = logging.getLogger()
        if cls._handler is not None:
            root_logger.removeHandler(cls._handler)
        root_logger.setLevel(numeric_level)
        root_logger.addHandler(handler)
        cls._handler = handler

        cls.quiet_libraries()

    @staticmethod
    def quiet_libraries() -> None:
        """Raise the threshold of chatty third-party loggers (urllib3, matplotlib)."""
        for name, library_level in LIBRARY_LOG_LEVELS.items():
            logging.getLogger(name).setLevel(getattr(logging, library_level.upper(), logging.WARNING))

    @classmethod
    def get_logger(cls, name: str) -> logging.Logger:
        """Return the logger for a module name."""
        return logging.getLogger(name)
