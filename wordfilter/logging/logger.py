import logging
import sys


class Log:
    """Centralized logging for the word filter.

    Keyword arguments are attached to the log record as attributes
    (``record.seed``, ``record.words``) so handlers can pick them up.
    """

    _logger: logging.Logger = logging.getLogger("wordfilter")

    @classmethod
    def configure(cls, log_level: str) -> None:
        """Set the filter's log level and attach a stdout handler once."""
        cls._logger.setLevel(log_level.upper())
        if not cls._logger.handlers:
            handler = logging.StreamHandler(sys.stdout)
            handler.setFormatter(
                logging.Formatter("%(asctime)s [%(levelname)s] %(message)s")
            )
            cls._logger.addHandler(handler)

    @classmethod
    def info(cls, message: str, **context: object) -> None:
        """Log an info message with optional record context."""
        cls._logger.info(message, extra=context)

    @classmethod
    def warning(cls, message: str, **context: object) -> None:
        """Log a warning message with optional record context."""
        cls._logger.warning(message, extra=context)

    @classmethod
    def debug(cls, message: str, **context: object) -> None:
        """Log a debug message with optional record context."""
        cls._logger.debug(message, extra=context)
