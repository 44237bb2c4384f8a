import logging
import sys

from eventable.events.normalizer import to_event


class Log:
    """Centralized logging with structured event metadata."""

    _logger: logging.Logger = logging.getLogger("eventable")
    _event_key: str = "event"

    @classmethod
    def configure(cls, log_level: str, event_key: str = "event") -> None:
        """Configure the logger level, stdout handler and event metadata key."""
        cls._logger.setLevel(log_level.upper())
        cls._event_key = event_key
        if not cls._logger.handlers:
            handler = logging.StreamHandler(sys.stdout)
            handler.setFormatter(
                logging.Formatter("%(asctime)s [%(levelname)s] %(message)s")
            )
            cls._logger.addHandler(handler)

    @classmethod
    def info(cls, message: str, **kwargs: object) -> None:
        """Log an info message."""
        cls._logger.info(message, extra=cls._extra(kwargs))

    @classmethod
    def error(cls, message: str, **kwargs: object) -> None:
        """Log an error message."""
        cls._logger.error(message, extra=cls._extra(kwargs))

    @classmethod
    def warning(cls, message: str, **kwargs: object) -> None:
        """Log a warning message."""
        cls._logger.warning(message, extra=cls._extra(kwargs))

    @classmethod
    def debug(cls, message: str, **kwargs: object) -> None:
        """Log a debug message."""
        cls._logger.debug(message, extra=cls._extra(kwargs))

    @classmethod
    def _extra(cls, kwargs: dict[str, object]) -> dict[str, object]:
        if cls._event_key in kwargs:
            kwargs[cls._event_key] = to_event(kwargs[cls._event_key])
        return kwargs
