"""Logging configuration and service."""
import json
import logging
import logging.config
from typing import Any, Dict, Optional

from .settings import Settings

MASK = "***"

# Keys whose values must never reach a log sink
SENSITIVE_KEYS = {
    "authorization",
    "client_secret",
    "pem",
    "signing_keys",
    "encryption_key",
}


def mask_sensitive(value: Any) -> Any:
    """Return a copy of value with secret-bearing keys masked.

    Dicts and lists are walked recursively, anything else is returned as is.
    """
    if isinstance(value, dict):
        return {
            key: MASK
            if isinstance(key, str) and key.lower() in SENSITIVE_KEYS
            else mask_sensitive(item)
            for key, item in value.items()
        }
    if isinstance(value, list):
        return [mask_sensitive(item) for item in value]
    return value


class BaseFormatter(logging.Formatter):
    """Base formatter that knows how to pull extra fields off a record."""

    # Attributes every LogRecord carries; anything else came in via extra=
    RECORD_ATTRIBUTES = frozenset(
        logging.LogRecord("", 0, "", 0, "", None, None).__dict__
    ) | {"message", "asctime", "taskName"}

    def __init__(self, settings_instance: Settings) -> None:
        """Initialize formatter.

        Args:
            settings_instance: Settings instance for configuration
        """
        super().__init__()
        self.settings = settings_instance

    def get_extra_fields(self, record: logging.LogRecord) -> Dict[str, Any]:
        """Get extra fields from record, with secrets masked.

        Args:
            record: Log record to process

        Returns:
            Dictionary with extra fields
        """
        extra = {
            key: value
            for key, value in record.__dict__.items()
            if key not in self.RECORD_ATTRIBUTES
        }
        for field in self.settings.LOG_EXTRA_FIELDS:
            if hasattr(record, field):
                extra[field] = getattr(record, field)

        return mask_sensitive(extra)


class JsonFormatter(BaseFormatter):
    """JSON formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as a single JSON line.

        Args:
            record: Log record to format

        Returns:
            JSON string
        """
        log_data: Dict[str, Any] = {
            "time": self.formatTime(record),
            "level": record.levelname,
            "name": record.name,
            "message": record.getMessage(),
        }

        for key, value in self.get_extra_fields(record).items():
            try:
                json.dumps(value)
                log_data[key] = value
            except (TypeError, ValueError):
                log_data[key] = f"<non-serializable: {type(value).__name__}>"

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data)


class TextFormatter(BaseFormatter):
    """Text formatter for human-readable logging."""

    def format(self, record: logging.LogRecord) -> str:
        msg = (
            f"{self.formatTime(record)} - {record.levelname} - "
            f"{record.name} - {record.getMessage()}"
        )

        extra = self.get_extra_fields(record)
        if extra:
            msg += f" - extra={extra}"

        if record.exc_info:
            msg += f"\n{self.formatException(record.exc_info)}"

        return msg


class StructuredFormatter(BaseFormatter):
    """Structured formatter for key=value pairs."""

    def format(self, record: logging.LogRecord) -> str:
        parts = [
            f"time={self.formatTime(record)}",
            f"level={record.levelname}",
            f"name={record.name}",
            f"message={record.getMessage()}",
        ]
        parts.extend(
            f"{key}={value}" for key, value in self.get_extra_fields(record).items()
        )

        if record.exc_info:
            parts.append(f"exception={self.formatException(record.exc_info)}")

        return " ".join(parts)


class LoggerService:
    """Service for configuring and providing loggers."""

    def __init__(
        self,
        settings_instance: Settings,
        config: Optional[Dict[str, Any]] = None,
    ) -> None:
        """Initialize logging configuration.

        Args:
            settings_instance: Settings instance to use
            config: Optional logging configuration dictionary
        """
        self.settings = settings_instance
        self.formatters: Dict[str, logging.Formatter] = {
            "json": JsonFormatter(settings_instance),
            "text": TextFormatter(settings_instance),
            "structured": StructuredFormatter(settings_instance),
        }

        if config:
            logging.config.dictConfig(config)
        else:
            logging.getLogger().setLevel(
                getattr(logging, settings_instance.LOG_LEVEL.upper(), logging.INFO)
            )

    def get_logger(self, name: str, format: Optional[str] = None) -> logging.Logger:
        """Get logger instance.

        Args:
            name: Logger name, typically __name__
            format: Optional format override (json, text, structured)

        Returns:
            Logger instance
        """
        logger = logging.getLogger(name)

        if not logger.handlers:
            handler = logging.StreamHandler()
            formatter = self.formatters.get(
                format or self.settings.LOG_FORMAT, self.formatters["json"]
            )
            handler.setFormatter(formatter)
            logger.addHandler(handler)

        return logger
