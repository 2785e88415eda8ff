"""
Logging setup with rich console output and structured file formatting.
"""
import json
import logging
import logging.handlers
from datetime import datetime
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s"


class JsonFormatter(logging.Formatter):
    """JSON formatter for structured logging."""

    def __init__(self, **kwargs):
        """Initialize with optional fields."""
        self.additional_fields = kwargs
        super().__init__()

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        log_data = {
            "timestamp": datetime.fromtimestamp(record.created).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "line": record.lineno,
        }

        # Step context, when logged through a StepLoggerAdapter
        if hasattr(record, "step"):
            log_data["step"] = record.step
        if hasattr(record, "module_root"):
            log_data["module_root"] = record.module_root

        if record.exc_info:
            log_data["exception"] = {
                "type": record.exc_info[0].__name__,
                "message": str(record.exc_info[1]),
                "traceback": self.formatException(record.exc_info)
            }

        log_data.update(self.additional_fields)
        return json.dumps(log_data)


class StepLoggerAdapter(logging.LoggerAdapter):
    """Logger adapter that adds build step context to log records."""

    def process(self, msg, kwargs):
        kwargs.setdefault("extra", {}).update(self.extra)
        return msg, kwargs


def configure_logging(
    log_level: str = "INFO",
    log_file: Optional[str] = None,
    json_logging: bool = False,
    console: Optional[Console] = None,
    max_bytes: int = 10 * 1024 * 1024,
    backup_count: int = 5
) -> None:
    """
    Configure the root logger.

    Args:
        log_level: Logging level name
        log_file: Optional rotating log file
        json_logging: Format the log file as JSON lines
        console: Rich console for the terminal handler
        max_bytes: Size of the log file before rotation
        backup_count: Number of rotated files to keep
    """
    level = getattr(logging, log_level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Remove existing handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = RichHandler(
        console=console or Console(stderr=True),
        rich_tracebacks=True,
        show_path=False
    )
    console_handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
    root_logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        if log_path.parent != Path("."):
            log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=max_bytes,
            backupCount=backup_count
        )
        if json_logging:
            file_handler.setFormatter(JsonFormatter(application="scriptcs_runner"))
        else:
            file_handler.setFormatter(logging.Formatter(DEFAULT_FORMAT))
        root_logger.addHandler(file_handler)

    logging.debug(f"Logging configured with level: {log_level}")


def get_logger(name: str, **context) -> logging.Logger:
    """
    Get a logger with context.

    Args:
        name: Logger name
        **context: Additional context fields

    Returns:
        Logger with context
    """
    logger = logging.getLogger(name)

    if context:
        return StepLoggerAdapter(logger, context)

    return logger
