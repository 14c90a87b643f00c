"""Factory wiring configuration and logging into a ``CredentialKeys``."""

import json
import logging
import logging.handlers
import os
from pathlib import Path

from .config import config
from .keys import CredentialKeys

# Attributes every LogRecord carries; anything else came in through ``extra``.
_RECORD_ATTRIBUTES = frozenset(
    (
        "name",
        "msg",
        "args",
        "levelname",
        "levelno",
        "pathname",
        "filename",
        "module",
        "lineno",
        "funcName",
        "created",
        "msecs",
        "relativeCreated",
        "thread",
        "threadName",
        "processName",
        "process",
        "taskName",
        "getMessage",
        "exc_info",
        "exc_text",
        "stack_info",
        "message",
    )
)


class JSONFormatter(logging.Formatter):
    """Custom JSON formatter for structured logging."""

    def format(self, record):
        log_entry = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        # Add exception info if present
        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        # Add extra fields from the log record
        for key, value in record.__dict__.items():
            if key not in _RECORD_ATTRIBUTES:
                log_entry[key] = value

        return json.dumps(log_entry, default=str)


def _rotating_handler(app_config, log_dir: Path, filename: str):
    return logging.handlers.RotatingFileHandler(
        str(log_dir / filename),
        maxBytes=app_config.LOG_MAX_BYTES,
        backupCount=app_config.LOG_BACKUP_COUNT,
    )


def setup_logging(app_config) -> logging.Logger:
    """Configure the ``keymint`` logger hierarchy from a config object."""
    package_logger = logging.getLogger("keymint")

    # Clear existing handlers
    package_logger.handlers.clear()

    log_level = getattr(logging, app_config.LOG_LEVEL.upper())
    package_logger.setLevel(log_level)

    # Choose formatter based on configuration
    if getattr(app_config, "ENABLE_JSON_LOGGING", False):
        formatter = JSONFormatter()
    else:
        formatter = logging.Formatter(app_config.LOG_FORMAT)

    # Console handler writes to stderr so generated output stays clean
    if getattr(app_config, "ENABLE_CONSOLE_LOGGING", True):
        console_handler = logging.StreamHandler()
        console_handler.setLevel(log_level)
        console_handler.setFormatter(formatter)
        package_logger.addHandler(console_handler)

    if app_config.LOG_DIR:
        log_dir = Path(app_config.LOG_DIR)
        log_dir.mkdir(parents=True, exist_ok=True)

        app_handler = _rotating_handler(app_config, log_dir, app_config.LOG_FILE)
        app_handler.setLevel(log_level)
        app_handler.setFormatter(formatter)
        package_logger.addHandler(app_handler)

        setup_module_loggers(app_config, log_dir, formatter)
    else:
        audit_logger = logging.getLogger("keymint.audit")
        audit_logger.handlers.clear()
        audit_logger.propagate = True

    if not package_logger.handlers:
        package_logger.addHandler(logging.NullHandler())

    package_logger.debug(
        f"Logging configured - Level: {app_config.LOG_LEVEL}, "
        f"JSON: {getattr(app_config, 'ENABLE_JSON_LOGGING', False)}"
    )
    return package_logger


def setup_module_loggers(app_config, log_dir: Path, formatter) -> None:
    """Set up the audit logger's dedicated file."""
    audit_logger = logging.getLogger("keymint.audit")
    audit_logger.handlers.clear()
    audit_handler = _rotating_handler(app_config, log_dir, app_config.AUDIT_LOG_FILE)
    audit_handler.setLevel(logging.INFO)
    audit_handler.setFormatter(formatter)
    audit_logger.addHandler(audit_handler)
    audit_logger.setLevel(logging.INFO)
    audit_logger.propagate = False  # Don't send to the package log


def create_keys(config_name=None) -> CredentialKeys:
    """Create a ``CredentialKeys`` configured for ``config_name``."""
    if config_name is None:
        config_name = os.environ.get("KEYMINT_ENV", "default")

    app_config = config[config_name]

    # Setup logging first, before any other operations
    package_logger = setup_logging(app_config)

    keys = CredentialKeys(app_config)
    package_logger.info(f"keymint started in {config_name} mode")
    return keys
