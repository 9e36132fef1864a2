"""Process-wide logging configuration for text and JSON output."""

import logging
import sys

from pythonjsonlogger.json import JsonFormatter

TEXT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
JSON_LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"

_UVICORN_LOGGER_NAMES = ("uvicorn", "uvicorn.error", "uvicorn.access")


def config_configure_logging(log_level: str = "info", log_format: str = "text") -> logging.Handler:
    """Install a single stdout handler on the root logger.

    Existing root handlers are replaced so repeated calls do not duplicate
    output. Uvicorn loggers are routed through the same handler.

    Args:
        log_level: Level name such as `info` or `debug`.
        log_format: `text` for human-readable lines, `json` for one JSON object per line.

    Returns:
        logging.Handler: The installed handler.

    Raises:
        ValueError: Raised when log_level or log_format is unknown.
    """

    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        raise ValueError(f"unknown log level: {log_level}")

    if log_format == "json":
        formatter: logging.Formatter = JsonFormatter(JSON_LOG_FORMAT)
    elif log_format == "text":
        formatter = logging.Formatter(TEXT_LOG_FORMAT)
    else:
        raise ValueError(f"unknown log format: {log_format}")

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    for existing_handler in list(root_logger.handlers):
        root_logger.removeHandler(existing_handler)
    root_logger.addHandler(handler)
    root_logger.setLevel(level)

    for logger_name in _UVICORN_LOGGER_NAMES:
        uvicorn_logger = logging.getLogger(logger_name)
        uvicorn_logger.handlers.clear()
        uvicorn_logger.propagate = True
        uvicorn_logger.setLevel(level)

    return handler
