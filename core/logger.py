"""
Centralized logging configuration using Loguru.

Features:
- Console (colored) or flat JSON output
- Optional rotating file sinks
- Standard library logging interception (routes stdlib logging to Loguru)
- Quieter third-party loggers (httpx, httpcore, PIL)
- Script logging helper for standalone scripts
"""

import json
import logging
import sys
from pathlib import Path
from typing import Optional

from loguru import logger  # type: ignore

VALID_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}"
SCRIPT_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | <level>{message}</level>"
)

_configured = False


class InterceptHandler(logging.Handler):
    """Route standard library log records to Loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Find caller from where logging call originated
        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(
            level, record.getMessage()
        )


def intercept_standard_logging() -> None:
    """Send everything logged through stdlib logging to Loguru."""
    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)


def configure_third_party_loggers() -> None:
    """Reduce noise from HTTP and imaging libraries."""
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("PIL").setLevel(logging.WARNING)
    logging.getLogger("asyncio").setLevel(logging.WARNING)


def _normalize_level(level: Optional[str], default: str = "INFO") -> str:
    level = (level or default).upper()
    return level if level in VALID_LEVELS else default


def configure_script_logging(level: str = "INFO", json_format: bool = False) -> None:
    """
    Configure logging for standalone scripts (console only).

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_format: If True, output logs in JSON format

    Example:
        from core.logger import logger, configure_script_logging

        configure_script_logging(level="DEBUG")
        logger.info("Script started")
    """
    logger.remove()
    level = _normalize_level(level)

    if json_format:
        logger.add(sys.stdout, format="{message}", level=level, serialize=True)
    else:
        logger.add(sys.stdout, colorize=True, format=SCRIPT_FORMAT, level=level)

    intercept_standard_logging()
    configure_third_party_loggers()


def format_exception_short(exception: Exception, context: Optional[str] = None) -> str:
    """
    Format exception as a single short line.

    Example:
        >>> format_exception_short(ValueError("bad"), "Decoding scene")
        'Decoding scene | ValueError: bad | (unknown)'
    """
    try:
        tb = exception.__traceback__
        if tb:
            while tb.tb_next:
                tb = tb.tb_next
            location = f"{Path(tb.tb_frame.f_code.co_filename).name}:{tb.tb_lineno}"
        else:
            location = "unknown"

        parts = []
        if context:
            parts.append(context)
        parts.append(f"{type(exception).__name__}: {exception}")
        parts.append(f"({location})")
        return " | ".join(parts)

    except Exception:
        return f"{type(exception).__name__}: {str(exception)}"


def serialize_log_record(record: dict) -> str:
    """
    Serialize a Loguru record to a flat JSON line.

    Extra fields bound with logger.bind() are flattened into the top level.
    """
    log_record = {
        "timestamp": record["time"].isoformat(),
        "level": record["level"].name,
        "message": record["message"],
        "module": record["module"],
        "function": record["function"],
        "line": record["line"],
    }

    if record.get("exception"):
        exception = record["exception"]
        log_record["exception"] = {
            "type": exception.type.__name__ if exception.type else "Unknown",
            "message": str(exception.value),
        }

    for key, value in (record.get("extra") or {}).items():
        try:
            json.dumps(value)
            log_record[key] = value
        except (TypeError, ValueError):
            log_record[key] = str(value)

    # Loguru calls format() on the result and parses color tags
    return (
        json.dumps(log_record).replace("{", "{{").replace("}", "}}").replace("<", "\\<")
        + "\n"
    )


def _add_file_sinks(json_format: bool) -> None:
    log_dir = Path("logs")
    log_dir.mkdir(exist_ok=True)
    suffix = ".json.log" if json_format else ".log"
    fmt = serialize_log_record if json_format else FILE_FORMAT

    for name, level in (("app", "DEBUG"), ("error", "ERROR")):
        logger.add(
            log_dir / f"{name}{suffix}",
            rotation="100 MB",
            retention="30 days",
            compression="zip",
            format=fmt,
            level=level,
            colorize=False,
        )


def setup_logger() -> None:
    """
    Configure logger handlers from settings.

    Only configures once even if called multiple times.
    """
    from .config import get_settings

    global _configured

    settings = get_settings()
    if _configured and len(logger._core.handlers) > 0:
        return

    log_level = _normalize_level(settings.log_level, "DEBUG" if settings.debug else "INFO")
    json_format = settings.log_format.lower() == "json"

    logger.remove()
    if json_format:
        logger.add(sys.stdout, format=serialize_log_record, level=log_level, colorize=False)
    else:
        logger.add(sys.stdout, colorize=True, format=CONSOLE_FORMAT, level=log_level)

    if settings.log_file_enabled:
        _add_file_sinks(json_format)

    intercept_standard_logging()
    configure_third_party_loggers()
    _configured = True


# Configure logger on module import
setup_logger()

__all__ = [
    "logger",
    "format_exception_short",
    "configure_script_logging",
    "configure_third_party_loggers",
    "intercept_standard_logging",
    "serialize_log_record",
    "setup_logger",
    "InterceptHandler",
]
