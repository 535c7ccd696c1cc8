"""
LUNAR NEXUS Logging Configuration

Centralized logging setup for the application layer:
- Console output, optionally mirrored to a rotating log file
- Per-service log level configuration
- Correlation IDs so every line of one CLI invocation can be grouped
- Convenience helpers (log_exception, log_timing)

Usage:
    from lunarnexus.logging_config import setup_logging, get_logger

    setup_logging(log_level="DEBUG")
    logger = get_logger(__name__)

    with correlation_context(prefix="report"):
        logger.info("Building moon report")
"""

import logging
import sys
import time
import traceback
import uuid
from contextlib import contextmanager
from contextvars import ContextVar
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Generator, Optional

from lunarnexus.constants import LOG_BACKUP_COUNT, LOG_DATE_FORMAT, LOG_MAX_BYTES

ROOT_LOGGER_NAME = "lunarnexus"
DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEFAULT_LOG_FORMAT_WITH_CORRELATION = (
    "%(asctime)s - %(name)s - %(levelname)s - [%(correlation_id)s] - %(message)s"
)

LOG_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

# =============================================================================
# Correlation ID Support
# =============================================================================

_correlation_id: ContextVar[Optional[str]] = ContextVar("correlation_id", default=None)


class CorrelationIdFilter(logging.Filter):
    """Inject the current correlation ID (or "-") into every record."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.correlation_id = _correlation_id.get() or "-"
        return True


def get_correlation_id() -> Optional[str]:
    """Return the correlation ID of the current context, if any."""
    return _correlation_id.get()


def generate_correlation_id(prefix: str = "ln") -> str:
    """Generate an ID like ``report-1a2b3c4d``."""
    return f"{prefix}-{uuid.uuid4().hex[:8]}"


@contextmanager
def correlation_context(
    correlation_id: Optional[str] = None,
    prefix: str = "ln",
) -> Generator[str, None, None]:
    """Set a correlation ID for the duration of the block.

    Args:
        correlation_id: ID to use. Generated from ``prefix`` when None.
        prefix: Prefix for generated IDs.

    Yields:
        The correlation ID in effect.
    """
    cid = correlation_id or generate_correlation_id(prefix)
    token = _correlation_id.set(cid)
    try:
        yield cid
    finally:
        _correlation_id.reset(token)


def _level(name: str) -> int:
    return LOG_LEVELS.get(name.upper(), logging.WARNING)


def setup_logging(
    log_level: str = DEFAULT_LOG_LEVEL,
    log_file: Optional[str | Path] = None,
    enable_correlation: bool = True,
) -> None:
    """Configure the ``lunarnexus`` logger.

    Should be called once by the entry point. Library use of services.lunar
    does not require it.

    Args:
        log_level: DEBUG, INFO, WARNING, ERROR or CRITICAL.
        log_file: Optional path; enables a size-rotated file handler.
        enable_correlation: Include the correlation ID in every line.
    """
    level = _level(log_level)
    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(level)

    for handler in list(root_logger.handlers):
        handler.close()
    root_logger.handlers.clear()
    root_logger.filters.clear()

    if enable_correlation:
        root_logger.addFilter(CorrelationIdFilter())
        log_format = DEFAULT_LOG_FORMAT_WITH_CORRELATION
    else:
        log_format = DEFAULT_LOG_FORMAT

    formatter = logging.Formatter(log_format, LOG_DATE_FORMAT)

    # Handlers pass every record; logger levels (see set_service_level) filter
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        file_path = Path(log_file).expanduser()
        file_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = RotatingFileHandler(
            file_path,
            maxBytes=LOG_MAX_BYTES,
            backupCount=LOG_BACKUP_COUNT,
        )
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)


def get_logger(name: str) -> logging.Logger:
    """Return a logger under the ``lunarnexus`` namespace.

    Example:
        get_logger("services.lunar.report").name
        # "lunarnexus.services.lunar.report"
    """
    if not name.startswith(ROOT_LOGGER_NAME):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def set_service_level(service_name: str, level: str) -> None:
    """Set the level for one service, e.g. ``set_service_level("lunar", "DEBUG")``."""
    logging.getLogger(f"{ROOT_LOGGER_NAME}.services.{service_name}").setLevel(_level(level))


# =============================================================================
# Convenience Helpers
# =============================================================================


def log_exception(
    logger: logging.Logger,
    message: str,
    exc: BaseException,
    level: int = logging.ERROR,
    include_traceback: bool = False,
) -> None:
    """Log an exception as ``message: [Type] text``, optionally with traceback."""
    exc_type = type(exc).__name__
    extra = {
        "exception_type": exc_type,
        "exception_message": str(exc),
    }

    if include_traceback:
        tb = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
        extra["traceback"] = tb
        logger.log(level, f"{message}: [{exc_type}] {exc}\n{tb}", extra=extra)
    else:
        logger.log(level, f"{message}: [{exc_type}] {exc}", extra=extra)


@contextmanager
def log_timing(
    logger: logging.Logger,
    operation: str,
    level: int = logging.DEBUG,
) -> Generator[None, None, None]:
    """Log how long the wrapped block took.

    Example:
        with log_timing(logger, "forecast"):
            days = generate_forecast(start, 30)
        # Logs: "forecast completed in 0.001s"
    """
    start_time = time.perf_counter()
    try:
        yield
    finally:
        elapsed = time.perf_counter() - start_time
        logger.log(
            level,
            f"{operation} completed in {elapsed:.3f}s",
            extra={"operation": operation, "elapsed_seconds": round(elapsed, 3)},
        )
