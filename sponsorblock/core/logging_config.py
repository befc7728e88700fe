"""Logging configuration for the SponsorBlock client.

The library only emits records under the ``sponsorblock`` logger and never
configures handlers on its own; applications call ``setup_logging`` if they
want console output.
"""

import logging
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.logging import RichHandler

from sponsorblock.core.constants import LIBRARY_NAME

console = Console(stderr=True)

# Library root logger; silent unless the application configures logging.
logger = logging.getLogger(LIBRARY_NAME)
logger.addHandler(logging.NullHandler())


def setup_logging(
    level: str = "INFO",
    log_file: Path | str | None = None,
    rich_tracebacks: bool = True,
) -> logging.Logger:
    """
    Configure console (and optional file) logging for the library.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional path to log file
        rich_tracebacks: Enable rich traceback formatting

    Returns:
        Configured library logger
    """
    logger.setLevel(getattr(logging, level.upper()))

    # Clear existing handlers
    logger.handlers.clear()

    rich_handler = RichHandler(
        console=console,
        rich_tracebacks=rich_tracebacks,
        tracebacks_show_locals=(level.upper() == "DEBUG"),
        markup=False,
    )
    rich_handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(rich_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_path)
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(
            logging.Formatter(
                "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        logger.addHandler(file_handler)

    # Prevent double output through the root logger
    logger.propagate = False

    logger.debug("Logging initialized (level=%s)", level)

    return logger


def get_logger(name: str | None = None) -> logging.Logger:
    """
    Get the library logger or one of its children.

    Args:
        name: Child name, e.g. "client" for ``sponsorblock.client``

    Returns:
        Logger instance
    """
    if not name or name == LIBRARY_NAME:
        return logger
    return logging.getLogger(f"{LIBRARY_NAME}.{name}")


def log_api_request(
    logger_instance: logging.Logger,
    method: str,
    path: str,
    status_code: int | None,
    duration_ms: float,
    error: str | None = None,
) -> None:
    """
    Log an API request in structured format.

    Query parameters are deliberately not part of the record; they may carry
    the local user ID.

    Args:
        logger_instance: Logger to use
        method: HTTP method
        path: Endpoint path
        status_code: Response status code, or None if no response arrived
        duration_ms: Request duration in milliseconds
        error: Error message if the request failed
    """
    extra: dict[str, Any] = {
        "method": method,
        "path": path,
        "status_code": status_code,
        "duration_ms": duration_ms,
    }
    if error:
        extra["error"] = error

    if status_code is None:
        logger_instance.warning(
            "%s %s failed after %.1fms: %s", method, path, duration_ms, error, extra=extra
        )
        return

    log_level = logging.DEBUG if status_code < 400 else logging.INFO
    logger_instance.log(
        log_level, "%s %s %s %.1fms", method, path, status_code, duration_ms, extra=extra
    )
