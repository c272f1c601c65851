"""
Structured logging configuration using structlog.

Solvers log through structlog bound loggers; the CLI decides at start-up
whether events are rendered for a terminal or as JSON lines.
"""
import sys
import logging
import structlog
from pathlib import Path
from typing import Optional, List

# File handler installed by the most recent configure_logging call
_file_handler: Optional[logging.FileHandler] = None


def _resolve_level(log_level: str) -> int:
    level = getattr(logging, log_level.upper(), None)
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {log_level}")
    return level


def _processors(json_output: bool) -> List:
    processors = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]
    if json_output:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))
    return processors


def configure_logging(
    log_level: str = "WARNING",
    log_file: Optional[Path] = None,
    json_output: bool = False
):
    """
    Configure structured logging for the toolkit.

    Safe to call repeatedly: each call replaces the handlers installed by
    the previous one, closing any earlier log file.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional file path that receives a copy of every event
        json_output: If True, render JSON lines; else human-readable console

    Raises:
        ValueError: If log_level is not a known level name

    Example:
        >>> from spherical_toolkit.utils.logging_config import configure_logging, get_logger
        >>> configure_logging(log_level="DEBUG")
        >>> logger = get_logger(__name__)
        >>> logger.debug("root_refined", root=3.14159, iterations=30)
    """
    global _file_handler

    level = _resolve_level(log_level)

    if _file_handler is not None:
        logging.getLogger().removeHandler(_file_handler)
        _file_handler.close()
        _file_handler = None

    # stderr keeps stdout free for command results
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=level,
        force=True,
    )

    structlog.configure(
        processors=_processors(json_output),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        _file_handler = logging.FileHandler(log_file)
        _file_handler.setLevel(level)
        _file_handler.setFormatter(logging.Formatter('%(message)s'))
        logging.getLogger().addHandler(_file_handler)


def get_logger(name: str):
    """
    Get a structured logger instance.

    Events go through the stdlib logger of the same name, so until
    configure_logging runs they obey stdlib defaults (WARNING and above,
    to stderr) and library calls stay quiet.

    Args:
        name: Logger name (usually __name__)

    Returns:
        Structured logger with bound context
    """
    return structlog.wrap_logger(logging.getLogger(name))
