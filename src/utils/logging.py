"""Logging setup shared by the collectors, panels and front ends."""

import logging
import sys
from pathlib import Path
from typing import List, Optional

WIDGET_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Chatty HTTP internals; kept at WARNING unless we debug
NOISY_LOGGERS = ("urllib3", "charset_normalizer")


def _resolve_level(level: str) -> int:
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return resolved


def setup_logging(
    level: str = "INFO",
    log_file: Optional[str] = None,
    format_string: Optional[str] = None,
) -> None:
    """Configure the root logger for one render run.

    Replaces any handlers installed earlier in the process, so the CLI can
    call it after modules have already asked for loggers.

    Args:
        level: Level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional file that receives a copy of every record
        format_string: Record format; ``WIDGET_LOG_FORMAT`` when omitted
    """
    numeric_level = _resolve_level(level)
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    logging.basicConfig(
        level=numeric_level,
        format=format_string or WIDGET_LOG_FORMAT,
        handlers=handlers,
        force=True,
    )
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(numeric_level, logging.WARNING))


def get_logger(name: str) -> logging.Logger:
    """Return the logger for ``name``, configuring defaults on first use."""
    if not logging.getLogger().handlers:
        setup_logging()
    return logging.getLogger(name)


dashboard_logger = get_logger("dashboard")
