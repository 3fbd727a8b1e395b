"""
Shared loguru setup for atsresume logging sessions.

A session writes a full DEBUG trace to "<log_dir>/<context>.log" and mirrors
INFO and above (or LOG_LEVEL) to stdout, starting with a provenance header
that records how the run was invoked. Contexts wrap this in their own
contexts/<context>/logger.py with a message prefix.
"""

import os
import sys
from pathlib import Path
from typing import Dict, Optional

from loguru import logger

import atsresume

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {message}"
CONSOLE_FORMAT = "<dim>{time:HH:mm:ss}</dim> | <level>{level: <7}</level> | <level>{message}</level>"

# Console colors per level; unlisted levels keep loguru defaults
LEVEL_COLORS = {
    "SUCCESS": "<green>",
    "WARNING": "<yellow>",
    "ERROR": "<red>",
}


def console_level() -> str:
    """Console threshold from LOG_LEVEL (default INFO)."""
    return os.getenv("LOG_LEVEL", "INFO").upper()


def setup_logger(
    context_name: str,
    log_dir: Path,
    extra_provenance: Optional[Dict[str, object]] = None,
) -> Path:
    """
    Start a logging session for one context.

    Any previously added sinks are removed, so a session owns the logger
    until the next call.

    Args:
        context_name: Names the log file (e.g., "build" -> build.log)
        log_dir: Session directory, created if missing
        extra_provenance: Extra key/value lines for the provenance header

    Returns:
        Path to the session log file
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / f"{context_name}.log"

    logger.remove()

    for level_name, color in LEVEL_COLORS.items():
        logger.level(level_name, color=color)

    logger.add(log_file, format=FILE_FORMAT, level="DEBUG", encoding="utf-8")
    logger.add(sys.stdout, format=CONSOLE_FORMAT, level=console_level(), colorize=True)

    log_provenance(extra_provenance)
    return log_file


def log_provenance(extra_context: Optional[Dict[str, object]] = None) -> None:
    """Write the session header: invocation, environment and any extras."""
    rule = "=" * 80
    lines = {
        "atsresume": atsresume.__version__,
        "Command": " ".join(sys.argv),
        "Working directory": Path.cwd(),
        "Python": sys.version.split()[0],
        **(extra_context or {}),
    }

    logger.info(rule)
    for key, value in lines.items():
        logger.info(f"{key}: {value}")
    logger.info(rule)
