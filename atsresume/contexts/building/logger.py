"""
Building context logger.

Provides logging interface for building context with automatic [build] prefix.
All building modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from atsresume.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[build]"


def setup_building_logger(log_dir: Path, cv_path: Path = None) -> Path:
    """
    Setup logger for building context.

    Configures loguru with provenance tracking and building-specific context.

    Args:
        log_dir: Directory for this building session
        cv_path: CV source recorded in the provenance header

    Returns:
        Path to log file

    Example:
        from atsresume.contexts.building.logger import setup_building_logger, _log_info

        log_file = setup_building_logger(log_dir, cv_path=Path("cv.json"))
        _log_info("Exporting variants...")
    """
    return _setup_logger(
        context_name="build",
        log_dir=log_dir,
        extra_provenance={"CV": cv_path} if cv_path else None,
    )


# Wrapper functions with automatic [build] prefix


def _log_info(message: str) -> None:
    """Log info message with [build] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [build] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [build] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [build] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level building-specific logging helpers


def log_export_start(cv_path: Path, output_dir: Path, log_file: Path = None) -> None:
    """Log start of a variant export with context."""
    _log_info(f"Starting export of {cv_path.name}")
    if log_file:
        _log_info(f"Log file: {log_file}")
    _log_debug(f"Source: {cv_path}")
    _log_debug(f"Output directory: {output_dir}")


def log_export_result(
    cv_name: str,
    result,  # ExportResult
    elapsed_time: float,
) -> None:
    """
    Log export result with written files.

    Args:
        cv_name: CV identifier (file stem)
        result: ExportResult from export_resume_variants()
        elapsed_time: Time taken
    """
    if result.success:
        _log_success(
            f"{cv_name}: exported {len(result.output_paths)} variants ({elapsed_time:.2f}s)"
        )
        for variant, path in result.output_paths.items():
            _log_info(f"  {variant}: {path}")
    else:
        _log_error(f"Failed to export {cv_name} ({elapsed_time:.2f}s)")
        if result.error:
            # raw=True keeps multi-line decode errors readable
            logger.opt(raw=True).error(f"{result.error}\n")
