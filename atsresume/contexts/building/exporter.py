"""
Resume Export Orchestration

Loads a CV file, writes one text file per resume variant, and records the run
in a timestamped log directory. Failures are reported in the returned
ExportResult instead of being raised, so batch callers can keep going.
"""

import os
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional, Union

from dotenv import load_dotenv

from atsresume.contexts.building.logger import (
    log_export_result,
    log_export_start,
    setup_building_logger,
)
from atsresume.contexts.building.resume_builder import ResumeBuilder
from atsresume.utils.timestamp import now

load_dotenv()
LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))


@dataclass
class ExportResult:
    """
    Result of exporting resume variants for one CV.

    Attributes:
        success: Whether every variant was written
        cv_path: CV file that was exported
        output_paths: Variant name -> written file
        error: Error description (None on success)
        time_s: Elapsed time in seconds
        log_dir: Directory holding build.log for this run
    """

    success: bool
    cv_path: Optional[Path] = None
    output_paths: Dict[str, Path] = field(default_factory=dict)
    error: Optional[str] = None
    time_s: float = 0.0
    log_dir: Optional[Path] = None


def export_resume_variants(
    cv_path: Union[str, Path],
    output_dir: Union[str, Path],
    log_dir: Optional[Path] = None,
) -> ExportResult:
    """
    Export "<variant>_resume.txt" files for every built-in variant.

    Args:
        cv_path: Path to CV file (.json, .yaml or .yml)
        output_dir: Directory for the resume files (created if missing)
        log_dir: Directory for build.log (default: LOGS_PATH/export_<timestamp>)

    Returns:
        ExportResult with written paths, or the error on failure
    """
    cv_path = Path(cv_path)
    output_dir = Path(output_dir)

    # Early validation before any logging setup
    if not cv_path.exists():
        return ExportResult(success=False, cv_path=cv_path, error=f"CV file not found: {cv_path}")

    if log_dir is None:
        log_dir = LOGS_PATH / f"export_{now()}"

    log_file = setup_building_logger(log_dir, cv_path=cv_path)
    log_export_start(cv_path, output_dir, log_file)

    start_time = time.time()
    try:
        builder = ResumeBuilder.from_file(cv_path)
        output_paths = builder.export_variants(output_dir)
        result = ExportResult(success=True, cv_path=cv_path, output_paths=output_paths)
    except (ValueError, OSError) as e:
        # DecodeError is a ValueError
        result = ExportResult(success=False, cv_path=cv_path, error=str(e))

    result.time_s = time.time() - start_time
    result.log_dir = log_dir

    log_export_result(cv_path.stem, result, result.time_s)
    return result
