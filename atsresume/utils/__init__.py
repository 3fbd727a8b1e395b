"""
Shared utilities for atsresume.

Common functionality used across contexts:
- Logger configuration
- Timestamps
"""

from atsresume.utils.logger import setup_logger
from atsresume.utils.timestamp import now

__all__ = ["setup_logger", "now"]
