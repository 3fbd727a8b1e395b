"""
Formatting Context

Responsibilities:
- Converts CV substructures into ATS-safe plain-text sections
- Decides the textual layout of headers, entries, dates and bullets

Owns: Section text layout
Never: Selects or filters content (see Building context)
"""

from atsresume.contexts.formatting.ats_formatter import ATSFormatter

__all__ = ["ATSFormatter"]
