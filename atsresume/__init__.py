"""
atsresume - ATS-compliant plain-text resumes from one canonical CV

Renders a structured CV record into plain-text resume documents that
Applicant Tracking Systems parse reliably, in several tailored variants.

Architecture:
- CV Context: CV record types, decoding and loading
- Formatting Context: section-by-section plain-text layout
- Building Context: configuration, filtering, assembly and export
"""

__version__ = "0.1.0"
