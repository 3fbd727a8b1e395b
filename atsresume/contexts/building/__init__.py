"""
Building Context

Responsibilities:
- Defines resume configurations and the built-in presets (default, technical, management)
- Filters work entries and skills by keyword and count
- Assembles formatted sections into final resume documents and variants
- Exports resumes to text files

Owns: Section selection, filtering, assembly, export
Never: Lays out section text (see Formatting context) or modifies the CV
"""

from atsresume.contexts.building.configuration import (
    DEFAULT_CONFIGURATION,
    MANAGEMENT_CONFIGURATION,
    PRESETS,
    TECHNICAL_CONFIGURATION,
    VARIANT_NAMES,
    ResumeConfiguration,
    ResumeSection,
    get_preset,
    load_configurations,
    parse_sections,
)
from atsresume.contexts.building.exporter import ExportResult, export_resume_variants
from atsresume.contexts.building.resume_builder import (
    ResumeBuilder,
    filter_skills,
    filter_work,
    matches_keywords,
)

__all__ = [
    # Configuration
    "ResumeConfiguration",
    "ResumeSection",
    "DEFAULT_CONFIGURATION",
    "TECHNICAL_CONFIGURATION",
    "MANAGEMENT_CONFIGURATION",
    "PRESETS",
    "VARIANT_NAMES",
    "get_preset",
    "load_configurations",
    "parse_sections",
    # Builder and filters
    "ResumeBuilder",
    "filter_work",
    "filter_skills",
    "matches_keywords",
    # Export orchestration
    "export_resume_variants",
    "ExportResult",
]
