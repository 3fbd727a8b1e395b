"""
CV Context

Responsibilities:
- Defines the immutable CV record types (basics, summaries, work, education, ...)
- Decodes the canonical keyed format (JSON/YAML) into CV records
- Reports structural problems as MissingFieldError / FieldTypeError / DecodeError

Owns: CV schema, decoding, loading from files
Never: Formats text or decides what a resume contains
"""

from atsresume.contexts.cv.cv_data_structure import (
    CV,
    Basics,
    EducationEntry,
    Location,
    Position,
    Publication,
    Skill,
    SocialProfile,
    Story,
    Summary,
    VolunteerEntry,
    VolunteerPosition,
    WorkEntry,
)
from atsresume.contexts.cv.exceptions import (
    CVError,
    DecodeError,
    FieldTypeError,
    MissingFieldError,
)
from atsresume.contexts.cv.loader import decode_cv, load_cv

__all__ = [
    # Record types
    "CV",
    "Basics",
    "Location",
    "SocialProfile",
    "Summary",
    "Skill",
    "Publication",
    "Story",
    "Position",
    "WorkEntry",
    "EducationEntry",
    "VolunteerPosition",
    "VolunteerEntry",
    # Errors
    "CVError",
    "MissingFieldError",
    "FieldTypeError",
    "DecodeError",
    # Loading
    "decode_cv",
    "load_cv",
]
