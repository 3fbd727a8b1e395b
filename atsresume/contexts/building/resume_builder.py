"""
Resume Builder

Assembles ATS-compliant plain-text resumes from a CV according to a
ResumeConfiguration: selects sections, filters work and skills by keyword,
caps their counts, and joins the formatted sections with blank lines.

The CV is never modified. Filtering derives new lists (and new WorkEntry
records via dataclasses.replace), so repeated builds are independent and
byte-identical for the same configuration.
"""

from dataclasses import replace
from pathlib import Path
from typing import Callable, Dict, Iterable, List, Optional, Union

from atsresume.contexts.building.configuration import (
    DEFAULT_CONFIGURATION,
    PRESETS,
    VARIANT_NAMES,
    ResumeConfiguration,
    ResumeSection,
)
from atsresume.contexts.building.logger import _log_debug, _log_info
from atsresume.contexts.cv.cv_data_structure import CV, Skill, WorkEntry
from atsresume.contexts.cv.loader import CVSource, decode_cv, load_cv
from atsresume.contexts.formatting.ats_formatter import ATSFormatter

SECTION_SEPARATOR = "\n\n"
RESUME_FILE_SUFFIX = "_resume.txt"


# Filtering


def matches_keywords(keywords: Iterable[str], strings: Iterable[str]) -> bool:
    """
    Check whether any keyword occurs in any string.

    Matching is case-insensitive substring containment, not token matching:
    "engineer" matches "Software Engineering".
    """
    lowered = [s.lower() for s in strings]
    return any(keyword.lower() in s for keyword in keywords for s in lowered)


def filter_work(
    work: Optional[List[WorkEntry]], configuration: ResumeConfiguration
) -> Optional[List[WorkEntry]]:
    """
    Apply keyword filter and count cap to work entries.

    With work keywords set, positions are kept when their title or a highlight
    matches. Entries without a positions list are never keyword-filtered;
    entries left with no positions are dropped. The cap keeps the first
    max_work_entries entries in original order.

    Returns:
        Filtered entries, or None if nothing remains
    """
    if work is None:
        return None

    keywords = configuration.work_keywords
    if keywords:
        filtered = []
        for entry in work:
            if entry.positions is None:
                filtered.append(entry)
                continue

            positions = [
                position
                for position in entry.positions
                if matches_keywords(keywords, [position.position, *(position.highlights or [])])
            ]
            if positions:
                filtered.append(replace(entry, positions=positions))
        _log_debug(f"Work keyword filter kept {len(filtered)} of {len(work)} entries")
        work = filtered

    if configuration.max_work_entries is not None:
        work = work[: configuration.max_work_entries]

    return work or None


def filter_skills(
    skills: Optional[List[Skill]], configuration: ResumeConfiguration
) -> Optional[List[Skill]]:
    """
    Apply keyword filter and count cap to skills.

    With skill keywords set, a skill is kept when its name or one of its own
    keywords matches.

    Returns:
        Filtered skills, or None if nothing remains
    """
    if skills is None:
        return None

    keywords = configuration.skill_keywords
    if keywords:
        kept = [
            skill
            for skill in skills
            if matches_keywords(keywords, [skill.name, *(skill.keywords or [])])
        ]
        _log_debug(f"Skill keyword filter kept {len(kept)} of {len(skills)} skills")
        skills = kept

    if configuration.max_skills is not None:
        skills = skills[: configuration.max_skills]

    return skills or None


class ResumeBuilder:
    """
    Builds resume text from an immutable CV.

    Examples:
        builder = ResumeBuilder.from_file(Path("cv.json"))
        resume = builder.build(TECHNICAL_CONFIGURATION)
        variants = builder.build_variants()  # {"default": ..., "technical": ..., ...}
    """

    def __init__(self, cv: CV, formatter: Optional[ATSFormatter] = None):
        self._cv = cv
        self._formatter = formatter if formatter is not None else ATSFormatter()

    @property
    def cv(self) -> CV:
        return self._cv

    @classmethod
    def from_json(cls, data: CVSource) -> "ResumeBuilder":
        """
        Create a builder from JSON text/bytes or an already parsed mapping.

        Raises:
            DecodeError: If the source is malformed or misses required fields
        """
        return cls(decode_cv(data))

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "ResumeBuilder":
        """
        Create a builder from a .json, .yaml or .yml CV file.

        Raises:
            FileNotFoundError: If path does not exist
            DecodeError: If the file content is malformed
        """
        cv = load_cv(path)
        _log_debug(f"Loaded CV '{cv.id}' from {path}")
        return cls(cv)

    def _section_renderers(
        self, configuration: ResumeConfiguration
    ) -> Dict[ResumeSection, Callable[[], Optional[str]]]:
        cv = self._cv
        formatter = self._formatter
        return {
            ResumeSection.HEADER: lambda: formatter.format_header(cv.basics),
            ResumeSection.SUMMARY: lambda: formatter.format_summary(
                cv.summaries, summary_type=configuration.summary_type
            ),
            ResumeSection.WORK: lambda: formatter.format_work_experience(
                filter_work(cv.work, configuration)
            ),
            ResumeSection.EDUCATION: lambda: formatter.format_education(cv.education),
            ResumeSection.SKILLS: lambda: formatter.format_skills(
                filter_skills(cv.skills, configuration)
            ),
            ResumeSection.VOLUNTEER: lambda: formatter.format_volunteer_experience(cv.volunteer),
            ResumeSection.PUBLICATIONS: lambda: formatter.format_publications(cv.publications),
        }

    def build(self, configuration: ResumeConfiguration = DEFAULT_CONFIGURATION) -> str:
        """
        Generate a resume with the given configuration.

        Sections render in canonical order (header, summary, work, education,
        skills, volunteer, publications) regardless of how the configuration's
        section set was built. Sections with nothing to render are omitted.

        Args:
            configuration: Resume options (default: all sections, no filtering)

        Returns:
            Resume text with sections separated by a blank line
        """
        renderers = self._section_renderers(configuration)

        sections: List[str] = []
        for section in ResumeSection:
            if not configuration.includes(section):
                continue

            text = renderers[section]()
            if text is None:
                _log_debug(f"Omitting empty section: {section.value}")
                continue
            sections.append(text)

        _log_debug(f"Built resume for CV '{self._cv.id}' with {len(sections)} sections")
        return SECTION_SEPARATOR.join(sections)

    def build_variants(self) -> Dict[str, str]:
        """
        Generate one resume per built-in preset.

        Returns:
            Dict with keys "default", "technical" and "management"
        """
        return {name: self.build(PRESETS[name]) for name in VARIANT_NAMES}

    def export_to_text(
        self,
        path: Union[str, Path],
        configuration: ResumeConfiguration = DEFAULT_CONFIGURATION,
    ) -> Path:
        """
        Write a resume to a UTF-8 text file, creating parent directories.

        Returns:
            Path written
        """
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.build(configuration), encoding="utf-8")
        _log_info(f"Resume saved to: {path}")
        return path

    def export_variants(self, directory: Union[str, Path]) -> Dict[str, Path]:
        """
        Write every variant to "<variant>_resume.txt" inside directory.

        Returns:
            Dict mapping variant name to written path
        """
        directory = Path(directory)
        directory.mkdir(parents=True, exist_ok=True)

        output_paths = {}
        for name, content in self.build_variants().items():
            file_path = directory / f"{name}{RESUME_FILE_SUFFIX}"
            file_path.write_text(content, encoding="utf-8")
            _log_debug(f"Wrote {name} variant to {file_path}")
            output_paths[name] = file_path

        return output_paths
