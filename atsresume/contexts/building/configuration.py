"""
Resume Configuration and Presets

Defines which sections a resume contains and how work/skill collections are
filtered before formatting. Three presets ship built in ("default",
"technical", "management"); further presets can be loaded from a YAML file.

Examples:
    # Built-in preset
    >>> config = get_preset("technical")

    # Custom presets file (each entry may start from a built-in preset)
    >>> presets = load_configurations(Path("presets.yaml"))
    >>> presets["backend"].work_keywords
    ('backend', 'api')
"""

from dataclasses import dataclass, field, fields, replace
from enum import Enum
from pathlib import Path
from typing import Any, Dict, FrozenSet, Iterable, Mapping, Optional, Tuple, Union

from omegaconf import OmegaConf
from omegaconf.errors import OmegaConfBaseException
from yaml import YAMLError


class ResumeSection(str, Enum):
    """
    Resume sections that can be included.

    Definition order is the canonical render order.
    """

    HEADER = "header"
    SUMMARY = "summary"
    WORK = "work"
    EDUCATION = "education"
    SKILLS = "skills"
    VOLUNTEER = "volunteer"
    PUBLICATIONS = "publications"

    @classmethod
    def all_sections(cls) -> FrozenSet["ResumeSection"]:
        return frozenset(cls)


def _keywords(value: Optional[Iterable[str]]) -> Optional[Tuple[str, ...]]:
    if value is None:
        return None
    if isinstance(value, str):
        return (value,)
    return tuple(value)


@dataclass(frozen=True)
class ResumeConfiguration:
    """
    Options controlling resume assembly.

    Attributes:
        summary_type: Select summaries with this summaryType (None: any type)
        included_sections: Sections to render (default: all)
        max_work_entries: Keep at most this many work entries after filtering
        max_skills: Keep at most this many skills after filtering
        work_keywords: Keep positions whose title or highlights contain any keyword
        skill_keywords: Keep skills whose name or keywords contain any keyword
    """

    summary_type: Optional[str] = None
    included_sections: FrozenSet[ResumeSection] = field(
        default_factory=ResumeSection.all_sections
    )
    max_work_entries: Optional[int] = None
    max_skills: Optional[int] = None
    work_keywords: Optional[Tuple[str, ...]] = None
    skill_keywords: Optional[Tuple[str, ...]] = None

    def __post_init__(self):
        # Normalize sets/lists passed by callers so the value stays immutable
        object.__setattr__(
            self,
            "included_sections",
            frozenset(ResumeSection(section) for section in self.included_sections),
        )
        object.__setattr__(self, "work_keywords", _keywords(self.work_keywords))
        object.__setattr__(self, "skill_keywords", _keywords(self.skill_keywords))

        for name in ("max_work_entries", "max_skills"):
            value = getattr(self, name)
            if value is None:
                continue
            # bool is an int subclass but never a valid cap
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{name} must be an integer, got {type(value).__name__}")
            if value < 0:
                raise ValueError(f"{name} must be zero or positive, got {value}")

    def includes(self, section: ResumeSection) -> bool:
        return section in self.included_sections

    @classmethod
    def from_dict(
        cls,
        options: Mapping[str, Any],
        base: Optional["ResumeConfiguration"] = None,
    ) -> "ResumeConfiguration":
        """
        Build a configuration from a mapping of option names to values.

        Options not given keep the value from base (DEFAULT_CONFIGURATION if
        base is None). Section names are given as strings.

        Args:
            options: Mapping with keys among the dataclass field names
            base: Configuration to start from

        Returns:
            New ResumeConfiguration

        Raises:
            ValueError: If an option or section name is unknown
        """
        if base is None:
            base = DEFAULT_CONFIGURATION

        known = {f.name for f in fields(cls)}
        unknown = sorted(str(key) for key in set(options) - known)
        if unknown:
            raise ValueError(
                f"Unknown configuration option(s): {', '.join(unknown)}. "
                f"Available options: {', '.join(sorted(known))}"
            )

        overrides = dict(options)
        if overrides.get("included_sections") is None:
            overrides.pop("included_sections", None)
        else:
            overrides["included_sections"] = parse_sections(overrides["included_sections"])

        return replace(base, **overrides)


def parse_sections(names: Iterable[Union[str, ResumeSection]]) -> FrozenSet[ResumeSection]:
    """
    Convert section names to ResumeSection members.

    Raises:
        ValueError: If a name is not a known section
    """
    if isinstance(names, str):
        names = [names]

    sections = set()
    for name in names:
        try:
            sections.add(ResumeSection(name))
        except ValueError:
            available = [section.value for section in ResumeSection]
            raise ValueError(
                f"Unknown resume section '{name}'. Available sections: {available}"
            ) from None
    return frozenset(sections)


# Built-in presets

DEFAULT_CONFIGURATION = ResumeConfiguration()

TECHNICAL_CONFIGURATION = ResumeConfiguration(
    summary_type="technical",
    included_sections=frozenset(
        {
            ResumeSection.HEADER,
            ResumeSection.SUMMARY,
            ResumeSection.WORK,
            ResumeSection.SKILLS,
            ResumeSection.EDUCATION,
        }
    ),
    work_keywords=("engineering", "developer", "architect", "technical", "software"),
)

MANAGEMENT_CONFIGURATION = ResumeConfiguration(
    summary_type="management",
    included_sections=frozenset(
        {
            ResumeSection.HEADER,
            ResumeSection.SUMMARY,
            ResumeSection.WORK,
            ResumeSection.EDUCATION,
            ResumeSection.SKILLS,
        }
    ),
    work_keywords=("manager", "lead", "director", "strategy", "team"),
)

PRESETS: Dict[str, ResumeConfiguration] = {
    "default": DEFAULT_CONFIGURATION,
    "technical": TECHNICAL_CONFIGURATION,
    "management": MANAGEMENT_CONFIGURATION,
}

# Variants produced by ResumeBuilder.build_variants()
VARIANT_NAMES: Tuple[str, ...] = tuple(PRESETS)


def get_preset(name: str) -> ResumeConfiguration:
    """
    Look up a built-in preset by name.

    Raises:
        ValueError: If name is not a built-in preset
    """
    if name not in PRESETS:
        raise ValueError(f"Preset '{name}' not found. Available presets: {list(PRESETS)}")
    return PRESETS[name]


def load_configurations(config_path: Path) -> Dict[str, ResumeConfiguration]:
    """
    Load named configurations from a YAML presets file.

    Each top-level key names a configuration. Its options use the
    ResumeConfiguration field names, plus an optional "base" naming the
    built-in preset to start from (default: "default").

    Example file:
        backend:
          base: technical
          work_keywords: [backend, api]
          max_skills: 10

    Args:
        config_path: Path to YAML file

    Returns:
        Dict mapping configuration names to ResumeConfiguration

    Raises:
        FileNotFoundError: If config_path does not exist
        ValueError: If the file is not valid YAML, or its structure, a base
            preset or an option is invalid
    """
    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Presets file not found: {config_path}")

    try:
        nested = OmegaConf.to_container(OmegaConf.load(config_path), resolve=True)
    except (OmegaConfBaseException, YAMLError) as e:
        raise ValueError(f"Presets file is not valid YAML: {config_path}\n{e}") from e

    if not isinstance(nested, dict):
        raise ValueError(f"Presets file must map preset names to options: {config_path}")

    configurations = {}
    for name, options in nested.items():
        if options is None:
            options = {}
        if not isinstance(options, dict):
            raise ValueError(f"Preset '{name}' must map option names to values")
        options = dict(options)

        base_name = options.pop("base", "default")
        configurations[str(name)] = ResumeConfiguration.from_dict(
            options, base=get_preset(base_name)
        )

    return configurations
