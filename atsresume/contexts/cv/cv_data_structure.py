"""
CV Data Structures

Defines the immutable records describing a person's professional history.
A CV is the single source of truth that the Building context renders into
resume variants.

Records use snake_case attributes. The canonical keyed format (JSON/YAML) uses
camelCase keys; each record's from_dict() maps between the two, treating
missing or null optional keys as absent and rejecting missing required keys.
"""

from dataclasses import dataclass
from typing import Any, List, Mapping, Optional, Type, TypeVar

from atsresume.contexts.cv.exceptions import FieldTypeError, MissingFieldError

T = TypeVar("T")


# Decoding helpers


def _child_path(path: str, key: str) -> str:
    """Return dotted location of key below path."""
    return f"{path}.{key}" if path else key


def _value(data: Mapping[str, Any], key: str, path: str, required: bool) -> Any:
    value = data.get(key)
    if value is None and required:
        raise MissingFieldError(key, path)
    return value


def _string(data: Mapping[str, Any], key: str, path: str, required: bool = False) -> Optional[str]:
    value = _value(data, key, path, required)
    if value is not None and not isinstance(value, str):
        raise FieldTypeError(key, "string", type(value).__name__, path)
    return value


def _integer(data: Mapping[str, Any], key: str, path: str, required: bool = False) -> Optional[int]:
    value = _value(data, key, path, required)
    # bool is an int subclass but never a valid priority
    if value is not None and (isinstance(value, bool) or not isinstance(value, int)):
        raise FieldTypeError(key, "integer", type(value).__name__, path)
    return value


def _boolean(data: Mapping[str, Any], key: str, path: str, required: bool = False) -> Optional[bool]:
    value = _value(data, key, path, required)
    if value is not None and not isinstance(value, bool):
        raise FieldTypeError(key, "boolean", type(value).__name__, path)
    return value


def _strings(
    data: Mapping[str, Any], key: str, path: str, required: bool = False
) -> Optional[List[str]]:
    value = _value(data, key, path, required)
    if value is None:
        return None
    if not isinstance(value, list):
        raise FieldTypeError(key, "list", type(value).__name__, path)
    for index, item in enumerate(value):
        if not isinstance(item, str):
            raise FieldTypeError(
                f"{key}[{index}]", "string", type(item).__name__, path
            )
    return list(value)


def _record(
    data: Mapping[str, Any], key: str, path: str, record_cls: Type[T], required: bool = False
) -> Optional[T]:
    value = _value(data, key, path, required)
    if value is None:
        return None
    if not isinstance(value, Mapping):
        raise FieldTypeError(key, "mapping", type(value).__name__, path)
    return record_cls.from_dict(value, _child_path(path, key))


def _records(
    data: Mapping[str, Any], key: str, path: str, record_cls: Type[T]
) -> Optional[List[T]]:
    value = _value(data, key, path, required=False)
    if value is None:
        return None
    if not isinstance(value, list):
        raise FieldTypeError(key, "list", type(value).__name__, path)

    records = []
    for index, item in enumerate(value):
        item_path = f"{_child_path(path, key)}[{index}]"
        if not isinstance(item, Mapping):
            raise FieldTypeError(key, "list of mappings", type(item).__name__, item_path)
        records.append(record_cls.from_dict(item, item_path))
    return records


# Leaf records


@dataclass(frozen=True)
class Location:
    """
    Postal location. Every field is optional.

    Only city and state are rendered; a location with neither renders nothing.
    """

    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    postal_code: Optional[str] = None
    country_code: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], path: str = "location") -> "Location":
        return cls(
            address=_string(data, "address", path),
            city=_string(data, "city", path),
            state=_string(data, "state", path),
            postal_code=_string(data, "postalCode", path),
            country_code=_string(data, "countryCode", path),
        )


@dataclass(frozen=True)
class SocialProfile:
    """Social network profile (e.g., LinkedIn, GitHub)."""

    username: str
    url: str
    network: str
    id: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], path: str = "socialProfile") -> "SocialProfile":
        return cls(
            username=_string(data, "username", path, required=True),
            url=_string(data, "url", path, required=True),
            network=_string(data, "network", path, required=True),
            id=_string(data, "id", path),
        )


@dataclass(frozen=True)
class Summary:
    """
    Professional summary variant.

    Attributes:
        priority: Selection precedence (lower value wins)
        summary_type: Free-text tag (e.g., "general", "technical", "management")
        summary: Ordered sentences, rendered joined by single spaces
    """

    priority: int
    summary_type: str
    summary: List[str]

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], path: str = "summary") -> "Summary":
        return cls(
            priority=_integer(data, "priority", path, required=True),
            summary_type=_string(data, "summaryType", path, required=True),
            summary=_strings(data, "summary", path, required=True),
        )


@dataclass(frozen=True)
class Skill:
    """
    Skill entry.

    Keywords are used for matching only and never rendered.
    """

    id: str
    level: str
    name: str
    keywords: Optional[List[str]] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], path: str = "skill") -> "Skill":
        return cls(
            id=_string(data, "id", path, required=True),
            level=_string(data, "level", path, required=True),
            name=_string(data, "name", path, required=True),
            keywords=_strings(data, "keywords", path),
        )


@dataclass(frozen=True)
class Publication:
    """Published work (paper, article, book)."""

    id: str
    release_date: str
    name: str
    url: str
    publisher: Optional[str] = None
    highlights: Optional[List[str]] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], path: str = "publication") -> "Publication":
        return cls(
            id=_string(data, "id", path, required=True),
            release_date=_string(data, "releaseDate", path, required=True),
            name=_string(data, "name", path, required=True),
            url=_string(data, "url", path, required=True),
            publisher=_string(data, "publisher", path),
            highlights=_strings(data, "highlights", path),
        )


@dataclass(frozen=True)
class Story:
    """
    Situation-task-action-result story attached to a position.

    Kept as interview material alongside the CV; resumes never render stories.
    """

    id: str
    title: str
    situation: Optional[str] = None
    task: Optional[str] = None
    action: Optional[str] = None
    result: Optional[str] = None
    summary: Optional[str] = None
    tags: Optional[List[str]] = None
    used: Optional[bool] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], path: str = "story") -> "Story":
        return cls(
            id=_string(data, "id", path, required=True),
            title=_string(data, "title", path, required=True),
            situation=_string(data, "situation", path),
            task=_string(data, "task", path),
            action=_string(data, "action", path),
            result=_string(data, "result", path),
            summary=_string(data, "summary", path),
            tags=_strings(data, "tags", path),
            used=_boolean(data, "used", path),
        )


# Work and volunteer history


@dataclass(frozen=True)
class Position:
    """
    Role held within a work entry.

    Attributes:
        id: Identifier
        start_date: Free-text start date (e.g., "June 2020")
        position: Job title
        end_date: Free-text end date (None means current role)
        location: Overrides the parent work entry's location when set
        highlights: Ordered accomplishment bullets
    """

    id: str
    start_date: str
    position: str
    end_date: Optional[str] = None
    location: Optional[Location] = None
    url: Optional[str] = None
    name: Optional[str] = None
    project: Optional[str] = None
    highlights: Optional[List[str]] = None
    stories: Optional[List[Story]] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], path: str = "position") -> "Position":
        return cls(
            id=_string(data, "id", path, required=True),
            start_date=_string(data, "startDate", path, required=True),
            position=_string(data, "position", path, required=True),
            end_date=_string(data, "endDate", path),
            location=_record(data, "location", path, Location),
            url=_string(data, "url", path),
            name=_string(data, "name", path),
            project=_string(data, "project", path),
            highlights=_strings(data, "highlights", path),
            stories=_records(data, "stories", path, Story),
        )


@dataclass(frozen=True)
class WorkEntry:
    """
    Employer entry.

    When positions is non-empty each position renders as its own entry;
    otherwise the entry itself renders as a single line.
    """

    id: str
    name: str
    start_date: str
    end_date: Optional[str] = None
    location: Optional[Location] = None
    url: Optional[str] = None
    positions: Optional[List[Position]] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], path: str = "work") -> "WorkEntry":
        return cls(
            id=_string(data, "id", path, required=True),
            name=_string(data, "name", path, required=True),
            start_date=_string(data, "startDate", path, required=True),
            end_date=_string(data, "endDate", path),
            location=_record(data, "location", path, Location),
            url=_string(data, "url", path),
            positions=_records(data, "positions", path, Position),
        )


@dataclass(frozen=True)
class VolunteerPosition:
    """Role held within a volunteer entry. Only the title is required."""

    position: str
    id: Optional[str] = None
    url: Optional[str] = None
    name: Optional[str] = None
    project: Optional[str] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    highlights: Optional[List[str]] = None
    location: Optional[Location] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], path: str = "position") -> "VolunteerPosition":
        return cls(
            position=_string(data, "position", path, required=True),
            id=_string(data, "id", path),
            url=_string(data, "url", path),
            name=_string(data, "name", path),
            project=_string(data, "project", path),
            start_date=_string(data, "startDate", path),
            end_date=_string(data, "endDate", path),
            highlights=_strings(data, "highlights", path),
            location=_record(data, "location", path, Location),
        )


@dataclass(frozen=True)
class VolunteerEntry:
    """Volunteer organization entry, mirroring WorkEntry with looser requirements."""

    organization: str
    id: Optional[str] = None
    url: Optional[str] = None
    location: Optional[Location] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    position: Optional[str] = None
    highlights: Optional[List[str]] = None
    positions: Optional[List[VolunteerPosition]] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], path: str = "volunteer") -> "VolunteerEntry":
        return cls(
            organization=_string(data, "organization", path, required=True),
            id=_string(data, "id", path),
            url=_string(data, "url", path),
            location=_record(data, "location", path, Location),
            start_date=_string(data, "startDate", path),
            end_date=_string(data, "endDate", path),
            position=_string(data, "position", path),
            highlights=_strings(data, "highlights", path),
            positions=_records(data, "positions", path, VolunteerPosition),
        )


@dataclass(frozen=True)
class EducationEntry:
    """Degree or program of study."""

    institution: str
    study_type: str
    start_date: str
    end_date: str
    area: Optional[str] = None
    gpa: Optional[str] = None
    courses: Optional[List[str]] = None
    location: Optional[Location] = None
    url: Optional[str] = None
    id: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], path: str = "education") -> "EducationEntry":
        return cls(
            institution=_string(data, "institution", path, required=True),
            study_type=_string(data, "studyType", path, required=True),
            start_date=_string(data, "startDate", path, required=True),
            end_date=_string(data, "endDate", path, required=True),
            area=_string(data, "area", path),
            gpa=_string(data, "gpa", path),
            courses=_strings(data, "courses", path),
            location=_record(data, "location", path, Location),
            url=_string(data, "url", path),
            id=_string(data, "id", path),
        )


# Aggregates


@dataclass(frozen=True)
class Basics:
    """
    Personal and contact details.

    Attributes:
        first_name: Given name
        last_name: Family name
        email: Contact email
        location: Always present, possibly with no fields set
        phone: Optional contact phone
        social_profiles: Optional profiles; the first LinkedIn one is rendered
    """

    first_name: str
    last_name: str
    email: str
    location: Location
    phone: Optional[str] = None
    url: Optional[str] = None
    id: Optional[str] = None
    social_profiles: Optional[List[SocialProfile]] = None
    picture: Optional[str] = None
    label: Optional[str] = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], path: str = "basics") -> "Basics":
        return cls(
            first_name=_string(data, "firstName", path, required=True),
            last_name=_string(data, "lastName", path, required=True),
            email=_string(data, "email", path, required=True),
            location=_record(data, "location", path, Location, required=True),
            phone=_string(data, "phone", path),
            url=_string(data, "url", path),
            id=_string(data, "id", path),
            social_profiles=_records(data, "socialProfiles", path, SocialProfile),
            picture=_string(data, "picture", path),
            label=_string(data, "label", path),
        )


@dataclass(frozen=True)
class CV:
    """
    Root aggregate of a person's professional history.

    Constructed once (decoded or built in memory) and never mutated. Consumers
    derive filtered copies with dataclasses.replace() instead of writing back.
    """

    id: str
    basics: Basics
    summaries: Optional[List[Summary]] = None
    skills: Optional[List[Skill]] = None
    publications: Optional[List[Publication]] = None
    work: Optional[List[WorkEntry]] = None
    education: Optional[List[EducationEntry]] = None
    volunteer: Optional[List[VolunteerEntry]] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], path: str = "") -> "CV":
        """
        Decode a CV from its canonical keyed representation.

        Args:
            data: Mapping parsed from JSON or YAML
            path: Location prefix for error messages (empty for the root)

        Returns:
            CV instance

        Raises:
            MissingFieldError: If any required field is absent or null
            FieldTypeError: If any field holds a value of the wrong type
        """
        return cls(
            id=_string(data, "id", path, required=True),
            basics=_record(data, "basics", path, Basics, required=True),
            summaries=_records(data, "summaries", path, Summary),
            skills=_records(data, "skills", path, Skill),
            publications=_records(data, "publications", path, Publication),
            work=_records(data, "work", path, WorkEntry),
            education=_records(data, "education", path, EducationEntry),
            volunteer=_records(data, "volunteer", path, VolunteerEntry),
        )
