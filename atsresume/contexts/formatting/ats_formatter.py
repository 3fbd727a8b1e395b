"""
ATS Formatter

Converts CV substructures into plain-text resume sections that Applicant
Tracking Systems parse reliably: uppercase section headers, one entry per line,
"- " bullets, no markup.

Every method is total. A method returns None when there is nothing to render,
so callers can omit the section instead of emitting an empty header.
"""

from typing import List, Optional

from atsresume.contexts.cv.cv_data_structure import (
    Basics,
    EducationEntry,
    Location,
    Publication,
    Skill,
    Summary,
    VolunteerEntry,
    WorkEntry,
)

PRESENT = "Present"
BULLET = "- "
TITLE_SEPARATOR = " — "
LINKEDIN_NETWORK = "linkedin"

SUMMARY_HEADER = "PROFESSIONAL SUMMARY"
WORK_HEADER = "WORK EXPERIENCE"
EDUCATION_HEADER = "EDUCATION"
SKILLS_HEADER = "SKILLS"
VOLUNTEER_HEADER = "VOLUNTEER EXPERIENCE"
PUBLICATIONS_HEADER = "PUBLICATIONS"


def _bullets(highlights: Optional[List[str]]) -> List[str]:
    return [f"{BULLET}{highlight}" for highlight in highlights or []]


def _section(header: str, blocks: List[str]) -> str:
    """Join entry blocks under a header, separated by blank lines."""
    return (f"{header}\n" + "\n\n".join(blocks)).strip()


class ATSFormatter:
    """
    Stateless formatter producing one plain-text block per resume section.

    Examples:
        >>> formatter = ATSFormatter()
        >>> formatter.format_date_range("June 2020", None)
        'June 2020 - Present'
        >>> formatter.format_location(Location(city="Boston", state="MA"))
        'Boston, MA'
    """

    def format_location(self, location: Optional[Location]) -> Optional[str]:
        """
        Format a location as "City, State".

        Only city and state are rendered. Returns None when neither is set.
        """
        if location is None:
            return None

        parts = [part for part in (location.city, location.state) if part is not None]
        return ", ".join(parts) if parts else None

    def format_date_range(self, start_date: str, end_date: Optional[str] = None) -> str:
        """Format a date range, using "Present" for an open end."""
        end = end_date if end_date is not None else PRESENT
        return f"{start_date} - {end}"

    def _location_suffix(self, location: Optional[Location]) -> str:
        formatted = self.format_location(location)
        return f", {formatted}" if formatted is not None else ""

    def format_header(self, basics: Basics) -> str:
        """
        Format the header: full name, then phone, email and LinkedIn URL.

        Each contact item sits on its own line. The LinkedIn URL comes from the
        first social profile whose network is "linkedin" (case-insensitive).
        """
        contact_info = []
        if basics.phone is not None:
            contact_info.append(basics.phone)
        contact_info.append(basics.email)

        linkedin = next(
            (
                profile
                for profile in basics.social_profiles or []
                if profile.network.lower() == LINKEDIN_NETWORK
            ),
            None,
        )
        if linkedin is not None:
            contact_info.append(linkedin.url)

        return "\n".join([basics.full_name, "\n".join(contact_info)])

    def format_summary(
        self, summaries: Optional[List[Summary]], summary_type: Optional[str] = None
    ) -> Optional[str]:
        """
        Format the professional summary.

        Args:
            summaries: Candidate summaries
            summary_type: Keep only summaries with this type (None keeps all)

        Returns:
            Header plus the sentences of the lowest-priority survivor joined by
            spaces, or None if no summary survives
        """
        if not summaries:
            return None

        candidates = summaries
        if summary_type is not None:
            candidates = [s for s in summaries if s.summary_type == summary_type]

        if not candidates:
            return None

        # min() keeps the first of equal priorities, matching a stable sort
        selected = min(candidates, key=lambda s: s.priority)
        return f"{SUMMARY_HEADER}\n" + " ".join(selected.summary)

    def format_work_experience(self, work: Optional[List[WorkEntry]]) -> Optional[str]:
        """
        Format the work experience section.

        Entries with positions render one block per position:
            Title — Employer, City, ST (Start - End)
            - highlight
        Entries without positions render a single line for the employer.
        """
        if not work:
            return None

        blocks = []
        for company in work:
            if company.positions:
                for position in company.positions:
                    location = self._location_suffix(position.location or company.location)
                    dates = self.format_date_range(position.start_date, position.end_date)
                    lines = [
                        f"{position.position}{TITLE_SEPARATOR}{company.name}{location} ({dates})"
                    ]
                    lines.extend(_bullets(position.highlights))
                    blocks.append("\n".join(lines))
            else:
                location = self._location_suffix(company.location)
                dates = self.format_date_range(company.start_date, company.end_date)
                blocks.append(f"{company.name}{location} ({dates})")

        return _section(WORK_HEADER, blocks)

    def format_education(self, education: Optional[List[EducationEntry]]) -> Optional[str]:
        """Format the education section, one degree line per entry."""
        if not education:
            return None

        blocks = []
        for entry in education:
            degree_line = entry.study_type
            if entry.area is not None:
                degree_line += f" in {entry.area}"
            location = self._location_suffix(entry.location)
            dates = self.format_date_range(entry.start_date, entry.end_date)
            degree_line += f"{TITLE_SEPARATOR}{entry.institution}{location} ({dates})"
            if entry.gpa is not None:
                degree_line += f" | GPA: {entry.gpa}"

            lines = [degree_line]
            if entry.courses:
                lines.append(f"Relevant Coursework: {', '.join(entry.courses)}")
            blocks.append("\n".join(lines))

        return _section(EDUCATION_HEADER, blocks)

    def format_skills(self, skills: Optional[List[Skill]]) -> Optional[str]:
        """Format skill names as a single comma-separated line."""
        if not skills:
            return None

        return f"{SKILLS_HEADER}\n" + ", ".join(skill.name for skill in skills)

    def format_volunteer_experience(
        self, volunteer: Optional[List[VolunteerEntry]]
    ) -> Optional[str]:
        """
        Format the volunteer experience section.

        Mirrors work experience with the organization in place of the employer.
        Dates render only when a start date is known, and an entry without
        positions renders its own optional title and highlights.
        """
        if not volunteer:
            return None

        blocks = []
        for entry in volunteer:
            if entry.positions:
                for position in entry.positions:
                    location = self._location_suffix(position.location or entry.location)
                    dates = self._optional_dates(position.start_date, position.end_date)
                    lines = [
                        f"{position.position}{TITLE_SEPARATOR}{entry.organization}{location}{dates}"
                    ]
                    lines.extend(_bullets(position.highlights))
                    blocks.append("\n".join(lines))
            else:
                location = self._location_suffix(entry.location)
                dates = self._optional_dates(entry.start_date, entry.end_date)
                title = f"{entry.position}{TITLE_SEPARATOR}" if entry.position is not None else ""
                lines = [f"{title}{entry.organization}{location}{dates}"]
                lines.extend(_bullets(entry.highlights))
                blocks.append("\n".join(lines))

        return _section(VOLUNTEER_HEADER, blocks)

    def _optional_dates(self, start_date: Optional[str], end_date: Optional[str]) -> str:
        if start_date is None:
            return ""
        return f" ({self.format_date_range(start_date, end_date)})"

    def format_publications(self, publications: Optional[List[Publication]]) -> Optional[str]:
        """Format publications as "Name, Publisher (Date)" with bulleted highlights."""
        if not publications:
            return None

        blocks = []
        for publication in publications:
            line = publication.name
            if publication.publisher is not None:
                line += f", {publication.publisher}"
            line += f" ({publication.release_date})"

            lines = [line]
            lines.extend(_bullets(publication.highlights))
            blocks.append("\n".join(lines))

        return _section(PUBLICATIONS_HEADER, blocks)
