"""Unit tests for ResumeBuilder assembly and filtering."""

import pytest

from atsresume.contexts.building import (
    DEFAULT_CONFIGURATION,
    MANAGEMENT_CONFIGURATION,
    TECHNICAL_CONFIGURATION,
    ResumeBuilder,
    ResumeConfiguration,
    ResumeSection,
    filter_skills,
    filter_work,
    matches_keywords,
)
from atsresume.contexts.cv import Position, Skill, WorkEntry, load_cv


def make_work(*positions, name="Company"):
    return WorkEntry(id=name, name=name, start_date="2020", positions=list(positions))


def make_position(title, highlights=None):
    return Position(id=title, start_date="2020", position=title, highlights=highlights)


@pytest.fixture
def example_builder(example_cv_path):
    return ResumeBuilder.from_file(example_cv_path)


class TestMatchesKeywords:
    """Test case-insensitive substring keyword matching."""

    @pytest.mark.unit
    def test_substring_match(self):
        """Test keywords match as substrings."""
        assert matches_keywords(["engineer"], ["Software Engineering"])

    @pytest.mark.unit
    def test_case_insensitive(self):
        """Test keyword matching ignores case."""
        assert matches_keywords(["SWIFT"], ["swiftui"])

    @pytest.mark.unit
    def test_no_match(self):
        """Test unrelated keywords do not match."""
        assert not matches_keywords(["python"], ["Swift", "Objective-C"])

    @pytest.mark.unit
    def test_empty_inputs(self):
        """Test empty keywords or strings never match."""
        assert not matches_keywords([], ["anything"])
        assert not matches_keywords(["anything"], [])


class TestFilterWork:
    """Test work entry filtering."""

    @pytest.mark.unit
    def test_keywords_filter_positions(self):
        """Test only matching positions are kept."""
        work = [
            make_work(
                make_position("Software Engineer"),
                make_position("Marketing Coordinator"),
            )
        ]
        config = ResumeConfiguration(work_keywords=("engineer", "software"))

        filtered = filter_work(work, config)

        assert [p.position for p in filtered[0].positions] == ["Software Engineer"]
        # Source entry untouched
        assert len(work[0].positions) == 2

    @pytest.mark.unit
    def test_highlights_are_searched(self):
        """Test position highlights are matched as well as titles."""
        work = [make_work(make_position("Analyst", highlights=["Built Python tooling"]))]
        config = ResumeConfiguration(work_keywords=("python",))

        assert filter_work(work, config) == work

    @pytest.mark.unit
    def test_entry_without_matching_positions_is_dropped(self):
        """Test entries left without positions are dropped."""
        work = [
            make_work(make_position("Engineer"), name="Kept"),
            make_work(make_position("Cashier"), name="Dropped"),
            make_work(name="Empty"),
        ]
        config = ResumeConfiguration(work_keywords=("engineer",))

        assert [entry.name for entry in filter_work(work, config)] == ["Kept"]

    @pytest.mark.unit
    def test_flat_entry_bypasses_keywords(self):
        """Test entries without a positions list are never filtered."""
        flat = WorkEntry(id="f", name="Freelance", start_date="2018")
        config = ResumeConfiguration(work_keywords=("engineer",))

        assert filter_work([flat], config) == [flat]

    @pytest.mark.unit
    def test_cap_keeps_first_entries(self):
        """Test the work cap keeps entries in CV order."""
        work = [make_work(name=f"Company {i}") for i in range(4)]
        config = ResumeConfiguration(max_work_entries=2)

        assert [entry.name for entry in filter_work(work, config)] == ["Company 0", "Company 1"]

    @pytest.mark.unit
    def test_cap_applies_after_keywords(self):
        """Test the work cap counts only surviving entries."""
        work = [
            make_work(make_position("Cashier"), name="A"),
            make_work(make_position("Engineer"), name="B"),
            make_work(make_position("Engineer II"), name="C"),
        ]
        config = ResumeConfiguration(work_keywords=("engineer",), max_work_entries=1)

        assert [entry.name for entry in filter_work(work, config)] == ["B"]

    @pytest.mark.unit
    def test_nothing_left_is_absent(self):
        """Test empty filter results are None."""
        assert filter_work(None, DEFAULT_CONFIGURATION) is None
        assert filter_work([], DEFAULT_CONFIGURATION) is None
        assert filter_work([make_work()], ResumeConfiguration(max_work_entries=0)) is None


class TestFilterSkills:
    """Test skill filtering."""

    @pytest.fixture
    def skills(self):
        return [
            Skill(id="1", level="Expert", name="Swift", keywords=["iOS"]),
            Skill(id="2", level="Advanced", name="Kotlin", keywords=["Android"]),
            Skill(id="3", level="Advanced", name="iOS Development"),
        ]

    @pytest.mark.unit
    def test_name_or_keywords_match(self, skills):
        """Test skills match on name or their own keywords."""
        config = ResumeConfiguration(skill_keywords=("ios",))
        assert [s.name for s in filter_skills(skills, config)] == ["Swift", "iOS Development"]

    @pytest.mark.unit
    def test_cap(self, skills):
        """Test the skill cap keeps skills in CV order."""
        config = ResumeConfiguration(max_skills=1)
        assert [s.name for s in filter_skills(skills, config)] == ["Swift"]

    @pytest.mark.unit
    def test_no_match_is_absent(self, skills):
        """Test no matching skills gives None."""
        config = ResumeConfiguration(skill_keywords=("rust",))
        assert filter_skills(skills, config) is None


class TestBuild:
    """Test resume assembly."""

    @pytest.mark.unit
    def test_header_only_for_minimal_cv(self, minimal_cv):
        """Test a CV with only basics renders just the header."""
        resume = ResumeBuilder(minimal_cv).build()
        assert resume == "John Smith\njohn@example.com"

    @pytest.mark.unit
    def test_header_only_excludes_content_sections(self, example_builder):
        """Test header-only configuration hides sections the CV does have."""
        config = ResumeConfiguration(included_sections={ResumeSection.HEADER})

        resume = example_builder.build(config)

        assert resume == (
            "Jane Doe\n(555) 123-4567\njane.doe@example.com\nhttps://linkedin.com/in/janedoe"
        )
        for header in ("WORK EXPERIENCE", "EDUCATION", "SKILLS"):
            assert header not in resume

    @pytest.mark.unit
    def test_default_build_for_sample_cv(self, sample_cv):
        """Test full default output for an in-memory CV."""
        resume = ResumeBuilder(sample_cv).build()

        assert resume == (
            "Jane Doe\n"
            "(555) 123-4567\n"
            "jane.doe@example.com\n"
            "\n"
            "PROFESSIONAL SUMMARY\n"
            "Experienced software engineer with 5+ years building scalable applications. "
            "Passionate about clean code and user experience.\n"
            "\n"
            "WORK EXPERIENCE\n"
            "Senior Software Engineer — Tech Company Inc, San Francisco, CA "
            "(January 2020 - Present)\n"
            "- Led development of new mobile app features\n"
            "- Reduced crash rate by 40%\n"
            "\n"
            "EDUCATION\n"
            "Bachelor of Science in Computer Science — State University "
            "(September 2014 - May 2018)\n"
            "\n"
            "SKILLS\n"
            "Swift, iOS Development"
        )

    @pytest.mark.unit
    def test_sections_follow_canonical_order(self, example_builder):
        """Test sections render in canonical order."""
        resume = example_builder.build()
        headers = [
            "PROFESSIONAL SUMMARY",
            "WORK EXPERIENCE",
            "EDUCATION",
            "SKILLS",
            "VOLUNTEER EXPERIENCE",
            "PUBLICATIONS",
        ]
        positions = [resume.index(header) for header in headers]

        assert positions == sorted(positions)
        assert resume.startswith("Jane Doe\n")

    @pytest.mark.unit
    def test_section_selection(self, sample_cv):
        """Test excluded sections are not rendered."""
        config = ResumeConfiguration(
            included_sections={ResumeSection.SKILLS, ResumeSection.HEADER}
        )
        resume = ResumeBuilder(sample_cv).build(config)

        assert resume.endswith("\n\nSKILLS\nSwift, iOS Development")
        assert "WORK EXPERIENCE" not in resume
        assert "PROFESSIONAL SUMMARY" not in resume

    @pytest.mark.unit
    def test_without_header(self, sample_cv):
        """Test the header can be excluded."""
        config = ResumeConfiguration(included_sections={ResumeSection.SKILLS})
        assert ResumeBuilder(sample_cv).build(config) == "SKILLS\nSwift, iOS Development"

    @pytest.mark.unit
    def test_no_sections_gives_empty_resume(self, sample_cv):
        """Test no included sections gives an empty resume."""
        config = ResumeConfiguration(included_sections=frozenset())
        assert ResumeBuilder(sample_cv).build(config) == ""

    @pytest.mark.unit
    def test_unmatched_summary_type_omits_section(self, sample_cv):
        """Test an unmatched summary type omits the summary."""
        config = ResumeConfiguration(summary_type="management")
        assert "PROFESSIONAL SUMMARY" not in ResumeBuilder(sample_cv).build(config)

    @pytest.mark.unit
    def test_filtered_out_work_omits_section(self, sample_cv):
        """Test work filtered to nothing omits the section."""
        config = ResumeConfiguration(work_keywords=("marketing",))
        assert "WORK EXPERIENCE" not in ResumeBuilder(sample_cv).build(config)

    @pytest.mark.unit
    def test_name_and_email_appear_once(self, example_builder):
        """Test contact details appear exactly once."""
        resume = example_builder.build()

        assert resume.count("Jane Doe") == 1
        assert resume.count("jane.doe@example.com") == 1
        assert resume.count("https://linkedin.com/in/janedoe") == 1
        assert "github.com" not in resume

    @pytest.mark.unit
    def test_repeated_builds_are_identical(self, example_builder):
        """Test builds are byte-identical across calls."""
        first = example_builder.build(TECHNICAL_CONFIGURATION)
        example_builder.build(MANAGEMENT_CONFIGURATION)

        assert example_builder.build(TECHNICAL_CONFIGURATION) == first

    @pytest.mark.unit
    def test_cv_is_not_modified(self, example_builder, example_cv_path):
        """Test building variants never mutates the CV."""
        before = example_builder.cv

        example_builder.build_variants()

        assert example_builder.cv is before
        assert before == load_cv(example_cv_path)
        assert len(before.work[0].positions) == 2

    @pytest.mark.unit
    def test_stories_are_not_rendered(self, example_builder):
        """Test position stories stay out of the resume."""
        assert "Turning around a late launch" not in example_builder.build()


class TestPresets:
    """Test built-in preset output on the example CV."""

    @pytest.mark.unit
    def test_technical_variant(self, example_builder):
        """Test technical preset output on the example CV."""
        resume = example_builder.build(TECHNICAL_CONFIGURATION)

        assert "iOS engineer specializing in Swift" in resume
        assert "Engineering Manager — Tech Company Inc" in resume
        assert "Senior Software Engineer — Tech Company Inc, Remote" in resume
        assert "Startup Labs, Oakland, CA (June 2016 - December 2018)" in resume
        assert "Marketing Coordinator" not in resume
        assert "VOLUNTEER EXPERIENCE" not in resume
        assert "PUBLICATIONS" not in resume

    @pytest.mark.unit
    def test_management_variant(self, example_builder):
        """Test management preset output on the example CV."""
        resume = example_builder.build(MANAGEMENT_CONFIGURATION)

        assert "Engineering manager who grows teams" in resume
        assert "Engineering Manager — Tech Company Inc" in resume
        assert "Senior Software Engineer" not in resume
        assert "Marketing Coordinator" not in resume

    @pytest.mark.unit
    def test_default_variant_uses_lowest_priority_summary(self, example_builder):
        """Test default preset picks the lowest priority summary."""
        resume = example_builder.build()

        assert "iOS engineer specializing in Swift" in resume
        assert "Engineer and team lead" not in resume
        assert "Marketing Coordinator — Retail Corp (June 2014 - May 2016)" in resume

    @pytest.mark.unit
    def test_variants_keys(self, minimal_cv):
        """Test variants always have the three built-in keys."""
        variants = ResumeBuilder(minimal_cv).build_variants()

        assert set(variants) == {"default", "technical", "management"}
        assert all(text == "John Smith\njohn@example.com" for text in variants.values())

    @pytest.mark.unit
    def test_variants_match_individual_builds(self, example_builder):
        """Test each variant equals a build with its preset."""
        variants = example_builder.build_variants()

        assert variants["default"] == example_builder.build(DEFAULT_CONFIGURATION)
        assert variants["technical"] == example_builder.build(TECHNICAL_CONFIGURATION)
        assert variants["management"] == example_builder.build(MANAGEMENT_CONFIGURATION)


class TestFromJson:
    """Test builder construction from JSON sources."""

    @pytest.mark.unit
    def test_from_json_text(self):
        """Test builder construction from JSON text."""
        text = (
            '{"id": "7", "basics": {"firstName": "Ana", "lastName": "Lee",'
            ' "email": "ana@example.com", "location": {"city": "Denver", "state": "CO"}}}'
        )
        builder = ResumeBuilder.from_json(text)

        assert builder.cv.id == "7"
        assert builder.build() == "Ana Lee\nana@example.com"

    @pytest.mark.unit
    def test_from_mapping(self):
        """Test builder construction from a parsed mapping."""
        builder = ResumeBuilder.from_json(
            {
                "id": "8",
                "basics": {
                    "firstName": "Sam",
                    "lastName": "Park",
                    "email": "sam@example.com",
                    "location": {},
                },
                "summaries": [{"priority": 1, "summaryType": "general", "summary": ["Hi."]}],
            }
        )

        assert builder.build() == "Sam Park\nsam@example.com\n\nPROFESSIONAL SUMMARY\nHi."

