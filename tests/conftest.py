"""Shared fixtures for atsresume tests."""

from pathlib import Path

import pytest
from loguru import logger

from atsresume.contexts.cv import (
    CV,
    Basics,
    EducationEntry,
    Location,
    Position,
    Skill,
    Summary,
    WorkEntry,
)

FIXTURES_PATH = Path(__file__).parent / "fixtures"


@pytest.fixture(autouse=True)
def reset_logger():
    """Drop sinks added during a test so they never outlive captured streams."""
    yield
    logger.remove()


@pytest.fixture
def fixtures_path() -> Path:
    return FIXTURES_PATH


@pytest.fixture
def example_cv_path() -> Path:
    return FIXTURES_PATH / "example_cv.json"


@pytest.fixture
def minimal_cv() -> CV:
    """CV with only basics."""
    return CV(
        id="1",
        basics=Basics(
            first_name="John",
            last_name="Smith",
            email="john@example.com",
            location=Location(city="Boston", state="MA"),
        ),
    )


@pytest.fixture
def sample_cv() -> CV:
    """CV built purely in memory with one of each common section."""
    position = Position(
        id="1",
        start_date="January 2020",
        position="Senior Software Engineer",
        highlights=[
            "Led development of new mobile app features",
            "Reduced crash rate by 40%",
        ],
    )
    return CV(
        id="1",
        basics=Basics(
            first_name="Jane",
            last_name="Doe",
            email="jane.doe@example.com",
            phone="(555) 123-4567",
            location=Location(city="San Francisco", state="CA"),
        ),
        summaries=[
            Summary(
                priority=1,
                summary_type="general",
                summary=[
                    "Experienced software engineer with 5+ years building scalable applications.",
                    "Passionate about clean code and user experience.",
                ],
            )
        ],
        skills=[
            Skill(id="1", level="Expert", name="Swift"),
            Skill(id="2", level="Advanced", name="iOS Development"),
        ],
        work=[
            WorkEntry(
                id="1",
                name="Tech Company Inc",
                start_date="January 2020",
                location=Location(city="San Francisco", state="CA"),
                positions=[position],
            )
        ],
        education=[
            EducationEntry(
                institution="State University",
                study_type="Bachelor of Science",
                start_date="September 2014",
                end_date="May 2018",
                area="Computer Science",
            )
        ],
    )
