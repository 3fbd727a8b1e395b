"""
Integration tests for writing resumes to disk and the export orchestration.
"""

import pytest

from atsresume.contexts.building import (
    TECHNICAL_CONFIGURATION,
    ExportResult,
    ResumeBuilder,
    export_resume_variants,
)


@pytest.mark.integration
def test_export_to_text_creates_parent_dirs(example_cv_path, tmp_path):
    """Test export_to_text creates missing directories."""
    builder = ResumeBuilder.from_file(example_cv_path)
    output = tmp_path / "nested" / "dir" / "technical.txt"

    written = builder.export_to_text(output, TECHNICAL_CONFIGURATION)

    assert written == output
    assert output.read_text(encoding="utf-8") == builder.build(TECHNICAL_CONFIGURATION)


@pytest.mark.integration
def test_export_variants_file_names(example_cv_path, tmp_path):
    """Test variant files are named after their variant."""
    builder = ResumeBuilder.from_file(example_cv_path)

    paths = builder.export_variants(tmp_path / "resumes")

    assert set(paths) == {"default", "technical", "management"}
    for name, path in paths.items():
        assert path.name == f"{name}_resume.txt"
        assert path.read_text(encoding="utf-8") == builder.build_variants()[name]


@pytest.mark.integration
def test_export_keeps_non_ascii_text(tmp_path):
    """Test exported files are UTF-8."""
    builder = ResumeBuilder.from_json(
        {
            "id": "1",
            "basics": {
                "firstName": "José",
                "lastName": "Müller",
                "email": "jose@example.com",
                "location": {"city": "São Paulo"},
            },
        }
    )

    path = builder.export_to_text(tmp_path / "resume.txt")

    assert path.read_text(encoding="utf-8") == "José Müller\njose@example.com"


@pytest.mark.integration
def test_export_resume_variants_success(example_cv_path, tmp_path):
    """Test a successful export result and its log."""
    log_dir = tmp_path / "logs"

    result = export_resume_variants(example_cv_path, tmp_path / "out", log_dir=log_dir)

    assert isinstance(result, ExportResult)
    assert result.success, f"Export failed: {result.error}"
    assert result.error is None
    assert result.cv_path == example_cv_path
    assert result.log_dir == log_dir
    assert result.time_s >= 0
    assert sorted(path.name for path in result.output_paths.values()) == [
        "default_resume.txt",
        "management_resume.txt",
        "technical_resume.txt",
    ]

    log_text = (log_dir / "build.log").read_text(encoding="utf-8")
    assert "[build] Starting export of example_cv.json" in log_text
    assert "exported 3 variants" in log_text


@pytest.mark.integration
def test_export_resume_variants_missing_cv(tmp_path):
    """Test a missing CV fails before logging starts."""
    result = export_resume_variants(tmp_path / "missing.json", tmp_path / "out")

    assert not result.success
    assert "CV file not found" in result.error
    assert result.output_paths == {}
    # No logging session for inputs that do not exist
    assert result.log_dir is None
    assert not (tmp_path / "out").exists()


@pytest.mark.integration
def test_export_resume_variants_malformed_cv(tmp_path):
    """Test a malformed CV is reported in the result."""
    cv_path = tmp_path / "broken.json"
    cv_path.write_text('{"id": "1"}')
    log_dir = tmp_path / "logs"

    result = export_resume_variants(cv_path, tmp_path / "out", log_dir=log_dir)

    assert not result.success
    assert "Missing required field 'basics'" in result.error
    assert result.output_paths == {}

    log_text = (log_dir / "build.log").read_text(encoding="utf-8")
    assert "Failed to export broken" in log_text
