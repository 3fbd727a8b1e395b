#!/usr/bin/env python3
"""
Build ATS-compliant plain-text resumes from a CV file.

Subcommands:
- build: Render one resume (built-in or custom preset, with per-option overrides)
- variants: Print the default, technical and management variants
- export: Write <variant>_resume.txt files for every variant
- presets: List available presets

Examples:
    # Default resume to stdout
    python scripts/build_resume.py build cv.json

    # Technical preset, at most 2 work entries, saved to a file
    python scripts/build_resume.py build cv.json --preset technical --max-work 2 -o tech.txt

    # Only header and skills, filtered by keyword
    python scripts/build_resume.py build cv.json -s header -s skills -k swift -k ios

    # Write all variants to outs/resumes/
    python scripts/build_resume.py export cv.json
"""

import os
from pathlib import Path
from typing import Dict, List, Optional

import typer
from dotenv import load_dotenv
from typing_extensions import Annotated

from atsresume.contexts.building import (
    PRESETS,
    ResumeBuilder,
    ResumeConfiguration,
    ResumeSection,
    export_resume_variants,
    get_preset,
    load_configurations,
)
from atsresume.contexts.cv import DecodeError

load_dotenv()
RESUME_OUTPUT_PATH = Path(os.getenv("RESUME_OUTPUT_PATH", "outs/resumes"))
RESUME_PRESETS_PATH = os.getenv("RESUME_PRESETS_PATH")

app = typer.Typer(
    add_completion=False,
    help="Build ATS-compliant plain-text resumes from a structured CV",
    invoke_without_command=True,
)


@app.callback()
def main(ctx: typer.Context):
    """Show help by default when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


def fail(message: str) -> None:
    """Print error in red and exit with code 1."""
    typer.secho(f"Error: {message}", fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1)


def custom_presets(presets_file: Optional[Path]) -> Dict[str, ResumeConfiguration]:
    """Load custom presets from presets_file, falling back to RESUME_PRESETS_PATH."""
    if presets_file is None and RESUME_PRESETS_PATH:
        presets_file = Path(RESUME_PRESETS_PATH)
    if presets_file is None:
        return {}

    try:
        return load_configurations(presets_file)
    except (FileNotFoundError, ValueError) as e:
        fail(str(e))


def load_builder(cv_file: Path) -> ResumeBuilder:
    try:
        return ResumeBuilder.from_file(cv_file)
    except FileNotFoundError as e:
        fail(str(e))
    except DecodeError as e:
        fail(f"Could not decode {cv_file}\n{e}")
    except ValueError as e:
        fail(str(e))


@app.command("build")
def build_command(
    cv_file: Annotated[Path, typer.Argument(help="Path to CV file (.json, .yaml or .yml)")],
    preset: Annotated[
        str, typer.Option("--preset", "-p", help="Built-in or custom preset name")
    ] = "default",
    presets_file: Annotated[
        Optional[Path],
        typer.Option("--presets-file", help="YAML file with custom presets"),
    ] = None,
    summary_type: Annotated[
        Optional[str], typer.Option("--summary-type", help="Summary type to select")
    ] = None,
    sections: Annotated[
        Optional[List[str]],
        typer.Option("--section", "-s", help="Section to include (repeatable)"),
    ] = None,
    max_work: Annotated[
        Optional[int], typer.Option("--max-work", help="Maximum number of work entries")
    ] = None,
    max_skills: Annotated[
        Optional[int], typer.Option("--max-skills", help="Maximum number of skills")
    ] = None,
    work_keywords: Annotated[
        Optional[List[str]],
        typer.Option("--work-keyword", "-w", help="Keep positions matching keyword (repeatable)"),
    ] = None,
    skill_keywords: Annotated[
        Optional[List[str]],
        typer.Option("--skill-keyword", "-k", help="Keep skills matching keyword (repeatable)"),
    ] = None,
    output: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="Output path (prints to stdout if not specified)"),
    ] = None,
):
    """
    Build a single resume.

    Options given on the command line override the chosen preset.

    Examples:\n
        $ build_resume.py build cv.json

        $ build_resume.py build cv.json --preset management -o manager.txt

        $ build_resume.py build cv.json -s header -s work -w engineer --max-work 3
    """
    presets = custom_presets(presets_file)
    try:
        base = presets[preset] if preset in presets else get_preset(preset)
    except ValueError as e:
        fail(str(e))

    overrides = {
        "summary_type": summary_type,
        "included_sections": sections or None,
        "max_work_entries": max_work,
        "max_skills": max_skills,
        "work_keywords": work_keywords or None,
        "skill_keywords": skill_keywords or None,
    }
    try:
        configuration = ResumeConfiguration.from_dict(
            {key: value for key, value in overrides.items() if value is not None}, base=base
        )
    except ValueError as e:
        fail(str(e))

    builder = load_builder(cv_file)

    if output:
        builder.export_to_text(output, configuration)
        typer.secho("✓ Resume built successfully", fg=typer.colors.GREEN, bold=True)
        typer.echo(f"  Output: {output}")
    else:
        typer.echo(builder.build(configuration))


@app.command("variants")
def variants_command(
    cv_file: Annotated[Path, typer.Argument(help="Path to CV file (.json, .yaml or .yml)")],
):
    """
    Print every built-in variant (default, management, technical).

    Example:\n
        $ build_resume.py variants cv.json
    """
    builder = load_builder(cv_file)

    for name, content in sorted(builder.build_variants().items()):
        typer.secho(f"--- {name.upper()} RESUME ---", bold=True)
        typer.echo(content)
        typer.echo()


@app.command("export")
def export_command(
    cv_file: Annotated[Path, typer.Argument(help="Path to CV file (.json, .yaml or .yml)")],
    output_dir: Annotated[
        Optional[Path],
        typer.Option("--output-dir", "-o", help="Output directory (default: RESUME_OUTPUT_PATH)"),
    ] = None,
    log_dir: Annotated[
        Optional[Path],
        typer.Option("--log-dir", help="Log directory (default: LOGS_PATH/export_<timestamp>)"),
    ] = None,
):
    """
    Write <variant>_resume.txt for every built-in variant.

    Examples:\n
        $ build_resume.py export cv.json

        $ build_resume.py export cv.json -o applications/acme
    """
    output_dir = output_dir if output_dir else RESUME_OUTPUT_PATH
    result = export_resume_variants(cv_file, output_dir, log_dir=log_dir)

    if not result.success:
        fail(result.error)

    typer.secho("✓ Resumes exported successfully", fg=typer.colors.GREEN, bold=True)
    for name, path in result.output_paths.items():
        typer.echo(f"  • {name}: {path}")


@app.command("presets")
def presets_command(
    presets_file: Annotated[
        Optional[Path],
        typer.Option("--presets-file", help="YAML file with custom presets"),
    ] = None,
):
    """
    List built-in and custom presets.

    Examples:\n
        $ build_resume.py presets

        $ build_resume.py presets --presets-file presets.yaml
    """
    sections = [
        ("Built-in", PRESETS),
        ("Custom", custom_presets(presets_file)),
    ]

    for title, presets in sections:
        if not presets:
            continue
        typer.secho(title, bold=True)
        for name, configuration in presets.items():
            included = [s.value for s in ResumeSection if configuration.includes(s)]
            typer.echo(f"  {name}: {', '.join(included)}")
            if configuration.summary_type:
                typer.echo(f"    summary type: {configuration.summary_type}")
            if configuration.work_keywords:
                typer.echo(f"    work keywords: {', '.join(configuration.work_keywords)}")
            if configuration.skill_keywords:
                typer.echo(f"    skill keywords: {', '.join(configuration.skill_keywords)}")


if __name__ == "__main__":
    app()
