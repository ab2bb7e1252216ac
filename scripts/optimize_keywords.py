#!/usr/bin/env python3
"""
Keyword Optimization CLI

Keyword analysis, per-section keyword suggestions, industry keyword
recommendations and a preview of keywords woven into resume text.

Usage:
    # Analyze resume keywords against a job and the technology table
    python scripts/optimize_keywords.py analyze --job data/jobs/backend.md --industry technology

    # CSV of suggestions
    python scripts/optimize_keywords.py analyze --industry finance --format csv -o kw.csv

    # Suggestions for one section
    python scripts/optimize_keywords.py suggest summary "Engineer with experience in APIs" \\
        --role "software engineer"

    # Industry recommendations
    python scripts/optimize_keywords.py industry marketing

    # Preview keyword integration
    python scripts/optimize_keywords.py optimize Kubernetes Terraform --resume data/resume.yaml
"""

import os
import random
from pathlib import Path
from typing import List, Optional

import typer
from dotenv import load_dotenv
from typing_extensions import Annotated

from rescore.contexts.intake import InvalidRecordStructureError, JobDescription, ResumeRecord
from rescore.contexts.targeting import KeywordOptimizer, OptimizationOptions
from rescore.contexts.targeting.logger import _log_info, _log_success, setup_targeting_logger
from rescore.utils import now

load_dotenv()
LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))
RESUME_PATH = os.getenv("RESUME_PATH")

app = typer.Typer(
    help="Analyze and optimize resume keywords",
    add_completion=False,
)


def load_resume(resume_file: Optional[Path]) -> ResumeRecord:
    """Load the resume from --resume, RESUME_PATH, or the built-in sample."""
    if resume_file is None and RESUME_PATH:
        resume_file = Path(RESUME_PATH)
    if resume_file is None:
        return ResumeRecord.default()
    return ResumeRecord.from_file(resume_file)


def start_session(verbose: bool, **run_info) -> Path:
    return setup_targeting_logger(
        LOGS_PATH / f"target_{now()}", phase="optimize", verbose=verbose, run_info=run_info
    )


ResumeOption = Annotated[
    Optional[Path],
    typer.Option(
        "--resume",
        "-r",
        help="Resume YAML/JSON file (defaults to RESUME_PATH, then the built-in sample)",
        exists=True,
        dir_okay=False,
        resolve_path=True,
    ),
]
IndustryOption = Annotated[
    Optional[str],
    typer.Option("--industry", "-i", help="Industry table: technology, marketing, finance"),
]
RoleOption = Annotated[
    Optional[str],
    typer.Option("--role", help='Target role, e.g. "software engineer"'),
]
VerboseOption = Annotated[
    bool,
    typer.Option("--verbose", "-v", help="Show debug logging on the console"),
]


@app.command()
def analyze(
    job_file: Annotated[
        Optional[Path],
        typer.Option(
            "--job",
            "-j",
            help="Job description file whose text is analyzed",
            exists=True,
            dir_okay=False,
            resolve_path=True,
        ),
    ] = None,
    resume_file: ResumeOption = None,
    industry: IndustryOption = None,
    role: RoleOption = None,
    max_suggestions: Annotated[
        int,
        typer.Option("--max-suggestions", help="Maximum number of missing keywords suggested"),
    ] = 20,
    emerging: Annotated[
        bool,
        typer.Option("--emerging", help="Also suggest emerging technologies"),
    ] = False,
    export_format: Annotated[
        str,
        typer.Option("--format", "-f", help="Report format: text, json, csv"),
    ] = "text",
    output: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="Write the report to this file instead of stdout"),
    ] = None,
    verbose: VerboseOption = False,
):
    """Analyze resume keywords against a job description and/or an industry."""
    start_session(verbose, Resume=resume_file or RESUME_PATH, Job=job_file)

    try:
        resume = load_resume(resume_file)
        job_text = JobDescription.from_file(job_file).description if job_file else None
    except (InvalidRecordStructureError, ValueError, OSError) as e:
        typer.echo(f"ERROR: {e}", err=True)
        raise typer.Exit(1)

    optimizer = KeywordOptimizer()
    analysis = optimizer.analyze_keywords(
        resume,
        job_text,
        OptimizationOptions(
            industry=industry,
            role=role,
            target_keyword_count=max_suggestions,
            include_emerging_tech=emerging,
        ),
    )
    _log_success(
        f"Keyword score {analysis.score:.1f}/100 "
        f"({len(analysis.missing_keywords)} missing, {len(analysis.overused_keywords)} overused)"
    )

    try:
        content = optimizer.export_analysis(analysis, export_format)
    except ValueError as e:
        typer.echo(f"ERROR: {e}", err=True)
        raise typer.Exit(1)

    if output:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(content, encoding="utf-8")
        _log_info(f"Report saved to {output}")
        typer.echo(f"✓ Report saved to {output}")
    else:
        typer.echo(content)


@app.command()
def suggest(
    section: Annotated[
        str, typer.Argument(help="Resume section: experience, projects, skills, summary")
    ],
    content: Annotated[str, typer.Argument(help="Current text of the section")],
    industry: IndustryOption = None,
    role: RoleOption = None,
    seed: Annotated[
        Optional[int],
        typer.Option("--seed", help="Random seed for reproducible action-verb suggestions"),
    ] = None,
):
    """Suggest keywords for one resume section."""
    optimizer = KeywordOptimizer(rng=random.Random(seed))
    try:
        suggestions = optimizer.suggest_section_keywords(
            section, content, OptimizationOptions(industry=industry, role=role)
        )
    except ValueError as e:
        typer.echo(f"ERROR: {e}", err=True)
        raise typer.Exit(1)

    if not suggestions:
        typer.echo(f"No suggestions for {section}.")
        return

    typer.echo(f"\n=== {section.title()} Suggestions ({len(suggestions)}) ===")
    for s in suggestions:
        typer.echo(f"  [{s.priority.upper():<6}] {s.keyword:<25} {s.relevance:>3}  {s.context}")


@app.command()
def industry(
    name: Annotated[str, typer.Argument(help="Industry: technology, marketing, finance")],
    role: RoleOption = None,
):
    """Show must-have, recommended and emerging keywords for an industry."""
    recommendations = KeywordOptimizer().get_industry_recommendations(name, role)

    if not recommendations.must_have:
        typer.echo(f"ERROR: No keyword table for industry '{name}'", err=True)
        raise typer.Exit(1)

    for heading, suggestions in (
        ("Must Have", recommendations.must_have),
        ("Recommended", recommendations.recommended),
        ("Emerging", recommendations.emerging),
    ):
        typer.echo(f"\n=== {heading} ({len(suggestions)}) ===")
        typer.echo(f"  {', '.join(s.keyword for s in suggestions)}" if suggestions else "  None")


@app.command()
def optimize(
    keywords: Annotated[List[str], typer.Argument(help="Keywords to weave into the resume")],
    resume_file: ResumeOption = None,
    verbose: VerboseOption = False,
):
    """Preview target keywords woven into the profile, bullets and project descriptions."""
    start_session(verbose, Resume=resume_file or RESUME_PATH, Keywords=keywords)

    try:
        resume = load_resume(resume_file)
    except (InvalidRecordStructureError, ValueError, OSError) as e:
        typer.echo(f"ERROR: {e}", err=True)
        raise typer.Exit(1)

    _, changes = KeywordOptimizer().optimize_content(resume, keywords)
    _log_success(f"{len(changes)} change(s) proposed")

    if not changes:
        typer.echo("No changes: every keyword is already present or does not fit.")
        return

    for change in changes:
        typer.secho(f"\n{change.section} (+{', '.join(change.added_keywords)})", bold=True)
        typer.echo(f"  - {change.original}")
        typer.secho(f"  + {change.optimized}", fg=typer.colors.GREEN)


if __name__ == "__main__":
    app()
