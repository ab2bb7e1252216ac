#!/usr/bin/env python3
"""
ATS Resume Scoring CLI

Scores a resume against one or more job descriptions and prints (or saves)
the analysis. With several jobs the results are ranked by overall score.

Job files may be YAML/JSON records or pasted job text (.md/.txt). Without
--resume, RESUME_PATH from .env is used, falling back to the built-in
sample resume.

Usage:
    # Score against every job file in JOBS_PATH
    python scripts/score_resume.py --resume data/resume.yaml

    # Score against one job, text report
    python scripts/score_resume.py data/jobs/backend.yaml --resume data/resume.yaml

    # Rank several jobs with presets
    python scripts/score_resume.py data/jobs/*.md -p level_senior -p mode_strict

    # HTML report saved to a file
    python scripts/score_resume.py data/jobs/backend.yaml --format html -o report.html

    # Prioritized optimization plan
    python scripts/score_resume.py data/jobs/backend.yaml --plan --target-score 85
"""

import json
import os
import time
from pathlib import Path
from typing import List, Optional

import typer
from dotenv import load_dotenv
from typing_extensions import Annotated

from rescore.contexts.intake import InvalidRecordStructureError, ResumeRecord, load_jobs
from rescore.contexts.targeting import (
    ATSScoreCalculator,
    resolve_options,
)
from rescore.contexts.targeting.ats_scorer import DEFAULT_EXPECTED_YEARS, EXPERIENCE_LEVELS
from rescore.contexts.targeting.logger import (
    _log_info,
    _log_warning,
    log_batch_result,
    log_scoring_result,
    log_scoring_start,
    setup_targeting_logger,
)
from rescore.contexts.targeting.reporting import optimization_plan_to_text
from rescore.utils import now

load_dotenv()
LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))
RESUME_PATH = os.getenv("RESUME_PATH")
JOBS_PATH = Path(os.getenv("JOBS_PATH", "data/jobs"))

JOB_FILE_SUFFIXES = (".yaml", ".yml", ".json", ".md", ".txt")

app = typer.Typer(
    help="Score a resume against job descriptions",
    add_completion=False,
)


def load_resume(resume_file: Optional[Path]) -> ResumeRecord:
    """Load the resume from --resume, RESUME_PATH, or the built-in sample."""
    if resume_file is None and RESUME_PATH:
        resume_file = Path(RESUME_PATH)
    if resume_file is None:
        return ResumeRecord.default()
    return ResumeRecord.from_file(resume_file)


def find_job_files(jobs_dir: Path) -> List[Path]:
    """Job description files directly inside jobs_dir, sorted by name."""
    if not jobs_dir.is_dir():
        return []
    return sorted(p for p in jobs_dir.iterdir() if p.suffix.lower() in JOB_FILE_SUFFIXES)


@app.command()
def main(
    job_files: Annotated[
        Optional[List[Path]],
        typer.Argument(
            help="Job description files (defaults to every job file in JOBS_PATH)",
            exists=True,
            dir_okay=False,
            resolve_path=True,
        ),
    ] = None,
    resume_file: Annotated[
        Optional[Path],
        typer.Option(
            "--resume",
            "-r",
            help="Resume YAML/JSON file (defaults to RESUME_PATH, then the built-in sample)",
            exists=True,
            dir_okay=False,
            resolve_path=True,
        ),
    ] = None,
    presets: Annotated[
        Optional[List[str]],
        typer.Option(
            "--preset",
            "-p",
            help="Option preset to apply, repeatable (e.g. level_senior, mode_strict)",
        ),
    ] = None,
    experience_level: Annotated[
        Optional[str],
        typer.Option("--level", "-l", help=f"Experience level: {', '.join(EXPERIENCE_LEVELS)}"),
    ] = None,
    strict: Annotated[
        Optional[bool],
        typer.Option("--strict/--lenient", help="Weight profile (overrides presets)"),
    ] = None,
    check_format: Annotated[
        Optional[bool],
        typer.Option("--check-format/--no-check-format", help="Score resume formatting"),
    ] = None,
    export_format: Annotated[
        str,
        typer.Option("--format", "-f", help="Report format: text, json, html"),
    ] = "text",
    output: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="Write the report to this file instead of stdout"),
    ] = None,
    plan: Annotated[
        bool,
        typer.Option("--plan", help="Print an optimization plan for the first job"),
    ] = False,
    target_score: Annotated[
        int,
        typer.Option("--target-score", help="Target score reported in the optimization plan"),
    ] = 80,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show debug logging on the console"),
    ] = False,
):
    """Score a resume against job descriptions."""
    log_dir = LOGS_PATH / f"target_{now()}"
    log_file = setup_targeting_logger(
        log_dir,
        phase="score",
        verbose=verbose,
        run_info={
            "Resume": resume_file or RESUME_PATH,
            "Jobs": job_files or JOBS_PATH,
            "Presets": presets,
        },
    )

    try:
        resume = load_resume(resume_file)
        jobs = load_jobs(job_files or find_job_files(JOBS_PATH))
        options = resolve_options(
            presets or [],
            overrides={
                "experience_level": experience_level,
                "strict_mode": strict,
                "include_format_analysis": check_format,
            },
        )
    except (InvalidRecordStructureError, ValueError, OSError) as e:
        typer.echo(f"ERROR: {e}", err=True)
        raise typer.Exit(1)

    if options.experience_level and options.experience_level not in EXPERIENCE_LEVELS:
        _log_warning(
            f"Unknown experience level '{options.experience_level}', expecting "
            f"{DEFAULT_EXPECTED_YEARS} years (known: {', '.join(EXPERIENCE_LEVELS)})"
        )

    if not jobs:
        typer.echo(f"ERROR: No job description files found in {JOBS_PATH}", err=True)
        raise typer.Exit(1)

    calculator = ATSScoreCalculator()
    log_scoring_start(resume.personal.name or "resume", len(jobs), options, log_file)

    if plan:
        optimization_plan = calculator.generate_optimization_plan(
            resume, jobs[0], target_score=target_score, options=options
        )
        emit(optimization_plan_to_text(optimization_plan), output)
        return

    start_time = time.time()
    if len(jobs) == 1:
        result = calculator.calculate_score(resume, jobs[0], options)
        log_scoring_result(jobs[0].label(), result)
        reports = [result]
    else:
        reports = calculator.analyze_multiple_jobs(resume, jobs, options)
        log_batch_result(reports, time.time() - start_time)

    try:
        if export_format.lower() == "json" and len(reports) > 1:
            content = json.dumps([report.to_dict() for report in reports], indent=2)
        else:
            content = "\n".join(
                calculator.export_analysis(report, export_format) for report in reports
            )
    except ValueError as e:
        typer.echo(f"ERROR: {e}", err=True)
        raise typer.Exit(1)

    emit(content, output)


def emit(content: str, output: Optional[Path]) -> None:
    """Write content to output (creating parent directories) or echo it."""
    if output:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(content, encoding="utf-8")
        _log_info(f"Report saved to {output}")
        typer.echo(f"✓ Report saved to {output}")
    else:
        typer.echo(content)


if __name__ == "__main__":
    app()
