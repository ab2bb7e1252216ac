"""
Targeting context logger.

Provides logging interface for targeting context with automatic [target] prefix.
All targeting modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path
from typing import Any, Dict, Optional

from loguru import logger

from rescore.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[target]"


def setup_targeting_logger(
    log_dir: Path,
    phase: str = "score",
    verbose: bool = False,
    run_info: Optional[Dict[str, Any]] = None,
) -> Path:
    """
    Setup logger for targeting context.

    Args:
        log_dir: Directory for this targeting session
        phase: Phase name for provenance ("score" or "optimize")
        verbose: Echo DEBUG messages to the console as well
        run_info: Inputs recorded in the run header (resume file, job files, ...)

    Returns:
        Path to log file

    Example:
        from rescore.contexts.targeting.logger import setup_targeting_logger, _log_info

        log_file = setup_targeting_logger(
            log_dir, phase="score", run_info={"Resume": resume_file, "Jobs": job_files}
        )
        _log_info("Scoring resume...")
    """
    return _setup_logger(
        context_name="target",
        log_dir=log_dir,
        run_info={"Phase": phase, **(run_info or {})},
        verbose=verbose,
    )


# Wrapper functions with automatic [target] prefix


def _log_info(message: str) -> None:
    """Log info message with [target] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [target] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [target] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [target] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [target] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level targeting-specific logging helpers


def log_scoring_start(resume_name: str, job_count: int, options, log_file: Path) -> None:
    """Log start of a scoring session."""
    _log_info(f"Scoring {resume_name} against {job_count} job description(s)")
    _log_info(f"Log file: {log_file}")
    _log_debug(f"Options: {options}")


def log_scoring_result(job_label: str, result) -> None:
    """
    Log one ATS result with its breakdown.

    Args:
        job_label: Display label of the job scored against
        result: ATSResult from calculate_score()
    """
    breakdown = result.breakdown
    _log_success(f"{job_label}: overall {result.overall_score}/100")
    _log_debug(
        f"  keyword {breakdown.keyword_match:.1f}, skills {breakdown.skills_match:.1f}, "
        f"experience {breakdown.experience_match:.1f}, format {breakdown.format_score:.1f}"
    )
    if result.missing_keywords:
        _log_debug(f"  Missing keywords: {', '.join(result.missing_keywords)}")


def log_batch_result(matches: list, elapsed_time: float) -> None:
    """Log a ranked batch of job matches."""
    _log_success(f"Ranked {len(matches)} job(s) ({elapsed_time:.2f}s)")
    for rank, match in enumerate(matches, 1):
        _log_info(f"  {rank}. {match.overall_score:>3}/100  {match.job_title} @ {match.company}")
