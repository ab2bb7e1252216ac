"""
Logger setup shared by the rescore contexts.

Each scoring or optimization run gets its own log directory holding a DEBUG
log file, plus a console sink. The log opens with a run header recording what
was scored (resume, job files, presets) and how the run was launched.
Context-specific wrappers live in contexts/{context}/logger.py.
"""

import sys
from pathlib import Path
from typing import Any, Dict, Optional

from dotenv import load_dotenv
from loguru import logger

from rescore import __version__

load_dotenv()

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {message}"
CONSOLE_FORMAT = (
    "{time:HH:mm:ss} | <level>{level: <7}</level> | <level>{message}</level>"
)
HEADER_RULE = "=" * 80

# Lists longer than this are summarized by count in the run header
MAX_LISTED_INPUTS = 5


def setup_logger(
    context_name: str,
    log_dir: Path,
    run_info: Optional[Dict[str, Any]] = None,
    verbose: bool = False,
) -> Path:
    """
    Configure loguru sinks for one run and write the run header.

    Args:
        context_name: Context identifier, used as the log file stem (e.g. "target")
        log_dir: Directory for this run, e.g. outs/logs/target_20251114_123456
        run_info: Run inputs for the header (resume file, job files, presets, ...)
        verbose: Echo DEBUG messages to the console as well

    Returns:
        Path to log file
    """
    log_dir.mkdir(exist_ok=True, parents=True)
    log_file = log_dir / f"{context_name}.log"

    logger.remove()
    logger.add(log_file, format=FILE_FORMAT, level="DEBUG")
    logger.add(
        sys.stdout,
        format=CONSOLE_FORMAT,
        level="DEBUG" if verbose else "INFO",
        colorize=True,
    )

    log_provenance(run_info)

    return log_file


def _describe(value: Any) -> str:
    if value is None or value == "" or value == []:
        return "(default)"
    if isinstance(value, (list, tuple)):
        if len(value) > MAX_LISTED_INPUTS:
            shown = ", ".join(str(v) for v in value[:MAX_LISTED_INPUTS])
            return f"{shown} (+{len(value) - MAX_LISTED_INPUTS} more)"
        return ", ".join(str(v) for v in value)
    return str(value)


def log_provenance(run_info: Optional[Dict[str, Any]] = None) -> None:
    """
    Log the run header: tool version, command line, working directory and inputs.

    Unset inputs are shown as "(default)" so a log always states where the
    resume and jobs came from.
    """
    logger.info(HEADER_RULE)
    logger.info(f"rescore {__version__} (Python {sys.version.split()[0]})")
    logger.info(f"Command: {' '.join(sys.argv)}")
    logger.info(f"Working directory: {Path.cwd()}")

    for key, value in (run_info or {}).items():
        logger.info(f"{key}: {_describe(value)}")

    logger.info(HEADER_RULE)
