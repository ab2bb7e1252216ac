"""
Intake Context

Responsibilities:
- Represents the resume and job description records consumed by scoring
- Loads records from YAML/JSON files and plain mappings
- Parses pasted job description text into a structured record

Owns: Record data structures and their loading/normalization
Never: Computes scores or makes optimization decisions
"""

from rescore.contexts.intake.exceptions import InvalidRecordStructureError
from rescore.contexts.intake.job_data_structure import JobDescription, load_jobs
from rescore.contexts.intake.resume_data_structure import (
    Education,
    Experience,
    PersonalInfo,
    Project,
    ResumeRecord,
)

__all__ = [
    # Records
    "ResumeRecord",
    "PersonalInfo",
    "Experience",
    "Project",
    "Education",
    "JobDescription",
    # Loading helpers
    "load_jobs",
    "InvalidRecordStructureError",
]
