"""
Job description data structure for the Intake context.

Provides the JobDescription record scored against by the Targeting context,
plus a naive parser for job text pasted by a user.
"""

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterable, List, Optional

from omegaconf import OmegaConf

from rescore.contexts.intake.resume_data_structure import (
    _as_mapping,
    _string_list,
    _text,
)

DEFAULT_MAX_KEYWORDS = 25

# Metadata lines recognized at the top of pasted job text ("Company: Acme")
METADATA_PATTERN = re.compile(r"^(Company|Role|Title)\s*:\s*(.+)$", re.IGNORECASE)

BULLET_PATTERN = re.compile(r"^[\*\-•]\s+(.+)$")

# Headings: "# Requirements", "**Requirements**", "Requirements:"
HEADING_PATTERN = re.compile(r"^(?:#+\s*(.+?)|\*\*(.+?)\*\*:?|([A-Za-z][^:]{0,60}):)\s*$")

PREFERRED_HEADING_MARKERS = ("preferred", "nice to have", "bonus", "plus")


@dataclass
class JobDescription:
    """
    Job posting scored against a resume.

    Factory methods:
        from_dict(data) - Build from a mapping (snake_case or camelCase keys)
        from_file(path) - Load from a YAML or JSON file
        from_text(text) - Naive parse of pasted job description text
    """

    title: str = ""
    company: str = ""
    description: str = ""
    requirements: List[str] = field(default_factory=list)
    preferred_skills: List[str] = field(default_factory=list)
    keywords: List[str] = field(default_factory=list)

    # =========================================================================
    # FACTORY METHODS
    # =========================================================================

    @classmethod
    def from_dict(cls, data: Any, source_path: Optional[Path] = None) -> "JobDescription":
        """
        Build a JobDescription from a mapping.

        Raises:
            InvalidRecordStructureError: If data is not a mapping
        """
        data = _as_mapping(data, "job", source_path)
        return cls(
            title=_text(data, "title"),
            company=_text(data, "company"),
            description=_text(data, "description"),
            requirements=_string_list(data, "requirements"),
            preferred_skills=_string_list(data, "preferred_skills", "preferredSkills"),
            keywords=_string_list(data, "keywords"),
        )

    @classmethod
    def from_file(cls, file_path: Path) -> "JobDescription":
        """
        Load a job description from a YAML/JSON record, or parse a .md/.txt file
        as pasted text.

        Args:
            file_path: Path to job file

        Returns:
            JobDescription instance
        """
        file_path = Path(file_path)
        if file_path.suffix.lower() in (".md", ".txt"):
            return cls.from_text(file_path.read_text(encoding="utf-8"))
        return cls.from_dict(OmegaConf.load(file_path), source_path=file_path)

    @classmethod
    def from_text(
        cls,
        text: str,
        title: str = "",
        company: str = "",
        max_keywords: int = DEFAULT_MAX_KEYWORDS,
    ) -> "JobDescription":
        """
        Parse pasted job description text into a JobDescription.

        Parsing is deliberately naive:
        - "Company:", "Role:" / "Title:" lines fill company and title
        - Otherwise the first non-empty line (stripped of # and **) is the title
        - Bullets (-, *, •) under a heading mentioning "preferred", "nice to have",
          "bonus" or "plus" become preferred skills; all other bullets become
          requirements
        - Keywords are the first max_keywords extracted keywords of the text

        Args:
            text: Raw job description text
            title: Title override
            company: Company override
            max_keywords: Maximum number of keywords to keep

        Returns:
            JobDescription with description set to the full text
        """
        # Import here to avoid a hard dependency of intake on targeting at import time
        from rescore.contexts.targeting.keyword_extraction import extract_keywords

        requirements = []
        preferred = []
        in_preferred_section = False
        first_line = ""

        for line in text.split("\n"):
            stripped = line.strip()
            if not stripped:
                continue
            if not first_line:
                first_line = stripped

            metadata_match = METADATA_PATTERN.match(stripped)
            if metadata_match:
                key, value = metadata_match.group(1).lower(), metadata_match.group(2).strip()
                if key == "company":
                    company = company or value
                else:
                    title = title or value
                continue

            bullet_match = BULLET_PATTERN.match(stripped)
            if bullet_match:
                item = bullet_match.group(1).strip()
                (preferred if in_preferred_section else requirements).append(item)
                continue

            heading_match = HEADING_PATTERN.match(stripped)
            if heading_match:
                heading = next(g for g in heading_match.groups() if g).lower()
                in_preferred_section = any(m in heading for m in PREFERRED_HEADING_MARKERS)

        if not title and first_line:
            title = first_line.lstrip("#").strip()
            if title.startswith("**") and title.endswith("**"):
                title = title[2:-2]

        return cls(
            title=title,
            company=company,
            description=text,
            requirements=requirements,
            preferred_skills=preferred,
            keywords=extract_keywords(text)[:max_keywords],
        )

    # =========================================================================
    # PUBLIC API METHODS
    # =========================================================================

    def label(self) -> str:
        """Display label, e.g. "Backend Engineer @ Acme"."""
        if self.company:
            return f"{self.title} @ {self.company}"
        return self.title or "(untitled job)"

    def to_dict(self) -> dict:
        """Serialize to the camelCase job JSON shape."""
        return {
            "title": self.title,
            "company": self.company,
            "description": self.description,
            "requirements": list(self.requirements),
            "preferredSkills": list(self.preferred_skills),
            "keywords": list(self.keywords),
        }


def load_jobs(file_paths: Iterable[Path]) -> List[JobDescription]:
    """
    Load several job description files, preserving order.

    Args:
        file_paths: Job files (.yaml/.yml/.json records or .md/.txt pasted text)

    Returns:
        List of JobDescription instances
    """
    return [JobDescription.from_file(Path(p)) for p in file_paths]
