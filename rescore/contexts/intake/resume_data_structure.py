"""
Resume data structure for the Intake context.

Provides ResumeRecord and its component records. Records can be built from
plain mappings (snake_case or the camelCase keys of the original resume JSON),
from YAML/JSON files, or from the built-in default resume.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterable, List, Mapping, Optional

from omegaconf import DictConfig, OmegaConf

from rescore.contexts.intake.exceptions import InvalidRecordStructureError


def _as_mapping(data: Any, record_type: str, source_path: Optional[Path] = None) -> dict:
    """
    Convert OmegaConf containers to plain dicts and validate the root shape.

    Raises:
        InvalidRecordStructureError: If data is not a mapping
    """
    if isinstance(data, DictConfig):
        data = OmegaConf.to_container(data, resolve=True)
    if not isinstance(data, Mapping):
        raise InvalidRecordStructureError(
            f"Expected a mapping at the root, got {type(data).__name__}",
            record_type=record_type,
            source_path=source_path,
        )
    return dict(data)


def _field(data: Mapping, *keys: str, default: Any = None) -> Any:
    """Return the first present, non-None value among alternative key spellings."""
    for key in keys:
        value = data.get(key)
        if value is not None:
            return value
    return default


def _text(data: Mapping, *keys: str) -> str:
    return str(_field(data, *keys, default=""))


def _items(value: Any) -> list:
    """List form of a sequence field; scalars and mappings contribute nothing."""
    if isinstance(value, (str, Mapping)) or not isinstance(value, Iterable):
        return []
    return list(value)


def _string_list(data: Mapping, *keys: str) -> List[str]:
    value = _field(data, *keys, default=[])
    if isinstance(value, str):
        return [value]
    return [str(item) for item in _items(value) if item is not None]


def _record_list(data: Mapping, *keys: str) -> List[Mapping]:
    return [item for item in _items(_field(data, *keys)) if isinstance(item, Mapping)]


@dataclass
class PersonalInfo:
    """Contact and identity details."""

    name: str = ""
    role: str = ""
    location: str = ""
    email: str = ""
    phone: str = ""
    linkedin: str = ""
    github: str = ""
    portfolio: str = ""

    @classmethod
    def from_dict(cls, data: Mapping) -> "PersonalInfo":
        return cls(
            name=_text(data, "name"),
            role=_text(data, "role"),
            location=_text(data, "location"),
            email=_text(data, "email"),
            phone=_text(data, "phone"),
            linkedin=_text(data, "linkedin"),
            github=_text(data, "github"),
            portfolio=_text(data, "portfolio"),
        )


@dataclass
class Experience:
    """
    One work-history entry.

    Attributes:
        company: Employer name
        title: Job title
        dates: Date range, e.g. "2019 — 2022"
        bullets: Achievement bullets in display order
    """

    company: str = ""
    title: str = ""
    dates: str = ""
    bullets: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping) -> "Experience":
        return cls(
            company=_text(data, "company"),
            title=_text(data, "title"),
            dates=_text(data, "dates"),
            bullets=_string_list(data, "bullets"),
        )


@dataclass
class Project:
    """Side project or portfolio item; tech is free text (e.g. "React, Node.js")."""

    name: str = ""
    desc: str = ""
    tech: str = ""

    @classmethod
    def from_dict(cls, data: Mapping) -> "Project":
        return cls(
            name=_text(data, "name"),
            desc=_text(data, "desc", "description"),
            tech=_text(data, "tech"),
        )


@dataclass
class Education:
    degree: str = ""
    school: str = ""
    dates: str = ""
    details: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping) -> "Education":
        return cls(
            degree=_text(data, "degree"),
            school=_text(data, "school"),
            dates=_text(data, "dates"),
            details=_string_list(data, "details"),
        )


@dataclass
class ResumeRecord:
    """
    Complete resume consumed by the scoring engine.

    The scoring engine treats records as read-only. Every section is optional:
    absent sections load as empty strings or lists.

    Factory methods:
        from_dict(data) - Build from a mapping (snake_case or camelCase keys)
        from_file(path) - Load from a YAML or JSON file
        default() - The built-in resume
    """

    personal: PersonalInfo = field(default_factory=PersonalInfo)
    profile: str = ""
    tech_stack: List[str] = field(default_factory=list)
    experience: List[Experience] = field(default_factory=list)
    projects: List[Project] = field(default_factory=list)
    education: List[Education] = field(default_factory=list)
    leadership: List[str] = field(default_factory=list)
    open_source: List[str] = field(default_factory=list)

    # =========================================================================
    # FACTORY METHODS
    # =========================================================================

    @classmethod
    def from_dict(cls, data: Any, source_path: Optional[Path] = None) -> "ResumeRecord":
        """
        Build a ResumeRecord from a nested mapping.

        Args:
            data: Mapping (or OmegaConf DictConfig) in the resume JSON shape
            source_path: File the data came from, used in error messages

        Returns:
            ResumeRecord with missing sections defaulted to empty

        Raises:
            InvalidRecordStructureError: If data is not a mapping
        """
        data = _as_mapping(data, "resume", source_path)
        personal = _field(data, "personal", default={})
        if not isinstance(personal, Mapping):
            personal = {}

        return cls(
            personal=PersonalInfo.from_dict(personal),
            profile=_text(data, "profile"),
            tech_stack=_string_list(data, "tech_stack", "techStack"),
            experience=[Experience.from_dict(e) for e in _record_list(data, "experience")],
            projects=[Project.from_dict(p) for p in _record_list(data, "projects")],
            education=[Education.from_dict(e) for e in _record_list(data, "education")],
            leadership=_string_list(data, "leadership"),
            open_source=_string_list(data, "open_source", "openSource"),
        )

    @classmethod
    def from_file(cls, file_path: Path) -> "ResumeRecord":
        """
        Load a resume from a YAML or JSON file.

        JSON is loaded through the YAML parser (JSON is valid YAML).

        Args:
            file_path: Path to resume file

        Returns:
            ResumeRecord instance
        """
        file_path = Path(file_path)
        return cls.from_dict(OmegaConf.load(file_path), source_path=file_path)

    @classmethod
    def default(cls) -> "ResumeRecord":
        """Return the built-in resume."""
        # Import here to keep the constant table out of module import time
        from rescore.contexts.intake.defaults import DEFAULT_RESUME

        return cls.from_dict(DEFAULT_RESUME)

    # =========================================================================
    # PUBLIC API METHODS
    # =========================================================================

    def to_dict(self) -> dict:
        """
        Serialize to the camelCase resume JSON shape.

        Returns:
            Dict with keys personal, techStack, profile, experience, projects,
            leadership, openSource, education
        """
        return {
            "personal": vars(self.personal).copy(),
            "techStack": list(self.tech_stack),
            "profile": self.profile,
            "experience": [
                {
                    "company": e.company,
                    "title": e.title,
                    "dates": e.dates,
                    "bullets": list(e.bullets),
                }
                for e in self.experience
            ],
            "projects": [{"name": p.name, "desc": p.desc, "tech": p.tech} for p in self.projects],
            "leadership": list(self.leadership),
            "openSource": list(self.open_source),
            "education": [
                {
                    "degree": e.degree,
                    "school": e.school,
                    "dates": e.dates,
                    "details": list(e.details),
                }
                for e in self.education
            ],
        }
