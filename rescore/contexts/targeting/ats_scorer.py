"""
ATS Score Calculator

Estimates how an Applicant Tracking System would score a resume against a job
description. The overall score is a weighted sum of four sub-scores:

- keyword match: job keywords + common ATS terms found in the resume text
- skills match: resume tech stack vs. job requirements and preferred skills
- experience match: relevant experience and estimated years vs. seniority
- format score: presence of essential resume sections

Scoring is a pure function of (resume, job, options): no caching, no randomness,
no mutation of inputs.
"""

import math
from dataclasses import asdict, dataclass, field, fields
from typing import Dict, Iterable, List, Optional, Tuple

from rescore.contexts.intake import JobDescription, ResumeRecord
from rescore.contexts.targeting.keyword_matching import (
    KeywordMatch,
    combine_keywords,
    match_keywords,
)
from rescore.contexts.targeting.keyword_tables import COMMON_ATS_KEYWORDS
from rescore.contexts.targeting.logger import _log_debug
from rescore.contexts.targeting.reporting import export_ats_result
from rescore.contexts.targeting.text_extraction import extract_resume_text

EXPERIENCE_LEVELS = ("entry", "mid", "senior", "executive")

EXPECTED_YEARS_BY_LEVEL = {"entry": 1, "mid": 4, "senior": 8, "executive": 15}
DEFAULT_EXPECTED_YEARS = 3

# Each listed position counts as this many years (date ranges are not parsed)
YEARS_PER_POSITION = 2

RELEVANT_EXPERIENCE_BASE = 70
NO_RELEVANT_EXPERIENCE_BASE = 30
YEARS_PENALTY_PER_YEAR = 5
MAX_YEARS_PENALTY = 30

# Format score used when format analysis is not requested
DEFAULT_FORMAT_SCORE = 85

# Deductions for missing resume sections
FORMAT_DEDUCTIONS = {
    "name": 10,
    "email": 10,
    "experience": 20,
    "tech_stack": 15,
    "education": 10,
}

WEIGHT_PROFILES = {
    "strict": {
        "keyword_match": 0.4,
        "skills_match": 0.3,
        "experience_match": 0.2,
        "format_score": 0.1,
    },
    "lenient": {
        "keyword_match": 0.3,
        "skills_match": 0.25,
        "experience_match": 0.25,
        "format_score": 0.2,
    },
}


def _clamp(value: float, lower: float = 0, upper: float = 100) -> float:
    return float(max(lower, min(upper, value)))


def _round_half_up(value: float) -> int:
    # Python's round() is banker's rounding; 72.5 must become 73
    return int(math.floor(value + 0.5))


# ============================================================================
# Result types
# ============================================================================


@dataclass(frozen=True)
class ATSOptions:
    """
    Options for a scoring call.

    Attributes:
        experience_level: "entry", "mid", "senior" or "executive"; any other
            non-empty value expects 3 years. None disables the years penalty.
        include_format_analysis: Compute the format score (otherwise a flat 85)
        strict_mode: Use the strict weight profile
        industry_focus: Industry label carried for callers; does not affect scores
    """

    experience_level: Optional[str] = None
    include_format_analysis: bool = False
    strict_mode: bool = False
    industry_focus: Optional[str] = None


@dataclass(frozen=True)
class ScoreBreakdown:
    """Four sub-scores, each in [0, 100]."""

    keyword_match: float
    skills_match: float
    experience_match: float
    format_score: float

    def to_dict(self) -> Dict[str, float]:
        return {
            "keywordMatch": self.keyword_match,
            "skillsMatch": self.skills_match,
            "experienceMatch": self.experience_match,
            "formatScore": self.format_score,
        }


@dataclass(frozen=True)
class Recommendation:
    category: str
    suggestion: str
    impact: str  # "high" | "medium" | "low"


@dataclass(frozen=True)
class ATSResult:
    """
    Outcome of one scoring call.

    matched_keywords + missing_keywords always cover the full candidate keyword
    set of the call (job keywords + common ATS keywords, deduplicated).
    """

    overall_score: int
    breakdown: ScoreBreakdown
    matched_keywords: Tuple[str, ...] = ()
    missing_keywords: Tuple[str, ...] = ()
    suggestions: Tuple[str, ...] = ()
    recommendations: Tuple[Recommendation, ...] = ()

    def to_dict(self) -> dict:
        """Serialize to the camelCase JSON shape used by exports."""
        return {
            "overallScore": self.overall_score,
            "breakdown": self.breakdown.to_dict(),
            "suggestions": list(self.suggestions),
            "missingKeywords": list(self.missing_keywords),
            "matchedKeywords": list(self.matched_keywords),
            "recommendations": [asdict(r) for r in self.recommendations],
        }


@dataclass(frozen=True)
class JobMatch(ATSResult):
    """ATSResult annotated with the job it was scored against."""

    job_title: str = ""
    company: str = ""

    def to_dict(self) -> dict:
        data = super().to_dict()
        data["jobTitle"] = self.job_title
        data["company"] = self.company
        return data


@dataclass(frozen=True)
class ActionItem:
    action: str
    priority: str  # "high" | "medium" | "low"
    expected_impact: int
    category: str

    def to_dict(self) -> dict:
        return {
            "action": self.action,
            "priority": self.priority,
            "expectedImpact": self.expected_impact,
            "category": self.category,
        }


@dataclass(frozen=True)
class OptimizationPlan:
    current_score: int
    target_score: int
    action_items: Tuple[ActionItem, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict:
        return {
            "currentScore": self.current_score,
            "targetScore": self.target_score,
            "actionItems": [item.to_dict() for item in self.action_items],
        }


# ============================================================================
# Sub-scorers
# ============================================================================


def score_keywords(resume_text: str, job_keywords: Iterable[str]) -> KeywordMatch:
    """
    Keyword sub-score against job keywords plus the common ATS keywords.

    Args:
        resume_text: Flattened resume text
        job_keywords: The job's explicit keywords

    Returns:
        KeywordMatch (score 0 when there are no candidate keywords)
    """
    candidates = combine_keywords(job_keywords, COMMON_ATS_KEYWORDS)
    return match_keywords(resume_text, candidates)


def score_skills(resume: ResumeRecord, job: JobDescription) -> float:
    """
    Share of job skills matched by the resume tech stack, in percent.

    A resume skill counts as matched when it contains, or is contained in, any
    requirement or preferred skill (case-insensitive). The count of matched
    resume skills is divided by the number of job skills, capped at 100.

    Returns:
        Skills sub-score (0 when the job lists no skills)
    """
    resume_skills = [skill.lower() for skill in resume.tech_stack]
    job_skills = [skill.lower() for skill in job.requirements + job.preferred_skills]

    if not job_skills:
        return 0.0

    matched = [
        skill
        for skill in resume_skills
        if any(job_skill in skill or skill in job_skill for job_skill in job_skills)
    ]
    return min(len(matched) / len(job_skills) * 100, 100.0)


def estimate_experience_years(resume: ResumeRecord) -> int:
    """Estimated years of experience: a fixed number of years per listed position."""
    return len(resume.experience) * YEARS_PER_POSITION


def has_relevant_experience(resume: ResumeRecord, job: JobDescription) -> bool:
    """True if any experience title or bullet contains any job keyword (substring)."""
    job_keywords = [keyword.lower() for keyword in job.keywords]
    return any(
        keyword in exp.title.lower() or any(keyword in bullet.lower() for bullet in exp.bullets)
        for exp in resume.experience
        for keyword in job_keywords
    )


def expected_years(level: str) -> int:
    return EXPECTED_YEARS_BY_LEVEL.get(level, DEFAULT_EXPECTED_YEARS)


def score_experience(
    resume: ResumeRecord, job: JobDescription, experience_level: Optional[str] = None
) -> float:
    """
    Experience sub-score.

    Base is 70 with relevant experience, else 30. With an experience level, the
    base loses 5 points per year of difference between estimated and expected
    years (at most 30), floored at 0.
    """
    if has_relevant_experience(resume, job):
        score = RELEVANT_EXPERIENCE_BASE
    else:
        score = NO_RELEVANT_EXPERIENCE_BASE

    if experience_level:
        years_diff = abs(estimate_experience_years(resume) - expected_years(experience_level))
        penalty = min(years_diff * YEARS_PENALTY_PER_YEAR, MAX_YEARS_PENALTY)
        score = max(score - penalty, 0)

    return float(min(score, 100))


def score_format(resume: ResumeRecord) -> float:
    """Format sub-score: 100 minus deductions for missing essential sections, floored at 0."""
    score = 100
    if not resume.personal.name:
        score -= FORMAT_DEDUCTIONS["name"]
    if not resume.personal.email:
        score -= FORMAT_DEDUCTIONS["email"]
    if not resume.experience:
        score -= FORMAT_DEDUCTIONS["experience"]
    if not resume.tech_stack:
        score -= FORMAT_DEDUCTIONS["tech_stack"]
    if not resume.education:
        score -= FORMAT_DEDUCTIONS["education"]
    return float(max(score, 0))


# ============================================================================
# Aggregation and advice
# ============================================================================


def aggregate_score(breakdown: ScoreBreakdown, strict_mode: bool = False) -> int:
    """
    Weighted sum of sub-scores, rounded half-up to an int in [0, 100].

    Args:
        breakdown: Sub-scores
        strict_mode: Use the strict profile (keyword/skills heavy) instead of lenient
    """
    weights = WEIGHT_PROFILES["strict" if strict_mode else "lenient"]
    total = sum(getattr(breakdown, name) * weight for name, weight in weights.items())
    return int(_clamp(_round_half_up(total)))


def generate_suggestions(breakdown: ScoreBreakdown) -> List[str]:
    """Suggestion strings for each sub-score below its threshold."""
    suggestions = []
    if breakdown.keyword_match < 60:
        suggestions.append("Include more relevant keywords from the job description")
    if breakdown.skills_match < 50:
        suggestions.append("Highlight technical skills that match job requirements")
    if breakdown.experience_match < 40:
        suggestions.append("Add more relevant work experience or projects")
    if breakdown.format_score < 70:
        suggestions.append("Improve resume formatting for better ATS compatibility")
    return suggestions


def generate_recommendations(
    breakdown: ScoreBreakdown, missing_keywords: Iterable[str]
) -> List[Recommendation]:
    """
    Categorized recommendations.

    Keywords (high) when any keyword is missing, naming the first three;
    Skills (high) when skills match < 60; Format (medium) when format < 80.
    """
    missing = list(missing_keywords)
    recommendations = []

    if missing:
        recommendations.append(
            Recommendation(
                category="Keywords",
                suggestion=f"Add these missing keywords: {', '.join(missing[:3])}",
                impact="high",
            )
        )
    if breakdown.skills_match < 60:
        recommendations.append(
            Recommendation(
                category="Skills",
                suggestion="Create a dedicated skills section with relevant technologies",
                impact="high",
            )
        )
    if breakdown.format_score < 80:
        recommendations.append(
            Recommendation(
                category="Format",
                suggestion="Use standard section headings and bullet points for better parsing",
                impact="medium",
            )
        )
    return recommendations


def generate_action_items(result: ATSResult) -> List[ActionItem]:
    """
    Optimization action items for sub-scores below the plan thresholds.

    Thresholds are stricter than those of generate_suggestions():
    keyword < 70, skills < 60, experience < 50, format < 80.

    Returns:
        Items sorted by expected impact, highest first
    """
    breakdown = result.breakdown
    items = []

    if breakdown.keyword_match < 70:
        items.append(
            ActionItem(
                action=f"Add missing keywords: {', '.join(result.missing_keywords[:5])}",
                priority="high",
                expected_impact=15,
                category="Keywords",
            )
        )
    if breakdown.skills_match < 60:
        items.append(
            ActionItem(
                action="Highlight relevant technical skills and certifications",
                priority="high",
                expected_impact=12,
                category="Skills",
            )
        )
    if breakdown.experience_match < 50:
        items.append(
            ActionItem(
                action="Quantify achievements and add relevant project details",
                priority="medium",
                expected_impact=10,
                category="Experience",
            )
        )
    if breakdown.format_score < 80:
        items.append(
            ActionItem(
                action="Improve resume formatting and structure for ATS compatibility",
                priority="medium",
                expected_impact=8,
                category="Format",
            )
        )

    return sorted(items, key=lambda item: item.expected_impact, reverse=True)


# ============================================================================
# Calculator
# ============================================================================


class ATSScoreCalculator:
    """
    Scores resumes against job descriptions.

    Stateless: a single instance can score any number of resume/job pairs,
    and identical inputs always produce equal results.
    """

    def calculate_score(
        self,
        resume: ResumeRecord,
        job: JobDescription,
        options: Optional[ATSOptions] = None,
    ) -> ATSResult:
        """
        Calculate the ATS score of a resume for one job description.

        Args:
            resume: Resume record
            job: Job description record
            options: Scoring options (defaults: lenient, no level, flat format score)

        Returns:
            ATSResult with overall score, breakdown, keywords and advice
        """
        options = options or ATSOptions()
        resume_text = extract_resume_text(resume)

        keyword_match = score_keywords(resume_text, job.keywords)
        breakdown = ScoreBreakdown(
            keyword_match=_clamp(keyword_match.score),
            skills_match=_clamp(score_skills(resume, job)),
            experience_match=_clamp(score_experience(resume, job, options.experience_level)),
            format_score=(
                _clamp(score_format(resume))
                if options.include_format_analysis
                else float(DEFAULT_FORMAT_SCORE)
            ),
        )
        overall_score = aggregate_score(breakdown, options.strict_mode)

        _log_debug(
            f"Scored '{job.title}': {overall_score}/100 "
            f"({len(keyword_match.matched)}/{len(keyword_match.matched) + len(keyword_match.missing)} keywords)"
        )

        return ATSResult(
            overall_score=overall_score,
            breakdown=breakdown,
            matched_keywords=keyword_match.matched,
            missing_keywords=keyword_match.missing,
            suggestions=tuple(generate_suggestions(breakdown)),
            recommendations=tuple(generate_recommendations(breakdown, keyword_match.missing)),
        )

    def analyze_multiple_jobs(
        self,
        resume: ResumeRecord,
        jobs: Iterable[JobDescription],
        options: Optional[ATSOptions] = None,
    ) -> List[JobMatch]:
        """
        Score a resume against several jobs independently and rank them.

        Returns:
            One JobMatch per job, sorted by overall score (highest first);
            ties keep input order
        """
        matches = []
        for job in jobs:
            result = self.calculate_score(resume, job, options)
            matches.append(
                JobMatch(
                    **{f.name: getattr(result, f.name) for f in fields(ATSResult)},
                    job_title=job.title,
                    company=job.company,
                )
            )
        return sorted(matches, key=lambda match: match.overall_score, reverse=True)

    def generate_optimization_plan(
        self,
        resume: ResumeRecord,
        job: JobDescription,
        target_score: int = 80,
        options: Optional[ATSOptions] = None,
    ) -> OptimizationPlan:
        """
        Build a prioritized plan for raising the ATS score.

        Args:
            resume: Resume record
            job: Job description record
            target_score: Score the caller is aiming for (reported, not enforced)
            options: Scoring options for the baseline score (default options if None)

        Returns:
            OptimizationPlan with the current score and action items sorted by
            expected impact
        """
        result = self.calculate_score(resume, job, options)
        return OptimizationPlan(
            current_score=result.overall_score,
            target_score=target_score,
            action_items=tuple(generate_action_items(result)),
        )

    def export_analysis(self, result: ATSResult, format: str = "json") -> str:
        """
        Export a result as "json", "text" or "html".

        Raises:
            ValueError: If format is not supported
        """
        return export_ats_result(result, format)


_default_calculator = ATSScoreCalculator()


def calculate_score(
    resume: ResumeRecord, job: JobDescription, options: Optional[ATSOptions] = None
) -> ATSResult:
    """Module-level shortcut for ATSScoreCalculator().calculate_score()."""
    return _default_calculator.calculate_score(resume, job, options)


def analyze_multiple_jobs(
    resume: ResumeRecord, jobs: Iterable[JobDescription], options: Optional[ATSOptions] = None
) -> List[JobMatch]:
    """Module-level shortcut for ATSScoreCalculator().analyze_multiple_jobs()."""
    return _default_calculator.analyze_multiple_jobs(resume, jobs, options)


def generate_optimization_plan(
    resume: ResumeRecord,
    job: JobDescription,
    target_score: int = 80,
    options: Optional[ATSOptions] = None,
) -> OptimizationPlan:
    """Module-level shortcut for ATSScoreCalculator().generate_optimization_plan()."""
    return _default_calculator.generate_optimization_plan(resume, job, target_score, options)


def export_analysis(result: ATSResult, format: str = "json") -> str:
    """Module-level shortcut for ATSScoreCalculator().export_analysis()."""
    return _default_calculator.export_analysis(result, format)
