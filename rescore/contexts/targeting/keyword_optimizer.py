"""
Keyword Optimizer

Analyzes the keywords of a resume against a job description and/or an
industry keyword table, suggests missing keywords per resume section, and
weaves target keywords into resume text.

Everything here is deterministic except suggest_section_keywords("experience"),
which picks an action verb from an injectable random source.
"""

import copy
import random
import re
from dataclasses import asdict, dataclass
from typing import Dict, List, Optional, Tuple

from rescore.contexts.intake import ResumeRecord
from rescore.contexts.targeting.keyword_density import (
    OVERUSE_THRESHOLD,
    calculate_keyword_density,
    find_overused_keywords,
)
from rescore.contexts.targeting.keyword_extraction import extract_keywords
from rescore.contexts.targeting.keyword_matching import combine_keywords
from rescore.contexts.targeting.keyword_tables import (
    ACTION_VERBS,
    EMERGING_TECH_KEYWORDS,
    INDUSTRY_KEYWORDS,
    PROJECT_VERBS,
    ROLE_KEYWORDS,
    SOFT_SKILLS,
    get_industry_keywords,
)
from rescore.contexts.targeting.logger import _log_debug
from rescore.contexts.targeting.reporting import export_keyword_analysis
from rescore.contexts.targeting.text_extraction import extract_resume_text

SECTIONS = ("experience", "projects", "skills", "summary")

# Score reported when there is nothing to match against
NO_TARGET_SCORE = 85
OVERUSE_PENALTY = 5
MAX_KEYWORDS_PER_BLOCK = 3

RELEVANCE_BY_PRIORITY = {"high": 90, "medium": 70, "low": 50}

TECHNICAL_PATTERNS = [
    re.compile(r"\b(javascript|python|java|react|node|aws|docker|kubernetes|sql|api|git)\b", re.I),
    re.compile(r"\b[A-Z]{2,}\b"),  # acronyms
    re.compile(r"\.[a-z]+$", re.I),  # dotted names
    re.compile(r"/[a-z]+", re.I),  # slashed names
]

CERTIFICATION_PATTERNS = [
    re.compile(r"certified", re.I),
    re.compile(r"certification", re.I),
    re.compile(r"\b(cfa|cpa|pmp|cissp|aws|azure|google)\b", re.I),
]


@dataclass(frozen=True)
class OptimizationOptions:
    """
    Options for keyword analysis and suggestions.

    Attributes:
        industry: Industry table to draw targets from ("technology", "marketing", "finance")
        role: Target role (e.g. "software engineer") for role keywords and relevance
        experience_level: Accepted for parity with ATSOptions; unused by the optimizer
        target_keyword_count: Maximum number of missing keywords turned into suggestions
        include_emerging_tech: Also suggest emerging technologies not in the tech stack
    """

    industry: Optional[str] = None
    role: Optional[str] = None
    experience_level: Optional[str] = None
    target_keyword_count: int = 20
    include_emerging_tech: bool = False


@dataclass(frozen=True)
class KeywordSuggestion:
    keyword: str
    relevance: int
    category: str  # technical | soft | industry | role | certification
    context: str
    priority: str  # high | medium | low


@dataclass(frozen=True)
class KeywordAnalysis:
    current_keywords: Tuple[str, ...]
    missing_keywords: Tuple[KeywordSuggestion, ...]
    suggestions: Tuple[KeywordSuggestion, ...]
    overused_keywords: Tuple[str, ...]
    keyword_density: Dict[str, float]
    score: float

    def to_dict(self) -> dict:
        """Serialize to the camelCase JSON shape used by exports."""
        return {
            "currentKeywords": list(self.current_keywords),
            "missingKeywords": [asdict(k) for k in self.missing_keywords],
            "suggestions": [asdict(s) for s in self.suggestions],
            "overusedKeywords": list(self.overused_keywords),
            "keywordDensity": dict(self.keyword_density),
            "score": self.score,
        }


@dataclass(frozen=True)
class ContentChange:
    section: str  # e.g. "profile", "experience[0].bullets[2]", "projects[1].desc"
    original: str
    optimized: str
    added_keywords: Tuple[str, ...]


@dataclass(frozen=True)
class IndustryRecommendations:
    must_have: Tuple[KeywordSuggestion, ...] = ()
    recommended: Tuple[KeywordSuggestion, ...] = ()
    emerging: Tuple[KeywordSuggestion, ...] = ()


# ============================================================================
# Keyword classification
# ============================================================================


def is_technical_keyword(keyword: str) -> bool:
    return any(pattern.search(keyword) for pattern in TECHNICAL_PATTERNS)


def is_soft_skill_keyword(keyword: str) -> bool:
    keyword = keyword.lower()
    return any(skill in keyword for skill in SOFT_SKILLS)


def is_certification_keyword(keyword: str) -> bool:
    return any(pattern.search(keyword) for pattern in CERTIFICATION_PATTERNS)


def is_industry_keyword(keyword: str, industry: str) -> bool:
    """True if keyword is a technical, industry or role term of the industry table."""
    keyword_set = INDUSTRY_KEYWORDS.get(industry.lower())
    if not keyword_set:
        return False
    terms = keyword_set["technical"] + keyword_set["industry"] + keyword_set["roles"]
    return keyword.lower() in {term.lower() for term in terms}


def is_role_keyword(keyword: str, role: Optional[str] = None) -> bool:
    """True if keyword and role contain one another (case-insensitive); False without a role."""
    if not role:
        return False
    keyword, role = keyword.lower(), role.lower()
    return keyword in role or role in keyword


def categorize_keyword(keyword: str, role: Optional[str] = None) -> str:
    if is_technical_keyword(keyword):
        return "technical"
    if is_soft_skill_keyword(keyword):
        return "soft"
    if is_certification_keyword(keyword):
        return "certification"
    if is_role_keyword(keyword, role):
        return "role"
    return "industry"


def keyword_context(keyword: str) -> str:
    if is_technical_keyword(keyword):
        return "Technical skill or technology"
    if is_soft_skill_keyword(keyword):
        return "Soft skill or competency"
    if is_certification_keyword(keyword):
        return "Professional certification"
    return "Industry or role-specific term"


def keyword_priority(keyword: str, options: OptimizationOptions) -> str:
    if is_role_keyword(keyword, options.role):
        return "high"
    if is_technical_keyword(keyword):
        return "high"
    if is_soft_skill_keyword(keyword):
        return "medium"
    return "low"


def keyword_relevance(keyword: str, options: OptimizationOptions) -> int:
    """
    Relevance in [50, 100]: base 50, +30 industry term, +25 role term, +15 technical.
    """
    relevance = 50
    if options.industry and is_industry_keyword(keyword, options.industry):
        relevance += 30
    if is_role_keyword(keyword, options.role):
        relevance += 25
    if is_technical_keyword(keyword):
        relevance += 15
    return min(100, relevance)


def _by_relevance(suggestions: List[KeywordSuggestion]) -> List[KeywordSuggestion]:
    # Stable: equal relevance keeps discovery order
    return sorted(suggestions, key=lambda s: s.relevance, reverse=True)


# ============================================================================
# Optimizer
# ============================================================================


class KeywordOptimizer:
    """
    Keyword analysis and optimization for a resume.

    Args:
        rng: Random source for action-verb suggestions. Pass a seeded
            random.Random for reproducible output.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    # ------------------------------------------------------------------------
    # Analysis
    # ------------------------------------------------------------------------

    def analyze_keywords(
        self,
        resume: ResumeRecord,
        job_description_text: Optional[str] = None,
        options: Optional[OptimizationOptions] = None,
    ) -> KeywordAnalysis:
        """
        Analyze resume keywords against job text and/or an industry table.

        Args:
            resume: Resume record
            job_description_text: Free-text job description (optional)
            options: Industry, role and suggestion options

        Returns:
            KeywordAnalysis. Score is 85 when there are no target keywords;
            otherwise the percentage of targets present in the resume keyword
            set, minus 5 points per overused keyword, clamped to [0, 100].
        """
        options = options or OptimizationOptions()

        resume_text = extract_resume_text(resume, lowercase=False)
        current_keywords = extract_keywords(resume_text)
        density = calculate_keyword_density(resume_text, current_keywords)

        job_keywords = extract_keywords(job_description_text) if job_description_text else []
        industry_keywords = get_industry_keywords(options.industry) if options.industry else []
        target_keywords = combine_keywords(job_keywords, industry_keywords)

        missing = self.find_missing_keywords(current_keywords, target_keywords, options)
        suggestions = self._collect_suggestions(resume, missing, options)
        overused = find_overused_keywords(density)
        score = self.calculate_keyword_score(current_keywords, target_keywords, density)

        _log_debug(
            f"Keyword analysis: {len(current_keywords)} current, {len(target_keywords)} targets, "
            f"{len(missing)} missing, score {score:.1f}"
        )

        return KeywordAnalysis(
            current_keywords=tuple(current_keywords),
            missing_keywords=tuple(missing),
            suggestions=tuple(suggestions),
            overused_keywords=tuple(overused),
            keyword_density=density,
            score=score,
        )

    def find_missing_keywords(
        self,
        current_keywords: List[str],
        target_keywords: List[str],
        options: Optional[OptimizationOptions] = None,
    ) -> List[KeywordSuggestion]:
        """
        Targets absent from the current keyword set (case-insensitive membership).

        Returns:
            Suggestions sorted by relevance, highest first
        """
        options = options or OptimizationOptions()
        current = {keyword.lower() for keyword in current_keywords}

        missing = [
            KeywordSuggestion(
                keyword=keyword,
                relevance=keyword_relevance(keyword, options),
                category=categorize_keyword(keyword, options.role),
                context=keyword_context(keyword),
                priority=keyword_priority(keyword, options),
            )
            for keyword in target_keywords
            if keyword.lower() not in current
        ]
        return _by_relevance(missing)

    def calculate_keyword_score(
        self,
        current_keywords: List[str],
        target_keywords: List[str],
        density: Dict[str, float],
    ) -> float:
        if not target_keywords:
            return float(NO_TARGET_SCORE)

        current = {keyword.lower() for keyword in current_keywords}
        targets = {keyword.lower() for keyword in target_keywords}
        match_ratio = len(targets & current) / len(target_keywords)

        overused_penalty = (
            sum(1 for value in density.values() if value > OVERUSE_THRESHOLD) * OVERUSE_PENALTY
        )
        return float(max(0, min(100, match_ratio * 100 - overused_penalty)))

    def _collect_suggestions(
        self,
        resume: ResumeRecord,
        missing: List[KeywordSuggestion],
        options: OptimizationOptions,
    ) -> List[KeywordSuggestion]:
        suggestions = missing[: options.target_keyword_count]

        if options.include_emerging_tech:
            suggestions += [
                KeywordSuggestion(
                    keyword=keyword,
                    relevance=70,
                    category="technical",
                    context="Emerging technology trend",
                    priority="medium",
                )
                for keyword in EMERGING_TECH_KEYWORDS
                if keyword not in resume.tech_stack
            ][:5]

        return suggestions

    # ------------------------------------------------------------------------
    # Section suggestions
    # ------------------------------------------------------------------------

    def suggest_section_keywords(
        self,
        section: str,
        content: str,
        options: Optional[OptimizationOptions] = None,
    ) -> List[KeywordSuggestion]:
        """
        Keyword suggestions for one resume section.

        Args:
            section: "experience", "projects", "skills" or "summary"
            content: Current text of the section
            options: Industry and role options

        Returns:
            Suggestions sorted by relevance, highest first

        Raises:
            ValueError: If section is not recognized
        """
        options = options or OptimizationOptions()
        industry_keywords = get_industry_keywords(options.industry) if options.industry else []
        content_lower = content.lower()

        if section == "experience":
            suggestions = self._suggest_experience(content_lower, industry_keywords)
        elif section == "projects":
            suggestions = self._suggest_projects(content_lower)
        elif section == "skills":
            suggestions = self._suggest_skills(content_lower, industry_keywords)
        elif section == "summary":
            suggestions = self._suggest_summary(content_lower, options)
        else:
            raise ValueError(f"Invalid section '{section}'. Must be one of: {', '.join(SECTIONS)}")

        return _by_relevance(suggestions)

    def _suggest_experience(
        self, content_lower: str, industry_keywords: List[str]
    ) -> List[KeywordSuggestion]:
        suggestions = []

        if not any(verb.lower() in content_lower for verb in ACTION_VERBS):
            suggestions.append(
                KeywordSuggestion(
                    keyword=self.rng.choice(ACTION_VERBS),
                    relevance=90,
                    category="role",
                    context="Start bullet points with strong action verbs",
                    priority="high",
                )
            )

        missing_tech = [
            keyword
            for keyword in industry_keywords
            if is_technical_keyword(keyword) and keyword.lower() not in content_lower
        ]
        suggestions += [
            KeywordSuggestion(
                keyword=keyword,
                relevance=85,
                category="technical",
                context="Add relevant technical skills to experience descriptions",
                priority="high",
            )
            for keyword in missing_tech[:3]
        ]
        return suggestions

    def _suggest_projects(self, content_lower: str) -> List[KeywordSuggestion]:
        if any(verb in content_lower for verb in PROJECT_VERBS):
            return []
        return [
            KeywordSuggestion(
                keyword="developed",
                relevance=88,
                category="role",
                context="Use action verbs to describe project work",
                priority="high",
            )
        ]

    def _suggest_skills(
        self, content_lower: str, industry_keywords: List[str]
    ) -> List[KeywordSuggestion]:
        missing_tech = [
            keyword
            for keyword in industry_keywords
            if is_technical_keyword(keyword) and keyword.lower() not in content_lower
        ]
        return [
            KeywordSuggestion(
                keyword=keyword,
                relevance=92,
                category="technical",
                context="Add to technical skills section",
                priority="high",
            )
            for keyword in missing_tech[:5]
        ]

    def _suggest_summary(
        self, content_lower: str, options: OptimizationOptions
    ) -> List[KeywordSuggestion]:
        if not options.role:
            return []
        return [
            KeywordSuggestion(
                keyword=keyword,
                relevance=95,
                category="role",
                context="Include role-specific terms in summary",
                priority="high",
            )
            for keyword in ROLE_KEYWORDS.get(options.role.lower(), [])
            if keyword.lower() not in content_lower
        ]

    # ------------------------------------------------------------------------
    # Content optimization
    # ------------------------------------------------------------------------

    def optimize_content(
        self,
        resume: ResumeRecord,
        target_keywords: List[str],
        options: Optional[OptimizationOptions] = None,
    ) -> Tuple[ResumeRecord, List[ContentChange]]:
        """
        Weave target keywords into the profile, experience bullets and project descriptions.

        At most three keywords are added per text block. The input resume is
        not modified.

        Args:
            resume: Resume record
            target_keywords: Keywords to add where they are missing
            options: Reserved for parity with the other operations

        Returns:
            (optimized copy of the resume, list of changes in section order)
        """
        optimized = copy.deepcopy(resume)
        changes = []

        if optimized.profile:
            text, added = self.optimize_text(optimized.profile, target_keywords, "summary")
            if text != optimized.profile:
                changes.append(ContentChange("profile", optimized.profile, text, tuple(added)))
                optimized.profile = text

        for exp_index, exp in enumerate(optimized.experience):
            for bullet_index, bullet in enumerate(exp.bullets):
                text, added = self.optimize_text(bullet, target_keywords, "experience")
                if text != bullet:
                    changes.append(
                        ContentChange(
                            f"experience[{exp_index}].bullets[{bullet_index}]",
                            bullet,
                            text,
                            tuple(added),
                        )
                    )
                    exp.bullets[bullet_index] = text

        for project_index, project in enumerate(optimized.projects):
            text, added = self.optimize_text(project.desc, target_keywords, "projects")
            if text != project.desc:
                changes.append(
                    ContentChange(f"projects[{project_index}].desc", project.desc, text, tuple(added))
                )
                project.desc = text

        _log_debug(f"Content optimization: {len(changes)} change(s)")
        return optimized, changes

    def optimize_text(
        self, text: str, target_keywords: List[str], section: str
    ) -> Tuple[str, List[str]]:
        """
        Add up to three missing target keywords to one block of text.

        Returns:
            (optimized text, keywords added)
        """
        text_lower = text.lower()
        candidates = [
            keyword
            for keyword in target_keywords
            if keyword.lower() not in text_lower and can_integrate_keyword(text, keyword, section)
        ]

        optimized = text
        added = []
        for keyword in candidates[:MAX_KEYWORDS_PER_BLOCK]:
            optimized = integrate_keyword(optimized, keyword, section)
            added.append(keyword)
        return optimized, added

    # ------------------------------------------------------------------------
    # Industry recommendations
    # ------------------------------------------------------------------------

    def get_industry_recommendations(
        self, industry: str, role: Optional[str] = None
    ) -> IndustryRecommendations:
        """
        Must-have, recommended and emerging keywords for an industry.

        Args:
            industry: Industry name (case-insensitive)
            role: Accepted for API symmetry; recommendations are per industry only

        Returns:
            IndustryRecommendations (all empty for unknown industries)
        """
        keyword_set = INDUSTRY_KEYWORDS.get(industry.lower())
        if not keyword_set:
            return IndustryRecommendations()

        technical_lower = [tech.lower() for tech in keyword_set["technical"]]
        emerging = [
            keyword
            for keyword in EMERGING_TECH_KEYWORDS
            if any(keyword.lower() in tech or tech in keyword.lower() for tech in technical_lower)
        ]

        return IndustryRecommendations(
            must_have=tuple(create_keyword_suggestions(keyword_set["technical"][:10], "technical", "high")),
            recommended=tuple(
                create_keyword_suggestions(keyword_set["soft"][:5], "soft", "medium")
                + create_keyword_suggestions(keyword_set["industry"][:5], "industry", "medium")
            ),
            emerging=tuple(create_keyword_suggestions(emerging[:5], "technical", "low")),
        )

    def export_analysis(self, analysis: KeywordAnalysis, format: str = "json") -> str:
        """
        Export an analysis as "json", "text" or "csv".

        Raises:
            ValueError: If format is not supported
        """
        return export_keyword_analysis(analysis, format)


def create_keyword_suggestions(
    keywords: List[str], category: str, priority: str
) -> List[KeywordSuggestion]:
    return [
        KeywordSuggestion(
            keyword=keyword,
            relevance=RELEVANCE_BY_PRIORITY[priority],
            category=category,
            context=keyword_context(keyword),
            priority=priority,
        )
        for keyword in keywords
    ]


def can_integrate_keyword(text: str, keyword: str, section: str) -> bool:
    """
    Whether keyword fits the text's context.

    Technical keywords only go into experience text that mentions developing,
    implementing or building; soft skills only into summaries that mention
    experience, skill or professionalism. Everything else is allowed.
    """
    text_lower = text.lower()
    if section == "experience" and is_technical_keyword(keyword):
        return any(word in text_lower for word in ("develop", "implement", "build"))
    if section == "summary" and is_soft_skill_keyword(keyword):
        return any(word in text_lower for word in ("experience", "skilled", "professional"))
    return True


def integrate_keyword(text: str, keyword: str, section: str) -> str:
    """
    Insert keyword into text.

    Experience text: after the first "using"/"with" ("using X and ...").
    Summary text: after "experience in" ("experience in X and ...").
    Otherwise, or when no anchor is found, append " (keyword)".
    """
    if section == "experience":
        integrated, count = re.subn(
            r"(using|with)\s+", lambda m: f"{m.group(1)} {keyword} and ", text, count=1
        )
        if count:
            return integrated

    if section == "summary" and "experience in" in text:
        return text.replace("experience in", f"experience in {keyword} and", 1)

    return f"{text} ({keyword})"
