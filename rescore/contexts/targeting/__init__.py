"""
Targeting Context

Responsibilities:
- Scores a resume against job descriptions (keywords, skills, experience, format)
- Ranks a resume across several jobs and builds prioritized optimization plans
- Analyzes keyword coverage and density, and suggests missing keywords per section
- Weaves target keywords into resume text without modifying the input record
- Exports results as JSON, text, HTML or CSV

Owns: Scoring heuristics, keyword tables, keyword optimization, report exports
Never: Loads or parses record files (that belongs to intake)
"""

from rescore.contexts.targeting.ats_scorer import (
    ATSOptions,
    ATSResult,
    ATSScoreCalculator,
    ActionItem,
    JobMatch,
    OptimizationPlan,
    Recommendation,
    ScoreBreakdown,
    analyze_multiple_jobs,
    calculate_score,
    export_analysis,
    generate_optimization_plan,
)
from rescore.contexts.targeting.keyword_optimizer import (
    ContentChange,
    IndustryRecommendations,
    KeywordAnalysis,
    KeywordOptimizer,
    KeywordSuggestion,
    OptimizationOptions,
)
from rescore.contexts.targeting.presets import load_analysis_presets, resolve_options

__all__ = [
    # ATS scoring
    "ATSScoreCalculator",
    "ATSOptions",
    "ATSResult",
    "ScoreBreakdown",
    "Recommendation",
    "JobMatch",
    "ActionItem",
    "OptimizationPlan",
    "calculate_score",
    "analyze_multiple_jobs",
    "generate_optimization_plan",
    "export_analysis",
    # Keyword optimization
    "KeywordOptimizer",
    "KeywordAnalysis",
    "KeywordSuggestion",
    "OptimizationOptions",
    "ContentChange",
    "IndustryRecommendations",
    # Option presets
    "load_analysis_presets",
    "resolve_options",
]
