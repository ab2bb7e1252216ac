"""
Export formats for ATS results and keyword analyses.

ATS results export to JSON, plain text or HTML; keyword analyses to JSON,
plain text or CSV. Results are duck-typed (anything with the attributes and
to_dict() of ATSResult / KeywordAnalysis) so this module has no dependency
on the scorers.
"""

import csv
import io
import json
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape

from rescore.utils.report_formatter import (
    Column,
    TableFormatter,
    format_percentage,
    format_score,
)

TEMPLATES_PATH = Path(__file__).parent / "templates"

ATS_EXPORT_FORMATS = ("json", "text", "html")
KEYWORD_EXPORT_FORMATS = ("json", "text", "csv")

REPORT_WIDTH = 72

# Overall score color bands for the HTML report
SCORE_COLORS = [(70, "#28a745"), (50, "#ffc107"), (0, "#dc3545")]

_env = Environment(
    loader=FileSystemLoader(str(TEMPLATES_PATH)),
    autoescape=select_autoescape(["html", "jinja"]),
    undefined=StrictUndefined,
    trim_blocks=True,
    lstrip_blocks=True,
    keep_trailing_newline=True,
)
_env.filters["score"] = format_score


def _check_format(format: str, valid_formats: tuple) -> str:
    normalized = format.lower()
    if normalized not in valid_formats:
        raise ValueError(
            f"Unsupported export format '{format}'. Must be one of: {', '.join(valid_formats)}"
        )
    return normalized


def score_color(score: int) -> str:
    """Hex color for an overall score: green >= 70, amber >= 50, red otherwise."""
    for threshold, color in SCORE_COLORS:
        if score >= threshold:
            return color
    return SCORE_COLORS[-1][1]


# ============================================================================
# ATS results
# ============================================================================


def export_ats_result(result, format: str = "json") -> str:
    """
    Export an ATSResult (or JobMatch).

    Args:
        result: ATSResult or JobMatch
        format: "json", "text" or "html"

    Returns:
        Report string

    Raises:
        ValueError: If format is not supported
    """
    format = _check_format(format, ATS_EXPORT_FORMATS)
    if format == "text":
        return ats_result_to_text(result)
    if format == "html":
        return ats_result_to_html(result)
    return json.dumps(result.to_dict(), indent=2)


def ats_result_to_text(result) -> str:
    breakdown = result.breakdown
    formatter = TableFormatter(
        columns=[Column("Component", 30, "<"), Column("Score", 10, ">")],
        total_width=REPORT_WIDTH,
    )

    formatter.add_section_header("ATS SCORE ANALYSIS REPORT")
    job_title = getattr(result, "job_title", "")
    if job_title:
        company = getattr(result, "company", "")
        formatter.add_text(f"Job: {job_title} @ {company}" if company else f"Job: {job_title}")
    formatter.add_text(f"Overall Score: {result.overall_score}/100")
    formatter.add_blank_line()

    formatter.add_table_header()
    formatter.add_separator("-")
    formatter.add_row(["Keyword Match", f"{format_score(breakdown.keyword_match)}/100"])
    formatter.add_row(["Skills Match", f"{format_score(breakdown.skills_match)}/100"])
    formatter.add_row(["Experience Match", f"{format_score(breakdown.experience_match)}/100"])
    formatter.add_row(["Format Score", f"{format_score(breakdown.format_score)}/100"])
    formatter.add_blank_line()

    formatter.add_text(f"Matched Keywords: {', '.join(result.matched_keywords)}")
    formatter.add_text(f"Missing Keywords: {', '.join(result.missing_keywords)}")
    formatter.add_blank_line()

    formatter.add_subheader("Suggestions")
    formatter.add_bullets(result.suggestions)
    formatter.add_blank_line()

    formatter.add_subheader("Recommendations")
    formatter.add_bullets(
        f"[{r.impact.upper()}] {r.category}: {r.suggestion}" for r in result.recommendations
    )

    return formatter.render()


def ats_result_to_html(result) -> str:
    template = _env.get_template("ats_report.html.jinja")
    return template.render(
        result=result,
        job_title=getattr(result, "job_title", ""),
        company=getattr(result, "company", ""),
        score_color=score_color(result.overall_score),
    )


def optimization_plan_to_text(plan) -> str:
    """
    Render an OptimizationPlan as a prioritized checklist.

    Args:
        plan: OptimizationPlan from generate_optimization_plan()
    """
    formatter = TableFormatter(
        columns=[
            Column("Priority", 10, "<"),
            Column("Category", 12, "<"),
            Column("Impact", 8, ">"),
            Column("Action", 38, "<"),
        ],
        total_width=REPORT_WIDTH,
    )
    formatter.add_section_header("ATS OPTIMIZATION PLAN")
    formatter.add_text(f"Current Score: {plan.current_score}/100")
    formatter.add_text(f"Target Score:  {plan.target_score}/100")
    formatter.add_blank_line()

    if not plan.action_items:
        formatter.add_text("No action items: every component is above its threshold.")
        return formatter.render()

    formatter.add_table_header()
    formatter.add_separator("-")
    for item in plan.action_items:
        formatter.add_row(
            [item.priority.upper(), item.category, f"+{item.expected_impact}", item.action]
        )
    return formatter.render()


# ============================================================================
# Keyword analyses
# ============================================================================


def export_keyword_analysis(analysis, format: str = "json") -> str:
    """
    Export a KeywordAnalysis.

    Args:
        analysis: KeywordAnalysis from KeywordOptimizer.analyze_keywords()
        format: "json", "text" or "csv"

    Raises:
        ValueError: If format is not supported
    """
    format = _check_format(format, KEYWORD_EXPORT_FORMATS)
    if format == "text":
        return keyword_analysis_to_text(analysis)
    if format == "csv":
        return keyword_analysis_to_csv(analysis)
    return json.dumps(analysis.to_dict(), indent=2)


def keyword_analysis_to_text(analysis) -> str:
    formatter = TableFormatter(columns=[], total_width=REPORT_WIDTH)

    formatter.add_section_header("KEYWORD ANALYSIS REPORT")
    formatter.add_text(f"Overall Score: {format_score(analysis.score)}/100")
    formatter.add_blank_line()

    formatter.add_subheader(f"Current Keywords ({len(analysis.current_keywords)})")
    formatter.add_text(", ".join(analysis.current_keywords))
    formatter.add_blank_line()

    formatter.add_subheader(f"Missing Keywords ({len(analysis.missing_keywords)})")
    formatter.add_bullets(
        f"{k.keyword} ({k.category}, {k.priority} priority)" for k in analysis.missing_keywords
    )
    formatter.add_blank_line()

    formatter.add_subheader(f"Suggestions ({len(analysis.suggestions)})")
    formatter.add_bullets(f"{s.keyword}: {s.context}" for s in analysis.suggestions)
    formatter.add_blank_line()

    formatter.add_subheader("Overused Keywords")
    formatter.add_bullets(
        f"{k} ({format_percentage(analysis.keyword_density[k])} density)"
        for k in analysis.overused_keywords
    )

    return formatter.render()


def keyword_analysis_to_csv(analysis) -> str:
    """One CSV row per suggestion: Keyword, Category, Priority, Relevance, Context."""
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(["Keyword", "Category", "Priority", "Relevance", "Context"])
    for s in analysis.suggestions:
        writer.writerow([s.keyword, s.category, s.priority, s.relevance, s.context])
    return buffer.getvalue()
