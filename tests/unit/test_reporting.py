"""Unit tests for report exports and the text report formatter."""

import json

import pytest

from rescore.contexts.intake import JobDescription, ResumeRecord
from rescore.contexts.targeting.ats_scorer import (
    ATSResult,
    JobMatch,
    OptimizationPlan,
    Recommendation,
    ScoreBreakdown,
    calculate_score,
    export_analysis,
)
from rescore.contexts.targeting.reporting import (
    export_ats_result,
    optimization_plan_to_text,
    score_color,
)
from rescore.utils.report_formatter import Column, TableFormatter, format_percentage, format_score


@pytest.fixture
def result():
    return ATSResult(
        overall_score=72,
        breakdown=ScoreBreakdown(66.666667, 50.0, 70.0, 85.0),
        matched_keywords=("Python", "experience"),
        missing_keywords=("Kubernetes",),
        suggestions=("Highlight technical skills that match job requirements",),
        recommendations=(
            Recommendation("Keywords", "Add these missing keywords: Kubernetes", "high"),
        ),
    )


# ============================================================================
# ATS results
# ============================================================================


@pytest.mark.unit
def test_export_json(result):
    data = json.loads(export_ats_result(result, "json"))

    assert data["overallScore"] == 72
    assert data["breakdown"] == {
        "keywordMatch": 66.666667,
        "skillsMatch": 50.0,
        "experienceMatch": 70.0,
        "formatScore": 85.0,
    }
    assert data["missingKeywords"] == ["Kubernetes"]
    assert data["recommendations"] == [
        {
            "category": "Keywords",
            "suggestion": "Add these missing keywords: Kubernetes",
            "impact": "high",
        }
    ]


@pytest.mark.unit
def test_export_text(result):
    text = export_ats_result(result, "text")

    assert "ATS SCORE ANALYSIS REPORT" in text
    assert "Overall Score: 72/100" in text
    assert "66.7/100" in text
    assert "Matched Keywords: Python, experience" in text
    assert "Missing Keywords: Kubernetes" in text
    assert "- [HIGH] Keywords: Add these missing keywords: Kubernetes" in text
    assert "Job:" not in text


@pytest.mark.unit
def test_export_text_job_match(result):
    match = JobMatch(
        overall_score=result.overall_score,
        breakdown=result.breakdown,
        job_title="Data Engineer",
        company="Acme",
    )
    text = export_ats_result(match, "text")

    assert "Job: Data Engineer @ Acme" in text
    # Empty lists render a placeholder
    assert "(none)" in text


@pytest.mark.unit
def test_export_html(result):
    html = export_ats_result(result, "HTML")

    assert html.startswith("<!DOCTYPE html>")
    assert "Overall Score: 72/100" in html
    assert "color: #28a745" in html
    assert 'class="recommendation high"' in html
    assert "Keyword Match: 66.7/100" in html


@pytest.mark.unit
def test_export_html_escapes_content(result):
    match = JobMatch(
        overall_score=40,
        breakdown=result.breakdown,
        job_title="<Engineer>",
        company="R&D",
    )
    html = export_ats_result(match, "html")

    assert "&lt;Engineer&gt; @ R&amp;D" in html
    assert "color: #dc3545" in html


@pytest.mark.unit
def test_export_unknown_format(result):
    with pytest.raises(ValueError, match="Unsupported export format 'pdf'"):
        export_ats_result(result, "pdf")


@pytest.mark.unit
def test_export_analysis_shortcut_round_trips_json():
    result = calculate_score(ResumeRecord.default(), JobDescription(keywords=["React"]))
    data = json.loads(export_analysis(result))

    assert data["overallScore"] == result.overall_score
    assert data["matchedKeywords"] == list(result.matched_keywords)


@pytest.mark.unit
@pytest.mark.parametrize(
    "score, color",
    [(100, "#28a745"), (70, "#28a745"), (69, "#ffc107"), (50, "#ffc107"), (49, "#dc3545"), (0, "#dc3545")],
)
def test_score_color(score, color):
    assert score_color(score) == color


@pytest.mark.unit
def test_optimization_plan_to_text():
    plan = OptimizationPlan(current_score=90, target_score=80)
    text = optimization_plan_to_text(plan)

    assert "ATS OPTIMIZATION PLAN" in text
    assert "Current Score: 90/100" in text
    assert "No action items" in text


# ============================================================================
# Formatter
# ============================================================================


@pytest.mark.unit
def test_table_formatter_rows():
    formatter = TableFormatter(columns=[Column("Name", 6), Column("Score", 5, ">")], total_width=12)
    formatter.add_table_header().add_separator().add_row(["a", 1])

    assert formatter.render() == "Name   Score\n------------\na          1\n"


@pytest.mark.unit
def test_table_formatter_row_length_mismatch():
    formatter = TableFormatter(columns=[Column("Name", 6)])

    with pytest.raises(ValueError, match="Expected 1 values, got 2"):
        formatter.add_row(["a", "b"])


@pytest.mark.unit
def test_format_helpers():
    assert format_score(50.0) == "50"
    assert format_score(33.333333) == "33.3"
    assert format_percentage(2.5) == "2.50%"
