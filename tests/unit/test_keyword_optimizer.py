"""Unit tests for KeywordOptimizer and keyword classification."""

import random

import pytest

from rescore.contexts.intake import Experience, Project, ResumeRecord
from rescore.contexts.targeting.keyword_optimizer import (
    KeywordOptimizer,
    OptimizationOptions,
    can_integrate_keyword,
    categorize_keyword,
    integrate_keyword,
    keyword_priority,
    keyword_relevance,
)
from rescore.contexts.targeting.keyword_tables import ACTION_VERBS


@pytest.fixture
def optimizer():
    return KeywordOptimizer(rng=random.Random(7))


# ============================================================================
# Classification
# ============================================================================


@pytest.mark.unit
def test_categorize_keyword():
    assert categorize_keyword("Kubernetes") == "technical"
    assert categorize_keyword("Node.js") == "technical"
    assert categorize_keyword("Leadership") == "soft"
    assert categorize_keyword("Certified Scrum Master") == "certification"
    assert categorize_keyword("Fintech") == "industry"
    assert categorize_keyword("engineer", role="software engineer") == "role"


@pytest.mark.unit
def test_keyword_relevance():
    plain = OptimizationOptions()
    tech = OptimizationOptions(industry="technology", role="software engineer")

    assert keyword_relevance("Leadership", plain) == 50
    assert keyword_relevance("Kubernetes", plain) == 65
    assert keyword_relevance("Docker", tech) == 95
    assert keyword_relevance("engineer", tech) == 75
    assert keyword_relevance("Software Engineer", tech) == 100


@pytest.mark.unit
def test_keyword_priority():
    options = OptimizationOptions(role="data scientist")

    assert keyword_priority("data", options) == "high"
    assert keyword_priority("Python", options) == "high"
    assert keyword_priority("Communication", options) == "medium"
    assert keyword_priority("Fintech", options) == "low"


# ============================================================================
# Analysis
# ============================================================================


@pytest.mark.unit
def test_analyze_keywords_without_targets(optimizer):
    analysis = optimizer.analyze_keywords(ResumeRecord.default())

    assert analysis.score == 85.0
    assert analysis.missing_keywords == ()
    assert analysis.suggestions == ()
    assert "react" in analysis.current_keywords
    assert set(analysis.keyword_density) == set(analysis.current_keywords)


@pytest.mark.unit
def test_analyze_keywords_with_industry(optimizer):
    analysis = optimizer.analyze_keywords(
        ResumeRecord.default(), options=OptimizationOptions(industry="technology")
    )
    missing = [s.keyword for s in analysis.missing_keywords]

    assert "Kubernetes" in missing
    assert "React" not in missing
    relevances = [s.relevance for s in analysis.missing_keywords]
    assert relevances == sorted(relevances, reverse=True)
    assert len(analysis.suggestions) == min(20, len(missing))
    assert 0 <= analysis.score <= 100


@pytest.mark.unit
def test_analyze_keywords_job_text_and_emerging(optimizer):
    options = OptimizationOptions(target_keyword_count=3, include_emerging_tech=True)
    analysis = optimizer.analyze_keywords(
        ResumeRecord.default(), "Terraform Kubernetes Helm Prometheus Grafana", options
    )

    assert {s.keyword for s in analysis.missing_keywords} >= {"terraform", "kubernetes"}
    assert len(analysis.suggestions) == 3 + 5
    assert all(s.context == "Emerging technology trend" for s in analysis.suggestions[3:])


@pytest.mark.unit
def test_analyze_keywords_to_dict(optimizer):
    analysis = optimizer.analyze_keywords(ResumeRecord(profile="Python developer"), "python rust")
    data = analysis.to_dict()

    assert set(data) == {
        "currentKeywords",
        "missingKeywords",
        "suggestions",
        "overusedKeywords",
        "keywordDensity",
        "score",
    }
    assert data["missingKeywords"][0]["keyword"] == "rust"


@pytest.mark.unit
def test_calculate_keyword_score(optimizer):
    assert optimizer.calculate_keyword_score(["python", "react"], ["Python", "Kubernetes"], {}) == 50.0
    assert optimizer.calculate_keyword_score(
        ["python", "react"], ["Python", "Kubernetes"], {"python": 3.0, "react": 1.0}
    ) == 45.0
    assert optimizer.calculate_keyword_score([], ["Go"], {"a": 5.0, "b": 5.0}) == 0.0
    assert optimizer.calculate_keyword_score([], [], {}) == 85.0


@pytest.mark.unit
def test_find_missing_keywords(optimizer):
    missing = optimizer.find_missing_keywords(
        ["python", "react"], ["Python", "Leadership", "Kubernetes"]
    )

    assert [(s.keyword, s.relevance, s.category, s.priority) for s in missing] == [
        ("Kubernetes", 65, "technical", "high"),
        ("Leadership", 50, "soft", "medium"),
    ]


# ============================================================================
# Section suggestions
# ============================================================================


@pytest.mark.unit
def test_suggest_experience_action_verb_is_seeded():
    content = "Responsible for backend services"
    first = KeywordOptimizer(rng=random.Random(3)).suggest_section_keywords("experience", content)
    second = KeywordOptimizer(rng=random.Random(3)).suggest_section_keywords("experience", content)

    assert len(first) == 1
    assert first[0].keyword in ACTION_VERBS
    assert first[0].keyword == random.Random(3).choice(ACTION_VERBS)
    assert first == second


@pytest.mark.unit
def test_suggest_experience_with_industry(optimizer):
    suggestions = optimizer.suggest_section_keywords(
        "experience",
        "Responsible for backend services",
        OptimizationOptions(industry="technology"),
    )

    assert [s.relevance for s in suggestions] == [90, 85, 85, 85]
    assert [s.keyword for s in suggestions[1:]] == ["JavaScript", "Python", "Java"]


@pytest.mark.unit
def test_suggest_experience_with_action_verb_present(optimizer):
    assert optimizer.suggest_section_keywords("experience", "Designed billing flows") == []


@pytest.mark.unit
def test_suggest_projects(optimizer):
    [suggestion] = optimizer.suggest_section_keywords("projects", "A tool for tracking shipments")

    assert suggestion.keyword == "developed"
    assert suggestion.relevance == 88
    assert optimizer.suggest_section_keywords("projects", "Built a tracking tool") == []


@pytest.mark.unit
def test_suggest_skills(optimizer):
    suggestions = optimizer.suggest_section_keywords(
        "skills", "JavaScript, Python", OptimizationOptions(industry="technology")
    )

    # "java" is already contained in "javascript"
    assert [s.keyword for s in suggestions] == ["React", "Node.js", "AWS", "Docker", "Kubernetes"]
    assert all(s.relevance == 92 for s in suggestions)


@pytest.mark.unit
def test_suggest_summary(optimizer):
    options = OptimizationOptions(role="Software Engineer")
    suggestions = optimizer.suggest_section_keywords(
        "summary", "Software engineer with experience in APIs", options
    )

    assert [s.keyword for s in suggestions] == ["development", "programming", "coding"]
    assert optimizer.suggest_section_keywords("summary", "Anything") == []


@pytest.mark.unit
def test_suggest_invalid_section(optimizer):
    with pytest.raises(ValueError, match="Invalid section"):
        optimizer.suggest_section_keywords("hobbies", "Climbing")


# ============================================================================
# Content optimization
# ============================================================================


@pytest.mark.unit
def test_optimize_content(optimizer):
    resume = ResumeRecord(
        profile="Engineer with experience in web apps",
        experience=[Experience(bullets=["Developed APIs using Python", "Mentored interns"])],
        projects=[Project(name="Ledger", desc="Invoice tracker")],
    )

    optimized, changes = optimizer.optimize_content(resume, ["Docker"])

    assert [c.section for c in changes] == [
        "profile",
        "experience[0].bullets[0]",
        "projects[0].desc",
    ]
    assert optimized.profile == "Engineer with experience in Docker and web apps"
    assert optimized.experience[0].bullets == ["Developed APIs using Docker and Python", "Mentored interns"]
    assert optimized.projects[0].desc == "Invoice tracker (Docker)"
    assert all(c.added_keywords == ("Docker",) for c in changes)


@pytest.mark.unit
def test_optimize_content_does_not_mutate_input(optimizer):
    resume = ResumeRecord.default()
    before = resume.to_dict()

    optimizer.optimize_content(resume, ["Kubernetes", "Terraform"])

    assert resume.to_dict() == before


@pytest.mark.unit
def test_optimize_content_adds_at_most_three_keywords(optimizer):
    resume = ResumeRecord(projects=[Project(desc="Tool")])

    optimized, [change] = optimizer.optimize_content(resume, ["Alpha", "Beta", "Gamma", "Delta"])

    assert optimized.projects[0].desc == "Tool (Alpha) (Beta) (Gamma)"
    assert change.added_keywords == ("Alpha", "Beta", "Gamma")


@pytest.mark.unit
def test_optimize_content_skips_present_keywords(optimizer):
    resume = ResumeRecord(profile="Python engineer")

    _, changes = optimizer.optimize_content(resume, ["python"])

    assert changes == []


@pytest.mark.unit
def test_can_integrate_keyword():
    assert can_integrate_keyword("Mentored interns", "Redis", "experience") is True
    assert can_integrate_keyword("Implemented caching", "Docker", "experience") is True
    assert can_integrate_keyword("Mentored interns", "Docker", "experience") is False
    assert can_integrate_keyword("Engineer", "Leadership", "summary") is False
    assert can_integrate_keyword("Skilled engineer", "Leadership", "summary") is True


@pytest.mark.unit
def test_integrate_keyword_fallback_to_append():
    assert integrate_keyword("Shipped features", "Go", "experience") == "Shipped features (Go)"
    assert integrate_keyword("Shipped with care", "Go", "experience") == "Shipped with Go and care"


# ============================================================================
# Industry recommendations and export
# ============================================================================


@pytest.mark.unit
def test_industry_recommendations(optimizer):
    recommendations = optimizer.get_industry_recommendations("Technology")

    assert len(recommendations.must_have) == 10
    assert recommendations.must_have[0].keyword == "JavaScript"
    assert all(s.priority == "high" and s.relevance == 90 for s in recommendations.must_have)
    assert len(recommendations.recommended) == 10
    assert all(s.relevance == 70 for s in recommendations.recommended)
    emerging = [s.keyword for s in recommendations.emerging]
    assert emerging[0] == "Machine Learning"
    assert "Blockchain" in emerging
    assert len(emerging) <= 5


@pytest.mark.unit
def test_industry_recommendations_unknown_industry(optimizer):
    recommendations = optimizer.get_industry_recommendations("agriculture")

    assert recommendations.must_have == ()
    assert recommendations.recommended == ()
    assert recommendations.emerging == ()


@pytest.mark.unit
def test_export_analysis_formats(optimizer):
    analysis = optimizer.analyze_keywords(ResumeRecord(profile="Python developer"), "python rust")

    csv_lines = optimizer.export_analysis(analysis, "csv").splitlines()
    assert csv_lines[0] == "Keyword,Category,Priority,Relevance,Context"
    assert csv_lines[1].startswith("rust,")

    assert "KEYWORD ANALYSIS REPORT" in optimizer.export_analysis(analysis, "text")
    assert '"score"' in optimizer.export_analysis(analysis)

    with pytest.raises(ValueError, match="Unsupported export format"):
        optimizer.export_analysis(analysis, "html")
