"""Unit tests for keyword extraction, density and matching."""

import pytest

from rescore.contexts.intake import Experience, JobDescription, PersonalInfo, Project, ResumeRecord
from rescore.contexts.targeting.keyword_density import (
    calculate_keyword_density,
    count_occurrences,
    count_words,
    find_overused_keywords,
)
from rescore.contexts.targeting.keyword_extraction import (
    extract_keywords,
    extract_phrases,
    extract_words,
)
from rescore.contexts.targeting.keyword_matching import combine_keywords, match_keywords
from rescore.contexts.targeting.text_extraction import extract_job_text, extract_resume_text


# ============================================================================
# Extraction
# ============================================================================


@pytest.mark.unit
def test_extract_words_filters_stop_words_and_short_tokens():
    words = extract_words("The team is using Go and Python with C++ for an API")

    assert words == ["team", "using", "python", "c++", "api"]


@pytest.mark.unit
def test_extract_words_keeps_tech_punctuation():
    """Test that + # . - survive while other punctuation splits tokens."""
    words = extract_words("C#, Node.js; front-end (React)!")

    assert words == ["node.js", "front-end", "react"]


@pytest.mark.unit
def test_extract_phrases():
    phrases = extract_phrases("Full Stack work on CI/CD with Node.js as Project Manager")

    assert "full stack" in phrases
    assert "ci/cd" in phrases
    assert "node.js" in phrases
    assert "project manager" in phrases


@pytest.mark.unit
def test_extract_keywords_example():
    assert extract_keywords("Built CI/CD with Node.js") == ["built", "node.js", "ci/cd"]


@pytest.mark.unit
def test_extract_keywords_deduplicates_in_first_seen_order():
    keywords = extract_keywords("Python python PYTHON developer Python")

    assert keywords == ["python", "developer"]


@pytest.mark.unit
def test_extract_keywords_empty_text():
    assert extract_keywords("") == []


# ============================================================================
# Density
# ============================================================================


@pytest.mark.unit
def test_count_words():
    assert count_words("one two  three") == 3
    assert count_words("") == 1
    assert count_words(" padded ") == 3


@pytest.mark.unit
def test_count_occurrences_is_whole_word_and_case_insensitive():
    text = "Java and javascript and JAVA"

    assert count_occurrences(text, "java") == 2
    assert count_occurrences(text, "c++") == 0


@pytest.mark.unit
def test_calculate_keyword_density():
    text = "python python rust go go go java java java java"
    density = calculate_keyword_density(text, ["python", "go", "haskell"])

    assert density == pytest.approx({"python": 20.0, "go": 30.0, "haskell": 0.0})


@pytest.mark.unit
def test_find_overused_keywords():
    density = {"python": 2.5, "rust": 2.0, "go": 0.1, "java": 9.0}

    assert find_overused_keywords(density) == ["python", "java"]
    assert find_overused_keywords(density, threshold=5.0) == ["java"]


# ============================================================================
# Matching
# ============================================================================


@pytest.mark.unit
def test_combine_keywords_first_spelling_wins():
    combined = combine_keywords(["Python", "AWS"], ["python", "Docker", "aws"])

    assert combined == ["Python", "AWS", "Docker"]


@pytest.mark.unit
def test_match_keywords_partitions_targets():
    match = match_keywords("Senior Python developer on AWS", ["Python", "Kubernetes", "aws", "Go"])

    assert match.matched == ("Python", "aws")
    assert match.missing == ("Kubernetes", "Go")
    assert match.score == 50.0


@pytest.mark.unit
def test_match_keywords_is_substring_based():
    """Test that "java" is found inside "javascript"."""
    match = match_keywords("javascript engineer", ["Java"])

    assert match.matched == ("Java",)
    assert match.score == 100.0


@pytest.mark.unit
def test_match_keywords_no_targets():
    match = match_keywords("anything", [])

    assert match.score == 0.0
    assert match.matched == ()
    assert match.missing == ()


# ============================================================================
# Text extraction
# ============================================================================


@pytest.mark.unit
def test_extract_resume_text_order_and_case():
    resume = ResumeRecord(
        personal=PersonalInfo(name="Ada Byte", role="Engineer", email="ada@example.com"),
        profile="Builds compilers",
        tech_stack=["Rust", "LLVM"],
        experience=[Experience(company="Acme", title="Dev", bullets=["Wrote parsers"])],
        projects=[Project(name="Lexi", desc="Lexer generator", tech="Rust")],
        leadership=["Ran a reading group"],
    )

    text = extract_resume_text(resume)
    assert text.startswith("ada byte engineer builds compilers rust llvm dev acme wrote parsers")
    assert "lexi lexer generator rust" in text
    assert "ada@example.com" not in text
    assert "reading group" not in text

    assert "Ada Byte" in extract_resume_text(resume, lowercase=False)


@pytest.mark.unit
def test_extract_resume_text_empty_record():
    assert extract_resume_text(ResumeRecord()).strip() == ""


@pytest.mark.unit
def test_extract_job_text():
    job = JobDescription(
        title="SRE",
        company="Acme",
        description="Keep things up",
        requirements=["Linux"],
        preferred_skills=["Go"],
        keywords=["pager"],
    )

    assert extract_job_text(job) == "sre keep things up linux go"
