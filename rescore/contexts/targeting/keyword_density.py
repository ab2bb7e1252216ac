"""
Keyword density: how much of a text's word count each keyword accounts for.
"""

import re
from typing import Dict, Iterable, List

OVERUSE_THRESHOLD = 2.0


def count_words(text: str) -> int:
    """
    Number of whitespace-separated fields in text.

    Leading/trailing whitespace yields empty fields that are still counted,
    and the empty string counts as one field, so the result is never zero.
    """
    return len(re.split(r"\s+", text))


def count_occurrences(text: str, keyword: str) -> int:
    """Case-insensitive whole-word occurrences of keyword (matched literally)."""
    pattern = re.compile(rf"\b{re.escape(keyword)}\b", re.IGNORECASE | re.ASCII)
    return len(pattern.findall(text))


def calculate_keyword_density(text: str, keywords: Iterable[str]) -> Dict[str, float]:
    """
    Percentage of the total word count contributed by each keyword.

    Args:
        text: Text to measure
        keywords: Keywords to measure (each counted independently)

    Returns:
        Dict mapping keyword -> occurrences / word count * 100 (not clamped)
    """
    word_count = count_words(text)
    return {keyword: count_occurrences(text, keyword) / word_count * 100 for keyword in keywords}


def find_overused_keywords(
    density: Dict[str, float], threshold: float = OVERUSE_THRESHOLD
) -> List[str]:
    """Keywords whose density exceeds threshold percent, in density-dict order."""
    return [keyword for keyword, value in density.items() if value > threshold]
