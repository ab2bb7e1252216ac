"""
Keyword matching: partition target keywords by presence in resume text.
"""

from dataclasses import dataclass
from typing import Iterable, List, Tuple


@dataclass(frozen=True)
class KeywordMatch:
    """
    Result of matching target keywords against resume text.

    Attributes:
        score: Percentage of targets found (0-100; 0 when there are no targets)
        matched: Targets found, in target order
        missing: Targets not found, in target order
    """

    score: float
    matched: Tuple[str, ...]
    missing: Tuple[str, ...]


def combine_keywords(*keyword_lists: Iterable[str]) -> List[str]:
    """
    Concatenate keyword lists, dropping case-insensitive duplicates.

    The first spelling of each keyword wins and order is preserved.
    """
    seen = set()
    combined = []
    for keywords in keyword_lists:
        for keyword in keywords:
            key = keyword.lower()
            if key not in seen:
                seen.add(key)
                combined.append(keyword)
    return combined


def match_keywords(resume_text: str, target_keywords: Iterable[str]) -> KeywordMatch:
    """
    Split target keywords into matched and missing by substring containment.

    Containment is tested against the full resume text, not against an
    extracted keyword set, so "java" matches inside "javascript".

    Args:
        resume_text: Resume text (compared case-insensitively)
        target_keywords: Keywords to look for

    Returns:
        KeywordMatch with matched + missing covering every target exactly once
        per occurrence in target_keywords
    """
    text = resume_text.lower()
    targets = list(target_keywords)

    matched = [keyword for keyword in targets if keyword.lower() in text]
    missing = [keyword for keyword in targets if keyword.lower() not in text]

    score = len(matched) / len(targets) * 100 if targets else 0.0
    return KeywordMatch(score=score, matched=tuple(matched), missing=tuple(missing))
