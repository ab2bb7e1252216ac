"""
Heuristic keyword extraction.

Splits free text into single-word keywords and adds technical phrases found in
the original-case text. This is a heuristic, not a tokenizer: false positives
and negatives are expected.
"""

import re
from typing import List

# Articles, conjunctions, prepositions and auxiliary verbs
STOP_WORDS = frozenset(
    [
        "the", "and", "or", "but", "in", "on", "at", "to", "for", "of", "with",
        "by", "from", "up", "about", "into", "through", "during", "before",
        "after", "above", "below", "between", "among", "is", "are", "was",
        "were", "be", "been", "being", "have", "has", "had", "do", "does",
        "did", "will", "would", "could", "should", "may", "might", "must",
        "can", "shall", "a", "an", "this", "that", "these", "those",
    ]
)

MIN_WORD_LENGTH = 3

# Characters kept inside word tokens; everything else becomes a space
NON_KEYWORD_CHARS = re.compile(r"[^a-zA-Z0-9\s+#.-]")

TECH_PHRASES = [
    "machine learning",
    "artificial intelligence",
    "data science",
    "web development",
    "software engineering",
    "project management",
    "user experience",
    "user interface",
    "full stack",
    "front end",
    "back end",
    "devops",
    "ci/cd",
]

# Applied in order to the original-case text; ASCII word boundaries throughout
PHRASE_PATTERNS = [
    re.compile(
        r"\b(" + "|".join(re.escape(p) for p in TECH_PHRASES) + r")\b",
        re.IGNORECASE | re.ASCII,
    ),
    # Two capitalized words, e.g. "Project Manager"
    re.compile(r"\b([A-Z][a-z]+\s+[A-Z][a-z]+)\b", re.ASCII),
    # Dotted tech names, e.g. "Node.js"
    re.compile(r"\b([a-zA-Z]+\.[a-zA-Z]+)\b", re.ASCII),
    # Slashed tech names, e.g. "CI/CD"
    re.compile(r"\b([a-zA-Z]+/[a-zA-Z]+)\b", re.ASCII),
]


def extract_words(text: str) -> List[str]:
    """
    Lowercase single-word tokens of text, excluding stop words and short tokens.

    Characters outside [a-zA-Z0-9 whitespace + # . -] are replaced by spaces
    before splitting, so "C++", "C#" and "Node.js" survive as tokens.

    Returns:
        Tokens in text order (duplicates kept)
    """
    cleaned = NON_KEYWORD_CHARS.sub(" ", text.lower())
    return [
        word
        for word in re.split(r"\s+", cleaned)
        if len(word) >= MIN_WORD_LENGTH and word not in STOP_WORDS
    ]


def extract_phrases(text: str) -> List[str]:
    """
    Lowercased multi-word and punctuated technical phrases found in text.

    Args:
        text: Original-case text (capitalization drives one of the patterns)

    Returns:
        Matches of every phrase pattern, pattern by pattern (duplicates kept)
    """
    phrases = []
    for pattern in PHRASE_PATTERNS:
        phrases.extend(match.group(0).lower() for match in pattern.finditer(text))
    return phrases


def extract_keywords(text: str) -> List[str]:
    """
    Deduplicated keyword set of text: words first, then phrases.

    Example:
        >>> extract_keywords("Built CI/CD with Node.js")
        ['built', 'node.js', 'ci/cd']

    Returns:
        Lowercase keywords in first-seen order
    """
    return list(dict.fromkeys(extract_words(text) + extract_phrases(text)))
