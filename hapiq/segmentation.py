"""Split run-together words that come out of PDF text extraction."""

from __future__ import annotations

import re

__all__ = [
    "COMMON_WORDS",
    "SCIENTIFIC_TERMS",
    "add_basic_spacing",
    "apply_basic_patterns",
    "segment_words",
    "dynamic_word_segmentation",
    "preserve_case",
    "is_valid_word",
    "word_score",
    "is_scientific_term",
    "is_reasonable_word",
]

# ASCII whitespace only, matching the classic regex definition of \s.
_WS = "\t\n\f\r "
_NON_WS = f"[^{_WS}]"

_BOUNDARY_PATTERNS = tuple(
    re.compile(pattern)
    for pattern in (
        r"([a-z])([A-Z])",
        r"([a-zA-Z])([0-9])",
        r"([0-9])([a-zA-Z])",
        r"([.!?])([A-Z])",
        f"(https?://{_NON_WS}+)([A-Z])",
        r"([a-z])(https?://)",
        f"(doi\\.org/{_NON_WS}+)([A-Z])",
        r"([0-9]/[0-9\-]+)([A-Z])",
        r"([a-z])(doi\.org)",
        r"([0-9])([A-Z])",
    )
)

_SPACES = re.compile(f"[{_WS}]+")
_WORD_PUNCTUATION = frozenset(".,!?;:()[]{}\"'")
_VOWELS = frozenset("aeiouAEIOU")

_UNREACHABLE = -1000
_SINGLE_CHAR_PENALTY = 20

SCIENTIFIC_TERMS = frozenset(
    {
        "supplementary", "information", "version", "material",
        "available", "correspondence", "requests", "addressed",
        "peer", "review", "nature", "communications",
        "anonymous", "reviewers", "contribution", "reports",
        "reprints", "permission", "publisher", "springer",
        "neutral", "jurisdictional", "claims", "published",
        "institutional", "affiliations", "research", "analysis",
        "methodology", "results", "discussion", "conclusion",
        "abstract", "introduction", "methods", "data",
        "statistical", "significant", "experiment", "study",
        "online", "contains", "thanks", "regard", "remains",
        "reviewer",
    }
)

COMMON_WORDS = frozenset(
    {
        # Articles and determiners
        "a", "an", "the", "this", "that", "these", "those",
        # Prepositions
        "in", "on", "at", "by", "for", "with", "to",
        "of", "from", "up", "down", "over", "under",
        # Conjunctions
        "and", "or", "but", "nor", "yet", "so",
        # Common verbs
        "is", "are", "was", "were", "be", "been", "being",
        "have", "has", "had", "do", "does", "did", "will",
        "would", "could", "should", "may", "might", "can",
        "get", "got", "go", "went", "come", "came",
        "see", "saw", "know", "knew", "think", "thought",
        # Common nouns
        "time", "person", "year", "way", "day", "thing",
        "man", "woman", "child", "world", "life", "hand",
        "part", "place", "case", "point", "group", "problem",
        "fact", "work", "week", "month", "end", "number",
        # Common adjectives
        "good", "new", "last", "long", "great",
        "little", "own", "other", "old", "right", "big",
        "high", "different", "small", "large", "next", "early",
        # Academic and scientific words
        "study", "research", "analysis", "data", "method", "result",
        "conclusion", "figure", "table", "paper", "article", "journal",
        "university", "college", "department", "professor", "student",
        "experiment", "test", "sample", "control", "statistical",
        "significant", "hypothesis", "theory", "model", "framework",
        "approach", "technique", "procedure", "protocol", "methodology",
        # Numbers and quantifiers
        "one", "two", "three", "four", "five", "six",
        "seven", "eight", "nine", "ten", "first", "second",
        "third", "many", "much", "more", "most", "few",
        "several", "some", "any", "all", "both", "each",
        # Pieces of common academic phrases
        "online", "version", "contains", "material", "available",
        "information", "supplementary", "correspondence", "requests",
        "addressed", "review", "peer", "thanks",
        "anonymous", "reviewers", "their", "contribution", "reports",
        "reprints", "permission", "publisher", "note", "remains",
        "neutral", "regard", "claims", "published", "maps",
        "institutional", "affiliations", "nature", "communications",
        "reviewer",
    }
)


def is_scientific_term(word: str) -> bool:
    """Return True if *word* is a known scientific or academic term."""
    return word in SCIENTIFIC_TERMS


def is_reasonable_word(word: str) -> bool:
    """Judge by its vowel ratio whether *word* could be an English word."""
    if not 2 <= len(word) <= 20:
        return False

    vowels = sum(1 for ch in word if ch in _VOWELS)
    ratio = vowels / len(word)

    if len(word) <= 4:
        low, high = 0.1, 0.8
    else:
        low, high = 0.15, 0.75

    return low <= ratio <= high


def is_valid_word(word: str) -> bool:
    """Return True if *word* may stand as one segment of a split string."""
    if not word:
        return False
    if len(word) == 1:
        return word in "aioAIO"
    if word in COMMON_WORDS:
        return True
    if is_scientific_term(word):
        return True
    return is_reasonable_word(word)


def word_score(word: str) -> int:
    """Score *word* as a segment; longer known words score higher."""
    if not word:
        return -100
    if len(word) == 1:
        return -5
    if word in COMMON_WORDS:
        return len(word) * 10
    if is_scientific_term(word):
        return len(word) * 8
    if is_reasonable_word(word):
        return len(word) * 5
    return -2


def dynamic_word_segmentation(text: str) -> str:
    """Split a run of joined words at the best-scoring boundaries.

    The text comes back unchanged when no split scores above zero or when
    too many of the resulting pieces are single characters.
    """
    if not text or " " in text:
        return text

    n = len(text)
    best = [0] + [_UNREACHABLE] * n
    parent = [0] * (n + 1)

    for end in range(1, n + 1):
        for start in range(end):
            if best[start] < 0:
                continue
            piece = text[start:end]
            if is_valid_word(piece):
                score = best[start] + word_score(piece)
                if score > best[end]:
                    best[end] = score
                    parent[end] = start

        if best[end] < 0:
            best[end] = best[end - 1] - _SINGLE_CHAR_PENALTY
            parent[end] = end - 1

    if best[n] <= 0:
        return text

    words: list[str] = []
    pos = n
    while pos > 0:
        start = parent[pos]
        piece = text[start:pos]
        if piece:
            words.append(piece)
        pos = start
    words.reverse()

    single_chars = sum(1 for w in words if len(w) == 1)
    if single_chars > len(words) // 3:
        return text

    return " ".join(words)


def preserve_case(original: str, segmented: str) -> str:
    """Capitalise *segmented* when *original* began with an upper-case letter."""
    if not original or not segmented:
        return segmented

    if "A" <= original[0] <= "Z" and "a" <= segmented[0] <= "z":
        return segmented[0].upper() + segmented[1:]
    return segmented


def apply_basic_patterns(text: str) -> str:
    """Insert spaces at obvious boundaries: case changes, digits, URLs and DOIs."""
    for pattern in _BOUNDARY_PATTERNS:
        text = pattern.sub(r"\1 \2", text)
    return text


def segment_words(text: str) -> str:
    """Split each long, punctuation-free token of *text* into words."""
    result: list[str] = []

    for word in text.split():
        if len(word) < 6 or any(ch in _WORD_PUNCTUATION for ch in word):
            result.append(word)
            continue

        segmented = dynamic_word_segmentation(word.lower())
        if segmented.casefold() != word.casefold() and "  " not in segmented:
            result.append(preserve_case(word, segmented))
        else:
            result.append(word)

    return " ".join(result)


def add_basic_spacing(text: str) -> str:
    """Restore word spacing in text whose words were run together."""
    result = apply_basic_patterns(text)
    result = segment_words(result)
    result = _SPACES.sub(" ", result)
    return result.strip()