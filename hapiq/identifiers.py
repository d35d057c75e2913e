"""Normalisation of dataset identifiers (DOIs, URLs, accessions) found in free text."""

from __future__ import annotations

import re

__all__ = [
    "cleanup_identifier",
    "contains_valid_identifier",
    "is_valid_identifier_start",
    "extract_url",
    "extract_doi",
    "handle_special_characters",
]

# ASCII whitespace only, matching the classic regex definition of \s.
_WS = "\t\n\f\r "

_ACCESSION_PREFIXES = "PRJNA|PRJEB|GSE|SRA|ERP|DRP"

_MULTI_SPACE = re.compile(f"[{_WS}]{{2,}}")
_ANY_SPACE = re.compile(f"[{_WS}]+")
_TRAILING_BRACKETED = re.compile(f"[{_WS}]+[(\\[{{].*\\Z")
_TRAILING_CITATION = re.compile(f"[{_WS}]*[,;].*\\Z")
_SPECIAL_SYMBOLS = re.compile("[©®™]")

_DOI_ANYWHERE = re.compile(r"10\.[0-9]+/")
_DOI_AT_START = re.compile(r"10\.[0-9]+/")
_ACCESSION = re.compile(f"({_ACCESSION_PREFIXES})")
_ACCESSION_NUMBERED = re.compile(f"({_ACCESSION_PREFIXES})[0-9]+")
_DOI_LEADING_PART = re.compile(f"10\\.[0-9]+/[^{_WS}(\\[{{,;]+")

# Markers of descriptive text trailing a URL; the first three are matched literally.
_URL_TRAILERS = (
    r" \(",
    r" \[",
    r" \{",
    " accessed",
    " version",
    " dataset",
    " data",
)


def contains_valid_identifier(s: str) -> bool:
    """Return True if *s* contains a URL, a DOI or a known accession prefix anywhere."""
    if "http://" in s or "https://" in s:
        return True
    if _DOI_ANYWHERE.search(s):
        return True
    return bool(_ACCESSION.search(s))


def is_valid_identifier_start(s: str) -> bool:
    """Return True if *s* begins like a URL, a DOI or a known accession."""
    if s.startswith(("http://", "https://")):
        return True
    if _DOI_AT_START.match(s):
        return True
    return bool(_ACCESSION.match(s))


def extract_url(text: str) -> str:
    """Return the URL part of *text*, dropping trailing descriptive words."""
    bracket_idx = text.find("[")
    if bracket_idx != -1:
        space_idx = text.find(" ")
        if space_idx == -1 or bracket_idx < space_idx:
            return text[:bracket_idx].strip()

    for marker in _URL_TRAILERS:
        idx = text.find(marker)
        if idx != -1:
            text = text[:idx]

    return text.strip()


def extract_doi(text: str) -> str:
    """Return the DOI or accession at the start of *text*, dropping what follows it."""
    if text.startswith("10.") and " " in text:
        parts = text.split()
        if len(parts) >= 2 and parts[0].endswith("/"):
            # A DOI split after its prefix, e.g. "10.5281/ zenodo.123456".
            return text

    match = _DOI_LEADING_PART.match(text)
    if match and match.group(0):
        return match.group(0)

    parts = text.split()
    if parts and is_valid_identifier_start(parts[0]):
        return parts[0]

    return text


def handle_special_characters(cleaned: str) -> str:
    """Trim descriptive words after an identifier unless the text carries ©, ® or ™."""
    if " " not in cleaned:
        return cleaned

    parts = cleaned.split()
    if len(parts) < 2:
        return cleaned

    if any(_SPECIAL_SYMBOLS.search(part) for part in parts):
        return cleaned

    if is_valid_identifier_start(parts[0]):
        if parts[0].startswith("http"):
            return extract_url(cleaned)
        return extract_doi(cleaned)

    return cleaned


def cleanup_identifier(identifier: str) -> str:
    """Normalise a DOI, URL or accession taken from citation text.

    Returns an empty string when no usable identifier remains.
    """
    if not identifier:
        return ""

    cleaned = identifier.strip()
    if not cleaned:
        return ""

    # Leading brackets or commas mean the line does not start with an identifier.
    if cleaned.startswith(("[", "(", ",")):
        return ""

    if not contains_valid_identifier(cleaned):
        return ""

    if cleaned.startswith("10."):
        cleaned = _MULTI_SPACE.sub(" ", cleaned)
    else:
        cleaned = _ANY_SPACE.sub(" ", cleaned)

    cleaned = _TRAILING_BRACKETED.sub("", cleaned)
    cleaned = _TRAILING_CITATION.sub("", cleaned)

    if cleaned.startswith("http") and "[" in cleaned and " " not in cleaned:
        bracket_idx = cleaned.index("[")
        if bracket_idx > 0:
            cleaned = cleaned[:bracket_idx]

    cleaned = handle_special_characters(cleaned)

    if not _SPECIAL_SYMBOLS.search(cleaned):
        cleaned = cleaned.rstrip(".,;:!?")

    cleaned = cleaned.rstrip("()[]{}").strip()

    if not contains_valid_identifier(cleaned):
        return ""

    return cleaned