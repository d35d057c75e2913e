"""Turn text extracted from a PDF into Markdown with headers, lists and paragraphs."""

from __future__ import annotations

import os
import re
from collections.abc import Mapping
from datetime import datetime

from hapiq import segmentation

__all__ = ["PDFConverter", "title_case", "render_document"]

_HEADER_PATTERNS = tuple(
    re.compile(pattern, re.ASCII)
    for pattern in (
        r"^[A-Z][A-Z\s]{5,50}\Z",  # ALL CAPS headers
        r"^\d+\.?\s+[A-Z][A-Za-z\s]{5,80}\Z",  # numbered sections
        r"^[A-Z]\w+(?:\s+[A-Z]\w+){1,8}\Z",  # Title Case headers
        r"^\d+\.\d+\.?\s+[A-Z][A-Za-z\s]{3,60}\Z",  # subsections
    )
)

_BULLET_PATTERNS = (
    re.compile(r"^[•·▪▫‣⁃]\s+", re.ASCII),
    re.compile(r"^[-*+]\s+", re.ASCII),
)

_NUMBERED_ITEM = re.compile(r"^\d+\.\s+", re.ASCII)

_NUMBER_PATTERNS = (
    _NUMBERED_ITEM,
    re.compile(r"^\(\d+\)\s+", re.ASCII),
    re.compile(r"^[a-z]\)\s+", re.ASCII),
)

_SECTION_NUMBER = re.compile(r"^\d+(\.\d+)*\.?\s+", re.ASCII)
_SECTION_PREFIX = re.compile(r"^\d+(\.\d+)*\.?\s*", re.ASCII)
_LEVEL_TWO = re.compile(r"^\d+\.\s+", re.ASCII)
_LEVEL_THREE = re.compile(r"^\d+\.\d+\.\s+", re.ASCII)
_LEVEL_FOUR = re.compile(r"^\d+\.\d+\.\d+\.\s+", re.ASCII)

_WHITESPACE = re.compile(r"\s+", re.ASCII)
_PARAGRAPH_BREAK = re.compile(r"\n\s*\n", re.ASCII)
_EXCESS_NEWLINES = re.compile(r"\n{3,}")
_CONTROL_CHARS = re.compile("[\x00-\x08\x0b\x0c\x0e-\x1f\x7f]")

_CHARACTER_FIXES = (
    ("\u00a0", " "),  # non-breaking space
    ("\u2010", "-"),
    ("\u2011", "-"),
    ("\u2012", "-"),
    ("\u2013", "-"),
    ("\u2014", "--"),
    ("\u201c", '"'),
    ("\u201d", '"'),
    ("\u2018", "'"),
    ("\u2019", "'"),
)


def _byte_len(text: str) -> int:
    return len(text.encode("utf-8"))


def title_case(s: str) -> str:
    """Capitalise the first letter of each word and lower-case the rest."""
    if not s:
        return s
    return " ".join(word[0].upper() + word[1:].lower() for word in s.split())


class PDFConverter:
    """Formats plain text from a PDF as Markdown."""

    def __init__(
        self,
        preserve_layout: bool = False,
        include_pages: bool = False,
        extract_headers: bool = True,
    ) -> None:
        self.preserve_layout = preserve_layout
        self.include_pages = include_pages
        self.extract_headers = extract_headers

    def clean_text(self, text: str) -> str:
        """Normalise whitespace, dashes, quotes and control characters line by line."""
        cleaned_lines = []
        for line in text.split("\n"):
            cleaned = _WHITESPACE.sub(" ", line).strip()
            for old, new in _CHARACTER_FIXES:
                cleaned = cleaned.replace(old, new)
            cleaned = _CONTROL_CHARS.sub("", cleaned)
            cleaned_lines.append(cleaned)

        result = _EXCESS_NEWLINES.sub("\n\n", "\n".join(cleaned_lines))
        return result.strip()

    def is_header(self, line: str) -> bool:
        """Guess whether *line* is a section header."""
        length = _byte_len(line)
        if length < 3 or length > 120:
            return False

        looks_like_body = "  " in line or line.endswith(".") or "," in line
        if looks_like_body and not _SECTION_NUMBER.match(line):
            return False

        if any(pattern.search(line) for pattern in _HEADER_PATTERNS):
            return True

        words = line.split()
        if 2 <= len(words) <= 15:
            capitalised = sum(1 for word in words if "A" <= word[0] <= "Z")
            threshold = 0.5 if len(words) <= 4 else 0.6
            if capitalised / len(words) > threshold:
                return True

        return False

    def determine_header_level(self, line: str) -> int:
        """Return the Markdown header level (2 to 4) for a header line."""
        if _LEVEL_TWO.match(line):
            return 2
        if _LEVEL_THREE.match(line):
            return 3
        if _LEVEL_FOUR.match(line):
            return 4
        if line.upper() == line and len(line.split()) <= 6:
            return 2
        return 3

    def clean_header_text(self, line: str) -> str:
        """Strip section numbering and soften all-caps header text."""
        cleaned = _SECTION_PREFIX.sub("", line, count=1)
        if cleaned.upper() == cleaned and _byte_len(cleaned) > 5:
            cleaned = title_case(cleaned.lower())
        return cleaned.strip()

    def is_list_item(self, line: str) -> bool:
        """Return True if *line* starts with a bullet or list numbering."""
        return any(p.match(line) for p in _BULLET_PATTERNS) or any(
            p.match(line) for p in _NUMBER_PATTERNS
        )

    def format_list_item(self, line: str) -> str:
        """Rewrite a list line as a Markdown item; numbered items stay as they are."""
        for pattern in _BULLET_PATTERNS:
            if pattern.match(line):
                return pattern.sub("- ", line, count=1)

        if _NUMBERED_ITEM.match(line):
            return line

        for pattern in _NUMBER_PATTERNS:
            if pattern.match(line):
                return pattern.sub("- ", line, count=1)

        return "- " + line

    def _render_lines(self, lines: list[str]) -> str:
        out = ""
        in_paragraph = False
        last_was_header = False

        for i, raw in enumerate(lines):
            line = raw.strip()

            if not line:
                if self.preserve_layout:
                    out += "\n"
                elif in_paragraph:
                    out += "\n\n"
                    in_paragraph = False
                continue

            if self.extract_headers and self.is_header(line):
                if in_paragraph:
                    out += "\n"
                    in_paragraph = False
                level = self.determine_header_level(line)
                out += f"{'#' * level} {self.clean_header_text(line)}\n\n"
                last_was_header = True
                continue

            if self.is_list_item(line):
                if in_paragraph:
                    out += "\n"
                    in_paragraph = False
                out += self.format_list_item(line) + "\n"
                continue

            if not in_paragraph and not last_was_header:
                if out and not out.endswith("\n\n"):
                    out += "\n"

            if in_paragraph and not self.preserve_layout:
                out += " " + line
            else:
                out += line
                in_paragraph = True

            last_was_header = False

            if i + 1 < len(lines):
                next_line = lines[i + 1].strip()
                if (
                    next_line
                    and not self.is_header(next_line)
                    and not self.is_list_item(next_line)
                    and not self.preserve_layout
                ):
                    continue

            out += "\n"
            if in_paragraph:
                out += "\n"
                in_paragraph = False

        return out

    def process_page_text(self, text: str) -> str:
        """Clean the text of one page and format it as Markdown."""
        return self._render_lines(self.clean_text(text).split("\n"))

    def process_paragraph(self, paragraph: str) -> str:
        """Format one paragraph block as Markdown."""
        return self._render_lines(paragraph.strip().split("\n"))

    def process_document_text(self, text: str) -> str:
        """Clean a whole document and format it paragraph by paragraph."""
        paragraphs = _PARAGRAPH_BREAK.split(self.clean_text(text))
        out = []

        for i, paragraph in enumerate(paragraphs):
            if not paragraph.strip():
                continue
            out.append(self.process_paragraph(paragraph))
            if i < len(paragraphs) - 1 and paragraphs[i + 1].strip():
                out.append("\n\n")

        return "".join(out)

    def add_basic_spacing(self, text: str) -> str:
        """Restore word spacing in text whose words were run together."""
        return segmentation.add_basic_spacing(text)


def _stem(filename: str) -> str:
    base = os.path.basename(os.path.normpath(filename))
    dot = base.rfind(".")
    return base[:dot] if dot != -1 else base


def render_document(
    body: str,
    filename: str,
    converter: PDFConverter | None = None,
    meta: Mapping[str, str] | None = None,
    timestamp: datetime | None = None,
) -> str:
    """Build a Markdown document from text extracted out of *filename*.

    Raises ValueError when *body* holds no readable text.
    """
    if not body.strip():
        raise ValueError("no readable text found in PDF file")

    converter = converter or PDFConverter()
    timestamp = timestamp or datetime.now()

    parts = [
        f"# {title_case(_stem(filename).replace('_', ' '))}\n\n",
        f"*Converted from PDF: {filename}*\n",
        f"*Conversion date: {timestamp.strftime('%Y-%m-%d %H:%M:%S')}*\n\n",
    ]

    if meta:
        parts.append("## Document Metadata\n\n")
        parts.extend(
            f"- **{title_case(key)}**: {value}\n" for key, value in meta.items() if value
        )
        parts.append("\n")

    parts.append(converter.process_document_text(body))
    return "".join(parts)