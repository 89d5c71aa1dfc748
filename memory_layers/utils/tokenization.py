"""Line and word splitting shared by the structure detector and keyword extractor."""

from __future__ import annotations

import re
from typing import List, NamedTuple

# Latin-1 accented letters, without the multiplication and division signs.
ACCENTED_LETTERS = "À-ÖØ-öø-ÿ"

NON_WORD_PATTERN = re.compile(rf"[^a-z0-9{ACCENTED_LETTERS}\s]")
WHITESPACE_PATTERN = re.compile(r"\s+")


class SourceLine(NamedTuple):
    """A non-blank, trimmed line and what surrounded it in the raw text."""

    text: str
    index: int
    preceded_by_blank: bool


def split_lines(text: str) -> List[SourceLine]:
    """Return the non-blank lines of ``text``, indexed among non-blank lines only.

    ``preceded_by_blank`` is recorded before blank lines are dropped; the first
    line counts as preceded by a blank.
    """
    lines: List[SourceLine] = []
    previous_blank = True
    for raw in text.splitlines():
        stripped = raw.strip()
        if not stripped:
            previous_blank = True
            continue
        lines.append(SourceLine(stripped, len(lines), previous_blank))
        previous_blank = False
    return lines


def normalize_text(text: str) -> str:
    """Lowercase, replace punctuation with spaces and collapse whitespace."""
    lowered = text.lower()
    cleaned = NON_WORD_PATTERN.sub(" ", lowered)
    return WHITESPACE_PATTERN.sub(" ", cleaned).strip()


def collapse_whitespace(text: str) -> str:
    return WHITESPACE_PATTERN.sub(" ", text).strip()


def split_words(normalized: str) -> List[str]:
    if not normalized:
        return []
    return normalized.split(" ")
