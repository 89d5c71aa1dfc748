"""Multi-word phrase candidates pulled from the raw, untransformed text."""

from __future__ import annotations

import re
from typing import Iterator, List

from memory_layers.analysis.stopwords import StopWordSet
from memory_layers.utils.tokenization import ACCENTED_LETTERS, collapse_whitespace

UPPER = "A-ZÀ-ÖØ-Þ"
LOWER = "a-zß-öø-ÿ"

QUOTED_PATTERN = re.compile(r"\"([^\"\n]+)\"|“([^”\n]+)”|«([^»\n]+)»")
CAPITALIZED_RUN_PATTERN = re.compile(
    rf"\b[{UPPER}][{LOWER}]+(?:[ \t]+[{UPPER}][{LOWER}]+)+\b"
)
LOWERCASE_WORD_PATTERN = re.compile(rf"^[{LOWER}]+(?:-[{LOWER}]+)*$")
# Punctuation other than hyphens ends a lowercase run.
FRAGMENT_BREAK_PATTERN = re.compile(rf"[^\w\s{ACCENTED_LETTERS}-]|\n|_")

MIN_PHRASE_LENGTH = 4
MIN_COMPOUND_LENGTH = 9
MAX_COMPOUND_WORDS = 4


def quoted_phrases(text: str) -> Iterator[str]:
    for match in QUOTED_PATTERN.finditer(text):
        yield next(group for group in match.groups() if group is not None)


def capitalized_phrases(text: str, stop_words: StopWordSet) -> Iterator[str]:
    """Runs of capitalized words, trimmed of leading/trailing stop words."""
    for match in CAPITALIZED_RUN_PATTERN.finditer(text):
        words = match.group(0).split()
        while words and words[0].lower() in stop_words:
            words.pop(0)
        while words and words[-1].lower() in stop_words:
            words.pop()
        if len(words) >= 2:
            yield " ".join(words)


def compound_phrases(text: str, stop_words: StopWordSet) -> Iterator[str]:
    """Lowercase compounds of up to four content words, or hyphenated words.

    Runs are split at stop words, punctuation and line breaks, then cut into
    chunks of at most ``MAX_COMPOUND_WORDS`` words.
    """
    for fragment in FRAGMENT_BREAK_PATTERN.split(text):
        run: List[str] = []
        for word in fragment.split() + [""]:
            if word and LOWERCASE_WORD_PATTERN.match(word) and word not in stop_words:
                run.append(word)
                continue
            for start in range(0, len(run), MAX_COMPOUND_WORDS):
                chunk = run[start : start + MAX_COMPOUND_WORDS]
                if _is_compound(chunk):
                    yield " ".join(chunk)
            run = []


def _is_compound(words: List[str]) -> bool:
    if not words:
        return False
    if len(words) == 1:
        # A single hyphenated word such as "long-term" is already a compound.
        return "-" in words[0] and len(words[0]) >= MIN_COMPOUND_LENGTH
    if len(set(words)) == 1:
        return False
    return len(" ".join(words)) >= MIN_COMPOUND_LENGTH


def extract_phrases(text: str, stop_words: StopWordSet) -> List[str]:
    """Quoted, proper-noun-like and compound phrases, lowercased, in that order."""
    candidates: List[str] = []
    candidates.extend(quoted_phrases(text))
    candidates.extend(capitalized_phrases(text, stop_words))
    candidates.extend(compound_phrases(text, stop_words))

    phrases: List[str] = []
    for candidate in candidates:
        phrase = collapse_whitespace(candidate.lower())
        if len(phrase) < MIN_PHRASE_LENGTH or phrase in stop_words:
            continue
        # Punctuation runs and bare numbers are not phrases.
        if not any(char.isalpha() for char in phrase) or phrase.replace(" ", "").isdigit():
            continue
        phrases.append(phrase)
    return phrases
