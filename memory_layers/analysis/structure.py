"""Heuristic heading detection over the lines of a text."""

from __future__ import annotations

import re
from typing import Callable, List, NamedTuple, Optional, Sequence

from memory_layers.config import settings
from memory_layers.models.structure import StructuralLine
from memory_layers.utils.tokenization import SourceLine, split_lines

MAJOR = 1
MINOR = 2

ENUMERATED_PATTERN = re.compile(
    r"^(?:\d+(?:\.\d+)*[.)]|[IVXLCDM]+\.|[A-Za-z]\.|[*+-])(?:\s+|$)"
)
HEADING_KEYWORDS = frozenset(
    {
        "chapitre",
        "chapter",
        "section",
        "partie",
        "part",
        "introduction",
        "conclusion",
        "résumé",
        "summary",
        "sommaire",
        "overview",
    }
)
SENTENCE_ENDINGS = (".", "!", "?", ";", ",")

RuleMatcher = Callable[[SourceLine, Optional[SourceLine]], Optional[int]]


class HeadingRule(NamedTuple):
    """A named predicate returning the level it assigns, or None."""

    name: str
    match: RuleMatcher


def match_enumerated_marker(line: SourceLine, next_line: Optional[SourceLine]) -> Optional[int]:
    """Numbered, lettered, roman-numeral or bulleted lines."""
    return MAJOR if ENUMERATED_PATTERN.match(line.text) else None


def match_all_caps(line: SourceLine, next_line: Optional[SourceLine]) -> Optional[int]:
    # isupper() is False when the line has no cased letter at all.
    if 3 < len(line.text) < 100 and line.text.isupper():
        return MAJOR
    return None


def match_keyword_prefix(line: SourceLine, next_line: Optional[SourceLine]) -> Optional[int]:
    first_word = line.text.split(maxsplit=1)[0].lower().rstrip(":.-")
    return MAJOR if first_word in HEADING_KEYWORDS else None


def match_colon_terminated(line: SourceLine, next_line: Optional[SourceLine]) -> Optional[int]:
    if line.text.endswith(":") and len(line.text) < 100:
        return MINOR
    return None


def short_isolated_matcher(
    max_length: int, longer_ratio: float, skip_sentences: bool = False
) -> RuleMatcher:
    """Build the rule for short lines that stand apart from their neighbours.

    A short line is minor when it is the last line, is followed by a line at
    least ``longer_ratio`` times longer, or follows a blank line. Being followed
    by a longer line and following a blank line together promote it to major.
    With ``skip_sentences``, lines ending in sentence punctuation never match.
    """

    def match_short_isolated(line: SourceLine, next_line: Optional[SourceLine]) -> Optional[int]:
        text = line.text
        if len(text) >= max_length:
            return None
        if skip_sentences and text.endswith(SENTENCE_ENDINGS):
            return None
        followed_by_longer = next_line is not None and len(next_line.text) >= len(text) * longer_ratio
        if followed_by_longer and line.preceded_by_blank:
            return MAJOR
        if next_line is None or followed_by_longer or line.preceded_by_blank:
            return MINOR
        return None

    return match_short_isolated


class StructureDetector:
    """Classifies each non-blank line as structural or plain.

    Every rule is evaluated in order on every line; the line keeps the most
    important level any rule assigned.
    """

    def __init__(
        self,
        short_line_max_length: int | None = None,
        longer_line_ratio: float | None = None,
        skip_sentence_lines: bool | None = None,
    ) -> None:
        if short_line_max_length is None:
            short_line_max_length = settings.short_line_max_length
        if longer_line_ratio is None:
            longer_line_ratio = settings.longer_line_ratio
        if skip_sentence_lines is None:
            skip_sentence_lines = settings.skip_sentence_lines
        if short_line_max_length < 1:
            raise ValueError("short_line_max_length must be >= 1")
        if longer_line_ratio <= 0:
            raise ValueError("longer_line_ratio must be > 0")
        self.short_line_max_length = short_line_max_length
        self.longer_line_ratio = longer_line_ratio
        self.skip_sentence_lines = skip_sentence_lines
        self.rules: Sequence[HeadingRule] = (
            HeadingRule("enumerated_marker", match_enumerated_marker),
            HeadingRule("all_caps", match_all_caps),
            HeadingRule("keyword_prefix", match_keyword_prefix),
            HeadingRule(
                "short_isolated",
                short_isolated_matcher(
                    self.short_line_max_length,
                    self.longer_line_ratio,
                    self.skip_sentence_lines,
                ),
            ),
            HeadingRule("colon_terminated", match_colon_terminated),
        )

    def matching_rules(self, line: SourceLine, next_line: Optional[SourceLine] = None) -> List[str]:
        """Names of the rules that fire for ``line``, in evaluation order."""
        return [rule.name for rule in self.rules if rule.match(line, next_line) is not None]

    def classify(self, line: SourceLine, next_line: Optional[SourceLine] = None) -> Optional[int]:
        levels = [rule.match(line, next_line) for rule in self.rules]
        matched = [level for level in levels if level is not None]
        if not matched:
            return None
        return max(MAJOR, min(matched))

    def detect(self, text: str) -> List[StructuralLine]:
        lines = split_lines(text)
        structure: List[StructuralLine] = []
        for position, line in enumerate(lines):
            next_line = lines[position + 1] if position + 1 < len(lines) else None
            level = self.classify(line, next_line)
            if level is not None:
                structure.append(StructuralLine(text=line.text, level=level, line_index=line.index))
        if not structure:
            return [StructuralLine.sentinel()]
        return structure
