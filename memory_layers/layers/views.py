"""The three progressive views derived from one analysis result."""

from __future__ import annotations

import re
from typing import Callable, Dict, Iterable, List, Optional, Pattern

from memory_layers.models.analysis import AnalysisResult
from memory_layers.models.layers import (
    FullTextView,
    KeywordView,
    Layer,
    LayerView,
    StructureView,
    TextSegment,
)


def build_structure_view(result: AnalysisResult) -> StructureView:
    """Titles only."""
    return StructureView(headings=result.headings, structure_status=result.structure_status)


def build_keyword_view(result: AnalysisResult) -> KeywordView:
    """Titles plus the ranked keywords."""
    return KeywordView(
        headings=result.headings,
        keywords=result.keywords,
        structure_status=result.structure_status,
        keyword_status=result.keyword_status,
    )


def build_fulltext_view(result: AnalysisResult) -> FullTextView:
    """The complete text, with keyword occurrences marked."""
    return FullTextView(
        text=result.source_text,
        segments=annotate_keywords(result.source_text, result.terms),
    )


def _keyword_pattern(terms: Iterable[str]) -> Optional[Pattern[str]]:
    alternatives = [
        r"\s+".join(re.escape(word) for word in term.split())
        # Longest first so phrases win over the words they contain.
        for term in sorted(set(terms), key=len, reverse=True)
        if term.strip()
    ]
    if not alternatives:
        return None
    return re.compile(r"(?<!\w)(?:" + "|".join(alternatives) + r")(?!\w)", re.IGNORECASE)


def annotate_keywords(text: str, terms: Iterable[str]) -> List[TextSegment]:
    """Split ``text`` into plain and keyword segments that concatenate back to it."""
    pattern = _keyword_pattern(terms)
    if pattern is None or not text:
        return [TextSegment(text=text)] if text else []

    segments: List[TextSegment] = []
    cursor = 0
    for match in pattern.finditer(text):
        if match.start() > cursor:
            segments.append(TextSegment(text=text[cursor : match.start()]))
        matched = match.group(0)
        segments.append(TextSegment(text=matched, keyword=" ".join(matched.lower().split())))
        cursor = match.end()
    if cursor < len(text):
        segments.append(TextSegment(text=text[cursor:]))
    return segments


VIEW_BUILDERS: Dict[Layer, Callable[[AnalysisResult], LayerView]] = {
    Layer.STRUCTURE: build_structure_view,
    Layer.KEYWORDS: build_keyword_view,
    Layer.FULLTEXT: build_fulltext_view,
}


def render_layer(result: AnalysisResult, layer: Layer | str) -> LayerView:
    """Build the view for ``layer``; raises InvalidLayerError for unknown names."""
    return VIEW_BUILDERS[Layer.parse(layer)](result)
