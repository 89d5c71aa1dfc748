"""Typed models shared across the application."""

from .analysis import AnalysisResult
from .api import AnalyzeRequest, AnalyzeResponse
from .keyword import Keyword, KeywordStatus
from .layers import FullTextView, KeywordView, Layer, LayerView, StructureView, TextSegment
from .structure import NO_STRUCTURE_TEXT, StructuralLine, StructureStatus

__all__ = [
    "AnalysisResult",
    "AnalyzeRequest",
    "AnalyzeResponse",
    "FullTextView",
    "Keyword",
    "KeywordStatus",
    "KeywordView",
    "Layer",
    "LayerView",
    "NO_STRUCTURE_TEXT",
    "StructuralLine",
    "StructureStatus",
    "StructureView",
    "TextSegment",
]
