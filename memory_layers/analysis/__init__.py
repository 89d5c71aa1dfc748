"""Text analysis pipeline: heading detection and keyword extraction."""

from .keywords import KeywordExtractor
from .phrases import extract_phrases
from .stopwords import StopWordSet, build_stop_words, get_stop_words
from .structure import HeadingRule, StructureDetector

__all__ = [
    "HeadingRule",
    "KeywordExtractor",
    "StopWordSet",
    "StructureDetector",
    "build_stop_words",
    "extract_phrases",
    "get_stop_words",
]
