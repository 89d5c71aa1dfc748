"""Runs heading detection and keyword extraction over one text."""

from __future__ import annotations

import logging

from memory_layers.analysis.keywords import KeywordExtractor
from memory_layers.analysis.structure import StructureDetector
from memory_layers.config import settings
from memory_layers.errors import InvalidInputError
from memory_layers.models.analysis import AnalysisResult

logger = logging.getLogger(__name__)


class LayerAnalysisService:
    """Builds the result bundle every layer view is derived from."""

    def __init__(
        self,
        detector: StructureDetector | None = None,
        extractor: KeywordExtractor | None = None,
        minimum_input_length: int | None = None,
    ) -> None:
        self.detector = detector or StructureDetector()
        self.extractor = extractor or KeywordExtractor()
        if minimum_input_length is None:
            minimum_input_length = settings.minimum_input_length
        if minimum_input_length < 0:
            raise ValueError("minimum_input_length must be >= 0")
        self.minimum_input_length = minimum_input_length

    def validate(self, text: str) -> None:
        length = len(text.strip())
        if length < self.minimum_input_length:
            raise InvalidInputError(length, self.minimum_input_length)

    def analyze(self, text: str) -> AnalysisResult:
        self.validate(text)
        result = AnalysisResult(
            structure=self.detector.detect(text),
            keywords=self.extractor.extract(text),
            source_text=text,
            scoring_strategy=self.extractor.scoring_strategy,
        )
        logger.debug(
            "Analyzed %s characters: %s structural lines (%s), %s keywords",
            len(text),
            len(result.headings),
            result.structure_status.value,
            len(result.keywords),
        )
        return result
