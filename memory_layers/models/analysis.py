"""The result bundle shared by every layer view."""

from __future__ import annotations

from typing import List, Tuple

from pydantic import BaseModel, ConfigDict

from memory_layers.config import ScoringStrategy

from .keyword import Keyword, KeywordStatus
from .structure import StructuralLine, StructureStatus


class AnalysisResult(BaseModel):
    """Immutable output of one analysis request."""

    model_config = ConfigDict(frozen=True)

    structure: Tuple[StructuralLine, ...]
    keywords: Tuple[Keyword, ...] = ()
    source_text: str
    scoring_strategy: ScoringStrategy = ScoringStrategy.LENGTH_BIASED_FREQUENCY

    @property
    def structure_status(self) -> StructureStatus:
        if any(line.empty for line in self.structure) or not self.structure:
            return StructureStatus.EMPTY
        return StructureStatus.FOUND

    @property
    def keyword_status(self) -> KeywordStatus:
        return KeywordStatus.FOUND if self.keywords else KeywordStatus.EMPTY

    @property
    def headings(self) -> List[StructuralLine]:
        """Structural lines without the empty sentinel."""
        return [line for line in self.structure if not line.empty]

    @property
    def terms(self) -> List[str]:
        return [keyword.term for keyword in self.keywords]
