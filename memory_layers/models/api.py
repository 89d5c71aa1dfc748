"""Request/response models for the public API."""

from __future__ import annotations

from typing import List

from pydantic import BaseModel

from memory_layers.config import ScoringStrategy

from .keyword import Keyword, KeywordStatus
from .structure import StructuralLine, StructureStatus


class AnalyzeRequest(BaseModel):
    """Incoming text payload."""

    text: str


class AnalyzeResponse(BaseModel):
    """Analysis returned to the caller, statuses included."""

    structure: List[StructuralLine]
    keywords: List[Keyword]
    structure_status: StructureStatus
    keyword_status: KeywordStatus
    scoring_strategy: ScoringStrategy
    source_text: str
