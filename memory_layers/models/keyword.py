"""Keyword models produced by the extractor."""

from __future__ import annotations

from enum import Enum
from typing import Union

from pydantic import BaseModel, ConfigDict, Field


class KeywordStatus(str, Enum):
    FOUND = "found"
    EMPTY = "empty"


class Keyword(BaseModel):
    """A ranked term or phrase."""

    model_config = ConfigDict(frozen=True)

    term: str = Field(..., min_length=3)
    # Plain counts stay integers; fractional phrase weights make it a float.
    frequency: Union[int, float] = Field(..., gt=0)
    score: float = Field(..., ge=0)
    is_phrase: bool = False
