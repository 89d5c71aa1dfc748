"""Layer identifiers and the views rendered for each of them."""

from __future__ import annotations

from enum import Enum
from typing import Literal, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict

from memory_layers.errors import InvalidLayerError

from .keyword import Keyword, KeywordStatus
from .structure import StructuralLine, StructureStatus


class Layer(str, Enum):
    """The three progressive views of an analyzed text."""

    STRUCTURE = "structure"
    KEYWORDS = "keywords"
    FULLTEXT = "fulltext"

    @property
    def shortcut(self) -> str:
        return str(list(Layer).index(self) + 1)

    @classmethod
    def parse(cls, value: Union["Layer", str]) -> "Layer":
        """Accept an enum member or its name, raising InvalidLayerError otherwise."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError as exc:
            raise InvalidLayerError(value) from exc

    @classmethod
    def from_shortcut(cls, key: str) -> Optional["Layer"]:
        for layer in cls:
            if layer.shortcut == key:
                return layer
        return None


class TextSegment(BaseModel):
    """A slice of the source text, tagged with the keyword it spells out (if any)."""

    model_config = ConfigDict(frozen=True)

    text: str
    keyword: Optional[str] = None


class StructureView(BaseModel):
    model_config = ConfigDict(frozen=True)

    layer: Literal[Layer.STRUCTURE] = Layer.STRUCTURE
    headings: Tuple[StructuralLine, ...]
    structure_status: StructureStatus


class KeywordView(BaseModel):
    model_config = ConfigDict(frozen=True)

    layer: Literal[Layer.KEYWORDS] = Layer.KEYWORDS
    headings: Tuple[StructuralLine, ...]
    keywords: Tuple[Keyword, ...]
    structure_status: StructureStatus
    keyword_status: KeywordStatus


class FullTextView(BaseModel):
    model_config = ConfigDict(frozen=True)

    layer: Literal[Layer.FULLTEXT] = Layer.FULLTEXT
    text: str
    segments: Tuple[TextSegment, ...]


LayerView = Union[StructureView, KeywordView, FullTextView]
