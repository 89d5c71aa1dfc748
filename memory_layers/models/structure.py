"""Structure-level models produced by the heading detector."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

NO_STRUCTURE_TEXT = "No structure detected"


class StructureStatus(str, Enum):
    FOUND = "found"
    EMPTY = "empty"


class StructuralLine(BaseModel):
    """A heading-like line and its importance level."""

    model_config = ConfigDict(frozen=True)

    text: str
    level: int = Field(..., ge=1, le=2)
    line_index: int = Field(..., ge=0)
    empty: bool = False

    @classmethod
    def sentinel(cls) -> "StructuralLine":
        """Placeholder returned when no line qualifies as structure."""
        return cls(text=NO_STRUCTURE_TEXT, level=1, line_index=0, empty=True)
