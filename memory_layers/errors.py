"""Exceptions raised by the analysis pipeline and its consumers."""

from __future__ import annotations


class MemoryLayersError(Exception):
    """Base class for every error raised by this package."""


class InvalidInputError(MemoryLayersError, ValueError):
    """The submitted text is shorter than the configured minimum."""

    def __init__(self, length: int, minimum: int) -> None:
        self.length = length
        self.minimum = minimum
        super().__init__(
            f"Input has {length} characters after trimming; at least {minimum} are required."
        )


class InvalidLayerError(MemoryLayersError, ValueError):
    """A layer name that is not one of structure, keywords or fulltext."""

    def __init__(self, layer: object) -> None:
        self.layer = layer
        super().__init__(f"Invalid layer: {layer!r}")
