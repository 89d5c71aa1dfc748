"""Reader-side state: which layer is shown and the latest analysis."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Optional

from memory_layers.errors import InvalidInputError
from memory_layers.layers.views import render_layer
from memory_layers.models.analysis import AnalysisResult
from memory_layers.models.layers import Layer, LayerView
from memory_layers.services.analyzer import LayerAnalysisService

logger = logging.getLogger(__name__)


class SessionStatus(str, Enum):
    NOT_RUN = "not_run"
    READY = "ready"
    REJECTED = "rejected"


class ReadingSession:
    """Tracks the active layer and the latest analysis for one reader.

    Switching layers only re-renders the current result; the text is analyzed
    once per ``submit``. Not shared between threads.
    """

    def __init__(
        self,
        service: LayerAnalysisService | None = None,
        initial_layer: Layer | str = Layer.STRUCTURE,
    ) -> None:
        self.service = service or LayerAnalysisService()
        self.current_layer = Layer.parse(initial_layer)
        self.result: Optional[AnalysisResult] = None
        self.rejection: Optional[InvalidInputError] = None

    @property
    def status(self) -> SessionStatus:
        if self.result is not None:
            return SessionStatus.READY
        if self.rejection is not None:
            return SessionStatus.REJECTED
        return SessionStatus.NOT_RUN

    def submit(self, text: str) -> AnalysisResult:
        """Analyze ``text``, replacing any previous result."""
        try:
            result = self.service.analyze(text)
        except InvalidInputError as exc:
            self.result = None
            self.rejection = exc
            raise
        self.result = result
        self.rejection = None
        return result

    def clear(self) -> None:
        self.result = None
        self.rejection = None

    def set_layer(self, layer: Layer | str) -> Layer:
        self.current_layer = Layer.parse(layer)
        logger.debug("Layer changed to %s", self.current_layer.value)
        return self.current_layer

    def is_layer_active(self, layer: Layer | str) -> bool:
        return self.current_layer is Layer.parse(layer)

    def handle_shortcut(self, key: str) -> bool:
        """Switch layer for the keys "1", "2" and "3"; other keys are ignored."""
        layer = Layer.from_shortcut(key)
        if layer is None:
            return False
        self.set_layer(layer)
        return True

    def current_view(self) -> LayerView:
        if self.result is None:
            raise RuntimeError(f"No analysis available (session status: {self.status.value}).")
        return render_layer(self.result, self.current_layer)
