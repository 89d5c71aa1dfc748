"""FastAPI application entry point."""

from __future__ import annotations

import logging

from fastapi import FastAPI, HTTPException

from memory_layers.errors import InvalidInputError, InvalidLayerError
from memory_layers.layers.views import render_layer
from memory_layers.models.analysis import AnalysisResult
from memory_layers.models.api import AnalyzeRequest, AnalyzeResponse
from memory_layers.models.layers import Layer, LayerView
from memory_layers.services.analyzer import LayerAnalysisService

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Memory Layers",
    description="Progressive text revelation: structure, keywords, full text",
    version="0.1.0",
)

analyzer = LayerAnalysisService()


def _analyze(text: str) -> AnalysisResult:
    try:
        return analyzer.analyze(text)
    except InvalidInputError as exc:
        logger.info("Rejected input of %s characters (minimum %s)", exc.length, exc.minimum)
        raise HTTPException(status_code=422, detail=str(exc)) from exc


@app.get("/health")
def health() -> dict[str, str]:
    """Simple readiness check."""
    return {"status": "ok"}


@app.post("/analyze", response_model=AnalyzeResponse)
def analyze(payload: AnalyzeRequest) -> AnalyzeResponse:
    """Analyze a text once; every layer can be derived from the response."""
    result = _analyze(payload.text)
    return AnalyzeResponse(
        structure=list(result.structure),
        keywords=list(result.keywords),
        structure_status=result.structure_status,
        keyword_status=result.keyword_status,
        scoring_strategy=result.scoring_strategy,
        source_text=result.source_text,
    )


@app.post("/layers/{layer}", response_model=LayerView)
def layer_view(layer: str, payload: AnalyzeRequest) -> LayerView:
    """Render one layer of the submitted text."""
    try:
        selected = Layer.parse(layer)
    except InvalidLayerError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return render_layer(_analyze(payload.text), selected)
