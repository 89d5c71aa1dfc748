"""Orchestration of the analysis pipeline."""

from .analyzer import LayerAnalysisService

__all__ = ["LayerAnalysisService"]
