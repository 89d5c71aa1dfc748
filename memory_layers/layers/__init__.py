"""Layer views and the reader session built on top of them."""

from .session import ReadingSession, SessionStatus
from .views import annotate_keywords, render_layer

__all__ = ["ReadingSession", "SessionStatus", "annotate_keywords", "render_layer"]
