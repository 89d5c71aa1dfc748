"""Print one memory layer of a text file (or stdin) to the terminal."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from memory_layers.config import settings
from memory_layers.errors import InvalidInputError
from memory_layers.layers.views import render_layer
from memory_layers.models.layers import FullTextView, KeywordView, Layer, LayerView
from memory_layers.services.analyzer import LayerAnalysisService

logger = logging.getLogger(__name__)


def format_view(view: LayerView) -> str:
    """Plain-text rendering of a layer view."""
    if isinstance(view, FullTextView):
        return "".join(
            f"[{segment.text}]" if segment.keyword else segment.text for segment in view.segments
        )
    lines: List[str] = []
    if not view.headings:
        lines.append("(no structure detected)")
    for heading in view.headings:
        indent = "  " * (heading.level - 1)
        lines.append(f"{indent}{heading.text}")
    if isinstance(view, KeywordView):
        lines.append("")
        if not view.keywords:
            lines.append("(no keywords)")
        for keyword in view.keywords:
            lines.append(f"- {keyword.term} ({keyword.frequency:g}, score {keyword.score:.3f})")
    return "\n".join(lines)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("path", nargs="?", help="Text file to analyze; stdin when omitted.")
    parser.add_argument(
        "--layer",
        choices=[layer.value for layer in Layer],
        default=Layer.STRUCTURE.value,
    )
    parser.add_argument("--json", action="store_true", help="Emit the view as JSON.")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entry point."""
    logging.basicConfig(level=settings.log_level)
    args = build_parser().parse_args(argv)
    if args.path:
        path = Path(args.path)
        if not path.exists():
            logger.error("Input file %s does not exist", path)
            return 1
        text = path.read_text(encoding="utf-8")
    else:
        text = sys.stdin.read()

    try:
        result = LayerAnalysisService().analyze(text)
    except InvalidInputError as exc:
        logger.error("%s", exc)
        return 2

    view = render_layer(result, args.layer)
    print(view.model_dump_json(indent=2) if args.json else format_view(view))
    return 0


if __name__ == "__main__":
    sys.exit(main())
