"""Keyword scoring formulas."""

from __future__ import annotations

import math
from typing import Callable, Dict

from memory_layers.config import ScoringStrategy

LONG_TERM_LENGTH = 6
LONG_TERM_BONUS = 1.5

Scorer = Callable[[str, float, int], float]


def length_biased_frequency(term: str, frequency: float, total_tokens: int) -> float:
    """Frequency, boosted by half again for terms longer than six characters."""
    bonus = LONG_TERM_BONUS if len(term) > LONG_TERM_LENGTH else 1.0
    return frequency * bonus


def tf_idf(term: str, frequency: float, total_tokens: int) -> float:
    """TF-IDF approximated against the document's own token population.

    Weighted phrase counts can exceed the token total, which would make the idf
    negative; such scores are clamped to zero.
    """
    if total_tokens <= 0:
        return 0.0
    tf = frequency / total_tokens
    idf = math.log(total_tokens / frequency)
    return max(0.0, tf * idf)


SCORERS: Dict[ScoringStrategy, Scorer] = {
    ScoringStrategy.LENGTH_BIASED_FREQUENCY: length_biased_frequency,
    ScoringStrategy.TF_IDF: tf_idf,
}


def get_scorer(strategy: ScoringStrategy | str) -> Scorer:
    return SCORERS[ScoringStrategy(strategy)]
