"""Keyword extraction: tokens and phrases, weighted, scored and ranked."""

from __future__ import annotations

from typing import Dict, List, Union

from memory_layers.analysis.phrases import extract_phrases
from memory_layers.analysis.scoring import LONG_TERM_LENGTH, get_scorer
from memory_layers.analysis.stopwords import StopWordSet, get_stop_words
from memory_layers.config import ScoringStrategy, settings
from memory_layers.models.keyword import Keyword
from memory_layers.utils.tokenization import normalize_text, split_words

MIN_TOKEN_LENGTH = 3


class KeywordExtractor:
    """Ranks the most characteristic terms of a single text."""

    def __init__(
        self,
        stop_words: StopWordSet | None = None,
        max_keywords: int | None = None,
        phrase_weight_multiplier: float | None = None,
        scoring_strategy: ScoringStrategy | str | None = None,
    ) -> None:
        self.stop_words = stop_words if stop_words is not None else get_stop_words()
        if max_keywords is None:
            max_keywords = settings.max_keywords
        if max_keywords < 1:
            raise ValueError("max_keywords must be >= 1")
        self.max_keywords = max_keywords
        if phrase_weight_multiplier is None:
            phrase_weight_multiplier = settings.phrase_weight_multiplier
        if phrase_weight_multiplier < 0:
            raise ValueError("phrase_weight_multiplier must be >= 0")
        # Whole weights keep frequencies integral.
        if float(phrase_weight_multiplier).is_integer():
            phrase_weight_multiplier = int(phrase_weight_multiplier)
        self.phrase_weight_multiplier = phrase_weight_multiplier
        self.scoring_strategy = ScoringStrategy(scoring_strategy or settings.scoring_strategy)
        self._score = get_scorer(self.scoring_strategy)

    def tokenize(self, text: str) -> List[str]:
        """Normalized content words, in text order."""
        return [
            token
            for token in split_words(normalize_text(text))
            if len(token) >= MIN_TOKEN_LENGTH
            and not token.isdigit()
            and token not in self.stop_words
        ]

    def extract(self, text: str) -> List[Keyword]:
        tokens = self.tokenize(text)
        if not tokens:
            return []

        frequencies: Dict[str, Union[int, float]] = {}
        phrase_terms = set()
        for token in tokens:
            frequencies[token] = frequencies.get(token, 0) + 1
        if self.phrase_weight_multiplier > 0:
            for phrase in extract_phrases(text, self.stop_words):
                frequencies[phrase] = frequencies.get(phrase, 0) + self.phrase_weight_multiplier
                phrase_terms.add(phrase)

        total_tokens = len(tokens)
        keywords = [
            Keyword(
                term=term,
                frequency=frequency,
                score=self._score(term, frequency, total_tokens),
                is_phrase=term in phrase_terms,
            )
            for term, frequency in frequencies.items()
            if frequency > 1 or len(term) > LONG_TERM_LENGTH
        ]
        # sorted() is stable, so equal scores keep first-seen order.
        keywords = sorted(keywords, key=lambda keyword: keyword.score, reverse=True)
        return keywords[: self.max_keywords]
