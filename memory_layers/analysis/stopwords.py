"""French and English function words excluded from keyword candidacy."""

from __future__ import annotations

from functools import lru_cache
from typing import FrozenSet, Iterable

ENGLISH_STOP_WORDS = (
    "a", "about", "above", "after", "again", "against", "all", "also", "am", "an",
    "and", "any", "are", "aren", "as", "at", "be", "because", "been", "before",
    "being", "below", "between", "both", "but", "by", "can", "cannot", "could",
    "couldn", "did", "didn", "do", "does", "doesn", "doing", "don", "down", "during",
    "each", "either", "else", "ever", "every", "few", "for", "from", "further",
    "get", "gets", "got", "had", "hadn", "has", "hasn", "have", "haven", "having",
    "he", "her", "here", "hers", "herself", "him", "himself", "his", "how",
    "however", "i", "if", "in", "into", "is", "isn", "it", "its", "itself", "just",
    "let", "like", "many", "may", "me", "might", "more", "most", "much", "must",
    "my", "myself", "neither", "no", "nor", "not", "now", "of", "off", "often",
    "on", "once", "one", "only", "or", "other", "others", "our", "ours",
    "ourselves", "out", "over", "own", "same", "shall", "she", "should",
    "shouldn", "since", "so", "some", "still", "such", "than", "that", "the",
    "their", "theirs", "them", "themselves", "then", "there", "therefore",
    "these", "they", "this", "those", "though", "through", "thus", "to", "too",
    "under", "until", "up", "upon", "us", "very", "was", "wasn", "we", "well",
    "were", "weren", "what", "when", "where", "whether", "which", "while", "who",
    "whom", "whose", "why", "will", "with", "within", "without", "won", "would",
    "wouldn", "yet", "you", "your", "yours", "yourself", "yourselves",
)

FRENCH_STOP_WORDS = (
    "à", "afin", "ai", "aie", "ainsi", "alors", "as", "au", "aucun", "aucune",
    "aussi", "autre", "autres", "aux", "avait", "avant", "avec", "avez", "avoir",
    "avons", "bien", "c", "ça", "car", "ce", "ceci", "cela", "celle", "celles",
    "celui", "cependant", "ces", "cet", "cette", "ceux", "chaque", "chez", "ci",
    "comme", "comment", "d", "dans", "de", "des", "donc", "dont", "du", "elle",
    "elles", "en", "encore", "entre", "es", "est", "et", "étaient", "était",
    "étant", "été", "être", "eu", "eux", "fait", "faire", "fois", "font", "hors",
    "ici", "il", "ils", "j", "je", "jusqu", "l", "la", "là", "le", "les", "leur",
    "leurs", "lors", "lui", "m", "ma", "mais", "me", "même", "mes", "moi", "mon",
    "n", "ne", "ni", "nos", "notre", "nous", "on", "ont", "ou", "où", "par",
    "parce", "pas", "peu", "peut", "plus", "pour", "pourquoi", "qu", "quand",
    "que", "quel", "quelle", "quelles", "quels", "qui", "s", "sa", "sans", "se",
    "selon", "ses", "si", "sien", "son", "sont", "sous", "sur", "t", "ta", "te",
    "tes", "toi", "ton", "tous", "tout", "toute", "toutes", "très", "tu", "un",
    "une", "unes", "uns", "vers", "voici", "voilà", "vos", "votre", "vous", "y",
)

StopWordSet = FrozenSet[str]


def build_stop_words(*word_lists: Iterable[str]) -> StopWordSet:
    """Merge word lists into an immutable, lowercase stop-word set."""
    return frozenset(word.strip().lower() for words in word_lists for word in words if word.strip())


@lru_cache(maxsize=1)
def get_stop_words() -> StopWordSet:
    """Build the default stop-word set once per process."""
    return build_stop_words(ENGLISH_STOP_WORDS, FRENCH_STOP_WORDS)
