"""
Acronym Classifier
Decides whether an all-caps token should be read out letter by letter.
"""
import logging
from typing import FrozenSet, Optional

from .services.language_vocabulary_service import LanguageVocabularyService, get_acronyms_vocabulary

logger = logging.getLogger(__name__)


class AcronymClassifier:
    """
    Flags capitalised tokens with no known pronunciation.

    "NSA" is spelled out ("en-es-ay") while "NASA" is said as a word, so only
    the former is an unknown acronym. A token is known if it is in the known
    acronyms vocabulary or on any exception list, since every exception entry
    has a recorded pronunciation.
    """

    def __init__(self, vocabulary_service: Optional[LanguageVocabularyService] = None):
        self.vocab_service = vocabulary_service or get_acronyms_vocabulary()

    @property
    def known_words(self) -> FrozenSet[str]:
        return self.vocab_service.get_known_words()

    def looks_like_acronym(self, word: str) -> bool:
        """Capitalised, at least two characters, starting with a letter."""
        return len(word) >= 2 and word[0].isalpha() and word.isupper()

    def is_unknown_acronym(self, word: str) -> bool:
        word = word.strip()
        if not self.looks_like_acronym(word):
            return False
        if word.lower() in self.known_words:
            logger.debug(f"'{word}' is a known word, not spelling it out")
            return False
        return True


_default_classifier: Optional[AcronymClassifier] = None


def get_acronym_classifier() -> AcronymClassifier:
    """Get the shared acronym classifier instance."""
    global _default_classifier
    if _default_classifier is None:
        _default_classifier = AcronymClassifier()
    return _default_classifier


def is_unknown_acronym(word: str) -> bool:
    """True when ``word`` is capitalised like an acronym and has no known pronunciation."""
    return get_acronym_classifier().is_unknown_acronym(word)
