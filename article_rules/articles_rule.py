"""
Articles Rule
Chooses 'a' or 'an' for a word from the sound of its first syllable.

'An honest man', 'a unique idea', 'a NASA spaceship', 'an NSA engineer'.
"""
import logging
import warnings
from functools import lru_cache
from typing import Optional

from .acronym_classifier import AcronymClassifier, get_acronym_classifier
from .config import Config
from .dialect import DialectConfig
from .exceptions import InvalidInputError, InvalidDialectConfigurationWarning
from .services.language_vocabulary_service import LanguageVocabularyService, get_articles_vocabulary

logger = logging.getLogger(__name__)

VOWELS = frozenset('aeiou')
ARTICLES = ('a', 'an')


class ArticlesRule:
    """
    Works out the indefinite article for a word.

    The first letter gives a literal vowel/consonant verdict. Words on the
    active exception lists sound the other way round, so their verdict is
    inverted. Unknown acronyms are judged by their first letter alone, which
    the exception lists cover ('n' is said 'en').
    """

    def __init__(self, dialect: Optional[DialectConfig] = None,
                 vocabulary_service: Optional[LanguageVocabularyService] = None,
                 acronym_classifier: Optional[AcronymClassifier] = None):
        self.dialect = dialect if dialect is not None else Config.get_dialect_config()
        self.vocabulary_service = vocabulary_service or get_articles_vocabulary()
        if acronym_classifier is None:
            acronym_classifier = AcronymClassifier(vocabulary_service) if vocabulary_service else get_acronym_classifier()
        self.acronym_classifier = acronym_classifier

    def decide_article(self, word: str) -> str:
        """Return 'an' if ``word`` starts with a vowel sound, otherwise 'a'."""
        return 'an' if self.starts_with_vowel_sound(word) else 'a'

    def starts_with_vowel_sound(self, word: str) -> bool:
        word = self._validate(word)
        lower = word.lower()
        starts_with_vowel = self._starts_with_vowel_letter(lower)

        if self.acronym_classifier.is_unknown_acronym(word):
            # Spelled out letter by letter, so only the first letter is heard
            lower = lower[0]

        if self.is_exception_word(lower):
            return not starts_with_vowel
        return starts_with_vowel

    def is_exception_word(self, word: str) -> bool:
        """
        Check whether a lowercase word breaks the first-letter vowel test.

        Looks in every enabled dialect's list. With no dialect enabled a
        warning is issued and nothing counts as an exception.
        """
        if not self.dialect.is_valid:
            message = "You must choose at least American or British English."
            logger.warning(message)
            warnings.warn(message, InvalidDialectConfigurationWarning, stacklevel=2)
            return False

        return any(word in self.vocabulary_service.get_exception_words(dialect)
                   for dialect in self.dialect.active_dialects)

    def with_article(self, word: str, capitalize: bool = False) -> str:
        """Prefix ``word`` with its article, e.g. 'an honest'."""
        article = self.decide_article(word)
        if capitalize:
            article = article.capitalize()
        return f"{article} {word.strip()}"

    def is_correct_article(self, article: str, word: str) -> bool:
        """Check an existing 'a'/'an' against the word that follows it."""
        article_lower = (article or '').strip().lower()
        if article_lower not in ARTICLES:
            raise InvalidInputError(f"Not an indefinite article: {article!r}")
        return article_lower == self.decide_article(word)

    @staticmethod
    def _starts_with_vowel_letter(word: str) -> bool:
        return word[0] in VOWELS

    @staticmethod
    def _validate(word: str) -> str:
        if not isinstance(word, str):
            raise InvalidInputError(f"Expected a word string, got {type(word).__name__}")
        word = word.strip()
        if not word:
            raise InvalidInputError("Cannot choose an article for an empty word")
        return word


@lru_cache(maxsize=8)
def get_articles_rule(dialect: Optional[DialectConfig] = None) -> ArticlesRule:
    """Get a shared ArticlesRule for a dialect configuration."""
    return ArticlesRule(dialect=dialect)


def decide_article(word: str, dialect: Optional[DialectConfig] = None) -> str:
    """Return 'a' or 'an' for ``word``."""
    return get_articles_rule(dialect).decide_article(word)


def with_article(word: str, dialect: Optional[DialectConfig] = None, capitalize: bool = False) -> str:
    return get_articles_rule(dialect).with_article(word, capitalize=capitalize)
