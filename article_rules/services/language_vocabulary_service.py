"""
Language Vocabulary Service

Service for loading the YAML vocabularies behind article selection.
Vocabularies are loaded once, cached, and handed out as frozensets.
"""

import logging
import threading
import yaml
from typing import Dict, Any, Set, FrozenSet, Optional
from pathlib import Path

from ..config import Config
from ..dialect import Dialect

logger = logging.getLogger(__name__)

ARTICLES_EXCEPTIONS_FILE = "articles_exceptions.yaml"
KNOWN_ACRONYMS_FILE = "known_acronyms.yaml"
KNOWN_WORDS_KEY = "known_words"


class LanguageVocabularyService:
    """
    Service for managing article vocabularies.

    Features:
    - Lazy loading with caching
    - Thread-safe first load
    - Read-only frozenset lookups
    - Runtime vocabulary reloads
    """

    def __init__(self, config_dir: Optional[str] = None):
        if config_dir is None:
            # Auto-detect config directory relative to this file
            current_dir = Path(__file__).parent
            config_dir = current_dir.parent / "vocabularies"

        self.config_dir = Path(config_dir)
        self._cache: Dict[str, Dict[str, Any]] = {}
        self._word_sets: Dict[str, FrozenSet[str]] = {}
        self._loaded_files: Set[str] = set()
        self._lock = threading.RLock()

    def _load_yaml_file(self, filename: str) -> Dict[str, Any]:
        """Load and cache a YAML vocabulary file."""
        if filename in self._cache:
            return self._cache[filename]

        with self._lock:
            if filename in self._cache:
                return self._cache[filename]

            file_path = self.config_dir / filename

            if not file_path.exists():
                logger.warning(f"Vocabulary file {file_path} not found. Using empty vocabulary.")
                self._cache[filename] = {}
                return {}

            try:
                with open(file_path, 'r', encoding='utf-8') as f:
                    data = yaml.safe_load(f) or {}
            except (yaml.YAMLError, OSError) as e:
                logger.error(f"Error loading vocabulary file {file_path}: {e}")
                self._cache[filename] = {}
                return {}

            if not isinstance(data, dict):
                logger.error(f"Vocabulary file {file_path} must contain a mapping, got {type(data).__name__}")
                data = {}

            self._cache[filename] = data
            self._loaded_files.add(filename)
            logger.debug(f"Loaded language vocabulary: {filename}")
            return data

    def _word_set(self, key: str, words) -> FrozenSet[str]:
        """Build (once) a lowercase frozenset from a YAML word list."""
        if key in self._word_sets:
            return self._word_sets[key]

        with self._lock:
            if key not in self._word_sets:
                self._word_sets[key] = frozenset(str(word).lower() for word in (words or []))
            return self._word_sets[key]

    def reload_vocabulary(self, filename: str) -> None:
        """Reload a specific vocabulary file (useful for runtime updates)."""
        with self._lock:
            self._cache.pop(filename, None)
            self._loaded_files.discard(filename)
            # Sets built from several files go too
            stale = [k for k in self._word_sets if k.startswith(f"{filename}:") or k == KNOWN_WORDS_KEY]
            for key in stale:
                del self._word_sets[key]
            self._load_yaml_file(filename)

    def reload_all_vocabularies(self) -> None:
        """Reload all cached vocabulary files."""
        with self._lock:
            loaded_files = list(self._loaded_files)
            self._cache.clear()
            self._word_sets.clear()
            self._loaded_files.clear()

            for filename in loaded_files:
                self._load_yaml_file(filename)

    # === SPECIFIC VOCABULARY ACCESSORS ===

    def get_articles_exceptions(self) -> Dict[str, Any]:
        """Get the raw articles exceptions vocabulary."""
        return self._load_yaml_file(ARTICLES_EXCEPTIONS_FILE)

    def get_exception_words(self, dialect: Dialect) -> FrozenSet[str]:
        """Get the words that break the first-letter vowel test in one dialect."""
        data = self.get_articles_exceptions()
        return self._word_set(f"{ARTICLES_EXCEPTIONS_FILE}:{dialect.value}", data.get(dialect.value))

    def get_all_exception_words(self) -> FrozenSet[str]:
        """Get the exception words of every dialect."""
        key = f"{ARTICLES_EXCEPTIONS_FILE}:*"
        if key not in self._word_sets:
            words = set()
            for dialect in Dialect:
                words.update(self.get_exception_words(dialect))
            self._word_set(key, words)
        return self._word_sets[key]

    def get_known_acronyms(self) -> FrozenSet[str]:
        """Get all-caps words with an established spoken pronunciation."""
        key = f"{KNOWN_ACRONYMS_FILE}:*"
        if key not in self._word_sets:
            # Flatten categories into a single set for fast lookup
            words = set()
            for category in self._load_yaml_file(KNOWN_ACRONYMS_FILE).values():
                if isinstance(category, list):
                    words.update(category)
            self._word_set(key, words)
        return self._word_sets[key]

    def get_known_words(self) -> FrozenSet[str]:
        """Get every word with a recorded pronunciation: known acronyms and exception words."""
        if KNOWN_WORDS_KEY not in self._word_sets:
            self._word_set(KNOWN_WORDS_KEY, self.get_known_acronyms() | self.get_all_exception_words())
        return self._word_sets[KNOWN_WORDS_KEY]


# === GLOBAL SERVICE INSTANCES ===

_articles_service: Optional[LanguageVocabularyService] = None


def get_articles_vocabulary() -> LanguageVocabularyService:
    """Get the articles vocabulary service instance."""
    global _articles_service
    if _articles_service is None:
        _articles_service = LanguageVocabularyService(Config.VOCABULARY_DIR)
    return _articles_service


def get_acronyms_vocabulary() -> LanguageVocabularyService:
    """Get the acronyms vocabulary service instance (shared with articles)."""
    return get_articles_vocabulary()
