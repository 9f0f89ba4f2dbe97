"""
Unit tests for the Acronym Classifier.

Tests which capitalised tokens are spelled out letter by letter and which are
read as words.
"""

import os
import tempfile
import unittest

from article_rules.acronym_classifier import AcronymClassifier, is_unknown_acronym
from article_rules.services.language_vocabulary_service import LanguageVocabularyService


class TestAcronymClassifierShape(unittest.TestCase):
    """Test the capitalisation checks."""

    def setUp(self):
        self.classifier = AcronymClassifier(LanguageVocabularyService())

    def test_spelled_out_acronyms(self):
        self.assertTrue(self.classifier.is_unknown_acronym("NSA"))
        self.assertTrue(self.classifier.is_unknown_acronym("FBI"))
        self.assertTrue(self.classifier.is_unknown_acronym("URL"))

    def test_acronyms_with_digits_and_dots(self):
        self.assertTrue(self.classifier.is_unknown_acronym("MP3"))
        self.assertTrue(self.classifier.is_unknown_acronym("N.S.A."))

    def test_not_capitalised(self):
        self.assertFalse(self.classifier.is_unknown_acronym("nsa"))
        self.assertFalse(self.classifier.is_unknown_acronym("Nsa"))
        self.assertFalse(self.classifier.is_unknown_acronym("apple"))

    def test_single_letter_is_not_an_acronym(self):
        self.assertFalse(self.classifier.is_unknown_acronym("N"))
        self.assertFalse(self.classifier.is_unknown_acronym("A"))

    def test_must_start_with_letter(self):
        self.assertFalse(self.classifier.is_unknown_acronym("3D"))


class TestAcronymClassifierKnownWords(unittest.TestCase):
    """Test that pronounceable acronyms are treated as words."""

    def setUp(self):
        self.classifier = AcronymClassifier(LanguageVocabularyService())

    def test_nasa_is_known(self):
        """Test that NASA is said as a word ('a NASA spaceship')."""
        self.assertFalse(self.classifier.is_unknown_acronym("NASA"))

    def test_known_acronyms_vocabulary(self):
        for word in ("NATO", "LASER", "SCUBA", "OPEC"):
            with self.subTest(word=word):
                self.assertFalse(self.classifier.is_unknown_acronym(word))

    def test_exception_list_entries_are_known(self):
        """Test that words with a recorded pronunciation are not spelled out."""
        for word in ("UNESCO", "USA", "NPR", "EUROPE"):
            with self.subTest(word=word):
                self.assertFalse(self.classifier.is_unknown_acronym(word))

    def test_module_level_function(self):
        self.assertTrue(is_unknown_acronym("NSA"))
        self.assertFalse(is_unknown_acronym("NASA"))


class TestAcronymClassifierCustomVocabulary(unittest.TestCase):
    """Test the classifier against a vocabulary directory of its own."""

    def test_custom_known_acronyms(self):
        with tempfile.TemporaryDirectory() as config_dir:
            with open(os.path.join(config_dir, "known_acronyms.yaml"), "w", encoding="utf-8") as f:
                f.write('local:\n  - "gnu"\n')
            with open(os.path.join(config_dir, "articles_exceptions.yaml"), "w", encoding="utf-8") as f:
                f.write('american: []\nbritish: []\n')

            classifier = AcronymClassifier(LanguageVocabularyService(config_dir))

            self.assertFalse(classifier.is_unknown_acronym("GNU"))
            self.assertTrue(classifier.is_unknown_acronym("NASA"))

    def test_reload_reaches_classifier(self):
        """Test that reloading the vocabulary changes which acronyms are known."""
        with tempfile.TemporaryDirectory() as config_dir:
            acronyms_path = os.path.join(config_dir, "known_acronyms.yaml")
            with open(acronyms_path, "w", encoding="utf-8") as f:
                f.write('local:\n  - "gnu"\n')
            service = LanguageVocabularyService(config_dir)
            classifier = AcronymClassifier(service)
            self.assertTrue(classifier.is_unknown_acronym("NSA"))

            with open(acronyms_path, "w", encoding="utf-8") as f:
                f.write('local:\n  - "nsa"\n')
            service.reload_all_vocabularies()

            self.assertFalse(classifier.is_unknown_acronym("NSA"))
            self.assertTrue(classifier.is_unknown_acronym("GNU"))

    def test_single_file_reload_reaches_classifier(self):
        with tempfile.TemporaryDirectory() as config_dir:
            acronyms_path = os.path.join(config_dir, "known_acronyms.yaml")
            with open(acronyms_path, "w", encoding="utf-8") as f:
                f.write('local: []\n')
            service = LanguageVocabularyService(config_dir)
            classifier = AcronymClassifier(service)
            self.assertTrue(classifier.is_unknown_acronym("GNU"))

            with open(acronyms_path, "w", encoding="utf-8") as f:
                f.write('local:\n  - "gnu"\n')
            service.reload_vocabulary("known_acronyms.yaml")

            self.assertFalse(classifier.is_unknown_acronym("GNU"))


if __name__ == '__main__':
    unittest.main()
