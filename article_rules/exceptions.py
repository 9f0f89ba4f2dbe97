"""
Article Rules Errors
Exceptions and warnings raised while choosing an indefinite article.
"""


class ArticleRulesError(Exception):
    """Base class for article rule errors."""


class InvalidInputError(ArticleRulesError, ValueError):
    """Raised when a word cannot be inspected, e.g. an empty string."""


class InvalidDialectConfigurationWarning(UserWarning):
    """Emitted when neither American nor British English is enabled."""
