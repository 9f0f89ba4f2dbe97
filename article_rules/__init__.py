"""
Article Rules

Chooses the English indefinite article ('a' or 'an') from how a word sounds
rather than how it is spelled.

Usage:
    from article_rules import decide_article, DialectConfig

    decide_article('honest')                      # 'an'
    decide_article('unique')                      # 'a'
    decide_article('herb', DialectConfig.from_name('american'))   # 'an'
"""

from .acronym_classifier import AcronymClassifier, is_unknown_acronym
from .articles_rule import ArticlesRule, decide_article, with_article, get_articles_rule
from .dialect import Dialect, DialectConfig
from .exceptions import ArticleRulesError, InvalidInputError, InvalidDialectConfigurationWarning

__all__ = [
    # Main interfaces
    'decide_article',
    'with_article',
    'is_unknown_acronym',

    # Classes for advanced usage
    'ArticlesRule',
    'AcronymClassifier',
    'Dialect',
    'DialectConfig',

    # Errors
    'ArticleRulesError',
    'InvalidInputError',
    'InvalidDialectConfigurationWarning',

    # Singletons
    'get_articles_rule',
]

__version__ = '1.0.0'
