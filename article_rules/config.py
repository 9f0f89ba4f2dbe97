"""
Configuration for Article Rules.
"""

import os
from dotenv import load_dotenv
from typing import Dict, Any, Optional

from .dialect import DialectConfig

# Load environment variables (optional - only if .env file exists)
load_dotenv()


def _env_flag(name: str, default: str) -> bool:
    return os.environ.get(name, default).lower() == 'true'


class Config:
    """Application configuration."""

    # Dialect Configuration
    USE_BRITISH_ENGLISH = _env_flag('ARTICLES_USE_BRITISH', 'true')
    USE_AMERICAN_ENGLISH = _env_flag('ARTICLES_USE_AMERICAN', 'false')

    # Vocabulary Configuration - defaults to the YAML files shipped with the package
    VOCABULARY_DIR: Optional[str] = os.environ.get('ARTICLES_VOCABULARY_DIR') or None

    # Logging Configuration
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'WARNING')
    LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

    TESTING = False

    @classmethod
    def get_dialect_config(cls) -> DialectConfig:
        """Get the dialects enabled for exception lookups."""
        return DialectConfig(
            use_british=cls.USE_BRITISH_ENGLISH,
            use_american=cls.USE_AMERICAN_ENGLISH
        )

    @classmethod
    def get_logging_config(cls) -> Dict[str, Any]:
        """Get logging configuration."""
        return {
            'level': cls.LOG_LEVEL.upper(),
            'format': cls.LOG_FORMAT
        }


# For testing only
class TestingConfig(Config):
    """Testing configuration."""
    TESTING = True
    USE_BRITISH_ENGLISH = True
    USE_AMERICAN_ENGLISH = False
    VOCABULARY_DIR = None
    LOG_LEVEL = 'DEBUG'
