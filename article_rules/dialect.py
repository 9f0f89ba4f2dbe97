"""
Dialect Configuration
Selects which English exception lists take part in an article lookup.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Tuple

from .exceptions import InvalidInputError


class Dialect(Enum):
    """English variants with their own exception list."""
    AMERICAN = 'american'
    BRITISH = 'british'


@dataclass(frozen=True)
class DialectConfig:
    """
    Which dialects are active.

    Both may be enabled at once for generic English, in which case a word is an
    exception if either list has it. At least one flag should be set.
    """
    use_british: bool = True
    use_american: bool = False

    @property
    def active_dialects(self) -> Tuple[Dialect, ...]:
        dialects = []
        if self.use_british:
            dialects.append(Dialect.BRITISH)
        if self.use_american:
            dialects.append(Dialect.AMERICAN)
        return tuple(dialects)

    @property
    def is_valid(self) -> bool:
        return self.use_british or self.use_american

    @classmethod
    def from_name(cls, name: str) -> 'DialectConfig':
        """Build a config from 'british', 'american' or 'both'."""
        key = (name or '').strip().lower()
        if key == 'british':
            return cls(use_british=True, use_american=False)
        if key == 'american':
            return cls(use_british=False, use_american=True)
        if key == 'both':
            return cls(use_british=True, use_american=True)
        raise InvalidInputError(f"Unknown dialect {name!r}; expected 'british', 'american' or 'both'")
