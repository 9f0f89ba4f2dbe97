"""Article Rules - Command Line Entry Point"""

import argparse
import logging
import sys
from typing import List, Optional

from .articles_rule import ArticlesRule
from .config import Config
from .dialect import DialectConfig
from .exceptions import InvalidInputError

logger = logging.getLogger(__name__)


def configure_logging(config=Config):
    logging_config = config.get_logging_config()
    logging.basicConfig(
        level=getattr(logging, logging_config['level'], logging.WARNING),
        format=logging_config['format'],
        handlers=[logging.StreamHandler(sys.stderr)]
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='a-or-an',
        description="Print 'a' or 'an' for a word, based on how the word sounds."
    )
    parser.add_argument('word', nargs='?', help='Word to check; read from stdin when omitted')
    parser.add_argument(
        '--dialect', choices=('british', 'american', 'both'),
        help='Exception lists to use (default: from ARTICLES_USE_BRITISH / ARTICLES_USE_AMERICAN)'
    )
    parser.add_argument('--phrase', action='store_true', help="Print the article with the word, e.g. 'an honest'")
    parser.add_argument('--capitalize', action='store_true', help='Capitalize the article')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging()

    word = args.word
    if word is None:
        word = sys.stdin.readline()

    try:
        dialect = DialectConfig.from_name(args.dialect) if args.dialect else Config.get_dialect_config()
        rule = ArticlesRule(dialect=dialect)
        if args.phrase:
            result = rule.with_article(word, capitalize=args.capitalize)
        else:
            result = rule.decide_article(word)
            if args.capitalize:
                result = result.capitalize()
    except InvalidInputError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    logger.debug(f"Chose {result!r} for {word.strip()!r} with {dialect}")
    print(result)
    return 0


if __name__ == '__main__':
    sys.exit(main())
