#!/usr/bin/env python3
import argparse
import json
import logging
import sys

from .core.diagnostics import DiagnosticLevel
from .core.lexer import LexerConfig
from .core.pipeline import tokenize_file
from .core.tokens import Keyword, Value
from .utils.errors import InternalError, LexerError, SourceError
from .utils.term import err_console, print_error, print_success, print_token_table, print_warning

EXIT_OK = 0
EXIT_SOURCE_ERROR = 2
EXIT_LEXER_ERROR = 3
EXIT_INTERNAL_ERROR = 4


def _token_to_json(token) -> dict:
    value = token.value
    if isinstance(value, Keyword):
        value = value.name
    elif isinstance(value, Value):
        value = {'kind': value.kind.name, 'data': value.data}
    return {
        'type': token.type.name,
        'text': token.text,
        'line': token.line,
        'position': token.position,
        'value': value,
    }


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='tinyc', description='Tokenize a tinyc source file')
    parser.add_argument('input', help='Source file to tokenize')
    parser.add_argument('--strict', action='store_true',
                        help='Report characters outside the language instead of skipping them')
    parser.add_argument('--keep-going', action='store_true',
                        help='Collect every lexical error instead of stopping at the first one')
    parser.add_argument('--format', choices=['table', 'plain', 'json'], default='table',
                        help='How to print the token stream')
    parser.add_argument('-v', '--verbose', action='store_true')
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format='%(levelname)s %(name)s: %(message)s')

    config = LexerConfig.from_env()
    if args.strict:
        config.strict_unknown_characters = True
    if args.keep_going:
        config.fail_fast = False
    config.verbose = args.verbose

    try:
        result = tokenize_file(args.input, config)
    except SourceError as e:
        print_error(str(e))
        return EXIT_SOURCE_ERROR
    except LexerError as e:
        print_error(str(e))
        return EXIT_LEXER_ERROR
    except InternalError as e:
        print_error(str(e))
        return EXIT_INTERNAL_ERROR

    if not result.ok:
        result.diagnostics.print_all(err_console, level=None if args.verbose else DiagnosticLevel.ERROR)
        print_error(f"{result.diagnostics.error_count} lexical error(s) in {result.filename}")
        return EXIT_LEXER_ERROR

    if args.verbose and result.diagnostics.warning_count:
        result.diagnostics.print_all(err_console, level=DiagnosticLevel.WARNING)
        print_warning(f"{result.diagnostics.warning_count} unknown character(s) skipped in {result.filename}")

    if args.format == 'json':
        print(json.dumps([_token_to_json(t) for t in result.tokens], indent=2))
    elif args.format == 'plain':
        for token in result.tokens:
            print(token)
    else:
        print_token_table(result.tokens, title=result.filename)
        print_success(f"{len(result.tokens)} tokens")
    return EXIT_OK


if __name__ == '__main__':
    sys.exit(main())
