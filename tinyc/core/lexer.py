import logging
import os
from typing import Callable, List, Mapping, Optional, Tuple

from .chars import CharacterType, char_type_at, is_ascii_digit, is_identifier_char
from .diagnostics import DiagnosticEngine, SourceLocation
from .keywords import KeywordMap, default_keywords
from .tokens import INT32_MAX, SYMBOLS, Token, TokenType, Value
from ..utils.errors import LexerError, LiteralOverflowError, UnknownCharacterError

logger = logging.getLogger(__name__)

_TRUTHY = ('1', 'true', 'yes', 'on')


def _env_flag(environ: Mapping[str, str], name: str) -> Optional[bool]:
    value = environ.get(name)
    if value is None:
        return None
    return value.strip().lower() in _TRUTHY


class LexerConfig:
    def __init__(self, strict_unknown_characters: bool = False, fail_fast: bool = True,
                 verbose: bool = False):
        # Skip characters outside the symbol table unless strict
        self.strict_unknown_characters = strict_unknown_characters
        # Raise on the first lexical error instead of collecting diagnostics
        self.fail_fast = fail_fast
        self.verbose = verbose

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "LexerConfig":
        """Build a config honoring TINYC_STRICT_UNKNOWN_CHARS and TINYC_KEEP_GOING"""
        environ = os.environ if environ is None else environ
        config = cls()
        strict = _env_flag(environ, 'TINYC_STRICT_UNKNOWN_CHARS')
        if strict is not None:
            config.strict_unknown_characters = strict
        keep_going = _env_flag(environ, 'TINYC_KEEP_GOING')
        if keep_going is not None:
            config.fail_fast = not keep_going
        return config

    def __repr__(self):
        return (f"LexerConfig(strict_unknown_characters={self.strict_unknown_characters}, "
                f"fail_fast={self.fail_fast}, verbose={self.verbose})")


class Scanner:
    """Single-pass scanner over an in-memory source text.

    The scanner owns its cursor (``position``, ``line``) and the tokens it
    has produced; the source and keyword table are only read. Each token is
    stamped with the cursor as it was before the lexeme was consumed.
    """

    def __init__(self, source: str, keywords: Optional[KeywordMap] = None,
                 config: Optional[LexerConfig] = None, filename: str = "<stdin>"):
        self.source = source
        self.keywords = keywords if keywords is not None else default_keywords()
        self.config = config or LexerConfig()
        self.filename = filename
        self.diagnostics = DiagnosticEngine()

        # Cursor state
        self.position = 0
        self.line = 0

        self._tokens: List[Token] = []
        self._result: Optional[Tuple[Token, ...]] = None
        self._failure: Optional[LexerError] = None

    @property
    def tokens(self) -> Tuple[Token, ...]:
        """Tokens produced so far"""
        return tuple(self._tokens)

    def tokenize(self) -> Tuple[Token, ...]:
        """Scan the whole source and return the token stream.

        A scanner scans once; later calls return the same result, or
        re-raise the error that stopped the first scan.
        """
        if self._result is not None:
            return self._result
        if self._failure is not None:
            raise self._failure

        while True:
            info = char_type_at(self.source, self.position)
            if info is None:
                break
            if info.type == CharacterType.WHITESPACE:
                self.position += 1
            elif info.type == CharacterType.NEWLINE:
                self.position += 1
                self.line += 1
            elif info.type == CharacterType.ALPHABETIC:
                self._scan_identifier()
            elif info.type == CharacterType.NUMERIC:
                self._scan_literal()
            else:
                self._scan_symbol(info.char)

        self._result = tuple(self._tokens)
        logger.debug("%s: %d tokens over %d lines", self.filename, len(self._result), self.line + 1)
        return self._result

    def location_at(self, position: int, line: int) -> SourceLocation:
        """1-based location of a 0-based position, with its source line"""
        start = max(self.source.rfind('\n', 0, position), self.source.rfind('\r', 0, position)) + 1
        end = start
        while end < len(self.source) and self.source[end] not in '\r\n':
            end += 1
        return SourceLocation(
            line=line + 1,
            column=position - start + 1,
            file=self.filename,
            raw_line=self.source[start:end],
        )

    def _add_token(self, token: Token):
        self._tokens.append(token)

    def _lexeme_length(self, continues: Callable[[str], bool]) -> int:
        # The first character is already known to belong to the lexeme
        length = 1
        while True:
            info = char_type_at(self.source, self.position + length)
            if info is None or not continues(info.char):
                return length
            length += 1

    def _fail(self, error: LexerError):
        if self.config.fail_fast:
            self._failure = error
            raise error
        self.diagnostics.error(error.message, self.location_at(error.position, error.line), error=error)

    def _scan_identifier(self):
        length = self._lexeme_length(is_identifier_char)
        text = self.source[self.position:self.position + length]
        keyword = self.keywords.get(text)
        if keyword is not None:
            self._add_token(Token.keyword(keyword, self.line, self.position, text))
        else:
            self._add_token(Token.identifier(text, self.line, self.position))
        self.position += length

    def _scan_literal(self):
        length = self._lexeme_length(is_ascii_digit)
        text = self.source[self.position:self.position + length]
        significant = text.lstrip('0') or '0'
        # Decide overflow on the digit count first; int() refuses huge strings
        if len(significant) > len(str(INT32_MAX)) or int(significant) > INT32_MAX:
            self._fail(LiteralOverflowError(text, self.line, self.position))
        else:
            self._add_token(Token.literal(text, Value.of_int(int(significant)), self.line, self.position))
        self.position += length

    def _scan_symbol(self, char: str):
        token_type: Optional[TokenType] = SYMBOLS.get(char)
        if token_type is not None:
            self._add_token(Token.symbol(token_type, self.line, self.position))
        elif self.config.strict_unknown_characters:
            self._fail(UnknownCharacterError(char, self.line, self.position))
        else:
            # Skipped without a token; recorded only as a warning
            logger.debug("skipping unknown character %r at line %d, position %d",
                         char, self.line, self.position)
            self.diagnostics.warning(f"skipped unknown character {char!r}",
                                     self.location_at(self.position, self.line))
        self.position += 1


def tokenize(source: str, keywords: Optional[KeywordMap] = None,
             config: Optional[LexerConfig] = None) -> Tuple[Token, ...]:
    """Tokenize ``source`` with the default keyword table unless one is given"""
    return Scanner(source, keywords, config).tokenize()
