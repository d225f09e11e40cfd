"""
Character classification for the scanner.

Every function here is pure: classifying a character never moves the
scanner cursor, so recognizers can look ahead freely before committing
to a lexeme.
"""
from enum import Enum, auto
from dataclasses import dataclass
from typing import Optional

import regex

# Unicode Alphabetic property: letters, letter numbers and combining vowel signs
_ALPHABETIC = regex.compile(r"\p{Alphabetic}")


class CharacterType(Enum):
    WHITESPACE = auto()
    ALPHABETIC = auto()
    NUMERIC = auto()
    NEWLINE = auto()
    NON_ALPHABETIC = auto()


@dataclass(frozen=True)
class CharInfo:
    type: CharacterType
    char: str


def is_alphabetic(ch: str) -> bool:
    return _ALPHABETIC.match(ch) is not None


def is_ascii_digit(ch: str) -> bool:
    return '0' <= ch <= '9'


def is_identifier_char(ch: str) -> bool:
    """Characters that may continue an identifier after its first one"""
    return is_alphabetic(ch) or is_ascii_digit(ch) or ch == '_'


def classify_char(ch: str) -> CharacterType:
    # Order matters: letters first, then digits
    if is_alphabetic(ch) or ch == '_':
        return CharacterType.ALPHABETIC
    if is_ascii_digit(ch):
        return CharacterType.NUMERIC
    if ch in (' ', '\t'):
        return CharacterType.WHITESPACE
    if ch in ('\n', '\r'):
        return CharacterType.NEWLINE
    return CharacterType.NON_ALPHABETIC


def char_type_at(source: str, offset: int) -> Optional[CharInfo]:
    """Classify the character at ``offset``, or None past the end of input"""
    if offset < 0 or offset >= len(source):
        return None
    ch = source[offset]
    return CharInfo(classify_char(ch), ch)
