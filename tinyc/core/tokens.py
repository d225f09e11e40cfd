from enum import Enum, auto
from dataclasses import dataclass
from typing import Optional, Union

from .operators import UnaryOp, BinaryOp
from ..utils.errors import InternalError, InvalidOperatorConversion

INT32_MIN = -2 ** 31
INT32_MAX = 2 ** 31 - 1


class Keyword(Enum):
    RETURN = "return"
    INT = "int"


class ValueKind(Enum):
    INT = auto()
    CHAR = auto()


@dataclass(frozen=True)
class Value:
    """Literal payload: a signed 32-bit integer or a single byte"""
    kind: ValueKind
    data: int

    @classmethod
    def of_int(cls, number: int) -> "Value":
        if not INT32_MIN <= number <= INT32_MAX:
            raise InternalError(f"{number} is outside the 32-bit signed range")
        return cls(ValueKind.INT, number)

    @classmethod
    def of_char(cls, byte: int) -> "Value":
        if not 0 <= byte <= 255:
            raise InternalError(f"{byte} is not a byte value")
        return cls(ValueKind.CHAR, byte)

    def __str__(self):
        if self.kind == ValueKind.CHAR:
            return f"Char({self.data})"
        return f"Int({self.data})"


class TokenType(Enum):
    # Payload-carrying
    KEYWORD = auto()
    IDENTIFIER = auto()
    LITERAL = auto()

    # Punctuation
    OPEN_PAREN = auto()
    CLOSE_PAREN = auto()
    OPEN_BRACE = auto()
    CLOSE_BRACE = auto()
    SEMICOLON = auto()

    # Operators
    MINUS = auto()
    BITWISE_NOT = auto()
    LOGICAL_NEGATION = auto()
    ADDITION = auto()
    MULTIPLICATION = auto()
    DIVISION = auto()

    @property
    def lexeme(self) -> Optional[str]:
        """Fixed spelling of a symbol tag, None for payload variants"""
        return _SPELLINGS.get(self)

    def is_unary_operator(self) -> bool:
        return self in _UNARY_OPERATORS

    def is_binary_operator(self) -> bool:
        return self in _BINARY_OPERATORS

    def to_unary_operator(self) -> UnaryOp:
        """Convert to the parser's prefix operator.

        Callers must check is_unary_operator() first; anything else is a
        bug on their side and raises InvalidOperatorConversion.
        """
        try:
            return _UNARY_OPERATORS[self]
        except KeyError:
            raise InvalidOperatorConversion(self, "unary") from None

    def to_binary_operator(self) -> BinaryOp:
        """Convert to the parser's infix operator (see to_unary_operator)"""
        try:
            return _BINARY_OPERATORS[self]
        except KeyError:
            raise InvalidOperatorConversion(self, "binary") from None


# Single-character symbol table used by the scanner
SYMBOLS = {
    '(': TokenType.OPEN_PAREN, ')': TokenType.CLOSE_PAREN,
    '{': TokenType.OPEN_BRACE, '}': TokenType.CLOSE_BRACE,
    ';': TokenType.SEMICOLON,
    '~': TokenType.BITWISE_NOT, '!': TokenType.LOGICAL_NEGATION,
    '-': TokenType.MINUS, '*': TokenType.MULTIPLICATION,
    '/': TokenType.DIVISION, '+': TokenType.ADDITION,
}

_SPELLINGS = {token_type: char for char, token_type in SYMBOLS.items()}

_UNARY_OPERATORS = {
    TokenType.MINUS: UnaryOp.NEGATION,
    TokenType.BITWISE_NOT: UnaryOp.BITWISE_NOT,
    TokenType.LOGICAL_NEGATION: UnaryOp.LOGICAL_NEGATION,
}

_BINARY_OPERATORS = {
    TokenType.MINUS: BinaryOp.SUBTRACTION,
    TokenType.ADDITION: BinaryOp.ADDITION,
    TokenType.MULTIPLICATION: BinaryOp.MULTIPLICATION,
    TokenType.DIVISION: BinaryOp.DIVISION,
}

_PAYLOAD_TYPES = {
    TokenType.KEYWORD: Keyword,
    TokenType.IDENTIFIER: str,
    TokenType.LITERAL: Value,
}

Payload = Union[Keyword, str, Value, None]


@dataclass(frozen=True)
class Token:
    """A classified lexeme.

    ``line`` and ``position`` are 0-based and record the scanner cursor at
    the first character of the lexeme. ``text`` is the lexeme exactly as it
    appeared in the source; ``value`` is the payload of KEYWORD, IDENTIFIER
    and LITERAL tokens and None for every symbol tag.
    """
    type: TokenType
    text: str
    line: int
    position: int
    value: Payload = None

    def __post_init__(self):
        expected = _PAYLOAD_TYPES.get(self.type)
        if expected is None:
            if self.value is not None:
                raise InternalError(f"{self.type.name} token takes no payload, got {self.value!r}")
        elif not isinstance(self.value, expected):
            raise InternalError(f"{self.type.name} token needs a {expected.__name__} payload, got {self.value!r}")

    @classmethod
    def keyword(cls, keyword: Keyword, line: int, position: int, text: Optional[str] = None) -> "Token":
        # A custom keyword table may spell a keyword differently
        return cls(TokenType.KEYWORD, keyword.value if text is None else text, line, position, keyword)

    @classmethod
    def identifier(cls, name: str, line: int, position: int) -> "Token":
        return cls(TokenType.IDENTIFIER, name, line, position, name)

    @classmethod
    def literal(cls, text: str, value: Value, line: int, position: int) -> "Token":
        return cls(TokenType.LITERAL, text, line, position, value)

    @classmethod
    def symbol(cls, token_type: TokenType, line: int, position: int) -> "Token":
        if token_type.lexeme is None:
            raise InternalError(f"{token_type.name} is not a symbol token")
        return cls(token_type, token_type.lexeme, line, position)

    @property
    def length(self) -> int:
        return len(self.text)

    def is_unary_operator(self) -> bool:
        return self.type.is_unary_operator()

    def is_binary_operator(self) -> bool:
        return self.type.is_binary_operator()

    def to_unary_operator(self) -> UnaryOp:
        return self.type.to_unary_operator()

    def to_binary_operator(self) -> BinaryOp:
        return self.type.to_binary_operator()

    def __str__(self):
        if self.type == TokenType.KEYWORD:
            kind = f"Keyword({self.value.name.capitalize()})"
        elif self.type == TokenType.IDENTIFIER:
            kind = f"Identifier({self.value!r})"
        elif self.type == TokenType.LITERAL:
            kind = f"Literal({self.value})"
        else:
            kind = self.type.name
        return f"{kind} @ {self.line}:{self.position}"
