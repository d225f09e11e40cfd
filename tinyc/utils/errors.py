#!/usr/bin/env python3
from typing import Optional


class TinycError(Exception):
    """Base class for errors caused by the program being compiled"""

    def __init__(self, message: str, line: Optional[int] = None, position: Optional[int] = None):
        self.message = message
        self.line = line
        self.position = position
        super().__init__(self._format_error())

    def _format_error(self) -> str:
        """Format error message with location"""
        if self.line is not None and self.position is not None:
            return f"{self.message} at line {self.line}, position {self.position}"
        return self.message


class SourceError(TinycError):
    """The source file could not be read"""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"cannot read '{path}': {reason}")


class LexerError(TinycError):
    """A lexical error at a known line and position"""

    def __init__(self, message: str, line: int, position: int):
        super().__init__(message, line, position)


class LiteralOverflowError(LexerError):
    def __init__(self, lexeme: str, line: int, position: int):
        self.lexeme = lexeme
        super().__init__(f"'{lexeme}' does not fit in a 32-bit signed integer", line, position)

    def _format_error(self) -> str:
        return f"literal overflow at line {self.line}, position {self.position}: {self.message}"


class UnknownCharacterError(LexerError):
    def __init__(self, char: str, line: int, position: int):
        self.char = char
        super().__init__(f"unknown character {char!r}", line, position)


class InternalError(AssertionError):
    """Broken invariant inside the compiler, never a problem with the input"""

    def __init__(self, message: str):
        self.message = message
        super().__init__(f"internal error: {message}")


class InvalidOperatorConversion(InternalError):
    def __init__(self, token_type, conversion: str):
        self.token_type = token_type
        self.conversion = conversion
        super().__init__(f"{token_type.name} is not a {conversion} operator")
