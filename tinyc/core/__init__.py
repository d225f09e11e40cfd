"""Core package re-exports for the tinyc front-end"""
from .operators import UnaryOp, BinaryOp
from .tokens import Keyword, ValueKind, Value, TokenType, Token, SYMBOLS
from .keywords import KeywordMap, default_keywords
from .chars import CharacterType, CharInfo, classify_char, char_type_at
from .diagnostics import DiagnosticLevel, Diagnostic, DiagnosticEngine, SourceLocation
from .lexer import LexerConfig, Scanner, tokenize
from .source import read_source
from .pipeline import LexResult, tokenize_string, tokenize_file

__all__ = [
    'UnaryOp', 'BinaryOp',
    'Keyword', 'ValueKind', 'Value', 'TokenType', 'Token', 'SYMBOLS',
    'KeywordMap', 'default_keywords',
    'CharacterType', 'CharInfo', 'classify_char', 'char_type_at',
    'DiagnosticLevel', 'Diagnostic', 'DiagnosticEngine', 'SourceLocation',
    'LexerConfig', 'Scanner', 'tokenize',
    'read_source',
    'LexResult', 'tokenize_string', 'tokenize_file',
]
