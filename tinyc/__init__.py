"""tinyc: lexical front-end for a minimal C-like language"""
from .core import *  # noqa: F401,F403
from .core import __all__ as _core_all
from .utils.errors import (
    TinycError, SourceError, LexerError, LiteralOverflowError, UnknownCharacterError,
    InternalError, InvalidOperatorConversion,
)

__version__ = "0.1.0"

__all__ = list(_core_all) + [
    'TinycError', 'SourceError', 'LexerError', 'LiteralOverflowError', 'UnknownCharacterError',
    'InternalError', 'InvalidOperatorConversion',
]
