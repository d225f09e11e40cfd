from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple, Union

from .diagnostics import DiagnosticEngine
from .keywords import KeywordMap
from .lexer import LexerConfig, Scanner
from .source import read_source
from .tokens import Token
from ..utils.term import print_info, print_stage


@dataclass
class LexResult:
    tokens: Tuple[Token, ...]
    diagnostics: DiagnosticEngine
    filename: str = "<stdin>"

    @property
    def ok(self) -> bool:
        return not self.diagnostics.has_errors()


def tokenize_string(source: str, config: Optional[LexerConfig] = None,
                    filename: str = "<stdin>", keywords: Optional[KeywordMap] = None) -> LexResult:
    """Run lexical analysis over already-loaded text.

    With the default fail-fast config a LexerError propagates; otherwise the
    errors are in the result's diagnostics.
    """
    config = config or LexerConfig()
    if config.verbose:
        print_stage(1, 1, f"Lexical analysis of {filename}")
    scanner = Scanner(source, keywords, config, filename)
    tokens = scanner.tokenize()
    if config.verbose:
        print_info(f"Generated {len(tokens)} tokens over {scanner.line + 1} lines")
    return LexResult(tokens, scanner.diagnostics, filename)


def tokenize_file(path: Union[str, Path], config: Optional[LexerConfig] = None,
                  keywords: Optional[KeywordMap] = None) -> LexResult:
    source = read_source(path)
    return tokenize_string(source, config, str(path), keywords)
