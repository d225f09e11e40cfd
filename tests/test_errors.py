import dataclasses

import pytest
from rich.console import Console

from tinyc.core.diagnostics import Diagnostic, DiagnosticEngine, DiagnosticLevel, SourceLocation
from tinyc.core.tokens import TokenType
from tinyc.utils.errors import (
    InternalError, InvalidOperatorConversion, LexerError, LiteralOverflowError, SourceError,
    TinycError, UnknownCharacterError,
)


def test_error_messages():
    assert str(TinycError("boom")) == "boom"
    assert str(LexerError("bad", 2, 14)) == "bad at line 2, position 14"
    assert str(UnknownCharacterError("#", 0, 3)) == "unknown character '#' at line 0, position 3"
    assert str(LiteralOverflowError("4294967296", 1, 0)) == (
        "literal overflow at line 1, position 0: '4294967296' does not fit in a 32-bit signed integer"
    )
    assert str(SourceError("a.c", "file not found")) == "cannot read 'a.c': file not found"


def test_source_errors_and_internal_errors_are_distinct():
    assert issubclass(LiteralOverflowError, LexerError)
    assert issubclass(SourceError, TinycError)
    assert not issubclass(InternalError, TinycError)
    assert issubclass(InvalidOperatorConversion, AssertionError)

    err = InvalidOperatorConversion(TokenType.SEMICOLON, "binary")
    assert str(err) == "internal error: SEMICOLON is not a binary operator"


def test_diagnostic_engine_counts():
    engine = DiagnosticEngine()
    assert not engine.has_errors()
    engine.warning("skipped unknown character '@'")
    engine.error("bad literal", error=LexerError("bad literal", 0, 0))
    assert engine.error_count == 1
    assert engine.warning_count == 1
    assert engine.has_errors()
    assert len(engine) == 2
    assert [type(e) for e in engine.errors] == [LexerError]
    assert [d.message for d in engine.of_level(DiagnosticLevel.WARNING)] == ["skipped unknown character '@'"]


def test_diagnostic_format_plain_and_colored():
    diag = Diagnostic(DiagnosticLevel.ERROR, "unknown character '['",
                      SourceLocation(1, 5, "a.c", "int [x"))
    assert diag.format(with_colors=False) == (
        "a.c:1:5: error: unknown character '['\n"
        "  int [x\n"
        "      ^"
    )
    colored = diag.format()
    assert colored.startswith("a.c:1:5: [red]error: ")
    assert "[/red]" in colored


def test_caret_keeps_tabs_from_the_source_line():
    location = SourceLocation(1, 4, "a.c", "\t x@")
    assert location.caret_padding() == "\t  "
    diag = Diagnostic(DiagnosticLevel.WARNING, "skipped unknown character '@'", location)
    assert diag.format(with_colors=False).endswith("\n  \t x@\n  \t  ^")


def test_source_location_is_immutable():
    location = SourceLocation(2, 3, "a.c", "  @")
    with pytest.raises(dataclasses.FrozenInstanceError):
        location.line = 5
    assert str(location) == "a.c:2:3"


def test_print_all_writes_every_diagnostic():
    engine = DiagnosticEngine()
    engine.error("first", SourceLocation(1, 1, "a.c", "x"))
    engine.warning("second")
    console = Console(record=True, width=120)
    engine.print_all(console)
    text = console.export_text()
    assert "a.c:1:1: error: first" in text
    assert "warning: second" in text


def test_print_all_filters_by_level():
    engine = DiagnosticEngine()
    engine.error("first")
    engine.warning("second")
    console = Console(record=True, width=120)
    engine.print_all(console, level=DiagnosticLevel.WARNING)
    text = console.export_text()
    assert "warning: second" in text
    assert "first" not in text
