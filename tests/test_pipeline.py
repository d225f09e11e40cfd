import logging
from pathlib import Path

import pytest

from tinyc.core.lexer import LexerConfig
from tinyc.core.pipeline import tokenize_file, tokenize_string
from tinyc.core.source import read_source
from tinyc.core.tokens import Keyword, TokenType
from tinyc.utils.errors import LiteralOverflowError, SourceError, TinycError


def test_read_source_keeps_text_verbatim(tmp_path: Path):
    p = tmp_path / "prog.c"
    p.write_bytes(b"int main()\r\n{ return 2; }\n")
    assert read_source(p) == "int main()\r\n{ return 2; }\n"


def test_read_source_logs_text_at_debug(tmp_path: Path, caplog):
    p = tmp_path / "prog.c"
    p.write_text("return 1;", encoding="utf-8")
    with caplog.at_level(logging.DEBUG, logger="tinyc.core.source"):
        read_source(p)
    assert any("return 1;" in r.getMessage() for r in caplog.records)


def test_read_source_missing_file(tmp_path: Path):
    missing = tmp_path / "nope.c"
    with pytest.raises(SourceError) as exc:
        read_source(missing)
    assert exc.value.path == str(missing)
    assert "file not found" in str(exc.value)
    assert isinstance(exc.value, TinycError)


def test_read_source_directory(tmp_path: Path):
    with pytest.raises(SourceError) as exc:
        read_source(tmp_path)
    assert exc.value.reason == "is a directory"


def test_read_source_bad_encoding(tmp_path: Path):
    p = tmp_path / "latin1.c"
    p.write_bytes(b"int \xff;")
    with pytest.raises(SourceError) as exc:
        read_source(p)
    assert "not valid utf-8" in str(exc.value)


def test_tokenize_file(tmp_path: Path):
    p = tmp_path / "prog.c"
    p.write_text("int main() {\n    return 42;\n}\n", encoding="utf-8")
    result = tokenize_file(p)
    assert result.ok
    assert result.filename == str(p)
    assert result.tokens[0].value == Keyword.INT
    assert result.tokens[-1].type == TokenType.CLOSE_BRACE
    assert result.tokens[-1].line == 2


def test_tokenize_string_fail_fast():
    with pytest.raises(LiteralOverflowError):
        tokenize_string("return 4294967296;")


def test_tokenize_string_keep_going():
    result = tokenize_string("return 4294967296;", LexerConfig(fail_fast=False), filename="x.c")
    assert not result.ok
    assert [t.type for t in result.tokens] == [TokenType.KEYWORD, TokenType.SEMICOLON]
    (diag,) = result.diagnostics
    assert str(diag.location) == "x.c:1:8"


def test_tokenize_string_verbose_reports_progress(capsys):
    tokenize_string("int x;", LexerConfig(verbose=True))
    err = capsys.readouterr().err
    assert "Lexical analysis" in err
    assert "Generated 3 tokens" in err


def test_config_from_env():
    config = LexerConfig.from_env({"TINYC_STRICT_UNKNOWN_CHARS": "Yes", "TINYC_KEEP_GOING": "1"})
    assert config.strict_unknown_characters is True
    assert config.fail_fast is False

    config = LexerConfig.from_env({"TINYC_STRICT_UNKNOWN_CHARS": "off"})
    assert config.strict_unknown_characters is False
    assert config.fail_fast is True

    assert repr(LexerConfig.from_env({})) == (
        "LexerConfig(strict_unknown_characters=False, fail_fast=True, verbose=False)"
    )
