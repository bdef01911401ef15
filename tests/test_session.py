import io
from pathlib import Path

import pytest

from loxscan.lexer import StringLiteral, TokenKind, scan
from loxscan.session import Lox, SessionOptions


def make_session(**options: object) -> tuple[Lox, io.StringIO]:
    out = io.StringIO()
    return Lox(out=out, options=SessionOptions(**options)), out  # type: ignore[arg-type]


def test_run_prints_tokens_one_per_line() -> None:
    lox, out = make_session()

    result = lox.run("var x = 1;")

    assert out.getvalue().splitlines() == [
        "VAR var ",
        "IDENTIFIER x ",
        "EQUAL = ",
        "NUMBER 1 1.000000",
        "SEMICOLON ; ",
        "EOF_LOX  ",
    ]
    assert result.has_errors is False
    assert lox.had_error is False


def test_run_reports_errors_and_keeps_scanning() -> None:
    lox, out = make_session()

    result = lox.run("1 @")

    assert out.getvalue().splitlines() == [
        "[line 1] Error: Unexpected character",
        "NUMBER 1 1.000000",
        "EOF_LOX  ",
    ]
    assert result.has_errors is True
    assert [token.kind for token in result.tokens] == [TokenKind.NUMBER, TokenKind.EOF_LOX]
    assert lox.had_error is True


def test_had_error_sticks_across_runs() -> None:
    lox, _ = make_session()

    lox.run("@")
    lox.run("ok")

    assert lox.had_error is True


def test_sessions_do_not_share_error_state() -> None:
    failing, _ = make_session()
    clean, _ = make_session()

    failing.run('"open')
    clean.run("1")

    assert failing.had_error is True
    assert clean.had_error is False


def test_show_tokens_false_prints_only_diagnostics() -> None:
    lox, out = make_session(show_tokens=False)

    lox.run("a $ b")

    assert out.getvalue() == "[line 1] Error: Unexpected character\n"


def test_run_file_scans_whole_file(tmp_path: Path) -> None:
    script = tmp_path / "hello.lox"
    script.write_text('var greeting = "hello";\nprint greeting;\n', encoding="utf-8")
    lox, _ = make_session(show_tokens=False)

    result = lox.run_file(script)

    assert [token.lexeme for token in result.tokens] == [
        "var",
        "greeting",
        "=",
        '"hello"',
        ";",
        "print",
        "greeting",
        ";",
        "",
    ]
    assert result.tokens[-1].line == 3
    assert result.source.endswith("print greeting;\n")


def test_run_file_missing_raises_os_error(tmp_path: Path) -> None:
    lox, _ = make_session()

    with pytest.raises(OSError):
        lox.run_file(tmp_path / "missing.lox")


def test_run_prompt_resets_error_per_line() -> None:
    lox, out = make_session(prompt="lox> ")

    results = lox.run_prompt(["@\n", "2\n"])

    assert [r.has_errors for r in results] == [True, False]
    assert lox.had_error is False
    text = out.getvalue()
    assert text.startswith("lox> [line 1] Error: Unexpected character\n")
    assert "lox> NUMBER 2 2.000000\n" in text
    assert text.endswith("lox> \n")


def test_run_prompt_scans_each_line_from_line_one() -> None:
    lox, _ = make_session(show_tokens=False)

    results = lox.run_prompt(["a\n", "b\n"])

    assert [r.tokens[0].line for r in results] == [1, 1]


def test_run_file_keeps_lone_carriage_return(tmp_path: Path) -> None:
    script = tmp_path / "cr.lox"
    script.write_bytes(b"1\r2")
    lox, _ = make_session(show_tokens=False)

    result = lox.run_file(script)

    assert result.source == "1\r2"
    assert [(t.lexeme, t.line) for t in result.tokens] == [(t.lexeme, t.line) for t in scan("1\r2")]
    assert [t.line for t in result.tokens] == [1, 1, 1]


def test_run_file_keeps_crlf_inside_strings(tmp_path: Path) -> None:
    script = tmp_path / "crlf.lox"
    script.write_bytes(b'"a\r\nb"')
    lox, _ = make_session(show_tokens=False)

    result = lox.run_file(script)

    assert result.tokens == scan('"a\r\nb"')
    assert result.tokens[0].literal == StringLiteral("a\r\nb")
    assert result.tokens[0].range.as_tuple() == (0, 7)


def test_package_exports_session_types() -> None:
    import loxscan

    assert loxscan.Lox is Lox
    assert loxscan.SessionOptions is SessionOptions
