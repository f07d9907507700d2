import pytest

from pydigits.errors import ErrorCode
from pydigits.lexing import MAX_U64, ParsedNumber, blanks, is_blank, lex_unsigned, skip_blanks
from pydigits.result import Err, Ok


def test_skip_blanks():
    assert skip_blanks("  \t\r\n12", 0) == 5
    assert skip_blanks("12", 0) == 0
    assert skip_blanks("1  ", 1) == 3
    assert skip_blanks("", 0) == 0


def test_blank_set():
    for ch in " \t\n\r":
        assert is_blank(ch)
    for ch in "\v\f\xa0x0":
        assert not is_blank(ch)


def test_blanks_parser():
    assert blanks().f(" \t x") == ("x", Ok(" \t "))
    assert blanks().f("x") == ("x", Ok(""))


def test_lex_reports_end():
    assert lex_unsigned("123abc") == Ok(ParsedNumber(123, 3))
    assert lex_unsigned("ab42 ", 2) == Ok(ParsedNumber(42, 4))
    assert lex_unsigned("007") == Ok(ParsedNumber(7, 3))


def test_lex_max_value():
    assert lex_unsigned(str(MAX_U64)) == Ok(ParsedNumber(MAX_U64, 20))


@pytest.mark.parametrize(
    "text",
    [
        "18446744073709551616",
        "18446744073709551620",
        "184467440737095516150",
        "99999999999999999999999",
    ],
)
def test_lex_overflow(text):
    assert lex_unsigned(text) == Err(ErrorCode.Overflow)


def test_lex_missing_number():
    assert lex_unsigned("") == Err(ErrorCode.Empty)
    assert lex_unsigned("12", 2) == Err(ErrorCode.Empty)
    assert lex_unsigned("a12") == Err(ErrorCode.InvalidCharacter)
    assert lex_unsigned(" 12") == Err(ErrorCode.InvalidCharacter)


def test_lex_rejects_non_ascii_digits():
    assert lex_unsigned("٣") == Err(ErrorCode.InvalidCharacter)
    assert lex_unsigned("1٣") == Ok(ParsedNumber(1, 1))
