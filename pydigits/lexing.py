from dataclasses import dataclass

from pydigits.errors import ErrorCode
from pydigits.parser_combinators import Parser, take_while
from pydigits.result import Err, Ok, Result

MAX_U64 = (1 << 64) - 1
BLANKS = frozenset(" \t\n\r")


@dataclass(frozen=True)
class ParsedNumber:
    value: int
    # index just past the last digit consumed
    end: int


def is_blank(ch: str) -> bool:
    return ch in BLANKS


def is_digit(ch: str) -> bool:
    # str.isdigit() also accepts non-ASCII digits
    return "0" <= ch <= "9"


def skip_blanks(text: str, pos: int) -> int:
    """Returns the first index at or after `pos` that does not hold a blank."""
    while pos < len(text) and text[pos] in BLANKS:
        pos += 1
    return pos


def blanks() -> Parser[str, str]:
    return take_while(is_blank)


def lex_unsigned(text: str, start: int = 0) -> Result[ParsedNumber, ErrorCode]:
    """Consumes the run of ASCII digits beginning at `start`.

    The overflow checks run before the multiply and before the add, so a value
    is rejected the moment it would leave the unsigned 64-bit range; no further
    digits are consumed after that.
    """
    if start >= len(text):
        return Err(ErrorCode.Empty)
    if not is_digit(text[start]):
        return Err(ErrorCode.InvalidCharacter)
    value = 0
    index = start
    while index < len(text) and is_digit(text[index]):
        digit = ord(text[index]) - ord("0")
        if value > MAX_U64 // 10:
            return Err(ErrorCode.Overflow)
        value *= 10
        if value > MAX_U64 - digit:
            return Err(ErrorCode.Overflow)
        value += digit
        index += 1
    return Ok(ParsedNumber(value, index))
