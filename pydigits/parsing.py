from pydigits.digits import DigitResult, base_in_range
from pydigits.errors import ErrorCode
from pydigits.lexing import blanks, is_digit, lex_unsigned, skip_blanks
from pydigits.parser_combinators import (
    Parser,
    all_consuming,
    alt,
    consecutive,
    satisfy_eq,
    satisfy_in,
    satisfy_subseq,
)
from pydigits.result import Err, Ok, Result

CLOSING_DELIMITERS = {"#": "#", "[": "]"}


def parse_unsigned(text: str) -> Result[int, ErrorCode]:
    """Parses a whole string as one unsigned 64-bit decimal number.

    Blanks are allowed around the number but not between its digits.
    """
    start = skip_blanks(text, 0)
    if start == len(text):
        return Err(ErrorCode.Empty)
    res = lex_unsigned(text, start)
    if not res:
        return res.transform(lambda parsed: parsed.value)
    number = res.value()
    end = skip_blanks(text, number.end)
    if end == len(text):
        return Ok(number.value)
    if end > number.end and is_digit(text[end]):
        return Err(ErrorCode.BlankInterDigits)
    return Err(ErrorCode.InvalidCharacter)


def unsigned_number(missing: ErrorCode) -> Parser[str, int]:
    """Digit run at the head of the input; anything but an overflow is reported as `missing`."""
    def retag(code: ErrorCode) -> ErrorCode:
        return code if code is ErrorCode.Overflow else missing

    def unsigned_number_impl(inp: str) -> tuple[str, Result[int, ErrorCode]]:
        res = lex_unsigned(inp).transform_error(retag)
        if not res:
            return inp, res
        parsed = res.value()
        return inp[parsed.end:], Ok(parsed.value)
    return Parser(unsigned_number_impl)


def delimited_digit(opening: str) -> Parser[str, int]:
    closing = satisfy_eq(CLOSING_DELIMITERS[opening], ErrorCode.MismatchedDelimiter)
    return blanks() >> unsigned_number(ErrorCode.InvalidDigit) << blanks() << closing


def digit_format() -> Parser[str, DigitResult]:
    ws = blanks()
    # "dig" must be tried before "d"
    prefix = alt(
        satisfy_subseq("dig", ErrorCode.InvalidPrefix),
        satisfy_eq("d", ErrorCode.InvalidPrefix),
    )
    digit = satisfy_in(CLOSING_DELIMITERS, ErrorCode.MissingDelimiter).and_then(delimited_digit)
    base = (
        satisfy_eq("B", ErrorCode.MissingB)
        >> ws
        >> unsigned_number(ErrorCode.InvalidBase).validate(ErrorCode.BaseOutOfRange, base_in_range)
    )
    literal = consecutive(prefix >> ws >> digit << ws, base << ws, DigitResult.from_parts)
    return all_consuming(literal, ErrorCode.InvalidCharacter)


DIGIT_FORMAT = digit_format()


def parse_digit_format(text: str) -> Result[DigitResult, ErrorCode]:
    """Parses `d#N#B M` / `dig[N] B M` into the digit, its base and the digit reduced modulo the base."""
    if not text:
        return Err(ErrorCode.Empty)
    return DIGIT_FORMAT.parse(text)
