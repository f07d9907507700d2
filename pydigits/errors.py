from enum import Enum


class ErrorCode(Enum):
    """Reasons a literal can be rejected by the parsers in `pydigits.parsing`."""

    InvalidCharacter = 0
    BlankInterDigits = 1
    Overflow = 2
    Empty = 3
    InvalidPrefix = 4
    MissingDelimiter = 5
    EmptyDigit = 6
    MismatchedDelimiter = 7
    InvalidDigit = 8
    MissingB = 9
    InvalidBase = 10
    EmptyBase = 11
    BlankInterDigitsOfBase = 12
    BaseOutOfRange = 13


DESCRIPTIONS: dict[ErrorCode, str] = {
    ErrorCode.InvalidCharacter: "invalid character found",
    ErrorCode.BlankInterDigits: "blanks between the digits of a number",
    ErrorCode.Overflow: "number does not fit in 64 unsigned bits",
    ErrorCode.Empty: "no characters to parse",
    ErrorCode.InvalidPrefix: "literal does not start with 'd' or 'dig'",
    ErrorCode.MissingDelimiter: "expected '#' or '['",
    ErrorCode.EmptyDigit: "digit is empty",
    ErrorCode.MismatchedDelimiter: "closing delimiter does not match the opening one",
    ErrorCode.InvalidDigit: "digit is not a decimal number",
    ErrorCode.MissingB: "expected 'B' before the base",
    ErrorCode.InvalidBase: "base is not a decimal number",
    ErrorCode.EmptyBase: "base is empty",
    ErrorCode.BlankInterDigitsOfBase: "blanks between the digits of the base",
    ErrorCode.BaseOutOfRange: "base minus one does not fit in 32 unsigned bits",
}


def error_to_string(code: ErrorCode) -> str:
    """Stable display label for an error code."""
    return code.name


def describe(code: ErrorCode) -> str:
    return DESCRIPTIONS[code]
