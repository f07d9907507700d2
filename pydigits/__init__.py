from pydigits.digits import DigitResult, digit_reducer, reduce_digit
from pydigits.errors import ErrorCode, describe, error_to_string
from pydigits.lexing import ParsedNumber, lex_unsigned, skip_blanks
from pydigits.parsing import parse_digit_format, parse_unsigned
from pydigits.result import BadResultAccess, Err, Ok, Result, ResultKind, Unexpected, make_unexpected
