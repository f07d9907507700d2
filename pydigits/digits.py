from dataclasses import dataclass
from typing import Callable

MAX_U32 = (1 << 32) - 1
MAX_BASE = MAX_U32 + 1


def base_in_range(base: int) -> bool:
    """True when `base - 1` fits in 32 unsigned bits; a base of 0 underflows and is rejected."""
    return base != 0 and base - 1 <= MAX_U32


def reduce_digit(digit: int, base: int) -> int:
    return (digit % base) & MAX_U32


def digit_reducer(base: int) -> Callable[[int], int]:
    """Returns a reducer for a fixed base, checking the bound once up front.

    Unlike the grammar, which accepts any base from 1 to 2**32, a fixed bound
    must be at least 2.
    """
    if base < 2 or base - 1 > MAX_U32:
        raise ValueError(f"base must be in [2, {MAX_BASE}], got {base}")
    return lambda digit: reduce_digit(digit, base)


@dataclass(frozen=True)
class DigitResult:
    digit: int
    base: int
    reduced: int

    @classmethod
    def from_parts(cls, digit: int, base: int) -> "DigitResult":
        if not base_in_range(base):
            raise ValueError(f"base must be in [1, {MAX_BASE}], got {base}")
        return cls(digit, base, reduce_digit(digit, base))

    def reduced_for(self, base: int) -> int:
        return digit_reducer(base)(self.digit)
