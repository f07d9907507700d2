from pydigits import error_to_string, parse_digit_format, parse_unsigned

UNSIGNED_EXPERIMENTS = ["123", "456789", "18446744073709551615", "", "12a34", "18446744073709551616", "12 34", "  123  "]
DIGIT_EXPERIMENTS = [
    "d#5#B3",
    "dig [7] B 10",
    "d  #  100  #  B  7",
    "dig[15]B16",
    "x#5#B3",
    "d5B3",
    "d#5]B3",
    "d[5[B3",
    "d#5#C3",
    "d#5#B0",
]


def run_unsigned(text: str) -> str:
    res = parse_unsigned(text)
    if res:
        return f"{text!r}: success=1 value={res.value()}"
    return f"{text!r}: success=0 error={error_to_string(res.error())}"


def run_digit(text: str) -> str:
    res = parse_digit_format(text)
    if res:
        parsed = res.value()
        return f"{text!r}: success=1 digit={parsed.digit} base={parsed.base} value={parsed.reduced}"
    return f"{text!r}: success=0 error={error_to_string(res.error())}"


if __name__ == "__main__":
    for text in UNSIGNED_EXPERIMENTS:
        print(run_unsigned(text))
    print()
    for text in DIGIT_EXPERIMENTS:
        print(run_digit(text))
