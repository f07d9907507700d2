from pydigits.experiments import DIGIT_EXPERIMENTS, UNSIGNED_EXPERIMENTS, run_digit, run_unsigned


def test_run_unsigned():
    assert run_unsigned("123") == "'123': success=1 value=123"
    assert run_unsigned("12a34") == "'12a34': success=0 error=InvalidCharacter"


def test_run_digit():
    assert run_digit("d#5#B3") == "'d#5#B3': success=1 digit=5 base=3 value=2"
    assert run_digit("d#5#B0") == "'d#5#B0': success=0 error=BaseOutOfRange"


def test_every_experiment_renders():
    for text in UNSIGNED_EXPERIMENTS:
        assert run_unsigned(text).startswith(repr(text))
    for text in DIGIT_EXPERIMENTS:
        assert run_digit(text).startswith(repr(text))
