import io

import cbor2
import pytest
from tqdm import tqdm

from pydigits.check_literals import Context, check_file, check_stream, parse_line


def test_parse_line_modes():
    assert parse_line("d#5#B3", "digit").value() == [5, 3, 2]
    assert parse_line(" 42 ", "unsigned").value() == 42


def test_context_rejects_unknown_mode():
    with pytest.raises(ValueError):
        Context("in.txt", "out.cbor", "hex")


def test_check_stream_writes_one_record_per_line():
    fp = io.StringIO("d#5#B3\nd#5]B3\n\ndig [7] B 10\n")
    outfile = io.BytesIO()
    with tqdm(disable=True) as progress:
        summary = check_stream(fp, outfile, "digit", progress)
    assert (summary.parsed, summary.rejected) == (2, 2)
    outfile.seek(0)
    records = [cbor2.load(outfile) for _ in range(4)]
    assert records == [
        [1, True, [5, 3, 2]],
        [2, False, "MismatchedDelimiter"],
        [3, False, "Empty"],
        [4, True, [7, 10, 7]],
    ]
    assert outfile.read() == b""


def test_check_file(tmp_path):
    src = tmp_path / "numbers.txt"
    src.write_text("123\n12 34\n18446744073709551616\n", encoding="utf-8")
    dst = tmp_path / "numbers.cbor"
    summary = check_file(Context(str(src), str(dst), "unsigned"))
    assert (summary.parsed, summary.rejected) == (1, 2)
    with open(dst, "rb") as fp:
        records = [cbor2.load(fp) for _ in range(3)]
        assert fp.read() == b""
    assert records == [
        [1, True, 123],
        [2, False, "BlankInterDigits"],
        [3, False, "Overflow"],
    ]


def test_check_file_records_undecodable_line(tmp_path):
    src = tmp_path / "literals.txt"
    src.write_bytes(b"d#5#B3\nd#\xff#B3\n\xffdig[7]B10\nd#7#B3\n")
    dst = tmp_path / "literals.cbor"
    summary = check_file(Context(str(src), str(dst), "digit"))
    assert (summary.parsed, summary.rejected) == (2, 2)
    with open(dst, "rb") as fp:
        records = [cbor2.load(fp) for _ in range(4)]
        assert fp.read() == b""
    assert records == [
        [1, True, [5, 3, 2]],
        [2, False, "InvalidDigit"],
        [3, False, "InvalidPrefix"],
        [4, True, [7, 3, 1]],
    ]
