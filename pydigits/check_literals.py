from dataclasses import dataclass
import os
import sys
from typing import IO, Any

import cbor2
from tqdm import tqdm

from pydigits import error_to_string, parse_digit_format, parse_unsigned
from pydigits.result import Result

MODES = ("digit", "unsigned")


@dataclass
class Context:
    input_path: str
    output_path: str
    mode: str = "digit"

    def __post_init__(self):
        if self.mode not in MODES:
            raise ValueError(f"mode must be one of {MODES}, got {self.mode!r}")


@dataclass
class Summary:
    parsed: int = 0
    rejected: int = 0


def parse_line(line: str, mode: str) -> Result[Any, Any]:
    if mode == "unsigned":
        return parse_unsigned(line)
    return parse_digit_format(line).transform(lambda d: [d.digit, d.base, d.reduced])


def record_for(line_no: int, res: Result[Any, Any]) -> tuple:
    if res:
        return (line_no, True, res.value())
    return (line_no, False, error_to_string(res.error()))


def check_stream(fp: IO[str], outfile: IO[bytes], mode: str, progress: tqdm) -> Summary:
    """Parses each line of `fp` and writes one CBOR record per line to `outfile`."""
    summary = Summary()
    for line_no, line in enumerate(fp, start=1):
        progress.update(len(line.encode()))
        res = parse_line(line.rstrip("\n"), mode)
        if res:
            summary.parsed += 1
        else:
            summary.rejected += 1
        cbor2.dump(record_for(line_no, res), outfile)
    return summary


def check_file(ctx: Context) -> Summary:
    total = os.stat(ctx.input_path).st_size
    with (
        open(ctx.input_path, "r", encoding="utf-8", errors="replace", newline="\n") as fp,
        open(ctx.output_path, "wb") as outfile,
        tqdm(total=total, unit_scale=True, unit_divisor=1024, unit="B") as progress,
    ):
        return check_stream(fp, outfile, ctx.mode, progress)


if __name__ == "__main__":
    ctx = Context(*sys.argv[1:4])
    print(ctx)
    summary = check_file(ctx)
    print(f"{summary.parsed} parsed, {summary.rejected} rejected")
