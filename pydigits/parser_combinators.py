# pylint: disable
from collections.abc import Container, Sequence
from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar

from pydigits.result import Err, Ok, Result, ResultKind

E = TypeVar("E")
I = TypeVar("I")
T = TypeVar("T")
T1 = TypeVar("T1")
T2 = TypeVar("T2")
R = TypeVar("R")
X = TypeVar("X")

Step = tuple[I, Result[T, Any]]

@dataclass(frozen=True)
class Parser(Generic[I, T]):
  f: Callable[[I], Step]

  def parse(self, inp: I) -> Result[T, Any]:
    return self.f(inp)[1]

  def validate(self, error: Any, check: Callable[[T], bool]) -> "Parser[I, T]":
    """Turns a parsed value that fails `check` into `error`, leaving the input unconsumed."""
    def validate_impl(inp: I) -> Step:
      rest, res = self.f(inp)
      checked = res.validate(error, check)
      return (rest if checked else inp), checked
    return Parser(validate_impl)

  def and_then(self, choose_next: "Callable[[T], Parser[I, R]]") -> "Parser[I, R]":
    """Picks the follow-up parser from the value just parsed."""
    def and_then_impl(inp: I) -> Step:
      rest, res = self.f(inp)
      if res.kind is ResultKind.ERR:
        return inp, res
      rest, res = choose_next(res.val).f(rest)
      return (rest if res else inp), res
    return Parser(and_then_impl)

  def __lshift__(self, parser2: "Parser[I, Any]") -> "Parser[I, T]":
    return terminated(self, parser2)

  def __rshift__(self, parser2: "Parser[I, T2]") -> "Parser[I, T2]":
    return preceded(self, parser2)

def consecutive(parser1: Parser[I, T1], parser2: Parser[I, T2], combiner: Callable[[T1, T2], R]) -> Parser[I, R]:
  def consecutive_impl(inp: I) -> Step:
    mid, first = parser1.f(inp)
    if not first:
      return inp, first
    rest, second = parser2.f(mid)
    if not second:
      return inp, second
    return rest, second.transform(lambda v2: combiner(first.val, v2))
  return Parser(consecutive_impl)

def preceded(parser1: Parser[I, Any], parser2: Parser[I, T]) -> Parser[I, T]:
  return consecutive(parser1, parser2, lambda _, v2: v2)

def terminated(parser1: Parser[I, T], parser2: Parser[I, Any]) -> Parser[I, T]:
  return consecutive(parser1, parser2, lambda v1, _: v1)

def alt(*parsers: Parser[I, T]) -> Parser[I, T]:
  """Tries each parser on the same input; the last parser's error is reported if none match."""
  def alt_impl(inp: I) -> Step:
    for parser in parsers:
      rest, res = parser.f(inp)
      if res:
        break
    return rest, res
  return Parser(alt_impl)

def satisfy_eq(item: X, error: E) -> Parser[Sequence[X], X]:
  return satisfy_in((item,), error)

def satisfy_in(items: Container[X], error: E) -> Parser[Sequence[X], X]:
  def satisfy_in_impl(inp: Sequence[X]) -> Step:
    if len(inp) == 0 or inp[0] not in items:
      return inp, Err(error)
    return inp[1:], Ok(inp[0])
  return Parser(satisfy_in_impl)

def satisfy_subseq(subseq: Sequence[X], error: E) -> Parser[Sequence[X], Sequence[X]]:
  def satisfy_subseq_impl(inp: Sequence[X]) -> Step:
    head = inp[:len(subseq)]
    if head != subseq:
      return inp, Err(error)
    return inp[len(subseq):], Ok(head)
  return Parser(satisfy_subseq_impl)

def take_while_m(min: int, predicate: Callable[[str], bool], error: Any = None) -> Parser[str, str]:
  def take_while_impl(inp: str) -> Step:
    end = 0
    while end < len(inp) and predicate(inp[end]):
      end += 1
    if end < min:
      return inp, Err(error)
    return inp[end:], Ok(inp[:end])
  return Parser(take_while_impl)

def take_while(predicate: Callable[[str], bool]) -> Parser[str, str]:
  return take_while_m(0, predicate)

def validate_remaining(check: Callable[[I], bool], error: E) -> Parser[I, bool]:
  def validate_remaining_impl(inp: I) -> Step:
    if not check(inp):
      return inp, Err(error)
    return inp, Ok(True)
  return Parser(validate_remaining_impl)

def all_consuming(parser: Parser[Sequence[X], T], error: E) -> Parser[Sequence[X], T]:
  """Fails with `error` unless `parser` leaves no input behind."""
  def is_empty(rest: Sequence[X]) -> bool:
    return len(rest) == 0
  return terminated(parser, validate_remaining(is_empty, error))
