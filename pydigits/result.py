# pylint: disable
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Generic, Literal, NoReturn, TypeVar

class ResultKind(Enum):
  OK = 0
  ERR = 1

E = TypeVar("E")
F = TypeVar("F")
T = TypeVar("T")
R = TypeVar("R")

class BadResultAccess(ValueError):
  """Raised when the payload of the variant a Result does not hold is requested."""

  def __init__(self, result: "Result[Any, Any]", requested: str):
    super().__init__(f"{requested}() called on {result!r}")
    self.result = result
    self.requested = requested

@dataclass(frozen=True)
class Unexpected(Generic[E]):
  """Explicit error wrapper, so an error can be told apart from a value of the same type."""
  error: E

def make_unexpected(error: E) -> Unexpected[E]:
  return Unexpected(error)

def _require_result(res: Any, combinator: str) -> "Result[Any, Any]":
  if not isinstance(res, (Ok, Err)):
    raise TypeError(f"{combinator} callback must return Ok or Err, got {type(res).__name__}")
  return res

@dataclass(init=False)
class Ok(Generic[T]):
  kind: Literal[ResultKind.OK]
  val: T

  def __init__(self, val: T = None):
    if isinstance(val, Unexpected):
      raise TypeError("Unexpected wraps an error; build an Err from it, not an Ok")
    self.kind = ResultKind.OK
    self.val = val

  def __bool__(self) -> bool:
    return True

  def has_value(self) -> bool:
    return True

  def has_error(self) -> bool:
    return False

  def value(self) -> T:
    return self.val

  def error(self) -> NoReturn:
    raise BadResultAccess(self, "error")

  def value_or(self, default: Any) -> T:
    return self.val

  def and_then(self, f: "Callable[[T], Result[R, Any]]") -> "Result[R, Any]":
    return _require_result(f(self.val), "and_then")

  def or_else(self, f: Callable[[Any], Any]) -> "Ok[T]":
    return self

  def transform(self, f: Callable[[T], R]) -> "Ok[R]":
    return Ok(f(self.val))

  def transform_error(self, f: Callable[[Any], Any]) -> "Ok[T]":
    return self

  def validate(self, error: E, check: Callable[[T], bool]) -> "Result[T, E]":
    if not check(self.val):
      return Err(error)
    return self

@dataclass(init=False)
class Err(Generic[E]):
  kind: Literal[ResultKind.ERR]
  err: E

  def __init__(self, err: "E | Unexpected[E]"):
    self.kind = ResultKind.ERR
    if isinstance(err, Unexpected):
      err = err.error
    self.err = err

  def __bool__(self) -> bool:
    return False

  def has_value(self) -> bool:
    return False

  def has_error(self) -> bool:
    return True

  def value(self) -> NoReturn:
    raise BadResultAccess(self, "value")

  def error(self) -> E:
    return self.err

  def value_or(self, default: T) -> T:
    return default

  def and_then(self, f: Callable[[Any], Any]) -> "Err[E]":
    return self

  def or_else(self, f: "Callable[[E], Result[T, F]]") -> "Result[T, F]":
    return _require_result(f(self.err), "or_else")

  def transform(self, f: Callable[[Any], Any]) -> "Err[E]":
    return self

  def transform_error(self, f: Callable[[E], F]) -> "Err[F]":
    return Err(f(self.err))

  def validate(self, error: Any, check: Callable[[Any], bool]) -> "Err[E]":
    return self

Result = Ok[T] | Err[E]
