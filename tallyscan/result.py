"""
Result carrier for tallyscan.

A two-case container holding either a success value (``Ok``) or an error
value (``Err``). Errors travel as ordinary return values, so a scan that
hits a bad character hands the error back to its caller instead of raising.

Typical use::

    outcome = tokenizer.tokenize(text)
    if outcome.is_err():
        report(outcome.unwrap_err())
    tokens = outcome.unwrap_ok()

``collect`` is the early-return combinator: it drains an iterable of results
and stops at the first ``Err``.
"""

from dataclasses import dataclass
from typing import Callable, Generic, Iterable, List, TypeVar, Union

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")
F = TypeVar("F")


class UnwrapError(RuntimeError):
    """Raised when a value is extracted from the wrong case of a Result."""


class _ResultBase(Generic[T, E]):
    """Operations shared by both cases."""

    def is_ok(self) -> bool:
        return isinstance(self, Ok)

    def is_err(self) -> bool:
        return isinstance(self, Err)

    def unwrap_ok(self) -> T:
        if isinstance(self, Ok):
            return self.value
        raise UnwrapError(f"unwrap_ok() called on {self!r}")

    def unwrap_err(self) -> E:
        if isinstance(self, Err):
            return self.error
        raise UnwrapError(f"unwrap_err() called on {self!r}")

    def unwrap_or(self, default: T) -> T:
        if isinstance(self, Ok):
            return self.value
        return default

    def map(self, func: Callable[[T], U]) -> "Result[U, E]":
        """Transform the success value, leaving an error untouched."""
        if isinstance(self, Ok):
            return Ok(func(self.value))
        return self  # type: ignore[return-value]

    def map_err(self, func: Callable[[E], F]) -> "Result[T, F]":
        """Transform the error value, leaving a success untouched."""
        if isinstance(self, Err):
            return Err(func(self.error))
        return self  # type: ignore[return-value]

    def and_then(self, func: Callable[[T], "Result[U, E]"]) -> "Result[U, E]":
        """
        Chain another fallible step.

        On ``Ok`` the wrapped value is passed to ``func`` and its result is
        returned. On ``Err`` this result is returned verbatim and ``func`` is
        never called.
        """
        if isinstance(self, Ok):
            return func(self.value)
        return self  # type: ignore[return-value]


@dataclass(frozen=True)
class Ok(_ResultBase[T, E]):
    """Success case."""
    value: T

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"


@dataclass(frozen=True)
class Err(_ResultBase[T, E]):
    """Error case."""
    error: E

    def __repr__(self) -> str:
        return f"Err({self.error!r})"


Result = Union[Ok[T, E], Err[T, E]]


def collect(results: Iterable["Result[T, E]"]) -> "Result[List[T], E]":
    """
    Gather the values of a sequence of results.

    Returns ``Ok`` with every value in order, or the first ``Err`` exactly as
    it was produced. The iterable is consumed lazily and abandoned at the
    first error, so a generator feeding this function does no further work
    once it has failed.
    """
    values: List[T] = []
    for result in results:
        if isinstance(result, Err):
            return result  # type: ignore[return-value]
        values.append(result.value)
    return Ok(values)
