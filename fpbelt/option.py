"""
Option and Result values for fpbelt.

Absence and failure are ordinary return values here, never exceptions.

Types:
    Some / Nothing: presence or absence of a value (Option)
    Ok / Err: success or failure carrying an error value (Result)

Some(None) is a present value. Absence is only ever the NOTHING singleton,
so a sequence of optional elements can still be searched without ambiguity.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, Optional, TypeVar, Union

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")


# =============================================================================
# OPTION
# =============================================================================

@dataclass(frozen=True)
class Some(Generic[T]):
    """A present value."""
    value: T


@dataclass(frozen=True)
class Nothing:
    """An absent value. Use the NOTHING singleton."""

    def __repr__(self) -> str:
        return "NOTHING"


NOTHING = Nothing()

Option = Union[Some[T], Nothing]


def is_some(option: Option[T]) -> bool:
    return isinstance(option, Some)


def is_nothing(option: Option[T]) -> bool:
    return isinstance(option, Nothing)


def from_nullable(value: Optional[T]) -> Option[T]:
    """Lift a value that may be None. None becomes NOTHING."""
    return NOTHING if value is None else Some(value)


def map_option(f: Callable[[T], U]) -> Callable[[Option[T]], Option[U]]:
    """Apply f to a present value; absence passes through."""
    def apply(option: Option[T]) -> Option[U]:
        if isinstance(option, Some):
            return Some(f(option.value))
        return NOTHING
    return apply


def get_or_else(default: T) -> Callable[[Option[T]], T]:
    """Extract a present value, or fall back to default."""
    def extract(option: Option[T]) -> T:
        if isinstance(option, Some):
            return option.value
        return default
    return extract


# =============================================================================
# RESULT
# =============================================================================

@dataclass(frozen=True)
class Ok(Generic[T]):
    """A successful outcome."""
    value: T


@dataclass(frozen=True)
class Err(Generic[E]):
    """A failed outcome with the caller's error value."""
    error: E


Result = Union[Err[E], Ok[T]]


def result_to_option(result: Result[E, T]) -> Option[T]:
    """Discard the error of a Result, keeping only success."""
    if isinstance(result, Ok):
        return Some(result.value)
    return NOTHING
