"""
Equality and ordering witnesses.

A witness is a value the caller passes in to say how elements compare. The
sequence functions in fpbelt.array never assume == or < on their elements;
they only ever use the witness they are given.

Witnesses:
    Eq: equals(a, b) -> bool, a total equivalence relation
    Ord: compare(a, b) -> int, a total order (negative / zero / positive)

An Ord also acts as an Eq: two elements are equal under an Ord exactly when
compare(a, b) == 0. Callers who project to a key (ord_by, ord_contramap) get
equality on that key only, not on the whole element.
"""

from __future__ import annotations

import operator
from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar

T = TypeVar("T")
U = TypeVar("U")


# =============================================================================
# WITNESS TYPES
# =============================================================================

@dataclass(frozen=True)
class Eq(Generic[T]):
    """
    Caller-supplied equality over T.

    Must be reflexive, symmetric and transitive. Nothing here checks that;
    a broken witness gives undefined results.
    """
    equals: Callable[[T, T], bool]


@dataclass(frozen=True)
class Ord(Generic[T]):
    """
    Caller-supplied total order over T.

    compare(a, b) returns a negative number when a sorts before b, zero when
    neither sorts before the other, and a positive number otherwise.
    """
    compare: Callable[[T, T], int]

    def equals(self, a: T, b: T) -> bool:
        """Equality induced by the ordering."""
        return self.compare(a, b) == 0

    def to_eq(self) -> Eq[T]:
        return Eq(self.equals)


# =============================================================================
# STANDARD INSTANCES
# =============================================================================

def _natural_compare(a: Any, b: Any) -> int:
    return (a > b) - (a < b)


# Python's own == and < operators
eq_strict: Eq[Any] = Eq(operator.eq)
ord_natural: Ord[Any] = Ord(_natural_compare)


# =============================================================================
# DERIVED WITNESSES
# =============================================================================

def eq_contramap(f: Callable[[U], T]) -> Callable[[Eq[T]], Eq[U]]:
    """Build an Eq over U by projecting each U to a T first."""
    def derive(eq: Eq[T]) -> Eq[U]:
        return Eq(lambda a, b: eq.equals(f(a), f(b)))
    return derive


def ord_contramap(f: Callable[[U], T]) -> Callable[[Ord[T]], Ord[U]]:
    """Build an Ord over U by projecting each U to a T first."""
    def derive(ord_: Ord[T]) -> Ord[U]:
        return Ord(lambda a, b: ord_.compare(f(a), f(b)))
    return derive


def eq_by(key: Callable[[U], Any]) -> Eq[U]:
    """Equality on a key, e.g. eq_by(lambda user: user.id)."""
    return eq_contramap(key)(eq_strict)


def ord_by(key: Callable[[U], Any]) -> Ord[U]:
    """Natural ordering on a key."""
    return ord_contramap(key)(ord_natural)
