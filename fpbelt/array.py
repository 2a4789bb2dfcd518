"""
Sequence utilities for fpbelt.

Every function takes its configuration (predicate, witness, index, value)
first and returns a one-argument callable over the sequence, so partial
applications read as reusable transformers:

    drop_first_odd = pluck_first(lambda n: n % 2 == 1)
    found, rest = drop_first_odd([2, 3, 4])   # Some(3), (2, 4)

Contract shared by every function here:
- Input sequences are never mutated. "Modified" sequences are new tuples.
- Untouched elements keep their relative order.
- Not found / out of range is reported as False or NOTHING, never raised.
- Equality and ordering always come from a caller-supplied witness.
"""

from __future__ import annotations

from functools import cmp_to_key
from typing import Callable, Sequence, TypeVar

from .option import NOTHING, Option, Some
from .witness import Eq, Ord

T = TypeVar("T")

Predicate = Callable[[T], bool]


# =============================================================================
# INSPECTION
# =============================================================================

def length(xs: Sequence[T]) -> int:
    """Number of elements in xs."""
    return len(xs)


def elem_flipped(eq: Eq[T]) -> Callable[[Sequence[T]], Callable[[T], bool]]:
    """
    Membership test with the value last.

    elem_flipped(eq)(xs) is the predicate "is an element of xs", which can
    be handed straight to any_of, filter and friends.
    """
    def in_sequence(xs: Sequence[T]) -> Callable[[T], bool]:
        def contains(value: T) -> bool:
            return any(eq.equals(value, x) for x in xs)
        return contains
    return in_sequence


def any_of(predicate: Predicate[T]) -> Callable[[Sequence[T]], bool]:
    """True if at least one element satisfies predicate. False when empty."""
    def check(xs: Sequence[T]) -> bool:
        return any(predicate(x) for x in xs)
    return check


def all_of(predicate: Predicate[T]) -> Callable[[Sequence[T]], bool]:
    """True if every element satisfies predicate. True when empty."""
    def check(xs: Sequence[T]) -> bool:
        return all(predicate(x) for x in xs)
    return check


def join(delimiter: str) -> Callable[[Sequence[str]], str]:
    """Join text elements with delimiter between each adjacent pair."""
    def joined(xs: Sequence[str]) -> str:
        return delimiter.join(xs)
    return joined


# =============================================================================
# EXTRACTION & UPSERT
# =============================================================================

def _find_index(predicate: Predicate[T], xs: Sequence[T]) -> int:
    """Index of the left-most match, or -1."""
    for i, x in enumerate(xs):
        if predicate(x):
            return i
    return -1


def pluck_first(
    predicate: Predicate[T],
) -> Callable[[Sequence[T]], tuple[Option[T], tuple[T, ...]]]:
    """
    Find and remove the left-most element satisfying predicate.

    Returns (Some(element), rest) where rest is xs without that one element,
    or (NOTHING, tuple(xs)) when nothing matches. Later matches are kept.
    """
    def pluck(xs: Sequence[T]) -> tuple[Option[T], tuple[T, ...]]:
        i = _find_index(predicate, xs)
        if i < 0:
            return NOTHING, tuple(xs)
        return Some(xs[i]), (*xs[:i], *xs[i + 1:])
    return pluck


def upsert(eq: Eq[T]) -> Callable[[T], Callable[[Sequence[T]], tuple[T, ...]]]:
    """
    Insert-or-replace by witness equality.

    If an element of xs equals value under eq, the left-most such element is
    replaced by value at the same position. Otherwise value is appended.
    The result always has at least one element.
    """
    def with_value(value: T) -> Callable[[Sequence[T]], tuple[T, ...]]:
        def apply(xs: Sequence[T]) -> tuple[T, ...]:
            i = _find_index(lambda x: eq.equals(x, value), xs)
            if i < 0:
                return (*xs, value)
            return (*xs[:i], value, *xs[i + 1:])
        return apply
    return with_value


# =============================================================================
# COMPARISON
# =============================================================================

def get_disordered_eq(ord_: Ord[T]) -> Eq[Sequence[T]]:
    """
    Equality of sequences that ignores order but respects multiplicity.

    Both sides are sorted by ord_ and then compared pointwise, so [y, z]
    equals [z, y] while [y, y] differs from both [y, z] and [y].

    Note: elements are compared with the equality induced by ord_ (compare
    returns zero), not with any separate Eq. An ordering on a key field
    therefore treats elements sharing that key as equal even when other
    fields differ. Pass an ordering that is consistent with the equality
    you mean.
    """
    key = cmp_to_key(ord_.compare)

    def equals(xs: Sequence[T], ys: Sequence[T]) -> bool:
        if len(xs) != len(ys):
            return False
        return all(
            ord_.equals(x, y)
            for x, y in zip(sorted(xs, key=key), sorted(ys, key=key))
        )

    return Eq(equals)


# =============================================================================
# SPLICING
# =============================================================================

def insert_many(
    index: int,
) -> Callable[[Sequence[T]], Callable[[Sequence[T]], Option[tuple[T, ...]]]]:
    """
    Splice a non-empty batch into a sequence at index.

    Valid for 0 <= index <= len(xs); index == len(xs) appends. The element
    previously at index (if any) follows the batch. Any other index gives
    NOTHING.
    """
    def with_batch(batch: Sequence[T]) -> Callable[[Sequence[T]], Option[tuple[T, ...]]]:
        def apply(xs: Sequence[T]) -> Option[tuple[T, ...]]:
            if index < 0 or index > len(xs):
                return NOTHING
            return Some((*xs[:index], *batch, *xs[index:]))
        return apply
    return with_batch
