from typing import TypeVar, Hashable, Iterable
from collections import Counter

_T = TypeVar('_T', bound=Hashable)


def from_pairs(pairs: Iterable[tuple[_T, int]]) -> Counter[_T]:
    """
    Builds a counting store from element/count pairs.

    Pairs with a count lower than one are left out, so that the store never
    holds a non-positive multiplicity.
    """
    result = Counter[_T]()
    for element, count in pairs:
        if count > 0:
            result[element] = count
    return result


def union(a: Counter[_T], b: Iterable[_T] | Counter[_T]) -> Counter[_T]:
    """
    Returns a new store with the multiplicities of both operands summed.

    The second operand can also be a plain iterable: every occurrence is inserted into a copy of the first one.
    """
    result = a.copy()
    if isinstance(b, Counter):
        for element, count in b.items():
            result[element] += count
    else:
        for element in b:
            result[element] += 1
    return result


def intersection(a: Counter[_T], b: Counter[_T]) -> Counter[_T]:
    """Returns a new store with the minimum multiplicity of every element."""
    smaller, larger = (a, b) if len(a) <= len(b) else (b, a)
    return from_pairs(
        (element, min(count, larger[element]))
        for element, count in smaller.items()
    )


def complement(a: Counter[_T], b: Counter[_T]) -> Counter[_T]:
    """Returns what remains of `a` after removing up to `b`'s count of each element."""
    return from_pairs(
        (element, count - b[element])
        for element, count in a.items()
    )


def symmetric_difference(a: Counter[_T], b: Counter[_T]) -> Counter[_T]:
    return union(complement(b, a), complement(a, b))


def is_subset(a: Counter[_T], b: Counter[_T]) -> bool:
    return not complement(a, b)
