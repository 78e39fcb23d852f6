import logging
import functools
from typing import Generic, TypeVar, Hashable, Mapping as MappingType, NamedTuple, Union, Optional, Callable, \
    Iterable as IterableType, ItemsView, KeysView, ValuesView
from collections import Counter
from collections.abc import Iterable, Mapping
from . import algebra
from .hashing import sequence_hash
from .index import MultisetIndex, MultisetIterator, MultisetLayout
from .printing import describe, debug_describe

_T = TypeVar('_T', bound=Hashable)
_R = TypeVar('_R', bound=Hashable)
_A = TypeVar('_A')
_Other = Union['BaseMultiset[_T]', IterableType[_T], MappingType[_T, int]]
logger = logging.getLogger(__name__)


class InsertResult(NamedTuple):
    inserted: bool
    member_after_insert: Hashable


class BaseMultiset(Generic[_T]):
    """A multiset implementation.

    A multiset is similar to the builtin :class:`set`, but elements can occur multiple times in the multiset.
    It is also similar to a :class:`list` without ordering of the values, where the occurrences of an element
    are always next to each other.

    Iterating a multiset yields every element as many times as its multiplicity.
    Algebraic operations never change their operands and always return a new multiset.

    :see: https://en.wikipedia.org/wiki/Multiset
    """

    __slots__ = ('_elements', '_total', '_layout')
    _elements: Counter[_T]
    _total: int
    _layout: Optional[MultisetLayout[_T]]

    def __init__(self, iterable: Optional[_Other] = None, _internal: Optional[Counter[_T]] = None):
        assert iterable is None or _internal is None, "Either 'iterable' or '_internal' must be provided, not both."
        self._layout = None
        if isinstance(iterable, BaseMultiset):
            self._elements = iterable._elements.copy()
            self._total = iterable._total
        elif _internal is not None:
            self._elements = _internal
            self._total = self._elements.total()
        elif isinstance(iterable, Mapping):
            self._elements = algebra.from_pairs(iterable.items())
            self._total = self._elements.total()
        else:
            self._elements = Counter[_T](iterable)
            self._total = self._elements.total()

    @classmethod
    def of(cls, *elements: _T):
        return cls(elements)

    @classmethod
    def with_capacity(cls, minimum_capacity: int):
        """Creates an empty multiset. The capacity is only a hint and does not change the result."""
        if minimum_capacity < 0:
            raise ValueError('The capacity must not be negative.')
        return cls()

    @classmethod
    def _coerce(cls, other: _Other) -> 'BaseMultiset[_T]':
        if isinstance(other, BaseMultiset):
            return other
        return BaseMultiset(other)

    def __contains__(self, element: object) -> bool:
        return element in self._elements

    def contains(self, element: _T) -> bool:
        return self.count(element) > 0

    def __getitem__(self, element: _T) -> int:
        return self._elements[element]

    def count(self, element: _T) -> int:
        return self._elements[element]

    @property
    def count_distinct(self) -> int:
        return len(self._elements)

    @property
    def is_empty(self) -> bool:
        return not self._elements

    def __len__(self) -> int:
        return self._total

    def __bool__(self) -> bool:
        return self._total > 0

    def __iter__(self) -> MultisetIterator[_T]:
        return MultisetIterator(self._elements.items())

    @property
    def description(self) -> str:
        return describe(self)

    @property
    def debug_description(self) -> str:
        return debug_describe(self)

    def __str__(self) -> str:
        return self.description

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}({self.debug_description})'

    @property
    def layout(self) -> MultisetLayout[_T]:
        if self._layout is None:
            self._layout = MultisetLayout(self._elements.items())
        return self._layout

    @property
    def start_index(self) -> MultisetIndex[_T]:
        return self.layout.start_index

    @property
    def end_index(self) -> MultisetIndex[_T]:
        return self.layout.end_index

    def index_after(self, index: MultisetIndex[_T]) -> MultisetIndex[_T]:
        return index.successor()

    def element_at(self, index: MultisetIndex[_T]) -> _T:
        """Returns the occurrence at `index`, which must come from the current state of the multiset."""
        return index.layout.element_at(index)

    def isdisjoint(self, other: 'BaseMultiset[_T]') -> bool:
        return self._elements.keys().isdisjoint(other._elements.keys())

    def union(self, other: _Other):
        if isinstance(other, (BaseMultiset, Mapping)):
            return self.__class__(_internal=algebra.union(self._elements, self._coerce(other)._elements))
        return self.__class__(_internal=algebra.union(self._elements, other))

    def intersection(self, other: _Other):
        return self.__class__(_internal=algebra.intersection(self._elements, self._coerce(other)._elements))

    def complement(self, other: _Other):
        return self.__class__(_internal=algebra.complement(self._elements, self._coerce(other)._elements))

    difference = complement

    def symmetric_difference(self, other: _Other):
        return self.__class__(_internal=algebra.symmetric_difference(self._elements, self._coerce(other)._elements))

    def subset(self, other: 'BaseMultiset[_T]') -> bool:
        if self._total > other._total:
            return False
        return algebra.is_subset(self._elements, other._elements)

    def strict_subset(self, other: 'BaseMultiset[_T]') -> bool:
        return self.subset(other) and self != other

    def superset(self, other: 'BaseMultiset[_T]') -> bool:
        return other.subset(self)

    def strict_superset(self, other: 'BaseMultiset[_T]') -> bool:
        return other.strict_subset(self)

    issubset = subset
    issuperset = superset

    def __eq__(self, other: object) -> bool:
        if isinstance(other, BaseMultiset):
            return self._total == other._total and self._elements == other._elements
        return False

    def filter(self, predicate: Callable[[_T], bool]):
        """Returns a new multiset with the occurrences `x` for which `predicate(x)` is true."""
        return self.__class__(x for x in self if predicate(x))

    def map(self, transform: Callable[[_T], _R]):
        """Returns a new multiset with `transform` applied to every occurrence. Colliding results add up."""
        return self.flat_map(lambda x: (transform(x),))

    def flat_map(self, transform: Callable[[_T], IterableType[_R]]):
        """
        Returns the union of the sequences obtained by applying `transform` to every occurrence.

        Results are iterated, so a mapping contributes its keys once each.
        """
        result = Counter[_R]()
        for x in self:
            for y in transform(x):
                result[y] += 1
        return self.__class__(_internal=result)

    def reduce(self, function: Callable[[_A, _T], _A], initial: _A) -> _A:
        """Folds every occurrence into `initial`, left to right."""
        return functools.reduce(function, self, initial)

    def get(self, element: _T, default: int) -> int:
        return self._elements.get(element, default)

    def copy(self):
        return self.__class__(_internal=self._elements.copy())

    __copy__ = copy

    def items(self) -> ItemsView[_T, int]:
        return self._elements.items()

    def distinct_elements(self) -> KeysView[_T]:
        return self._elements.keys()

    def multiplicities(self) -> ValuesView[int]:
        return self._elements.values()

    def __le__(self, other: 'BaseMultiset[_T]') -> bool:
        if not isinstance(other, BaseMultiset):
            return NotImplemented
        return self.subset(other)

    def __lt__(self, other: 'BaseMultiset[_T]') -> bool:
        if not isinstance(other, BaseMultiset):
            return NotImplemented
        return self._total < other._total and self.subset(other)

    def __ge__(self, other: 'BaseMultiset[_T]') -> bool:
        if not isinstance(other, BaseMultiset):
            return NotImplemented
        return self.superset(other)

    def __gt__(self, other: 'BaseMultiset[_T]') -> bool:
        if not isinstance(other, BaseMultiset):
            return NotImplemented
        return self._total > other._total and self.superset(other)

    def __add__(self, other: _Other):
        if not isinstance(other, Iterable):
            return NotImplemented
        return self.union(other)

    def __sub__(self, other: _Other):
        if not isinstance(other, Iterable):
            return NotImplemented
        return self.complement(other)

    def __and__(self, other: _Other):
        if not isinstance(other, Iterable):
            return NotImplemented
        return self.intersection(other)

    def __xor__(self, other: _Other):
        if not isinstance(other, Iterable):
            return NotImplemented
        return self.symmetric_difference(other)


class Multiset(Generic[_T], BaseMultiset[_T]):
    def _replace(self, elements: Counter[_T]) -> None:
        self._elements = elements
        self._total = elements.total()
        self._layout = None

    def insert(self, element: _T) -> InsertResult:
        """Adds one occurrence of `element`. The result tells whether `element` was not in the multiset before."""
        inserted = element not in self._elements
        self.add(element)
        return InsertResult(inserted, element)

    def update(self, element: _T) -> _T:
        """Inserts `element` and returns it."""
        return self.insert(element).member_after_insert

    def remove(self, element: _T) -> Optional[_T]:
        """Removes one occurrence of `element`, returning it, or `None` if `element` is not in the multiset."""
        count = self._elements.get(element, 0)
        if count == 0:
            logger.debug(f'Nothing to remove: {element!r} is not in the multiset')
            return None
        if count > 1:
            self._elements[element] = count - 1
        else:
            del self._elements[element]
        self._total -= 1
        self._layout = None
        return element

    def remove_all(self, keep_capacity: bool = False) -> None:
        """Removes every element. `keep_capacity` is only a hint."""
        self._elements.clear()
        self._total = 0
        self._layout = None

    def add(self, element: _T, quantity: int = 1) -> None:
        if quantity < 0:
            raise ValueError('The quantity must not be negative.')
        if quantity == 0:
            return
        self._elements[element] += quantity
        self._total += quantity
        self._layout = None

    def extend(self, iterable: IterableType[_T]) -> None:
        for element in iterable:
            self.add(element)

    def append(self, element: _T) -> None:
        self.add(element)

    def __setitem__(self, element: _T, quantity: int) -> None:
        if quantity < 0:
            raise ValueError('The quantity must not be negative.')
        elif quantity == 0:
            del self[element]
            return
        current_quantity = self._elements[element]
        self._elements[element] = quantity
        self._total += quantity - current_quantity
        self._layout = None

    def __delitem__(self, element: _T) -> None:
        current_quantity = self._elements.get(element, 0)
        if current_quantity:
            del self._elements[element]
            self._total -= current_quantity
            self._layout = None

    def form_union(self, other: _Other) -> None:
        self._replace(self.union(other)._elements)

    def form_intersection(self, other: _Other) -> None:
        self._replace(self.intersection(other)._elements)

    def form_complement(self, other: _Other) -> None:
        self._replace(self.complement(other)._elements)

    def form_symmetric_difference(self, other: _Other) -> None:
        self._replace(self.symmetric_difference(other)._elements)

    def __iadd__(self, other: _Other):
        self.form_union(other)
        return self

    def __isub__(self, other: _Other):
        self.form_complement(other)
        return self

    def __iand__(self, other: _Other):
        self.form_intersection(other)
        return self

    def __ixor__(self, other: _Other):
        self.form_symmetric_difference(other)
        return self


class FrozenMultiset(Generic[_T], BaseMultiset[_T]):
    def __hash__(self):
        # sorted so that equal multisets hash the same whatever their insertion order
        return sequence_hash(sorted(self, key=hash))
