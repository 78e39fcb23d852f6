import logging
from typing import Generic, TypeVar, Hashable, Iterable, Iterator, Optional

_T = TypeVar('_T', bound=Hashable)
logger = logging.getLogger(__name__)


class MultisetIterator(Generic[_T]):
    """
    A forward cursor over every occurrence of every element of a multiset.

    Each backing entry is visited once and its element is yielded as many times as its multiplicity.
    The cursor reads the live store: mutating the multiset while iterating gives undefined results.
    """

    __slots__ = ('__entries', '__current', '__remaining')
    __entries: Iterator[tuple[_T, int]]
    __current: Optional[_T]
    __remaining: int

    def __init__(self, entries: Iterable[tuple[_T, int]]):
        self.__entries = iter(entries)
        self.__current = None
        self.__remaining = 0

    def __iter__(self) -> 'MultisetIterator[_T]':
        return self

    def __next__(self) -> _T:
        while self.__remaining <= 0:
            # raises StopIteration once the entries are exhausted
            self.__current, self.__remaining = next(self.__entries)
        self.__remaining -= 1
        return self.__current  # type: ignore


class MultisetLayout(Generic[_T]):
    """
    An immutable snapshot of the entries of a multiset, used to address single occurrences.

    `offsets[i]` is the position of the first occurrence of `entries[i]` in the flattened sequence,
    and `offsets[-1]` is the total number of occurrences.
    """

    __slots__ = ('entries', 'offsets')
    entries: tuple[tuple[_T, int], ...]
    offsets: tuple[int, ...]

    def __init__(self, entries: Iterable[tuple[_T, int]]):
        self.entries = tuple(entries)
        offsets = [0]
        for _, count in self.entries:
            offsets.append(offsets[-1] + count)
        self.offsets = tuple(offsets)
        logger.debug(f'Built layout of {len(self.entries)} entries and {self.total} occurrences')

    @property
    def total(self) -> int:
        return self.offsets[-1]

    @property
    def start_index(self) -> 'MultisetIndex[_T]':
        return MultisetIndex(self, 0, 0)

    @property
    def end_index(self) -> 'MultisetIndex[_T]':
        return MultisetIndex(self, len(self.entries), 0)

    def element_at(self, index: 'MultisetIndex[_T]') -> _T:
        entry, delta = index.entry, index.delta
        while entry < len(self.entries):
            element, count = self.entries[entry]
            if delta < count:
                return element
            delta -= count
            entry += 1
        raise IndexError('Multiset index out of range')

    def __len__(self) -> int:
        return len(self.entries)


class MultisetIndex(Generic[_T]):
    """
    The position of a single occurrence in the flattened view of a multiset.

    A position is made of a backing entry of a layout and an offset `delta` from the first occurrence of that entry.
    The same occurrence can be reached through different splits, for example the end of an entry and the start
    of the next one: positions compare by their absolute offset in the layout.
    Positions taken from different layouts cannot be ordered.
    """

    __slots__ = ('layout', 'entry', 'delta')
    layout: MultisetLayout[_T]
    entry: int
    delta: int

    def __init__(self, layout: MultisetLayout[_T], entry: int, delta: int):
        self.layout = layout
        self.entry = entry
        self.delta = delta

    @property
    def max(self) -> int:
        return self.layout.total

    @property
    def offset(self) -> int:
        return self.layout.offsets[self.entry] + self.delta

    def successor(self) -> 'MultisetIndex[_T]':
        return MultisetIndex(self.layout, self.entry, self.delta + 1)

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}(entry={self.entry}, delta={self.delta}, max={self.max})'

    def __eq__(self, other: object) -> bool:
        if isinstance(other, MultisetIndex):
            if self.layout is not other.layout:
                return False
            if self.entry == other.entry:
                return self.delta == other.delta
            return self.offset == other.offset
        return NotImplemented

    def __hash__(self) -> int:
        return hash((id(self.layout), self.offset))

    def __lt__(self, other: 'MultisetIndex[_T]') -> bool:
        if not isinstance(other, MultisetIndex) or self.layout is not other.layout:
            return NotImplemented
        if self.entry == other.entry:
            return self.delta < other.delta
        return self.offset < other.offset

    def __le__(self, other: 'MultisetIndex[_T]') -> bool:
        if not isinstance(other, MultisetIndex) or self.layout is not other.layout:
            return NotImplemented
        return self.offset <= other.offset

    def __gt__(self, other: 'MultisetIndex[_T]') -> bool:
        if not isinstance(other, MultisetIndex) or self.layout is not other.layout:
            return NotImplemented
        return self.offset > other.offset

    def __ge__(self, other: 'MultisetIndex[_T]') -> bool:
        if not isinstance(other, MultisetIndex) or self.layout is not other.layout:
            return NotImplemented
        return self.offset >= other.offset
