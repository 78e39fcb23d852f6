from .multiset import BaseMultiset, Multiset, FrozenMultiset, InsertResult
from .index import MultisetIndex, MultisetIterator, MultisetLayout
from .hashing import sequence_hash
from .printing import describe, debug_describe
