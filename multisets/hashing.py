from typing import Hashable, Iterable


HASH_BITS = 64
_MASK = (1 << HASH_BITS) - 1
_SIGN = 1 << (HASH_BITS - 1)


def _wrap(value: int) -> int:
    value &= _MASK
    return value - (1 << HASH_BITS) if value & _SIGN else value


def sequence_hash(values: Iterable[Hashable]) -> int:
    '''
    Hashes a sequence of hashable values using Bob Jenkins' one-at-a-time hash.

    Arithmetic is done on a signed 64 bit word and wraps around on overflow.

    .. code-block:: python
        sequence_hash([]) #--> 0

    :see: https://en.wikipedia.org/wiki/Jenkins_hash_function#one-at-a-time
    '''
    h = 0
    for value in values:
        h = _wrap(h + hash(value))
        h = _wrap(h + (h << 10))
        h ^= h >> 6
    h = _wrap(h + (h << 3))
    h ^= h >> 11
    h = _wrap(h + (h << 15))
    return h
