from unittest import TestCase
from multisets.hashing import HASH_BITS, _wrap, sequence_hash
from multisets.multiset import FrozenMultiset


class SequenceHashTests(TestCase):
    def test_empty(self):
        self.assertEqual(sequence_hash([]), 0)

    def test_single_value(self):
        # 1 -> 1025 -> 1041, then finalized: 9369 -> 9373 -> 307143837
        self.assertEqual(sequence_hash([1]), 307143837)
        self.assertEqual(sequence_hash(iter([1])), 307143837)

    def test_deterministic(self):
        self.assertEqual(sequence_hash(range(100)), sequence_hash(list(range(100))))
        self.assertEqual(sequence_hash((1, 1, 2)), sequence_hash([1, 1, 2]))

    def test_multiplicity_participates(self):
        self.assertNotEqual(sequence_hash([1]), sequence_hash([1, 1]))
        self.assertNotEqual(sequence_hash([1, 2]), sequence_hash([1, 1, 2]))

    def test_wraps_around(self):
        self.assertEqual(_wrap(2 ** (HASH_BITS - 1)), -2 ** (HASH_BITS - 1))
        self.assertEqual(_wrap(2 ** HASH_BITS + 5), 5)
        self.assertEqual(_wrap(-1), -1)
        self.assertEqual(_wrap(-2 ** HASH_BITS - 1), -1)
        values = [2 ** 60 + i for i in range(1000)]
        h = sequence_hash(values)
        self.assertGreaterEqual(h, -2 ** (HASH_BITS - 1))
        self.assertLess(h, 2 ** (HASH_BITS - 1))

    def test_negative_hashes(self):
        h = sequence_hash([-5, -7, -2 ** 40])
        self.assertGreaterEqual(h, -2 ** (HASH_BITS - 1))
        self.assertLess(h, 2 ** (HASH_BITS - 1))


class FrozenMultisetHashTests(TestCase):
    def test_combines_every_occurrence(self):
        self.assertEqual(hash(FrozenMultiset([1, 1])), sequence_hash([1, 1]))
        self.assertEqual(hash(FrozenMultiset([3, 1, 2])), sequence_hash([1, 2, 3]))

    def test_combines_element_hashes_of_strings(self):
        elements = ['spam', 'eggs', 'eggs']
        self.assertEqual(hash(FrozenMultiset(elements)), sequence_hash(sorted(elements, key=hash)))
        self.assertEqual(hash(FrozenMultiset([b'ham', b'ham'])), sequence_hash([b'ham', b'ham']))

    def test_insertion_order_is_irrelevant(self):
        self.assertEqual(hash(FrozenMultiset('abcab')), hash(FrozenMultiset('bacba')))
        self.assertEqual(hash(FrozenMultiset({1: 2, 2: 1})), hash(FrozenMultiset({2: 1, 1: 2})))
