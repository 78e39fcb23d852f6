from unittest import TestCase
from multisets.printing import describe, debug_describe
from multisets.multiset import FrozenMultiset, Multiset


class Element:
    def __str__(self):
        return 'description'

    def __repr__(self):
        return 'debugDescription'


class PrintingTests(TestCase):
    def test_describe(self):
        self.assertEqual(describe([]), '{}')
        self.assertEqual(describe([1]), '{1}')
        self.assertEqual(describe(['a', 'b']), '{a, b}')
        self.assertEqual(describe(x for x in (1, 2, 3)), '{1, 2, 3}')

    def test_debug_describe(self):
        self.assertEqual(debug_describe([]), '{}')
        self.assertEqual(debug_describe(['a', 'b']), "{'a', 'b'}")
        self.assertEqual(debug_describe([1.5]), '{1.5}')

    def test_multiset_description(self):
        self.assertEqual(Multiset[int]().description, '{}')
        self.assertEqual(Multiset.of(Element()).description, '{description}')
        self.assertEqual(str(FrozenMultiset([Element()])), '{description}')

    def test_multiset_debug_description(self):
        self.assertEqual(Multiset[int]().debug_description, '{}')
        self.assertEqual(Multiset.of(Element()).debug_description, '{debugDescription}')
        self.assertEqual(repr(FrozenMultiset([Element()])), 'FrozenMultiset({debugDescription})')

    def test_every_occurrence_is_rendered(self):
        self.assertEqual(str(Multiset([1, 5, 2, 2])), '{1, 5, 2, 2}')
        self.assertEqual(str(Multiset(['x', 'x', 'x'])), '{x, x, x}')
