import unittest
import numpy as np

from rangelist.range import Range, validate, as_range, intersects, overlaps, merge, subtract


INVALID_RANGES = [
    None,
    1,
    '1',
    '15',
    [1],
    [10, 10],
    [1, 5, 10],
    [5, 1],
    ['1', '5'],
    [1, '5'],
    ['1', 5],
    [1.0, 5.0],
    [True, 5],
    {1: 2, 3: 4},
    range(1, 10, 2),
    np.array([[1, 2], [3, 4]]),
    np.array(3),
]


class TestValidate(unittest.TestCase):
    def test_rejects_invalid(self):
        for rng in INVALID_RANGES:
            self.assertFalse(validate(rng), rng)

    def test_accepts_integer_pairs(self):
        self.assertTrue(validate([1, 5]))
        self.assertTrue(validate((-10, -3)))
        self.assertTrue(validate(Range(0, 1)))
        self.assertTrue(validate(np.array([2, 4])))
        self.assertTrue(validate([np.int32(2), np.int64(4)]))

    def test_builtin_range_is_a_plain_sequence(self):
        self.assertFalse(validate(range(0, 100)))
        self.assertFalse(validate(range(7, 8)))
        self.assertFalse(validate(range(3, 7)))
        # holds exactly the two values 3 and 4
        self.assertEqual(as_range(range(3, 5)), (3, 4))

    def test_as_range(self):
        rng = as_range([np.int64(1), 5])
        self.assertIsInstance(rng, Range)
        self.assertEqual(rng, Range(1, 5))
        self.assertIs(type(rng.start), int)
        with self.assertRaises(ValueError):
            as_range([5, 1])


class TestIntersects(unittest.TestCase):
    def test_intersects(self):
        self.assertFalse(intersects([1, 10], [11, 20]))
        self.assertFalse(intersects([1, 5], [10, 20]))
        self.assertTrue(intersects([1, 11], [11, 20]))
        self.assertTrue(intersects([1, 11], [5, 20]))
        self.assertTrue(intersects([1, 20], [5, 20]))
        self.assertTrue(intersects([1, 20], [1, 40]))
        self.assertTrue(intersects([5, 10], [1, 40]))
        self.assertTrue(intersects([1, 20], [5, 10]))

    def test_touching_is_symmetric(self):
        self.assertTrue(intersects([5, 10], [1, 5]))
        self.assertTrue(intersects([1, 5], [5, 10]))

    def test_overlaps_ignores_touching(self):
        self.assertFalse(overlaps([1, 5], [5, 10]))
        self.assertFalse(overlaps([5, 10], [1, 5]))
        self.assertTrue(overlaps([1, 6], [5, 10]))
        self.assertTrue(overlaps([1, 20], [5, 10]))


class TestMerge(unittest.TestCase):
    def test_merge(self):
        self.assertEqual(merge([1, 5], [5, 10]), (1, 10))
        self.assertEqual(merge([1, 6], [4, 10]), (1, 10))
        self.assertEqual(merge([2, 6], [1, 10]), (1, 10))
        self.assertEqual(merge([1, 10], [2, 6]), (1, 10))

    def test_no_merge(self):
        self.assertIsNone(merge([1, 5], [6, 10]))

    def test_commutative_and_idempotent(self):
        a, b = Range(3, 8), Range(6, 12)
        self.assertEqual(merge(a, b), merge(b, a))
        self.assertEqual(merge(a, a), a)
        self.assertEqual(merge(merge(a, b), b), merge(a, b))


class TestSubtract(unittest.TestCase):
    def test_subtract(self):
        self.assertEqual(subtract([1, 2], [5, 10]), [(5, 10)])
        self.assertEqual(subtract([1, 6], [5, 10]), [(6, 10)])
        self.assertEqual(subtract([5, 10], [1, 6]), [(1, 5)])
        self.assertEqual(subtract([1, 10], [5, 6]), [])
        self.assertEqual(subtract([5, 6], [1, 10]), [(1, 5), (6, 10)])

    def test_touching_leaves_target(self):
        self.assertEqual(subtract([5, 10], [10, 15]), [(10, 15)])
        self.assertEqual(subtract([5, 10], [1, 5]), [(1, 5)])

    def test_shared_bounds(self):
        self.assertEqual(subtract([1, 5], [1, 10]), [(5, 10)])
        self.assertEqual(subtract([5, 10], [1, 10]), [(1, 5)])
        self.assertEqual(subtract([1, 10], [1, 10]), [])

    def test_returns_new_range(self):
        target = Range(5, 10)
        result = subtract(Range(20, 30), target)
        self.assertEqual(result, [target])
        self.assertIsNot(result[0], target)


if __name__ == '__main__':
    unittest.main()
