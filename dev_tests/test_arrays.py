import itertools
import random
import unittest

from arrays import PrefixSum, permutations


class TestPrefixSum(unittest.TestCase):
    def setUp(self):
        self.ps = PrefixSum([8, 3, 4, 2, 6, 7])

    def test_prefix_array(self):
        self.assertEqual(self.ps.prefix_sum.tolist(), [8, 11, 15, 17, 23, 30])
        self.assertEqual(self.ps.array, [8, 3, 4, 2, 6, 7])

    def test_get_sum(self):
        self.assertEqual(self.ps.get_sum(0, 3), 17)
        self.assertEqual(self.ps.get_sum(2, 4), 12)
        self.assertEqual(self.ps.get_sum(5, 5), 7)
        self.assertIsInstance(self.ps.get_sum(0, 0), int)

    def test_get_sum_invalid_ranges(self):
        for start, end in [(-1, 3), (0, 6), (4, 2), (6, 6), (-2, -1)]:
            self.assertIsNone(self.ps.get_sum(start, end), (start, end))

    def test_contains_sum(self):
        self.assertTrue(self.ps.contains_sum(9))
        self.assertTrue(self.ps.contains_sum(30))
        self.assertTrue(self.ps.contains_sum(7))
        self.assertFalse(self.ps.contains_sum(31))
        self.assertFalse(self.ps.contains_sum(1))

    def test_contains_sum_with_negatives(self):
        ps = PrefixSum([3, -5, 2, 0])
        self.assertTrue(ps.contains_sum(-3))
        self.assertTrue(ps.contains_sum(0))
        self.assertFalse(ps.contains_sum(4))

    def test_floats(self):
        ps = PrefixSum([0.5, 1.5, 2.0])
        self.assertEqual(ps.get_sum(1, 2), 3.5)
        self.assertTrue(ps.contains_sum(2.0))

    def test_large_ints_stay_exact(self):
        big = 2 ** 62
        ps = PrefixSum([big, big, -1])
        self.assertEqual(ps.get_sum(0, 1), 2 ** 63)
        self.assertEqual(ps.get_sum(0, 2), 2 ** 63 - 1)
        self.assertTrue(ps.contains_sum(2 ** 63))
        self.assertFalse(ps.contains_sum(-(2 ** 63)))
        self.assertEqual(PrefixSum([2 ** 70, 1]).get_sum(0, 1), 2 ** 70 + 1)

    def test_empty(self):
        ps = PrefixSum([])
        self.assertEqual(len(ps), 0)
        self.assertIsNone(ps.get_sum(0, 0))
        self.assertFalse(ps.contains_sum(0))

    def test_matches_brute_force(self):
        rng = random.Random(5)
        values = [rng.randint(-20, 20) for _ in range(40)]
        ps = PrefixSum(values)
        for _ in range(200):
            i, j = sorted(rng.randrange(40) for _ in range(2))
            self.assertEqual(ps.get_sum(i, j), sum(values[i:j + 1]))
        sums = {sum(values[i:j]) for i in range(40) for j in range(i + 1, 41)}
        for target in range(-60, 61):
            self.assertEqual(ps.contains_sum(target), target in sums, target)


class TestPermutations(unittest.TestCase):
    def test_index_order(self):
        self.assertEqual(
            permutations([1, 2, 3, 4], 2),
            [[1, 2], [1, 3], [1, 4], [2, 1], [2, 3], [2, 4],
             [3, 1], [3, 2], [3, 4], [4, 1], [4, 2], [4, 3]],
        )

    def test_out_of_range_count(self):
        self.assertIsNone(permutations([1, 2, 3, 4], -1))
        self.assertIsNone(permutations([1, 2], 3))

    def test_edge_counts(self):
        self.assertEqual(permutations([1, 2], 0), [[]])
        self.assertEqual(permutations([], 0), [[]])
        self.assertEqual(len(permutations("abcd", 4)), 24)

    def test_duplicates_are_positional(self):
        self.assertEqual(permutations(["x", "x"], 2), [["x", "x"], ["x", "x"]])

    def test_sizes(self):
        for n, k in itertools.product(range(5), repeat=2):
            result = permutations(list(range(n)), k)
            if k > n:
                self.assertIsNone(result)
            else:
                expected = 1
                for i in range(k):
                    expected *= n - i
                self.assertEqual(len(result), expected)


if __name__ == "__main__":
    unittest.main(verbosity=2)
