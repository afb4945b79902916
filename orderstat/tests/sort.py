from orderstat.exceptions import EmptyIterable
from orderstat.rand import randints, randlength
from orderstat.sort import bucket_sort, bucket_sorted, radix_sort, radix_sorted, sorted_indices
from orderstat.test import MyTestCase, parametrize, random_arguments


def _random_ints():
    return randints(randlength(1000), -500, 500)


def _random_rows():
    return [tuple(randints(3, 0, 4)) for _ in range(randlength(200))]


class SortTest(MyTestCase):
    @parametrize(
        ([], []),
        ([0], [0]),
        ([3, 1, 2, 1], [1, 3, 2, 0]),
        ([-2, 5, -2, 0], [0, 2, 3, 1]),
        ([1, 1, 1], [0, 1, 2]),
    )
    def test_sorted_indices(self, seq, truth):
        self.assertEqual(truth, sorted_indices(seq))

    @parametrize(
        ([], []),
        ([5, -3, 8, 1, 9, 2], [-3, 1, 2, 5, 8, 9]),
        ([4, 4, 4, 4], [4, 4, 4, 4]),
    )
    def test_bucket_sort(self, seq, truth):
        self.assertEqual(truth, bucket_sorted(seq))
        bucket_sort(seq)
        self.assertEqual(truth, seq)

    @random_arguments(20, _random_ints)
    def test_bucket_sort_random(self, seq):
        truth = sorted(seq)
        result = bucket_sorted(seq)
        self.assertEqual(truth, result)
        self.assertNotEqual(id(seq), id(result))

    @parametrize(
        ([], []),
        ([(3, 1), (1, 2), (1, 1)], [(1, 1), (1, 2), (3, 1)]),
        ([[2, 0, 1], [0, 9, 9], [2, 0, 0]], [[0, 9, 9], [2, 0, 0], [2, 0, 1]]),
        ([(), ()], [(), ()]),
    )
    def test_radix_sort(self, rows, truth):
        self.assertEqual(truth, radix_sorted(rows))
        radix_sort(rows)
        self.assertEqual(truth, rows)

    @random_arguments(20, _random_rows)
    def test_radix_sort_random(self, rows):
        self.assertEqual(sorted(rows), radix_sorted(rows))

    def test_radix_sort_ragged(self):
        with self.assertRaises(ValueError):
            radix_sorted([(1, 2), (1,)])

    def test_stable(self):
        seq = [3, 1, 3, 1, 2]
        self.assertIterEqual([1, 3, 4, 0, 2], sorted_indices(seq))

    def test_empty_buckets(self):
        from orderstat.sort import _buckets

        with self.assertRaises(EmptyIterable):
            _buckets([], [])


if __name__ == "__main__":
    import unittest

    unittest.main()
