from typing import Iterable, List, MutableSequence, Sequence

from .exceptions import EmptyIterable


def _buckets(keys: Sequence[int], order: Iterable[int]) -> List[int]:
    """Distributes the positions given by `order` into one bucket per integer value of `keys`
    and returns them concatenated. Stable with respect to `order`.
    """

    if not keys:
        raise EmptyIterable()

    m = min(keys)
    M = max(keys)

    buckets: List[List[int]] = [[] for _ in range(M - m + 1)]
    for i in order:
        buckets[keys[i] - m].append(i)

    return [i for bucket in buckets for i in bucket]


def sorted_indices(seq: Sequence[int]) -> List[int]:
    """Returns the indices of `seq` in stable sorted order in O(n + max(seq) - min(seq)).
    eg. [3, 1, 2, 1] -> [1, 3, 2, 0]
    """

    if not seq:
        return []

    return _buckets(seq, range(len(seq)))


def bucket_sort(seq: MutableSequence[int]) -> None:
    """Sorts the integers in `seq` in place. Linear in the length and the value range of `seq`."""

    seq[:] = [seq[i] for i in sorted_indices(seq)]


def bucket_sorted(seq: Sequence[int]) -> List[int]:
    """Like `bucket_sort`, but not in-place."""

    return [seq[i] for i in sorted_indices(seq)]


def _radix_order(rows: Sequence[Sequence[int]]) -> List[int]:
    if not rows:
        return []

    row_length = len(rows[0])
    for row in rows:
        if len(row) != row_length:
            raise ValueError(f"All rows must have length {row_length}, not {len(row)}")

    order: List[int] = list(range(len(rows)))
    for column in range(row_length - 1, -1, -1):
        keys = [row[column] for row in rows]
        order = _buckets(keys, order)

    return order


def radix_sort(rows: MutableSequence[Sequence[int]]) -> None:
    """Sorts equal length rows of integers lexicographically in place.
    Does one stable bucket pass per column, starting from the last one.
    """

    rows[:] = [rows[i] for i in _radix_order(rows)]


def radix_sorted(rows: Sequence[Sequence[int]]) -> List[Sequence[int]]:
    """Like `radix_sort`, but not in-place."""

    return [rows[i] for i in _radix_order(rows)]
