from typing import Callable, List, MutableSequence, Optional, Sequence, Tuple

from .typing import OrderableT

GROUP_SIZE = 5
NINTHER_THRESHOLD = 9


def _insertion(seq: MutableSequence, cmp_: Callable, left: int, right: int, gap: int) -> None:
    loc = left + gap
    while loc <= right:
        i = loc - gap
        value = seq[loc]
        while i >= left and cmp_(seq[i], value) > 0:
            seq[i + gap] = seq[i]
            i -= gap
        seq[i + gap] = value
        loc += gap


def cmp(x: OrderableT, y: OrderableT) -> int:
    """
    Return negative if x<y, zero if x==y, positive if x>y.
    """
    return int(x > y) - int(x < y)


def median3(a: OrderableT, b: OrderableT, c: OrderableT) -> OrderableT:
    """Returns the median of three values."""

    return max(min(a, b), min(max(a, b), c))


def ninther(seq: Sequence[OrderableT]) -> OrderableT:
    """Approximate median of `seq` in constant time.
    Takes the median of three medians of three equally spaced samples each.
    Sequences shorter than `NINTHER_THRESHOLD` use the median of the first, middle and last element.
    There is no guarantee on the rank of the result.
    """

    n = len(seq)
    if n == 0:
        raise ValueError("Cannot choose a pivot from an empty sequence")

    high = n - 1
    if n < NINTHER_THRESHOLD:
        return median3(seq[0], seq[n // 2], seq[high])

    step = n // 9
    m1 = median3(seq[0], seq[step], seq[2 * step])
    m2 = median3(seq[3 * step], seq[4 * step], seq[5 * step])
    m3 = median3(seq[6 * step], seq[7 * step], seq[high])
    return median3(m1, m2, m3)


def group_medians(seq: MutableSequence[OrderableT], cmp_: Optional[Callable] = None) -> List[OrderableT]:
    """Sorts each block of `GROUP_SIZE` consecutive elements of `seq` in place
    and returns the list of block medians.
    The median of the last block with `r` elements is its lower middle element.
    """

    cmp_ = cmp_ or cmp

    n = len(seq)
    medians = []
    for left in range(0, n, GROUP_SIZE):
        right = min(left + GROUP_SIZE, n) - 1
        _insertion(seq, cmp_, left, right, 1)
        medians.append(seq[left + (right - left) // 2])

    return medians


def partition(
    seq: Sequence[OrderableT], pivot: OrderableT
) -> Tuple[List[OrderableT], List[OrderableT], List[OrderableT]]:
    """Three-way partition of `seq` around `pivot`.
    Returns new lists of the elements less than, equal to and greater than `pivot`.
    The order within each group is the input order. `seq` is not modified.
    """

    smaller: List[OrderableT] = []
    equal: List[OrderableT] = []
    greater: List[OrderableT] = []

    for x in seq:
        if x < pivot:
            smaller.append(x)
        elif x == pivot:
            equal.append(x)
        else:
            greater.append(x)

    return smaller, equal, greater
