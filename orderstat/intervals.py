from typing import Iterable, List, Tuple

from .typing import OrderableT


def interval_union(intervals: Iterable[Tuple[OrderableT, OrderableT]]) -> List[Tuple[OrderableT, OrderableT]]:
    """Returns the union of the closed intervals `intervals` as a sorted list of disjoint intervals.
    Touching intervals are merged.
    eg. [(1, 2), (1, 4), (2, 3), (6, 6), (9, 12)] -> [(1, 4), (6, 6), (9, 12)]
    """

    endpoints = []
    for start, end in intervals:
        if start > end:
            raise ValueError(f"Interval start {start!r} is larger than its end {end!r}")
        endpoints.append((start, 0))  # starts sort before ends at the same position
        endpoints.append((end, 1))

    endpoints.sort()

    result = []
    depth = 0
    for pos, is_end in endpoints:
        if is_end:
            depth -= 1
            if depth == 0:
                result.append((first, pos))
        else:
            if depth == 0:
                first = pos
            depth += 1

    return result
