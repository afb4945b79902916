"""Order statistics: find the element of rank `k` in a sequence without sorting it.

Ranks are 0-based, ie. `select(seq, k) == sorted(seq)[k]` for `0 <= k < len(seq)`.
The input sequence is never modified, all work is done on a private copy.

Two strategies are available:

- `Strategy.heuristic`: quickselect with the ninther as pivot. Expected linear time.
    Adversarial inputs can degrade it to quadratic time with a linear number of narrowing steps.
    The narrowing is done in a loop, so this cannot overflow the stack.
- `Strategy.deterministic`: quickselect with the median of medians as pivot. Worst-case linear time.
"""

import logging
from enum import Enum
from math import log2
from operator import index
from typing import Dict, List, MutableSequence, Sequence, Union

from .algorithms import group_medians, ninther, partition
from .exceptions import EmptyIterable, assert_choice_map, assert_index
from .typing import OrderableT

logger = logging.getLogger(__name__)

DEPTH_WARNING_FACTOR = 4


class Strategy(Enum):
    heuristic = "heuristic"
    deterministic = "deterministic"


class PivotSelector:
    """Chooses a pivot value from a non-empty working sequence.
    The pivot must be an element of the sequence, otherwise selection cannot make progress.
    Implementations may reorder `seq`, but must not change its contents.
    """

    def choose_pivot(self, seq: MutableSequence[OrderableT]) -> OrderableT:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}>"


class NintherPivot(PivotSelector):
    def choose_pivot(self, seq: MutableSequence[OrderableT]) -> OrderableT:
        return ninther(seq)


class MedianOfMediansPivot(PivotSelector):

    """Deterministic pivot whose rank lies roughly within `[0.3n, 0.7n]`.
    Sorts each block of 5 elements in place and recursively selects the median of the block medians.
    """

    def choose_pivot(self, seq: MutableSequence[OrderableT]) -> OrderableT:
        if len(seq) == 1:
            return seq[0]

        medians = group_medians(seq)
        return _select(medians, (len(medians) - 1) // 2, self)


_pivot_selectors: Dict[Strategy, PivotSelector] = {
    Strategy.heuristic: NintherPivot(),
    Strategy.deterministic: MedianOfMediansPivot(),
}

StrategyT = Union[Strategy, str, PivotSelector]


def get_pivot_selector(strategy: StrategyT) -> PivotSelector:
    """Returns the pivot selector for `strategy`, which can be a `Strategy`, its name
    or a `PivotSelector` instance.
    """

    if isinstance(strategy, PivotSelector):
        return strategy

    if isinstance(strategy, str):
        strategy = assert_choice_map("strategy", strategy, {s.value: s for s in Strategy})

    return assert_choice_map("strategy", strategy, _pivot_selectors)


def _select(seq: List[OrderableT], k: int, selector: PivotSelector) -> OrderableT:
    # `seq` is owned by the caller of this function and may be reordered. `k` must be valid.

    n = len(seq)
    max_steps = DEPTH_WARNING_FACTOR * log2(n) + 1 if n > 1 else 1
    steps = 0

    while len(seq) > 1:
        length = len(seq)
        pivot = selector.choose_pivot(seq)
        smaller, equal, greater = partition(seq, pivot)
        s = len(smaller)
        e = len(equal)

        logger.debug(
            "%r: length=%d, k=%d, smaller=%d, equal=%d, greater=%d", selector, length, k, s, e, len(greater)
        )

        if k < s:
            seq = smaller
        elif k < s + e:
            return pivot
        else:
            seq = greater
            k -= s + e

        # release the unused groups before the next step
        del smaller, equal, greater

        if len(seq) == length:
            raise ValueError(f"{selector!r} returned pivot {pivot!r} which is not an element of the sequence")

        steps += 1
        if steps == int(max_steps) + 1:
            logger.warning(
                "%r needed more than %d narrowing steps for %d elements. Pivots might be degenerate for this input.",
                selector,
                int(max_steps),
                n,
            )

    assert k == 0
    return seq[0]


def select(
    seq: Sequence[OrderableT], k: int, strategy: StrategyT = Strategy.deterministic
) -> OrderableT:
    """Returns the element of rank `k` (0-based) of `seq`, ie. `sorted(seq)[k]`, in linear time.
    `seq` is not modified. Raises `IndexOutOfRange` if not `0 <= k < len(seq)`.
    `strategy` picks the pivot rule, see `Strategy`.
    """

    k = index(k)
    assert_index(k, len(seq))
    selector = get_pivot_selector(strategy)

    return _select(list(seq), k, selector)


def quick_select(seq: Sequence[OrderableT], k: int) -> OrderableT:
    """Expected linear time selection using the ninther as pivot."""

    return select(seq, k, Strategy.heuristic)


def deterministic_select(seq: Sequence[OrderableT], k: int) -> OrderableT:
    """Worst-case linear time selection using the median of medians as pivot."""

    return select(seq, k, Strategy.deterministic)


def median(seq: Sequence[OrderableT], strategy: StrategyT = Strategy.deterministic) -> OrderableT:
    """Returns the lower median of `seq`."""

    if len(seq) == 0:
        raise EmptyIterable("Cannot compute the median of an empty sequence")

    return select(seq, (len(seq) - 1) // 2, strategy)
