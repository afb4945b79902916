from random import randint, randrange, sample, uniform
from typing import List, Sequence


def randomized(seq: Sequence) -> Sequence:
    """Like `random.shuffle`, but not in-place."""

    return sample(seq, len(seq))


def randints(size: int, low: int, high: int) -> List[int]:
    """Returns a list of `size` (noncryptographic) random integers from `[low, high]`."""

    return [randint(low, high) for _ in range(size)]  # nosec


def randfloats(size: int, low: float = 0.0, high: float = 1.0) -> List[float]:
    """Returns a list of `size` (noncryptographic) random floats from `[low, high]`."""

    return [uniform(low, high) for _ in range(size)]  # nosec


def randlength(max_length: int) -> int:
    """Returns a random length from `[1, max_length]`, biased towards short lengths."""

    return randrange(1, randrange(1, max_length + 1) + 1)  # nosec
