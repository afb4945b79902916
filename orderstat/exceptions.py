from typing import Dict, Optional, TypeVar

T = TypeVar("T")
U = TypeVar("U")


class IndexOutOfRange(IndexError):
    """Raised when a rank or element index lies outside of the valid domain `[0, length)`.
    The index is never clamped.
    """

    def __init__(self, k: int, length: int, msg: Optional[str] = None) -> None:
        if msg is None:
            msg = f"index {k} out of range for length {length}"
        IndexError.__init__(self, msg)
        self.k = k
        self.length = length


class EmptyIterable(ValueError):
    """Raised when Iterable is passed which doesn't yield any values,
    and thus not resulted can be computed.
    """


def assert_choice_map(name: str, value: T, choices: Dict[T, U]) -> U:
    try:
        return choices[value]
    except KeyError:
        raise ValueError("{} must be one of {}".format(name, ", ".join(map(str, choices.keys())))) from None


def assert_index(k: int, length: int) -> None:
    """Raises `IndexOutOfRange` unless `0 <= k < length`."""

    if not 0 <= k < length:
        raise IndexOutOfRange(k, length)
