"""Elementary array problems: concatenation, interleaving, counting and gaps."""

from collections.abc import Sequence
from itertools import accumulate

__all__ = [
    "get_concatenation",
    "shuffle",
    "find_max_consecutive_ones",
    "find_error_nums",
    "smaller_numbers_than_current",
    "find_disappeared_numbers",
]

_MAX_VALUE = 100


def get_concatenation(nums: Sequence[int]) -> list[int]:
    """Return ``nums`` followed by a second copy of itself."""
    return [*nums, *nums]


def shuffle(nums: Sequence[int], n: int) -> list[int]:
    """Interleave ``nums[:n]`` with ``nums[n:2n]`` as ``x1, y1, x2, y2, ...``."""
    if len(nums) < 2 * n:
        raise IndexError("nums must hold at least 2 * n values")
    return [value for pair in zip(nums[:n], nums[n : 2 * n]) for value in pair]


def find_max_consecutive_ones(nums: Sequence[int]) -> int:
    """Return the length of the longest run of 1s."""
    best = 0
    current = 0
    for value in nums:
        if value == 1:
            current += 1
            best = max(best, current)
        else:
            current = 0
    return best


def find_error_nums(nums: Sequence[int]) -> list[int]:
    """Return ``[duplicated, missing]`` for a permutation of 1..n with one value replaced."""
    seen: set[int] = set()
    duplicate = 0
    for value in nums:
        if value in seen:
            duplicate = value
        else:
            seen.add(value)
    total = len(nums) * (len(nums) + 1) // 2
    return [duplicate, total - sum(seen)]


def smaller_numbers_than_current(nums: Sequence[int]) -> list[int]:
    """For each value, count the values in ``nums`` strictly smaller than it.

    Values must lie in 0..100; ValueError is raised otherwise.
    """
    counts = [0] * (_MAX_VALUE + 1)
    for value in nums:
        if not 0 <= value <= _MAX_VALUE:
            raise ValueError(f"value {value} is outside 0..{_MAX_VALUE}")
        counts[value] += 1
    at_most = list(accumulate(counts))
    return [at_most[value - 1] if value > 0 else 0 for value in nums]


def find_disappeared_numbers(nums: Sequence[int]) -> list[int]:
    """Return, in ascending order, the numbers of 1..n that do not occur in ``nums``."""
    present = set(nums)
    return [value for value in range(1, len(nums) + 1) if value not in present]