"""Problems solved with hash maps and sets."""

from collections import Counter
from collections.abc import Iterable, Sequence

__all__ = ["two_sum", "intersection", "intersect", "contains_nearby_duplicate", "is_happy"]


def two_sum(nums: Iterable[int], target: int) -> list[int]:
    """Return the indices of two values adding up to ``target``, or ``[-1, -1]``."""
    seen: dict[int, int] = {}
    for index, value in enumerate(nums):
        partner = seen.get(target - value)
        if partner is not None:
            return [partner, index]
        seen[value] = index
    return [-1, -1]


def intersection(nums1: Iterable[int], nums2: Iterable[int]) -> list[int]:
    """Return the distinct values present in both inputs, in no particular order."""
    return list(set(nums1) & set(nums2))


def intersect(nums1: Iterable[int], nums2: Iterable[int]) -> list[int]:
    """Return the common values with multiplicity, in the order they occur in ``nums2``."""
    remaining = Counter(nums1)
    result = []
    for value in nums2:
        if remaining[value] > 0:
            result.append(value)
            remaining[value] -= 1
    return result


def contains_nearby_duplicate(nums: Sequence[int], k: int) -> bool:
    """Tell whether two equal values lie at most ``k`` positions apart."""
    if k < 0:
        raise ValueError("k must not be negative")
    window: set[int] = set()
    for index, value in enumerate(nums):
        if index > k:
            window.discard(nums[index - k - 1])
        if value in window:
            return True
        window.add(value)
    return False


def _digit_square_sum(n: int) -> int:
    return sum(int(digit) ** 2 for digit in str(n))


def is_happy(n: int) -> bool:
    """Tell whether repeatedly summing squared digits of ``n`` reaches 1."""
    seen = {0}
    while n != 0:
        n = _digit_square_sum(n)
        if n == 1:
            return True
        if n in seen:
            return False
        seen.add(n)
    return False