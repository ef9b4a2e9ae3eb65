"""Binary-search based lookups over sorted sequences."""

from bisect import bisect_right
from collections.abc import Sequence

__all__ = ["search", "search_insert", "next_greatest_letter", "count_negatives"]


def search(nums: Sequence[int], target: int) -> int:
    """Return the index of ``target`` in the ascending ``nums``, or -1 if absent."""
    lo, hi = 0, len(nums)
    while lo < hi:
        mid = (lo + hi) // 2
        value = nums[mid]
        if value < target:
            lo = mid + 1
        elif value > target:
            hi = mid
        else:
            return mid
    return -1


def search_insert(nums: Sequence[int], target: int) -> int:
    """Return the index of ``target`` in ``nums`` or where it would be inserted.

    Raises IndexError when ``nums`` is empty.
    """
    lo, hi = 0, len(nums)
    mid = 0
    while lo < hi:
        mid = (lo + hi) // 2
        if nums[mid] < target:
            lo = mid + 1
        elif nums[mid] > target:
            hi = mid
        else:
            break
    return mid if nums[mid] >= target else mid + 1


def next_greatest_letter(letters: Sequence[str], target: str) -> str:
    """Return the smallest letter greater than ``target``, wrapping to the first.

    Raises IndexError when ``letters`` is empty.
    """
    if not letters:
        raise IndexError("letters must not be empty")
    index = bisect_right(letters, target)
    return letters[index] if index < len(letters) else letters[0]


def count_negatives(grid: Sequence[Sequence[int]]) -> int:
    """Count negative numbers in a grid sorted non-increasingly by row and column.

    Raises IndexError when ``grid`` is empty.
    """
    width = len(grid[0])
    boundary = width
    total = 0
    for row in grid:
        lo, hi = 0, boundary
        while lo < hi:
            mid = (lo + hi) // 2
            if row[mid] >= 0:
                lo = mid + 1
            else:
                hi = mid
                boundary = hi
        total += width - boundary
    return total