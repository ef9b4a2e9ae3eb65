"""Algorithms that rearrange a list in place."""

__all__ = [
    "remove_duplicates",
    "remove_element",
    "remove_duplicates_keep_two",
    "move_zeroes",
    "merge",
    "rotate",
]


def remove_duplicates(nums: list[int]) -> int:
    """Move the distinct values of sorted ``nums`` to the front; return their count."""
    write = 0
    for value in nums:
        if write == 0 or nums[write - 1] != value:
            nums[write] = value
            write += 1
    return write


def remove_element(nums: list[int], val: int) -> int:
    """Move every value other than ``val`` to the front; return how many there are."""
    write = 0
    for value in nums:
        if value != val:
            nums[write] = value
            write += 1
    return write


def remove_duplicates_keep_two(nums: list[int]) -> int:
    """Keep at most two of each value of sorted ``nums`` at the front; return the count."""
    write = 0
    for value in nums:
        if write < 2 or nums[write - 2] != value:
            nums[write] = value
            write += 1
    return write


def move_zeroes(nums: list[int]) -> None:
    """Move all zeros to the end, keeping the order of the other values."""
    nonzero = [value for value in nums if value != 0]
    nums[:] = nonzero + [0] * (len(nums) - len(nonzero))


def merge(nums1: list[int], m: int, nums2: list[int], n: int) -> None:
    """Merge the first ``n`` values of ``nums2`` into ``nums1``, whose first ``m`` are used.

    Raises ValueError when ``nums1`` is not exactly ``m + n`` long.
    """
    if len(nums1) != m + n:
        raise ValueError("nums1 must have room for exactly m + n values")
    i, j = m - 1, n - 1
    for write in range(len(nums1) - 1, -1, -1):
        if j < 0 or (i >= 0 and nums1[i] >= nums2[j]):
            nums1[write] = nums1[i]
            i -= 1
        else:
            nums1[write] = nums2[j]
            j -= 1


def rotate(nums: list[int], k: int) -> None:
    """Rotate ``nums`` right by ``k`` steps.

    Raises ZeroDivisionError when ``nums`` is empty.
    """
    k %= len(nums)
    nums[:] = nums[len(nums) - k :] + nums[: len(nums) - k]