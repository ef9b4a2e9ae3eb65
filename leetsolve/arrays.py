"""Assorted array problems: trading, voting, products, jumping and sorting."""

from collections.abc import Sequence
from itertools import accumulate
from math import inf
from operator import mul

__all__ = [
    "max_profit",
    "max_profit_unlimited",
    "majority_element",
    "product_except_self",
    "can_jump",
    "sort_by_bits",
]


def max_profit(prices: Sequence[int]) -> int:
    """Return the best profit from one buy followed by one sell.

    Raises IndexError when ``prices`` is empty.
    """
    lowest = prices[0]
    best = 0
    for price in prices[1:]:
        best = max(best, price - lowest)
        lowest = min(lowest, price)
    return best


def max_profit_unlimited(prices: Sequence[int]) -> int:
    """Return the best profit when any number of transactions is allowed."""
    holding, cash = -inf, 0
    for price in prices:
        holding, cash = max(holding, cash - price), max(cash, holding + price)
    return cash


def majority_element(nums: Sequence[int]) -> int:
    """Return the value that occurs more than half the time (Boyer-Moore vote)."""
    candidate = 0
    votes = 0
    for value in nums:
        if votes == 0:
            candidate = value
            votes = 1
        elif value == candidate:
            votes += 1
        else:
            votes -= 1
    return candidate


def product_except_self(nums: Sequence[int]) -> list[int]:
    """Return, for each position, the product of all other values."""
    if not nums:
        return []
    prefixes = accumulate(nums[:-1], mul, initial=1)
    suffixes = list(accumulate(reversed(nums[1:]), mul, initial=1))
    return [left * right for left, right in zip(prefixes, reversed(suffixes))]


def can_jump(nums: Sequence[int]) -> bool:
    """Tell whether the last index is reachable, each value being a maximum jump.

    Raises IndexError when ``nums`` is empty.
    """
    reach = nums[0]
    last = len(nums) - 1
    for index, step in enumerate(nums):
        if reach < index:
            return False
        if reach >= last:
            return True
        reach = max(reach, index + step)
    return False


def _ones(value: int) -> int:
    return (value & 0xFFFFFFFF).bit_count()


def sort_by_bits(arr: Sequence[int]) -> list[int]:
    """Sort by the number of set bits in the 32-bit form, then by value."""
    return sorted(arr, key=lambda value: (_ones(value), value))