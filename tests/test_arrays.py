from collections import Counter
from math import prod

import pytest

from leetsolve.arrays import (
    can_jump,
    majority_element,
    max_profit,
    max_profit_unlimited,
    product_except_self,
    sort_by_bits,
)


def test_max_profit_example():
    assert max_profit([7, 1, 5, 3, 6, 4]) == 5


def test_max_profit_decreasing_is_zero():
    assert max_profit([7, 6, 4, 3, 1]) == 0


def test_max_profit_increasing_spans_all():
    prices = [1, 2, 3, 4, 5]
    assert max_profit(prices) == prices[-1] - prices[0]


def test_max_profit_empty_raises():
    with pytest.raises(IndexError):
        max_profit([])


def test_max_profit_unlimited_example():
    assert max_profit_unlimited([7, 1, 5, 3, 6, 4]) == 7


def test_max_profit_unlimited_increasing():
    prices = [1, 2, 3, 4, 5]
    assert max_profit_unlimited(prices) == prices[-1] - prices[0]


@pytest.mark.parametrize("prices", [[7, 6, 4, 3, 1], [], [5]])
def test_max_profit_unlimited_no_gain(prices):
    assert max_profit_unlimited(prices) == 0


@pytest.mark.parametrize("prices", [[3, 8, 2, 9, 1, 4], [2, 4, 1], [1, 5, 5, 2, 6]])
def test_unlimited_never_worse_than_single(prices):
    assert max_profit_unlimited(prices) >= max_profit(prices)


@pytest.mark.parametrize("nums", [[3, 2, 3], [2, 2, 1, 1, 1, 2, 2], [7], [-4, 5, -4]])
def test_majority_element(nums):
    result = majority_element(nums)
    assert Counter(nums)[result] > len(nums) // 2


@pytest.mark.parametrize("nums", [[1, 2, 3, 4], [2, -3, 5], [7], [-1, -1, 2, 3]])
def test_product_except_self_without_zeros(nums):
    result = product_except_self(nums)
    total = prod(nums)
    assert len(result) == len(nums)
    assert all(value * num == total for value, num in zip(result, nums))


def test_product_except_self_with_one_zero():
    nums = [-1, 1, 0, -3, 3]
    result = product_except_self(nums)
    zero_at = nums.index(0)
    assert result[zero_at] == prod(nums[:zero_at] + nums[zero_at + 1 :])
    assert [value for i, value in enumerate(result) if i != zero_at] == [0] * (len(nums) - 1)


def test_product_except_self_empty():
    assert product_except_self([]) == []


@pytest.mark.parametrize(
    "nums, expected",
    [([2, 3, 1, 1, 4], True), ([3, 2, 1, 0, 4], False), ([0], True), ([0, 1], False)],
)
def test_can_jump(nums, expected):
    assert can_jump(nums) is expected


def test_can_jump_empty_raises():
    with pytest.raises(IndexError):
        can_jump([])


def test_sort_by_bits_example():
    assert sort_by_bits([0, 1, 2, 3, 4, 5, 6, 7, 8]) == [0, 1, 2, 4, 8, 3, 5, 6, 7]


@pytest.mark.parametrize(
    "arr", [[1024, 512, 256, 128, 64, 32, 16, 8, 4, 2, 1], [10, 100, 1000, 10000], [3, 3, 5]]
)
def test_sort_by_bits_ordering(arr):
    result = sort_by_bits(arr)
    assert sorted(result) == sorted(arr)
    keys = [(bin(value).count("1"), value) for value in result]
    assert keys == sorted(keys)


def test_sort_by_bits_negative_uses_32_bit_form():
    assert sort_by_bits([-1, 7, 0]) == [0, 7, -1]