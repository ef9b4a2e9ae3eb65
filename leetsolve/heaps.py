"""Problems solved with binary heaps."""

import heapq
from collections.abc import Iterable, Sequence

__all__ = ["last_stone_weight", "k_smallest_pairs"]


def last_stone_weight(stones: Iterable[int]) -> int:
    """Smash the two heaviest stones together until one is left; return its weight.

    Raises IndexError when there are no stones.
    """
    heap = [-stone for stone in stones]
    if not heap:
        raise IndexError("there must be at least one stone")
    heapq.heapify(heap)
    while len(heap) > 1:
        heaviest = -heapq.heappop(heap)
        second = -heapq.heappop(heap)
        heapq.heappush(heap, second - heaviest)
    return -heap[0]


def k_smallest_pairs(nums1: Sequence[int], nums2: Sequence[int], k: int) -> list[list[int]]:
    """Return the ``k`` pairs ``[a, b]`` with the smallest sums from two ascending lists.

    Raises IndexError when fewer than ``k`` pairs exist.
    """
    if k <= 0:
        return []
    if not nums2:
        raise IndexError("nums2 must not be empty")
    heap = [(nums1[i] + nums2[0], i, 0) for i in range(min(len(nums1), k))]
    heapq.heapify(heap)
    pairs: list[list[int]] = []
    for _ in range(k):
        _, i, j = heapq.heappop(heap)
        pairs.append([nums1[i], nums2[j]])
        if j + 1 < len(nums2):
            heapq.heappush(heap, (nums1[i] + nums2[j + 1], i, j + 1))
    return pairs