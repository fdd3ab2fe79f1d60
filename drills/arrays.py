"""Array puzzles: k-sums, rotations, subarrays, permutations, rain water and more."""

from __future__ import annotations

from collections import Counter
from functools import reduce
from operator import xor
from typing import Sequence


def four_sum(nums: Sequence[int], target: int) -> list[list[int]]:
    """Return every distinct sorted quadruplet of ``nums`` that sums to ``target``."""
    values = sorted(nums)
    n = len(values)
    found: list[list[int]] = []
    for i in range(n):
        if i > 0 and values[i] == values[i - 1]:
            continue
        for j in range(i + 1, n):
            if j != i + 1 and values[j] == values[j - 1]:
                continue
            k, l = j + 1, n - 1
            while k < l:
                total = values[i] + values[j] + values[k] + values[l]
                if total == target:
                    found.append([values[i], values[j], values[k], values[l]])
                    k += 1
                    l -= 1
                    while k < l and values[k] == values[k - 1]:
                        k += 1
                    while k < l and values[l] == values[l + 1]:
                        l -= 1
                elif total < target:
                    k += 1
                else:
                    l -= 1
    return found


def rotate_right(values: Sequence[int], k: int) -> list[int]:
    """Return ``values`` rotated ``k`` places to the right."""
    items = list(values)
    if not items:
        return items
    k %= len(items)
    if k == 0:
        return items
    return items[-k:] + items[:-k]


def circular_array_rotation(a: Sequence[int], k: int, queries: Sequence[int]) -> list[int]:
    """Rotate ``a`` right by ``k`` and return the elements at the queried indices."""
    rotated = rotate_right(a, k)
    return [rotated[q] for q in queries]


def max_area(height: Sequence[int]) -> int:
    """Return the most water two of the given lines can hold between them."""
    left, right = 0, len(height) - 1
    best = 0
    while left < right:
        best = max(best, min(height[left], height[right]) * (right - left))
        if height[left] < height[right]:
            left += 1
        else:
            right -= 1
    return best


def max_subarray(nums: Sequence[int]) -> int:
    """Return the largest sum of a non-empty contiguous subarray."""
    if not nums:
        raise ValueError("max_subarray needs at least one number")
    ending_here = best = nums[0]
    for num in nums[1:]:
        ending_here = max(num, ending_here + num)
        best = max(best, ending_here)
    return best


def next_permutation(nums: Sequence[int]) -> list[int]:
    """Return the next lexicographic permutation, wrapping round to the smallest."""
    items = list(nums)
    i = len(items) - 2
    while i >= 0 and items[i] >= items[i + 1]:
        i -= 1
    if i >= 0:
        j = len(items) - 1
        while items[j] <= items[i]:
            j -= 1
        items[i], items[j] = items[j], items[i]
    items[i + 1 :] = reversed(items[i + 1 :])
    return items


def remove_element(nums: Sequence[int], val: int) -> list[int]:
    """Return the elements of ``nums`` that differ from ``val``, in order."""
    return [num for num in nums if num != val]


def single_number(nums: Sequence[int]) -> int:
    """Return the one value that appears an odd number of times when all others pair up."""
    return reduce(xor, nums, 0)


def trap(heights: Sequence[int]) -> int:
    """Return how much rain water the elevation map holds."""
    left, right = 0, len(heights) - 1
    max_left = max_right = 0
    water = 0
    while left <= right:
        if heights[left] <= heights[right]:
            if heights[left] >= max_left:
                max_left = heights[left]
            else:
                water += max_left - heights[left]
            left += 1
        else:
            if heights[right] >= max_right:
                max_right = heights[right]
            else:
                water += max_right - heights[right]
            right -= 1
    return water


def plus_one(digits: Sequence[int]) -> list[int]:
    """Add one to a number given as a list of decimal digits."""
    result = list(digits)
    for index in reversed(range(len(result))):
        if result[index] == 9:
            result[index] = 0
        else:
            result[index] += 1
            return result
    return [1, *result]


def longest_consecutive(values: Sequence[int]) -> int:
    """Return the length of the longest run of consecutive integers among ``values``."""
    best = 0
    run = 0
    previous: int | None = None
    for value in sorted(set(values)):
        run = run + 1 if previous is not None and value == previous + 1 else 1
        best = max(best, run)
        previous = value
    return best


def majority_element(nums: Sequence[int]) -> list[int]:
    """Return the values found by a two-candidate vote that occur more than n/3 times."""
    candidate1 = candidate2 = 0
    count1 = count2 = 0
    for num in nums:
        if num == candidate1:
            count1 += 1
        elif num == candidate2:
            count2 += 1
        elif count1 == 0:
            candidate1 = num
        elif count2 == 0:
            candidate2 = num
        else:
            count1 -= 1
            count2 -= 1

    tally = Counter(nums)
    count1 = tally[candidate1]
    count2 = tally[candidate2] if candidate2 != candidate1 else 0
    threshold = len(nums) // 3
    result = []
    if count1 > threshold:
        result.append(candidate1)
    if count2 > threshold:
        result.append(candidate2)
    return result


def max_profit(prices: Sequence[int]) -> int:
    """Return the best profit from any number of buy-then-sell trades on distinct days."""
    return sum(max(0, later - earlier) for earlier, later in zip(prices, prices[1:]))


def _hours_needed(piles: Sequence[int], speed: int) -> int:
    return sum(-(-pile // speed) for pile in piles)


def min_eating_speed(piles: Sequence[int], h: int) -> int:
    """Return the slowest whole eating speed that finishes all piles within ``h`` hours."""
    low, high = 1, max(piles, default=0)
    while low <= high:
        mid = (low + high) // 2
        if _hours_needed(piles, mid) <= h:
            high = mid - 1
        else:
            low = mid + 1
    return low