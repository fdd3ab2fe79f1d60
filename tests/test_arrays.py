from collections import Counter
from itertools import permutations

import pytest

from drills.arrays import (
    circular_array_rotation,
    four_sum,
    longest_consecutive,
    majority_element,
    max_area,
    max_profit,
    max_subarray,
    min_eating_speed,
    next_permutation,
    plus_one,
    remove_element,
    rotate_right,
    single_number,
    trap,
)


def test_four_sum_known_example():
    assert four_sum([1, 0, -1, 0, -2, 2], 0) == [
        [-2, -1, 1, 2],
        [-2, 0, 0, 2],
        [-1, 0, 0, 1],
    ]


@pytest.mark.parametrize(
    "nums, target",
    [([1, 0, -1, 0, -2, 2], 0), ([5, 3, 1, 8, -4, 2, 2, 6, 0], 10), ([4, 4, 4, 1, 1, 3], 10)],
)
def test_four_sum_results_are_sorted_unique_and_sum_to_target(nums, target):
    result = four_sum(nums, target)
    assert all(sum(quad) == target for quad in result)
    assert all(quad == sorted(quad) for quad in result)
    assert len({tuple(quad) for quad in result}) == len(result)
    assert all(not Counter(quad) - Counter(nums) for quad in result)


def test_four_sum_all_equal():
    assert four_sum([2, 2, 2, 2, 2], 8) == [[2, 2, 2, 2]]


def test_four_sum_too_short():
    assert four_sum([1, 2, 3], 6) == []


def test_rotate_right_example():
    assert rotate_right([1, 2, 3, 4, 5, 6, 7], 2) == [6, 7, 1, 2, 3, 4, 5]


@pytest.mark.parametrize("k", [0, 7, 14])
def test_rotate_right_full_turn_is_identity(k):
    values = [1, 2, 3, 4, 5, 6, 7]
    assert rotate_right(values, k) == values


def test_rotate_right_round_trip():
    values = [9, 8, 7, 6, 5]
    for k in range(len(values)):
        assert rotate_right(rotate_right(values, k), len(values) - k) == values


def test_rotate_right_empty():
    assert rotate_right([], 3) == []


def test_circular_array_rotation_matches_rotation():
    a = [3, 4, 5, 10, 11]
    k = 3
    assert circular_array_rotation(a, k, range(len(a))) == rotate_right(a, k)


def test_circular_array_rotation_selected_queries():
    a = [3, 4, 5]
    rotated = rotate_right(a, 2)
    assert circular_array_rotation(a, 2, [2, 0]) == [rotated[2], rotated[0]]


def test_max_area_equal_pair():
    assert max_area([5, 5]) == 5


@pytest.mark.parametrize("height", [[], [7]])
def test_max_area_too_few_lines(height):
    assert max_area(height) == 0


def test_max_area_at_least_outer_container():
    height = [1, 8, 6, 2, 5, 4, 8, 3, 7]
    assert max_area(height) >= min(height[0], height[-1]) * (len(height) - 1)


def test_max_subarray_all_negative():
    nums = [-3, -1, -7]
    assert max_subarray(nums) == max(nums)


def test_max_subarray_all_positive():
    nums = [2, 5, 1, 4]
    assert max_subarray(nums) == sum(nums)


def test_max_subarray_empty():
    with pytest.raises(ValueError):
        max_subarray([])


def test_next_permutation_example():
    assert next_permutation([1, 2, 3]) == [1, 3, 2]


def test_next_permutation_wraps_around():
    assert next_permutation([3, 2, 1]) == [1, 2, 3]


def test_next_permutation_walks_all_permutations():
    current = [1, 2, 3, 4]
    seen = []
    for _ in permutations(current):
        seen.append(tuple(current))
        current = next_permutation(current)
    assert seen == list(permutations([1, 2, 3, 4]))
    assert current == [1, 2, 3, 4]


def test_next_permutation_leaves_input_alone():
    nums = [1, 3, 2]
    next_permutation(nums)
    assert nums == [1, 3, 2]


def test_remove_element_example():
    assert remove_element([3, 2, 2, 3], 2) == [3, 3]


def test_remove_element_keeps_others_in_order():
    nums = [0, 1, 2, 2, 3, 0, 4, 2]
    result = remove_element(nums, 2)
    assert 2 not in result
    assert len(result) == len(nums) - nums.count(2)


def test_single_number_example():
    assert single_number([4, 2, 1, 2, 1]) == 4


def test_single_number_alone():
    assert single_number([7]) == 7


def test_trap_empty():
    assert trap([]) == 0


def test_trap_monotone_holds_nothing():
    assert trap([1, 2, 3, 4, 5]) == 0
    assert trap([5, 4, 3, 2, 1]) == 0


def test_trap_single_pit():
    assert trap([3, 0, 3]) == 3


@pytest.mark.parametrize("digits", [[9], [1, 2, 3], [9, 9, 9], [4, 3, 2, 1], [0]])
def test_plus_one_adds_one(digits):
    result = plus_one(digits)
    assert int("".join(map(str, result))) == int("".join(map(str, digits))) + 1


def test_longest_consecutive_example():
    values = [10, 4, 1, 8, 2, 6, 9, 3, 7, 5]
    assert longest_consecutive(values) == len(values)


def test_longest_consecutive_empty():
    assert longest_consecutive([]) == 0


def test_longest_consecutive_ignores_duplicates():
    values = [1, 2, 2, 3]
    assert longest_consecutive(values) == len(set(values))


def test_majority_element_single():
    assert majority_element([3, 2, 3]) == [3]


def test_majority_element_two():
    assert majority_element([1, 1, 2, 2]) == [1, 2]


@pytest.mark.parametrize("nums", [[1, 2, 3], [2, 2, 1, 1, 1, 2, 2], [0, 0, 5, 5, 5, 7]])
def test_majority_element_results_exceed_a_third(nums):
    for value in majority_element(nums):
        assert nums.count(value) > len(nums) // 3


def test_max_profit_decreasing():
    assert max_profit([9, 7, 4, 1]) == 0


def test_max_profit_increasing():
    prices = [1, 3, 4, 10]
    assert max_profit(prices) == prices[-1] - prices[0]


@pytest.mark.parametrize("prices", [[], [5]])
def test_max_profit_no_trades(prices):
    assert max_profit(prices) == 0


@pytest.mark.parametrize("piles, h", [([7, 15, 6, 3], 8), ([3, 6, 7, 11], 8), ([30, 11, 23, 4, 20], 6)])
def test_min_eating_speed_is_smallest_sufficient(piles, h):
    speed = min_eating_speed(piles, h)
    assert sum(-(-p // speed) for p in piles) <= h
    if speed > 1:
        assert sum(-(-p // (speed - 1)) for p in piles) > h


def test_min_eating_speed_one_hour_per_pile():
    piles = [7, 15, 6, 3]
    assert min_eating_speed(piles, len(piles)) == max(piles)


def test_min_eating_speed_plenty_of_time():
    piles = [7, 15, 6, 3]
    assert min_eating_speed(piles, sum(piles)) == 1