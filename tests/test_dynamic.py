import math

import pytest

from algoshelf.dynamic import (
    can_partition,
    min_cost_climbing_stairs,
    num_trees,
    stairs_charge,
    unique_paths,
    unique_paths_with_obstacles,
    word_break,
)


def test_min_cost_climbing_stairs_skips_the_expensive_steps():
    assert min_cost_climbing_stairs([10, 15, 20]) == 15
    assert min_cost_climbing_stairs([1, 100, 1, 1, 1, 100, 1, 1, 100, 1]) == 6


@pytest.mark.parametrize("cost", [[7], [3, 9], [0, 0, 0]])
def test_min_cost_climbing_stairs_short_or_free(cost):
    assert min_cost_climbing_stairs(cost) == min(cost[:2]) * (len(cost) > 1)


def test_min_cost_climbing_stairs_bounded_by_total():
    cost = [4, 8, 2, 9, 1, 6, 3]
    result = min_cost_climbing_stairs(cost)
    assert 0 <= result <= sum(cost)
    assert result <= sum(cost[::2])
    assert result <= sum(cost[1::2])


def test_min_cost_climbing_stairs_empty_raises():
    with pytest.raises(ValueError):
        min_cost_climbing_stairs([])


def test_can_partition_examples():
    assert can_partition([1, 5, 11, 5]) is True
    assert can_partition([1, 2, 3, 5]) is False


@pytest.mark.parametrize("nums", [[3, 1, 4], [7, 2], [1, 1, 1, 9, 6]])
def test_can_partition_doubled_list_always_splits(nums):
    assert can_partition(nums + nums) is True


@pytest.mark.parametrize("nums", [[1, 2], [2, 4, 7], [5]])
def test_can_partition_odd_sum_or_single(nums):
    assert can_partition(nums) is False


def test_can_partition_negative_raises():
    with pytest.raises(ValueError):
        can_partition([1, -1])


@pytest.mark.parametrize("n", [0, 1, 2])
def test_num_trees_small(n):
    assert num_trees(n) == n


@pytest.mark.parametrize("n", range(3, 12))
def test_num_trees_matches_catalan_closed_form(n):
    assert num_trees(n) == math.comb(2 * n, n) // (n + 1)


def test_unique_paths_example():
    assert unique_paths(3, 7) == 28


@pytest.mark.parametrize("m, n", [(3, 2), (4, 5), (7, 3), (2, 9)])
def test_unique_paths_symmetry_and_recurrence(m, n):
    assert unique_paths(m, n) == unique_paths(n, m)
    assert unique_paths(m, n) == unique_paths(m - 1, n) + unique_paths(m, n - 1)


@pytest.mark.parametrize("n", [1, 4, 10])
def test_unique_paths_single_row_or_column(n):
    assert unique_paths(1, n) == 1
    assert unique_paths(n, 1) == 1


def test_unique_paths_empty_grid_raises():
    with pytest.raises(ValueError):
        unique_paths(0, 3)


def test_unique_paths_with_obstacles_example():
    assert unique_paths_with_obstacles([[0, 0, 0], [0, 1, 0], [0, 0, 0]]) == 2
    assert unique_paths_with_obstacles([[0, 1], [0, 0]]) == 1


@pytest.mark.parametrize("m, n", [(1, 1), (3, 3), (4, 6)])
def test_unique_paths_with_obstacles_clear_grid(m, n):
    grid = [[0] * n for _ in range(m)]
    assert unique_paths_with_obstacles(grid) == unique_paths(m, n)


@pytest.mark.parametrize(
    "grid", [[[1, 0], [0, 0]], [[0, 0], [0, 1]], [[0, 1], [1, 0]]]
)
def test_unique_paths_with_obstacles_blocked(grid):
    assert unique_paths_with_obstacles(grid) == 0


def test_unique_paths_with_obstacles_empty_raises():
    with pytest.raises(ValueError):
        unique_paths_with_obstacles([])


def test_word_break_example():
    assert word_break("leetcode", ["leet", "code"]) is True


@pytest.mark.parametrize(
    "pieces", [["cat", "sand", "dog"], ["apple", "pen", "apple"], ["a"], []]
)
def test_word_break_concatenation_of_words(pieces):
    words = ["cat", "cats", "and", "sand", "dog", "apple", "pen", "a"]
    assert word_break("".join(pieces), words) is True


def test_word_break_unbreakable():
    assert word_break("catsandog", ["cats", "dog", "sand", "and", "cat"]) is False


def test_stairs_charge_first_tiers():
    assert stairs_charge(0) == 0
    assert stairs_charge(6) == 165


@pytest.mark.parametrize(
    "lower, upper, price",
    [(0, 5, 30), (5, 20, 15), (20, 50, 10), (50, 100, 8), (100, 500, 7),
     (500, 1000, 6), (1000, 2000, 5), (2000, 3000, 4), (3000, 4000, 3),
     (4000, 5000, 2), (5000, 6000, 1)],
)
def test_stairs_charge_unit_price_within_tier(lower, upper, price):
    for num in (lower, (lower + upper) // 2, upper - 1):
        assert stairs_charge(num + 1) - stairs_charge(num) == price


def test_stairs_charge_never_decreases():
    charges = [stairs_charge(num) for num in range(0, 7001, 7)]
    assert charges == sorted(charges)
    assert stairs_charge(6001) - stairs_charge(6000) == 1


def test_stairs_charge_negative_raises():
    with pytest.raises(ValueError):
        stairs_charge(-1)