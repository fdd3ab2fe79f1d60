"""Contest-style counting puzzles: classes, fruit, bills, records, grades and leaderboards."""

from __future__ import annotations

from itertools import groupby
from typing import Sequence

_PASSING_GRADE = 38


def angry_professor(k: int, arrivals: Sequence[int]) -> str:
    """Say whether class goes ahead: it needs at least ``k`` students on time (arrival <= 0)."""
    on_time = sum(1 for arrival in arrivals if arrival <= 0)
    return "class not cancelled" if on_time >= k else "class cancelled"


def count_apples_and_oranges(
    s: int,
    t: int,
    a: int,
    b: int,
    apples: Sequence[int],
    oranges: Sequence[int],
) -> tuple[int, int]:
    """Count the apples and oranges that land on the house, the range ``s..t`` inclusive.

    Apples fall from the tree at ``a`` and oranges from the tree at ``b``; each
    distance is added to its tree's position.
    """
    apple_count = sum(1 for d in apples if s <= a + d <= t)
    orange_count = sum(1 for d in oranges if s <= b + d <= t)
    return apple_count, orange_count


def bon_appetit(bill: Sequence[int], k: int, b: int) -> str:
    """Check Anna's charge ``b`` for the bill without item ``k``.

    Returns ``"Bon Appetite"`` when the charge is fair, otherwise the amount
    she was overcharged, as a string.
    """
    total = sum(cost for index, cost in enumerate(bill) if index != k)
    share = int(total / 2)
    if b == share:
        return "Bon Appetite"
    return str(b - share)


def birthday(squares: Sequence[int], d: int, m: int) -> int:
    """Count the runs of ``m`` consecutive squares whose values sum to ``d``."""
    return sum(
        1 for start in range(len(squares) - m + 1) if sum(squares[start : start + m]) == d
    )


def birthday_cake_candles(heights: Sequence[int]) -> int:
    """Count the candles of the tallest height (heights are taken as at least zero)."""
    tallest = max([0, *heights])
    return sum(1 for height in heights if height == tallest)


def breaking_records(scores: Sequence[int]) -> list[int]:
    """Return how often the season's best and worst scores were broken, best first."""
    if not scores:
        raise ValueError("breaking_records needs at least one score")
    lowest = highest = scores[0]
    lowest_breaks = highest_breaks = 0
    for score in scores[1:]:
        if score < lowest:
            lowest = score
            lowest_breaks += 1
        elif score > highest:
            highest = score
            highest_breaks += 1
    return [highest_breaks, lowest_breaks]


def compare_triplets(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """Award a point to whoever rates higher in each category; return [alice, bob]."""
    alice = sum(1 for x, y in zip(a, b) if x > y)
    bob = sum(1 for x, y in zip(a, b) if x < y)
    return [alice, bob]


def _round_grade(grade: int) -> int:
    if grade < _PASSING_GRADE:
        return grade
    next_multiple = (grade // 5 + 1) * 5
    return next_multiple if next_multiple - grade < 3 else grade


def grading_students(grades: Sequence[int]) -> list[int]:
    """Round passing grades up to the next multiple of 5 when it is less than 3 away."""
    return [_round_grade(grade) for grade in grades]


def climbing_leaderboard(ranked: Sequence[int], player: Sequence[int]) -> list[int]:
    """Return the player's dense rank after each of their ascending scores.

    ``ranked`` is the leaderboard in descending order; equal neighbouring
    scores share a rank.
    """
    board = [score for score, _ in groupby(ranked)]
    position = len(board) - 1
    ranks: list[int] = []
    for score in player:
        while position >= 0 and score >= board[position]:
            position -= 1
        ranks.append(position + 2)
    return ranks


def hurdle_race(height: Sequence[int], k: int) -> int:
    """Return the doses needed to clear the hurdles with a natural jump of ``k``.

    Only the hurdles before the last one are taken into account.
    """
    if len(height) < 2:
        raise ValueError("hurdle_race needs at least two hurdles")
    tallest = max(0, *height[:-1])
    return max(0, tallest - k)