"""Number puzzles: palindromes, roots, sequences, calendars and simple games."""

from __future__ import annotations

from functools import reduce
from math import gcd
from typing import Sequence

_KANGAROO_JUMPS = 10_000


def is_palindrome_number(n: int) -> bool:
    """Say whether the decimal digits of ``n`` read the same both ways."""
    if n < 0 or (n % 10 == 0 and n != 0):
        return False
    reverse_half = 0
    while n > reverse_half:
        reverse_half = reverse_half * 10 + n % 10
        n //= 10
    return n == reverse_half or n == reverse_half // 10


def integer_sqrt(x: int) -> int:
    """Return the largest integer whose square does not exceed ``x``."""
    if x < 0:
        raise ValueError("square root of a negative number")
    if x in (0, 1):
        return x
    left, right = 0, x
    result = 0
    while left <= right:
        mid = (left + right) // 2
        if mid <= x // mid:
            result = mid
            left = mid + 1
        else:
            right = mid - 1
    return result


def climb_stairs(n: int) -> int:
    """Count the ways to climb ``n`` stairs taking one or two steps at a time."""
    if n == 0:
        return 0
    previous, current = 1, 1
    for _ in range(2, n + 1):
        previous, current = current, previous + current
    return current


def binomial(l: int, k: int) -> int:
    """Return the binomial coefficient ``l`` choose ``k``."""
    k = min(k, l - k)
    result = 1
    for i in range(k):
        result = result * (l - i) // (i + 1)
    return result


def pascal_triangle(n: int) -> list[list[int]]:
    """Return the first ``n`` rows of Pascal's triangle."""
    return [[binomial(row, col) for col in range(row + 1)] for row in range(n)]


def utopian_tree(n: int) -> int:
    """Return the tree's height after ``n`` growth cycles, starting from 1."""
    height = 1
    for cycle in range(1, n + 1):
        if cycle % 2 == 1:
            height *= 2
        else:
            height += 1
    return height


def viral_advertising(n: int) -> int:
    """Return the cumulative number of likes after ``n`` days."""
    shared = 5
    cumulative = 0
    for _ in range(n):
        likes = shared // 2
        cumulative += likes
        shared = likes * 3
    return cumulative


def find_digits(n: int) -> int:
    """Count the digits of ``n`` that divide ``n`` evenly."""
    return sum(1 for digit in map(int, str(n)) if digit and n % digit == 0) if n > 0 else 0


def reverse_digits(day: int) -> int:
    """Return ``day`` with its decimal digits reversed."""
    reversed_number = 0
    while day > 0:
        reversed_number = reversed_number * 10 + day % 10
        day //= 10
    return reversed_number


def beautiful_days(i: int, j: int, k: int) -> int:
    """Count days in ``i..j`` whose difference from their reverse divides by ``k``."""
    return sum(1 for day in range(i, j + 1) if abs(day - reverse_digits(day)) % k == 0)


def day_of_programmer(year: int) -> str:
    """Return the date of the 256th day of ``year`` in the Russian calendar."""
    if year == 1918:
        return "26.09.1918"
    if year < 1918:
        leap = year % 4 == 0
    else:
        leap = year % 400 == 0 or (year % 4 == 0 and year % 100 != 0)
    return f"{'12' if leap else '13'}.09.{year}"


def get_total_x(a: Sequence[int], b: Sequence[int]) -> int:
    """Count integers that are multiples of all of ``a`` and factors of all of ``b``."""
    if not a or not b:
        raise ValueError("both sets need at least one element")
    lcm_a = reduce(lambda x, y: x // gcd(x, y) * y, a)
    gcd_b = reduce(gcd, b)
    return sum(1 for multiple in range(lcm_a, gcd_b + 1, lcm_a) if gcd_b % multiple == 0)


def save_the_prisoner(n: int, m: int, s: int) -> int:
    """Return the chair of the prisoner who gets the last of ``m`` sweets."""
    last = (s + m - 1) % n
    return last or n


def kangaroo(x1: int, v1: int, x2: int, v2: int) -> str:
    """Say whether the two kangaroos land on the same spot after the same jump."""
    meets = any(x1 + v1 * i == x2 + v2 * i for i in range(1, _KANGAROO_JUMPS + 1))
    return "YES" if meets else "NO"


def page_count(n: int, p: int) -> int:
    """Return the fewest page turns to reach page ``p`` of an ``n``-page book."""
    from_front = p // 2
    from_back = n // 2 - from_front
    return min(from_back, from_front)


def library_fine(d1: int, d2: int, m1: int, m2: int, y1: int, y2: int) -> int:
    """Return the fine for a book returned on d1/m1/y1 and due on d2/m2/y2."""
    if (y1, m1, d1) <= (y2, m2, d2):
        return 0
    if y1 == y2 and m1 == m2:
        return 15 * (d1 - d2)
    if y1 == y2:
        return 500 * (m1 - m2)
    return 10000


def cat_and_mouse(x: int, y: int, z: int) -> str:
    """Say which cat reaches the mouse first, or whether the mouse escapes."""
    cat_a = abs(x - z)
    cat_b = abs(y - z)
    if cat_a > cat_b:
        return "Cat B"
    if cat_a < cat_b:
        return "Cat A"
    return "Mouse C"