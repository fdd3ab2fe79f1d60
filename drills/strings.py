"""String puzzles: binary addition, anagrams, brackets, Roman numerals and more."""

from __future__ import annotations

from collections import defaultdict
from itertools import zip_longest
from math import gcd
from typing import Iterable

_ROMAN_VALUES = {
    "I": 1,
    "V": 5,
    "X": 10,
    "L": 50,
    "C": 100,
    "D": 500,
    "M": 1000,
}

_CLOSING_TO_OPENING = {")": "(", "}": "{", "]": "["}


def _binary_digit(char: str) -> int:
    if char not in "01" or len(char) != 1:
        raise ValueError(f"not a binary digit: {char!r}")
    return int(char)


def add_binary(a: str, b: str) -> str:
    """Add two binary numbers given as strings and return their sum as a string."""
    digits: list[str] = []
    carry = 0
    for x, y in zip_longest(reversed(a), reversed(b), fillvalue="0"):
        total = carry + _binary_digit(x) + _binary_digit(y)
        digits.append(str(total % 2))
        carry = total // 2
    if carry:
        digits.append("1")
    return "".join(reversed(digits))


def append_and_delete(s: str, t: str, k: int) -> str:
    """Say whether ``s`` can become ``t`` in exactly ``k`` append/delete-last operations."""
    common = 0
    for x, y in zip(s, t):
        if x != y:
            break
        common += 1
    needed = len(s) + len(t) - 2 * common
    if k >= len(s) + len(t) or (k >= needed and (k - needed) % 2 == 0):
        return "Yes"
    return "No"


def gcd_of_strings(s1: str, s2: str) -> str:
    """Return the longest string that divides both inputs, or an empty string."""
    if s1 + s2 != s2 + s1:
        return ""
    return s1[: gcd(len(s1), len(s2))]


def group_anagrams(strs: Iterable[str]) -> list[list[str]]:
    """Group words that are anagrams; groups are ordered by their sorted letters."""
    groups: defaultdict[str, list[str]] = defaultdict(list)
    for word in strs:
        groups["".join(sorted(word))].append(word)
    return [groups[key] for key in sorted(groups)]


def longest_common_prefix(strs: list[str]) -> str:
    """Return the longest prefix shared by every string."""
    prefix: list[str] = []
    for chars in zip(*strs):
        if any(char != chars[0] for char in chars):
            break
        prefix.append(chars[0])
    return "".join(prefix)


def length_of_last_word(s: str) -> int:
    """Return the length of the last space-separated word."""
    return len(s.rstrip(" ").split(" ")[-1])


def merge_strings(s1: str, s2: str) -> str:
    """Interleave the characters of two strings, starting with the first."""
    return "".join(x + y for x, y in zip_longest(s1, s2, fillvalue=""))


def is_alnum_palindrome(s: str) -> bool:
    """Say whether the ASCII letters and digits of ``s`` read the same both ways, ignoring case."""
    chars = [c.lower() for c in s if c.isascii() and c.isalnum()]
    return chars == chars[::-1]


def roman_to_int(symbols: str) -> int:
    """Convert a Roman numeral to an integer; unknown symbols count as zero."""
    total = 0
    previous = 0
    for symbol in symbols:
        value = _ROMAN_VALUES.get(symbol, 0)
        total += value
        if value > previous:
            total -= 2 * previous
        previous = value
    return total


def time_conversion(s: str) -> str:
    """Convert ``hh:mm:ssAM`` or ``hh:mm:ssPM`` to 24-hour ``hh:mm:ss``."""
    hours = int(s[0:2])
    minutes = int(s[3:5])
    seconds = int(s[6:8])
    if s[8:10] == "AM":
        if hours == 12:
            hours = 0
    elif hours != 12:
        hours += 12
    return f"{hours:02d}:{minutes:02d}:{seconds:02d}"


def is_valid_parentheses(s: str) -> bool:
    """Say whether the brackets in ``s`` are balanced; other characters are ignored."""
    stack: list[str] = []
    for char in s:
        if char in "({[":
            stack.append(char)
        elif char in _CLOSING_TO_OPENING:
            if not stack or stack.pop() != _CLOSING_TO_OPENING[char]:
                return False
    return not stack


def counting_valleys(steps: int, path: str) -> int:
    """Count valleys walked: 'U' climbs, any other step descends."""
    level = 0
    valleys = 0
    for step in path:
        level += 1 if step == "U" else -1
        if level == 0 and step == "U":
            valleys += 1
    return valleys


def designer_pdf_viewer(heights: list[int], word: str) -> int:
    """Return the highlighted area of ``word`` given the heights of 'a' to 'z'."""
    tallest = 0
    for char in word:
        if not "a" <= char <= "z":
            raise ValueError(f"not a lowercase letter: {char!r}")
        tallest = max(tallest, heights[ord(char) - ord("a")])
    return tallest * len(word)