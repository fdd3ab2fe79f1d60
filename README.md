# drills

A library of compact, tested solutions to well-known programming exercises:
array manipulation, string puzzles, number tricks, grid problems, trees and
linked lists. Each function takes plain Python values and returns a result;
nothing is read from or printed to the terminal.

It needs only the standard library.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `drills.strings`: `add_binary`, `append_and_delete`, `gcd_of_strings`,
  `group_anagrams`, `longest_common_prefix`, `length_of_last_word`,
  `merge_strings`, `is_alnum_palindrome`, `roman_to_int`, `time_conversion`,
  `is_valid_parentheses`, `counting_valleys`, `designer_pdf_viewer`
- `drills.trees`: `TreeNode`, `ListNode`, `sorted_array_to_bst`, `in_order`,
  `build_linked_list`, `loop_here`, `has_loop`, `list_length`, `remove_loop`,
  `max_mex_sum`
- `drills.numbers`: `is_palindrome_number`, `integer_sqrt`, `climb_stairs`,
  `binomial`, `pascal_triangle`, `utopian_tree`, `viral_advertising`,
  `find_digits`, `reverse_digits`, `beautiful_days`, `day_of_programmer`,
  `get_total_x`, `save_the_prisoner`, `kangaroo`, `page_count`,
  `library_fine`, `cat_and_mouse`
- `drills.grid`: `spiral_order`, `is_valid_sudoku`, `forming_magic_square`,
  `diagonal_difference`, `staircase`
- `drills.arrays`: `four_sum`, `rotate_right`, `circular_array_rotation`,
  `max_area`, `max_subarray`, `next_permutation`, `remove_element`,
  `single_number`, `trap`, `plus_one`, `longest_consecutive`,
  `majority_element`, `max_profit`, `min_eating_speed`
- `drills.contests`: `angry_professor`, `count_apples_and_oranges`,
  `bon_appetit`, `birthday`, `birthday_cake_candles`, `breaking_records`,
  `compare_triplets`, `grading_students`, `climbing_leaderboard`,
  `hurdle_race`
- `drills.counting`: `divisible_sum_pairs`, `electronics_shop`,
  `jumping_on_clouds`, `kids_with_candies`, `migratory_birds`, `min_max_sum`,
  `picking_numbers`, `plus_minus`, `sock_merchant`, `permutation_equation`,
  `a_very_big_sum`

## Examples

```python
from drills.strings import add_binary, gcd_of_strings, roman_to_int
from drills.arrays import four_sum, trap
from drills.grid import spiral_order

add_binary("1010", "1011")                 # "10101"
gcd_of_strings("ABCABC", "ABC")            # "ABC"
roman_to_int("MCMXCIV")                    # 1994
trap([0, 1, 0, 2, 1, 0, 1, 3, 2, 1, 2, 1]) # 6
spiral_order([[1, 2, 3], [4, 5, 6]])       # [1, 2, 3, 6, 5, 4]
four_sum([1, 0, -1, 0, -2, 2], 0)
# [[-2, -1, 1, 2], [-2, 0, 0, 2], [-1, 0, 0, 1]]
```

Trees and linked lists:

```python
from drills.trees import (
    build_linked_list, has_loop, in_order, list_length,
    loop_here, remove_loop, sorted_array_to_bst,
)

list(in_order(sorted_array_to_bst([1, 2, 3])))  # [1, 2, 3]

head, tail = build_linked_list([1, 2, 3])
loop_here(head, tail, 2)   # tail now points back to the second node
has_loop(head)             # True
remove_loop(head)
has_loop(head), list_length(head)  # (False, 3)
```

Some functions return text or several values rather than one number:
`staircase` returns the drawing as a string, `min_max_sum` and `plus_minus`
return tuples, `count_apples_and_oranges` returns `(apples, oranges)`, and
`bon_appetit` returns `"Bon Appetite"` or the overcharged amount as a string.

Functions that would have no answer for their input, such as an empty list
where a maximum is needed, raise `ValueError`.

## What it does not do

There is no command-line program: the package installs no commands, and it
does not prompt for input or print results. Every exercise is used by
calling its function from Python.