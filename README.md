# algoshelf

A collection of classic algorithms written in plain Python with no
third-party dependencies. It is meant for study and for reuse in small
programs.

## Installation

```
pip install .
```

## Modules

- `algoshelf.binarytree`: the `TreeNode` dataclass (`val`, `left`, `right`),
  `from_level_order` and `to_level_order` to convert between trees and
  level-order lists, the traversals `preorder`, `inorder` and `postorder`,
  and `binary_tree_paths`, which writes each root-to-leaf path as `"1->2->5"`.
- `algoshelf.bst`: `minimum_difference`, `search_bst`, `trim_bst`,
  `is_valid_bst`.
- `algoshelf.levelorder`: `NaryNode` (`val`, `children`), `NextNode`
  (`val`, `left`, `right`, `next`), `nary_from_level_order`,
  `nary_level_order`, `next_tree_from_level_order` and `connect`, which links
  each node to its right neighbour on the same level.
- `algoshelf.treealgos`: `merge_trees`, `min_depth`, `is_same_tree`,
  `has_path_sum`, `path_sum`, `sum_of_left_leaves`, `is_symmetric`.
- `algoshelf.linkedlist`: the `ListNode` dataclass (`val`, `next`), which can
  be iterated for its values and prints them separated by spaces;
  `from_values`, `merge_k_lists`, `merge_two_lists`, `delete_duplicates`,
  `remove_elements`, `remove_nth_from_end`, `reverse_between`,
  `reverse_list`, `reverse_k_group`, `sort_list`, `swap_pairs`.
- `algoshelf.integers`: `hamming_weight`, `is_palindrome_number`,
  `reverse_bits` (both bit functions take unsigned 32-bit values) and
  `reverse_integer`, which returns 0 when the result leaves the signed
  32-bit range.
- `algoshelf.searching`: `search_rotated`, `search_insert`,
  `single_non_duplicate`, `single_number`, `two_sum` (a pair of indices or
  `None`), `my_sqrt`.
- `algoshelf.arrays`: `merge_sorted`, `remove_duplicates`, `remove_element`
  (these three work in place), `sorted_squares`, `plus_one`, `sort_array`
  (an in-place randomised quicksort), `min_subarray_len`.
- `algoshelf.matrix`: `spiral_order`, `generate_matrix`, `num_islands`
  (on a grid of `"1"` and `"0"` strings), `generate_pascal`,
  `get_pascal_row`.
- `algoshelf.stacks`: `MinStack` (`push`, `pop`, `top`, `minimum`),
  `MonotonicQueue` (`push`, `pop`, `front`), `max_sliding_window`,
  `daily_temperatures`, `is_valid_parentheses`,
  `remove_adjacent_duplicates`, `top_k_frequent`.
- `algoshelf.rainwater`: `trap` for a row of bars and `trap_rain_water` for
  a two-dimensional height map.
- `algoshelf.dynamic`: `min_cost_climbing_stairs`, `can_partition`,
  `num_trees`, `unique_paths`, `unique_paths_with_obstacles`, `word_break`,
  and `stairs_charge`, a tiered charge whose unit price falls from 30 to 1
  as usage grows.
- `algoshelf.backtracking`: `solve_n_queens`, `partition_palindromes`,
  `permute`, `permute_unique`, `restore_ip_addresses`, `subsets`,
  `word_break_sentences`.
- `algoshelf.textalgos`: `min_window`, `multiply` and `add_strings` on
  decimal digit strings, `find_repeated_dna_sequences`,
  `repeated_substring_pattern`, `reverse_str`, `reverse_string` (in place),
  `reverse_words`, `roman_to_int`, `my_atoi`, `is_anagram`, `is_palindrome`.

## Example

```python
from algoshelf.binarytree import from_level_order, inorder
from algoshelf.treealgos import path_sum
from algoshelf.linkedlist import from_values, reverse_k_group
from algoshelf.textalgos import multiply

root = from_level_order([5, 4, 8, 11, None, 13, 4, 7, 2, None, None, 5, 1])
print(path_sum(root, 22))        # [[5, 4, 11, 2], [5, 8, 4, 5]]
print(inorder(from_level_order([2, 1, 3])))  # [1, 2, 3]

head = reverse_k_group(from_values([1, 2, 3, 4, 5]), 2)
print(list(head))                # [2, 1, 4, 3, 5]

print(multiply("123", "456"))    # 56088
```

Trees are built from level-order lists in which `None` marks a missing
child. Linked lists are built with `from_values` and can be iterated.
Inputs a function cannot work with, such as an empty stack, a position
outside a list or a string that is not made of digits, raise `ValueError`
or, for the stack and queue classes, `IndexError`.

## What it does not do

The package is a library only: it has no command-line program, and it
reads and writes no files.

## Running the tests

```
pip install .[test]
pytest
```