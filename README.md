# leetkit

A collection of solved algorithm puzzles written as plain Python functions,
together with a few small data structures and a command that scaffolds a
new task directory. It has no dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `leetkit.structures` | `Heap` (a max-heap ordered by a three-way compare function), `Queue`, `Stack`, `QueueStack` (a stack built on one queue), `StackQueue` (a queue built on two stacks) |
| `leetkit.linked` | `ListNode`, `list_from_values`, `list_length`, `reorder_list`, `get_intersection_node` |
| `leetkit.text` | `roman_to_int`, `is_valid_parentheses`, `generate_parenthesis`, `str_str`, `add_binary`, `simplify_path`, `convert_to_title`, `reverse_vowels`, `clear_digits` |
| `leetkit.words` | `group_anagrams`, `word_break`, `shortest_common_supersequence` |
| `leetkit.numbers` | `BigInt` (decimal digits with `+`, `*` and `left_shift`), `multiply`, `plus_one`, `my_sqrt`, `num_decodings`, `is_happy`, `is_perfect_square` |
| `leetkit.expressions` | `add_operators`, `digit_groupings`, `operator_combinations` |
| `leetkit.grids` | `generate_matrix`, `unique_paths`, `unique_paths_with_obstacles`, `generate_pascal`, `pascal_row`, `minimum_total` |
| `leetkit.arrays` | `search_insert`, `combination_sum`, `permute`, `can_jump`, `contains_nearby_duplicate`, `find_poisoned_duration`, `find_restaurant` |
| `leetkit.caches` | `LRUCache`, `LFUCache` |
| `leetkit.trees` | `TreeNode`, `inorder_traversal`, `preorder_traversal`, `postorder_traversal`, `generate_trees`, `is_symmetric`, `max_depth`, `sorted_list_to_bst`, `flip_equiv` |
| `leetkit.codec` | `Codec`, which turns a binary tree into a level-order string and back |

Empty containers raise `IndexError` on `pop`, `peek` or `dequeue`; invalid
input such as an unknown roman numeral symbol or a non-digit character in a
`BigInt` raises `ValueError`.

Some functions keep the particular behaviour of the solution they come from
rather than the textbook answer; their docstrings say so. For example,
`postorder_traversal` visits each node, then its right subtree, then its
left subtree, and `word_break` splits greedily, taking a word as soon as one
ends.

## Examples

```python
from leetkit.text import roman_to_int, simplify_path
from leetkit.numbers import multiply
from leetkit.caches import LRUCache

roman_to_int("MCMXCIV")                 # 1994
simplify_path("/home//foo/")            # "/home/foo"
multiply("123", "456")                  # "56088"

cache = LRUCache(2)
cache.put(1, 1)
cache.put(2, 2)
cache.get(1)                            # 1
cache.put(3, 3)                         # evicts key 2
cache.get(2)                            # -1
```

Trees round-trip through `Codec`:

```python
from leetkit.codec import Codec

codec = Codec()
tree = codec.deserialize("[1,2,3,null,null,4,5]")
codec.serialize(tree)                   # "[1,2,3,null,null,4,5]"
```

## Starting a new task

The `leetkit-new` command takes a task number between 1 and 99999 and
creates, in the current directory, a directory named after it, such as
`t00042`, holding a module `t00042.py` and a test file `test_t00042.py`,
each with a one-line docstring:

```
leetkit-new 42
```

The command prints its usage and exits with status 1 if it is not given
exactly one argument, if the argument is not a number, if it is out of
range, or if the directory cannot be created (for example because it
already exists). The same is available from Python as
`leetkit.scaffold.create_task(number, directory)`, which raises
`ValueError` for an out-of-range number.