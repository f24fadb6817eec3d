# algoworks

A collection of classic algorithms and data structures in plain Python.
It has no runtime dependencies and needs Python 3.10 or later.

## Installation

```
pip install algoworks
```

To run the test suite, install the test extra and run pytest:

```
pip install "algoworks[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `algoworks.sorting` | `bubble_sort`, `bubble_sort_optimized`, `bucket_sort`, `count_sort`, `count_sort_stable`, `count_sort_offset`, `heap_sort`, `insert_sort`, `merge_sort`, `quick_sort`, `radix_sort`, `selection_sort`, `shell_sort` |
| `algoworks.searching` | `binary_search`, `first_binary_search`, `last_binary_search`, `find_median_sorted_arrays` |
| `algoworks.text` | `is_valid`, `longest_palindrome`, `longest_palindrome_expand`, `min_window`, `str_str`, `reverse_str` |
| `algoworks.numbers` | `water_volume`, `fibonacci`, `fibonacci_iterative`, `max_sub_array`, `dp_max_sub_array`, `reverse_int`, `my_atoi` |
| `algoworks.arithmetic` | `add_number`, `add_number_formula`, `add_two_numbers`, `NumArray`, `PrefixSumArray`, `number_of_matches`, `number_of_matches_simulated`, `two_sum`, `three_sum` |
| `algoworks.primes` | `generate`, `prime_filter`, `sieve`, `is_prime` |
| `algoworks.heaps` | `MaxHeap`, `MinHeap` |
| `algoworks.topk` | `top_k` |
| `algoworks.stacks` | `ArrayStack`, `MinStack`, `StackFullError` |
| `algoworks.queues` | `ArrayQueue`, `CircularQueue`, `QueueFullError` |
| `algoworks.lru` | `LRUCache` |
| `algoworks.linked_lists` | `ListNode`, `LinkedList`, `DoubleNode`, `DoubleLinkedList`, `build_cycle`, `josephus`, `swap_pairs`, `remove_adjacent_duplicates` |
| `algoworks.binary_tree` | `BinaryTreeNode`, `BinaryTree`, `max_depth` |
| `algoworks.skip_list` | `SkipNode`, `SkipList` |
| `algoworks.trie` | `TrieNode`, `Trie` |
| `algoworks.grids` | `SparseEntry`, `create_array`, `save_sparse_array`, `recover_sparse_array`, `triangles`, `triangle_row`, `z_convert` |
| `algoworks.printing` | `multiplication_table`, `pyramid` |

## Examples

Sorting and searching:

```python
from algoworks.sorting import quick_sort, merge_sort
from algoworks.searching import binary_search, find_median_sorted_arrays

quick_sort([1, 34, 6, 7, 10])              # [1, 6, 7, 10, 34]
data = [4, 2, 9, 1]
merge_sort(data, 0, len(data))             # [1, 2, 4, 9]
binary_search([1, 6, 7, 10, 34], 10)       # 3
find_median_sorted_arrays([1, 3], [2])     # 2.0
```

Several sorts work in place and also return the list they were given;
`quick_sort`, `heap_sort`, `count_sort_stable` and `count_sort_offset`
return a new list. `merge_sort` sorts the half-open range `[begin, end)`.
`count_sort`, `count_sort_stable`, `bucket_sort` and `radix_sort` accept
only non-negative integers and raise `ValueError` otherwise;
`bucket_sort` and `radix_sort` also raise `ValueError` on an empty list.

Text:

```python
from algoworks.text import is_valid, longest_palindrome, str_str

is_valid("{[]}")               # True
longest_palindrome("cbbd")     # "bb"
str_str("aa", "a")             # 0
```

Numbers:

```python
from algoworks.numbers import water_volume, reverse_int, my_atoi

water_volume([0, 1, 0, 2, 1, 0, 1, 3, 2, 1, 2, 1])  # 6
reverse_int(123)                                    # 321
reverse_int(2147483648)                             # 0, the result overflows 32 bits
my_atoi("   -42")                                   # -42
```

An LRU cache:

```python
from algoworks.lru import LRUCache

cache = LRUCache(2)
cache.set("a", 1)
cache.set("b", 2)
cache.get("a")        # touches "a"
cache.set("c", 3)     # evicts "b", the least recently used key
"b" in cache          # False
```

Bounded containers raise when they are full or empty: stacks raise
`StackFullError`, queues raise `QueueFullError`, heaps raise `IndexError`
when full, and all of them raise `IndexError` when taking from an empty one.

```python
from algoworks.stacks import MinStack

stack = MinStack(10)
for item in (3, 1, 2):
    stack.push(item)
stack.min()   # 1
```

A trie maps non-empty string keys to values:

```python
from algoworks.trie import Trie

trie = Trie()
trie.add("dog", 1)
trie.add("doggy", 2)
"dog" in trie         # True
trie.remove("dog")    # 1; removing an absent key raises KeyError
```

`SkipList` takes an optional random source with a `randrange` method,
such as `random.Random(seed)`, to make its level choices repeatable.

Primes, generated lazily:

```python
from itertools import islice
from algoworks.primes import sieve, is_prime

list(islice(sieve(), 5))  # [2, 3, 5, 7, 11]
is_prime(47)              # True
```

Printing helpers write to standard output:

```python
from algoworks.printing import pyramid

pyramid(3)
#   *
#  ***
# *****
```

## What it does not do

This is a library only: it installs no command-line program, and nothing
is stored on disk. All structures live in memory for the life of the
objects that hold them.