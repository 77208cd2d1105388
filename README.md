# structkit

Plain-Python implementations of classic data structures, with no
dependencies outside the standard library.

| Module | Class | What it is |
| --- | --- | --- |
| `structkit.hashtable` | `HashTable` | Hash table with chained buckets |
| `structkit.heap_array` | `HeapArrayMax` | Max-heap stored in a list |
| `structkit.heap_list` | `HeapListMax`, `HeapNode` | Max-heap built from linked nodes |
| `structkit.binary_tree` | `BinaryTree`, `TreeNode` | Unbalanced binary search tree |
| `structkit.avl_tree` | `AVLTree`, `AVLNode` | AVL balancing base class |
| `structkit.avl_map` | `AVLMap` | Ordered map built on an AVL tree |
| `structkit.avl_set` | `AVLSet` | Ordered set built on an AVL tree |

## Installation

```
pip install .
```

With the test dependencies:

```
pip install ".[test]"
```

## HashTable

```python
from structkit.hashtable import HashTable

table = HashTable(default_factory=str)
table.insert(10, "10")
table[10] = "ten"
print(table[30])          # "" (a missing key gets a fresh default and is stored)
print(30 in table, len(table))   # True 2
```

- `HashTable(capacity=16, default_factory=None, hash_func=None)` starts with
  `capacity` buckets (at least 1, else `ValueError`). When the number of entries
  goes above 0.75 times the bucket count, the bucket count is doubled.
- The default hash is `int_hash`, which multiplies an integer by 2654435761
  and wraps the result to an unsigned 64-bit value. Keys that are not integers
  go through `hash()` first. You can pass your own `hash_func`.
- `insert(key, value)` and `table[key] = value` add a key or replace its value.
- `value(key)` returns the stored value and raises `KeyError` if the key is missing.
- `table[key]` raises `KeyError` for a missing key unless a `default_factory` was given.
- `remove(key)` does nothing when the key is absent.
- `key in table`, `len(table)`, `capacity()` and `is_empty()` report on the contents.

## Heaps

```python
from structkit.heap_array import HeapArrayMax

heap = HeapArrayMax([10, 20, 15])
heap.insert(16)
print(heap.root())           # 20
print(heap.extract_root())   # 20
print(heap.to_list())        # the list layout after the removal
```

`HeapArrayMax(items=None)` builds the heap from any iterable. It provides
these members:

- `insert(value)` adds a value.
- `extract_root()` removes and returns the largest value.
- `root()` returns the largest value without removing it.
- `remove(index)` deletes the element at that position in the list layout.
- `len(heap)`, `is_empty()`, `clear()` and `to_list()` report on or reset the contents.

`extract_root()` and `root()` raise `IndexError` on an empty heap. `remove()`
also raises `IndexError` for an index that is out of range.

`HeapListMax()` offers the same operations as linked `HeapNode` objects:
`insert`, `extract_root`, `root`, `len()`, `is_empty`, `clear`, and
`pre_order()`. `pre_order()` lists the values as node, then left subtree,
then right subtree.

## BinaryTree

```python
from structkit.binary_tree import BinaryTree

tree = BinaryTree()
for key in (10, 5, 100, 15):
    tree.insert(key, key * 2)
tree.balance()
print(tree.in_order())       # [10, 20, 30, 200]
print(tree.lowest_common_ancestor(5, 15))
```

- `insert(key, value)` keeps every key. A key equal to an existing one goes to its right.
- `insert_at(parent_key, key, value, left)` attaches a new child directly under
  the node that holds `parent_key`. It returns `False` if that node is missing
  or the chosen slot is already taken. It does not check the search-tree ordering.
- `insert_subtree(node)` inserts every node of another tree's subtree, visiting them in pre-order.
- `remove(key)` deletes one node. `remove_subtree(key)` detaches a node together
  with all of its descendants. Both do nothing when the key is absent.
- `find(key)` and `key in tree` test membership. `value(key)` raises `KeyError` when the key is missing.
- `pre_order()`, `in_order()` and `post_order()` return lists of values.
- `balance()` rebuilds the tree to minimal height and keeps the key order.
- `swap_min_max()` exchanges the values of the smallest-key and largest-key nodes.
- `lowest_common_ancestor(key_1, key_2)` returns a key. It raises `ValueError` on an empty tree.
- `root()` returns the root `TreeNode`, or `None` when the tree is empty.

## AVLMap and AVLSet

```python
from structkit.avl_map import AVLMap
from structkit.avl_set import AVLSet

scores = AVLMap(default_factory=str)
scores.insert(30, "thirty")
scores[10] = "ten"
print(scores.in_order())     # ['ten', 'thirty']
print(scores.find(99))       # None

keys = AVLSet([5, 1, 3])
keys.discard(1)
print(keys.in_order())       # [3, 5]
```

`AVLMap(default_factory=None)` provides these members:

- `insert` and `map[key] = value` add a key or replace its value.
- `find(key)` returns the value, or `None` when the key is absent.
- `map[key]` raises `KeyError` for a missing key unless a `default_factory` was given.
- `erase(key)` removes a key and does nothing when it is absent.
- `key in map` tests membership.
- `in_order()`, `pre_order()` and `post_order()` list the values.

`AVLSet(items=None)` provides `add`, `discard`, `in`, and `in_order()`,
`pre_order()` and `post_order()`, which list the keys.

Both classes derive from `AVLTree`. `AVLTree` also gives them `height()`
(0 when empty) and `is_balanced()`.

## What this package does not do

It is a library only. It has no command-line tool and no persistence. None of
the containers is safe to use from several threads at once without your own locking.

## Running the tests

```
pytest
```