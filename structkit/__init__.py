"""Classic data structures: hash table, array and linked heaps, binary search tree, AVL map and set."""

__version__ = "0.1.0"

__all__ = [
    "avl_map",
    "avl_set",
    "avl_tree",
    "binary_tree",
    "hashtable",
    "heap_array",
    "heap_list",
]