"""Classic data structures and algorithms: sorting, string search, trees and linked lists."""

__version__ = "0.1.0"

__all__ = [
    "avl_tree",
    "binary_tree",
    "cli",
    "doubly_linked_list",
    "kmp",
    "singly_linked_list",
    "sorting",
]