"""Command-line demonstrations of the sorting, search and tree algorithms."""

from __future__ import annotations

import argparse
import sys
from typing import Callable, Sequence

from dsalgo.avl_tree import AVLTree
from dsalgo.binary_tree import BinarySearchTree
from dsalgo.kmp import kmp_search, longest_proper_prefix
from dsalgo.sorting import heap_sort, insertion_sort, quicksort

_AVL_KEYS = [10, 20, 30, 40, 50, 25, 60]
_TREE_VALUES = [10, 2, 5, 17, 1]
_HEAP_DATA = [9, 4, 3, 8, 10, 2, 5]
_INSERTION_DATA = [5, 8, 3, 2, 1]
_QUICKSORT_DATA = [3, 7, 4, 8, 23, 45, 2]
_LPS_PATTERN = "kokoko"
_KMP_TEXT = "jawdkokoamndwkokosqhduwkoshkosskokookokokokosnuss"
_KMP_PATTERN = "kokos"


def _run_avl_tree(args: argparse.Namespace) -> int:
    tree = AVLTree(args.keys)
    print(" ".join(str(key) for key in tree.preorder()))
    return 0


def _run_binary_tree(args: argparse.Namespace) -> int:
    root, *rest = args.values
    tree = BinarySearchTree(root)
    for value in rest:
        tree.insert(value)
    for value in tree.preorder():
        print(value)
    return 0


def _run_heap_sort(args: argparse.Namespace) -> int:
    print(" ".join(str(item) for item in heap_sort(list(args.data))))
    return 0


def _run_insertion_sort(args: argparse.Namespace) -> int:
    print("".join(str(item) for item in insertion_sort(list(args.data))))
    return 0


def _run_quicksort(args: argparse.Namespace) -> int:
    print("".join(f"{item}," for item in quicksort(list(args.data))))
    return 0


def _run_lps(args: argparse.Namespace) -> int:
    print("".join(str(length) for length in longest_proper_prefix(args.pattern)))
    return 0


def _run_kmp(args: argparse.Namespace) -> int:
    for index in kmp_search(args.text, args.pattern):
        print(f"Found pattern at index {index}")
    return 0


def _add_command(
    subparsers: argparse._SubParsersAction,
    name: str,
    help_text: str,
    handler: Callable[[argparse.Namespace], int],
) -> argparse.ArgumentParser:
    parser = subparsers.add_parser(name, help=help_text)
    parser.set_defaults(handler=handler)
    return parser


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dsalgo", description="Run a data-structure or algorithm demonstration."
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    avl = _add_command(subparsers, "avl-tree", "insert keys into an AVL tree, print pre-order", _run_avl_tree)
    avl.add_argument("keys", nargs="*", type=int, default=_AVL_KEYS)

    bst = _add_command(
        subparsers, "binary-tree", "build a binary search tree, print pre-order", _run_binary_tree
    )
    bst.add_argument("values", nargs="*", type=int, default=_TREE_VALUES, help="root first")

    heap = _add_command(subparsers, "heap-sort", "sort integers with heap sort", _run_heap_sort)
    heap.add_argument("data", nargs="*", type=int, default=_HEAP_DATA)

    insertion = _add_command(
        subparsers, "insertion-sort", "sort integers with insertion sort", _run_insertion_sort
    )
    insertion.add_argument("data", nargs="*", type=int, default=_INSERTION_DATA)

    quick = _add_command(subparsers, "quicksort", "sort integers with quicksort", _run_quicksort)
    quick.add_argument("data", nargs="*", type=int, default=_QUICKSORT_DATA)

    lps = _add_command(subparsers, "lps", "print the longest proper prefix table", _run_lps)
    lps.add_argument("pattern", nargs="?", default=_LPS_PATTERN)

    kmp = _add_command(subparsers, "kmp", "find a pattern in a text", _run_kmp)
    kmp.add_argument("text", nargs="?", default=_KMP_TEXT)
    kmp.add_argument("pattern", nargs="?", default=_KMP_PATTERN)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Parse *argv*, run the chosen demonstration and return an exit status."""
    args = _build_parser().parse_args(argv)
    try:
        return args.handler(args)
    except ValueError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())