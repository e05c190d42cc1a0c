"""Merge several ascending singly-linked lists."""

import logging

from linkedlists import build_list, merge_k_lists, to_values


def main() -> None:
    """Demonstrate merging sorted lists."""
    logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    inputs = [[1, 4, 5], [1, 3, 4], [2, 6], []]
    print("=== K-Way Merge Example ===\n")
    for values in inputs:
        print(f"  input: {values}")

    merged = merge_k_lists([build_list(values) for values in inputs])
    print(f"\nMerged: {to_values(merged)}")


if __name__ == "__main__":
    main()
