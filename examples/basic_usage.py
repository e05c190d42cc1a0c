"""Basic usage example for the doubly-linked list."""

from linkedlists import DoublyLinkedList


def main() -> None:
    """Demonstrate positional list operations."""
    playlist = DoublyLinkedList[str]()

    print("=== Doubly-Linked List Example ===\n")

    for track in ("intro", "verse", "chorus", "outro"):
        playlist.append(track)
    print(f"Playlist: {list(playlist)} (size {playlist.size})")

    node = playlist.at(2)
    print(f"Track at index 2: {node.value if node else None}")
    print(f"Track at index 9: {playlist.at(9)}\n")

    # Replace the track at index 1
    playlist.insert_at(1, "bridge")
    print(f"After insert_at(1, 'bridge'): {list(playlist)}")

    first = playlist.delete_first()
    last = playlist.delete_last()
    print(f"Removed first: {first.value if first else None}")
    print(f"Removed last: {last.value if last else None}")
    print(f"Remaining: {list(playlist)} (size {playlist.size})")
    print(f"Backwards: {list(reversed(playlist))}")


if __name__ == "__main__":
    main()
