"""
Arena store for nestlist.

Holds every ArenaList of a session in one append-only sequence. Lists are
addressed by their position, which never changes once allocated.
"""

from typing import Iterator, List, Set

from nestlist.models.arena import ArenaList


class ArenaStore:
    """
    Flat, append-only collection of ArenaList records.

    Nothing is ever removed: deleting an item only clears its reference, so
    the list it pointed at stays in place, unreachable from the root.
    """

    def __init__(self) -> None:
        self.lists: List[ArenaList] = []

    def allocate(self, name: str) -> int:
        """Append a new empty list and return its index.

        The new list has no parent; callers set ``parent`` right after.

        Args:
            name: Display name of the new list.

        Returns:
            Arena index of the new list.
        """
        self.lists.append(ArenaList(name=name))
        return len(self.lists) - 1

    def get(self, index: int) -> ArenaList:
        """Get the list stored at an index."""
        return self.lists[index]

    def __getitem__(self, index: int) -> ArenaList:
        return self.lists[index]

    def __len__(self) -> int:
        return len(self.lists)

    def __iter__(self) -> Iterator[ArenaList]:
        return iter(self.lists)

    def reachable_indices(self, root: int = 0) -> Set[int]:
        """Collect the indices reachable from ``root`` through item references.

        Lists missing from the result are orphans.
        """
        if not self.lists:
            return set()

        seen: Set[int] = set()
        pending = [root]
        while pending:
            index = pending.pop()
            if index in seen:
                continue
            seen.add(index)
            for item in self.lists[index].items:
                if item.list_index is not None:
                    pending.append(item.list_index)
        return seen
