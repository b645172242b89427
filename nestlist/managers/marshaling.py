"""
Tree marshaling for nestlist.

Converts the caller's recursive List/Item tree into an ArenaStore on session
start, and rebuilds a recursive tree from the arena on save.
"""

from typing import Dict, Iterator, List as ListType, Tuple

from nestlist.managers.arena_store import ArenaStore
from nestlist.models.arena import ArenaItem
from nestlist.models.tree import Item, List


def flatten(tree: List) -> Tuple[ArenaStore, int]:
    """
    Flatten a caller's tree into a new arena.

    Walks the tree depth-first with an explicit stack, so nesting depth is not
    bounded by the interpreter's recursion limit. Each nested list is
    allocated before the item that references it is stored, so every
    reference is known up front. Every non-empty list starts with its first
    item selected.

    Args:
        tree: Root list supplied by the caller.

    Returns:
        Tuple of (store, root index).
    """
    store = ArenaStore()
    root = store.allocate(tree.name)
    stack: ListType[Tuple[int, Iterator[Item]]] = [(root, iter(tree.items))]

    while stack:
        list_index, pending = stack[-1]
        item = next(pending, None)
        if item is None:
            stack.pop()
            arena_list = store[list_index]
            if arena_list.items:
                arena_list.selected = 0
            continue

        arena_item = ArenaItem(id=item.id, name=item.name)
        if item.sublist is not None:
            child = store.allocate(item.sublist.name)
            store[child].parent = list_index
            arena_item.list_index = child
            stack.append((child, iter(item.sublist.items)))

        store[list_index].items.append(arena_item)

    return store, root


def reconstruct(store: ArenaStore, root: int = 0) -> List:
    """
    Rebuild a caller's tree from an arena.

    Only lists reachable from ``root`` are visited, so orphaned lists left
    behind by deletions never appear in the result. Lists are built children
    first from a depth-first ordering, without recursion.

    Args:
        store: Arena to read.
        root: Index of the root list.

    Returns:
        A new recursive List.
    """
    order = []
    stack = [root]
    while stack:
        list_index = stack.pop()
        order.append(list_index)
        for arena_item in store[list_index].items:
            if arena_item.list_index is not None:
                stack.append(arena_item.list_index)

    built: Dict[int, List] = {}
    for list_index in reversed(order):
        arena_list = store[list_index]
        items = [
            Item(
                id=arena_item.id,
                name=arena_item.name,
                sublist=None if arena_item.list_index is None else built[arena_item.list_index],
            )
            for arena_item in arena_list.items
        ]
        built[list_index] = List(name=arena_list.name, items=items)

    return built[root]
