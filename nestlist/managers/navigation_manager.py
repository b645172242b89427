"""
NavigationManager for moving through and editing an arena of lists.

Tracks which list is on screen and how deep it is, and applies the
descend/ascend/add/delete operations while keeping the arena consistent.
Disallowed operations are silent no-ops: they return False and leave the
state unchanged.
"""

from typing import Optional

from nestlist.managers.arena_store import ArenaStore
from nestlist.models.arena import ArenaItem, ArenaList
from nestlist.models.options import Options, PageOptions


class NavigationManager:
    """
    Manages navigation and mutation of an ArenaStore.

    Handles:
    - Selection movement within the current list
    - Descending into a selected item's nested list and back
    - Adding items to the selected item's nested list
    - Deleting the selected item
    - Read-only queries used for rendering
    """

    def __init__(
        self,
        store: ArenaStore,
        options: Optional[Options] = None,
        root: int = 0,
    ) -> None:
        """
        Initialize NavigationManager.

        Args:
            store: Arena holding every list of the session.
            options: Per-depth page options. Defaults to all operations enabled.
            root: Arena index of the root list.
        """
        self.store = store
        self.options = options if options is not None else Options()
        self.root = root
        self.current = root
        self.depth = 0

    # =========================================================================
    # Queries
    # =========================================================================

    @property
    def page_options(self) -> PageOptions:
        """Get the options active at the current depth."""
        return self.options.for_depth(self.depth)

    @property
    def current_list(self) -> ArenaList:
        """Get the list currently shown."""
        return self.store[self.current]

    @property
    def selected_index(self) -> Optional[int]:
        """Get the selection index of the current list."""
        return self.current_list.selected

    @property
    def selected_item(self) -> Optional[ArenaItem]:
        """Get the selected item of the current list."""
        return self.current_list.get_selected_item()

    @property
    def selected_sublist(self) -> Optional[ArenaList]:
        """Get the nested list of the selected item, if it has one."""
        item = self.selected_item
        if item is None or item.list_index is None:
            return None
        return self.store[item.list_index]

    @property
    def can_go_back(self) -> bool:
        """Whether the current list has a parent to return to."""
        return self.current_list.parent is not None

    # =========================================================================
    # Selection
    # =========================================================================

    def move_selection(self, direction: int) -> bool:
        """Move the selection, wrapping past either end.

        Args:
            direction: +1 to advance, -1 to retreat.

        Returns:
            True if the selection changed.
        """
        return self.current_list.step_selected(direction)

    def clear_selection(self) -> bool:
        """Clear the selection of the current list."""
        if self.current_list.selected is None:
            return False
        self.current_list.selected = None
        return True

    # =========================================================================
    # Navigation
    # =========================================================================

    def descend(self) -> bool:
        """Open the selected item's nested list.

        Returns:
            True if the view moved down a level.
        """
        if self.page_options.disable_edit:
            return False

        item = self.selected_item
        if item is None or item.list_index is None:
            return False

        self.current = item.list_index
        self.depth += 1

        child = self.current_list
        if child.items and child.selected is None:
            child.selected = 0
        return True

    def ascend(self) -> bool:
        """Return to the parent list.

        If the item selected in the parent now points at an empty list, its
        reference is cleared so it reads as having no nested list.

        Returns:
            True if the view moved up a level.
        """
        parent = self.current_list.parent
        if parent is None:
            return False

        self.current = parent
        self.depth -= 1

        sublist = self.selected_sublist
        if sublist is not None and not sublist.items:
            self.current_list.set_selected_item_list_index(None)
        return True

    # =========================================================================
    # Mutation
    # =========================================================================

    def add_item(self, name: str, id: str) -> bool:
        """Append an item to the selected item's nested list.

        The nested list is created on demand, named after the selected item,
        when the item does not have one yet.

        Args:
            name: Name of the new item.
            id: Identifier of the new item.

        Returns:
            True if an item was added.
        """
        if self.page_options.disable_add:
            return False

        selected = self.selected_item
        if selected is None:
            return False

        if selected.list_index is None:
            index = self.store.allocate(selected.name)
            self.store[index].parent = self.current
            selected.list_index = index

        self.store[selected.list_index].items.append(ArenaItem(id=id, name=name))
        return True

    def delete_selected(self) -> bool:
        """Delete the selected item from the current list.

        Any nested list the item owned is orphaned. When the list becomes
        empty the view returns to the parent list.

        Returns:
            True if an item was deleted.
        """
        if self.page_options.disable_delete:
            return False

        current = self.current_list
        if current.selected is None:
            return False

        current.set_selected_item_list_index(None)
        current.remove_selected_item()

        if not current.items:
            self.ascend()
        return True
