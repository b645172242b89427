"""
Arena records for the navigation engine.

The caller's recursive tree is flattened into ArenaList records addressed by
integer index. An ArenaItem refers to its nested list by index only; the
ArenaStore owns every ArenaList.
"""

from typing import List, Optional

from pydantic import BaseModel, Field


class ArenaItem(BaseModel):
    """An entry of an ArenaList.

    ``list_index`` is a non-owning reference to the arena slot holding this
    item's nested list.
    """

    id: str
    name: str
    list_index: Optional[int] = None


class ArenaList(BaseModel):
    """
    A flat list record.

    Fields:
    - name: Display name
    - items: Entries in display order
    - selected: Index into ``items`` of the highlighted entry
    - parent: Arena index of the list this one was opened from
    """

    name: str
    items: List[ArenaItem] = Field(default_factory=list)
    selected: Optional[int] = None
    parent: Optional[int] = None

    def get_selected_item(self) -> Optional[ArenaItem]:
        """Get the selected item, if any."""
        if self.selected is None:
            return None
        return self.items[self.selected]

    def set_selected_item_list_index(self, list_index: Optional[int]) -> None:
        """Point the selected item at a nested list (or clear its reference)."""
        item = self.get_selected_item()
        if item is not None:
            item.list_index = list_index

    def remove_selected_item(self) -> Optional[ArenaItem]:
        """Remove the selected item and reset the selection.

        The selection moves to the first remaining item, or is cleared when
        the list is now empty.

        Returns:
            The removed item, or None if nothing was selected.
        """
        if self.selected is None:
            return None

        removed = self.items.pop(self.selected)
        self.selected = 0 if self.items else None
        return removed

    def step_selected(self, direction: int) -> bool:
        """Move the selection by ``direction`` positions, wrapping around.

        Selects the first item when nothing is selected.

        Returns:
            False if the list is empty, True otherwise.
        """
        if not self.items:
            return False

        if self.selected is None:
            self.selected = 0
        else:
            self.selected = (self.selected + direction) % len(self.items)
        return True
