"""
Per-depth page options for nestlist.

Each nesting depth can carry its own PageOptions record. Depths beyond the
configured records fall back to a default record with every operation
enabled.
"""

from typing import List

from pydantic import BaseModel, ConfigDict, Field

from nestlist.constants import (
    DEFAULT_BODY_BOX_TITLE,
    DEFAULT_LIST_BOX_TITLE,
    DEFAULT_MENU_BOX_TITLE,
    DEFAULT_SAVE_COMMAND_DESCRIPTION,
    DEFAULT_SELECTED_BOX_TITLE,
)


class PageOptions(BaseModel):
    """Options for one nesting depth.

    The ``disable_*`` flags gate engine operations; ``disable_edit`` gates
    descending into a selected item's nested list. The remaining fields are
    display labels.
    """

    model_config = ConfigDict(extra="forbid")

    title: str = ""
    menu_box_title: str = DEFAULT_MENU_BOX_TITLE
    selected_box_title: str = DEFAULT_SELECTED_BOX_TITLE
    list_box_title: str = DEFAULT_LIST_BOX_TITLE
    body_box_title: str = DEFAULT_BODY_BOX_TITLE
    save_command_description: str = DEFAULT_SAVE_COMMAND_DESCRIPTION
    disable_add: bool = False
    disable_edit: bool = False
    disable_delete: bool = False
    disable_save: bool = False


class Options(BaseModel):
    """Ordered per-depth page options, indexed by nesting depth."""

    page_options: List[PageOptions] = Field(default_factory=list)

    def for_depth(self, depth: int) -> PageOptions:
        """Get the options for a depth, synthesizing a default past the end."""
        if depth < len(self.page_options):
            return self.page_options[depth]
        return PageOptions(title=str(depth))
