"""
Data models for nestlist.

Import models explicitly from their modules:
    from nestlist.models.tree import List, Item
    from nestlist.models.arena import ArenaList, ArenaItem
    from nestlist.models.options import PageOptions, Options
"""

from .arena import ArenaItem, ArenaList
from .options import Options, PageOptions
from .tree import Item, List

List.model_rebuild()
Item.model_rebuild()
