"""
nestlist - navigate and edit a hierarchy of nested lists in the terminal.
"""

from nestlist.core import NestedListUI, Session
from nestlist.models import Item, List, Options, PageOptions

__version__ = "0.1.0"

__all__ = [
    "Item",
    "List",
    "NestedListUI",
    "Options",
    "PageOptions",
    "Session",
]
