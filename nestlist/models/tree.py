"""
Caller-facing tree models for nestlist.

A List owns its Items and an Item optionally owns a nested List. Callers
build this shape before a session and receive it back from the save
handler. No arena indices appear here.
"""

from typing import Iterator, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


class List(BaseModel):
    """A named, ordered list of items."""

    model_config = ConfigDict(populate_by_name=True)

    name: str
    items: list["Item"] = Field(default_factory=list)

    def iter_outline(self, depth: int = 0) -> Iterator[Tuple[int, "Item"]]:
        """Yield (depth, item) pairs in depth-first display order."""
        stack = [iter(self.items)]
        while stack:
            item = next(stack[-1], None)
            if item is None:
                stack.pop()
                continue
            yield depth + len(stack) - 1, item
            if item.sublist is not None:
                stack.append(iter(item.sublist.items))


class Item(BaseModel):
    """
    A list entry with an optional nested list.

    JSON documents may spell the nested list as ``list``.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    sublist: Optional[List] = Field(default=None, alias="list")
