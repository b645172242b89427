"""
Managers for nestlist.

This package contains focused classes and functions behind a session:
- ArenaStore: Append-only storage of flat lists
- NavigationManager: Selection, descend/ascend, add and delete
- flatten / reconstruct: Conversion between caller trees and the arena
- EventQueue: Input events drained by the session controller
"""

from nestlist.managers.arena_store import ArenaStore
from nestlist.managers.events import (
    ADD_MODE_KEY_BINDINGS,
    NAVIGATION_KEY_BINDINGS,
    EventQueue,
    EventType,
    InputEvent,
    event_for_key,
    events_for_keys,
)
from nestlist.managers.marshaling import flatten, reconstruct
from nestlist.managers.navigation_manager import NavigationManager

__all__ = [
    "ArenaStore",
    "NavigationManager",
    "flatten",
    "reconstruct",
    "EventQueue",
    "EventType",
    "InputEvent",
    "event_for_key",
    "events_for_keys",
    "NAVIGATION_KEY_BINDINGS",
    "ADD_MODE_KEY_BINDINGS",
]
