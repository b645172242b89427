"""
Input events for nestlist sessions.

A producer (the terminal key reader, or a test) feeds InputEvents into an
EventQueue; the session controller drains the queue one event at a time.
"""
from collections import deque
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Callable, Deque, Dict, Iterable, Iterator, List, Optional

from nestlist.constants import (
    CTRL_C,
    CTRL_S,
    ESCAPE,
    KEY_DOWN,
    KEY_DOWN_WIN,
    KEY_LEFT,
    KEY_LEFT_WIN,
    KEY_UP,
    KEY_UP_WIN,
)


class EventType(str, Enum):
    """Types of input events."""
    # Navigation mode
    MOVE_UP = "move.up"
    MOVE_DOWN = "move.down"
    COLLAPSE = "collapse"
    BACK = "back"
    DESCEND = "descend"
    ENTER_ADD = "add.enter"
    DELETE = "delete"
    SAVE = "save"
    EXIT = "exit"
    # Add mode
    CHAR = "add.char"
    BACKSPACE = "add.backspace"
    CONFIRM = "add.confirm"
    CANCEL = "add.cancel"


@dataclass
class InputEvent:
    """A single discrete input event."""
    type: EventType
    char: str = ""
    timestamp: datetime = field(default_factory=datetime.now)


NAVIGATION_KEY_BINDINGS: Dict[str, EventType] = {
    KEY_UP: EventType.MOVE_UP,
    KEY_UP_WIN: EventType.MOVE_UP,
    KEY_DOWN: EventType.MOVE_DOWN,
    KEY_DOWN_WIN: EventType.MOVE_DOWN,
    KEY_LEFT: EventType.COLLAPSE,
    KEY_LEFT_WIN: EventType.COLLAPSE,
    "b": EventType.BACK,
    "a": EventType.ENTER_ADD,
    "e": EventType.DESCEND,
    "d": EventType.DELETE,
    "W": EventType.SAVE,
    CTRL_C: EventType.EXIT,
}

ADD_MODE_KEY_BINDINGS: Dict[str, EventType] = {
    "\r": EventType.CONFIRM,
    "\n": EventType.CONFIRM,
    "\x7f": EventType.BACKSPACE,
    "\x08": EventType.BACKSPACE,
    CTRL_S: EventType.CANCEL,
    ESCAPE: EventType.CANCEL,
    CTRL_C: EventType.EXIT,
}


def event_for_key(key: str, add_mode: bool = False) -> Optional[InputEvent]:
    """Translate a raw key into an input event.

    In add mode, any single printable character that is not bound becomes a
    CHAR event. Unbound keys otherwise translate to None.

    Args:
        key: Raw key string as returned by click.getchar().
        add_mode: Whether the session is collecting text for a new item.

    Returns:
        The matching InputEvent, or None if the key means nothing here.
    """
    bindings = ADD_MODE_KEY_BINDINGS if add_mode else NAVIGATION_KEY_BINDINGS
    if key in bindings:
        return InputEvent(bindings[key])
    if add_mode and len(key) == 1 and key.isprintable():
        return InputEvent(EventType.CHAR, char=key)
    return None


def events_for_keys(keys: str, add_mode: bool = False) -> List[InputEvent]:
    """Translate one read from the keyboard into input events.

    A single read may carry several characters, as when text is pasted. In
    add mode a chunk of printable characters becomes one CHAR event per
    character. Anything else is translated as a single key.

    Args:
        keys: Raw string as returned by click.getchar().
        add_mode: Whether the session is collecting text for a new item.

    Returns:
        The events for the chunk, possibly empty.
    """
    event = event_for_key(keys, add_mode=add_mode)
    if event is not None:
        return [event]
    if add_mode and keys and keys.isprintable():
        return [InputEvent(EventType.CHAR, char=char) for char in keys]
    return []


class EventQueue:
    """
    FIFO of input events.

    Events put on the queue are delivered first. When the queue is empty and
    a producer is attached, the producer is asked for the next event (this is
    where a session blocks waiting for a key). A producer returning None ends
    the stream.
    """

    def __init__(
        self,
        events: Iterable[InputEvent] = (),
        producer: Optional[Callable[[], Optional[InputEvent]]] = None,
    ) -> None:
        self._pending: Deque[InputEvent] = deque(events)
        self._producer = producer

    def put(self, event: InputEvent) -> None:
        """Append an event to the queue."""
        self._pending.append(event)

    def extend(self, events: Iterable[InputEvent]) -> None:
        """Append several events to the queue, in order."""
        self._pending.extend(events)

    def get(self) -> Optional[InputEvent]:
        """Take the next event, or None when the stream is exhausted."""
        if self._pending:
            return self._pending.popleft()
        if self._producer is not None:
            return self._producer()
        return None

    def __len__(self) -> int:
        return len(self._pending)

    def __iter__(self) -> Iterator[InputEvent]:
        while True:
            event = self.get()
            if event is None:
                return
            yield event
