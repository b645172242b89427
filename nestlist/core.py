"""
Session - interactive state for one nestlist run.

Owns the arena, the navigator, the page options, the save handler and the
transient notification, and applies input events to them one at a time.
NestedListUI is the caller-facing wrapper that attaches a terminal.
"""

from typing import Callable, Iterable, Optional, Sequence

import click

from nestlist.constants import NO_ROOT_ITEMS_MESSAGE
from nestlist.managers import (
    EventQueue,
    EventType,
    InputEvent,
    NavigationManager,
    flatten,
    reconstruct,
)
from nestlist.models.options import Options, PageOptions
from nestlist.models.tree import List
from nestlist.terminal import KeyReader, ScreenRenderer

SaveHandler = Callable[[List], Optional[str]]
Renderer = Callable[["Session"], None]


def _ignore_save(tree: List) -> Optional[str]:
    return None


class Session:
    """
    Single owned context for an interactive session.

    Orchestrates:
    - ArenaStore: Flattened copy of the caller's tree
    - NavigationManager: Current list, depth and mutations
    - Save handler: Receives the rebuilt tree, returns an optional notice
    - Add mode: Text buffer collected for a new item
    """

    def __init__(
        self,
        tree: List,
        options: Optional[Options] = None,
        on_save: Optional[SaveHandler] = None,
    ) -> None:
        """
        Initialize a Session from a caller's tree.

        Args:
            tree: Root list to navigate. It is copied into the arena and not
                modified.
            options: Per-depth page options.
            on_save: Called with the rebuilt tree on save.
        """
        self.store, root = flatten(tree)
        self.navigator = NavigationManager(self.store, options, root)
        self.on_save: SaveHandler = on_save or _ignore_save
        self.notification: Optional[str] = None
        self.running = False
        self.add_mode = False
        self.input_buffer = ""

    @property
    def options(self) -> Options:
        return self.navigator.options

    @options.setter
    def options(self, options: Options) -> None:
        self.navigator.options = options

    @property
    def page_options(self) -> PageOptions:
        """Get the options active at the current depth."""
        return self.navigator.page_options

    def has_items(self) -> bool:
        """Whether the root list has anything to navigate."""
        return bool(self.store[self.navigator.root].items)

    def to_tree(self) -> List:
        """Rebuild the caller's tree from the current arena."""
        return reconstruct(self.store, self.navigator.root)

    def save(self) -> bool:
        """Hand the rebuilt tree to the save handler.

        The handler's return value replaces the notification; returning None
        clears it.

        Returns:
            False if saving is disabled at the current depth.
        """
        if self.page_options.disable_save:
            return False
        self.notification = self.on_save(self.to_tree())
        return True

    def stop(self) -> None:
        """Signal the control loop to stop."""
        self.running = False

    # =========================================================================
    # Event handling
    # =========================================================================

    def handle_event(self, event: InputEvent) -> None:
        """Apply one input event to the session."""
        if self.add_mode:
            self._handle_add_event(event)
            return

        navigator = self.navigator
        kind = event.type

        if kind is EventType.EXIT:
            self.stop()
        elif kind is EventType.MOVE_UP:
            navigator.move_selection(-1)
        elif kind is EventType.MOVE_DOWN:
            navigator.move_selection(1)
        elif kind is EventType.COLLAPSE:
            navigator.clear_selection()
        elif kind is EventType.BACK:
            self.notification = None
            navigator.ascend()
        elif kind is EventType.DESCEND:
            self.notification = None
            navigator.descend()
        elif kind is EventType.ENTER_ADD:
            if not self.page_options.disable_add:
                self.add_mode = True
                self.input_buffer = ""
        elif kind is EventType.DELETE:
            depth = navigator.depth
            if navigator.delete_selected() and (
                navigator.depth != depth or not navigator.current_list.items
            ):
                self.notification = None
        elif kind is EventType.SAVE:
            self.save()

    def _handle_add_event(self, event: InputEvent) -> None:
        kind = event.type

        if kind is EventType.EXIT:
            self.stop()
        elif kind is EventType.CHAR:
            self.input_buffer += event.char
        elif kind is EventType.BACKSPACE:
            self.input_buffer = self.input_buffer[:-1]
        elif kind is EventType.CONFIRM:
            if self.input_buffer:
                text, self.input_buffer = self.input_buffer, ""
                self.navigator.add_item(text, text)
        elif kind is EventType.CANCEL:
            self.add_mode = False
            self.input_buffer = ""

    def run(self, events: Iterable[InputEvent], render: Optional[Renderer] = None) -> None:
        """
        Drain input events until the session stops.

        The running flag is checked before every event, in navigation and add
        mode alike, so a stop takes effect before the next event is applied.

        Args:
            events: Event source, usually an EventQueue.
            render: Called with the session before each event is taken.
        """
        if not self.has_items():
            click.echo(NO_ROOT_ITEMS_MESSAGE, err=True)
            return

        self.running = True
        source = iter(events)
        try:
            while self.running:
                if render is not None:
                    render(self)
                event = next(source, None)
                if event is None:
                    break
                self.handle_event(event)
        finally:
            self.running = False
            self.add_mode = False


class NestedListUI:
    """
    Caller-facing entry point.

    Usage:
        ui = NestedListUI(tree)
        ui.set_page_options([PageOptions(title="Projects", disable_delete=True)])
        ui.on_save(lambda tree: "SAVED!")
        ui.run()
    """

    def __init__(self, tree: List) -> None:
        self.session = Session(tree)

    def set_page_options(self, page_options: Sequence[PageOptions]) -> None:
        """Replace the per-depth page options."""
        self.session.options = Options(page_options=list(page_options))

    def on_save(self, handler: SaveHandler) -> None:
        """Register the save handler."""
        self.session.on_save = handler

    def run(self) -> None:
        """Run the session on the controlling terminal.

        Raises:
            TerminalError: If the terminal cannot be used.
        """
        if not self.session.has_items():
            click.echo(NO_ROOT_ITEMS_MESSAGE, err=True)
            return

        reader = KeyReader(self.session)
        renderer = ScreenRenderer()
        try:
            self.session.run(EventQueue(producer=reader.read_event), renderer)
        finally:
            renderer.close()
