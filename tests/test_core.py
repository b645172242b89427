"""
Tests for Session and NestedListUI in nestlist.core.

Tests cover:
- Event dispatch in navigation mode
- Add mode text entry
- Save handler and notifications
- The control loop (stop, exhaustion, empty root)
"""

from unittest.mock import patch

import pytest

from nestlist.core import NestedListUI, Session
from nestlist.exceptions import TerminalError
from nestlist.managers.events import EventQueue, EventType, InputEvent
from nestlist.models.options import Options, PageOptions
from nestlist.models.tree import List


def events(*types: EventType):
    return [InputEvent(t) for t in types]


def typed(text: str):
    return [InputEvent(EventType.CHAR, char=c) for c in text]


class TestSessionInit:
    """Test Session construction."""

    def test_copies_tree_into_arena(self, sample_tree):
        """The session navigates a flattened copy of the tree."""
        session = Session(sample_tree)

        assert session.store[0].name == "root"
        assert session.navigator.current == 0
        assert session.notification is None
        assert session.running is False
        assert session.add_mode is False

    def test_has_items(self, sample_tree):
        """has_items reflects whether the root list is empty."""
        assert Session(sample_tree).has_items() is True
        assert Session(List(name="empty")).has_items() is False

    def test_options_setter(self, sample_tree):
        """Replacing options changes what the navigator sees."""
        session = Session(sample_tree)

        session.options = Options(page_options=[PageOptions(title="Top")])

        assert session.page_options.title == "Top"


class TestNavigationEvents:
    """Test navigation-mode event dispatch."""

    def test_move_events(self, session):
        """Up and down move the selection cyclically."""
        session.handle_event(InputEvent(EventType.MOVE_DOWN))
        assert session.navigator.selected_index == 1

        session.handle_event(InputEvent(EventType.MOVE_DOWN))
        assert session.navigator.selected_index == 0

        session.handle_event(InputEvent(EventType.MOVE_UP))
        assert session.navigator.selected_index == 1

    def test_collapse_clears_selection(self, session):
        """Collapse clears the selection without moving the view."""
        session.handle_event(InputEvent(EventType.COLLAPSE))

        assert session.navigator.selected_index is None
        assert session.navigator.depth == 0

    def test_descend_and_back(self, session):
        """Descend opens the nested list and back returns."""
        session.handle_event(InputEvent(EventType.DESCEND))
        assert session.navigator.depth == 1

        session.handle_event(InputEvent(EventType.BACK))
        assert session.navigator.depth == 0

    def test_delete_event(self, session):
        """Delete removes the selected item."""
        session.handle_event(InputEvent(EventType.DELETE))

        assert [i.name for i in session.navigator.current_list.items] == ["B"]

    def test_exit_stops(self, session):
        """Exit clears the running flag."""
        session.running = True

        session.handle_event(InputEvent(EventType.EXIT))

        assert session.running is False

    def test_add_mode_events_ignored_in_navigation(self, session):
        """Text-entry events mean nothing outside add mode."""
        before = session.to_tree().model_dump()

        for event in typed("xyz") + events(EventType.BACKSPACE, EventType.CONFIRM, EventType.CANCEL):
            session.handle_event(event)

        assert session.to_tree().model_dump() == before


class TestAddMode:
    """Test the add-mode text entry."""

    def test_enter_add_mode(self, session):
        """ENTER_ADD starts add mode with an empty buffer."""
        session.handle_event(InputEvent(EventType.ENTER_ADD))

        assert session.add_mode is True
        assert session.input_buffer == ""

    def test_enter_add_mode_disabled(self, sample_tree):
        """Add mode cannot start when adding is disabled."""
        session = Session(sample_tree, Options(page_options=[PageOptions(disable_add=True)]))

        session.handle_event(InputEvent(EventType.ENTER_ADD))

        assert session.add_mode is False

    def test_type_and_confirm(self, session):
        """Confirm commits the buffer as id and name, and stays in add mode."""
        session.navigator.move_selection(1)
        for event in events(EventType.ENTER_ADD) + typed("milk") + events(EventType.CONFIRM):
            session.handle_event(event)

        assert session.add_mode is True
        assert session.input_buffer == ""
        added = session.navigator.selected_sublist.items
        assert [(i.id, i.name) for i in added] == [("milk", "milk")]

    def test_several_items_in_one_visit(self, session):
        """Several items can be added before leaving add mode."""
        session.navigator.move_selection(1)
        sequence = (
            events(EventType.ENTER_ADD)
            + typed("one") + events(EventType.CONFIRM)
            + typed("two") + events(EventType.CONFIRM)
            + events(EventType.CANCEL)
        )
        for event in sequence:
            session.handle_event(event)

        assert session.add_mode is False
        assert [i.name for i in session.navigator.selected_sublist.items] == ["one", "two"]

    def test_backspace(self, session):
        """Backspace removes the last character and is safe on an empty buffer."""
        for event in events(EventType.ENTER_ADD) + typed("ab"):
            session.handle_event(event)

        session.handle_event(InputEvent(EventType.BACKSPACE))
        assert session.input_buffer == "a"

        session.handle_event(InputEvent(EventType.BACKSPACE))
        session.handle_event(InputEvent(EventType.BACKSPACE))
        assert session.input_buffer == ""

    def test_confirm_empty_buffer_adds_nothing(self, session):
        """An empty buffer is not committed."""
        session.navigator.move_selection(1)
        for event in events(EventType.ENTER_ADD, EventType.CONFIRM):
            session.handle_event(event)

        assert session.navigator.selected_item.list_index is None

    def test_cancel_discards_buffer(self, session):
        """Cancel throws away uncommitted text."""
        session.navigator.move_selection(1)
        for event in events(EventType.ENTER_ADD) + typed("draft") + events(EventType.CANCEL):
            session.handle_event(event)

        assert session.add_mode is False
        assert session.input_buffer == ""
        assert session.navigator.selected_item.list_index is None

    def test_navigation_keys_are_text_in_add_mode(self, session):
        """While adding, DELETE and friends do not reach the navigator."""
        session.handle_event(InputEvent(EventType.ENTER_ADD))

        session.handle_event(InputEvent(EventType.DELETE))
        session.handle_event(InputEvent(EventType.MOVE_DOWN))

        assert session.navigator.selected_index == 0
        assert len(session.navigator.current_list.items) == 2

    def test_exit_in_add_mode(self, session):
        """Exit stops the session from inside add mode."""
        session.running = True
        session.handle_event(InputEvent(EventType.ENTER_ADD))

        session.handle_event(InputEvent(EventType.EXIT))

        assert session.running is False


class TestSave:
    """Test the save handler and notifications."""

    def test_save_passes_rebuilt_tree(self, session, sample_tree):
        """The handler receives the current tree and its result is the notice."""
        session.handle_event(InputEvent(EventType.SAVE))

        assert len(session.saved) == 1
        assert session.saved[0].model_dump() == sample_tree.model_dump()
        assert session.notification == "SAVED!"

    def test_save_returning_none_clears_notice(self, sample_tree):
        """A handler returning None clears the previous notice."""
        session = Session(sample_tree, on_save=lambda tree: None)
        session.notification = "old"

        session.save()

        assert session.notification is None

    def test_save_disabled(self, sample_tree):
        """Saving is skipped when disabled at the current depth."""
        calls = []
        session = Session(
            sample_tree,
            Options(page_options=[PageOptions(disable_save=True)]),
            on_save=calls.append,
        )

        assert session.save() is False
        assert calls == []

    def test_save_without_handler(self, sample_tree):
        """Saving with no handler registered is harmless."""
        session = Session(sample_tree)

        assert session.save() is True
        assert session.notification is None

    def test_save_drops_emptied_sublist(self, builder):
        """Deleting all children then saving yields an item with no nested list."""
        saved = []
        tree = builder.list("root", builder.item("A", builder.flat("A list", ["X", "Y"])))
        session = Session(tree, on_save=saved.append)

        for event in events(EventType.DESCEND, EventType.DELETE, EventType.DELETE, EventType.SAVE):
            session.handle_event(event)

        assert saved[0].items[0].name == "A"
        assert saved[0].items[0].sublist is None

    def test_navigation_clears_notice(self, session):
        """Opening or closing a list clears the notice."""
        session.save()
        session.handle_event(InputEvent(EventType.DESCEND))
        assert session.notification is None

        session.save()
        session.handle_event(InputEvent(EventType.BACK))
        assert session.notification is None

    def test_moving_keeps_notice(self, session):
        """Moving the selection leaves the notice visible."""
        session.save()

        session.handle_event(InputEvent(EventType.MOVE_DOWN))

        assert session.notification == "SAVED!"

    def test_emptying_root_clears_notice(self, builder):
        """Deleting the last root item clears the notice."""
        session = Session(builder.flat("root", ["only"]), on_save=lambda tree: "SAVED!")
        session.save()

        session.handle_event(InputEvent(EventType.DELETE))

        assert session.navigator.current_list.items == []
        assert session.navigator.depth == 0
        assert session.notification is None

    def test_delete_with_items_left_keeps_notice(self, session):
        """Deleting one of several items leaves the notice visible."""
        session.save()

        session.handle_event(InputEvent(EventType.DELETE))

        assert session.notification == "SAVED!"


class TestRun:
    """Test the control loop."""

    def test_run_until_exit(self, session):
        """The loop applies events until EXIT and ignores the rest."""
        queue = EventQueue(events(EventType.MOVE_DOWN, EventType.EXIT, EventType.MOVE_DOWN))

        session.run(queue)

        assert session.navigator.selected_index == 1
        assert session.running is False
        assert len(queue) == 1

    def test_run_until_exhausted(self, session):
        """The loop ends when the event source runs dry."""
        session.run(events(EventType.DESCEND))

        assert session.navigator.depth == 1
        assert session.running is False

    def test_render_before_each_event(self, session):
        """The renderer sees the session before every event."""
        seen = []

        session.run(
            events(EventType.MOVE_DOWN, EventType.MOVE_DOWN),
            render=lambda s: seen.append(s.navigator.selected_index),
        )

        assert seen == [0, 1, 0]

    def test_stop_from_save_handler(self, sample_tree):
        """Stopping mid-session prevents further events from applying."""
        session = Session(sample_tree)
        session.on_save = lambda tree: session.stop()

        session.run(events(EventType.SAVE, EventType.DELETE))

        assert len(session.navigator.current_list.items) == 2

    def test_run_add_mode_sequence(self, session):
        """A full add-mode visit through the loop."""
        session.run(
            events(EventType.MOVE_DOWN, EventType.ENTER_ADD)
            + typed("eggs")
            + events(EventType.CONFIRM, EventType.CANCEL, EventType.SAVE, EventType.EXIT)
        )

        saved = session.saved[0]
        assert saved.items[1].sublist.name == "B"
        assert [i.name for i in saved.items[1].sublist.items] == ["eggs"]
        assert session.add_mode is False

    def test_empty_root_skips_session(self, capsys):
        """An empty root is reported once and no events are consumed."""
        session = Session(List(name="empty"))
        queue = EventQueue(events(EventType.MOVE_DOWN))

        session.run(queue)

        assert "No items in root list" in capsys.readouterr().err
        assert len(queue) == 1


class TestNestedListUI:
    """Test the caller-facing facade."""

    def test_set_page_options(self, sample_tree):
        """Page options are applied by depth."""
        ui = NestedListUI(sample_tree)

        ui.set_page_options([PageOptions(title="Top", disable_delete=True)])

        assert ui.session.page_options.title == "Top"
        assert ui.session.navigator.delete_selected() is False

    def test_on_save(self, sample_tree):
        """The registered handler is used on save."""
        ui = NestedListUI(sample_tree)
        ui.on_save(lambda tree: f"saved {tree.name}")

        ui.session.save()

        assert ui.session.notification == "saved root"

    def test_run_empty_root(self, capsys):
        """An empty root never touches the terminal."""
        with patch("nestlist.core.KeyReader") as reader:
            NestedListUI(List(name="empty")).run()

        reader.assert_not_called()
        assert "No items in root list" in capsys.readouterr().err

    def test_run_without_terminal(self, sample_tree):
        """Running without an interactive stdin raises TerminalError."""
        with patch("nestlist.terminal.sys.stdin") as stdin:
            stdin.isatty.return_value = False
            with pytest.raises(TerminalError):
                NestedListUI(sample_tree).run()

    def test_run_drives_session(self, sample_tree):
        """Keys from the reader drive the session and the screen is restored."""
        ui = NestedListUI(sample_tree)
        keys = iter([InputEvent(EventType.MOVE_DOWN), InputEvent(EventType.EXIT)])

        with patch("nestlist.core.KeyReader") as reader, patch("nestlist.core.ScreenRenderer") as renderer:
            reader.return_value.read_event.side_effect = lambda: next(keys)
            ui.run()

        assert ui.session.navigator.selected_index == 1
        renderer.return_value.close.assert_called_once()
        assert renderer.return_value.call_count == 2
