"""
Terminal front-end for nestlist sessions.

KeyReader turns key presses from click.getchar() into input events, and
ScreenRenderer redraws the whole screen from a session's read-only state
before each event.
"""

import sys
from collections import deque
from typing import Deque, List, Optional

import click

from nestlist.constants import (
    USAGE_ADD,
    USAGE_ADD_MODE,
    USAGE_BACK,
    USAGE_DELETE,
    USAGE_EDIT,
    USAGE_EXIT,
    get_highlight_symbol,
)
from nestlist.exceptions import TerminalError
from nestlist.managers import EventType, InputEvent, events_for_keys


class KeyReader:
    """Blocking producer of input events read from the keyboard."""

    def __init__(self, session) -> None:
        """
        Initialize KeyReader.

        Args:
            session: Session whose mode decides how keys are translated.

        Raises:
            TerminalError: If stdin is not an interactive terminal.
        """
        if not sys.stdin.isatty():
            raise TerminalError("nestlist needs an interactive terminal on stdin.")
        self.session = session
        self._pending: Deque[InputEvent] = deque()

    def read_event(self) -> Optional[InputEvent]:
        """Wait for the next meaningful key and translate it.

        Pasted text arrives as one chunk; its characters are handed out one
        event at a time.

        Returns:
            The next InputEvent, or None when input is closed.
        """
        while not self._pending:
            try:
                keys = click.getchar()
            except KeyboardInterrupt:
                return InputEvent(EventType.EXIT)
            except EOFError:
                return None
            except OSError as e:
                raise TerminalError(f"Failed to read from terminal: {e}")

            self._pending.extend(events_for_keys(keys, add_mode=self.session.add_mode))

        return self._pending.popleft()


def _heading(title: str) -> str:
    return click.style(f"[ {title} ]", bold=True)


def usage_hints(session) -> List[str]:
    """Usage hints allowed by the active page options."""
    options = session.page_options
    hints = [USAGE_EXIT]
    if not options.disable_save:
        hints.append(f"W: {options.save_command_description}")
    if session.navigator.can_go_back:
        hints.append(USAGE_BACK)
    if not options.disable_add:
        hints.append(USAGE_ADD)
    if not options.disable_edit:
        hints.append(USAGE_EDIT)
    if not options.disable_delete:
        hints.append(USAGE_DELETE)
    return hints


def render_navigation(session, highlight_symbol: str) -> List[str]:
    """Lines of the navigation screen."""
    navigator = session.navigator
    options = session.page_options
    current = navigator.current_list

    title = f"{options.title}: {current.name}" if options.title else current.name
    if session.notification:
        title = click.style(f"{session.notification} | {title}", fg="red", bold=True)
    else:
        title = click.style(title, fg="blue", bold=True)

    lines = [title, "", _heading(options.menu_box_title)]
    padding = " " * len(highlight_symbol)
    for index, item in enumerate(current.items):
        if index == navigator.selected_index:
            lines.append(click.style(f"{highlight_symbol} {item.name}", fg="green", bold=True))
        else:
            lines.append(f"{padding} {item.name}")

    selected = navigator.selected_item
    if selected is None:
        return lines

    lines += ["", _heading("Navigation")]
    lines += [click.style(hint, fg="green") for hint in usage_hints(session)]

    lines += ["", _heading(options.selected_box_title)]
    lines.append(f"ID: {selected.id}")
    lines.append(f"Name: {selected.name}")

    sublist = navigator.selected_sublist
    if sublist is not None:
        lines += ["", _heading(options.list_box_title)]
        lines += [click.style(item.name, fg="yellow") for item in sublist.items]

    return lines


def render_add_mode(session) -> List[str]:
    """Lines of the add-item screen."""
    navigator = session.navigator
    options = session.page_options

    selected = navigator.selected_item
    title = selected.name if selected is not None else navigator.current_list.name

    lines = [
        click.style(title, fg="red", bold=True),
        "",
        _heading("Navigation"),
        click.style(USAGE_ADD_MODE, fg="green"),
        "",
        _heading("Input"),
        click.style(session.input_buffer, fg="yellow"),
    ]

    sublist = navigator.selected_sublist
    if sublist is not None:
        lines += ["", _heading(options.list_box_title)]
        lines += [f"{index}: {item.name}" for index, item in enumerate(sublist.items)]

    return lines


class ScreenRenderer:
    """Redraws the terminal from a session each time it is called."""

    def __init__(self, highlight_symbol: Optional[str] = None) -> None:
        self.highlight_symbol = highlight_symbol or get_highlight_symbol()

    def lines(self, session) -> List[str]:
        if session.add_mode:
            return render_add_mode(session)
        return render_navigation(session, self.highlight_symbol)

    def __call__(self, session) -> None:
        click.clear()
        click.echo("\n".join(self.lines(session)))

    def close(self) -> None:
        click.clear()
