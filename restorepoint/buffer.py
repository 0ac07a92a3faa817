"""In-memory text buffers hosting a ``RestoreController``.

``EditorSession`` implements the ``CursorHost`` interface over a set of named
``TextBuffer`` objects and runs a small command vocabulary through the
controller, the way an editor's command loop would.
"""

from __future__ import annotations

from collections.abc import Hashable

from .commands import (
    KEYBOARD_QUIT,
    NAVIGATE_PREVIOUS,
    CommandBinding,
    CommandRegistry,
    normalize_command_name,
)
from .config import RestoreSettings
from .controller import RestoreController
from .errors import CommandArgumentError, PositionUnavailableError, UnknownCommandError
from .position import Position

DEFAULT_PAGE_SIZE = 20
END_OF_HISTORY_MESSAGE = "End of position history"


class TextBuffer:
    """Text plus a point (cursor offset) and an optional mark."""

    def __init__(self, name: str, text: str = "", point: int = 0, page_size: int = DEFAULT_PAGE_SIZE) -> None:
        self.name = name
        self.text = text
        self.point = max(0, min(point, len(text)))
        self.mark: int | None = None
        self.page_size = max(1, page_size)

    def goto(self, offset: int) -> None:
        """Move point to ``offset``; offsets outside the text are stale."""
        if offset < 0 or offset > len(self.text):
            raise PositionUnavailableError(f"offset {offset} outside buffer {self.name!r} of length {len(self.text)}")
        self.point = offset

    def line_start(self, offset: int) -> int:
        return self.text.rfind("\n", 0, offset) + 1

    def line_end(self, offset: int) -> int:
        end = self.text.find("\n", offset)
        return len(self.text) if end < 0 else end

    def line_col(self, offset: int | None = None) -> tuple[int, int]:
        """Return zero-based ``(line, column)`` for ``offset`` (default: point)."""
        offset = self.point if offset is None else offset
        return self.text.count("\n", 0, offset), offset - self.line_start(offset)

    def forward_char(self, count: int = 1) -> None:
        self.point = max(0, min(len(self.text), self.point + count))

    def move_lines(self, count: int) -> None:
        """Move point ``count`` lines down (negative: up), keeping the column."""
        _line, column = self.line_col()
        offset = self.point
        for _ in range(abs(count)):
            if count > 0:
                end = self.line_end(offset)
                if end >= len(self.text):
                    break
                offset = end + 1
            else:
                start = self.line_start(offset)
                if start == 0:
                    break
                offset = self.line_start(start - 1)
        self.point = min(self.line_start(offset) + column, self.line_end(offset))

    def beginning_of_buffer(self) -> None:
        self.mark = self.point
        self.point = 0

    def end_of_buffer(self) -> None:
        self.mark = self.point
        self.point = len(self.text)

    def mark_whole_buffer(self) -> None:
        self.mark = len(self.text)
        self.point = 0

    def mark_paragraph(self) -> None:
        """Mark the blank-line delimited paragraph around point, leaving point at its start."""
        separator = self.text.rfind("\n\n", 0, self.point)
        start = 0 if separator < 0 else separator + 2
        end = self.text.find("\n\n", self.point)
        self.mark = len(self.text) if end < 0 else end
        self.point = start

    def insert(self, text: str) -> None:
        self.text = self.text[: self.point] + text + self.text[self.point :]
        self.point += len(text)

    def erase(self) -> None:
        self.text = ""
        self.point = 0
        self.mark = None


class EditorSession:
    """Named buffers, one active at a time, wired to a restore controller."""

    def __init__(self, settings: RestoreSettings | None = None, page_size: int = DEFAULT_PAGE_SIZE) -> None:
        self.page_size = page_size
        self.buffers: dict[str, TextBuffer] = {}
        self.active: str | None = None
        self.messages: list[str] = []
        self.controller = RestoreController(self, settings)
        self.registry = build_command_registry(self)

    @property
    def buffer(self) -> TextBuffer:
        if self.active is None:
            raise LookupError("no active buffer")
        return self.buffers[self.active]

    def open_buffer(self, name: str, text: str = "", point: int = 0) -> TextBuffer:
        """Create (or replace) buffer ``name`` and make it active."""
        if name in self.buffers:
            self.kill_buffer(name)
        buffer = TextBuffer(name, text, point=point, page_size=self.page_size)
        self.buffers[name] = buffer
        self.active = name
        return buffer

    def switch_to(self, name: str) -> None:
        if name not in self.buffers:
            raise KeyError(name)
        self.active = name

    def kill_buffer(self, name: str) -> None:
        """Drop buffer ``name`` along with its position history."""
        self.buffers.pop(name, None)
        self.controller.discard_context(name)
        if self.active == name:
            self.active = next(iter(self.buffers), None)

    def execute(self, name: str, arg: str | None = None) -> None:
        """Run command ``name`` (or one of its aliases) in the active buffer."""
        command = self.registry.canonical(name)
        handler = self.registry.handler_for(name)
        if command is None or handler is None:
            raise UnknownCommandError(name)
        if arg is not None and not self.registry.takes_argument(command):
            raise CommandArgumentError(f"{command} takes no argument (got {arg!r})")
        context = self.controller.context_for(self.buffer.name)
        self.controller.dispatch(context, command)
        if arg is None:
            handler()
        else:
            handler(arg)

    def current_position(self, document: Hashable) -> Position:
        buffer = self.buffers[document]
        return Position(document=document, offset=buffer.point)

    def move_cursor_to(self, position: Position) -> None:
        buffer = self.buffers.get(position.document)
        if buffer is None:
            raise PositionUnavailableError(f"buffer {position.document!r} no longer exists")
        buffer.goto(position.offset)

    def notify_end_of_history(self) -> None:
        self.messages.append(END_OF_HISTORY_MESSAGE)


def build_command_registry(session: EditorSession) -> CommandRegistry:
    """Bind the buffer command vocabulary against ``session``'s active buffer."""

    def keyboard_quit() -> None:
        session.buffer.mark = None

    def navigate_previous() -> None:
        # Cursor movement already happened in the controller hook.
        return None

    def self_insert(text: str = " ") -> None:
        session.buffer.insert(text)

    def scroll(direction: int) -> None:
        session.buffer.move_lines(direction * session.buffer.page_size)

    registry = CommandRegistry(normalize=normalize_command_name)
    registry.register_bindings(
        CommandBinding("forward-char", lambda: session.buffer.forward_char(1), aliases=("right-char",)),
        CommandBinding("backward-char", lambda: session.buffer.forward_char(-1), aliases=("left-char",)),
        CommandBinding("next-line", lambda: session.buffer.move_lines(1)),
        CommandBinding("previous-line", lambda: session.buffer.move_lines(-1)),
        CommandBinding("scroll-up-command", lambda: scroll(1), aliases=("scroll-up", "cua-scroll-up")),
        CommandBinding("scroll-down-command", lambda: scroll(-1), aliases=("scroll-down", "cua-scroll-down")),
        CommandBinding("beginning-of-buffer", lambda: session.buffer.beginning_of_buffer()),
        CommandBinding("end-of-buffer", lambda: session.buffer.end_of_buffer()),
        CommandBinding("mark-whole-buffer", lambda: session.buffer.mark_whole_buffer()),
        CommandBinding("mark-paragraph", lambda: session.buffer.mark_paragraph()),
        CommandBinding("self-insert-command", self_insert, takes_argument=True),
        CommandBinding("erase-buffer", lambda: session.buffer.erase()),
        CommandBinding(KEYBOARD_QUIT, keyboard_quit, aliases=("minibuffer-keyboard-quit",)),
        CommandBinding(NAVIGATE_PREVIOUS, navigate_previous),
    )
    return registry


__all__ = ["DEFAULT_PAGE_SIZE", "END_OF_HISTORY_MESSAGE", "EditorSession", "TextBuffer", "build_command_registry"]
