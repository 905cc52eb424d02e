"""Selection and typing state machine that drives edits to a task tree.

The controller owns the tree for the whole session. Selection is a plain
line number, never a reference into the tree, so every edit re-resolves
its target from the root.

Events:
- move_down / move_up: wrap around the outline, cancel any typing
- deselect: clear the selection, cancel any typing
- begin_add -> choose_task / choose_category -> input_char... -> confirm
- confirm while idle: toggle the selected task
- input_char("-") while idle: remove the selected item
- quit: end the session and hand the tree back
"""

from __future__ import annotations

import logging
from enum import Enum

from tasktree.models import Category, Task, TaskItem
from tasktree.tree import insert_child, line_count, remove_at, toggle_at


logger = logging.getLogger(__name__)


class InputMode(Enum):
    IDLE = "idle"
    CHOOSING_TYPE = "choosing_type"
    TYPING_TASK = "typing_task"
    TYPING_CATEGORY = "typing_category"


TYPING_MODES = {InputMode.TYPING_TASK, InputMode.TYPING_CATEGORY}

REMOVE_CHAR = "-"
ADD_CHARS = {"+", "="}
QUIT_CHAR = "q"


class Controller:
    """Holds the tree, the selected line and the current input mode."""

    def __init__(self, root: TaskItem) -> None:
        self.root = root
        self.selected: int | None = None
        self.mode = InputMode.IDLE
        self.buffer = ""
        self.running = True

    @property
    def typing(self) -> bool:
        return self.mode in TYPING_MODES

    def _cancel_typing(self) -> None:
        """Drop back to idle, discarding anything typed but not submitted."""
        self.mode = InputMode.IDLE
        self.buffer = ""

    # ── Navigation ─────────────────────────────────────────────

    def move_down(self) -> None:
        if self.selected is None:
            self.selected = 0
        else:
            self.selected = (self.selected + 1) % line_count(self.root)
        self._cancel_typing()

    def move_up(self) -> None:
        if self.selected is None:
            self.selected = 0
        else:
            self.selected = (self.selected - 1) % line_count(self.root)
        self._cancel_typing()

    def deselect(self) -> None:
        self.selected = None
        self._cancel_typing()

    # ── Adding ─────────────────────────────────────────────────

    def begin_add(self) -> None:
        if self.selected is not None:
            self.mode = InputMode.CHOOSING_TYPE

    def choose_task(self) -> None:
        if self.mode is InputMode.CHOOSING_TYPE:
            self.mode = InputMode.TYPING_TASK
            self.buffer = ""

    def choose_category(self) -> None:
        if self.mode is InputMode.CHOOSING_TYPE:
            self.mode = InputMode.TYPING_CATEGORY
            self.buffer = ""

    def input_char(self, char: str) -> None:
        """Type into the buffer, or treat *char* as a command when not typing."""
        if self.typing:
            self.buffer += char
        elif char == REMOVE_CHAR:
            self.remove_selected()
        elif char in ADD_CHARS:
            self.begin_add()

    def backspace(self) -> None:
        if self.typing:
            self.buffer = self.buffer[:-1]

    def confirm(self) -> None:
        """Submit the typed item, or toggle the selected task."""
        if self.selected is not None:
            if self.mode is InputMode.TYPING_TASK:
                insert_child(self.root, self.selected, Task(name=self.buffer))
            elif self.mode is InputMode.TYPING_CATEGORY:
                insert_child(self.root, self.selected, Category(name=self.buffer))
            else:
                toggle_at(self.root, self.selected)
        self._cancel_typing()

    # ── Removing ───────────────────────────────────────────────

    def remove_selected(self) -> None:
        if self.selected is not None:
            if remove_at(self.root, self.selected) is not None:
                # keep the cursor on a real line after the outline shrinks
                self.selected = min(self.selected, line_count(self.root) - 1)
        self._cancel_typing()

    def quit(self) -> TaskItem:
        self.running = False
        return self.root

    # ── Key dispatch ───────────────────────────────────────────

    def handle_key(self, key: str, character: str | None = None) -> bool:
        """Apply one key press. Returns False once the session should end.

        *key* uses Textual key names ("up", "enter", "ctrl+q", ...);
        *character* is the printable character the key produced, if any.
        """
        if key == "ctrl+q":
            self.quit()
        elif key == "down":
            self.move_down()
        elif key == "up":
            self.move_up()
        elif key == "left":
            if self.mode is InputMode.CHOOSING_TYPE:
                self.choose_task()
            else:
                self.deselect()
        elif key == "right":
            self.choose_category()
        elif key == "escape":
            self.deselect()
        elif key == "enter":
            self.confirm()
        elif key == "backspace":
            self.backspace()
        elif character is not None and len(character) == 1 and character.isprintable():
            if character == QUIT_CHAR and not self.typing:
                self.quit()
            else:
                self.input_char(character)
        else:
            logger.debug("Ignoring key %r", key)
        return self.running
