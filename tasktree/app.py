"""tasktree TUI: the outline view and key input, powered by Textual."""

from __future__ import annotations

from rich.text import Text
from textual import events
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import VerticalScroll
from textual.widgets import Footer, Static

from tasktree.controller import Controller, InputMode
from tasktree.models import TaskItem
from tasktree.render import decorate_lines
from tasktree.tree import DEFAULT_STYLE, OutlineStyle
from tasktree.workspace import DEFAULT_TITLE


# ── Stylesheet ─────────────────────────────────────────────────

CSS = """
Screen {
    background: $surface;
}

#outline-pane {
    height: 1fr;
    border: round $primary-background-darken-2;
    border-title-color: $text;
    border-title-style: bold;
    padding: 0 1;
}

#outline {
    height: auto;
    width: 1fr;
}
"""

SELECTED_STYLE = "bold black on #90ee90"
HIGHLIGHT_SYMBOL = ">> "

MODE_LABELS = {
    InputMode.IDLE: "",
    InputMode.CHOOSING_TYPE: "[ADD]",
    InputMode.TYPING_TASK: "[NEW TASK]",
    InputMode.TYPING_CATEGORY: "[NEW CATEGORY]",
}


def outline_text(controller: Controller, style: OutlineStyle = DEFAULT_STYLE) -> Text:
    """Decorated outline as rich Text with the selected line highlighted."""
    lines = decorate_lines(controller, style)
    pad = " " * len(HIGHLIGHT_SYMBOL) if controller.selected is not None else ""
    text = Text()
    for i, line in enumerate(lines):
        if i:
            text.append("\n")
        if i == controller.selected:
            text.append(HIGHLIGHT_SYMBOL + line, style=SELECTED_STYLE)
        else:
            text.append(pad + line)
    return text


# ── Main app ───────────────────────────────────────────────────


class TaskTreeApp(App[TaskItem]):
    """Interactive outline of one task list. Exits with the (edited) root."""

    TITLE = "tasktree"
    CSS = CSS
    AUTO_FOCUS = None
    ENABLE_COMMAND_PALETTE = False

    BINDINGS = [
        Binding("ctrl+q", "quit", "Quit", priority=True),
    ]

    def __init__(
        self,
        root: TaskItem,
        title: str = DEFAULT_TITLE,
        style: OutlineStyle = DEFAULT_STYLE,
    ) -> None:
        super().__init__()
        self.controller = Controller(root)
        self.list_title = title
        self.outline_style = style

    def compose(self) -> ComposeResult:
        yield VerticalScroll(Static(id="outline"), id="outline-pane", can_focus=False)
        yield Footer()

    def on_mount(self) -> None:
        self.query_one("#outline-pane").border_title = self.list_title
        self._redraw()

    def _redraw(self) -> None:
        self.query_one("#outline", Static).update(
            outline_text(self.controller, self.outline_style)
        )
        self.sub_title = MODE_LABELS[self.controller.mode]

    def on_key(self, event: events.Key) -> None:
        event.stop()
        event.prevent_default()
        if not self.controller.handle_key(event.key, event.character):
            self.exit(self.controller.root)
            return
        self._redraw()

    def action_quit(self) -> None:
        self.exit(self.controller.quit())
