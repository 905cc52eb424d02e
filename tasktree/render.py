"""Outline lines decorated for the current selection and input mode."""

from __future__ import annotations

from tasktree.controller import Controller, InputMode
from tasktree.models import Task
from tasktree.tree import DEFAULT_STYLE, OutlineStyle, all_lines, resolve


TASK_HINT = "        (↰ / -)"
CATEGORY_HINT = "        (+ / -)"
CHOOSE_TYPE_PROMPT = "       ◀ Task : Category ▶"


def selection_hint(controller: Controller) -> str:
    """Suffix for the selected line, or "" when nothing valid is selected."""
    if controller.selected is None:
        return ""
    node = resolve(controller.root, controller.selected)
    if node is None:
        return ""
    if isinstance(node, Task):
        return TASK_HINT
    if controller.mode is InputMode.CHOOSING_TYPE:
        return CHOOSE_TYPE_PROMPT
    if controller.mode is InputMode.TYPING_TASK:
        return f"    New Task: {controller.buffer}_"
    if controller.mode is InputMode.TYPING_CATEGORY:
        return f"    New Category: {controller.buffer}_"
    return CATEGORY_HINT


def decorate_lines(controller: Controller, style: OutlineStyle = DEFAULT_STYLE) -> list[str]:
    lines = all_lines(controller.root, style)
    hint = selection_hint(controller)
    if hint:
        lines[controller.selected] += hint
    return lines
