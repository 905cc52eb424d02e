"""Outline linearization and line-number addressing for a task tree.

Line numbers are 0-based pre-order positions: a node's own line comes first,
then every line of its children, before the next sibling. Nothing here holds
a reference into the tree between calls; each lookup walks from the root.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from tasktree.models import Category, Task, TaskItem


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OutlineStyle:
    indent: str = "    "
    done_marker: str = "☑"
    todo_marker: str = "☐"


DEFAULT_STYLE = OutlineStyle()


# ── Linearization ─────────────────────────────────────────────


def line_count(node: TaskItem) -> int:
    """Number of outline lines *node* and its descendants occupy."""
    if isinstance(node, Task):
        return 1
    return 1 + sum(line_count(child) for child in node.children)


def format_line(node: TaskItem, depth: int = 0, style: OutlineStyle = DEFAULT_STYLE) -> str:
    """Render one node's own line (no children)."""
    prefix = style.indent * depth
    if isinstance(node, Task):
        marker = style.done_marker if node.done else style.todo_marker
        return f"{prefix}{node.name} {marker}"
    return f"{prefix}{node.name}"


def all_lines(node: TaskItem, style: OutlineStyle = DEFAULT_STYLE) -> list[str]:
    """Every outline line of *node* in pre-order."""
    lines: list[str] = []
    _collect(node, 0, style, lines)
    return lines


def _collect(node: TaskItem, depth: int, style: OutlineStyle, out: list[str]) -> None:
    out.append(format_line(node, depth, style))
    if isinstance(node, Category):
        for child in node.children:
            _collect(child, depth + 1, style, out)


# ── Addressing ────────────────────────────────────────────────


def _locate(
    node: TaskItem,
    line: int,
    target: int,
    parent: Category | None = None,
    index: int = -1,
) -> tuple[Category | None, int, TaskItem] | None:
    """Walk pre-order from *node* (sitting on *line*) to *target*.

    Returns (parent, index-in-parent, node); parent is None for the start node.
    Children whose whole subtree ends before *target* are skipped by their
    line_count instead of being descended into.
    """
    if line == target:
        return parent, index, node
    if isinstance(node, Task):
        return None
    line += 1
    for i, child in enumerate(node.children):
        size = line_count(child)
        if target < line + size:
            return _locate(child, line, target, node, i)
        line += size
    return None


def _in_range(root: TaskItem, line_number: int) -> bool:
    return 0 <= line_number < line_count(root)


def resolve(root: TaskItem, line_number: int) -> TaskItem | None:
    """The node drawn at *line_number*, or None when out of range."""
    if not _in_range(root, line_number):
        return None
    found = _locate(root, 0, line_number)
    return found[2] if found else None


def resolve_parent(root: TaskItem, line_number: int) -> tuple[Category, int] | None:
    """(owning category, index in its children) for the node at *line_number*.

    None for the root's own line and for out-of-range line numbers.
    """
    if not _in_range(root, line_number):
        return None
    found = _locate(root, 0, line_number)
    if found is None or found[0] is None:
        return None
    return found[0], found[1]


# ── Mutation ──────────────────────────────────────────────────


def insert_child(root: TaskItem, line_number: int, item: TaskItem) -> bool:
    """Append *item* to the category at *line_number*. False if not a category."""
    target = resolve(root, line_number)
    if not isinstance(target, Category):
        return False
    target.children.append(item)
    logger.debug("Inserted %r under line %d", item.name, line_number)
    return True


def remove_at(root: TaskItem, line_number: int) -> TaskItem | None:
    """Splice the node at *line_number* out of its parent; returns it."""
    found = resolve_parent(root, line_number)
    if found is None:
        return None
    parent, index = found
    removed = parent.children.pop(index)
    logger.debug("Removed %r from line %d", removed.name, line_number)
    return removed


def toggle_at(root: TaskItem, line_number: int) -> bool:
    """Flip ``done`` on the task at *line_number*. Categories are left alone."""
    target = resolve(root, line_number)
    if not isinstance(target, Task):
        return False
    target.done = not target.done
    return True
