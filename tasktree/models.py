"""Typed dataclasses for the tasktree data model.

A list is a tree of ``TaskItem`` values: a ``Task`` leaf or a ``Category``
owning an ordered list of children. On disk every item is wrapped in a
single-key mapping naming its variant::

    {"TaskCategory": {"name": "root", "child": [{"Task": {"name": "x", "done": false}}]}}

``child`` in JSON is mapped to ``children`` in Python.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Union


TASK_TAG = "Task"
CATEGORY_TAG = "TaskCategory"


@dataclass
class Task:
    """A leaf item with a done flag."""

    name: str = ""
    done: bool = False

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> Task:
        return cls(name=str(d.get("name", "")), done=bool(d.get("done", False)))

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "done": self.done}


@dataclass
class Category:
    """An internal node; children keep insertion order."""

    name: str = ""
    children: list[TaskItem] = field(default_factory=list)

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> Category:
        raw = d.get("child", [])
        if not isinstance(raw, list):
            raise ValueError(f"Category 'child' must be a list, got {type(raw).__name__}")
        return cls(name=str(d.get("name", "")), children=[item_from_dict(c) for c in raw])

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "child": [item_to_dict(c) for c in self.children]}


TaskItem = Union[Task, Category]


def new_root() -> Category:
    """The empty list every session falls back to."""
    return Category(name="root")


def item_from_dict(data: Any) -> TaskItem:
    """Decode one tagged item. Raises ValueError on anything malformed."""
    if not isinstance(data, dict) or len(data) != 1:
        raise ValueError(f"Expected a single-key tagged item, got {data!r:.80}")
    tag, body = next(iter(data.items()))
    if not isinstance(body, dict):
        raise ValueError(f"Body of {tag!r} must be a mapping")
    if tag == TASK_TAG:
        return Task.from_dict(body)
    if tag == CATEGORY_TAG:
        return Category.from_dict(body)
    raise ValueError(f"Unknown item kind: {tag!r}")


def item_to_dict(item: TaskItem) -> dict[str, Any]:
    if isinstance(item, Task):
        return {TASK_TAG: item.to_dict()}
    return {CATEGORY_TAG: item.to_dict()}
