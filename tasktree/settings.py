"""User settings loaded from settings.yaml in the workspace root.

Every key is optional. Bad values fall back to the defaults rather than
stopping the app from starting.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from tasktree.fileio import read_yaml
from tasktree.tree import OutlineStyle
from tasktree.workspace import settings_path


LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


@dataclass
class Settings:
    indent: int = 4
    done_marker: str = "☑"
    todo_marker: str = "☐"
    log_level: str = "INFO"

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> Settings:
        if not d or not isinstance(d, dict):
            return cls()
        defaults = cls()

        indent = d.get("indent", defaults.indent)
        if isinstance(indent, bool) or not isinstance(indent, int) or indent < 0:
            indent = defaults.indent

        done = d.get("done_marker", defaults.done_marker)
        todo = d.get("todo_marker", defaults.todo_marker)
        if not isinstance(done, str) or not isinstance(todo, str) or not done or not todo or done == todo:
            done, todo = defaults.done_marker, defaults.todo_marker

        level = str(d.get("log_level", defaults.log_level)).upper()
        if level not in LOG_LEVELS:
            level = defaults.log_level

        return cls(indent=indent, done_marker=done, todo_marker=todo, log_level=level)

    def to_dict(self) -> dict[str, Any]:
        return {
            "indent": self.indent,
            "done_marker": self.done_marker,
            "todo_marker": self.todo_marker,
            "log_level": self.log_level,
        }

    def outline_style(self) -> OutlineStyle:
        return OutlineStyle(
            indent=" " * self.indent,
            done_marker=self.done_marker,
            todo_marker=self.todo_marker,
        )


def load_settings(root: Path | None = None) -> Settings:
    """Load settings.yaml, defaulting everything if it is missing or unreadable."""
    try:
        return Settings.from_dict(read_yaml(settings_path(root)))
    except Exception:
        logging.getLogger(__name__).warning("Ignoring unreadable settings file", exc_info=True)
        return Settings()
