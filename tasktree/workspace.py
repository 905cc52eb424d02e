"""Workspace root and path helpers for tasktree."""

from __future__ import annotations

import os
from pathlib import Path


DEFAULT_LIST_NAME = "main_list_0"
DEFAULT_TITLE = "Main"


def workspace_root() -> Path:
    """Get the workspace root directory (contains lists/ and settings.yaml)."""
    return Path(
        os.environ.get("TASKTREE_ROOT", str(Path.home() / ".tasktree"))
    ).expanduser().resolve()


def list_title(name: str | None) -> str:
    """On-screen title for a list; the list name itself when one was given."""
    return name or DEFAULT_TITLE


# ── Path helpers ──────────────────────────────────────────────

def list_path(name: str | None = None, root: Path | None = None) -> Path:
    if root is None:
        root = workspace_root()
    return root / "lists" / f"{name or DEFAULT_LIST_NAME}.json"


def settings_path(root: Path | None = None) -> Path:
    if root is None:
        root = workspace_root()
    return root / "settings.yaml"


def log_path(root: Path | None = None) -> Path:
    if root is None:
        root = workspace_root()
    return root / "tasktree.log"
