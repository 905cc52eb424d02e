"""Load and save task lists as JSON files in the workspace."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from tasktree.fileio import read_json, write_json_atomic
from tasktree.models import TaskItem, item_from_dict, item_to_dict, new_root
from tasktree.workspace import list_path


logger = logging.getLogger(__name__)


def load_tree(name: str | None = None, root: Path | None = None) -> TaskItem:
    """Load a list, or a fresh empty root when the file is missing or bad."""
    path = list_path(name, root)
    try:
        data = read_json(path)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        logger.warning("Could not read %s (%s); starting an empty list", path, e)
        return new_root()
    if data is None:
        logger.info("No saved list at %s; starting an empty list", path)
        return new_root()
    try:
        item = item_from_dict(data)
    except (ValueError, TypeError, RecursionError) as e:
        logger.warning("Malformed list in %s (%s); starting an empty list", path, e)
        return new_root()
    logger.info("Loaded list from %s", path)
    return item


def save_tree(item: TaskItem, name: str | None = None, root: Path | None = None) -> Path:
    """Write a list back to its file atomically. Raises OSError on failure."""
    path = list_path(name, root)
    write_json_atomic(path, item_to_dict(item))
    logger.info("Saved list to %s", path)
    return path
