"""tasktree entry point.

Usage:
    tasktree              # edit the default list ("Main")
    tasktree groceries    # edit lists/groceries.json, titled "groceries"
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from tasktree import __version__
from tasktree.settings import Settings, load_settings
from tasktree.storage import load_tree, save_tree
from tasktree.workspace import list_title, log_path, workspace_root


logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="tasktree",
        description="Hierarchical task list in the terminal",
    )
    parser.add_argument(
        "name",
        nargs="?",
        default=None,
        help="List to open; also used as the title (default: the main list)",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"tasktree {__version__}",
    )
    return parser.parse_args(argv)


def configure_logging(settings: Settings, root: Path) -> logging.Handler:
    """Send package logs to a file; the terminal belongs to the TUI."""
    path = log_path(root)
    path.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(path, encoding="utf-8")
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    package_logger = logging.getLogger("tasktree")
    package_logger.setLevel(settings.log_level)
    package_logger.addHandler(handler)
    return handler


def run(name: str | None = None, root: Path | None = None) -> int:
    """Load a list, run the TUI over it, save it. Returns the exit code."""
    from tasktree.app import TaskTreeApp

    if root is None:
        root = workspace_root()
    settings = load_settings(root)
    handler = configure_logging(settings, root)
    try:
        tree = load_tree(name, root)
        app = TaskTreeApp(tree, title=list_title(name), style=settings.outline_style())
        result = app.run()
        if result is None:
            result = app.controller.root

        try:
            save_tree(result, name, root)
        except OSError as e:
            logger.exception("Saving list failed")
            print(f"Error saving list: {e}")
            return 1
        print("List saved.")
        return 0
    finally:
        logging.getLogger("tasktree").removeHandler(handler)
        handler.close()


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    sys.exit(run(args.name))


if __name__ == "__main__":
    main()
