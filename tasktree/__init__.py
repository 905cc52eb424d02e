"""tasktree core library: task-tree model, addressing and interaction state.

Public API re-exports for convenient imports:
    from tasktree import Category, Task, all_lines, resolve, Controller, ...
"""

__version__ = "0.1.0"

# Models
from tasktree.models import (
    Task,
    Category,
    TaskItem,
    new_root,
    item_from_dict,
    item_to_dict,
)

# Outline & addressing
from tasktree.tree import (
    OutlineStyle,
    DEFAULT_STYLE,
    line_count,
    format_line,
    all_lines,
    resolve,
    resolve_parent,
    insert_child,
    remove_at,
    toggle_at,
)

# Interaction
from tasktree.controller import Controller, InputMode
from tasktree.render import decorate_lines, selection_hint

# Workspace, settings & persistence
from tasktree.workspace import (
    workspace_root,
    list_path,
    list_title,
    settings_path,
    log_path,
)
from tasktree.settings import Settings, load_settings
from tasktree.storage import load_tree, save_tree
