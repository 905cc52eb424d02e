"""Reading list/settings files and replacing list files in one step.

A list file is either the previous save or the new one, never half of
each: the JSON goes to a sibling temp file that is locked, fsynced and
renamed over the target.
"""

from __future__ import annotations

import fcntl
import json
import os
import tempfile
from pathlib import Path
from typing import Any

import yaml


def read_text(path: Path) -> str:
    """File contents, or "" when there is no such file."""
    return path.read_text(encoding="utf-8") if path.exists() else ""


def read_json(path: Path) -> Any:
    """Decoded JSON document; None for a missing or whitespace-only file."""
    text = read_text(path)
    return json.loads(text) if text.strip() else None


def read_yaml(path: Path) -> dict[str, Any]:
    """Top-level YAML mapping; {} for a missing, blank or non-mapping file."""
    text = read_text(path)
    if not text.strip():
        return {}
    loaded = yaml.safe_load(text)
    return loaded if isinstance(loaded, dict) else {}


def write_json_atomic(path: Path, data: Any) -> None:
    """Replace *path* with *data* as indented JSON."""
    payload = json.dumps(data, indent=2, ensure_ascii=False) + "\n"
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.stem}.", suffix=".json")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as out:
            fcntl.flock(out.fileno(), fcntl.LOCK_EX)
            try:
                out.write(payload)
                out.flush()
                os.fsync(out.fileno())
            finally:
                fcntl.flock(out.fileno(), fcntl.LOCK_UN)
        os.replace(tmp_name, path)
    except BaseException:
        if os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise
