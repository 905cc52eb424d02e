"""Shared test fixtures for tasktree tests."""

from __future__ import annotations

import json
import os
from pathlib import Path

import pytest
import yaml

from tasktree.models import Category
from tests.helpers import build_sample_tree


@pytest.fixture
def sample_tree() -> Category:
    return build_sample_tree()


@pytest.fixture
def workspace(tmp_path: Path) -> Path:
    """Create a temporary workspace with one saved list and a settings file."""
    root = tmp_path / "workspace"
    (root / "lists").mkdir(parents=True)

    # Saved default list, in the on-disk tagged format
    main_list = {
        "TaskCategory": {
            "name": "root",
            "child": [
                {"TaskCategory": {"name": "Work", "child": [
                    {"Task": {"name": "Ship", "done": False}},
                ]}},
                {"Task": {"name": "Call mum", "done": True}},
            ],
        }
    }
    (root / "lists" / "main_list_0.json").write_text(
        json.dumps(main_list, indent=2), encoding="utf-8"
    )

    # Settings
    settings = {"indent": 2, "log_level": "debug"}
    (root / "settings.yaml").write_text(
        yaml.dump(settings, default_flow_style=False), encoding="utf-8"
    )

    # Set env var
    os.environ["TASKTREE_ROOT"] = str(root)
    yield root
    # Cleanup
    if "TASKTREE_ROOT" in os.environ:
        del os.environ["TASKTREE_ROOT"]
