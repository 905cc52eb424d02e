"""Tree builders shared across tests."""

from __future__ import annotations

from tasktree.models import Category, Task


def build_sample_tree() -> Category:
    """
    0 root
    1     Work
    2         Ship ☐
    3         Review ☑
    4     Home
    5         Garden
    6             Weed ☐
    7         Laundry ☐
    8     Call mum ☐
    """
    return Category("root", [
        Category("Work", [Task("Ship"), Task("Review", done=True)]),
        Category("Home", [
            Category("Garden", [Task("Weed")]),
            Task("Laundry"),
        ]),
        Task("Call mum"),
    ])
