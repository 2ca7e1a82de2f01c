"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest
from rich.logging import RichHandler


@pytest.fixture(autouse=True)
def restore_root_logger() -> Iterator[None]:
    """Undo the handler and level changes made by CLI invocations."""
    root = logging.getLogger()
    level = root.level
    before = list(root.handlers)
    yield
    root.setLevel(level)
    for handler in list(root.handlers):
        if isinstance(handler, RichHandler) and handler not in before:
            root.removeHandler(handler)


@pytest.fixture(autouse=True)
def isolated_config(
    tmp_path_factory: pytest.TempPathFactory, monkeypatch: pytest.MonkeyPatch
) -> Path:
    """Point XDG_CONFIG_HOME at an empty directory so user config never leaks in."""
    config_home = tmp_path_factory.mktemp("xdg-config")
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    return config_home


@pytest.fixture
def tree(tmp_path: Path) -> Path:
    """Create a small directory tree for glob tests.

    Layout::

        a.txt
        b.txt
        c.md
        x.txt
        .secret
        docs/
            guide.md
            x.txt
        sub/
            x.txt
            notes.TXT
            sub2/
                x.txt
                deep.py
        .hidden/
            x.txt
    """
    for rel in (
        "a.txt",
        "b.txt",
        "c.md",
        "x.txt",
        ".secret",
        "docs/guide.md",
        "docs/x.txt",
        "sub/x.txt",
        "sub/notes.TXT",
        "sub/sub2/x.txt",
        "sub/sub2/deep.py",
        ".hidden/x.txt",
    ):
        path = tmp_path / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(rel)
    return tmp_path
