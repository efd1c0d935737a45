"""Shared fixtures for phylo tests."""

from pathlib import Path

import pytest


def build_tree(base: Path, spec: dict) -> Path:
    """Create files and directories under ``base`` from a nested dict.

    Dict values become directories, string values become file contents.
    """
    base.mkdir(parents=True, exist_ok=True)
    for name, value in spec.items():
        path = base / name
        if isinstance(value, dict):
            build_tree(path, value)
        else:
            path.write_text(value)
    return base


@pytest.fixture
def make_tree(tmp_path):
    """Factory fixture: ``make_tree({'a.txt': '', 'sub': {...}})``."""
    def make(spec: dict, name: str = 'root') -> Path:
        return build_tree(tmp_path / name, spec)
    return make


@pytest.fixture
def simple_tree(make_tree):
    """root/{a.txt, sub/{b.txt}}"""
    return make_tree({'a.txt': 'a', 'sub': {'b.txt': 'b'}})
