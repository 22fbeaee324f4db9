"""Shared fixtures for README Generator tests."""

import json

import pytest


def write_tree(root, files):
    """Create files under root. Keys ending in '/' are empty directories."""
    for rel, content in files.items():
        target = root / rel
        if rel.endswith("/"):
            target.mkdir(parents=True, exist_ok=True)
            continue
        target.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, (dict, list)):
            content = json.dumps(content)
        target.write_text(content, encoding="utf-8")
    return root


@pytest.fixture
def make_project(tmp_path):
    """Factory: make_project({"src/index.js": "", ...}) -> project path."""
    def _make(files=None, name="demo-project"):
        root = tmp_path / name
        root.mkdir()
        return write_tree(root, files or {})
    return _make


@pytest.fixture
def node_project(make_project):
    """The package.json scenario: name, version, license and one script."""
    return make_project({
        "package.json": {
            "name": "foo",
            "version": "1.0.0",
            "license": "MIT",
            "scripts": {"test": "jest"},
        },
    })
