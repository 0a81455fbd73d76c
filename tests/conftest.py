"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from tests.helpers import REACT_MANIFEST, REACT_README, make_npm_package


@pytest.fixture
def react_project(tmp_path: Path) -> Path:
    """A project with react installed under node_modules."""
    make_npm_package(tmp_path, "react", REACT_MANIFEST, REACT_README)
    return tmp_path
