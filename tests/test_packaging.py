"""
Tests for the distribution metadata in pyproject.toml.
"""
from pathlib import Path

import pytest

tomllib = pytest.importorskip("tomllib")

PYPROJECT = Path(__file__).resolve().parents[1] / "pyproject.toml"


def test_only_packages_are_installed():
    data = tomllib.loads(PYPROJECT.read_text(encoding="utf-8"))

    assert "py-modules" not in data["tool"]["setuptools"]
    assert data["project"]["scripts"]["helix"] == "cli.main:run"
