"""Packaging metadata — the project readme is the user-facing README."""

import tomllib
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent


def test_readme_is_project_readme():
    project = tomllib.loads((ROOT / "pyproject.toml").read_text())["project"]
    assert project["readme"] == "README.md"
    assert "album" in (ROOT / project["readme"]).read_text().lower()
