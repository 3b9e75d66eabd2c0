"""Pytest configuration and shared fixtures."""
import pytest
from pathlib import Path

from ccskill.core.paths import ScopePaths


@pytest.fixture
def source_root(tmp_path) -> Path:
    """Return a source directory with skills a, b, c and some non-skills."""
    root = tmp_path / "skills"
    root.mkdir()
    for name in ("skill-a", "skill-b", "skill-c"):
        (root / name).mkdir()
        (root / name / "SKILL.md").write_text(f"# {name}\n")

    # Not skills
    (root / ".git").mkdir()
    (root / "node_modules").mkdir()
    (root / "README.md").write_text("# Skills\n")
    return root


@pytest.fixture
def paths(tmp_path, source_root) -> ScopePaths:
    """Return scope paths rooted in a temporary home and project."""
    return ScopePaths(
        source_root=source_root,
        global_dir=tmp_path / "home" / ".claude" / "skills",
        local_dir=tmp_path / "project" / ".claude" / "skills",
    )


@pytest.fixture
def sample_skillsets_yaml() -> str:
    """Return a valid skillsets.yaml content."""
    return """writing:
  - skill-c
  - skill-a
  - skill-b

partial: [skill-a, missing-skill, skill-c]

empty:
"""
