"""Link checker for verifying entries in the scope directories."""
import os
from dataclasses import dataclass
from pathlib import Path
from typing import List, Literal, Optional

from ccskill.core.paths import ScopePaths
from ccskill.models.skill import SkillScope


@dataclass
class CheckResult:
    """Health of a single entry in a scope directory."""

    skill_name: str
    scope: SkillScope
    status: Literal["ok", "broken_symlink", "unmanaged"]
    path: Path
    target: Optional[Path] = None
    error_message: Optional[str] = None


def check_entry(path: Path, scope: SkillScope) -> CheckResult:
    """
    Check a single scope directory entry.

    Args:
        path: Entry inside a scope directory
        scope: Scope the entry belongs to

    Returns:
        CheckResult with status and details
    """
    if not path.is_symlink():
        return CheckResult(
            skill_name=path.name,
            scope=scope,
            status="unmanaged",
            path=path,
            error_message="Not a symlink (manual install)",
        )

    target = Path(os.readlink(path))

    try:
        resolved = path.resolve(strict=True)
    except (OSError, RuntimeError):
        return CheckResult(
            skill_name=path.name,
            scope=scope,
            status="broken_symlink",
            path=path,
            target=target,
            error_message=f"Symlink target does not exist: {target}",
        )

    if not resolved.is_dir():
        return CheckResult(
            skill_name=path.name,
            scope=scope,
            status="broken_symlink",
            path=path,
            target=resolved,
            error_message=f"Symlink target is not a directory: {resolved}",
        )

    return CheckResult(
        skill_name=path.name,
        scope=scope,
        status="ok",
        path=path,
        target=resolved,
    )


def check_links(paths: ScopePaths) -> List[CheckResult]:
    """
    Check every entry in both scope directories.

    Missing scope directories are skipped.

    Args:
        paths: Source root and scope directories

    Returns:
        CheckResults ordered by scope (global first) then name
    """
    results: List[CheckResult] = []

    for scope in (SkillScope.GLOBAL, SkillScope.LOCAL):
        scope_dir = paths.scope_dir(scope)
        if not scope_dir.is_dir():
            continue
        for entry in sorted(scope_dir.iterdir(), key=lambda p: p.name):
            if entry.name.startswith("."):
                continue
            results.append(check_entry(entry, scope))

    return results
