"""Skill catalog scanner for discovering skills under the source root."""
import logging
from pathlib import Path
from typing import Dict

from ccskill.core.errors import SourceNotFoundError
from ccskill.core.paths import ScopePaths
from ccskill.core.resolver import locate
from ccskill.models.skill import LinkStatus, Skill, SkillScope

logger = logging.getLogger(__name__)

# Directories under the source root that are never skills
RESERVED_NAMES = frozenset({"node_modules", "__pycache__"})


def is_skill_dir(path: Path) -> bool:
    """Whether a source root entry is a candidate skill directory."""
    if path.name.startswith(".") or path.name in RESERVED_NAMES:
        return False
    # Symlinks inside the source root are not skills themselves
    return not path.is_symlink() and path.is_dir()


def require_source_root(paths: ScopePaths) -> Path:
    """
    Check that the source root exists.

    Raises:
        SourceNotFoundError: If the source root is missing or not a directory
    """
    if not paths.source_root.is_dir():
        raise SourceNotFoundError(paths.source_root)
    return paths.source_root


def scan(paths: ScopePaths) -> Dict[str, Skill]:
    """
    Enumerate skills under the source root with their link status.

    Link status comes from the scope resolver, so local entries (links or
    manually copied directories) shadow global links.

    Args:
        paths: Source root and scope directories

    Returns:
        Mapping of skill name to Skill, ordered by name

    Raises:
        SourceNotFoundError: If the source root does not exist
    """
    source_root = require_source_root(paths)
    skills: Dict[str, Skill] = {}

    for entry in sorted(source_root.iterdir(), key=lambda p: p.name):
        if not is_skill_dir(entry):
            continue

        skill = Skill(name=entry.name, path=source_root / entry.name)
        location = locate(entry.name, paths)
        if location.scope == SkillScope.LOCAL:
            skill.status = LinkStatus.LINKED_LOCAL
        elif location.scope == SkillScope.GLOBAL:
            skill.status = LinkStatus.LINKED_GLOBAL

        skills[skill.name] = skill

    logger.debug("Scanned %d skill(s) in %s", len(skills), source_root)
    return skills
