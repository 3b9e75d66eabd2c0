"""Scope resolver answering whether and where a skill is linked."""
import logging

from ccskill.core.paths import ScopePaths, is_valid_skill_name
from ccskill.models.skill import ScopeLocation, SkillScope

logger = logging.getLogger(__name__)

# Lookup order: local links shadow global ones
SCOPE_PRECEDENCE = (SkillScope.LOCAL, SkillScope.GLOBAL)


def locate(name: str, paths: ScopePaths) -> ScopeLocation:
    """
    Find the authoritative link for a skill.

    Symbolic links count in both scopes; a dangling link is still reported so
    that it can be removed. In local scope a plain directory also counts, as a
    manual install, and is reported with ``symlink=False``. Names that are not
    a single path component are never installed.

    Args:
        name: Skill name
        paths: Source root and scope directories

    Returns:
        ScopeLocation for the first scope holding an entry named ``name``

    Raises:
        OSError: If a scope directory cannot be searched
    """
    if not is_valid_skill_name(name):
        return ScopeLocation(installed=False)

    for scope in SCOPE_PRECEDENCE:
        entry = paths.scope_dir(scope) / name
        if entry.is_symlink():
            logger.debug("Skill '%s' is linked in %s scope: %s", name, scope.value, entry)
            return ScopeLocation(installed=True, scope=scope, path=entry)
        if scope == SkillScope.LOCAL and entry.is_dir():
            logger.debug("Skill '%s' is installed as a local directory: %s", name, entry)
            return ScopeLocation(installed=True, scope=scope, path=entry, symlink=False)

    return ScopeLocation(installed=False)
