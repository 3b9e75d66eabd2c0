"""Data models for skills and their link locations."""
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional


class SkillScope(str, Enum):
    """Scope where a skill is linked."""

    GLOBAL = "global"
    LOCAL = "local"


class LinkStatus(str, Enum):
    """Link status of a skill across both scopes."""

    UNLINKED = "unlinked"
    LINKED_GLOBAL = "linked-global"
    LINKED_LOCAL = "linked-local"


@dataclass
class Skill:
    """A skill directory discovered under the source root."""

    name: str
    path: Path
    status: LinkStatus = LinkStatus.UNLINKED

    @property
    def installed(self) -> bool:
        """Whether the skill is linked in either scope."""
        return self.status != LinkStatus.UNLINKED

    @property
    def scope(self) -> Optional[SkillScope]:
        """Scope of the authoritative link, local shadowing global."""
        if self.status == LinkStatus.LINKED_LOCAL:
            return SkillScope.LOCAL
        if self.status == LinkStatus.LINKED_GLOBAL:
            return SkillScope.GLOBAL
        return None


@dataclass
class ScopeLocation:
    """Where a skill link currently lives, if anywhere."""

    installed: bool
    scope: Optional[SkillScope] = None
    path: Optional[Path] = None
    symlink: bool = True
