"""Directory configuration shared by every core component."""
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from ccskill.models.skill import SkillScope

# Scope directory relative to the home directory or the project root
SKILLS_SUBDIR = Path(".claude") / "skills"

# Skill set document kept in the source root
SKILLSETS_FILENAME = "skillsets.yaml"


@dataclass(frozen=True)
class ScopePaths:
    """Source root plus the two scope directories skills are linked into."""

    source_root: Path
    global_dir: Path
    local_dir: Path

    def __post_init__(self) -> None:
        """Normalize string paths to absolute Path objects."""
        for attr in ("source_root", "global_dir", "local_dir"):
            value = Path(getattr(self, attr)).expanduser().absolute()
            object.__setattr__(self, attr, value)

    @classmethod
    def from_environment(
        cls,
        source_root: Union[str, Path],
        home: Optional[Union[str, Path]] = None,
        cwd: Optional[Union[str, Path]] = None,
    ) -> "ScopePaths":
        """
        Build paths from the process environment.

        Args:
            source_root: Directory holding the skill directories
            home: Home directory override (default: $HOME)
            cwd: Project directory override (default: current directory)

        Returns:
            ScopePaths with global and local scope directories resolved
        """
        if home is None:
            home = os.environ.get("HOME") or Path.home()
        if cwd is None:
            cwd = Path.cwd()

        return cls(
            source_root=Path(source_root),
            global_dir=Path(home) / SKILLS_SUBDIR,
            local_dir=Path(cwd) / SKILLS_SUBDIR,
        )

    def scope_dir(self, scope: SkillScope) -> Path:
        """Directory for the given scope."""
        if scope == SkillScope.GLOBAL:
            return self.global_dir
        return self.local_dir

    @property
    def skillsets_file(self) -> Path:
        """Skill set document inside the source root."""
        return self.source_root / SKILLSETS_FILENAME


def is_valid_skill_name(name: str) -> bool:
    """Whether ``name`` is a single path component usable inside a scope directory."""
    if not name or name in (".", ".."):
        return False
    if "\0" in name:
        return False
    separators = {"/", os.sep} | ({os.altsep} if os.altsep else set())
    return not any(sep in name for sep in separators)
