"""Exceptions raised by the skill linking core."""
from pathlib import Path
from typing import List, Optional


class CcSkillError(Exception):
    """Base class for all cc-skill errors."""


class NotFoundError(CcSkillError):
    """A source root or named skill does not exist."""


class SourceNotFoundError(NotFoundError):
    """The source root directory is missing."""

    def __init__(self, path: Path):
        super().__init__(f"Skill source directory not found: {path}")
        self.path = path


class SkillNotFoundError(NotFoundError):
    """A skill name has no directory under the source root."""

    def __init__(self, name: str, source_root: Path):
        super().__init__(f"Skill '{name}' not found in {source_root}")
        self.name = name
        self.source_root = source_root


class ConfigError(CcSkillError):
    """Base class for skill set configuration errors."""


class ConfigMissingError(ConfigError):
    """The skill set document does not exist."""

    def __init__(self, path: Path):
        super().__init__(f"Skill set file not found: {path}")
        self.path = path


class ConfigInvalidError(ConfigError):
    """The skill set document cannot be parsed or has the wrong shape."""


class SetNotFoundError(ConfigError):
    """The requested set name is not defined."""

    def __init__(self, set_name: str, available: Optional[List[str]] = None):
        self.set_name = set_name
        self.available = available or []
        message = f"Skill set '{set_name}' not found"
        if self.available:
            message += f" (available: {', '.join(self.available)})"
        super().__init__(message)


class LinkError(CcSkillError):
    """A filesystem mutation on a scope directory failed."""

    verb = "link"

    def __init__(self, name: str, path: Path, cause: OSError):
        super().__init__(f"Failed to {self.verb} skill '{name}' at {path}: {cause}")
        self.name = name
        self.path = path
        self.cause = cause


class LinkFailedError(LinkError):
    """Creating a skill link failed."""

    verb = "link"


class UnlinkFailedError(LinkError):
    """Removing a skill link failed."""

    verb = "unlink"
