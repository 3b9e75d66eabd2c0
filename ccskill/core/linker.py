"""Skill linker for linking skills into scope directories."""
import logging

from ccskill.core.errors import LinkFailedError, SkillNotFoundError, UnlinkFailedError
from ccskill.core.paths import ScopePaths, is_valid_skill_name
from ccskill.core.resolver import locate
from ccskill.core.scanner import scan
from ccskill.models.result import OperationAction, OperationResult
from ccskill.models.skill import Skill, SkillScope

logger = logging.getLogger(__name__)


class SkillLinker:
    """Create and remove skill links in the global and local scopes."""

    def __init__(self, paths: ScopePaths):
        """
        Initialize skill linker.

        Args:
            paths: Source root and scope directories
        """
        self.paths = paths

    def get_skill(self, name: str) -> Skill:
        """
        Look up a skill under the source root.

        Raises:
            SourceNotFoundError: If the source root does not exist
            SkillNotFoundError: If no skill directory has this name
        """
        if not is_valid_skill_name(name):
            raise SkillNotFoundError(name, self.paths.source_root)

        skill = scan(self.paths).get(name)
        if skill is None:
            raise SkillNotFoundError(name, self.paths.source_root)
        return skill

    def install(self, name: str, scope: SkillScope) -> OperationResult:
        """
        Link a skill into a scope directory.

        A skill already linked in either scope is left alone.

        Args:
            name: Skill name
            scope: Target scope

        Returns:
            OperationResult with action installed, already-satisfied or not-found

        Raises:
            LinkFailedError: If the scope directory or link cannot be created
        """
        try:
            skill = self.get_skill(name)
        except SkillNotFoundError as e:
            logger.info("%s", e)
            return OperationResult(
                name=name,
                scope=scope,
                action=OperationAction.NOT_FOUND,
                detail=str(e),
            )

        location = locate(name, self.paths)
        if location.installed:
            return OperationResult(
                name=name,
                scope=location.scope,
                action=OperationAction.ALREADY_SATISFIED,
                detail=f"already installed ({location.scope.value})",
                path=location.path,
            )

        link_path = self.paths.scope_dir(scope) / name

        try:
            link_path.parent.mkdir(parents=True, exist_ok=True)
            link_path.symlink_to(skill.path, target_is_directory=True)
        except OSError as e:
            raise LinkFailedError(name, link_path, e) from e

        logger.info("Linked %s -> %s", link_path, skill.path)
        return OperationResult(
            name=name,
            scope=scope,
            action=OperationAction.INSTALLED,
            path=link_path,
        )

    def uninstall(self, name: str, scope: SkillScope) -> OperationResult:
        """
        Remove a skill link.

        The link removed is the one the resolver reports, so a local link is
        removed before a global one regardless of the requested scope.

        Args:
            name: Skill name
            scope: Requested scope

        Returns:
            OperationResult with action removed, already-satisfied, not-found
            (invalid name) or failed (local directory that is not a link)

        Raises:
            UnlinkFailedError: If the link cannot be removed
        """
        if not is_valid_skill_name(name):
            return OperationResult(
                name=name,
                scope=scope,
                action=OperationAction.NOT_FOUND,
                detail=f"Invalid skill name: '{name}'",
            )

        location = locate(name, self.paths)
        if not location.installed:
            return OperationResult(
                name=name,
                scope=scope,
                action=OperationAction.ALREADY_SATISFIED,
                detail="not installed",
            )

        # Manual installs are never deleted
        if not location.symlink:
            return OperationResult(
                name=name,
                scope=location.scope,
                action=OperationAction.FAILED,
                detail=f"{location.path} is a directory, not a link; remove it manually",
                path=location.path,
            )

        if location.scope != scope:
            logger.info(
                "Skill '%s' requested in %s scope but linked in %s scope",
                name, scope.value, location.scope.value,
            )

        try:
            location.path.unlink()
        except OSError as e:
            raise UnlinkFailedError(name, location.path, e) from e

        logger.info("Removed link %s", location.path)
        return OperationResult(
            name=name,
            scope=location.scope,
            action=OperationAction.REMOVED,
            path=location.path,
        )
