"""Batch coordinator for running link operations over many skills."""
import logging
from enum import Enum
from typing import Iterable, Optional

from ccskill.core.errors import CcSkillError
from ccskill.core.linker import SkillLinker
from ccskill.core.paths import ScopePaths
from ccskill.core.scanner import require_source_root
from ccskill.models.result import BatchResult, OperationAction, OperationResult
from ccskill.models.skill import SkillScope

logger = logging.getLogger(__name__)


class BatchOperation(str, Enum):
    """Operation applied to every skill in a batch."""

    INSTALL = "install"
    UNINSTALL = "uninstall"


def run_batch(
    names: Iterable[str],
    scope: SkillScope,
    operation: BatchOperation,
    paths: ScopePaths,
    linker: Optional[SkillLinker] = None,
) -> BatchResult:
    """
    Install or uninstall skills one by one, in order.

    A failing item is recorded and the batch moves on to the next one.

    Args:
        names: Skill names in processing order
        scope: Target scope
        operation: Install or uninstall
        paths: Source root and scope directories
        linker: Linker to use (default: a SkillLinker over ``paths``)

    Returns:
        BatchResult with one OperationResult per name

    Raises:
        SourceNotFoundError: If the source root does not exist
    """
    # Fail before any mutation when the source root is unusable
    require_source_root(paths)

    if linker is None:
        linker = SkillLinker(paths)

    batch = BatchResult()

    for name in names:
        try:
            if operation == BatchOperation.INSTALL:
                result = linker.install(name, scope)
            else:
                result = linker.uninstall(name, scope)
        except CcSkillError as e:
            logger.warning("%s", e)
            result = OperationResult(
                name=name,
                scope=scope,
                action=OperationAction.FAILED,
                detail=str(e),
            )
        except OSError as e:
            # Unreadable source or scope directory while resolving this item
            logger.warning("Failed to %s skill '%s': %s", operation.value, name, e)
            result = OperationResult(
                name=name,
                scope=scope,
                action=OperationAction.FAILED,
                detail=f"Failed to {operation.value} skill '{name}': {e}",
            )

        batch.add(result)

    logger.debug(
        "Batch %s finished: %d succeeded, %d failed",
        operation.value, batch.succeeded, batch.failed,
    )
    return batch
