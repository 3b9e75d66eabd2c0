"""Result models for link operations and batches."""
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List, Optional

from ccskill.models.skill import SkillScope


class OperationAction(str, Enum):
    """Outcome of a single install or uninstall."""

    INSTALLED = "installed"
    REMOVED = "removed"
    ALREADY_SATISFIED = "already-satisfied"
    NOT_FOUND = "not-found"
    FAILED = "failed"


@dataclass
class OperationResult:
    """Per-skill outcome of a link operation."""

    name: str
    scope: Optional[SkillScope]
    action: OperationAction
    detail: Optional[str] = None
    path: Optional[Path] = None

    @property
    def success(self) -> bool:
        """Whether the outcome counts towards the success total."""
        return self.action not in (OperationAction.NOT_FOUND, OperationAction.FAILED)

    @property
    def removed(self) -> bool:
        return self.action == OperationAction.REMOVED


@dataclass
class BatchResult:
    """Ordered per-item outcomes with running counters."""

    results: List[OperationResult] = field(default_factory=list)
    succeeded: int = 0
    failed: int = 0

    def add(self, result: OperationResult) -> None:
        """Record one outcome and update the counters."""
        self.results.append(result)
        if result.success:
            self.succeeded += 1
        else:
            self.failed += 1

    @property
    def ok(self) -> bool:
        """True when no item failed."""
        return self.failed == 0

    @property
    def partial(self) -> bool:
        """True when some items failed and some succeeded."""
        return self.failed > 0 and self.succeeded > 0
