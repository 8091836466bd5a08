"""Orchestration models - StageResult, ChainResult."""

from dataclasses import dataclass, field
from datetime import datetime

from core.domain.enums.execution_status import ExecutionStatus
from core.domain.exceptions import ProcessingError
from core.domain.value_objects import ExecutionID


@dataclass
class StageResult:
    """Result of one handler stage."""

    name: str
    success: bool
    duration_ms: int
    error: ProcessingError | None = None


@dataclass
class ChainResult:
    """Result of running one order through a handler chain."""

    execution_id: ExecutionID
    status: ExecutionStatus
    started_at: datetime
    finished_at: datetime
    stages: list[StageResult] = field(default_factory=list)

    @property
    def succeeded(self) -> bool:
        return self.status == ExecutionStatus.SUCCESS

    @property
    def errors(self) -> list[ProcessingError]:
        """Errors of the failed stages, in chain order."""
        return [stage.error for stage in self.stages if stage.error is not None]

    def raise_for_status(self) -> None:
        """Raise the first stage error, if any stage failed."""
        errors = self.errors
        if errors:
            raise errors[0]
