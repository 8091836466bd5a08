"""Domain enums."""

from .execution_status import ExecutionStatus
from .failure_policy import FailurePolicy

__all__ = [
    "ExecutionStatus",
    "FailurePolicy",
]
