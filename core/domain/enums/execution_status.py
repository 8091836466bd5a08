"""
Execution Status Enum.

Outcome of running an order through a handler chain.
"""
from enum import Enum


class ExecutionStatus(str, Enum):
    """Execution status values."""

    SUCCESS = "success"
    FAILED = "failed"
    PARTIAL = "partial"
