"""
Failure Policy Enum.

What a handler chain does when one of its stages raises.
"""
from enum import Enum


class FailurePolicy(str, Enum):
    """Chain behaviour on stage failure."""

    ABORT = "abort"
    CONTINUE = "continue"
