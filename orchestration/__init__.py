"""Orchestration layer - order handler chains with eventing."""

from .bus import EventBusProtocol, InMemoryEventBus
from .events import Event, EventMetadata
from .handlers import OrderHandler, StageProcess
from .models import ChainResult, StageResult
from .stages import (
    DEFAULT_STAGES,
    STAGE_MESSAGES,
    build_default_chain,
    link,
    make_stage,
    status_stage,
)

__all__ = [
    "ChainResult",
    "DEFAULT_STAGES",
    "Event",
    "EventBusProtocol",
    "EventMetadata",
    "InMemoryEventBus",
    "OrderHandler",
    "STAGE_MESSAGES",
    "StageProcess",
    "StageResult",
    "build_default_chain",
    "link",
    "make_stage",
    "status_stage",
]
