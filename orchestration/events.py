"""Orchestration events - Event, EventMetadata."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class EventMetadata:
    """Metadata for an event."""

    execution_id: str
    stage: str
    timestamp: datetime


@dataclass
class Event:
    """Something that happened while an order moved through a chain."""

    name: str
    payload: dict[str, object]
    metadata: EventMetadata
