"""Progress events emitted while converting a passage."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Optional


class EventType(str, Enum):
    """Types of events emitted during a conversion run."""

    STARTED = "started"
    SOURCE_LOADED = "source_loaded"
    WINDOW_EXTRACTED = "window_extracted"
    BLOCKS_REFLOWED = "blocks_reflowed"
    FIELDS_EXTRACTED = "fields_extracted"
    PASSAGE_TRANSCODED = "passage_transcoded"
    COMPLETED = "completed"
    FAILED = "failed"


@dataclass
class ConversionEvent:
    """
    Event emitted by a pipeline step.

    Example:
        def report(event: ConversionEvent) -> None:
            if event.is_error:
                print(f"Error: {event.error}")
            else:
                print(event.message)
    """

    type: EventType

    # Timestamp (always UTC)
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    message: Optional[str] = None
    error: Optional[str] = None
    step: Optional[str] = None

    # Size of whatever the step produced (lines, blocks, bytes)
    count: Optional[int] = None

    @property
    def is_error(self) -> bool:
        """Check if this is an error event."""
        return self.type == EventType.FAILED
