"""Biblepull configuration, document and event models."""

from .config import DEFAULT_VERSION, NetworkConfig, PassageOptions
from .document import ExtractedDocument, TranscodedDocument
from .events import ConversionEvent, EventType

__all__ = [
    # Config
    "DEFAULT_VERSION",
    "NetworkConfig",
    "PassageOptions",
    # Document
    "ExtractedDocument",
    "TranscodedDocument",
    # Events
    "ConversionEvent",
    "EventType",
]
