"""
biblepull - Look up a Bible passage and convert it to Markdown.

Usage:
    from biblepull import PassageConverter, PassageOptions

    options = PassageOptions(version="NET", boldwords=True)

    with PassageConverter(options) as converter:
        ctx = converter.convert("John 3:16-21")

    print(ctx.markdown)
"""

__version__ = "1.0.0"

from .core.converter import PassageConverter, convert_passage
from .errors import (
    BiblepullError,
    EmptySourceError,
    FetchError,
    NoPassageFoundError,
    SourceReadError,
)
from .models.config import NetworkConfig, PassageOptions
from .models.events import ConversionEvent, EventType

__all__ = [
    "__version__",
    # Core
    "PassageConverter",
    "convert_passage",
    # Config
    "NetworkConfig",
    "PassageOptions",
    # Events
    "ConversionEvent",
    "EventType",
    # Errors
    "BiblepullError",
    "EmptySourceError",
    "FetchError",
    "NoPassageFoundError",
    "SourceReadError",
]
