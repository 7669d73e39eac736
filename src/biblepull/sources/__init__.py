"""Sources of passage page lines (HTTP and local files)."""

from .file_loader import FileLineSource, load_lines
from .http_client import PassageHttpClient
from .protocols import LineSource

__all__ = [
    "FileLineSource",
    "LineSource",
    "PassageHttpClient",
    "load_lines",
]
