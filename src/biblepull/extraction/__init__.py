"""Passage window, block and field extraction."""

from .dialects import DEFAULT_DETECTORS, FieldDetector, FieldMode, MarkupDialect
from .fields import FieldExtractor
from .reflow import BLOCK_CLOSERS, reflow, split_blocks
from .window import WindowExtractor

__all__ = [
    "BLOCK_CLOSERS",
    "DEFAULT_DETECTORS",
    "FieldDetector",
    "FieldExtractor",
    "FieldMode",
    "MarkupDialect",
    "WindowExtractor",
    "reflow",
    "split_blocks",
]
