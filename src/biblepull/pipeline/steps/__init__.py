"""Pipeline steps for passage conversion."""

from .assemble import AssembleStep
from .extract import ExtractStep, ReflowStep, WindowStep
from .load import LoadStep
from .transcode import TranscodeStep

__all__ = [
    "AssembleStep",
    "ExtractStep",
    "LoadStep",
    "ReflowStep",
    "TranscodeStep",
    "WindowStep",
]
