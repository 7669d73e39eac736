"""Pipeline architecture for passage conversion."""

from .base import EventEmitter, PassageContext, PassagePipeline, PipelineStep

__all__ = ["EventEmitter", "PassageContext", "PassagePipeline", "PipelineStep"]
