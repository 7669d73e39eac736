"""Base classes for the conversion pipeline."""

import logging
from dataclasses import dataclass, field
from typing import Callable, Optional, Protocol, runtime_checkable

from ..errors import BiblepullError
from ..models.config import PassageOptions
from ..models.document import ExtractedDocument, TranscodedDocument
from ..models.events import ConversionEvent, EventType

logger = logging.getLogger(__name__)

# Type alias for event emitter function
EventEmitter = Callable[[ConversionEvent], None]


@dataclass
class PassageContext:
    """
    Context object passed through pipeline steps.

    Holds all state for one conversion run, accumulated as it moves
    through the pipeline. Nothing is shared between runs.

    Attributes:
        reference: Passage reference as requested
        options: Rendering options for this run
        source: Description of where the page came from
        lines: Raw page lines
        window: Content window lines
        blocks: Working blocks
        document: Extracted raw fields
        transcoded: Markdown renditions of the fields
        markdown: Final Markdown document
        error: First error raised by a step, if any
    """

    reference: str
    options: PassageOptions = field(default_factory=PassageOptions)
    source: str = ""

    # Content (accumulated through pipeline)
    lines: list[str] = field(default_factory=list)
    window: list[str] = field(default_factory=list)
    blocks: list[str] = field(default_factory=list)
    document: Optional[ExtractedDocument] = None
    transcoded: Optional[TranscodedDocument] = None
    markdown: Optional[str] = None

    # Status
    error: Optional[BiblepullError] = None

    @property
    def succeeded(self) -> bool:
        return self.error is None and self.markdown is not None


@runtime_checkable
class PipelineStep(Protocol):
    """
    Protocol for pipeline steps.

    Each step receives a PassageContext, fills in its part and returns
    the context.

    Error Handling Contract:
    - Fatal conditions raise a BiblepullError subclass
    - The pipeline records it in ctx.error and stops
    - Any other exception is a bug and propagates
    """

    name: str

    def execute(
        self,
        ctx: PassageContext,
        emit: Optional[EventEmitter] = None,
    ) -> PassageContext:
        """
        Execute this pipeline step.

        Args:
            ctx: The passage context with accumulated state
            emit: Optional callback to emit events

        Returns:
            The (possibly modified) passage context
        """
        ...


@dataclass
class PassagePipeline:
    """
    Sequential pipeline for one passage conversion.

    Each step consumes the complete output of the previous one. If a step
    raises a BiblepullError, it is captured in ctx.error, a FAILED event
    is emitted and no further steps run, so no partial Markdown exists.

    Example:
        pipeline = PassagePipeline(steps=[
            LoadStep(source),
            WindowStep(),
            ReflowStep(),
            ExtractStep(),
            TranscodeStep(),
            AssembleStep(),
        ])

        ctx = pipeline.execute("John 3:16", options)
        if ctx.error:
            logger.error(f"Failed: {ctx.error}")
    """

    steps: list[PipelineStep]

    def execute(
        self,
        reference: str,
        options: Optional[PassageOptions] = None,
        emit: Optional[EventEmitter] = None,
    ) -> PassageContext:
        """
        Execute the pipeline for a reference.

        Args:
            reference: The passage to convert
            options: Rendering options (defaults if None)
            emit: Optional callback for emitting events

        Returns:
            PassageContext with final state (check error for status)
        """
        ctx = PassageContext(reference=reference, options=options or PassageOptions())

        if emit:
            emit(ConversionEvent(type=EventType.STARTED, message=f"Looking up {reference} ({ctx.options.version})"))

        for step in self.steps:
            try:
                ctx = step.execute(ctx, emit)
            except BiblepullError as e:
                ctx.error = e
                ctx.markdown = None
                logger.debug(f"Step {step.name} failed: {e}")
                if emit:
                    emit(ConversionEvent(type=EventType.FAILED, step=step.name, error=str(e)))
                return ctx

        if emit:
            emit(
                ConversionEvent(
                    type=EventType.COMPLETED,
                    message="Passage converted",
                    count=len(ctx.markdown or ""),
                )
            )
        return ctx

    def add_step(self, step: PipelineStep) -> "PassagePipeline":
        """
        Add a step to the pipeline (fluent API).

        Args:
            step: The step to add

        Returns:
            Self for chaining
        """
        self.steps.append(step)
        return self
