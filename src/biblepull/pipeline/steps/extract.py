"""Window, reflow and field extraction steps."""

import logging
from typing import Optional

from ...extraction.fields import FieldExtractor
from ...extraction.reflow import reflow
from ...extraction.window import WindowExtractor
from ...models.events import ConversionEvent, EventType
from ..base import EventEmitter, PassageContext

logger = logging.getLogger(__name__)


class WindowStep:
    """Pipeline step that cuts the content window out of ctx.lines."""

    name = "window"

    def __init__(self, extractor: Optional[WindowExtractor] = None) -> None:
        self._extractor = extractor or WindowExtractor()

    def execute(
        self,
        ctx: PassageContext,
        emit: Optional[EventEmitter] = None,
    ) -> PassageContext:
        ctx.window = self._extractor.extract(ctx.lines, source=ctx.source)

        if emit:
            size = sum(len(line) for line in ctx.window)
            emit(
                ConversionEvent(
                    type=EventType.WINDOW_EXTRACTED,
                    step=self.name,
                    message=f"Pass 1: 'interesting' text = {len(ctx.window)} lines, {size} bytes",
                    count=len(ctx.window),
                )
            )
        return ctx


class ReflowStep:
    """Pipeline step that turns ctx.window into working blocks."""

    name = "reflow"

    def execute(
        self,
        ctx: PassageContext,
        emit: Optional[EventEmitter] = None,
    ) -> PassageContext:
        ctx.blocks = reflow(ctx.window)

        logger.debug(f"Pass 2: {len(ctx.blocks)} working blocks")
        for block in ctx.blocks:
            logger.debug(block)

        if emit:
            emit(
                ConversionEvent(
                    type=EventType.BLOCKS_REFLOWED,
                    step=self.name,
                    message=f"Pass 2: now has {len(ctx.blocks)} working lines",
                    count=len(ctx.blocks),
                )
            )
        return ctx


class ExtractStep:
    """
    Pipeline step that extracts the document fields from ctx.blocks.

    Raises NoPassageFoundError (with diagnostics) if no passage is found.
    """

    name = "extract"

    def __init__(self, extractor: Optional[FieldExtractor] = None) -> None:
        self._extractor = extractor or FieldExtractor()

    def execute(
        self,
        ctx: PassageContext,
        emit: Optional[EventEmitter] = None,
    ) -> PassageContext:
        document = self._extractor.extract(ctx.blocks, source=ctx.source, window_size=len(ctx.window))
        ctx.document = document

        if emit:
            emit(
                ConversionEvent(
                    type=EventType.FIELDS_EXTRACTED,
                    step=self.name,
                    message=(
                        f"Found {document.reference} ({document.version}): "
                        f"{len(document.footnotes)} footnotes, {len(document.crossrefs)} crossrefs"
                    ),
                    count=len(document.passage_body),
                )
            )
        return ctx
