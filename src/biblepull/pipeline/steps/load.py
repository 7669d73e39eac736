"""LoadStep - read the passage page from a line source."""

import logging
from typing import Optional

from ...models.events import ConversionEvent, EventType
from ...sources.protocols import LineSource
from ..base import EventEmitter, PassageContext

logger = logging.getLogger(__name__)


class LoadStep:
    """
    Pipeline step that reads the raw page lines.

    Populates:
        ctx.source: Description of the source (URL or file)
        ctx.lines: Raw page lines

    Raises whatever the source raises (FetchError, SourceReadError).
    """

    name = "load"

    def __init__(self, source: LineSource) -> None:
        self._source = source

    def execute(
        self,
        ctx: PassageContext,
        emit: Optional[EventEmitter] = None,
    ) -> PassageContext:
        version = ctx.options.version
        ctx.source = self._source.describe(ctx.reference, version)
        ctx.lines = self._source.read_lines(ctx.reference, version)

        logger.debug(f"Loaded {len(ctx.lines)} lines from {ctx.source}")
        if emit:
            emit(
                ConversionEvent(
                    type=EventType.SOURCE_LOADED,
                    step=self.name,
                    message=f"Read {ctx.source}",
                    count=len(ctx.lines),
                )
            )
        return ctx
