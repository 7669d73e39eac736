"""TranscodeStep - markup to Markdown for every extracted field."""

from typing import Optional

from ...conversion.transcoder import MarkupTranscoder
from ...models.events import ConversionEvent, EventType
from ..base import EventEmitter, PassageContext


class TranscodeStep:
    """
    Pipeline step that transcodes ctx.document into ctx.transcoded.

    The transcoder is built from ctx.options unless one is injected.
    """

    name = "transcode"

    def __init__(self, transcoder: Optional[MarkupTranscoder] = None) -> None:
        self._transcoder = transcoder

    def execute(
        self,
        ctx: PassageContext,
        emit: Optional[EventEmitter] = None,
    ) -> PassageContext:
        if ctx.document is None:
            raise RuntimeError("TranscodeStep needs an extracted document")

        transcoder = self._transcoder or MarkupTranscoder(ctx.options)
        ctx.transcoded = transcoder.transcode_document(ctx.document)

        if emit:
            emit(
                ConversionEvent(
                    type=EventType.PASSAGE_TRANSCODED,
                    step=self.name,
                    message=ctx.transcoded.passage,
                    count=len(ctx.transcoded.passage),
                )
            )
        return ctx
