"""AssembleStep - render the final Markdown document."""

from typing import Optional

from ...conversion.assembler import OutputAssembler
from ..base import EventEmitter, PassageContext


class AssembleStep:
    """Pipeline step that renders ctx.transcoded into ctx.markdown."""

    name = "assemble"

    def execute(
        self,
        ctx: PassageContext,
        emit: Optional[EventEmitter] = None,
    ) -> PassageContext:
        if ctx.transcoded is None:
            raise RuntimeError("AssembleStep needs a transcoded document")

        ctx.markdown = OutputAssembler(ctx.options).assemble_document(ctx.transcoded)
        return ctx
