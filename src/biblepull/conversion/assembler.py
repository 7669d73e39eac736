"""Final Markdown document assembly."""

from collections.abc import Sequence
from typing import Optional

from ..models.config import PassageOptions
from ..models.document import TranscodedDocument
from .labels import crossref_label, footnote_label


class OutputAssembler:
    """
    Renders the final Markdown document.

    Layout::

        # {reference} ({version})
        {passage}

        ### Footnotes
        [^a]: ...

        ### Crossrefs
        [^A]: ...

        {copyright}

    A section appears only when it has entries and its option is on.
    """

    def __init__(self, options: Optional[PassageOptions] = None):
        self.options = options or PassageOptions()

    def assemble(
        self,
        reference: str,
        version: str,
        passage: str,
        footnotes: Sequence[str] = (),
        crossrefs: Sequence[str] = (),
        copyright: str = "",
    ) -> str:
        output = f"# {reference} ({version})\n"
        output += f"{passage}\n\n"

        if footnotes and self.options.footnotes:
            output += "### Footnotes\n"
            for ordinal, footnote in enumerate(footnotes, start=1):
                output += f"[^{footnote_label(ordinal)}]: {footnote}\n"
            output += "\n"

        if crossrefs and self.options.crossrefs:
            output += "### Crossrefs\n"
            for ordinal, crossref in enumerate(crossrefs, start=1):
                output += f"[^{crossref_label(ordinal)}]: {crossref}\n"
            output += "\n"

        if self.options.copyright:
            output += copyright

        return output

    def assemble_document(self, document: TranscodedDocument) -> str:
        return self.assemble(
            reference=document.reference,
            version=document.version,
            passage=document.passage,
            footnotes=document.footnotes,
            crossrefs=document.crossrefs,
            copyright=document.copyright,
        )
