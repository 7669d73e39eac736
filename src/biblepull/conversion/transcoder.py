"""Passage markup to Markdown transcoding."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Optional

from ..models.config import PassageOptions
from ..models.document import ExtractedDocument, TranscodedDocument
from .markdown import CopyrightConverter
from .rules import (
    RewriteRule,
    apply_rules,
    block_rules,
    character_rules,
    cleanup_rules,
    crossref_rules,
    domain_rules,
    footnote_rules,
    heading_rules,
    marker_rules,
    numbering_rules,
    structural_rules,
)

logger = logging.getLogger(__name__)


def _entry_ids(ids: Sequence[str], entries: Sequence[str]) -> Optional[Sequence[str]]:
    # Markers can only be matched when every entry has its site id
    if len(ids) != len(entries) or not all(ids):
        return None
    return ids


class MarkupTranscoder:
    """
    Converts passage markup to Markdown according to ``PassageOptions``.

    The passage rule groups run in this order:

    1. character normalisation
    2. structural noise removal
    3. chapter/verse numbering
    4. block and emphasis mapping
    5. LORD small caps and words of Jesus
    6. footnote/cross-reference markers
    7. generic cleanup of anchors, divs and spans

    Numbering (3) must run before the span stripping in (7): chapter
    numbers are carried in spans and would be lost otherwise. Words of
    Jesus (5) must also precede (7), which would remove their span.
    Output is deterministic for a given input and option set.

    Example:
        transcoder = MarkupTranscoder(PassageOptions(newline=True))
        markdown = transcoder.transcode(document.passage_body)
    """

    def __init__(
        self,
        options: Optional[PassageOptions] = None,
        copyright_converter: Optional[CopyrightConverter] = None,
    ):
        self.options = options or PassageOptions()
        self._copyright_converter = copyright_converter or CopyrightConverter()

    def passage_rules(
        self,
        footnote_ids: Optional[Sequence[str]] = None,
        crossref_ids: Optional[Sequence[str]] = None,
    ) -> list[RewriteRule]:
        """Build the ordered passage rule list (fresh marker labelling each call)."""
        opts = self.options
        return [
            *character_rules(),
            *structural_rules(),
            *numbering_rules(opts.numbering, opts.newline),
            *block_rules(opts.headers),
            *domain_rules(opts.boldwords),
            *marker_rules(opts.footnotes, opts.crossrefs, footnote_ids, crossref_ids),
            *cleanup_rules(),
        ]

    def transcode(
        self,
        passage: str,
        footnote_ids: Optional[Sequence[str]] = None,
        crossref_ids: Optional[Sequence[str]] = None,
    ) -> str:
        """
        Convert a raw passage body to Markdown.

        Args:
            passage: Raw passage markup
            footnote_ids: Site ids of the extracted footnotes, in list order
            crossref_ids: Site ids of the extracted cross-references, in list order

        Markers are labelled after the entry they link to when ids are
        given, and in first-seen order otherwise.
        """
        return apply_rules(passage, self.passage_rules(footnote_ids, crossref_ids)).strip()

    def transcode_footnote(self, footnote: str) -> str:
        return apply_rules(footnote, footnote_rules()).strip()

    def transcode_crossref(self, crossref: str) -> str:
        return apply_rules(crossref, crossref_rules()).strip()

    def transcode_heading(self, text: str) -> str:
        return apply_rules(text, heading_rules()).strip()

    def transcode_document(self, document: ExtractedDocument) -> TranscodedDocument:
        """Transcode every field of an extracted document."""
        passage = self.transcode(
            document.passage_body,
            footnote_ids=_entry_ids(document.footnote_ids, document.footnotes),
            crossref_ids=_entry_ids(document.crossref_ids, document.crossrefs),
        )
        logger.debug(f"Transcoded passage: {len(document.passage_body)} -> {len(passage)} bytes")

        return TranscodedDocument(
            reference=self.transcode_heading(document.reference),
            version=self.transcode_heading(document.version),
            passage=passage,
            footnotes=[self.transcode_footnote(footnote) for footnote in document.footnotes],
            crossrefs=[self.transcode_crossref(crossref) for crossref in document.crossrefs],
            copyright=self._copyright_converter.convert(document.copyright) if document.copyright else "",
        )
