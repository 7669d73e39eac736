"""Field extraction from working blocks."""

import logging
from collections.abc import Iterable, Sequence
from typing import Optional

from ..errors import NoPassageFoundError
from ..models.document import ExtractedDocument
from .dialects import CROSSREF, DEFAULT_DETECTORS, FieldDetector, FieldMode

logger = logging.getLogger(__name__)


class FieldExtractor:
    """
    Populates an ``ExtractedDocument`` from working blocks in one pass.

    Each block is offered to every detector. Passage segments are
    concatenated in block order, footnote and cross-reference entries are
    appended in first-seen order (which is also their label order),
    together with the site id of each entry so passage markers can be
    matched to them.

    Cross-reference support can be left out, in which case ``crossrefs``
    stays empty.

    Example:
        extractor = FieldExtractor()
        document = extractor.extract(blocks, source="John 3:16 (NET)")
    """

    def __init__(
        self,
        detectors: Sequence[FieldDetector] = DEFAULT_DETECTORS,
        include_crossrefs: bool = True,
    ):
        if not include_crossrefs:
            detectors = [detector for detector in detectors if detector is not CROSSREF]
        self._detectors = tuple(detectors)

    @property
    def detectors(self) -> tuple[FieldDetector, ...]:
        return self._detectors

    def _merge(self, document: ExtractedDocument, detector: FieldDetector, entries: list[tuple[str, str]]) -> None:
        values = [value for _, value in entries]
        if detector.mode == FieldMode.APPEND:
            getattr(document, detector.field).extend(values)
            if detector.key_field:
                getattr(document, detector.key_field).extend(key for key, _ in entries)
        elif detector.mode == FieldMode.CONCAT:
            setattr(document, detector.field, getattr(document, detector.field) + "".join(values))
        elif detector.mode == FieldMode.FIRST:
            if not getattr(document, detector.field):
                setattr(document, detector.field, values[0])
        else:
            setattr(document, detector.field, values[-1])

    def scan(self, blocks: Iterable[str]) -> ExtractedDocument:
        """Scan blocks without checking that a passage was found."""
        document = ExtractedDocument()
        for block in blocks:
            for detector in self._detectors:
                entries = detector.entries(block)
                if entries:
                    self._merge(document, detector, entries)
        return document

    def extract(
        self,
        blocks: Sequence[str],
        source: Optional[str] = None,
        window_size: int = 0,
    ) -> ExtractedDocument:
        """
        Extract every field from the blocks.

        Args:
            blocks: Working blocks in document order
            source: Description of the page, for diagnostics
            window_size: Number of window lines, for diagnostics

        Returns:
            Populated document

        Raises:
            NoPassageFoundError: If no passage segment was found
        """
        document = self.scan(blocks)

        logger.debug(
            f"Extracted reference={document.reference!r} version={document.version!r} "
            f"passage={len(document.passage_body)} bytes, {len(document.footnotes)} footnotes, "
            f"{len(document.crossrefs)} crossrefs"
        )

        if not document.has_passage:
            raise NoPassageFoundError(
                reference=document.reference,
                version=document.version,
                source=source or "",
                window_size=window_size,
                footnote_count=len(document.footnotes),
                crossref_count=len(document.crossrefs),
            )
        return document
