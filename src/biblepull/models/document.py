"""Records produced by field extraction."""

from dataclasses import dataclass, field


@dataclass
class ExtractedDocument:
    """
    Structurally distinct fields pulled out of a passage page.

    Every value is still raw markup; transcoding happens afterwards.

    Attributes:
        reference: Book/chapter/verse label, empty if not found
        version: Translation name, empty if not found
        passage_body: Every passage segment concatenated in document order
        footnotes: Footnote entries in first-seen order
        crossrefs: Cross-reference entries in first-seen order
        copyright: Publisher's copyright paragraph
        footnote_ids: Site id of each footnote entry ("" if none), parallel to footnotes
        crossref_ids: Site id of each cross-reference entry, parallel to crossrefs
    """

    reference: str = ""
    version: str = ""
    passage_body: str = ""
    footnotes: list[str] = field(default_factory=list)
    crossrefs: list[str] = field(default_factory=list)
    copyright: str = ""
    footnote_ids: list[str] = field(default_factory=list)
    crossref_ids: list[str] = field(default_factory=list)

    @property
    def has_passage(self) -> bool:
        return bool(self.passage_body)


@dataclass
class TranscodedDocument:
    """Markdown renditions of the fields of an ``ExtractedDocument``."""

    reference: str = ""
    version: str = ""
    passage: str = ""
    footnotes: list[str] = field(default_factory=list)
    crossrefs: list[str] = field(default_factory=list)
    copyright: str = ""
