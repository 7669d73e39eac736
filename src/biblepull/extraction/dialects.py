"""
Markup dialects recognised for each extracted field.

The site has changed its markup over time, so a field may be announced
by more than one shape of HTML. Each shape is a ``MarkupDialect``: a
trigger pattern that says the block carries the field, and a capture
pattern whose groups (joined) give the field value. A detector tries
its dialects in priority order and uses the first whose trigger matches.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class FieldMode(str, Enum):
    """How captured values are merged into the document."""

    ASSIGN = "assign"  # last capture wins
    FIRST = "first"  # first capture anywhere wins
    CONCAT = "concat"  # captures are concatenated in order
    APPEND = "append"  # captures are appended to a list in order


@dataclass(frozen=True)
class MarkupDialect:
    """
    One known markup shape for a field.

    ``key`` optionally finds the site id of an entry: the last match of
    its group before the capture is the id of that capture.
    """

    name: str
    trigger: re.Pattern[str]
    capture: re.Pattern[str]
    key: Optional[re.Pattern[str]] = None

    def _key_before(self, block: str, position: int) -> str:
        if self.key is None:
            return ""
        keys = self.key.findall(block, 0, position)
        return keys[-1] if keys else ""

    def entries(self, block: str) -> list[tuple[str, str]]:
        """Return (site id, value) for every capture, or nothing if the trigger does not match."""
        if not self.trigger.search(block):
            return []
        return [
            (self._key_before(block, match.start()), "".join(group or "" for group in match.groups()))
            for match in self.capture.finditer(block)
        ]

    def captures(self, block: str) -> list[str]:
        return [value for _, value in self.entries(block)]


@dataclass(frozen=True)
class FieldDetector:
    """Dialects for one field of ``ExtractedDocument``, in priority order."""

    field: str
    dialects: tuple[MarkupDialect, ...]
    mode: FieldMode
    # Document field receiving the site id of each appended entry
    key_field: Optional[str] = None

    def entries(self, block: str) -> list[tuple[str, str]]:
        for dialect in self.dialects:
            if dialect.trigger.search(block):
                return dialect.entries(block)
        return []

    def captures(self, block: str) -> list[str]:
        return [value for _, value in self.entries(block)]


def _dialect(name: str, trigger: str, capture: str, key: Optional[str] = None) -> MarkupDialect:
    return MarkupDialect(
        name=name,
        trigger=re.compile(trigger),
        capture=re.compile(capture),
        key=re.compile(key) if key else None,
    )


_DROPDOWN = '<div class="dropdown-display"><div class="dropdown-display-text">'

# Footnote and cross-reference list items carry the id their passage markers link to
_ENTRY_ID = r"""<li id=["']([^"']+)["']"""

REFERENCE = FieldDetector(
    field="reference",
    dialects=(
        _dialect(
            "dropdown",
            f"<div class='bcv'>{_DROPDOWN}.*?</div>",
            f"<div class='bcv'>{_DROPDOWN}(.*?)</div>",
        ),
        _dialect(
            "inline-span",
            r'<span class="passage-display-bcv">.*?</span>',
            r'<span class="passage-display-bcv">(.*?)</span>',
        ),
    ),
    mode=FieldMode.ASSIGN,
)

VERSION = FieldDetector(
    field="version",
    dialects=(
        _dialect(
            "dropdown",
            f"<div class='translation'>{_DROPDOWN}.*?</div>",
            f"<div class='translation'>{_DROPDOWN}(.*?)</div>",
        ),
        _dialect(
            "inline-span",
            r'<span class="passage-display-version">.*?</span>',
            r'<span class="passage-display-version">(.*?)</span>',
        ),
    ),
    mode=FieldMode.ASSIGN,
)

# Paragraphs opening with a span, classed paragraphs, and editorial <h3> headings
_SEGMENT = r"(?:<p>\s*<span id=|<p class=|<p>\s?<span class=|<h3).*?(?:</p>|</h3>)"

PASSAGE = FieldDetector(
    field="passage_body",
    dialects=(_dialect("segment", _SEGMENT, f"({_SEGMENT})"),),
    mode=FieldMode.CONCAT,
)

COPYRIGHT = FieldDetector(
    field="copyright",
    dialects=(_dialect("publisher-info", r'<div class="publisher-info', r"<p>(.*?)</p>"),),
    mode=FieldMode.FIRST,
)

# Entry is "<verse reference> <footnote text>"
FOOTNOTE = FieldDetector(
    field="footnotes",
    dialects=(
        _dialect(
            "footnote-text",
            r"<span class='footnote-text'>.*?</span>",
            r"title=.*?>(.*?)</a>( )<span class='footnote-text'>(.*?)</span></li>",
            _ENTRY_ID,
        ),
    ),
    mode=FieldMode.APPEND,
    key_field="footnote_ids",
)

CROSSREF = FieldDetector(
    field="crossrefs",
    dialects=(
        _dialect(
            "crossref-link",
            r'<a class="crossref-link".*?">.*?</a></li>',
            r'<a class="crossref-link".*?">(.*?)</a></li>',
            _ENTRY_ID,
        ),
    ),
    mode=FieldMode.APPEND,
    key_field="crossref_ids",
)

DEFAULT_DETECTORS = (REFERENCE, VERSION, PASSAGE, COPYRIGHT, FOOTNOTE, CROSSREF)
