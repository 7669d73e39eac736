"""
Rewrite rules that turn passage markup into Markdown.

A rule is a compiled pattern plus a replacement. Rules are grouped by
concern, and the groups are only correct when applied in the order
``MarkupTranscoder.passage_rules`` lays out.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Callable, Optional, Union

from .labels import label

logger = logging.getLogger(__name__)

Replacement = Union[str, Callable[[re.Match], str]]

# Class names the site uses for the chapter number that opens a chapter
CHAPTER_NUMBER_CLASS = r"(?:chapternum|chaptum)"


@dataclass(frozen=True)
class RewriteRule:
    """A single text to text rewrite."""

    name: str
    pattern: re.Pattern[str]
    replacement: Replacement

    def apply(self, text: str) -> str:
        return self.pattern.sub(self.replacement, text)


def rule(name: str, pattern: str, replacement: Replacement) -> RewriteRule:
    return RewriteRule(name=name, pattern=re.compile(pattern), replacement=replacement)


def apply_rules(text: str, rules: Iterable[RewriteRule]) -> str:
    """Apply rules one after another, in the given order."""
    for current in rules:
        text = current.apply(text)
    return text


class MarkerLabeller:
    """
    Replacement that turns a marker match into ``[^label]``.

    Group 1 of the match is the id of the entry the marker links to (it
    may be missing in older markup), group 2 the site's own marker letter.

    Given ``entry_ids``, the ids of the extracted entries in list order,
    a marker gets the label of its entry's position in that list, so it
    points at the same entry the Footnotes/Crossrefs section lists under
    that label. A marker whose entry was not extracted is dropped.
    Without ``entry_ids`` labels are handed out in first-seen order.
    """

    def __init__(self, entry_ids: Optional[Sequence[str]] = None, uppercase: bool = False):
        self._uppercase = uppercase
        self._positions: Optional[dict[str, int]] = None
        if entry_ids is not None:
            self._positions = {}
            for position, entry_id in enumerate(entry_ids, start=1):
                self._positions.setdefault(entry_id, position)
        self._assigned: dict[str, str] = {}

    def __call__(self, match: re.Match[str]) -> str:
        target = match.group(1) or match.group(2)

        if self._positions is not None:
            position = self._positions.get(target)
            if position is None:
                logger.debug(f"Dropping marker for {target!r}: no such entry was extracted")
                return ""
            return f"[^{label(position, self._uppercase)}]"

        if target not in self._assigned:
            self._assigned[target] = label(len(self._assigned) + 1, self._uppercase)
        return f"[^{self._assigned[target]}]"


def character_rules() -> list[RewriteRule]:
    return [
        # NBSP is layout only on the site
        rule("nbsp-char", "\u00a0", ""),
        rule("nbsp-entity", r"&nbsp;", " "),
        rule("amp-entity", r"&amp;", "&"),
        rule("left-double-quote", "\u201c", '"'),
        rule("right-double-quote", "\u201d", '"'),
        rule("left-single-quote", "\u2018", "'"),
        rule("right-single-quote", "\u2019", "'"),
        rule("em-dash", "\u2014", "--"),
    ]


def structural_rules() -> list[RewriteRule]:
    return [
        rule("niv-more-info", r"<h3>More on the NIV</h3>", ""),
        # Not every book has an <h1> (Jude, for one)
        rule("h1", r"<h1.*?</h1>\s*", ""),
        rule("book-title", r"<h2>.*?</h2>", ""),
        rule("hr", r"<hr />", ""),
    ]


_VERSE_NUMBER = r'<sup\sclass="[^"]*?versenum[^"]*?">\s*?(\d+(?:-\d+)?)\s*?</sup>'
_CHAPTER_NUMBER = rf'<span class="[^"]*?{CHAPTER_NUMBER_CLASS}[^"]*?">\s*?(\d+)\s*?</span>'


def numbering_rules(numbering: bool, newline: bool) -> list[RewriteRule]:
    """
    Render or remove chapter and verse numbers.

    The site gives no verse marker for the first verse of a chapter, only
    the chapter number, so verse 1 is synthesised from it.
    """
    if not numbering:
        return [
            rule("verse-number", r'<sup class="[^"]*?versenum[^"]*?">.*?</sup>', ""),
            rule("chapter-number", rf'<span class="[^"]*?{CHAPTER_NUMBER_CLASS}[^"]*?">.*?</span>', ""),
        ]
    if newline:
        return [
            rule("verse-number", _VERSE_NUMBER, "\n###### \\1 "),
            rule("chapter-number", _CHAPTER_NUMBER, "\n##### Chapter \\1\n###### 1 "),
        ]
    return [
        rule("verse-number", _VERSE_NUMBER, "\\1 "),
        rule("chapter-number", _CHAPTER_NUMBER, "\\1:1 "),
    ]


def _emphasis_rules() -> list[RewriteRule]:
    return [
        rule("bold-open", r"<b>", "**"),
        rule("bold-close", r"</b>", "**"),
        # Language-flagged italics, e.g. in the LEB
        rule("italic-flagged", r'<i class=".*?">', "_"),
        rule("italic-open", r"<i>", "_"),
        rule("italic-close", r"</i>", "_"),
    ]


def block_rules(headers: bool) -> list[RewriteRule]:
    return [
        rule("paragraph-open", r"<p.*?>", "\n"),
        rule("paragraph-close", r"</p>", ""),
        rule("heading-open", r"<h3.*?>\s*", "\n\n## " if headers else ""),
        rule("heading-close", r"</h3>", ""),
        *_emphasis_rules(),
        # Soft line break, not a paragraph break
        rule("line-break", r"<br\s*/?>", "  \n"),
    ]


def domain_rules(boldwords: bool) -> list[RewriteRule]:
    rules = [
        rule(
            "small-caps-lord",
            r'<span style="font-variant: small-caps" class="small-caps">Lord</span>',
            "LORD",
        ),
    ]
    if boldwords:
        rules.append(rule("words-of-jesus", r'<span class="woj">(.*?)</span>', "**\\1**"))
    return rules


def marker_rules(
    footnotes: bool,
    crossrefs: bool,
    footnote_ids: Optional[Sequence[str]] = None,
    crossref_ids: Optional[Sequence[str]] = None,
) -> list[RewriteRule]:
    """
    Simplify footnote and cross-reference markers, or drop them.

    ``footnote_ids``/``crossref_ids`` are the site ids of the extracted
    entries; see ``MarkerLabeller``.
    """
    rules = []
    if footnotes:
        rules.append(rule("footnote-marker-open", r"<sup data-fn='.*?>", "<sup>"))
        rules.append(
            rule(
                "footnote-marker",
                r"""<sup>\[<a href=["']#?([^"']*)["'][^>]*>(.*?)</a>\]</sup>""",
                MarkerLabeller(footnote_ids),
            )
        )
    else:
        rules.append(rule("footnote-marker", r"<sup data-fn.*?</sup>", ""))
    if crossrefs:
        rules.append(
            rule(
                "crossref-marker",
                r"<sup class='crossreference'(?: data-cr='#?([^']*)')?.*?See cross-reference (\w+).*?</sup>",
                MarkerLabeller(crossref_ids, uppercase=True),
            )
        )
    else:
        rules.append(rule("crossref-marker", r"<sup class='crossreference'.*?</sup>", ""))
    return rules


def _span_rules() -> list[RewriteRule]:
    return [
        rule("span-open", r"<span .*?>", ""),
        rule("span-close", r"</span>", ""),
    ]


def cleanup_rules() -> list[RewriteRule]:
    return [
        rule("anchor-open", r"<a .*?>", "["),
        rule("anchor-close", r"</a>", "]"),
        rule("footnotes-div", r'<div class="footnotes">', ""),
        rule("poetry-div", r'<div class="poetry.*?>', ""),
        rule("div-close", r"\s*</div>", ""),
        *_span_rules(),
    ]


def footnote_rules() -> list[RewriteRule]:
    """Rules for a single footnote entry."""
    return [
        *_emphasis_rules(),
        rule("anchor-open", r"<a .*?>", "["),
        rule("anchor-close", r"</a>", "]"),
        *_span_rules(),
    ]


def crossref_rules() -> list[RewriteRule]:
    """Rules for a single cross-reference entry: link text is kept without brackets."""
    return [
        *_emphasis_rules(),
        rule("anchor-open", r"<a .*?>", ""),
        rule("anchor-close", r"</a>", ""),
        *_span_rules(),
    ]


def heading_rules() -> list[RewriteRule]:
    """Rules for the reference and version shown in the title line."""
    return [*character_rules(), *_span_rules(), rule("any-tag", r"<[^>]+>", "")]
