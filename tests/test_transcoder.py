"""Tests for passage markup transcoding."""

import re
from unittest.mock import MagicMock

from biblepull.conversion import CopyrightConverter, MarkerLabeller, MarkupTranscoder, apply_rules
from biblepull.conversion.rules import cleanup_rules
from biblepull.models import ExtractedDocument, PassageOptions

CHAPTER_OPENING = (
    '<p class="chapter-3"><span class="chapternum">3 </span>For God so loved the world. '
    '<sup class="versenum">2&nbsp;</sup>He came at night.</p>'
)

FOOTNOTE_SUP = (
    "<sup data-fn='#fen-NET-{letter}' class='footnote' data-link='[&lt;a href=&quot;#fen-NET-{letter}&quot; "
    "title=&quot;See footnote {letter}&quot;&gt;{letter}&lt;/a&gt;]'>"
    '[<a href="#fen-NET-{letter}" title="See footnote {letter}">{letter}</a>]</sup>'
)

CROSSREF_SUP = (
    "<sup class='crossreference' data-cr='#cen-NET-{letter}' data-link='(&lt;a href=&quot;#cen-NET-{letter}&quot; "
    "title=&quot;See cross-reference {letter}&quot;&gt;{letter}&lt;/a&gt;)'>"
    '(<a href="#cen-NET-{letter}" title="See cross-reference {letter}">{letter}</a>)</sup>'
)


def transcode(passage: str, **options) -> str:
    return MarkupTranscoder(PassageOptions(**options)).transcode(passage)


class TestCharacterNormalisation:
    """Tests for entity and punctuation normalisation."""

    def test_quotes_dashes_and_entities(self):
        """Test curly quotes, em dash, &nbsp; and &amp;."""
        passage = '<p class="x">“Hi,” she said&nbsp;— ‘Tom &amp; I’ left.</p>'

        assert transcode(passage) == "\"Hi,\" she said -- 'Tom & I' left."

    def test_nbsp_character_removed(self):
        """Test that the non-breaking space character is removed."""
        assert transcode('<p class="x">in\u00a0the</p>') == "inthe"

    def test_en_dash_kept(self):
        """Test that en dashes (used in verse ranges) are left alone."""
        assert transcode('<p class="x">vv. 1–3</p>') == "vv. 1–3"


class TestNumbering:
    """Tests for chapter and verse numbering modes."""

    def test_inline_numbering(self):
        """Test that chapter openings become 'chapter:1' and verses their number."""
        assert transcode(CHAPTER_OPENING) == "3:1 For God so loved the world. 2 He came at night."

    def test_newline_numbering(self):
        """Test headings for chapters and verses in newline mode."""
        result = transcode(CHAPTER_OPENING, newline=True)

        assert result.startswith("##### Chapter 3\n###### 1 For God so loved")
        assert "\n###### 2 He came at night." in result

    def test_numbering_suppressed(self):
        """Test that no chapter or verse numbers remain when numbering is off."""
        result = transcode(CHAPTER_OPENING, numbering=False)

        assert result == "For God so loved the world. He came at night."
        assert not any(char.isdigit() for char in result)

    def test_alternate_chapter_class(self):
        """Test the shorter chapter number class name."""
        passage = '<p class="chapter-3"><span class="chaptum">3 </span>For God so loved...</p>'

        assert transcode(passage).startswith("3:1 For God so loved...")

    def test_chapter_number_survives_span_cleanup(self):
        """Test that chapter numbers are rendered before spans are stripped."""
        passage = '<p class="chapter-2"><span class="text Jude-1-1"><span class="chapternum">2 </span>Text</span></p>'

        assert transcode(passage) == "2:1 Text"

    def test_verse_range(self):
        """Test combined verse numbers such as 17-18."""
        passage = '<p class="x"><sup class="versenum">17-18 </sup>Combined.</p>'

        assert transcode(passage) == "17-18 Combined."


class TestBlocks:
    """Tests for headings, emphasis and line breaks."""

    HEADED = '<h3><span id="h1" class="text">The Son</span></h3><p class="chapter-1">Text</p>'

    def test_headers_on(self):
        """Test that editorial headings become level-2 headings."""
        assert transcode(self.HEADED) == "## The Son\nText"

    def test_headers_off(self):
        """Test that heading markup is dropped but its text kept."""
        result = transcode(self.HEADED, headers=False)

        assert "##" not in result
        assert result == "The Son\nText"

    def test_emphasis(self):
        """Test bold and italic mapping."""
        passage = '<p class="x"><b>bold</b> and <i>italic</i> and <i class="hebrew">flagged</i></p>'

        assert transcode(passage) == "**bold** and _italic_ and _flagged_"

    def test_line_break(self):
        """Test that <br /> becomes a Markdown soft break."""
        assert transcode('<p class="line">one<br />two</p>') == "one  \ntwo"

    def test_structural_noise_removed(self):
        """Test removal of book titles, rules and the NIV info heading."""
        passage = '<h2>John</h2><hr /><h3>More on the NIV</h3><p class="x">Text</p>'

        assert transcode(passage) == "Text"


class TestDomainRules:
    """Tests for LORD small caps and words of Jesus."""

    def test_small_caps_lord(self):
        passage = '<p class="x">The <span style="font-variant: small-caps" class="small-caps">Lord</span> is</p>'

        assert transcode(passage) == "The LORD is"

    def test_words_of_jesus_bold(self):
        """Test that words of Jesus are bolded only when asked."""
        passage = '<p class="x"><span class="woj">Follow me.</span></p>'

        assert transcode(passage, boldwords=True) == "**Follow me.**"
        assert transcode(passage) == "Follow me."


class TestMarkers:
    """Tests for footnote and cross-reference markers."""

    def test_footnote_markers_relabelled_in_order(self):
        """Test that site letters map to a, b in first-seen order."""
        passage = (
            '<p class="x">One'
            + FOOTNOTE_SUP.format(letter="e")
            + " two"
            + FOOTNOTE_SUP.format(letter="f")
            + "</p>"
        )

        assert transcode(passage) == "One[^a] two[^b]"

    def test_crossref_markers_uppercase(self):
        passage = '<p class="x">One' + CROSSREF_SUP.format(letter="C") + "</p>"

        assert transcode(passage) == "One[^A]"

    def test_markers_removed(self):
        """Test that disabled markers leave no trace."""
        passage = (
            '<p class="x">One'
            + FOOTNOTE_SUP.format(letter="a")
            + " two"
            + CROSSREF_SUP.format(letter="A")
            + "</p>"
        )

        result = transcode(passage, footnotes=False, crossrefs=False)

        assert result == "One two"
        assert "[^" not in result

    ENTRY_MARKER = re.compile(r"\{([\w-]+)?:(\w)\}")

    def test_labeller_reuses_labels(self):
        """Test that a marker seen again keeps its first-seen label."""
        labeller = MarkerLabeller()

        assert self.ENTRY_MARKER.sub(labeller, "{fn-x:a}{fn-y:b}{fn-x:a}") == "[^a][^b][^a]"

    def test_labeller_without_entry_id(self):
        """Test that markup without an entry id falls back to the site letter."""
        labeller = MarkerLabeller()

        assert self.ENTRY_MARKER.sub(labeller, "{:q}{:r}{:q}") == "[^a][^b][^a]"

    def test_labeller_uses_entry_positions(self):
        """Test that labels follow the position of the linked entry, not marker order."""
        labeller = MarkerLabeller(["fn-1", "fn-2", "fn-3"])

        assert self.ENTRY_MARKER.sub(labeller, "{fn-3:c}{fn-1:a}") == "[^c][^a]"

    def test_labeller_drops_marker_without_entry(self):
        """Test that a marker whose entry was not extracted is removed."""
        labeller = MarkerLabeller(["fn-1"], uppercase=True)

        assert self.ENTRY_MARKER.sub(labeller, "{fn-1:a}{fn-9:z}") == "[^A]"

    def test_markers_follow_entry_ids(self):
        """Test passage markers resolved against extracted footnote and crossref ids."""
        passage = (
            '<p class="x">One'
            + FOOTNOTE_SUP.format(letter="b")
            + " two"
            + CROSSREF_SUP.format(letter="C")
            + "</p>"
        )

        result = MarkupTranscoder().transcode(
            passage,
            footnote_ids=["fen-NET-a", "fen-NET-b"],
            crossref_ids=["cen-NET-A", "cen-NET-B", "cen-NET-C"],
        )

        assert result == "One[^b] two[^C]"

    def test_markers_without_entries_dropped(self):
        """Test that markers are removed when no entries of their kind were extracted."""
        passage = '<p class="x">One' + CROSSREF_SUP.format(letter="A") + "</p>"

        assert MarkupTranscoder().transcode(passage, crossref_ids=[]) == "One"

    def test_fresh_labels_per_transcode(self):
        """Test that labelling restarts for every passage."""
        passage = '<p class="x">One' + FOOTNOTE_SUP.format(letter="q") + "</p>"
        transcoder = MarkupTranscoder()

        assert transcoder.transcode(passage) == transcoder.transcode(passage) == "One[^a]"


class TestCleanup:
    """Tests for generic markup cleanup."""

    def test_cleanup_idempotent(self):
        """Test that a second cleanup pass changes nothing."""
        text = 'a <a href="/x">link</a> <span class="s">b</span>\n</div><div class="poetry top-1">c'
        once = apply_rules(text, cleanup_rules())

        assert once == "a [link] bc"
        assert apply_rules(once, cleanup_rules()) == once

    def test_no_tags_left(self):
        """Test that span and div markup is gone from the output."""
        passage = '<div class="poetry"><p class="line"><span class="text">Text</span></p></div>'

        assert transcode(passage) == "Text"


class TestFieldTranscoding:
    """Tests for footnotes, cross-references and headings."""

    def test_footnote(self):
        transcoder = MarkupTranscoder()

        assert (
            transcoder.transcode_footnote("John 3:16 Or <i>For God so loved the world</i>.")
            == "John 3:16 Or _For God so loved the world_."
        )

    def test_footnote_link(self):
        transcoder = MarkupTranscoder()

        assert transcoder.transcode_footnote('See <a href="/p">Gen 1:1</a>.') == "See [Gen 1:1]."

    def test_crossref_has_no_brackets(self):
        transcoder = MarkupTranscoder()

        assert transcoder.transcode_crossref('<a href="/p">Rom 5:8</a>') == "Rom 5:8"

    def test_heading(self):
        transcoder = MarkupTranscoder()

        assert transcoder.transcode_heading("John 3:16–<b>17</b>") == "John 3:16–17"

    def test_document(self):
        """Test transcoding every field of a document."""
        copyright_converter = MagicMock()
        copyright_converter.convert.return_value = "Notice"
        transcoder = MarkupTranscoder(copyright_converter=copyright_converter)
        document = ExtractedDocument(
            reference="Jude 1",
            version="New English Translation",
            passage_body='<p class="x">Jude, a slave</p>',
            footnotes=["1:1 <b>Grk</b> note"],
            crossrefs=['<a href="/p">Rom 1:1</a>'],
            copyright="<b>(c)</b>",
        )

        result = transcoder.transcode_document(document)

        assert result.passage == "Jude, a slave"
        assert result.footnotes == ["1:1 **Grk** note"]
        assert result.crossrefs == ["Rom 1:1"]
        assert result.copyright == "Notice"
        copyright_converter.convert.assert_called_once_with("<b>(c)</b>")

    def test_document_markers_match_entries(self):
        """Test that a document's markers point at its extracted entries."""
        document = ExtractedDocument(
            passage_body='<p class="x">Three' + FOOTNOTE_SUP.format(letter="c") + "</p>",
            footnotes=["1:1 note a", "1:2 note b", "1:3 note c"],
            footnote_ids=["fen-NET-a", "fen-NET-b", "fen-NET-c"],
        )

        result = MarkupTranscoder().transcode_document(document)

        assert result.passage == "Three[^c]"

    def test_document_without_entry_ids(self):
        """Test that entries lacking site ids fall back to first-seen labels."""
        document = ExtractedDocument(
            passage_body='<p class="x">Three' + FOOTNOTE_SUP.format(letter="c") + "</p>",
            footnotes=["1:3 note c"],
            footnote_ids=[""],
        )

        assert MarkupTranscoder().transcode_document(document).passage == "Three[^a]"

    def test_empty_copyright_not_converted(self):
        copyright_converter = MagicMock()
        transcoder = MarkupTranscoder(copyright_converter=copyright_converter)

        result = transcoder.transcode_document(ExtractedDocument(passage_body='<p class="x">a</p>'))

        assert result.copyright == ""
        copyright_converter.convert.assert_not_called()


class TestCopyrightConverter:
    """Tests for CopyrightConverter."""

    def test_link_and_entities(self):
        converter = CopyrightConverter()

        result = converter.convert(
            '<a href="https://netbible.com/">NET Bible</a> copyright &copy;1996-2017 by Biblical Studies Press'
        )

        assert "[NET Bible](https://netbible.com/)" in result
        assert "©" in result
        assert "Biblical Studies Press" in result
        assert "\n" not in result

    def test_relative_link_made_absolute(self):
        converter = CopyrightConverter()

        result = converter.convert('<a href="/versions/New-English-Translation-NET-Bible/">NET</a>')

        assert "(https://www.biblegateway.com/versions/New-English-Translation-NET-Bible/)" in result

    def test_plain_text(self):
        assert CopyrightConverter().convert("Public Domain") == "Public Domain"
