"""Tests for final Markdown assembly."""

from biblepull.conversion import OutputAssembler
from biblepull.models import PassageOptions, TranscodedDocument


class TestOutputAssembler:
    """Tests for OutputAssembler."""

    def test_title_and_passage_only(self):
        """Test that empty sections are left out."""
        output = OutputAssembler().assemble("Jude 1", "NET", "Jude, a slave of Jesus Christ")

        assert output == "# Jude 1 (NET)\nJude, a slave of Jesus Christ\n\n"

    def test_footnotes_section(self):
        """Test footnote entries labelled a, b in order."""
        output = OutputAssembler().assemble("Jude 1", "NET", "text", footnotes=["note one", "note two"])

        assert output == "# Jude 1 (NET)\ntext\n\n### Footnotes\n[^a]: note one\n[^b]: note two\n\n"

    def test_crossrefs_section(self):
        """Test cross-reference entries labelled A, B after the footnotes."""
        output = OutputAssembler().assemble(
            "John 3:16",
            "NET",
            "text",
            footnotes=["note"],
            crossrefs=["Rom 5:8", "1 John 4:9"],
        )

        assert output.endswith("### Footnotes\n[^a]: note\n\n### Crossrefs\n[^A]: Rom 5:8\n[^B]: 1 John 4:9\n\n")

    def test_labels_past_z(self):
        """Test that the 27th footnote is labelled aa."""
        footnotes = [f"note {ordinal}" for ordinal in range(1, 28)]

        output = OutputAssembler().assemble("Ps 119", "NET", "text", footnotes=footnotes)

        assert "[^z]: note 26\n[^aa]: note 27\n" in output

    def test_sections_disabled(self):
        """Test that disabled options drop their sections even with entries."""
        options = PassageOptions(footnotes=False, crossrefs=False, copyright=False)

        output = OutputAssembler(options).assemble(
            "John 3:16", "NET", "text", footnotes=["note"], crossrefs=["Rom 5:8"], copyright="(c) 2017"
        )

        assert output == "# John 3:16 (NET)\ntext\n\n"

    def test_copyright_last(self):
        """Test that the copyright notice closes the document."""
        output = OutputAssembler().assemble("Jude 1", "NET", "text", footnotes=["note"], copyright="(c) 2017")

        assert output.endswith("[^a]: note\n\n(c) 2017")

    def test_assemble_document(self):
        document = TranscodedDocument(
            reference="Jude 1",
            version="New English Translation",
            passage="text",
            copyright="Notice",
        )

        output = OutputAssembler().assemble_document(document)

        assert output == "# Jude 1 (New English Translation)\ntext\n\nNotice"
