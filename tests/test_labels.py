"""Tests for footnote and cross-reference labels."""

import pytest

from biblepull.conversion.labels import crossref_label, footnote_label, label, labels


class TestLabel:
    """Tests for the bijective base-26 label function."""

    def test_single_letters(self):
        """Test that 1..26 map to a..z."""
        assert [label(n) for n in range(1, 27)] == list("abcdefghijklmnopqrstuvwxyz")

    def test_twenty_six_is_z(self):
        """Test that there is no leading-zero artifact at 26."""
        assert label(26) == "z"

    def test_two_letter_boundaries(self):
        """Test the first two-letter labels."""
        assert label(27) == "aa"
        assert label(28) == "ab"
        assert label(52) == "az"
        assert label(53) == "ba"
        assert label(702) == "zz"
        assert label(703) == "aaa"

    def test_uppercase(self):
        """Test uppercase labels for cross-references."""
        assert label(1, uppercase=True) == "A"
        assert label(27, uppercase=True) == "AA"
        assert crossref_label(2) == "B"
        assert footnote_label(2) == "b"

    def test_bijection(self):
        """Test that labels are unique and decode back to their ordinal."""

        def decode(text: str) -> int:
            value = 0
            for char in text:
                value = value * 26 + (ord(char) - ord("a") + 1)
            return value

        generated = list(labels(2000))
        assert len(set(generated)) == 2000
        for ordinal, text in enumerate(generated, start=1):
            assert decode(text) == ordinal

    def test_ordered_by_length_then_alphabet(self):
        """Test that the sequence runs a..z, aa..zz like spreadsheet columns."""
        generated = list(labels(800))
        assert generated == sorted(generated, key=lambda text: (len(text), text))

    @pytest.mark.parametrize("ordinal", [0, -1])
    def test_rejects_non_positive(self, ordinal):
        """Test that ordinals below 1 are rejected."""
        with pytest.raises(ValueError):
            label(ordinal)
