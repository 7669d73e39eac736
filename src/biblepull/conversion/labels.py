"""Alphabetic labels for footnotes and cross-references."""

from collections.abc import Iterator
from string import ascii_lowercase, ascii_uppercase


def label(ordinal: int, uppercase: bool = False) -> str:
    """
    Return the bijective base-26 label for an ordinal.

    1..26 map to a..z, 27 to aa, 52 to az, 53 to ba, 702 to zz, 703 to aaa.
    There is no zero digit, so every positive integer has exactly one label.

    Raises:
        ValueError: If ordinal is less than 1
    """
    if ordinal < 1:
        raise ValueError(f"Label ordinal must be at least 1, got {ordinal}")

    letters = ascii_uppercase if uppercase else ascii_lowercase
    result = ""
    while ordinal > 0:
        ordinal, digit = divmod(ordinal - 1, 26)
        result = letters[digit] + result
    return result


def footnote_label(ordinal: int) -> str:
    return label(ordinal, uppercase=False)


def crossref_label(ordinal: int) -> str:
    return label(ordinal, uppercase=True)


def labels(count: int, uppercase: bool = False) -> Iterator[str]:
    """Yield the first ``count`` labels in order."""
    for ordinal in range(1, count + 1):
        yield label(ordinal, uppercase)
