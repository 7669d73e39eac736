"""Protocol definitions for passage page sources."""

from typing import Protocol


class LineSource(Protocol):
    """
    Protocol for anything that supplies the lines of a passage page.

    This abstraction allows for:
    - Fetching live pages over HTTP
    - Reading a saved page from disk for testing
    - Mock implementations in tests
    """

    def describe(self, reference: str, version: str) -> str:
        """Human-readable description of where the lines come from."""
        ...

    def read_lines(self, reference: str, version: str) -> list[str]:
        """
        Return the page as a list of lines.

        Args:
            reference: Passage reference as typed by the user
            version: Bible version code

        Raises:
            BiblepullError subclass on failure
        """
        ...
