"""Error kinds raised while producing a passage."""

from __future__ import annotations

from typing import Optional


class BiblepullError(Exception):
    """Base class for every fatal condition of a conversion run."""


class FetchError(BiblepullError):
    """
    The passage page could not be fetched.

    Attributes:
        message: Server reason phrase or transport error text
        status_code: HTTP status code, or None for transport failures
    """

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        self.message = message
        self.status_code = status_code
        if status_code is None:
            super().__init__(message)
        else:
            super().__init__(f"{message} ({status_code})")


class EmptySourceError(BiblepullError):
    """No passage window was found in the source document."""

    def __init__(self, source: str) -> None:
        self.source = source
        super().__init__(
            f"the data returned from {source} is empty, so stopping. "
            "Please check the reference and version."
        )


class NoPassageFoundError(BiblepullError):
    """
    A passage window was found but no passage text could be extracted.

    Carries whatever was captured so that markup changes on the site can
    be diagnosed from the error report alone.
    """

    def __init__(
        self,
        reference: str = "",
        version: str = "",
        source: str = "",
        window_size: int = 0,
        footnote_count: int = 0,
        crossref_count: int = 0,
    ) -> None:
        self.reference = reference
        self.version = version
        self.source = source
        self.window_size = window_size
        self.footnote_count = footnote_count
        self.crossref_count = crossref_count
        super().__init__("could not find any passage text in the page returned")

    def diagnostics(self) -> list[str]:
        """Return one ``- key = value`` line per captured field."""
        return [
            f"- reference = {self.reference}",
            f"- version = {self.version}",
            f"- source = {self.source}",
            f"- window_size = {self.window_size}",
            f"- footnote_count = {self.footnote_count}",
            f"- crossref_count = {self.crossref_count}",
        ]


class SourceReadError(BiblepullError):
    """A local HTML file could not be read."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"cannot read '{path}': {reason}")
