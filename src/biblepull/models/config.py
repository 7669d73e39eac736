"""Pydantic configuration models for biblepull."""

from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field

DEFAULT_VERSION = "NET"


class PassageOptions(BaseModel):
    """
    Rendering options for a single passage lookup.

    Every flag that removes something from the output defaults to True
    (the content is kept); ``boldwords``, ``newline`` and ``verbose`` are
    opt-in.

    Example:
        options = PassageOptions(version="ESV", footnotes=False)
    """

    boldwords: bool = Field(False, description="Render the words of Jesus in bold")
    copyright: bool = Field(True, description="Append the publisher's copyright notice")
    headers: bool = Field(True, description="Keep editorial section headings")
    footnotes: bool = Field(True, description="Keep footnote markers and the Footnotes section")
    crossrefs: bool = Field(True, description="Keep cross-reference markers and the Crossrefs section")
    numbering: bool = Field(True, description="Keep chapter and verse numbers")
    newline: bool = Field(False, description="Start chapters and verses on a new line as H5/H6 headings")
    version: str = Field(
        DEFAULT_VERSION,
        pattern=r"^[A-Za-z0-9-]+$",
        description="Bible version (translation code) to look up",
    )
    filename: Optional[Path] = Field(
        None,
        description="Read HTML from this local file instead of fetching it",
    )
    verbose: bool = Field(False, description="Report progress while working")

    model_config = {"extra": "forbid"}


class NetworkConfig(BaseModel):
    """Configuration for fetching passage pages."""

    base_url: str = Field(
        "https://www.biblegateway.com/passage/",
        description="Passage lookup endpoint",
    )
    user_agent: Optional[str] = Field(None, description="Custom User-Agent header")
    connect_timeout: float = Field(30, gt=0, description="Connection timeout in seconds")
    read_timeout: float = Field(10, gt=0, description="Read timeout in seconds")

    model_config = {"extra": "forbid"}
