"""PassageConverter: the programmatic entry point."""

from __future__ import annotations

import logging
from types import TracebackType
from typing import Any

from ..extraction.fields import FieldExtractor
from ..models.config import NetworkConfig, PassageOptions
from ..pipeline.base import EventEmitter, PassageContext, PassagePipeline
from ..pipeline.steps import (
    AssembleStep,
    ExtractStep,
    LoadStep,
    ReflowStep,
    TranscodeStep,
    WindowStep,
)
from ..sources.file_loader import FileLineSource
from ..sources.http_client import PassageHttpClient
from ..sources.protocols import LineSource

logger = logging.getLogger(__name__)


class PassageConverter:
    """
    Converts one passage reference to Markdown.

    The page comes from ``source`` if given, from ``options.filename`` if
    set, and otherwise from the live site.

    Example:
        options = PassageOptions(version="ESV", boldwords=True)

        with PassageConverter(options) as converter:
            ctx = converter.convert("John 3:16-21")

        if ctx.error:
            print(f"Error: {ctx.error}")
        else:
            print(ctx.markdown)
    """

    def __init__(
        self,
        options: PassageOptions | None = None,
        network: NetworkConfig | None = None,
        source: LineSource | None = None,
        extract_crossrefs: bool = True,
    ):
        """
        Initialize the converter.

        Args:
            options: Rendering options (defaults if None)
            network: HTTP settings for live lookups
            source: Explicit line source, overriding filename and HTTP
            extract_crossrefs: Whether cross-references are extracted at all
        """
        self.options = options or PassageOptions()
        self._network = network or NetworkConfig()
        self._extract_crossrefs = extract_crossrefs
        self._http_client: PassageHttpClient | None = None
        self._source = source or self._default_source()

    def _default_source(self) -> LineSource:
        if self.options.filename is not None:
            return FileLineSource(self.options.filename)
        self._http_client = PassageHttpClient(self._network)
        return self._http_client

    def __enter__(self) -> PassageConverter:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.close()

    def close(self) -> None:
        if self._http_client is not None:
            self._http_client.close()
            self._http_client = None

    def build_pipeline(self) -> PassagePipeline:
        return PassagePipeline(
            steps=[
                LoadStep(self._source),
                WindowStep(),
                ReflowStep(),
                ExtractStep(FieldExtractor(include_crossrefs=self._extract_crossrefs)),
                TranscodeStep(),
                AssembleStep(),
            ]
        )

    def convert(self, reference: str, emit: EventEmitter | None = None) -> PassageContext:
        """
        Run the whole pipeline for a reference.

        Args:
            reference: Passage reference, e.g. "John 3:16"
            emit: Optional callback receiving progress events

        Returns:
            PassageContext; ctx.markdown on success, ctx.error on failure
        """
        ctx = self.build_pipeline().execute(reference, self.options, emit=emit)
        if ctx.error:
            logger.debug(f"Conversion of {reference!r} failed: {ctx.error}")
        return ctx


def convert_passage(
    reference: str,
    network: NetworkConfig | None = None,
    **option_overrides: Any,
) -> str:
    """
    Convenience function returning the Markdown for a reference.

    Args:
        reference: Passage reference
        network: Optional HTTP settings
        **option_overrides: PassageOptions fields, e.g. version="ESV"

    Returns:
        The Markdown document

    Raises:
        BiblepullError: The error that stopped the pipeline
    """
    options = PassageOptions(**option_overrides)
    with PassageConverter(options, network) as converter:
        ctx = converter.convert(reference)

    if ctx.error is not None:
        raise ctx.error
    return ctx.markdown or ""
