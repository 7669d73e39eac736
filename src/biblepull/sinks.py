"""Destinations for the finished Markdown."""

import logging
from typing import Optional

import pyperclip
from rich.console import Console

logger = logging.getLogger(__name__)


class ConsoleSink:
    """Prints the Markdown to stdout, untouched by rich markup or highlighting."""

    def __init__(self, console: Optional[Console] = None):
        self._console = console or Console(soft_wrap=True)

    def write(self, markdown: str) -> None:
        self._console.print()
        self._console.print(markdown, markup=False, highlight=False, emoji=False)


class ClipboardSink:
    """
    Copies the Markdown to the system clipboard.

    A machine without a clipboard backend only gets a warning; the
    conversion itself has already succeeded.
    """

    def write(self, markdown: str) -> None:
        try:
            pyperclip.copy(markdown)
        except pyperclip.PyperclipException as e:
            logger.warning(f"Could not copy passage to clipboard: {e}")
            return
        logger.debug(f"Copied {len(markdown)} characters to clipboard")
