"""HTML to Markdown conversion for the copyright notice."""

from __future__ import annotations

import logging
import re
from urllib.parse import urljoin

import html2text

logger = logging.getLogger(__name__)

SITE_URL = "https://www.biblegateway.com/"


class CopyrightConverter:
    """
    Converts the publisher's copyright paragraph to Markdown.

    The paragraph is free-form HTML (links to the publisher, entities
    such as ``&copy;``), so it goes through html2text rather than the
    passage rewrite rules.

    Example:
        converter = CopyrightConverter()
        notice = converter.convert('<a href="/versions/">NET Bible&reg;</a> copyright')
    """

    def __init__(self, base_url: str = SITE_URL, unicode_snob: bool = True):
        """
        Initialize the converter.

        Args:
            base_url: Base URL for resolving relative links
            unicode_snob: Use Unicode chars where possible
        """
        self._base_url = base_url
        self._converter = html2text.HTML2Text(baseurl=base_url)

        # No wrapping, so the notice stays on one line
        self._converter.body_width = 0
        self._converter.inline_links = True
        self._converter.protect_links = False
        self._converter.unicode_snob = unicode_snob
        self._converter.escape_snob = False
        self._converter.ignore_images = True

    def _fix_relative_links(self, markdown: str) -> str:
        """Ensure all links are absolute."""

        def replace_link(match: re.Match[str]) -> str:
            text = match.group(1)
            url = match.group(2).strip("<>")

            if url.startswith(("#", "http://", "https://", "mailto:")):
                return f"[{text}]({url})"
            return f"[{text}]({urljoin(self._base_url, url)})"

        return re.sub(r"\[([^\]]+)\]\(([^)]+)\)", replace_link, markdown)

    def convert(self, html: str) -> str:
        """
        Convert a copyright paragraph to Markdown.

        Args:
            html: Inner HTML of the copyright paragraph

        Returns:
            Markdown on as few lines as the notice allows, no trailing newline
        """
        try:
            markdown = self._converter.handle(html)
        except Exception as e:
            logger.error(f"Failed to convert copyright notice to Markdown: {e}")
            # Plain text fallback
            from bs4 import BeautifulSoup

            return BeautifulSoup(html, "html.parser").get_text(" ", strip=True)

        markdown = re.sub(r"\n{3,}", "\n\n", markdown)
        markdown = "\n".join(line.rstrip() for line in markdown.split("\n"))
        return self._fix_relative_links(markdown).strip()
