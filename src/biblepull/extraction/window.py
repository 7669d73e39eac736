"""Locate the slice of a passage page that holds passage data."""

import logging
import re
from collections.abc import Iterable, Sequence
from typing import Optional

from ..errors import EmptySourceError

logger = logging.getLogger(__name__)

# The site has served both quoting styles for the passage heading
START_MARKERS = (
    "<h1 class='passage-display'>",
    '<h1 class="passage-display">',
)

END_MARKERS = (
    '<section class="other-resources">',
    '<section class="sponsors">',
)

# Entries of the version selector dropdown
NOISE_PATTERNS = (r"<option.*</option>",)


def _alternation(markers: Iterable[str]) -> re.Pattern[str]:
    return re.compile("|".join(re.escape(marker) for marker in markers))


class WindowExtractor:
    """
    Extracts the content window from a page's lines.

    The window runs from the first line matching a start marker
    (inclusive) to the next line matching an end marker (exclusive).
    Retained lines are stripped; blank lines and version-selector
    ``<option>`` entries are dropped.

    Example:
        extractor = WindowExtractor()
        window = extractor.extract(lines, source="John 3:16 (NET)")
    """

    def __init__(
        self,
        start_markers: Sequence[str] = START_MARKERS,
        end_markers: Sequence[str] = END_MARKERS,
        noise_patterns: Sequence[str] = NOISE_PATTERNS,
    ):
        self._start = _alternation(start_markers)
        self._end = _alternation(end_markers)
        self._noise = [re.compile(pattern) for pattern in noise_patterns]

    def _is_noise(self, line: str) -> bool:
        return any(pattern.search(line) for pattern in self._noise)

    def window(self, lines: Iterable[str]) -> list[str]:
        """Return the window lines, or an empty list if no start marker is seen."""
        window: list[str] = []
        inside = False

        for line in lines:
            if not inside:
                if not self._start.search(line):
                    continue
                inside = True
            elif self._end.search(line):
                break

            stripped = line.strip()
            if not stripped or self._is_noise(stripped):
                continue
            window.append(stripped)

        return window

    def extract(self, lines: Iterable[str], source: Optional[str] = None) -> list[str]:
        """
        Return the content window.

        Args:
            lines: Raw page lines
            source: Description of where the lines came from, for errors

        Raises:
            EmptySourceError: If no start marker was found
        """
        window = self.window(lines)
        if not window:
            raise EmptySourceError(source or "the source")

        logger.debug(f"Window: {len(window)} lines, {sum(len(line) for line in window)} bytes")
        return window
