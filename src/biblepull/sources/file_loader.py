"""Reading a saved passage page from disk."""

import logging
from pathlib import Path
from typing import Union

from ..errors import SourceReadError

logger = logging.getLogger(__name__)


def load_lines(path: Union[str, Path]) -> list[str]:
    """
    Read an HTML file as a list of lines.

    Raises:
        SourceReadError: If the file cannot be read or is not UTF-8
    """
    try:
        text = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise SourceReadError(str(path), str(e)) from e
    return text.splitlines()


class FileLineSource:
    """
    Serves lines from a local HTML file instead of the live site.

    The reference and version are ignored; the file is assumed to hold
    the page for them.
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def describe(self, reference: str, version: str) -> str:
        return f"file '{self.path}'"

    def read_lines(self, reference: str, version: str) -> list[str]:
        logger.debug(f"Using test data from '{self.path}'")
        return load_lines(self.path)
