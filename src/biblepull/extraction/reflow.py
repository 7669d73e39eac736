"""Re-segment a content window into working blocks."""

import re
from collections.abc import Sequence

# Closing tags that end a block: paragraph, list item, ordered list,
# top heading and sub-heading. </h3> is not here on purpose: an editorial
# heading stays in the same block as the paragraph it introduces.
BLOCK_CLOSERS = ("</p>", "</li>", "</ol>", "</h1>", "</h4>")

_BLOCK_RE = re.compile("(?s).*?(?:" + "|".join(re.escape(tag) for tag in BLOCK_CLOSERS) + ")")


def join_lines(lines: Sequence[str]) -> str:
    """Join window lines into one buffer, separated by single spaces."""
    return " ".join(lines)


def split_blocks(buffer: str) -> list[str]:
    """
    Split a buffer immediately after every block closer.

    Blocks are stripped and empty ones dropped. Text after the last
    closer is kept as a final block.
    """
    blocks = []
    position = 0
    for match in _BLOCK_RE.finditer(buffer):
        blocks.append(match.group(0).strip())
        position = match.end()
    blocks.append(buffer[position:].strip())
    return [block for block in blocks if block]


def reflow(lines: Sequence[str]) -> list[str]:
    """Turn window lines into working blocks, independent of source line wrapping."""
    return split_blocks(join_lines(lines))
