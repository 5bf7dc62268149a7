"""Source attribute lookup in raw `<img ...>` tag text."""

from __future__ import annotations

import re

_SRC_PATTERN = re.compile(r"src=", re.IGNORECASE)
_QUOTES = ("'", '"')


def extract_src(tag_text: str) -> str | None:
    """Return the value of the `src` attribute in an image tag.

    A quote right after `src=` delimits the value; otherwise it ends at the next
    space. When the closing delimiter is missing the value runs to the end of the
    buffer, minus the `>` closing the tag if there is one.

    Args:
        tag_text: Tag text as accumulated by the scanner, starting with `<img`.

    Returns:
        str | None: The attribute value, or None when the tag has no `src=`.
    """
    match = _SRC_PATTERN.search(tag_text)
    if match is None:
        return None

    start = match.end()
    terminator = " "
    if start < len(tag_text) and tag_text[start] in _QUOTES:
        terminator = tag_text[start]
        start += 1

    end = tag_text.find(terminator, start)
    if end == -1:
        end = len(tag_text) - 1 if tag_text.endswith(">") else len(tag_text)
    return tag_text[start:max(start, end)]
