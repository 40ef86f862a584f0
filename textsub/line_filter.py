"""Blank line detection and removal."""

import re
from typing import List

# Windows and old Mac line endings count as one break each.
LINE_BREAK_PATTERN = re.compile(r"\r\n|\r|\n")

def _is_blank(line: str) -> bool:
    return not line.strip()

def _lines(text: str) -> List[str]:
    return LINE_BREAK_PATTERN.split(text)

def has_blank_lines(text: str) -> bool:
    """Returns True if any line of the text is empty or whitespace-only."""
    if not text:
        return False
    return any(_is_blank(line) for line in _lines(text))

def split_lines(text: str) -> List[str]:
    """Returns the non-blank lines of the text, in their original order."""
    return [line for line in _lines(text) if not _is_blank(line)]

def remove_blank_lines(text: str) -> str:
    """
    Drops every blank line and rejoins the rest with a single newline.

    Applying it more than once gives the same result as applying it once.
    """
    return "\n".join(split_lines(text))
