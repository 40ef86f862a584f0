"""Replaces sentence punctuation with line breaks."""

import re

# "..." is listed first so the whole ellipsis collapses into one break.
PUNCTUATION_PATTERN = re.compile(r"\.\.\.|[：:，,.。…]")

def normalize(text: str) -> str:
    """
    Replaces every punctuation mark of the fixed set with a line break.

    The set is: full/half-width colon, full/half-width comma, half/full-width
    period, the three-dot ellipsis and the single ellipsis glyph.

    Args:
        text: Raw document text.

    Returns:
        The text with each punctuation mark replaced by a single newline.
    """
    return PUNCTUATION_PATTERN.sub("\n", text)
