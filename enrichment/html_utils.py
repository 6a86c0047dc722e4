"""
HTML entity decoding utilities for the content enrichment pipeline.

Meta tag values scraped from social platforms are frequently double
encoded (e.g. ``&amp;#x1F4BC;``), so every value that leaves the
metadata extractor is passed through decode_entities().
"""

import re

# Replaced in this order, by exact substring match
NAMED_ENTITIES = (
    ('&quot;', '"'),
    ('&amp;', '&'),
    ('&lt;', '<'),
    ('&gt;', '>'),
    ('&nbsp;', ' '),
    ('&apos;', "'"),
    ('&#39;', "'"),
)

DECIMAL_ENTITY_RE = re.compile(r'&#(\d+);')
HEX_ENTITY_RE = re.compile(r'&#x([0-9A-Fa-f]+);')

MAX_CODE_POINT = 0x10FFFF
CODE_UNIT_MASK = 0xFFFF


def _decimal_to_char(match: re.Match) -> str:
    """Decimal entities are single 16-bit code units; larger values wrap."""
    return chr(int(match.group(1)) & CODE_UNIT_MASK)


def _hex_to_char(match: re.Match) -> str:
    """Hex entities are full code points; out-of-range values stay untouched."""
    value = int(match.group(1), 16)
    if value > MAX_CODE_POINT:
        return match.group(0)
    return chr(value)


def decode_entities(text: str) -> str:
    """
    Decode named, decimal and hexadecimal HTML entities.

    Args:
        text: Raw text, possibly containing entities

    Returns:
        Decoded text. Empty or None input is returned unchanged.

    Examples:
        >>> decode_entities('Tips &amp; Tricks')
        'Tips & Tricks'

        >>> decode_entities('&#x1F600;')
        '😀'
    """
    if not text:
        return text

    decoded = text
    for entity, replacement in NAMED_ENTITIES:
        decoded = decoded.replace(entity, replacement)

    decoded = DECIMAL_ENTITY_RE.sub(_decimal_to_char, decoded)

    # Python strings hold full code points, so astral characters (emoji)
    # decode to a single character rather than a surrogate pair
    decoded = HEX_ENTITY_RE.sub(_hex_to_char, decoded)

    return decoded
