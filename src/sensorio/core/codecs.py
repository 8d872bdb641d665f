"""
Encoders and decoders for the composite sensor fields.

Two cells of the persisted format pack more than one value into a string:

- Resolution: a pixel pair written as "W x H".
- SupportedSqueezes: anamorphic squeeze ratios joined with ';'.

Values stay strings throughout; numbers are only parsed transiently when an
ordering needs them.
"""

import re
from typing import Iterable, Optional


COMMON_SQUEEZES = ["1.25", "1.3", "1.33", "1.5", "1.6", "1.65", "1.66", "1.8", "2.0"]
"""Preset squeeze ratios offered to the user."""

SQUEEZE_SEPARATOR = ";"
RESOLUTION_SEPARATOR = "x"

_LEADING_NUMBER = re.compile(r"^\s*[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?")


def parse_decimal(value: Optional[str]) -> float:
    """
    Parse the leading decimal number of a free-text value.

    Trailing text is ignored ("10.5mm" -> 10.5). Empty, missing or
    non-numeric values parse as 0.

    Args:
        value: Text to parse.

    Returns:
        The parsed number, or 0.0.
    """
    if not value:
        return 0.0
    match = _LEADING_NUMBER.match(value)
    if match is None:
        return 0.0
    return float(match.group(0))


def decode_resolution(value: Optional[str]) -> tuple[str, str]:
    """
    Split an encoded resolution into its width and height components.

    Whitespace around the separator is optional ("640x480" and "640 x 480"
    decode the same). Missing or empty components decode to "0".

    Args:
        value: Encoded resolution string.

    Returns:
        Tuple of (width, height) strings.
    """
    parts = [part.strip() for part in (value or "").split(RESOLUTION_SEPARATOR)]
    width = parts[0] if len(parts) > 0 and parts[0] else "0"
    height = parts[1] if len(parts) > 1 and parts[1] else "0"
    return width, height


def encode_resolution(width: str, height: str) -> str:
    """
    Encode a width/height pair as "W x H".

    Args:
        width: Horizontal pixel count.
        height: Vertical pixel count.

    Returns:
        The encoded resolution string.
    """
    return f"{width} {RESOLUTION_SEPARATOR} {height}"


def decode_squeezes(value: Optional[str]) -> list[str]:
    """
    Split an encoded squeeze set into its tokens.

    Empty tokens are dropped. Order is preserved exactly as stored.
    """
    if not value:
        return []
    return [token for token in value.split(SQUEEZE_SEPARATOR) if token.strip() != ""]


def encode_squeezes(tokens: Iterable[str]) -> str:
    """Join squeeze tokens with ';', preserving order."""
    return SQUEEZE_SEPARATOR.join(token for token in tokens if token)


def sort_squeezes(tokens: Iterable[str]) -> list[str]:
    """Sort squeeze tokens ascending by numeric value (stable)."""
    return sorted(tokens, key=parse_decimal)


def toggle_squeeze(value: Optional[str], token: str) -> str:
    """
    Toggle a squeeze ratio in an encoded squeeze set.

    Removing a present token keeps the remaining order untouched. Adding a
    token re-sorts the whole set ascending by numeric value and drops repeated
    tokens, so any manually entered order is normalized on the next toggle.

    Args:
        value: Current encoded squeeze set.
        token: Ratio token to add or remove.

    Returns:
        The new encoded squeeze set.
    """
    current = decode_squeezes(value)
    if token in current:
        updated = [existing for existing in current if existing != token]
    else:
        updated = sort_squeezes(dict.fromkeys(current + [token]))
    return encode_squeezes(updated)
