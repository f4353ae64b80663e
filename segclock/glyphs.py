"""
Segmented-digit glyph encoding.

Unicode 13 added SEGMENTED DIGIT ZERO..NINE (U+1FBF0..U+1FBF9) to the
Symbols for Legacy Computing block. They draw like a seven-segment display.
The block is laid out so that the glyph for an ASCII digit sits at a fixed
offset from the digit's own code point, which keeps the mapping to one
addition.
"""

from typing import NamedTuple

# ord("0") + SEGMENTED_DIGIT_OFFSET == 0x1FBF0
SEGMENTED_DIGIT_OFFSET = 0x1FBC0


class RenderedTime(NamedTuple):
    """A time string ready to be drawn.

    glyph_count is the number of source characters, used for centering. It is
    not a display-width measurement.
    """

    text: str
    glyph_count: int


def encode_char(ch: str) -> str:
    """Map an ASCII digit to its segmented glyph, leave anything else alone."""
    if "0" <= ch <= "9":
        return chr(SEGMENTED_DIGIT_OFFSET + ord(ch))
    return ch


def segmentify(text: str) -> RenderedTime:
    """Encode every character of text and count how many were processed."""
    count = 0
    encoded = []
    for ch in text:
        encoded.append(encode_char(ch))
        count += 1
    return RenderedTime("".join(encoded), count)
