"""Quote layout and typewriter-style rendering."""

from __future__ import annotations

import sys
import time
from collections.abc import Callable, Iterable
from typing import TextIO

DEFAULT_EMOJI = "💭"
MAX_WIDTH = 50
LEFT_PADDING = 4
CHAR_DELAY = 0.05
SPACE_DELAY = 0.02

_EMOJI_RANGES = (
    (0x1F600, 0x1F64F),  # emoticons
    (0x1F300, 0x1F5FF),  # misc symbols and pictographs
    (0x1F680, 0x1F6FF),  # transport
    (0x2600, 0x26FF),  # misc symbols
    (0x2700, 0x27BF),  # dingbats
    (0xFE00, 0xFE0F),  # variation selectors
    (0x1F900, 0x1F9FF),  # supplemental symbols
)


def is_emoji(char: str) -> bool:
    """Tell whether the first character of ``char`` lies in a common emoji range."""
    if not char:
        return False
    code = ord(char[0])
    return any(low <= code <= high for low, high in _EMOJI_RANGES)


def parse_quote_emoji(quote: str) -> tuple[str, str]:
    """Split a leading emoji from the quote, or supply the default one."""
    parts = quote.split()
    if parts and is_emoji(parts[0]):
        return parts[0], " ".join(parts[1:])
    return DEFAULT_EMOJI, quote


def wrap_quote_text(quote_text: str) -> list[str]:
    """Wrap text into lines of at most MAX_WIDTH characters where words allow."""
    lines: list[str] = []
    current: list[str] = []
    current_length = 0
    for word in quote_text.split():
        if current and current_length + len(word) + len(current) > MAX_WIDTH:
            lines.append(" ".join(current))
            current = [word]
            current_length = len(word)
        else:
            current.append(word)
            current_length += len(word)
    if current:
        lines.append(" ".join(current))
    return lines


def render_quote(
    lines: Iterable[str],
    emoji: str,
    stream: TextIO | None = None,
    sleep: Callable[[float], None] = time.sleep,
) -> None:
    """Type the lines out one character at a time, the emoji leading the first."""
    out = stream if stream is not None else sys.stdout
    padding = " " * LEFT_PADDING
    out.write("\n")
    for index, line in enumerate(lines):
        out.write(padding)
        out.write(f"{emoji} " if index == 0 else "  ")
        for char in line:
            out.write(char)
            out.flush()
            sleep(SPACE_DELAY if char.isspace() else CHAR_DELAY)
        out.write("\n")
    out.write("\n")
    out.flush()


def display_beautifully(
    quote: str,
    stream: TextIO | None = None,
    sleep: Callable[[float], None] = time.sleep,
) -> None:
    """Show a quote wrapped and typed out with its emoji."""
    emoji, text = parse_quote_emoji(quote)
    render_quote(wrap_quote_text(text), emoji, stream, sleep)