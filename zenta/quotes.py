"""Built-in mindfulness quotes and random selection among them."""

from __future__ import annotations

import secrets
from collections.abc import Iterable

FALLBACK_QUOTE = "🧘 Take a breath. This moment is all there is."

# (emoji, saying, attribution); an empty attribution means none is shown.
_COLLECTION: tuple[tuple[str, str, str], ...] = (
    ("🧘", "Take a breath. This moment is all there is.", ""),
    ("🌱", "What you resist persists. What you accept transforms.", ""),
    ("⭐", "The present moment is the only time over which we have dominion.",
     "Thich Nhat Hanh"),
    ("🍃", "Wherever you are, be there totally.", "Eckhart Tolle"),
    ("🌊", "You have power over your mind—not outside events. "
           "Realize this, and you will find strength.", "Marcus Aurelius"),
    ("🎯", "The best way to take care of the future is to take care "
           "of the present moment.", ""),
    ("🌸", "Peace comes from within. Do not seek it without.", "Buddha"),
    ("🕯️", "Between stimulus and response there is a space. "
            "In that space is our power to choose our response.", ""),
    ("🌿", "Mindfulness is about being fully awake in our lives.", ""),
    ("⚡", "This too shall pass. Notice what arises, and let it go.", ""),
    ("🎋", "The mind is everything. What you think you become.", "Buddha"),
    ("🌅", "Each morning we are born again. "
           "What we do today is what matters most.", ""),
    ("🪨", "Be like water making its way through cracks.", "Bruce Lee"),
    ("🌊", "Flow with whatever may happen and let your mind be free.", ""),
    ("⭐", "The quieter you become, the more you are able to hear.", ""),
    ("🌱", "In the beginner's mind there are many possibilities, "
           "in the expert's mind there are few.", "Shunryu Suzuki"),
    ("🕊️", "Let go or be dragged.", "Zen Proverb"),
    ("🌸", "The only way out is through.", ""),
    ("🎯", "Focus on the step in front of you, not the whole staircase.", ""),
    ("🌿", "Breathe in calm, breathe out chaos.", ""),
    ("⚖️", "Balance is not something you find, it's something you create.", ""),
    ("🌊", "When you realize nothing is lacking, "
           "the whole world belongs to you.", "Lao Tzu"),
    ("🪷", "Muddy water is best cleared by leaving it alone.", "Alan Watts"),
    ("🌅", "Every moment is a fresh beginning.", "T.S. Eliot"),
    ("🎋", "Simplicity is the ultimate sophistication.", ""),
)


def _format(emoji: str, saying: str, author: str) -> str:
    text = f"{emoji} {saying}"
    return f"{text} - {author}" if author else text


BUILTIN_QUOTES: tuple[str, ...] = tuple(_format(*entry) for entry in _COLLECTION)


class QuoteService:
    """Hands out quotes from a fixed collection."""

    def __init__(self, quotes: Iterable[str] | None = None) -> None:
        self._quotes: tuple[str, ...] = (
            BUILTIN_QUOTES if quotes is None else tuple(quotes)
        )

    def get_random_quote(self) -> str:
        """Return a randomly chosen quote, or the fallback if there are none."""
        if not self._quotes:
            return FALLBACK_QUOTE
        return secrets.choice(self._quotes)

    def get_all_quotes(self) -> list[str]:
        """Return a fresh list of every quote."""
        return list(self._quotes)

    def quote_count(self) -> int:
        """Return how many quotes are available."""
        return len(self._quotes)