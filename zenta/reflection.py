"""Prompts for mindful reflection sessions."""

from __future__ import annotations

from dataclasses import dataclass

_INDENT = " " * 3
_BULLET = " " * 6 + "• "


@dataclass(frozen=True)
class PromptSet:
    """The text of one reflection session."""

    title: str
    instructions: tuple[str, ...]
    prompt_title: str
    prompts: tuple[str, ...]
    closing: tuple[str, ...]


def _indented(lines: tuple[str, ...], prefix: str) -> tuple[str, ...]:
    return tuple(prefix + line for line in lines)


def get_default_prompts() -> PromptSet:
    """Return the default set of reflection prompts."""
    return PromptSet(
        title="🕯️  Evening Reflection",
        instructions=_indented(
            ("Close your eyes for a moment...", "Take three deep breaths..."),
            _INDENT,
        ),
        prompt_title=_INDENT + "📝 Gentle reflection:",
        prompts=_indented(
            (
                "What thoughts kept pulling you away today?",
                "Were there moments when you were truly present?",
                "What patterns do you notice in your mind?",
            ),
            _BULLET,
        ),
        closing=_indented(
            (
                "These are just thoughts. They come and go like clouds.",
                "The noticing itself is the practice. 🙏",
            ),
            _INDENT,
        ),
    )