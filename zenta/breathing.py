"""Guided breathing sessions drawn in the terminal."""

from __future__ import annotations

import os
import signal
import sys
import threading
import time
from collections.abc import Callable, Iterable, Iterator, Sequence
from contextlib import contextmanager
from dataclasses import dataclass, field
from enum import Enum
from typing import TextIO

LEFT_PADDING = 4
SECTION_SPACING = 1
BOTTOM_PADDING = 2
REST_DURATION = 2.0

HIDE_CURSOR = "\033[?25l"
SHOW_CURSOR = "\033[?25h"
_SAVE = "\033[s"
_RESTORE = "\033[u"

_AREA_HEIGHT = 12
_CENTER_ROW_OFFSET = 5
_CENTER_COL = LEFT_PADDING + 25
_LINE_WIDTH = 80


class BreathType(str, Enum):
    """How the breathing circle changes during a phase."""

    EXPAND = "expand"
    FULL = "full"
    CONTRACT = "contract"
    EMPTY = "empty"


_SIMPLE_INHALE = ("·", "○", "○○", "●○○", "●●○○", "●●●○", "●●●●")
_SIMPLE_HOLD = ("●●●●", "●●●●", "●●●●", "●●●●")
_SIMPLE_EXHALE = ("●●●●", "●●●○", "●●○○", "●○○○", "○○○○", "○○  ", "○   ")
_SIMPLE_REST = ("·", "·", "·", "·")


def _out(stream: TextIO | None) -> TextIO:
    return stream if stream is not None else sys.stdout


def should_use_simple_animation() -> bool:
    """Tell whether the terminal needs the line-based animation (Apple Terminal)."""
    return sys.platform == "darwin" and os.environ.get("TERM_PROGRAM") == "Apple_Terminal"


def pattern_index(second: int, duration: int, count: int) -> int:
    """Pick which of ``count`` patterns to show at ``second`` of a phase."""
    index = (second - 1) * (count - 1) // (duration - 1)
    return min(index, count - 1)


def circle_shape(breath_type: str, second: int, duration: int) -> tuple[int, str]:
    """Return the circle size and character for a moment of a phase."""
    progress = second / duration
    if breath_type == BreathType.EXPAND:
        return 1 + int(progress * 3), "○"
    if breath_type == BreathType.FULL:
        return 4, "●"
    if breath_type == BreathType.CONTRACT:
        return 4 - int(progress * 3), "○"
    if breath_type == BreathType.EMPTY:
        return 1, "·"
    return 0, ""


def circle_points(
    row_offset: int, center_col: int, size: int, char: str
) -> list[tuple[int, int, str]]:
    """Return the (row, column, character) points that make up a breathing circle."""
    if size <= 1:
        return [(row_offset, center_col, char)]
    points: list[tuple[int, int, str]] = []
    for radius in range(1, size + 1):
        ring_char = char if radius == size else "·"
        offsets = [
            (-radius, 0),
            (radius, 0),
            (0, -radius * 2),
            (0, radius * 2),
        ]
        if radius > 1:
            diag = int(radius * 0.7)
            offsets += [(-diag, -diag), (-diag, diag), (diag, -diag), (diag, diag)]
        points.extend(
            (row_offset + dr, center_col + dc, ring_char) for dr, dc in offsets
        )
    return points


def print_with_padding(text: str, stream: TextIO | None = None) -> None:
    """Write a line with the standard left margin."""
    _out(stream).write(f"{' ' * LEFT_PADDING}{text}\n")


def add_section_spacing(stream: TextIO | None = None) -> None:
    """Write the blank lines that separate sections."""
    _out(stream).write("\n" * SECTION_SPACING)


def add_bottom_padding(stream: TextIO | None = None) -> None:
    """Write the blank lines that close the output."""
    _out(stream).write("\n" * BOTTOM_PADDING)


def _exit_signals() -> tuple[list[signal.Signals], Callable[[int], int]]:
    if os.name == "posix":
        return (
            [signal.SIGHUP, signal.SIGTERM, signal.SIGINT],
            lambda signum: 128 + int(signum),
        )
    return [signal.SIGINT], lambda signum: 1


@dataclass
class Session:
    """Configuration and rendering of one breathing session."""

    cycles: int = 3
    show_quote: bool = True
    inhale_dur: int = 4
    hold_dur: int = 4
    exhale_dur: int = 4
    rest_dur: float = REST_DURATION
    simple_mode: bool = field(default_factory=should_use_simple_animation)
    stream: TextIO | None = field(default=None, repr=False, compare=False)
    sleep: Callable[[float], None] = field(
        default=time.sleep, repr=False, compare=False
    )

    def parse_args(self, args: Iterable[str]) -> None:
        """Apply command-line options; unknown ones are ignored."""
        for arg in args:
            if arg in ("--quick", "-q"):
                self.cycles = 1
            elif arg in ("--extended", "-e"):
                self.cycles = 5
            elif arg in ("--silent", "-s"):
                self.show_quote = False
            elif arg == "--complex":
                self.simple_mode = False
            elif arg == "--simple":
                self.simple_mode = True

    @property
    def _out(self) -> TextIO:
        return _out(self.stream)

    @contextmanager
    def hide_cursor(self) -> Iterator[None]:
        """Hide the cursor for the duration, showing it again on exit or on a signal."""
        out = self._out
        previous: dict[signal.Signals, object] = {}
        if threading.current_thread() is threading.main_thread():
            signals, exit_code = _exit_signals()

            def _on_signal(signum: int, frame: object) -> None:
                raise SystemExit(exit_code(signum))

            for sig in signals:
                previous[sig] = signal.signal(sig, _on_signal)
        out.write(HIDE_CURSOR)
        out.flush()
        try:
            yield
        finally:
            out.write(SHOW_CURSOR + "\n")
            out.flush()
            for sig, handler in previous.items():
                signal.signal(sig, handler)

    def start(self) -> None:
        """Run the session, drawing each breath."""
        out = self._out
        out.write("\n")
        print_with_padding("   Let's breathe 🌸", out)
        add_section_spacing(out)
        if self.simple_mode:
            self._draw_simple_session()
        else:
            out.write("\n" * _AREA_HEIGHT)
            out.write(f"\033[{_AREA_HEIGHT}A")
            self._draw_continuous_session()
            out.write(f"\033[{_AREA_HEIGHT}B")
        add_section_spacing(out)
        out.flush()

    def _draw_simple_session(self) -> None:
        out = self._out
        phases = (
            ("🌬️", "Breathe in gently...", self.inhale_dur, _SIMPLE_INHALE),
            ("✨", "Hold softly...", self.hold_dur, _SIMPLE_HOLD),
            ("🌸", "Release slowly...", self.exhale_dur, _SIMPLE_EXHALE),
            ("🕯️", "Rest in emptiness...", self.hold_dur, _SIMPLE_REST),
        )
        for cycle in range(1, self.cycles + 1):
            for emoji, instruction, duration, patterns in phases:
                self._draw_simple_phase(emoji, instruction, duration, patterns)
            if cycle < self.cycles:
                print_with_padding("   💫 Feel the rhythm... continuing...", out)
                out.flush()
                self.sleep(self.rest_dur)
                out.write("\n")
        print_with_padding("   🙏 Complete", out)
        out.write("\n")

    def _draw_simple_phase(
        self, emoji: str, instruction: str, duration: int, patterns: Sequence[str]
    ) -> None:
        out = self._out
        print_with_padding(f"   {emoji} {instruction}", out)
        print_with_padding("      ", out)
        for second in range(1, duration + 1):
            pattern = patterns[pattern_index(second, duration, len(patterns))]
            out.write("\033[1A")
            print_with_padding(f"      {pattern}", out)
            out.flush()
            self.sleep(1.0)
        out.write("\n")

    def _draw_continuous_session(self) -> None:
        phases = (
            ("🌬️", "Breathe in gently, let your body expand...", self.inhale_dur, BreathType.EXPAND),
            ("✨", "Hold softly, feel the fullness...", self.hold_dur, BreathType.FULL),
            ("🌸", "Release slowly, let everything go...", self.exhale_dur, BreathType.CONTRACT),
            ("🕯️", "Rest in the emptiness, be present...", self.hold_dur, BreathType.EMPTY),
        )
        for cycle in range(1, self.cycles + 1):
            for emoji, instruction, duration, breath_type in phases:
                self._show_guidance(emoji, instruction)
                self._animate_circle(breath_type, duration)
            if cycle < self.cycles:
                self._show_guidance("💫", "Feel the rhythm... continuing...")
                self._out.flush()
                self.sleep(self.rest_dur)
        self._clear_line()

    def _show_guidance(self, emoji: str, instruction: str) -> None:
        self._out.write(
            f"{_SAVE}\r{' ' * LEFT_PADDING}   {emoji} {instruction}{' ' * 20}{_RESTORE}"
        )

    def _animate_circle(self, breath_type: BreathType, duration: int) -> None:
        out = self._out
        for second in range(1, duration + 1):
            size, char = circle_shape(breath_type, second, duration)
            self._clear_circle_area(_CENTER_ROW_OFFSET)
            for row, col, point_char in circle_points(
                _CENTER_ROW_OFFSET, _CENTER_COL, size, char
            ):
                self._draw_at(row, col, point_char)
            out.flush()
            self.sleep(1.0)

    def _clear_circle_area(self, row_offset: int) -> None:
        out = self._out
        out.write(_SAVE)
        for row in range(row_offset - 4, row_offset + 5):
            out.write(f"\033[{row}B\r{' ' * _LINE_WIDTH}{_RESTORE}{_SAVE}")
        out.write(_RESTORE)

    def _draw_at(self, row_offset: int, col: int, char: str) -> None:
        parts = [_SAVE]
        if row_offset > 0:
            parts.append(f"\033[{row_offset}B")
        elif row_offset < 0:
            parts.append(f"\033[{-row_offset}A")
        parts.append("\r")
        if col > 0:
            parts.append(f"\033[{col}C")
        parts.append(char)
        parts.append(_RESTORE)
        self._out.write("".join(parts))

    def _clear_line(self) -> None:
        self._out.write(f"{_SAVE}\r{' ' * _LINE_WIDTH}{_RESTORE}")