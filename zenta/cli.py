"""Command routing, help text and the handlers behind each command."""

from __future__ import annotations

import os
import sys
import time
from collections.abc import Sequence
from typing import TextIO

from zenta import version
from zenta.breathing import (
    Session,
    add_bottom_padding,
    add_section_spacing,
    print_with_padding,
)
from zenta.display import display_beautifully
from zenta.quotes import QuoteService
from zenta.reflection import get_default_prompts

MIN_ARGS = 2
DEFAULT_PROGRAM_NAME = "zenta"

TITLE_PAUSE = 1.0
INSTRUCTION_PAUSE = 3.0
LAST_INSTRUCTION_PAUSE = 5.0
PROMPT_TITLE_PAUSE = 2.0
PROMPT_PAUSE = 8.0
CLOSING_PAUSE = 3.0


def _sleep(seconds: float) -> None:
    time.sleep(seconds)


def _flush() -> None:
    sys.stdout.flush()


def show_help(program_name: str, stream: TextIO | None = None) -> None:
    """Write the main help message."""
    out = stream if stream is not None else sys.stdout
    p = program_name
    lines = [
        f"{p} - mindfulness for terminal users",
        "",
        "USAGE:",
        f"  {p} now [options]         Take a mindful breathing moment",
        f"  {p} reflect               End-of-day reflection on thought patterns",
        f"  {p} help                  Show this help message",
        "",
        "NOW OPTIONS:",
        "  --quick, -q                 Quick 1-cycle session",
        "  --extended, -e              Extended 5-cycle session",
        "  --silent, -s                Breathing only, skip the quote",
        "  --simple                    Simple line animation (for terminal compatibility)",
        "  --complex                   Force complex animation (default except on Apple Terminal)",
        "",
        "EXAMPLES:",
        f"  {p} now                   Standard 3-cycle breathing session",
        f"  {p} now --quick           Quick 1-cycle breathing break",
        f"  {p} now --extended        Extended 5-cycle session",
        f"  {p} now --silent          Breathing without quote",
        f"  {p} now --simple          Simple animation (terminal compatibility)",
        f"  {p} reflect               Gentle end-of-day reflection",
        "",
        "MINDFUL ALIASES:",
        f"  alias breath='{p} now --quick'",
        f"  alias breathe='{p} now'",
        f"  alias reflect='{p} reflect'",
    ]
    out.write("\n".join(lines) + "\n")
    out.flush()


def handle_now(args: Sequence[str]) -> None:
    """Run a breathing session, then show a quote or a closing line."""
    session = Session(sleep=_sleep)
    session.parse_args(args)
    with session.hide_cursor():
        session.start()
        if session.show_quote:
            quote = QuoteService().get_random_quote()
            display_beautifully(quote, sleep=_sleep)
        else:
            print_with_padding("   Carry this calm with you throughout your day 🙏")
        add_bottom_padding()
        _flush()


def handle_reflect(args: Sequence[str]) -> None:
    """Guide an end-of-day reflection, pausing between the prompts."""
    prompts = get_default_prompts()

    print_with_padding(prompts.title)
    _flush()
    _sleep(TITLE_PAUSE)
    add_section_spacing()

    last = len(prompts.instructions) - 1
    for index, line in enumerate(prompts.instructions):
        print_with_padding(line)
        _flush()
        _sleep(LAST_INSTRUCTION_PAUSE if index == last else INSTRUCTION_PAUSE)
    add_section_spacing()

    print_with_padding(prompts.prompt_title)
    _flush()
    _sleep(PROMPT_TITLE_PAUSE)

    for line in prompts.prompts:
        print_with_padding(line)
        _flush()
        _sleep(PROMPT_PAUSE)
    add_section_spacing()

    for line in prompts.closing:
        print_with_padding(line)
        _flush()
        _sleep(CLOSING_PAUSE)
    add_bottom_padding()
    _flush()


def handle_version(program_name: str) -> None:
    """Write the program's version."""
    sys.stdout.write(f"{program_name} version {version.VERSION}\n")
    _flush()


def handle_unknown_command(command: str, program_name: str) -> None:
    """Report an unknown command and exit with status 1."""
    sys.stderr.write(f"Unknown command: {command}\n")
    sys.stderr.write(f"Run '{program_name} help' for available commands.\n")
    sys.stderr.flush()
    raise SystemExit(1)


def main(argv: Sequence[str] | None = None) -> int:
    """Dispatch the command named by the first argument."""
    program_name = (
        os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else ""
    ) or DEFAULT_PROGRAM_NAME
    args = list(sys.argv[1:] if argv is None else argv)

    if len(args) + 1 < MIN_ARGS:
        show_help(program_name)
        return 0

    command, rest = args[0], args[1:]
    if command == "now":
        handle_now(rest)
    elif command == "reflect":
        handle_reflect(rest)
    elif command == "help":
        show_help(program_name)
    elif command in ("version", "--version", "-v"):
        handle_version(program_name)
    else:
        handle_unknown_command(command, program_name)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())