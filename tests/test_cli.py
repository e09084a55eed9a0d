import io
import sys
import time

import pytest

from zenta import cli, version
from zenta.breathing import HIDE_CURSOR, SHOW_CURSOR
from zenta.quotes import BUILTIN_QUOTES
from zenta.reflection import get_default_prompts


@pytest.fixture
def sleeps(monkeypatch):
    recorded = []
    monkeypatch.setattr(time, "sleep", recorded.append)
    return recorded


@pytest.fixture
def program(monkeypatch):
    monkeypatch.setattr(sys, "argv", ["/usr/local/bin/zenta"])
    return "zenta"


def test_show_help_names_program_in_usage():
    buf = io.StringIO()
    cli.show_help("calm", buf)
    text = buf.getvalue()
    assert text.startswith("calm - mindfulness for terminal users\n")
    assert "  calm now [options]         Take a mindful breathing moment" in text
    assert "  alias breath='calm now --quick'" in text


def test_show_help_lists_every_now_option():
    buf = io.StringIO()
    cli.show_help("zenta", buf)
    text = buf.getvalue()
    for option in ("--quick", "--extended", "--silent", "--simple", "--complex"):
        assert option in text


def test_handle_version_prints_version(capsys):
    cli.handle_version("zenta")
    expected = "zenta version " + version.VERSION + "\n"
    assert capsys.readouterr().out == expected


def test_handle_unknown_command_exits_with_status_one(capsys):
    with pytest.raises(SystemExit) as info:
        cli.handle_unknown_command("dance", "zenta")
    assert info.value.code == 1
    err = capsys.readouterr().err
    assert "Unknown command: dance\n" in err
    assert "Run 'zenta help' for available commands.\n" in err


def test_main_without_arguments_shows_help(program, capsys):
    assert cli.main([]) == 0
    out = capsys.readouterr().out
    assert out.startswith(program + " - mindfulness for terminal users")


def test_main_help_command(program, capsys):
    assert cli.main(["help"]) == 0
    assert "USAGE:" in capsys.readouterr().out


@pytest.mark.parametrize("flag", ["version", "--version", "-v"])
def test_main_version_aliases(program, capsys, flag):
    assert cli.main([flag]) == 0
    expected = program + " version " + version.VERSION + "\n"
    assert capsys.readouterr().out == expected


def test_main_unknown_command(program, capsys):
    with pytest.raises(SystemExit) as info:
        cli.main(["nope"])
    assert info.value.code == 1
    assert "Unknown command: nope" in capsys.readouterr().err


def test_handle_reflect_prints_prompts_with_pauses(sleeps, capsys):
    cli.handle_reflect([])
    out = capsys.readouterr().out
    prompts = get_default_prompts()
    lines = [prompts.title]
    lines.extend(prompts.instructions)
    lines.append(prompts.prompt_title)
    lines.extend(prompts.prompts)
    lines.extend(prompts.closing)
    for line in lines:
        assert "    " + line + "\n" in out
    assert sleeps == [1.0, 3.0, 5.0, 2.0, 8.0, 8.0, 8.0, 3.0, 3.0]
    assert out.endswith("\n\n")


def test_handle_now_silent_simple(sleeps, capsys):
    cli.handle_now(["--quick", "--silent", "--simple"])
    out = capsys.readouterr().out
    assert out.startswith(HIDE_CURSOR)
    assert "Let's breathe 🌸" in out
    assert "🙏 Complete" in out
    assert "Carry this calm with you throughout your day 🙏" in out
    assert out.rstrip("\n").endswith(SHOW_CURSOR)
    assert len(sleeps) == 16
    assert all(s == 1.0 for s in sleeps)


def test_handle_now_with_quote_shows_a_builtin_quote(sleeps, capsys):
    cli.handle_now(["-q", "--complex"])
    out = capsys.readouterr().out
    assert "Carry this calm" not in out
    assert any(quote.split()[1] in out for quote in BUILTIN_QUOTES)
    assert HIDE_CURSOR in out
    assert SHOW_CURSOR in out
    assert out.index(HIDE_CURSOR) < out.index(SHOW_CURSOR)


def test_main_dispatches_now(program, sleeps, capsys):
    assert cli.main(["now", "--quick", "--silent", "--simple"]) == 0
    assert "Let's breathe" in capsys.readouterr().out
    assert len(sleeps) == 16