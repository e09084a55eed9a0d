from dataclasses import FrozenInstanceError

import pytest

from zenta import version


def _info():
    return version.Info("1.2.3", "abc123", "2024-01-01", "python3.12", "linux/x86_64")


def test_get_defaults():
    info = version.get()
    assert info.version == "dev"
    assert info.git_commit == "unknown"
    assert info.build_date == "unknown"
    assert "/" in info.platform


def test_str_mentions_all_fields():
    text = str(_info())
    assert text.startswith("zenta 1.2.3 ")
    assert "(abc123)" in text
    assert "python3.12" in text
    assert "2024-01-01" in text
    assert text.endswith("linux/x86_64")


def test_string_with_program_name():
    info = _info()
    text = info.string_with_program_name("calm")
    assert text.startswith("calm 1.2.3 ")
    assert text.split(" ", 1)[1] == str(info).split(" ", 1)[1]


def test_info_is_immutable():
    info = _info()
    with pytest.raises(FrozenInstanceError):
        info.version = "2.0"
    assert info.version == "1.2.3"
    assert str(info).startswith("zenta 1.2.3 ")