import pytest

from wwedit.config import DEFAULT_SPACE_AMT, Config, Flag, is_digits, usage


def test_defaults():
    cfg = Config()
    assert cfg.flags == Flag.NONE
    assert cfg.space_amt == DEFAULT_SPACE_AMT
    assert cfg.to_clipboard is None
    assert (cfg.term_width, cfg.term_height) == (0, 0)


def test_toggle_sets_and_clears():
    cfg = Config()
    assert cfg.toggle(Flag.TABMODE) is True
    assert cfg.has(Flag.TABMODE)
    assert not cfg.has(Flag.SHOWTRAILS)
    assert cfg.toggle(Flag.TABMODE) is False
    assert cfg.flags == Flag.NONE


def test_flags_are_independent():
    cfg = Config()
    cfg.toggle(Flag.TABMODE)
    cfg.toggle(Flag.SHOWTRAILS)
    cfg.toggle(Flag.TABMODE)
    assert cfg.has(Flag.SHOWTRAILS)
    assert not cfg.has(Flag.TABMODE)


def test_has_none_is_false():
    assert not Config().has(Flag.NONE)


def test_usage_prints_and_exits(capsys):
    with pytest.raises(SystemExit) as info:
        usage()
    assert info.value.code == 0
    assert capsys.readouterr().out == "Usage: ww [OPTIONS...] <filepath>\n"


@pytest.mark.parametrize(
    "text, expected",
    [("123", True), ("0", True), ("12a", False), ("", False), ("-1", False), (" 1", False)],
)
def test_is_digits(text, expected):
    assert is_digits(text) is expected