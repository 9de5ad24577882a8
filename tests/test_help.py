import pytest

from wwedit.help import help_text, is_window_command, window_commands


def test_window_commands_order_and_count():
    commands = window_commands()
    assert len(commands) == 13
    assert commands[0] == "set-space-amt"
    assert commands[-1] == "trail-mode"


def test_window_commands_unique():
    commands = window_commands()
    assert len(set(commands)) == len(commands)


@pytest.mark.parametrize("name", ["find-file", "compile", "exit", "replace"])
def test_known_commands(name):
    assert is_window_command(name)


@pytest.mark.parametrize("name", ["", "find", "FIND-FILE", "quit"])
def test_unknown_commands(name):
    assert not is_window_command(name)


def test_help_text_sections():
    text = help_text()
    assert text.startswith("*** Help Buffer ***\n")
    assert "*** Controls ***\n" in text
    assert text.index("*** Help Buffer ***") < text.index("*** Controls ***")
    assert text.endswith("C-l = center view\n")


def test_help_text_lists_find_file_binding():
    assert "C-x C-f = find file *\n" in help_text()