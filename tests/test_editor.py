import io

import pytest

from wwedit.buffer import Buffer, BufferState
from wwedit.config import Config, Flag
from wwedit.editor import (
    BufferAction,
    copy_to_clipboard,
    jump_to_line,
    minibuffer_input,
    process,
    search,
)
from wwedit.keys import CTRL_G, CTRL_O, CTRL_S, CTRL_W, CTRL_X, CTRL_Y, InputType


def keys(*events):
    it = iter(events)
    return lambda: next(it)


def normal(text):
    return [(InputType.NORMAL, c) for c in text]


def no_keys():
    raise AssertionError("no key expected")


# minibuffer


def test_minibuffer_collects_text():
    buf = Buffer.from_text("x\n")
    out = io.StringIO()
    reader = keys(*normal("ab"), (InputType.NORMAL, "\x7f"), *normal("c\n"))
    assert minibuffer_input(buf, "Name", reader, out) == "ac"
    assert "Name [ " in out.getvalue()


def test_minibuffer_cancel_returns_none():
    buf = Buffer.from_text("x\n")
    reader = keys(*normal("ab"), (InputType.CTRL, CTRL_G))
    assert minibuffer_input(buf, "Name", reader, io.StringIO()) is None


def test_minibuffer_ignores_other_ctrl_keys():
    buf = Buffer.from_text("x\n")
    reader = keys(*normal("q"), (InputType.CTRL, CTRL_X), *normal("\n"))
    assert minibuffer_input(buf, None, reader, io.StringIO()) == "q"


# jump to line


def test_jump_to_line_moves_cursor():
    buf = Buffer.from_text("a\nb\nc\nd\ne\n")
    assert jump_to_line(buf, keys(*normal("3\n")), io.StringIO())
    assert (buf.cy, buf.cx) == (2, 0)


@pytest.mark.parametrize("typed", ["abc\n", "1\n", "99\n", "\n"])
def test_jump_to_line_rejects(typed):
    buf = Buffer.from_text("a\nb\nc\n")
    buf.cy = 1
    assert not jump_to_line(buf, keys(*normal(typed)), io.StringIO())
    assert buf.cy == 1


# search


def test_search_finds_first_match_from_top():
    buf = Buffer.from_text("foo\nbar foo\n")
    out = io.StringIO()
    search(buf, False, keys(*normal("foo\n")), out)
    assert (buf.cy, buf.cx) == (0, 0)
    assert buf.last_search == "foo"
    assert buf.state is BufferState.NORMAL
    assert "Search [ foo" in out.getvalue()


def test_search_starts_from_cursor_line():
    buf = Buffer.from_text("foo\nbar foo\n")
    buf.cy = 1
    search(buf, False, keys(*normal("foo\n")), io.StringIO())
    assert (buf.cy, buf.cx) == (1, 4)
    assert buf.wish_col == buf.cx


def test_search_ctrl_s_goes_to_next_match():
    buf = Buffer.from_text("foo\nbar foo\n")
    reader = keys(*normal("foo"), (InputType.CTRL, CTRL_S), *normal("\n"))
    search(buf, False, reader, io.StringIO())
    assert (buf.cy, buf.cx) == (1, 4)


def test_reverse_search_goes_back():
    buf = Buffer.from_text("foo\nbar foo\n")
    buf.cy = 1
    search(buf, True, keys(*normal("f\n")), io.StringIO())
    assert (buf.cy, buf.cx) == (0, 0)


def test_search_cancel_restores_cursor():
    buf = Buffer.from_text("foo\nbar foo\nzzz\n")
    buf.cy, buf.cx = 2, 1
    reader = keys(*normal("bar"), (InputType.CTRL, CTRL_G))
    search(buf, False, reader, io.StringIO())
    assert (buf.cy, buf.cx) == (2, 1)
    assert buf.last_search == "bar"
    assert buf.state is BufferState.NORMAL


def test_search_enter_reuses_last_query():
    buf = Buffer.from_text("foo\nbar foo\n")
    buf.last_search = "bar"
    search(buf, False, keys(*normal("\n")), io.StringIO())
    assert (buf.cy, buf.cx) == (1, 0)
    assert buf.last_search == "bar"


def test_search_typing_replaces_last_query():
    buf = Buffer.from_text("foo\nbar foo\n")
    buf.last_search = "bar"
    search(buf, False, keys(*normal("fo\n")), io.StringIO())
    assert buf.last_search == "fo"


def test_search_paste_from_clipboard():
    buf = Buffer.from_text("foo\nbar foo\n")
    buf.clipboard.extend("bar")
    search(buf, False, keys((InputType.CTRL, CTRL_Y), *normal("\n")), io.StringIO())
    assert buf.last_search == "bar"
    assert (buf.cy, buf.cx) == (1, 0)


# clipboard command


def test_copy_to_clipboard_without_command():
    buf = Buffer.from_text("x\n")
    assert copy_to_clipboard(buf, io.StringIO()) is False


def test_copy_to_clipboard_runs_command(tmp_path):
    target = tmp_path / "clip.txt"
    buf = Buffer.from_text("x\n", config=Config(to_clipboard=f"printf %s > {target}"))
    buf.clipboard.extend("hello")
    out = io.StringIO()
    assert copy_to_clipboard(buf, out)
    assert target.read_text() == "hello"
    assert "bytes to system clipboard" in out.getvalue()


# key dispatch


def test_process_inserts_character():
    buf = Buffer.from_text("bc\n")
    assert process(buf, InputType.NORMAL, "a", no_keys, io.StringIO()) is BufferAction.INSERT
    assert buf.text() == "abc\n"
    assert buf.saved is False


def test_process_enter_splits_line():
    buf = Buffer.from_text("ab\n")
    buf.cx = 1
    assert process(buf, InputType.NORMAL, "\n", no_keys, io.StringIO()) is BufferAction.INSERTNL
    assert buf.lines == ["a\n", "b\n"]
    assert (buf.cy, buf.cx) == (1, 0)


def test_process_ctrl_o_keeps_cursor():
    buf = Buffer.from_text("ab\n")
    buf.cx = 1
    assert process(buf, InputType.CTRL, CTRL_O, no_keys, io.StringIO()) is BufferAction.INSERTNL
    assert buf.lines == ["a\n", "b\n"]
    assert (buf.cy, buf.cx) == (0, 1)


def test_process_tab_and_backspace_round_trip():
    buf = Buffer.from_text("x\n")
    assert process(buf, InputType.CTRL, "\t", no_keys, io.StringIO()) is BufferAction.INSERT
    assert buf.text() == " " * buf.config.space_amt + "x\n"
    process(buf, InputType.NORMAL, "\x7f", no_keys, io.StringIO())
    assert buf.text() == "x\n"
    assert buf.cx == 0


def test_process_tab_mode_inserts_tab():
    buf = Buffer.from_text("x\n", config=Config(flags=Flag.TABMODE))
    process(buf, InputType.CTRL, "\t", no_keys, io.StringIO())
    assert buf.text() == "\tx\n"


def test_process_arrows_move():
    buf = Buffer.from_text("ab\ncd\n")
    process(buf, InputType.ARROW, "B", no_keys, io.StringIO())
    assert buf.cy == 1
    process(buf, InputType.ARROW, "A", no_keys, io.StringIO())
    assert buf.cy == 0
    process(buf, InputType.ARROW, "C", no_keys, io.StringIO())
    assert buf.cx == 1


def test_process_alt_jumps_to_ends():
    buf = Buffer.from_text("a\nb\nc\n")
    process(buf, InputType.ALT, ">", no_keys, io.StringIO())
    assert buf.cy == len(buf.lines) - 1
    process(buf, InputType.ALT, "<", no_keys, io.StringIO())
    assert buf.cy == 0


def test_process_select_copy_and_paste():
    buf = Buffer.from_text("hello world\n")
    out = io.StringIO()
    process(buf, InputType.NORMAL, "\0", no_keys, out)
    assert buf.state is BufferState.SELECTION
    buf.cx = 5
    process(buf, InputType.ALT, "w", no_keys, out)
    assert buf.clipboard.text() == "hello"
    assert buf.state is BufferState.NORMAL
    buf.cx = 11
    process(buf, InputType.CTRL, CTRL_Y, no_keys, out)
    assert buf.text() == "hello worldhello\n"


def test_process_cut_selection():
    buf = Buffer.from_text("hello world\n")
    process(buf, InputType.NORMAL, "\0", no_keys, io.StringIO())
    buf.cx = 6
    assert process(buf, InputType.CTRL, CTRL_W, no_keys, io.StringIO()) is BufferAction.INSERTNL
    assert buf.clipboard.text() == "hello "
    assert buf.text() == "world\n"


def test_process_alt_g_uses_prompt():
    buf = Buffer.from_text("a\nb\nc\n")
    process(buf, InputType.ALT, "g", keys(*normal("2\n")), io.StringIO())
    assert buf.cy == 1


def test_process_ctrl_s_runs_search():
    buf = Buffer.from_text("abc\nxyz\n")
    action = process(buf, InputType.CTRL, CTRL_S, keys(*normal("xyz\n")), io.StringIO())
    assert action is BufferAction.INSERTNL
    assert (buf.cy, buf.cx) == (1, 0)


def test_process_unknown_keys_do_nothing():
    buf = Buffer.from_text("abc\n")
    assert process(buf, InputType.CTRL, CTRL_X, no_keys, io.StringIO()) is BufferAction.NOP
    assert process(buf, InputType.UNKNOWN, "a", no_keys, io.StringIO()) is BufferAction.NOP
    assert buf.text() == "abc\n"


def test_process_read_only_reports_message():
    buf = Buffer.from_text("abc\n")
    buf.writable = False
    out = io.StringIO()
    process(buf, InputType.NORMAL, "z", no_keys, out)
    assert buf.text() == "abc\n"
    assert "buffer is read-only" in out.getvalue()
    assert buf.message is None