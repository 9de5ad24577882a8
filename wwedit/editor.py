"""Key dispatch and the interactive prompts that drive a buffer."""

from __future__ import annotations

import enum
import subprocess
from typing import Callable, Optional, TextIO, Tuple

from wwedit.buffer import Buffer, BufferState
from wwedit.config import is_digits
from wwedit.keys import (
    CTRL_A,
    CTRL_B,
    CTRL_D,
    CTRL_E,
    CTRL_F,
    CTRL_G,
    CTRL_H,
    CTRL_K,
    CTRL_L,
    CTRL_N,
    CTRL_O,
    CTRL_P,
    CTRL_R,
    CTRL_S,
    CTRL_V,
    CTRL_W,
    CTRL_Y,
    InputType,
    is_backspace,
    is_enter,
    is_tab,
)
from wwedit.render import BOLD, INVERT, RESET, YELLOW, clear_line, render_buffer, status_line

KeyReader = Callable[[], Tuple[InputType, str]]


class BufferAction(enum.Enum):
    """How much of the screen a processed key requires redrawing."""

    NOP = "nop"
    MOV = "mov"
    INSERT = "insert"
    INSERTNL = "insertnl"


def _emit(out: TextIO, text: str) -> None:
    out.write(text)
    flush = getattr(out, "flush", None)
    if flush is not None:
        flush()


def _prompt(buffer: Buffer, label: str, text: str) -> str:
    return clear_line(buffer.viewport.height) + f"{label} [ {text}"


def minibuffer_input(buffer: Buffer, prompt: str | None, read_key: KeyReader,
                     out: TextIO) -> Optional[str]:
    """Read a line of text below the buffer; None when cancelled with C-g."""
    label = prompt or ""
    chars: list[str] = []
    while True:
        _emit(out, _prompt(buffer, label, "".join(chars)))
        kind, ch = read_key()
        if kind is InputType.NORMAL:
            if is_enter(ch):
                return "".join(chars)
            if is_backspace(ch):
                if chars:
                    chars.pop()
            else:
                chars.append(ch)
        elif kind is InputType.CTRL and ch == CTRL_G:
            return None


def search(buffer: Buffer, reverse: bool, read_key: KeyReader, out: TextIO) -> None:
    """Run incremental search, moving the cursor to the chosen match."""
    buffer.state = BufferState.SEARCH
    first = True
    old = (buffer.cx, buffer.cy)
    step = 0
    adjust = True

    def restore() -> None:
        buffer.cx, buffer.cy = old

    while True:
        pairs = buffer.find_matches()

        if adjust:
            step = 0
            for row, _ in pairs:
                if row < buffer.cy:
                    step += 1
                else:
                    break
            if reverse and step > 0:
                reverse = False
                step -= 1
        adjust = False

        if step < len(pairs):
            buffer.cy, buffer.cx = pairs[step]
            buffer.adjust_scroll()

        buffer.center_view()
        _emit(out, render_buffer(buffer) + _prompt(buffer, "Search", buffer.last_search))

        kind, ch = read_key()
        if kind is InputType.NORMAL:
            if first and (is_backspace(ch) or ch != "\n"):
                restore()
                buffer.last_search = ""
                first = False
                adjust = True
            if is_backspace(ch):
                restore()
                buffer.last_search = buffer.last_search[:-1]
                adjust = True
            elif is_enter(ch):
                if step < len(pairs):
                    buffer.cy, buffer.cx = pairs[step]
                    buffer.wish_col = buffer.cx
                break
            else:
                restore()
                adjust = True
                buffer.last_search += ch
        elif kind is InputType.CTRL and ch == CTRL_S:
            if step < len(pairs) - 1:
                step += 1
        elif kind is InputType.CTRL and ch == CTRL_R:
            if step > 0:
                step -= 1
        elif kind is InputType.CTRL and ch == CTRL_Y and len(buffer.clipboard) > 0:
            if first:
                restore()
                buffer.last_search = ""
                first = False
                adjust = True
            buffer.last_search += buffer.clipboard.text()
        else:
            restore()
            break

    buffer.state = BufferState.NORMAL
    buffer.center_view()
    buffer.adjust_scroll()


def jump_to_line(buffer: Buffer, read_key: KeyReader, out: TextIO) -> bool:
    """Prompt for a line number and move there; True when the cursor moved."""
    text = minibuffer_input(buffer, "Lineno", read_key, out)
    if text is None or not is_digits(text):
        return False
    return buffer.go_to_line(int(text))


def copy_to_clipboard(buffer: Buffer, out: TextIO) -> bool:
    """Hand the clipboard text to the configured system clipboard command."""
    template = buffer.config.to_clipboard
    if not template:
        return False
    text = buffer.clipboard.text()
    command = template.replace("%s", text, 1)
    try:
        subprocess.run(command, shell=True, check=False)
        ok = True
    except OSError:
        ok = False
    if ok:
        message = (f"copied {YELLOW}{BOLD}{len(text)}{RESET}{INVERT}"
                   " bytes to system clipboard")
    else:
        message = "copy to clipboard failed"
    _emit(out, render_buffer(buffer) + status_line(buffer, message))
    return ok


def _choose(moved: bool) -> BufferAction:
    return BufferAction.INSERTNL if moved else BufferAction.MOV


def _edit(changed_lines: bool) -> BufferAction:
    return BufferAction.INSERTNL if changed_lines else BufferAction.INSERT


def _process_ctrl(buffer: Buffer, ch: str, read_key: KeyReader,
                  out: TextIO) -> BufferAction:
    if is_tab(ch):
        buffer.tab()
        return BufferAction.INSERT

    buffer.last_tab = 0

    movements = {
        CTRL_N: buffer.down,
        CTRL_P: buffer.up,
        CTRL_F: buffer.right,
        CTRL_B: buffer.left,
        CTRL_E: buffer.end_of_line,
        CTRL_A: buffer.beginning_of_line,
    }
    if ch in movements:
        return _choose(movements[ch]())
    if ch == CTRL_D:
        return _edit(buffer.delete_char())
    if ch == CTRL_K:
        buffer.delete_until_eol()
        return BufferAction.INSERT
    if ch == CTRL_O:
        if buffer.writable:
            buffer.insert_char("\n", False)
            buffer.cx -= 1
            buffer.wish_col -= 1
        else:
            buffer.insert_char("\n", False)
        return BufferAction.INSERTNL
    if ch == CTRL_H:
        return _edit(buffer.backspace())
    if ch in (CTRL_S, CTRL_R):
        search(buffer, ch == CTRL_R, read_key, out)
        return BufferAction.INSERTNL
    if ch == CTRL_L:
        buffer.center_view()
        return BufferAction.INSERTNL
    if ch == CTRL_Y:
        return _edit(buffer.paste())
    if ch == CTRL_V:
        buffer.page_down()
        return BufferAction.INSERTNL
    if ch == CTRL_G:
        buffer.cancel()
        return BufferAction.INSERTNL
    if ch == CTRL_W:
        buffer.cut_selection()
        return BufferAction.INSERTNL
    return BufferAction.NOP


def _process_alt(buffer: Buffer, ch: str, read_key: KeyReader,
                 out: TextIO) -> BufferAction:
    buffer.last_tab = 0
    if ch == "m":
        buffer.jump_to_first_char()
        return BufferAction.MOV
    if ch == "<":
        buffer.go_to_first_line()
        return BufferAction.INSERTNL
    if ch == ">":
        buffer.go_to_last_line()
        return BufferAction.INSERTNL
    if ch == "{":
        return _choose(buffer.prev_paragraph())
    if ch == "}":
        return _choose(buffer.next_paragraph())
    if ch == "k":
        buffer.kill_line()
        return BufferAction.INSERTNL
    if ch == "f":
        buffer.jump_next_word()
        return BufferAction.MOV
    if ch == "b":
        buffer.jump_prev_word()
        return BufferAction.MOV
    if ch == "d":
        buffer.delete_word()
        return BufferAction.INSERT
    if ch == "j":
        buffer.combine_lines()
        return BufferAction.INSERTNL
    if ch == "v":
        buffer.page_up()
        return BufferAction.INSERTNL
    if ch == "w":
        buffer.copy_selection()
        buffer.cancel()
        return BufferAction.INSERTNL
    if ch == "g":
        jump_to_line(buffer, read_key, out)
        return BufferAction.INSERTNL
    if is_backspace(ch):
        return _edit(buffer.super_backspace())
    if ch == " ":
        buffer.expand_region()
        return BufferAction.MOV
    return BufferAction.NOP


def _process_arrow(buffer: Buffer, ch: str) -> BufferAction:
    buffer.last_tab = 0
    movements = {
        "A": buffer.up,
        "B": buffer.down,
        "C": buffer.right,
        "D": buffer.left,
        "E": buffer.end_of_line,
        "F": buffer.beginning_of_line,
    }
    move = movements.get(ch)
    if move is None:
        return BufferAction.NOP
    return _choose(move())


def _process_normal(buffer: Buffer, ch: str) -> BufferAction:
    if is_backspace(ch):
        return _edit(buffer.backspace())
    buffer.last_tab = 0
    if ch == "\0":
        buffer.toggle_selection()
        return BufferAction.INSERTNL
    buffer.insert_char(ch, True)
    return BufferAction.INSERTNL if ch == "\n" else BufferAction.INSERT


def process(buffer: Buffer, input_type: InputType, ch: str, read_key: KeyReader,
            out: TextIO) -> BufferAction:
    """Apply one key event to ``buffer`` and report what needs redrawing."""
    if input_type is InputType.CTRL:
        action = _process_ctrl(buffer, ch, read_key, out)
    elif input_type is InputType.ALT:
        action = _process_alt(buffer, ch, read_key, out)
    elif input_type is InputType.ARROW:
        action = _process_arrow(buffer, ch)
    elif input_type is InputType.NORMAL:
        action = _process_normal(buffer, ch)
    else:
        action = BufferAction.NOP

    if buffer.message is not None:
        message, buffer.message = buffer.message, None
        _emit(out, render_buffer(buffer) + status_line(buffer, message))
    return action