"""Editable text buffer: cursor movement, editing, selection and search."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

from wwedit.config import Config, Flag
from wwedit.fileio import create_file, file_exists, get_basename, load_file, write_file

_BLANK_CHARS = " \n\t\r"
_SPACE_CHARS = " \t\n\v\f\r"


def _isalnum(ch: str) -> bool:
    return ch.isascii() and ch.isalnum()


def _isspace(ch: str) -> bool:
    return ch in _SPACE_CHARS


def _last_col(line: str) -> int:
    return max(len(line) - 1, 0)


def _split_lines(text: str) -> list[str]:
    parts = text.split("\n")
    lines = [part + "\n" for part in parts[:-1]]
    if parts[-1]:
        lines.append(parts[-1])
    return lines


@dataclass
class Viewport:
    """Size of the window area a buffer is shown in."""

    width: int = 80
    height: int = 24


@dataclass
class Clipboard:
    """Text held by copy, cut and kill commands, shared between buffers."""

    _chars: list[str] = field(default_factory=list)

    def clear(self) -> None:
        """Forget the held text."""
        self._chars.clear()

    def extend(self, text: str) -> None:
        """Append ``text`` to the held text."""
        self._chars.extend(text)

    def text(self) -> str:
        """Return the held text."""
        return "".join(self._chars)

    def __len__(self) -> int:
        return len(self._chars)


class BufferState(enum.Enum):
    """Editing mode of a buffer."""

    NORMAL = "normal"
    SELECTION = "selection"
    SEARCH = "search"


@dataclass
class Buffer:
    """Lines of text with a cursor, scroll offsets and an optional selection.

    Each line keeps its trailing newline. ``cy`` is the cursor line and
    ``cx`` the column; ``sy``/``sx`` anchor the selection.
    """

    viewport: Viewport = field(default_factory=Viewport)
    config: Config = field(default_factory=Config)
    clipboard: Clipboard = field(default_factory=Clipboard)
    lines: list[str] = field(default_factory=list)
    name: str = ""
    filename: str = ""
    cx: int = 0
    cy: int = 0
    wish_col: int = 0
    hscrloff: int = 0
    vscrloff: int = 0
    saved: bool = True
    state: BufferState = BufferState.NORMAL
    last_search: str = ""
    sy: int = 0
    sx: int = 0
    writable: bool = True
    last_tab: int = 0
    message: str | None = None

    @property
    def al(self) -> int:
        """Index of the line the cursor is on."""
        return self.cy

    @al.setter
    def al(self, value: int) -> None:
        self.cy = value

    # construction and persistence

    @classmethod
    def from_text(cls, text, viewport=None, config=None, clipboard=None) -> "Buffer":
        """Create an unnamed buffer holding ``text``."""
        return cls(
            viewport=Viewport() if viewport is None else viewport,
            config=Config() if config is None else config,
            clipboard=Clipboard() if clipboard is None else clipboard,
            lines=_split_lines(text),
        )

    @classmethod
    def from_file(cls, filename, viewport=None, config=None, clipboard=None) -> "Buffer":
        """Open ``filename``, creating it empty when it does not exist."""
        if file_exists(filename):
            text = load_file(filename)
        else:
            create_file(filename, True)
            text = ""
        buf = cls.from_text(text, viewport, config, clipboard)
        buf.filename = filename
        buf.name = get_basename(filename)
        return buf

    def text(self) -> str:
        """Whole contents of the buffer."""
        return "".join(self.lines)

    def _check_writable(self) -> bool:
        if not self.writable:
            self.message = "buffer is read-only"
            return False
        return True

    def save(self) -> bool:
        """Write the buffer to its file; False when the buffer is read-only."""
        if not self._check_writable():
            return False
        write_file(self.filename, self.text())
        self.saved = True
        self.message = "saved"
        return True

    # selection

    def selection_bounds(self) -> tuple[int, int, int, int]:
        """Return ``(start_y, start_x, end_y, end_x)`` with start before end."""
        anchor = (self.sy, self.sx)
        cursor = (self.cy, self.cx)
        start, end = (anchor, cursor) if anchor <= cursor else (cursor, anchor)
        return start[0], start[1], end[0], end[1]

    def _selection_in_range(self) -> tuple[int, int, int, int] | None:
        bounds = self.selection_bounds()
        if bounds[0] >= len(self.lines) or bounds[2] >= len(self.lines):
            return None
        return bounds

    def find_and_replace_in_selection(self, old: str, new: str) -> None:
        """Replace every ``old`` inside the selection with ``new``."""
        if self.state is not BufferState.SELECTION or not old:
            return
        bounds = self._selection_in_range()
        if bounds is None:
            return
        start_y, start_x, end_y, end_x = bounds

        for y in range(start_y, end_y + 1):
            line = self.lines[y]
            range_start, range_end = 0, len(line)
            if start_y == end_y:
                range_start, range_end = start_x, end_x
            elif y == start_y:
                range_start = start_x
            elif y == end_y:
                range_end = end_x

            if range_start >= len(line) or range_start >= range_end:
                continue

            i = range_start
            while i + len(old) <= range_end:
                if line[i:i + len(old)] == old:
                    line = line[:i] + new + line[i + len(old):]
                    range_end += len(new) - len(old)
                    i += len(new)
                else:
                    i += 1
            self.lines[y] = line

        self.saved = False

    def _copy_range(self, line: str, start: int, stop: int) -> None:
        if start >= len(line):
            return
        stop = min(stop, len(line))
        if start < stop:
            self.clipboard.extend(line[start:stop])

    def copy_selection(self) -> None:
        """Replace the clipboard with the selected text."""
        self.clipboard.clear()
        if self.state is not BufferState.SELECTION:
            return
        bounds = self._selection_in_range()
        if bounds is None:
            return
        start_y, start_x, end_y, end_x = bounds

        if start_y == end_y:
            self._copy_range(self.lines[start_y], start_x, end_x)
            return
        self._copy_range(self.lines[start_y], start_x, len(self.lines[start_y]))
        for line in self.lines[start_y + 1:end_y]:
            self._copy_range(line, 0, len(line))
        self._copy_range(self.lines[end_y], 0, end_x)

    def delete_selection(self) -> None:
        """Remove the selected text and leave selection mode."""
        if self.state is not BufferState.SELECTION:
            return
        bounds = self._selection_in_range()
        if bounds is not None:
            start_y, start_x, end_y, end_x = bounds
            self.saved = False
            if start_y == end_y:
                line = self.lines[start_y]
                self.lines[start_y] = line[:start_x] + line[end_x:]
            else:
                first = self.lines[start_y]
                if start_x < len(first):
                    first = first[:start_x]
                last = self.lines[end_y][end_x:]
                self.lines[start_y:end_y + 1] = [first + last]
            self.cx = start_x
            self.cy = start_y

        self.wish_col = self.cx
        self.state = BufferState.NORMAL
        self.adjust_scroll()

    # scrolling

    def _adjust_vscroll(self) -> bool:
        win_h = self.viewport.height - 1  # last row holds the status line
        if self.cy < self.vscrloff:
            self.vscrloff = self.cy
            return True
        if self.cy >= self.vscrloff + win_h:
            self.vscrloff = self.cy - win_h + 1
            return True
        return False

    def _adjust_hscroll(self) -> bool:
        win_w = self.viewport.width
        if self.cx < self.hscrloff:
            self.hscrloff = self.cx
            return True
        if self.cx >= self.hscrloff + win_w:
            self.hscrloff = self.cx - win_w + 1
            return True
        return False

    def adjust_scroll(self) -> bool:
        """Scroll so the cursor is visible; True when the view moved."""
        vertical = self._adjust_vscroll()
        horizontal = self._adjust_hscroll()
        return horizontal or vertical

    def _moved(self) -> bool:
        return self.adjust_scroll() or self.state is BufferState.SELECTION

    # cursor movement

    def _follow_wish_col(self) -> None:
        last = _last_col(self.lines[self.cy])
        self.cx = last if self.wish_col > last else self.wish_col

    def up(self) -> bool:
        """Move one line up, keeping the wished-for column."""
        if not self.lines:
            return False
        if self.cy > 0:
            self.cy -= 1
        self._follow_wish_col()
        return self._moved()

    def down(self) -> bool:
        """Move one line down, keeping the wished-for column."""
        if not self.lines:
            return False
        if self.cy < len(self.lines) - 1:
            self.cy += 1
        self._follow_wish_col()
        return self._moved()

    def right(self) -> bool:
        """Move one character right, wrapping to the next line."""
        if not self.lines:
            return False
        last = _last_col(self.lines[self.cy])
        if self.cx == last and self.cy < len(self.lines) - 1:
            self.cx = 0
            self.cy += 1
        elif self.cx < last:
            self.cx += 1
        self.wish_col = self.cx
        return self._moved()

    def left(self) -> bool:
        """Move one character left, wrapping to the previous line's end."""
        if not self.lines:
            return False
        if self.cx == 0 and self.cy > 0:
            self.cx = _last_col(self.lines[self.cy - 1])
            self.cy -= 1
        elif self.cx > 0:
            self.cx -= 1
        self.wish_col = self.cx
        return self.adjust_scroll()

    def end_of_line(self) -> bool:
        """Move to the last column of the line."""
        if not self.lines:
            return False
        self.cx = _last_col(self.lines[self.cy])
        self.wish_col = self.cx
        return self.adjust_scroll()

    def beginning_of_line(self) -> bool:
        """Move to the first column of the line."""
        self.cx = 0
        self.wish_col = 0
        return self.adjust_scroll()

    # editing

    def insert_char(self, ch: str, newline_advance: bool = True) -> None:
        """Insert ``ch`` at the cursor; a newline splits the line."""
        if not self._check_writable():
            return
        self.saved = False
        if not self.lines:
            self.lines.append("\n")

        line = self.lines[self.cy]
        line = line[:self.cx] + ch + line[self.cx:]
        self.cx += 1

        if ch == "\n":
            self.lines[self.cy] = line[:self.cx]
            self.lines.insert(self.cy + 1, line[self.cx:])
            if newline_advance:
                self.cx = 0
                self.cy += 1
        else:
            self.lines[self.cy] = line

        self.wish_col = self.cx
        self.adjust_scroll()

    def _remove_at(self, row: int, col: int) -> None:
        line = self.lines[row]
        self.lines[row] = line[:col] + line[col + 1:]

    def delete_char(self) -> bool:
        """Delete under the cursor (or the selection); True when lines changed."""
        if not self._check_writable():
            return False
        if self.state is BufferState.SELECTION:
            self.delete_selection()
            return True
        if not self.lines:
            return False

        row = self.cy
        newline = False
        self.saved = False
        line = self.lines[row]
        if self.cx < len(line) and line[self.cx] == "\n":
            newline = True
            if row >= len(self.lines) - 1:
                return False
            self.lines[row] = line + self.lines.pop(row + 1)

        self._remove_at(row, self.cx)
        self.cx = min(self.cx, _last_col(self.lines[row]))
        return self.adjust_scroll() or newline

    def backspace(self) -> bool:
        """Delete before the cursor; True when two lines were joined."""
        if not self._check_writable():
            return False
        if not self.lines:
            return False

        row = self.cy
        self.saved = False

        if self.cx == 0:
            if row == 0:
                return False
            prev = self.lines[row - 1]
            self.lines[row - 1] = prev[:-1] + self.lines[row]
            del self.lines[row]
            self.cy -= 1
            self.cx = len(prev) - 1
            self.adjust_scroll()
            return True

        steps = 1
        if self.last_tab > 0 and not self.config.has(Flag.TABMODE):
            self.last_tab -= 1
            steps = self.config.space_amt
        for _ in range(steps):
            self.left()
            self._remove_at(row, self.cx)
            self.cx = min(self.cx, _last_col(self.lines[row]))

        self.adjust_scroll()
        return False

    def tab(self) -> None:
        """Insert a tab, or spaces unless tab mode is on."""
        self.last_tab += 1
        if self.config.has(Flag.TABMODE):
            self.insert_char("\t", True)
        else:
            for _ in range(self.config.space_amt):
                self.insert_char(" ", True)

    def delete_until_eol(self) -> None:
        """Cut the text from the cursor to the end of the line."""
        if not self._check_writable() or not self.lines:
            return
        line = self.lines[self.cy]
        self.clipboard.clear()
        self.clipboard.extend(line[self.cx:_last_col(line)])
        self.lines[self.cy] = line[:self.cx] + "\n"

    def jump_to_first_char(self) -> None:
        """Move to the first non-blank character of the line."""
        if self.lines:
            for i, ch in enumerate(self.lines[self.cy]):
                if ch not in _BLANK_CHARS:
                    self.cx = i
                    break
        self.wish_col = self.cx

    def go_to_last_line(self) -> None:
        """Move to the start of the last line."""
        if not self.lines:
            return
        self.cy = len(self.lines) - 1
        self.cx = 0
        self.wish_col = 0
        self.adjust_scroll()

    def go_to_first_line(self) -> None:
        """Move to the start of the buffer."""
        self.cy = 0
        self.cx = 0
        self.wish_col = 0
        self.adjust_scroll()

    def prev_paragraph(self) -> bool:
        """Move up to the previous blank line."""
        target = self.cy
        for i in range(self.cy - 1, -1, -1):
            target = i
            if self.lines[i] == "\n":
                if i > 0 and self.lines[i + 1][:1] == "\n":
                    continue
                break
        self.cy = target
        self.cx = 0
        return self._moved()

    def next_paragraph(self) -> bool:
        """Move down to the next blank line."""
        target = self.cy
        for i in range(self.cy + 1, len(self.lines)):
            target = i
            if self.lines[i] == "\n":
                following = self.lines[i + 1] if i + 1 < len(self.lines) else ""
                if following[:1] == "\n":
                    continue
                break
        self.cy = target
        self.cx = 0
        return self._moved()

    def kill_line(self) -> None:
        """Cut the whole current line."""
        if not self._check_writable() or not self.lines:
            return
        self.clipboard.clear()
        self.clipboard.extend(self.lines.pop(self.cy))
        if self.lines and self.cy > len(self.lines) - 1:
            self.cy -= 1
        self.cx = 0
        self.wish_col = 0
        self.adjust_scroll()

    def jump_next_word(self) -> None:
        """Move to the end of the next word."""
        if not self.lines:
            return
        line = self.lines[self.cy]
        if not line:
            return
        i = self.cx
        hit = False
        while i < len(line):
            if _isalnum(line[i]):
                hit = True
            elif hit:
                break
            i += 1
        self.cx = len(line) - 1 if i == len(line) else i
        self.wish_col = self.cx

    def jump_prev_word(self) -> None:
        """Move to the start of the previous word."""
        if not self.lines:
            return
        line = self.lines[self.cy]
        if not line or self.cx == 0:
            return
        i = min(self.cx - 1, len(line) - 1)
        hit = False
        while i > 0:
            if _isalnum(line[i]):
                hit = True
            elif hit:
                break
            i -= 1
        self.cx = i
        if not _isalnum(line[self.cx]):
            self.cx += 1
        self.wish_col = self.cx

    def delete_word(self) -> None:
        """Cut from the cursor to the end of the next word."""
        if not self.lines:
            return
        line = self.lines[self.cy]
        end = self.cx
        hit = False
        while end < len(line):
            ch = line[end]
            if ch == "\n":
                break
            if _isalnum(ch):
                hit = True
            elif hit:
                break
            end += 1
        self.clipboard.clear()
        self.clipboard.extend(line[self.cx:end])
        self.lines[self.cy] = line[:self.cx] + line[end:]

    def center_view(self) -> None:
        """Scroll so the cursor line is in the middle of the view."""
        self.vscrloff = max(self.cy - self.viewport.height // 2, 0)
        self.adjust_scroll()

    # search

    def line_matches(self, index: int) -> list[int]:
        """Columns where the last search starts on line ``index``."""
        query = self.last_search
        line = self.lines[index]
        matches: list[int] = []
        if not query:
            return matches
        i = 0
        while i < len(line):
            if line.startswith(query, i):
                matches.append(i)
                i += len(query)
            else:
                i += 1
        return matches

    def find_matches(self) -> list[tuple[int, int]]:
        """``(line, column)`` of every match of the last search."""
        return [
            (row, col)
            for row in range(len(self.lines))
            for col in self.line_matches(row)
        ]

    # clipboard operations

    def paste(self) -> bool:
        """Insert the clipboard, replacing any selection; True if lines changed."""
        if not self._check_writable():
            return False
        newline = False
        if self.state is BufferState.SELECTION:
            self.delete_selection()
            newline = True
        for ch in self.clipboard.text():
            self.insert_char(ch, True)
            if ch == "\n":
                newline = True
        return newline

    def combine_lines(self) -> None:
        """Join the next line onto this one with a single space."""
        if not self.lines or self.cy >= len(self.lines) - 1:
            return
        first = self.lines[self.cy]
        second = self.lines[self.cy + 1].lstrip(" \t\r")
        self.lines[self.cy] = first[:-1] + " " + second
        del self.lines[self.cy + 1]
        self.cx = len(first) - 1
        self.wish_col = self.cx

    def page_down(self) -> None:
        """Move down by one window height."""
        if not self.lines:
            return
        height = self.viewport.height
        if self.cy + height >= len(self.lines):
            self.cy = len(self.lines) - 1
        else:
            self.cy += height
        self.cx = 0
        self.wish_col = 0
        self.adjust_scroll()

    def page_up(self) -> None:
        """Move up by one window height."""
        height = self.viewport.height
        self.cy = max(self.cy - height, 0)
        self.cx = 0
        self.wish_col = 0
        self.adjust_scroll()

    def toggle_selection(self) -> None:
        """Start or end a selection anchored at the cursor."""
        if self.state is BufferState.NORMAL:
            self.state = BufferState.SELECTION
        elif self.state is BufferState.SELECTION:
            self.state = BufferState.NORMAL
        else:
            return
        self.sy = self.cy
        self.sx = self.cx

    def cancel(self) -> None:
        """Return to normal mode."""
        self.state = BufferState.NORMAL

    def cut_selection(self) -> None:
        """Copy the selection to the clipboard and delete it."""
        if self.state is not BufferState.SELECTION:
            return
        self.copy_selection()
        self.delete_selection()

    def jump_to(self, x: int, y: int) -> bool:
        """Place the cursor at column ``x`` of line ``y`` if both are valid."""
        if y < 0 or y > len(self.lines) - 1:
            return False
        if x < 0 or x > len(self.lines[y]) - 1:
            return False
        self.cx = x
        self.cy = y
        self.adjust_scroll()
        return True

    def go_to_line(self, number: int) -> bool:
        """Move to the start of 1-based line ``number`` (line 1 is refused)."""
        if number - 1 >= len(self.lines) or number - 1 <= 0:
            return False
        self.cx = 0
        self.cy = number - 1
        self.adjust_scroll()
        return True

    def super_backspace(self) -> bool:
        """Delete the word before the cursor; True when text was removed."""
        if not self._check_writable():
            return False
        if not self.lines:
            return False
        if self.cx == 0:
            return self.backspace()

        self.saved = False
        line = self.lines[self.cy]
        start = self.cx
        while start > 0 and _isspace(line[start - 1]):
            start -= 1
        while start > 0 and not _isspace(line[start - 1]):
            start -= 1
        if start == self.cx:
            return False

        self.lines[self.cy] = line[:start] + line[self.cx:]
        self.cx = start
        self.last_tab = 0
        self.adjust_scroll()
        return True

    def expand_region(self) -> None:
        """Select from the cursor to the end of the next word."""
        if not self.lines:
            return
        if self.cx >= len(self.lines[self.cy]) - 1:
            return
        if self.state is not BufferState.SELECTION:
            self.toggle_selection()
        self.jump_next_word()
        self.wish_col = self.cx
        self.adjust_scroll()