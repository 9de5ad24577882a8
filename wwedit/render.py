"""Terminal rendering of buffers as ANSI escape strings."""

from __future__ import annotations

from wwedit.buffer import Buffer, BufferState
from wwedit.config import Flag

RESET = "\x1b[0m"
BOLD = "\x1b[1m"
DIM = "\x1b[2m"
INVERT = "\x1b[7m"
YELLOW = "\x1b[33m"
GRAY = "\x1b[90m"
ORANGE = "\x1b[38;5;208m"
CLEAR_TO_EOL = "\x1b[K"

_TAB_MARK = GRAY + ">" + RESET


def goto(x: int, y: int) -> str:
    """Escape sequence moving the cursor to zero-based column ``x``, row ``y``."""
    return f"\x1b[{y + 1};{x + 1}H"


def clear_screen() -> str:
    """Escape sequence clearing the terminal and homing the cursor."""
    return "\x1b[2J" + goto(0, 0)


def clear_line(y: int) -> str:
    """Escape sequence clearing row ``y`` and leaving the cursor at its start."""
    return goto(0, y) + "\x1b[2K" + goto(0, y)


def _content_end(line: str) -> tuple[str, int]:
    """Return the line without its newline and where trailing spaces start."""
    content = line[:-1] if line.endswith("\n") else line
    return content, len(content.rstrip(" "))


def _trailing_whitespace(buffer: Buffer, line: str) -> str:
    if not line:
        return ""
    content, eol = _content_end(line)
    mark = "-" if buffer.config.has(Flag.SHOWTRAILS) else " "
    return GRAY + mark * (len(content) - eol) + RESET


def _render_search(buffer: Buffer, line: str, index: int) -> str:
    query = buffer.last_search
    pending = buffer.line_matches(index)
    out: list[str] = []
    i = 0
    while i < len(line):
        if pending and i == pending[0]:
            start = pending.pop(0)
            current = (
                buffer.cy == index
                and i <= buffer.cx <= start + len(query)
            )
            style = INVERT + BOLD + ORANGE if current else INVERT + DIM + YELLOW
            out.append(style + query + RESET)
            i += len(query)
            continue
        ch = line[i]
        out.append(_TAB_MARK if ch == "\t" else ch)
        i += 1
    return "".join(out)


def _render_selection(buffer: Buffer, line: str, index: int) -> str:
    start_y, start_x, end_y, end_x = buffer.selection_bounds()
    is_start = index == start_y
    is_end = index == end_y
    is_middle = start_y < index < end_y

    out: list[str] = []
    for i, ch in enumerate(line):
        if is_middle:
            selected = True
        elif is_start and is_end:
            selected = start_x <= i < end_x
        elif is_start:
            selected = i >= start_x
        elif is_end:
            selected = i < end_x
        else:
            selected = False
        color = INVERT if selected else RESET
        if ch.isprintable() or ch == "\n":
            out.append(color + ch)
        else:
            out.append(color + _TAB_MARK)
    return "".join(out)


def _render_plain(line: str) -> str:
    _, eol = _content_end(line)
    return "".join(
        (_TAB_MARK + ch) if ch == "\t" else ch for ch in line[:eol]
    )


def render_line(buffer: Buffer, index: int) -> str:
    """Draw line ``index`` of ``buffer`` according to its current state."""
    line = buffer.lines[index]
    if buffer.state is BufferState.SEARCH:
        body = _render_search(buffer, line, index)
    elif buffer.state is BufferState.SELECTION:
        body = _render_selection(buffer, line, index)
    else:
        body = _render_plain(line)
    return body + _trailing_whitespace(buffer, line)


def _cursor(buffer: Buffer) -> str:
    return goto(buffer.cx - buffer.hscrloff, buffer.cy - buffer.vscrloff)


def status_line(buffer: Buffer, message: str | None = None) -> str:
    """Draw the inverted status bar below the text, then restore the cursor."""
    info = (
        f"{buffer.name}:{buffer.cy + 1}:{buffer.cx + 1}"
        f"{'' if buffer.saved else '*'} {buffer.state.value}"
    )
    if message is not None:
        info += f" [{message}{RESET}{INVERT}]"
    padding = " " * max(buffer.viewport.width - len(info), 0)
    return (
        goto(0, buffer.viewport.height)
        + INVERT
        + info
        + padding
        + RESET
        + _cursor(buffer)
    )


def render_cursor_line(buffer: Buffer) -> str:
    """Redraw only the cursor's line and the status bar."""
    if not buffer.lines:
        return status_line(buffer)
    screen_y = buffer.cy - buffer.vscrloff
    return (
        goto(0, screen_y)
        + CLEAR_TO_EOL
        + render_line(buffer, buffer.cy)
        + goto(buffer.cx - buffer.hscrloff, screen_y)
        + status_line(buffer)
    )


def render_buffer(buffer: Buffer) -> str:
    """Redraw the whole visible part of the buffer and the status bar."""
    parts = [clear_screen()]
    start = buffer.vscrloff
    for i in range(start, start + buffer.viewport.height):
        parts.append(goto(0, i - start) + CLEAR_TO_EOL)
        if i >= len(buffer.lines):
            parts.append(DIM + "~")
        else:
            parts.append(render_line(buffer, i))
    parts.append(RESET)
    parts.append(_cursor(buffer))
    parts.append(status_line(buffer))
    return "".join(parts)