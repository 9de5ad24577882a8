# wwedit

The editing core of a small terminal text editor whose key bindings follow
Emacs defaults: `C-f`/`C-b`/`C-n`/`C-p` to move, `C-s`/`C-r` to search,
`C-SPACE` to start a selection, `M-w` to copy, `C-w` to cut and `C-y` to paste.

It needs a POSIX system (`wwedit.fileio` reads the password database to find
the home directory) and has no dependencies outside the standard library.

## Modules

- `wwedit.buffer`: the `Buffer` class. It keeps its text as a list of lines,
  each ending in its newline, with a cursor (`cx`, `cy`), scroll offsets
  inside a `Viewport`, a `BufferState` (`NORMAL`, `SELECTION`, `SEARCH`) and a
  `Clipboard` that several buffers can share. Build one with
  `Buffer.from_text` or `Buffer.from_file` (which creates a missing file
  empty); `text()` and `save()` give the contents back. Editing commands are
  methods: `insert_char`, `delete_char`, `backspace`, `super_backspace`,
  `tab`, `delete_until_eol`, `kill_line`, `delete_word`, `combine_lines`,
  `toggle_selection`, `copy_selection`, `cut_selection`, `delete_selection`,
  `paste`, `find_and_replace_in_selection`, plus movement such as `up`,
  `down`, `left`, `right`, `jump_next_word`, `next_paragraph`, `page_down`,
  `go_to_line` and `jump_to`. A read-only buffer (`writable = False`) refuses
  edits and sets `message` to `"buffer is read-only"`.
- `wwedit.editor`: `process(buffer, input_type, ch, read_key, out)` applies one
  key event to a buffer and returns a `BufferAction` (`NOP`, `MOV`, `INSERT`,
  `INSERTNL`) telling how much of the screen needs redrawing. `read_key` is a
  callable returning `(InputType, char)` and is used by the interactive
  prompts: `search` (incremental search), `jump_to_line` and
  `minibuffer_input`. `copy_to_clipboard` runs the shell command in
  `Config.to_clipboard`, with `%s` replaced by the clipboard text.
- `wwedit.render`: returns ANSI escape strings for a buffer: `render_buffer`,
  `render_line`, `render_cursor_line`, `status_line`, and the cursor helpers
  `goto`, `clear_screen` and `clear_line`.
- `wwedit.keys`: `InputType` and the key helpers `ctrl`, `is_enter`,
  `is_backspace`, `is_tab`, `is_escape` and `is_csi`.
- `wwedit.config`: `Config` (spaces per tab, clipboard and compile commands,
  terminal size) with its `Flag` toggles `TABMODE` and `SHOWTRAILS`;
  `usage()` prints the usage line and exits; `is_digits`.
- `wwedit.fuzzy`: `fuzzy_score` and `fuzzy_find` for ranking names by a
  fuzzy query.
- `wwedit.fileio`: file helpers (`file_exists`, `create_file`, `load_file`,
  `write_file`, `is_dir`, `lsdir`, `gethome`, `get_realpath`, `get_basename`).
- `wwedit.arguments`: `parse_arguments` splits command-line words into
  `Argument`s; `parse_args` returns the single file name, raising
  `ArgumentError` for options or a second file.
- `wwedit.help`: the help buffer text (`help_text`) and the names of the
  window commands (`window_commands`, `is_window_command`).

## Install

Install the package into your environment with pip. The `test` extra pulls in
pytest for the test suite.

## Examples

Edit a buffer and feed it a key press:

```python
import io

from wwedit.buffer import Buffer
from wwedit.editor import BufferAction, process
from wwedit.keys import InputType, ctrl

buf = Buffer.from_text("hello world\n")
buf.jump_next_word()        # cursor after "hello"
buf.insert_char(",")
buf.text()                  # 'hello, world\n'

action = process(buf, InputType.CTRL, ctrl("e"), read_key=None, out=io.StringIO())
action is BufferAction.MOV  # True; cursor moved to the end of the line
```

Fuzzy-rank a list of names. A word only matches if the query is a subsequence
of it, and matches on word boundaries and in runs rank higher:

```python
from wwedit.fuzzy import fuzzy_find

fuzzy_find(["save-buffer", "switch-buffer", "exit"], "sb")
# ['save-buffer', 'switch-buffer']  (best match first)
```

Read the file name from a command line:

```python
from wwedit.arguments import parse_args, ArgumentError

parse_args(["ww", "notes.txt"])  # 'notes.txt'

try:
    parse_args(["ww", "--verbose"])
except ArgumentError as err:
    print(err)                   # options are unimplemented
```

## What it does not do

This package has no command to run and no terminal front end: it does not put
the terminal into raw mode, read or decode key presses, or run an editing
loop. There is no window holding several buffers, so the `C-x` bindings and
the window commands listed by `window_commands()` (such as `find-file`,
`switch-buffer` or `compile`) are names only; nothing here carries them out.
The caller supplies key events to `process` and writes the strings from
`wwedit.render` to the terminal.

## Tests

The test suite uses pytest and lives in `tests/`.