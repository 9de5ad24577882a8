"""Key codes and classification of terminal input characters."""

from __future__ import annotations

import enum


class InputType(enum.IntEnum):
    """Kind of key event read from the terminal."""

    CTRL = 0
    ALT = 1
    ARROW = 2
    SHIFT_ARROW = 3
    NORMAL = 4
    UNKNOWN = 5


def ctrl(letter: str) -> str:
    """Return the character produced by holding Control with ``letter``."""
    if len(letter) != 1 or not ("a" <= letter.lower() <= "z"):
        raise ValueError(f"not a control letter: {letter!r}")
    return chr(ord(letter.upper()) - ord("A") + 1)


CTRL_A = ctrl("a")
CTRL_B = ctrl("b")
CTRL_C = ctrl("c")
CTRL_D = ctrl("d")
CTRL_E = ctrl("e")
CTRL_F = ctrl("f")
CTRL_G = ctrl("g")
CTRL_H = ctrl("h")
CTRL_I = ctrl("i")
CTRL_J = ctrl("j")
CTRL_K = ctrl("k")
CTRL_L = ctrl("l")
CTRL_M = ctrl("m")
CTRL_N = ctrl("n")
CTRL_O = ctrl("o")
CTRL_P = ctrl("p")
CTRL_Q = ctrl("q")
CTRL_R = ctrl("r")
CTRL_S = ctrl("s")
CTRL_T = ctrl("t")
CTRL_U = ctrl("u")
CTRL_V = ctrl("v")
CTRL_W = ctrl("w")
CTRL_X = ctrl("x")
CTRL_Y = ctrl("y")
CTRL_Z = ctrl("z")

UP_ARROW = "A"
DOWN_ARROW = "B"
RIGHT_ARROW = "C"
LEFT_ARROW = "D"


def is_enter(ch: str) -> bool:
    """Whether ``ch`` is a newline."""
    return ch == "\n"


def is_backspace(ch: str) -> bool:
    """Whether ``ch`` is a backspace (BS or DEL)."""
    return ch in ("\x08", "\x7f")


def is_tab(ch: str) -> bool:
    """Whether ``ch`` is a tab."""
    return ch == "\t"


def is_escape(ch: str) -> bool:
    """Whether ``ch`` starts an escape sequence."""
    return ch == "\x1b"


def is_csi(ch: str) -> bool:
    """Whether ``ch`` introduces a control sequence after an escape."""
    return ch == "["