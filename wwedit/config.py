"""Global editor settings and small helpers shared across the editor."""

from __future__ import annotations

import enum
import sys
from dataclasses import dataclass, field

DEFAULT_SPACE_AMT = 4

USAGE = "Usage: ww [OPTIONS...] <filepath>"


class Flag(enum.Flag):
    """Toggleable editor modes."""

    NONE = 0
    TABMODE = enum.auto()
    SHOWTRAILS = enum.auto()


@dataclass
class Config:
    """Editor-wide settings."""

    flags: Flag = Flag.NONE
    config_filepath: str = ""
    space_amt: int = DEFAULT_SPACE_AMT
    compile_command: str | None = None
    to_clipboard: str | None = None
    term_width: int = 0
    term_height: int = 0
    _extra: dict = field(default_factory=dict, repr=False)

    def has(self, flag: Flag) -> bool:
        """Whether every bit of ``flag`` is set."""
        return (self.flags & flag) == flag and flag != Flag.NONE

    def toggle(self, flag: Flag) -> bool:
        """Flip ``flag`` and return whether it is now set."""
        self.flags ^= flag
        return self.has(flag)


def usage() -> None:
    """Print the usage line and exit successfully."""
    print(USAGE)
    sys.stdout.flush()
    raise SystemExit(0)


def is_digits(s: str) -> bool:
    """Whether ``s`` is a non-empty run of ASCII digits."""
    return bool(s) and all(c in "0123456789" for c in s)