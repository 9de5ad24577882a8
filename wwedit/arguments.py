"""Command-line argument splitting."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence


class ArgumentError(Exception):
    """Raised when the command line cannot be accepted."""


@dataclass(frozen=True)
class Argument:
    """One command-line word, split into hyphen count, name and ``=`` value."""

    name: str
    hyphens: int = 0
    value: str | None = None

    @property
    def is_option(self) -> bool:
        return self.hyphens > 0


def _parse_one(raw: str) -> Argument:
    if raw.startswith("--"):
        hyphens, rest = 2, raw[2:]
    elif raw.startswith("-"):
        hyphens, rest = 1, raw[1:]
    else:
        hyphens, rest = 0, raw
    name, sep, value = rest.partition("=")
    return Argument(name=name, hyphens=hyphens, value=value if sep else None)


def parse_arguments(argv: Sequence[str], skip_first: bool) -> list[Argument]:
    """Split each word of ``argv`` into an :class:`Argument`."""
    words = argv[1:] if skip_first else argv
    return [_parse_one(word) for word in words]


def parse_args(argv: Sequence[str]) -> str | None:
    """Return the single filename given after the program name, if any."""
    filename = None
    for arg in parse_arguments(argv, True):
        if arg.is_option:
            raise ArgumentError("options are unimplemented")
        if filename is not None:
            raise ArgumentError("only one filename is supported")
        filename = arg.name
    return filename