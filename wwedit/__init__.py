"""Editing model, key dispatch and ANSI rendering for a small Emacs-style text editor."""

__version__ = "1.0.0"

__all__ = [
    "arguments",
    "buffer",
    "config",
    "editor",
    "fileio",
    "fuzzy",
    "help",
    "keys",
    "render",
]