"""File system helpers used by the editor."""

from __future__ import annotations

import errno
import os
import pwd
import stat

_ENCODING = "utf-8"
_ERRORS = "surrogateescape"
_HOME_MAX = 1024


def file_exists(path: str) -> bool:
    """Whether ``path`` can be opened for reading."""
    try:
        with open(path, "rb"):
            return True
    except OSError:
        return False


def create_file(path: str, force_overwrite: bool) -> None:
    """Create an empty file, truncating an existing one only when forced."""
    if not force_overwrite and file_exists(path):
        return
    with open(path, "w", encoding=_ENCODING):
        pass


def write_file(path: str, content: str) -> None:
    """Replace the contents of ``path`` with ``content``."""
    with open(path, "w", encoding=_ENCODING, errors=_ERRORS, newline="") as f:
        f.write(content)


def is_dir(path: str) -> bool:
    """Whether ``path`` itself (not a link target) is a directory."""
    try:
        return stat.S_ISDIR(os.lstat(path).st_mode)
    except OSError:
        return False


def load_file(path: str) -> str:
    """Return the whole contents of ``path``, line endings untouched."""
    with open(path, "r", encoding=_ENCODING, errors=_ERRORS, newline="") as f:
        return f.read()


def lsdir(directory: str) -> list[str]:
    """List every entry of ``directory``, including ``.`` and ``..``.

    An unreadable directory yields an empty list.
    """
    try:
        entries = os.listdir(directory)
    except OSError:
        return []
    return [".", "..", *entries]


def _checked_home(home: str) -> str:
    if len(home) >= _HOME_MAX:
        raise OSError(errno.ENAMETOOLONG, os.strerror(errno.ENAMETOOLONG), home)
    return home


def gethome() -> str:
    """Return the user's home directory from ``HOME`` or the password database."""
    home = os.environ.get("HOME")
    if home:
        return _checked_home(home)
    try:
        pw_dir = pwd.getpwuid(os.getuid()).pw_dir
    except KeyError:
        pw_dir = ""
    if pw_dir:
        return _checked_home(pw_dir)
    raise FileNotFoundError(errno.ENOENT, "no home directory found")


def get_realpath(path: str) -> str | None:
    """Resolve ``path`` (with a leading ``~``) to an existing absolute path."""
    if not path:
        return None
    if path.startswith("~"):
        try:
            home = pwd.getpwuid(os.getuid()).pw_dir
        except KeyError:
            return None
        path = home + path[1:]
    try:
        return os.path.realpath(path, strict=True)
    except OSError:
        return None


def get_basename(name: str) -> str:
    """Return the part after the last ``/``, ignoring a trailing one."""
    idx = name.rfind("/", 0, max(len(name) - 1, 0))
    return name[idx + 1:] if idx >= 0 else name