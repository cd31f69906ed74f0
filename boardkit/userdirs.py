"""Per-user configuration and data directories, plus small platform helpers."""

from __future__ import annotations

import os
import stat
import sys
from enum import Enum

APP_NAME = "OpenBoardView"
APP_NAME_LOWER = APP_NAME.lower()
APP_VERSION = "R7.4"
APP_LICENSE = "MIT"

_POSIX_FALLBACK = "./"
_WINDOWS_FALLBACK = ".\\"


class UserDir(Enum):
    """Kind of per-user directory."""

    CONFIG = "config"
    DATA = "data"


def get_env_var(name: str) -> str:
    """Value of the environment variable ``name``, or an empty string if unset."""
    return os.environ.get(name, "")


def create_dir(path: str) -> bool:
    """Create ``path`` if missing; True if it now exists and is a directory."""
    try:
        st = os.stat(path)
    except OSError:
        try:
            os.mkdir(path, 0o700)
        except OSError:
            pass
        try:
            st = os.stat(path)
        except OSError:
            return False
    return stat.S_ISDIR(st.st_mode)


def create_dirs(path: str) -> bool:
    """Create every directory prefix of ``path`` that ends with a slash.

    A trailing component not followed by a slash is not created; a leading
    slash is not treated as a directory to create.
    """
    pos = path.find("/", 1)
    while pos != -1:
        if not create_dir(path[: pos + 1]):
            return False
        pos = path.find("/", pos + 1)
    return True


def _posix_user_dir(userdir: UserDir) -> str:
    env_name = "XDG_CONFIG_HOME" if userdir is UserDir.CONFIG else "XDG_DATA_HOME"
    base = get_env_var(env_name)
    if not base:
        home = get_env_var("HOME")
        if home:
            suffix = "/.config" if userdir is UserDir.CONFIG else "/.local/share"
            base = home + suffix
    if base:
        path = f"{base}/{APP_NAME}/"
        if create_dirs(path):
            return path
    return _POSIX_FALLBACK


def _windows_user_dir(userdir: UserDir) -> str:
    env_name = "APPDATA" if userdir is UserDir.CONFIG else "LOCALAPPDATA"
    base = get_env_var(env_name)
    if not base:
        return _WINDOWS_FALLBACK
    path = f"{base}\\{APP_NAME}\\"
    try:
        os.mkdir(path)
    except FileExistsError:
        pass
    except OSError:
        return _WINDOWS_FALLBACK
    return path


def get_user_dir(userdir: UserDir) -> str:
    """Directory for per-user config or data, created if needed.

    Falls back to the current directory when no suitable location can be used.
    """
    if sys.platform == "win32":
        return _windows_user_dir(userdir)
    return _posix_user_dir(userdir)


def find_insensitive(text: str, pattern: str) -> int:
    """Index of the first case-insensitive occurrence of ``pattern`` in ``text``, or -1.

    An empty pattern matches at index 0.
    """
    if not pattern:
        return 0
    return text.upper().find(pattern.upper()) if len(text.upper()) == len(text) else next(
        (
            start
            for start in range(len(text) - len(pattern) + 1)
            if all(a.upper() == b.upper() for a, b in zip(text[start:], pattern))
        ),
        -1,
    )