"""File and string helpers."""

from __future__ import annotations

import os


def path_is_directory(path: str) -> bool:
    """True if ``path`` names an existing directory."""
    return os.path.isdir(path)


def path_is_regular(path: str) -> bool:
    """True if ``path`` names an existing regular file."""
    return os.path.isfile(path)


def file_as_buffer(filename: str) -> bytes:
    """Read a whole file into memory.

    Raises OSError if the path is not a regular file or cannot be read.
    """
    if not path_is_regular(filename):
        raise OSError(f"Error opening {filename}: not a regular file")
    with open(filename, "rb") as handle:
        return handle.read()


def check_fileext(filename: str, fileext: str) -> bool:
    """Compare the lower-cased extension of ``filename`` with ``fileext``.

    ``fileext`` must be lower case and include the leading dot.
    """
    dot = filename.rfind(".")
    ext = "" if dot == -1 else filename[dot:]
    return ext.lower() == fileext


def find_str_in_buf(needle: str | bytes, buf: bytes) -> bool:
    """True if ``needle`` occurs in ``buf``; an empty needle matches any non-empty buffer."""
    if isinstance(needle, str):
        needle = needle.encode()
    if not needle:
        return len(buf) > 0
    return bytes(needle) in bytes(buf)


def compare_string_insensitive(first: str, second: str) -> bool:
    """Case-insensitive, character-by-character string equality."""
    return len(first) == len(second) and all(
        a.lower() == b.lower() for a, b in zip(first, second)
    )


def lookup_file_insensitive(path: str, filename: str) -> str:
    """Find ``filename`` in directory ``path`` ignoring case.

    Returns ``path`` joined (by concatenation) with the matching entry name,
    or an empty string if nothing matches or the directory cannot be read.
    """
    directory = path or "./"
    try:
        entries = [".", ".."] + os.listdir(directory)
    except OSError:
        return ""
    found = ""
    for entry in entries:
        if compare_string_insensitive(entry, filename):
            found = path + entry
    return found


def split_string(text: str) -> list[str]:
    """Split on runs of whitespace."""
    return text.split()