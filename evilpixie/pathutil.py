"""Small helpers for paths, case folding and splitting command lines."""

from __future__ import annotations

import re

_SEPARATORS = "/\\:"
_ARG_PATTERN = re.compile(
    r"[ \t\n\v\f\r]*(?:(?P<comment>\#)|(?P<quote>[\"'])(?P<quoted>.*?)(?:(?P=quote)|\Z)"
    r"|(?P<bare>[^ \t\n\v\f\r]+))",
    re.DOTALL,
)
_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)


def _last_separator(fullpath: str) -> int:
    return max(fullpath.rfind(sep) for sep in _SEPARATORS)


def base_name(fullpath: str) -> str:
    """Return the file part of a path, e.g. "/foo/bar.txt" -> "bar.txt"."""
    pos = _last_separator(fullpath)
    if pos < 0:
        return fullpath
    return fullpath[pos + 1:]


def dir_name(fullpath: str) -> str:
    """Return the directory part of a path, or "." if there is none."""
    pos = _last_separator(fullpath)
    if pos < 0:
        return "."
    return fullpath[:pos]


def ext_name(fullpath: str) -> str:
    """Return everything from the first '.' of the file part, or ""."""
    start = max(_last_separator(fullpath), 0)
    pos = fullpath.find(".", start)
    if pos < 0:
        return ""
    return fullpath[pos:]


def to_lower(s: str) -> str:
    """Lower-case ASCII letters, leaving everything else untouched."""
    return s.translate(_ASCII_LOWER)


def split_line(line: str) -> list[str]:
    """Split a line into whitespace-separated arguments.

    Arguments starting with a single or double quote run to the matching
    quote (or end of line). A '#' at the start of an argument begins a
    comment that runs to the end of the line.
    """
    args: list[str] = []
    pos = 0
    while True:
        match = _ARG_PATTERN.match(line, pos)
        if match is None or match.group("comment"):
            break
        if match.group("quote"):
            args.append(match.group("quoted"))
        else:
            args.append(match.group("bare"))
        pos = match.end()
    return args


def join_path(a: str, b: str) -> str:
    """Join two path components with a forward slash."""
    return a + "/" + b