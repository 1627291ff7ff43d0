from __future__ import annotations

"""Line matching for minigrep.

Everything here works on in-memory text only: no file access, no logging.
The returned lines are substrings of ``contents`` and are never case-folded.
Python cannot hand out views into a ``str``, so each match is a copy of the
source line; callers may rely on ``line in contents`` for every result.
"""

import re
from typing import Iterator

__all__ = [
    "iter_lines",
    "search",
    "search_case_sensitive",
    "search_case_insensitive",
]

_LINE_BREAK = re.compile(r"\r\n|\r|\n")


def iter_lines(contents: str) -> Iterator[str]:
    """Yield the lines of ``contents`` without their terminators.

    ``\\n``, ``\\r\\n`` and ``\\r`` all end a line. A final terminator does not
    produce a trailing empty line, and empty contents produce no lines.
    """

    start = 0
    for brk in _LINE_BREAK.finditer(contents):
        yield contents[start:brk.start()]
        start = brk.end()
    if start < len(contents):
        yield contents[start:]


def search_case_sensitive(query: str, contents: str) -> list[str]:
    return [line for line in iter_lines(contents) if query in line]


def search_case_insensitive(query: str, contents: str) -> list[str]:
    folded = query.lower()
    return [line for line in iter_lines(contents) if folded in line.lower()]


def search(query: str, contents: str, case_insensitive: bool = False) -> list[str]:
    """Return every line of ``contents`` that contains ``query``.

    Each matching line appears once, in file order, however many times the
    query occurs in it. An empty query matches every line.
    """

    if case_insensitive:
        return search_case_insensitive(query, contents)
    return search_case_sensitive(query, contents)
