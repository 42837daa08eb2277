"""Shared text-scanning helpers for the heuristic extractors."""

from __future__ import annotations

import re
from typing import List

_QUOTES = {"'", '"', "`"}
_OPENERS = "{[("
_CLOSERS = "}])"

_WHITESPACE_RUN = re.compile(r"\s+")
_IDENTIFIER_TAIL = re.compile(r"[\w$]")


def strip_comments(text: str) -> str:
    """Blank out ``//`` and ``/* */`` comments, leaving string literals intact."""
    out: List[str] = []
    quote: str | None = None
    index = 0
    length = len(text)
    while index < length:
        char = text[index]
        if quote is not None:
            out.append(char)
            if char == "\\" and index + 1 < length:
                out.append(text[index + 1])
                index += 2
                continue
            if char == quote:
                quote = None
            index += 1
            continue
        if char in _QUOTES:
            quote = char
            out.append(char)
            index += 1
            continue
        if text.startswith("//", index):
            end = text.find("\n", index)
            index = length if end == -1 else end
            continue
        if text.startswith("/*", index):
            end = text.find("*/", index + 2)
            index = length if end == -1 else end + 2
            out.append(" ")
            continue
        out.append(char)
        index += 1
    return "".join(out)


def find_matching(text: str, open_index: int, opener: str = "{", closer: str = "}") -> int:
    """Return the index of the delimiter closing ``text[open_index]``, or -1.

    Delimiters inside quoted strings are not counted.
    """
    depth = 0
    quote: str | None = None
    index = open_index
    length = len(text)
    while index < length:
        char = text[index]
        if quote is not None:
            if char == "\\":
                index += 2
                continue
            if char == quote:
                quote = None
        elif char in _QUOTES:
            quote = char
        elif char == opener:
            depth += 1
        elif char == closer:
            depth -= 1
            if depth == 0:
                return index
        index += 1
    return -1


def split_top_level(text: str, separators: str = ",", *, angle: bool = False) -> List[str]:
    """Split ``text`` on separators that sit outside any brackets or strings.

    With ``angle`` set, type arguments (``Name<...>``) also nest. A ``<`` that
    does not follow an identifier is a comparison and the ``>`` of an arrow
    (``=>``) never closes a level.
    """
    parts: List[str] = []
    depth = 0
    angles = 0
    quote: str | None = None
    start = 0
    index = 0
    length = len(text)
    while index < length:
        char = text[index]
        if quote is not None:
            if char == "\\":
                index += 2
                continue
            if char == quote:
                quote = None
        elif char in _QUOTES:
            quote = char
        elif char in _OPENERS:
            depth += 1
        elif char in _CLOSERS:
            depth = max(depth - 1, 0)
        elif angle and char == "<" and index > 0 and _IDENTIFIER_TAIL.match(text, index - 1):
            angles += 1
        elif angle and char == ">" and angles and text[index - 1 : index] != "=":
            angles -= 1
        elif depth == 0 and angles == 0 and char in separators:
            parts.append(text[start:index])
            start = index + 1
        index += 1
    parts.append(text[start:])
    return [part.strip() for part in parts if part.strip()]


def object_body(text: str, open_index: int) -> str | None:
    """Return the content between ``text[open_index]`` ('{') and its partner."""
    close = find_matching(text, open_index)
    if close == -1:
        return None
    return text[open_index + 1 : close]


def collapse_whitespace(value: str) -> str:
    return _WHITESPACE_RUN.sub(" ", value).strip()


def count_lines(region: str) -> int:
    """Number of lines in a region; an empty region has none."""
    if not region:
        return 0
    return region.count("\n") + 1


def excerpt(text: str, limit: int) -> str:
    """Truncate ``text`` to ``limit`` characters, marking any cut with an ellipsis."""
    limit = max(limit, 1)
    if len(text) <= limit:
        return text
    return text[:limit] + "…"


__all__ = [
    "collapse_whitespace",
    "count_lines",
    "excerpt",
    "find_matching",
    "object_body",
    "split_top_level",
    "strip_comments",
]
