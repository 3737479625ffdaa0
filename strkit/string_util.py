"""String helpers: erasing, replacing, trimming, ASCII case handling,
prefix/suffix tests, splitting, joining and wildcard matching."""

from __future__ import annotations

import enum
import itertools
import string
from typing import Iterable, List, Optional

__all__ = [
    "CaseMode",
    "erase_chars",
    "replace_string",
    "trim_string",
    "trim_leading_string",
    "trim_tailing_string",
    "contains_only_chars",
    "is_string_ascii_only",
    "ascii_string_to_lower",
    "ascii_string_to_upper",
    "ascii_string_compare_case_insensitive",
    "ascii_string_equal_case_insensitive",
    "starts_with",
    "ends_with",
    "split_string",
    "join_string",
    "match_pattern",
]

_TO_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)
_TO_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)


class CaseMode(enum.Enum):
    """How letter case is treated when comparing."""

    SENSITIVE = "sensitive"
    ASCII_INSENSITIVE = "ascii_insensitive"


def erase_chars(text: str, chars: str) -> str:
    """Return `text` with every character found in `chars` removed."""
    removed = set(chars)
    return "".join(ch for ch in text if ch not in removed)


def replace_string(
    text: str,
    find_with: str,
    replace_with: str,
    pos: Optional[int] = 0,
    replace_all: bool = True,
) -> str:
    """Replace occurrences of `find_with` in `text`, searching from `pos`.

    If `pos` is None, or `pos` plus the length of `find_with` exceeds the
    length of `text`, the text is returned unchanged. When `replace_all` is
    false only the first occurrence is replaced.
    """
    if not find_with:
        raise ValueError("find_with must not be empty")
    if pos is None or pos + len(find_with) > len(text):
        return text
    if pos < 0:
        raise ValueError("pos must not be negative")

    head, tail = text[:pos], text[pos:]
    count = -1 if replace_all else 1
    return head + tail.replace(find_with, replace_with, count)


def trim_string(text: str, chars: str) -> str:
    """Strip characters in `chars` from both ends of `text`."""
    return text.strip(chars)


def trim_leading_string(text: str, chars: str) -> str:
    """Strip characters in `chars` from the start of `text`."""
    return text.lstrip(chars)


def trim_tailing_string(text: str, chars: str) -> str:
    """Strip characters in `chars` from the end of `text`."""
    return text.rstrip(chars)


def contains_only_chars(text: str, chars: str) -> bool:
    """True if `text` is empty or consists only of characters in `chars`."""
    allowed = set(chars)
    return all(ch in allowed for ch in text)


def is_string_ascii_only(text: str) -> bool:
    """True if every character of `text` lies in the ASCII range."""
    return text.isascii()


def ascii_string_to_lower(text: str) -> str:
    """Lower-case the ASCII letters of `text`, leaving all else intact."""
    return text.translate(_TO_LOWER)


def ascii_string_to_upper(text: str) -> str:
    """Upper-case the ASCII letters of `text`, leaving all else intact."""
    return text.translate(_TO_UPPER)


def ascii_string_compare_case_insensitive(lhs: str, rhs: str) -> int:
    """Compare ignoring ASCII case; return -1, 0 or 1."""
    left = ascii_string_to_lower(lhs)
    right = ascii_string_to_lower(rhs)
    if left < right:
        return -1
    if left > right:
        return 1
    return 0


def ascii_string_equal_case_insensitive(lhs: str, rhs: str) -> bool:
    """True if the strings are equal ignoring ASCII case."""
    return len(lhs) == len(rhs) and ascii_string_compare_case_insensitive(lhs, rhs) == 0


def _check_mode(mode: CaseMode) -> None:
    if not isinstance(mode, CaseMode):
        raise ValueError(f"unknown case mode: {mode!r}")


def starts_with(text: str, token: str, mode: CaseMode = CaseMode.SENSITIVE) -> bool:
    """True if `text` starts with `token`."""
    _check_mode(mode)
    if len(text) < len(token):
        return False
    if mode is CaseMode.SENSITIVE:
        return text.startswith(token)
    return ascii_string_to_lower(text[: len(token)]) == ascii_string_to_lower(token)


def ends_with(text: str, token: str, mode: CaseMode = CaseMode.SENSITIVE) -> bool:
    """True if `text` ends with `token`."""
    _check_mode(mode)
    if len(text) < len(token):
        return False
    if mode is CaseMode.SENSITIVE:
        return text.endswith(token)
    tail = text[len(text) - len(token):]
    return ascii_string_to_lower(tail) == ascii_string_to_lower(token)


def split_string(text: str, delimiters: str) -> List[str]:
    """Split `text` on any character in `delimiters`, dropping empty fields."""
    delims = set(delimiters)
    return [
        "".join(group)
        for is_delim, group in itertools.groupby(text, key=lambda ch: ch in delims)
        if not is_delim
    ]


def join_string(tokens: Iterable[str], sep: str) -> str:
    """Join `tokens` with `sep` between each pair."""
    return sep.join(tokens)


def match_pattern(text: str, pattern: str) -> bool:
    """Case-sensitive wildcard match.

    `?` matches exactly one character other than `.`; `*` matches any
    sequence of zero or more characters.
    """
    text_start = 0
    pat_start = 0
    on_star = False

    while True:
        s, p = text_start, pat_start
        restart = False
        while s < len(text):
            pc = pattern[p] if p < len(pattern) else ""
            if pc == "*":
                on_star = True
                text_start = s
                pat_start = p
                while pat_start < len(pattern) and pattern[pat_start] == "*":
                    pat_start += 1
                if pat_start == len(pattern):
                    return True
                restart = True
                break
            mismatch = text[s] == "." if pc == "?" else text[s] != pc
            if mismatch:
                if not on_star:
                    return False
                text_start += 1
                restart = True
                break
            s += 1
            p += 1
        if restart:
            continue
        while p < len(pattern) and pattern[p] == "*":
            p += 1
        return p == len(pattern)