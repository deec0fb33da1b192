"""ANSI text utilities - measuring, fitting and aligning styled strings."""

from __future__ import annotations

import re

# CSI sequences (SGR, cursor, erase) and OSC sequences (hyperlinks)
_ANSI_ESCAPE = re.compile(r'\x1b\[[0-9;?<]*[A-Za-z~]|\x1b\][^\x07\x1b]*(?:\x07|\x1b\\)')


def strip_ansi(s: str) -> str:
    """Remove all escape sequences."""
    return _ANSI_ESCAPE.sub('', s)


def visible_len(s: str) -> int:
    """Get visible length of string (excluding ANSI escape codes)."""
    return len(strip_ansi(s))


def truncate(s: str, max_width: int, reset: bool = True) -> str:
    """
    Truncate an ANSI-escaped string to max visible width.

    Escape sequences are kept whole and do not count towards the width.

    Args:
        s: String to truncate
        max_width: Maximum visible width
        reset: If True, append reset sequence to prevent color bleed
    """
    if max_width <= 0:
        return ""

    result: list[str] = []
    vis_len = 0
    pos = 0

    while pos < len(s) and vis_len < max_width:
        match = _ANSI_ESCAPE.match(s, pos)
        if match:
            result.append(match.group())
            pos = match.end()
        else:
            result.append(s[pos])
            vis_len += 1
            pos += 1

    output = ''.join(result)
    if reset and pos < len(s):
        output += '\x1b[0m'
    return output


def center(text: str, width: int) -> str:
    """
    Center plain ``text`` in exactly ``width`` cells.

    Odd leftover space goes to the right. Text wider than ``width`` is cut.
    """
    if width <= 0:
        return ""
    text = text[:width]
    left = (width - len(text)) // 2
    return ' ' * left + text + ' ' * (width - len(text) - left)


def footer_line(width: int, left: str, right: str) -> str:
    """
    Put ``left`` and ``right`` at opposite edges of a ``width`` wide line.

    Falls back to a single space separator when they do not fit.
    """
    gap = width - visible_len(left) - visible_len(right)
    if width <= 0 or gap < 1:
        return f"{left} {right}"
    return left + ' ' * gap + right
