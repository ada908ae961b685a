# blockforge/extract/markers.py
"""
Line-level predicates used by the block scanner.

All marker checks work on the trimmed line: surrounding whitespace is ignored,
but the marker text must match exactly.
"""
from __future__ import annotations

import re

BEGIN_MARKER = "+++BEGIN"
END_MARKER = "+++END"
FENCE = "```"

# Applied to the trimmed line: literal 'Path:' prefix, optional spaces, a value.
_PATH_LINE_RE = re.compile(r"^Path:\s*(?P<path>.+)$")


def is_begin_marker(line: str) -> bool:
    return line.strip() == BEGIN_MARKER


def is_end_marker(line: str) -> bool:
    return line.strip() == END_MARKER


def match_path_line(line: str) -> str | None:
    """
    Return the raw captured path value of a 'Path: <value>' line, or None when
    the line is not a path line. The value is returned untrimmed so callers can
    tell a missing path line from an empty path.
    """
    m = _PATH_LINE_RE.match(line.strip())
    if not m:
        return None
    return m.group("path")


def is_fence_line(line: str) -> bool:
    """
    True for any line whose content, after leading whitespace, starts with three
    backticks. Whatever follows ('```python', '```', '``` trailing') is ignored.
    """
    return line.lstrip().startswith(FENCE)
