from typing import List

_BOM = "\ufeff"


def split_lines(content: str) -> List[str]:
    """
    Split transcript text into lines without their terminators.

    Only '\\n', '\\r\\n' and a lone '\\r' end a line (the same rule as reading a
    file in universal-newline mode); form feeds and other Unicode separators
    stay inside the line. A leading BOM is dropped.
    """
    if not content:
        return []
    if content.startswith(_BOM):
        content = content[1:]
    lines = content.replace("\r\n", "\n").replace("\r", "\n").split("\n")
    # A trailing newline terminates the last line; it does not open a new one.
    if lines and lines[-1] == "":
        lines.pop()
    return lines
