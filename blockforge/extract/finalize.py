# blockforge/extract/finalize.py
from __future__ import annotations

from ..errors.extract import EmptyBlock, EmptyCode, EmptyPath, MissingPathLine
from ..models.blocks import Block, ExtractedFile
from .markers import is_fence_line, match_path_line


def finalize_block(block: Block) -> ExtractedFile:
    """
    Turn the raw lines of a closed block into an ExtractedFile.

    Errors are reported at the block's closing marker line, which is where the
    problem becomes detectable.

    Rules:
      - Blank lines are ignored everywhere and never reach the output.
      - The first non-blank line must be 'Path: <relative path>'.
      - Fence lines (leading '```' after indentation) are dropped.
      - At least one code line must remain.
    """
    where = block.end_line
    non_blank = block.non_blank()
    if not non_blank:
        raise EmptyBlock(where)

    path_line, rest = non_blank[0], non_blank[1:]
    raw_path = match_path_line(path_line.text)
    if raw_path is None:
        raise MissingPathLine(
            where,
            f"expected 'Path: <relative path>' on line {path_line.number}, "
            f"got {path_line.stripped!r}",
        )
    relative_path = raw_path.strip()
    if not relative_path:
        raise EmptyPath(where, f"'Path:' line {path_line.number} has an empty path")

    code_lines = tuple(ln.text for ln in rest if not is_fence_line(ln.text))
    if not code_lines:
        raise EmptyCode(where, f"block for '{relative_path}' has no code lines")

    return ExtractedFile(
        relative_path=relative_path,
        code_lines=code_lines,
        start_line=block.start_line,
        end_line=block.end_line,
    )
