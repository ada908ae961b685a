# blockforge/utils/gitignore.py
import os
from typing import List

import pathspec

DEFAULT_IGNORES: List[str] = [".git/", "__pycache__/"]


def get_gitignore(root_path: str) -> pathspec.PathSpec:
    """
    Compile the .gitignore found at `root_path` or in the nearest parent
    directory into a PathSpec. '.git/' and '__pycache__/' are always ignored;
    a missing or unreadable .gitignore leaves just those defaults.
    """
    lines: List[str] = list(DEFAULT_IGNORES)

    cur = os.path.abspath(root_path or ".")
    while True:
        candidate = os.path.join(cur, ".gitignore")
        if os.path.isfile(candidate):
            try:
                with open(candidate, "r", encoding="utf-8", errors="ignore") as f:
                    lines.extend(f.read().splitlines())
            except OSError:
                pass
            break
        parent = os.path.dirname(cur)
        if parent == cur:
            break
        cur = parent

    return pathspec.PathSpec.from_lines("gitwildmatch", lines)
