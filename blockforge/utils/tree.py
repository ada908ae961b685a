# blockforge/utils/tree.py
import os
from typing import Iterable, Optional

import pathspec


def _generate_tree_string(
    path: str,
    spec: pathspec.PathSpec,
    written: Optional[Iterable[str]] = None,
) -> str:
    """
    Render the directory tree under `path`, skipping entries matched by `spec`.
    Files whose root-relative POSIX path is in `written` get a trailing ' *'.
    """
    marked = {os.path.normpath(p.replace("\\", "/")).replace(os.sep, "/") for p in (written or ())}
    tree_lines = []

    def walk(current_path: str, prefix: str = "") -> None:
        try:
            entries = os.listdir(current_path)
        except OSError:
            return
        dirs, files = [], []
        for item in entries:
            full_path = os.path.join(current_path, item)
            rel = os.path.relpath(full_path, path).replace(os.sep, "/")
            is_dir = os.path.isdir(full_path)
            if spec.match_file(rel + ("/" if is_dir else "")):
                continue
            (dirs if is_dir else files).append(item)

        items = sorted(dirs) + sorted(files)
        for i, item in enumerate(items):
            last = i == len(items) - 1
            full_path = os.path.join(current_path, item)
            rel = os.path.relpath(full_path, path).replace(os.sep, "/")
            suffix = " *" if rel in marked else ""
            tree_lines.append(f"{prefix}{'└── ' if last else '├── '}{item}{suffix}")
            if os.path.isdir(full_path):
                walk(full_path, prefix + ("    " if last else "│   "))

    walk(path)
    return "\n".join(tree_lines)
