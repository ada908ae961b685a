# blockforge/utils/__init__.py
from .gitignore import get_gitignore
from .text import split_lines
from .tree import _generate_tree_string

__all__ = [
    "get_gitignore",
    "split_lines",
    "_generate_tree_string",
]
