from typing import Optional

from .base import BlockforgeError


class CommitError(BlockforgeError):
    """Writing an extracted file to disk failed."""

    def __init__(self, message: str, relative_path: str, full_path: Optional[str] = None):
        super().__init__(message)
        self.relative_path = relative_path
        self.full_path = full_path
