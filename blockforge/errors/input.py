from .base import BlockforgeError


class InputError(BlockforgeError):
    """The transcript file is missing or unreadable."""
