from .base import BlockforgeError
from .commit import CommitError
from .config import ConfigError
from .extract import (
    EmptyBlock,
    EmptyCode,
    EmptyPath,
    ExtractError,
    MissingPathLine,
    UnclosedBlock,
    UnexpectedBegin,
    UnexpectedEnd,
)
from .input import InputError

__all__ = [
    "BlockforgeError",
    "CommitError",
    "ConfigError",
    "InputError",
    "ExtractError",
    "UnexpectedBegin",
    "UnexpectedEnd",
    "UnclosedBlock",
    "EmptyBlock",
    "MissingPathLine",
    "EmptyPath",
    "EmptyCode",
]
