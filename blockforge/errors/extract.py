# blockforge/errors/extract.py
from typing import Optional

from .base import BlockforgeError


class ExtractError(BlockforgeError):
    """
    A structural or content problem in the transcript.

    `line_number` is the 1-based line where the problem was detected, or None
    when it was only detectable at end of input. `kind` is the subclass name,
    handy for callers that switch on the error without importing every class.
    """

    default_message = "malformed block"

    def __init__(self, line_number: Optional[int] = None, message: Optional[str] = None):
        self.line_number = line_number
        self.message = message or self.default_message
        super().__init__(str(self))

    @property
    def kind(self) -> str:
        return type(self).__name__

    def __str__(self) -> str:
        where = f"line {self.line_number}" if self.line_number is not None else "end of input"
        return f"{self.kind} at {where}: {self.message}"


class UnexpectedBegin(ExtractError):
    default_message = "'+++BEGIN' found while a block is already open"


class UnexpectedEnd(ExtractError):
    default_message = "'+++END' found without a matching '+++BEGIN'"


class UnclosedBlock(ExtractError):
    default_message = "block is never closed with '+++END'"

    def __init__(self, start_line: int, message: Optional[str] = None):
        self.start_line = start_line
        super().__init__(
            None,
            message or f"block opened on line {start_line} is never closed with '+++END'",
        )


class EmptyBlock(ExtractError):
    default_message = "block contains no non-blank lines"


class MissingPathLine(ExtractError):
    default_message = "first non-blank line of the block is not a 'Path: <relative path>' line"


class EmptyPath(ExtractError):
    default_message = "'Path:' line has an empty path"


class EmptyCode(ExtractError):
    default_message = "block has no code lines after its 'Path:' line"
